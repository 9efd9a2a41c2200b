"""
CGI 2025, Chapter 1: IRPP (Art. 1 to 101)

Keyword table. The first article of each list is the primary source.
"""

from types import MappingProxyType

KEYWORDS = MappingProxyType({
    "catégories de revenus": ["Art. 1"],
    "catégories revenus": ["Art. 1"],
    "sept catégories": ["Art. 1"],
    "7 catégories": ["Art. 1"],
    "composition du revenu": ["Art. 1"],
    "quelles catégories": ["Art. 1"],
    "revenu net global": ["Art. 1", "Art. 11", "Art. 66"],

    "personnes imposables": ["Art. 2"],
    "qui est imposable": ["Art. 2"],
    "domicile fiscal": ["Art. 2", "Art. 8"],
    "résidence habituelle": ["Art. 2"],
    "résidence fiscale": ["Art. 2"],
    "vingt-quatre mois": ["Art. 2"],
    "24 mois": ["Art. 2"],
    "perte de résidence": ["Art. 2"],
    "durée absence": ["Art. 2"],
    "absence continue": ["Art. 2"],

    "exonération irpp": ["Art. 3", "Art. 38"],
    "affranchis de l'impôt": ["Art. 3"],
    "qui est exonéré": ["Art. 3"],
    "minimum imposable": ["Art. 3", "Art. 95"],
    "diplomates": ["Art. 3"],

    "chef de famille": ["Art. 4"],
    "foyer fiscal": ["Art. 4", "Art. 91"],
    "imposition distincte": ["Art. 4"],
    "femme mariée": ["Art. 4"],
    "enfants à charge": ["Art. 93", "Art. 91", "Art. 4"],

    "associés": ["Art. 6"],
    "sociétés de personnes": ["Art. 6"],
    "snc": ["Art. 6"],
    "gie": ["Art. 6"],

    "lieu d'imposition": ["Art. 8"],
    "lieu imposition": ["Art. 8"],

    "revenus fonciers": ["Art. 12", "Art. 1"],
    "propriétés bâties": ["Art. 12"],
    "location": ["Art. 12", "Art. 13 bis"],
    "loyer": ["Art. 12", "Art. 13 bis"],
    "revenu net foncier": ["Art. 13"],
    "charges foncières": ["Art. 13 quater"],
    "déduction forfaitaire 30%": ["Art. 13 quater"],

    "bica": ["Art. 14"],
    "bénéfices industriels": ["Art. 14", "Art. 1"],
    "bénéfices commerciaux": ["Art. 14", "Art. 1"],
    "bénéfices artisanaux": ["Art. 14"],
    "location meublée": ["Art. 15"],
    "fonds de commerce": ["Art. 15", "Art. 63"],

    "déclaration d'existence": ["Art. 15 bis"],
    "début d'activité": ["Art. 15 bis"],

    "régime du forfait": ["Art. 26"],
    "forfait": ["Art. 26", "Art. 28"],
    "100 000 000": ["Art. 26", "Art. 30"],
    "100 millions": ["Art. 26", "Art. 30"],
    "seuil forfait": ["Art. 26"],
    "exclusions forfait": ["Art. 26"],
    "smt": ["Art. 26", "Art. 28"],

    "déclaration 294": ["Art. 26", "Art. 28"],
    "déclaration n°294": ["Art. 26", "Art. 28"],
    "déclaration no 294": ["Art. 26", "Art. 28"],
    "formulaire 294": ["Art. 26", "Art. 28"],
    "imprimé 294": ["Art. 26", "Art. 28"],
    "294": ["Art. 26", "Art. 28"],
    "déclaration forfait contenu": ["Art. 28", "Art. 26"],
    "états financiers forfait": ["Art. 28", "Art. 26"],
    "déclaration spéciale forfait": ["Art. 28"],

    "régime du réel": ["Art. 30"],
    "régime réel": ["Art. 30"],
    "bénéfice réel": ["Art. 30", "Art. 17"],
    "2 milliards": ["Art. 30"],
    "grandes entreprises": ["Art. 30"],

    "états financiers": ["Art. 31"],
    "dsf": ["Art. 31"],
    "ohada": ["Art. 31", "Art. 28"],
    "bilan": ["Art. 31"],
    "compte de résultat": ["Art. 31"],

    "rectification d'office": ["Art. 33"],
    "rectification office": ["Art. 33"],
    "rectifier d'office": ["Art. 33"],
    "documents comptables insuffisants": ["Art. 33"],
    "livres registres insuffisants": ["Art. 33"],
    "résultats imprécis": ["Art. 33"],
    "procéder rectification": ["Art. 33"],

    "taxation d'office": ["Art. 86", "Art. 33"],
    "taxation office": ["Art. 86", "Art. 33"],
    "mise en demeure": ["Art. 86", "Art. 33"],

    "bénéfices agricoles": ["Art. 36-A", "Art. 1"],
    "agriculture": ["Art. 36-A"],
    "élevage": ["Art. 36-A"],
    "exonération agricole": ["Art. 36-B"],

    "traitements salaires": ["Art. 37", "Art. 1"],
    "traitements et salaires": ["Art. 37", "Art. 1"],
    "salaires": ["Art. 37"],
    "pensions": ["Art. 37", "Art. 38"],
    "rentes viagères": ["Art. 37", "Art. 38"],

    "exonérations salaires": ["Art. 38"],
    "allocations familiales": ["Art. 38"],
    "indemnité licenciement": ["Art. 38"],
    "pension retraite": ["Art. 38"],

    "avantages en nature": ["Art. 39"],
    "logement": ["Art. 39"],
    "voiture": ["Art. 39"],

    "déduction forfaitaire 20%": ["Art. 41"],
    "abattement 20%": ["Art. 41"],

    "bnc": ["Art. 42"],
    "professions libérales": ["Art. 42"],
    "professions non commerciales": ["Art. 42", "Art. 1"],
    "droits d'auteur": ["Art. 42"],
    "honoraires": ["Art. 42"],

    "revenus des capitaux mobiliers": ["Art. 50", "Art. 1"],
    "capitaux mobiliers": ["Art. 50", "Art. 1"],
    "dividendes": ["Art. 50", "Art. 51"],
    "revenus distribués": ["Art. 51"],
    "tantièmes": ["Art. 57"],
    "jetons de présence": ["Art. 57"],
    "obligations": ["Art. 58"],
    "intérêts": ["Art. 58", "Art. 61"],
    "créances": ["Art. 61"],
    "dépôts": ["Art. 61"],
    "livrets épargne": ["Art. 62"],

    "plus-values": ["Art. 63", "Art. 1"],
    "plus-values cession": ["Art. 63"],
    "plus-values immobilières": ["Art. 63 ter"],
    "cession actif": ["Art. 63"],

    "charges déductibles": ["Art. 66", "Art. 13 quater"],
    "déficits": ["Art. 66"],
    "report déficit": ["Art. 66"],
    "pensions alimentaires": ["Art. 66"],
    "intérêts emprunts": ["Art. 66"],
    "assurance vie": ["Art. 66"],
    "honoraires médicaux": ["Art. 66"],

    "départ du congo": ["Art. 75"],
    "transfert domicile": ["Art. 75"],
    "visa de départ": ["Art. 75"],
    "quitter le congo": ["Art. 75"],

    "déclaration revenus": ["Art. 76", "Art. 80"],
    "obligation déclaration": ["Art. 76"],
    "train de vie": ["Art. 76", "Art. 89 bis"],
    "délai déclaration": ["Art. 80"],
    "20 mars": ["Art. 80"],

    "calcul irpp": ["Art. 89"],
    "mécanisme calcul": ["Art. 89"],

    "quotient familial": ["Art. 91"],
    "nombre de parts": ["Art. 91"],
    "parts fiscales": ["Art. 91"],
    "combien de parts": ["Art. 91"],
    "célibataire": ["Art. 91"],
    "marié": ["Art. 91"],
    "divorcé": ["Art. 91"],
    "veuf": ["Art. 91"],
    "demi-part": ["Art. 91", "Art. 92-1"],

    "personnes à charge": ["Art. 93"],
    "enfants légitimes": ["Art. 93"],
    "enfants adoptés": ["Art. 93"],
    "21 ans": ["Art. 93"],
    "25 ans": ["Art. 93"],

    "barème irpp": ["Art. 95"],
    "barème": ["Art. 95"],
    "taux irpp": ["Art. 95"],
    "tranches": ["Art. 95"],
    "tranches irpp": ["Art. 95"],
    "1%": ["Art. 95"],
    "10%": ["Art. 95"],
    "25%": ["Art. 95"],
    "40%": ["Art. 95"],
    "464 000": ["Art. 95"],
    "1 000 000": ["Art. 95"],
    "3 000 000": ["Art. 95"],
    "salaire minimum": ["Art. 95"],

    "retenue à la source": ["Art. 96"],
    "retenue source 20%": ["Art. 96"],

    "cession entreprise": ["Art. 98-1"],
    "cessation": ["Art. 98-1", "Art. 99"],
    "décès exploitant": ["Art. 98-2", "Art. 101"],
    "cessation bnc": ["Art. 99"],
    "imposition décès": ["Art. 101"],

    "taux déduction foncier": ["Art. 13 quater"],
    "abattement affichage": ["Art. 13 quater"],
    "option frais réels": ["Art. 13 quater"],
    "30%": ["Art. 13 quater"],
    "5%": ["Art. 13 quater"],
    "déduction 30%": ["Art. 13 quater"],
    "déduction 5%": ["Art. 13 quater"],

    "contribuables exclus": ["Art. 26"],
    "ne peuvent pas bénéficier forfait": ["Art. 26"],
    "hors champ forfait": ["Art. 26"],

    "amende registres": ["Art. 28"],
    "défaut tenue registres": ["Art. 28"],
    "500 000 fcfa": ["Art. 28"],

    "conservation documents": ["Art. 31"],
    "durée conservation": ["Art. 31"],
    "dix ans": ["Art. 31"],
    "10 ans": ["Art. 31"],

    "allocations familiales employeur": ["Art. 38"],
    "5 000 fcfa enfant": ["Art. 38"],

    "maximum parts": ["Art. 91"],
    "6,5 parts": ["Art. 91"],
    "plafond parts": ["Art. 91"],

    "trente jours": ["Art. 75"],
    "30 jours": ["Art. 75"],

    "veuf parts": ["Art. 91"],
    "deux années": ["Art. 91"],

    "revenus exceptionnels": ["Art. 71"],
    "étalement": ["Art. 71"],
    "système du quotient": ["Art. 71"],

    "bénéfices agricoles définition": ["Art. 36-A"],
    "bénéfices agricoles exonération": ["Art. 36-B"],
    "pisciculture": ["Art. 36-B"],
    "pisciculture exonérée": ["Art. 36-B"],
    "exonération pisciculture": ["Art. 36-B"],
    "agriculteur exonéré": ["Art. 36-B"],

    "cession cessation obligations": ["Art. 98-1"],
    "décès exploitant délai": ["Art. 98-2"],
    "ayants droit décès": ["Art. 98-2", "Art. 101"],
    "six mois décès": ["Art. 98-2", "Art. 101"],

    "déduction 30% foncier": ["Art. 13 quater"],
    "abattement 5% affichage": ["Art. 13 quater"],
    "option frais réels trois ans": ["Art. 13 quater"],

    "école privée": ["Art. 34 ter"],
    "abattement école": ["Art. 34 ter"],
    "établissement enseignement": ["Art. 34 ter"],

    "bons de caisse": ["Art. 61"],
    "précompte 15%": ["Art. 61"],
    "précompte libératoire": ["Art. 61"],

    "gérant majoritaire": ["Art. 76"],
    "rémunération gérant": ["Art. 76"],
    "gérant sarl": ["Art. 76"],

    "organisation internationale": ["Art. 90"],
    "fonctionnaire international": ["Art. 90"],
})

SYNONYMS = MappingProxyType({})
