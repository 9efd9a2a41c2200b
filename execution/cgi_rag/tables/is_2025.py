"""
CGI 2025, Chapter 3: Impôt sur les sociétés

Keyword, synonym and article metadata tables.
Metadata priority: 1 = most important, 5 = least.
"""

from types import MappingProxyType

KEYWORDS = MappingProxyType({
    "taux is": ["Art. 122"],
    "taux impot societes": ["Art. 122"],
    "30%": ["Art. 122"],
    "25%": ["Art. 122-A"],
    "28%": ["Art. 122-A"],
    "33%": ["Art. 122-A"],
    "taux normal is": ["Art. 122"],
    "taux reduit is": ["Art. 122-A"],
    "taux microfinance": ["Art. 122-A"],
    "taux mines": ["Art. 122-A"],
    "taux immobilier": ["Art. 122-A"],

    "principe is": ["Art. 106"],
    "definition is": ["Art. 106"],

    "personnes imposables is": ["Art. 107"],
    "societes de capitaux": ["Art. 107"],
    "sa": ["Art. 107"],
    "sarl": ["Art. 107"],
    "option is": ["Art. 107"],
    "snc option": ["Art. 107"],

    "exonerations is": ["Art. 107-A"],
    "cooperatives agricoles": ["Art. 107-A"],
    "gie exonere": ["Art. 107-A"],
    "beac exonere": ["Art. 107-A"],
    "collectivites locales": ["Art. 107-A"],

    "territorialite is": ["Art. 108"],
    "etablissement stable": ["Art. 108"],
    "cycle commercial": ["Art. 108"],

    "benefice imposable": ["Art. 109"],
    "benefice net": ["Art. 109"],
    "actif net": ["Art. 109-A"],
    "charges deductibles": ["Art. 109-B"],
    "acte anormal gestion": ["Art. 109-B"],
    "microfinance is": ["Art. 109-C"],

    "charges personnel": ["Art. 110"],
    "remunerations": ["Art. 110"],
    "salaires deductibles": ["Art. 110"],
    "gerants majoritaires": ["Art. 110-A"],
    "cotisations retraite": ["Art. 110-B"],
    "15% cotisations": ["Art. 110-B"],
    "frais transport personnel": ["Art. 110-F", "Art. 110-G"],

    "frais de siege": ["Art. 111"],
    "20% frais siege": ["Art. 111"],
    "remunerations etranger": ["Art. 111"],
    "2% btp": ["Art. 111-A"],
    "redevances": ["Art. 111-A bis"],
    "brevets": ["Art. 111-A bis"],
    "commissions": ["Art. 111-B"],
    "5% commissions": ["Art. 111-B"],

    "locations": ["Art. 112"],
    "credit-bail": ["Art. 112-A"],
    "leasing": ["Art. 112-A"],
    "impots deductibles": ["Art. 112-B"],
    "primes assurance": ["Art. 112-C"],
    "frais financiers": ["Art. 112-D"],
    "interets associes": ["Art. 112-E"],
    "taux beac": ["Art. 112-E"],
    "interets deductibles": ["Art. 112-F"],

    "dons": ["Art. 113"],
    "liberalites": ["Art. 113"],
    "0,5 pour mille": ["Art. 113"],
    "500 000 fcfa": ["Art. 113-A"],
    "sfec": ["Art. 113-A", "Art. 114-J bis"],
    "depenses somptuaires": ["Art. 113-B"],
    "amendes non deductibles": ["Art. 113-C"],
    "covid-19": ["Art. 113 bis"],

    "amortissements": ["Art. 114"],
    "taux amortissement": ["Art. 114-A"],
    "amortissement lineaire": ["Art. 114-B"],
    "amortissement degressif": ["Art. 114-C"],
    "credit-bail amortissement": ["Art. 114-D", "Art. 114-E"],
    "amortissement accelere": ["Art. 114-F"],
    "40% accelere": ["Art. 114-F"],
    "400 millions": ["Art. 114-F"],
    "vehicules tourisme": ["Art. 114-G"],
    "40 millions vehicule": ["Art. 114-G"],
    "500 000 amortissement": ["Art. 114-H"],
    "amortissement 100%": ["Art. 114-I", "Art. 114-J bis"],

    "provisions": ["Art. 115"],
    "creances douteuses": ["Art. 115-A"],
    "cobac": ["Art. 115-B"],
    "provisions titres": ["Art. 115-C"],
    "conges payes": ["Art. 115-D"],
    "provisions risques": ["Art. 115-E"],

    "produits imposables": ["Art. 116"],
    "ventes imposables": ["Art. 116"],
    "cessions actif": ["Art. 116-A"],
    "degrevements": ["Art. 116-B"],
    "ecarts conversion": ["Art. 116-C"],

    "stocks": ["Art. 117"],
    "peps": ["Art. 117"],
    "fifo": ["Art. 117"],
    "cout moyen pondere": ["Art. 117"],
    "travaux en cours": ["Art. 117-A"],

    "plus-values": ["Art. 118"],
    "moins-values": ["Art. 118"],
    "reinvestissement": ["Art. 118-A"],
    "3 ans remploi": ["Art. 118-A"],
    "fusions": ["Art. 118-B"],
    "scissions": ["Art. 118-B"],
    "cessation activite": ["Art. 118-C"],
    "societes petrolieres pv": ["Art. 118-D"],
    "10% plus-values": ["Art. 118-E"],

    "report deficits": ["Art. 119"],
    "deficits reportables": ["Art. 119"],
    "3 ans deficit": ["Art. 119"],
    "pertes reportables": ["Art. 119"],

    "prix de transfert": ["Art. 120"],
    "prix transfert": ["Art. 120"],
    "parties liees": ["Art. 120"],
    "entreprises liees": ["Art. 120"],
    "documentation prix transfert": ["Art. 120-A"],
    "500 millions pt": ["Art. 120-A"],
    "methodes prix transfert": ["Art. 120-B"],
    "pcml": ["Art. 120-B"],
    "prm": ["Art. 120-B"],
    "mtmn": ["Art. 120-B"],
    "ocde": ["Art. 120-B"],
    "app": ["Art. 120-C"],
    "accord prealable prix": ["Art. 120-C"],
    "sanctions prix transfert": ["Art. 120-D"],
    "5 000 000 amende pt": ["Art. 120-D"],
    "25 000 000 amende pt": ["Art. 120-D"],
    "declaration pays par pays": ["Art. 120-E", "Art. 120-F", "Art. 120-G", "Art. 120-H"],

    "exercice comptable": ["Art. 121"],
    "12 mois": ["Art. 121"],
    "premier bilan": ["Art. 121"],

    "calcul is": ["Art. 122"],
    "irvm imputation": ["Art. 122-B"],

    "etablissement is": ["Art. 123"],
    "bica": ["Art. 123"],
    "dissolution": ["Art. 123"],
    "fusion is": ["Art. 123"],

    "declaration existence": ["Art. 124"],
    "declaration resultats": ["Art. 124-A"],
    "4 mois declaration": ["Art. 124-A"],
    "acomptes is": ["Art. 124-B"],
    "15 fevrier": ["Art. 124-B"],
    "15 mai": ["Art. 124-B"],
    "15 aout": ["Art. 124-B"],
    "15 novembre": ["Art. 124-B"],
    "cessation activites": ["Art. 124-C"],

    "societes nouvelles": ["Art. 125"],

    "societes meres": ["Art. 126"],
    "filiales": ["Art. 126"],
    "dividendes mere-fille": ["Art. 126"],
    "25% participation": ["Art. 126"],
    "quote-part 10%": ["Art. 126"],
    "2 ans conservation": ["Art. 126"],
    "subventions intragroupe": ["Art. 126-A"],
    "abandons creances": ["Art. 126-A"],

    "succursales": ["Art. 126-B"],
    "agences": ["Art. 126-B"],

    "quartiers generaux": ["Art. 126-C-1"],
    "qg cemac": ["Art. 126-C-1"],
    "base forfaitaire qg": ["Art. 126-C-2"],
    "autorisation prealable qg": ["Art. 126-C-3"],

    "holdings": ["Art. 126-D"],
    "societe holding": ["Art. 126-D"],
    "deux tiers actif": ["Art. 126-D"],
    "5 ans holding": ["Art. 126-D-1"],
    "regime holding": ["Art. 126-D-2", "Art. 126-D-3"],
    "plus-values holding": ["Art. 126-D-4"],
    "irvm holding": ["Art. 126-D-5"],

    "integration fiscale": ["Art. 126-E"],
    "groupe fiscal": ["Art. 126-E"],
    "95% participation": ["Art. 126-E"],
    "resultat ensemble": ["Art. 126-E-1"],
    "neutralisation": ["Art. 126-E-2"],
    "option integration": ["Art. 126-E-3"],
    "5 exercices": ["Art. 126-E-3"],
    "sortie groupe": ["Art. 126-E-5"],

    "personnes morales etrangeres": ["Art. 126 bis", "Art. 126 ter"],
    "non residents is": ["Art. 126 ter"],
    "forfaitaire 22%": ["Art. 126 ter"],
    "sous-traitants petroliers": ["Art. 126 ter A", "Art. 126 quater B-1"],
    "ate": ["Art. 126 quater C-1"],
    "autorisation temporaire exercer": ["Art. 126 quater C-1"],
    "quitus fiscal": ["Art. 126 quater D"],
    "100 milliards quitus": ["Art. 126 quater D"],
    "zone angola": ["Art. 126 septies"],
    "5.75%": ["Art. 126 septies"],
    "70% petrole": ["Art. 126 sexies"],

    # Canonical synonym terms
    "is": [("Art. 106", 0.5)],
    "regime mere-fille": ["Art. 126"],
    "holding": ["Art. 126-D"],
    "amortissement": [("Art. 114", 0.8), ("Art. 114-A", 0.7)],
    "deficit reportable": ["Art. 119"],
    "sous-traitant petrolier": ["Art. 126 ter A", "Art. 126 quater B-1"],
})

SYNONYMS = MappingProxyType({
    "is": ["impot sur les societes", "impot sur les benefices", "corporate tax"],
    "etablissement stable": ["es", "succursale", "presence permanente"],
    "prix de transfert": ["pt", "transfer pricing", "transactions intragroupe"],
    "regime mere-fille": ["dividendes intragroupe", "participation qualifiee"],
    "integration fiscale": ["groupe fiscal", "consolidation fiscale", "resultat d'ensemble"],
    "holding": ["societe de participation", "societe portefeuille"],
    "credit-bail": ["leasing", "location financiere", "loa"],
    "amortissement": ["dotation aux amortissements", "depreciation"],
    "provisions": ["dotation aux provisions", "charges a venir"],
    "deficit reportable": ["report deficitaire", "pertes reportables"],
    "redevances": ["royalties", "droits auteur", "licences"],
    "sous-traitant petrolier": ["contractor", "prestataire petrolier"],
    "bica": ["benefices industriels et commerciaux artisanaux", "regime reel"],
})

METADATA = MappingProxyType({
    "Art. 106": {
        "numero": "Art. 106",
        "titre": "Principe de l'IS",
        "section": "Generalites",
        "themes": ["principe IS", "definition IS"],
        "priority": 1,
        "defines": ["impot sur les societes"],
    },

    "Art. 107": {
        "numero": "Art. 107",
        "titre": "Personnes imposables",
        "section": "Champ d'application",
        "themes": ["personnes imposables", "societes de capitaux", "option IS"],
        "priority": 1,
        "defines": ["personnes imposables IS", "option IS"],
        "keywords": ["SA", "SARL", "SNC"],
    },

    "Art. 107-A": {
        "numero": "Art. 107-A",
        "titre": "Exonerations",
        "section": "Champ d'application",
        "themes": ["exonerations", "cooperatives", "GIE", "BEAC"],
        "priority": 1,
        "defines": ["exonerations IS"],
        "keywords": ["cooperatives agricoles", "collectivites locales"],
    },

    "Art. 108": {
        "numero": "Art. 108",
        "titre": "Territorialite",
        "section": "Champ d'application",
        "themes": ["territorialite", "etablissement stable"],
        "priority": 1,
        "defines": ["territorialite IS", "cycle commercial"],
    },

    "Art. 109": {
        "numero": "Art. 109",
        "titre": "Definition du benefice net",
        "section": "Benefice imposable",
        "themes": ["benefice net", "benefice imposable"],
        "priority": 1,
        "defines": ["benefice net imposable"],
    },

    "Art. 109-A": {
        "numero": "Art. 109-A",
        "titre": "Actif net",
        "section": "Benefice imposable",
        "themes": ["actif net"],
        "priority": 2,
    },

    "Art. 109-B": {
        "numero": "Art. 109-B",
        "titre": "Conditions de deductibilite",
        "section": "Benefice imposable",
        "themes": ["conditions deductibilite", "charges deductibles", "acte anormal de gestion"],
        "priority": 1,
        "defines": ["conditions de deductibilite"],
    },

    "Art. 109-C": {
        "numero": "Art. 109-C",
        "titre": "Microfinance",
        "section": "Benefice imposable",
        "themes": ["microfinance"],
        "priority": 2,
    },

    "Art. 110": {
        "numero": "Art. 110",
        "titre": "Remunerations des salaries",
        "section": "Charges de personnel",
        "themes": ["charges personnel", "remunerations", "salaires"],
        "priority": 1,
        "defines": ["charges de personnel deductibles"],
    },

    "Art. 110-A": {
        "numero": "Art. 110-A",
        "titre": "Gerants majoritaires SARL",
        "section": "Charges de personnel",
        "themes": ["gerants majoritaires", "SARL"],
        "priority": 2,
    },

    "Art. 110-B": {
        "numero": "Art. 110-B",
        "titre": "Cotisations retraite",
        "section": "Charges de personnel",
        "themes": ["cotisations retraite", "prevoyance"],
        "priority": 2,
        "valeurs": ["15%"],
    },

    "Art. 111": {
        "numero": "Art. 111",
        "titre": "Frais de siege",
        "section": "Remunerations etranger",
        "themes": ["frais de siege", "remunerations etranger"],
        "priority": 1,
        "defines": ["frais de siege"],
        "valeurs": ["20%"],
    },

    "Art. 111-A": {
        "numero": "Art. 111-A",
        "titre": "Remunerations BTP",
        "section": "Remunerations etranger",
        "themes": ["BTP", "remunerations etranger"],
        "priority": 2,
        "valeurs": ["2%"],
    },

    "Art. 111-A bis": {
        "numero": "Art. 111-A bis",
        "titre": "Redevances",
        "section": "Remunerations etranger",
        "themes": ["redevances", "brevets", "licences"],
        "priority": 1,
        "defines": ["redevances deductibles"],
    },

    "Art. 111-B": {
        "numero": "Art. 111-B",
        "titre": "Commissions",
        "section": "Remunerations etranger",
        "themes": ["commissions"],
        "priority": 2,
        "valeurs": ["5%"],
    },

    "Art. 112": {
        "numero": "Art. 112",
        "titre": "Locations",
        "section": "Autres frais",
        "themes": ["locations", "loyers"],
        "priority": 2,
    },

    "Art. 112-A": {
        "numero": "Art. 112-A",
        "titre": "Credit-bail",
        "section": "Autres frais",
        "themes": ["credit-bail", "leasing"],
        "priority": 1,
        "defines": ["credit-bail deductible"],
    },

    "Art. 112-B": {
        "numero": "Art. 112-B",
        "titre": "Impots deductibles",
        "section": "Autres frais",
        "themes": ["impots deductibles"],
        "priority": 2,
    },

    "Art. 112-C": {
        "numero": "Art. 112-C",
        "titre": "Primes d'assurance",
        "section": "Autres frais",
        "themes": ["assurances", "primes"],
        "priority": 2,
    },

    "Art. 112-D": {
        "numero": "Art. 112-D",
        "titre": "Frais financiers",
        "section": "Autres frais",
        "themes": ["frais financiers", "interets"],
        "priority": 1,
        "defines": ["frais financiers deductibles"],
    },

    "Art. 112-E": {
        "numero": "Art. 112-E",
        "titre": "Interets des associes",
        "section": "Autres frais",
        "themes": ["interets associes", "compte courant"],
        "priority": 1,
        "defines": ["interets comptes courants associes"],
        "valeurs": ["taux BEAC + 3 points"],
        "keywords": ["sous-capitalisation"],
    },

    "Art. 113": {
        "numero": "Art. 113",
        "titre": "Dons et liberalites",
        "section": "Charges non deductibles",
        "themes": ["dons", "liberalites"],
        "priority": 1,
        "defines": ["dons non deductibles"],
        "valeurs": ["0,5 pour mille"],
    },

    "Art. 113-A": {
        "numero": "Art. 113-A",
        "titre": "Paiements en especes",
        "section": "Charges non deductibles",
        "themes": ["paiement especes", "SFEC"],
        "priority": 1,
        "valeurs": ["500.000 FCFA"],
    },

    "Art. 113-B": {
        "numero": "Art. 113-B",
        "titre": "Depenses somptuaires",
        "section": "Charges non deductibles",
        "themes": ["depenses somptuaires"],
        "priority": 2,
    },

    "Art. 113-C": {
        "numero": "Art. 113-C",
        "titre": "Amendes et penalites",
        "section": "Charges non deductibles",
        "themes": ["amendes", "penalites"],
        "priority": 2,
        "defines": ["amendes non deductibles"],
    },

    "Art. 114": {
        "numero": "Art. 114",
        "titre": "Amortissements - Principe",
        "section": "Amortissements",
        "themes": ["amortissements"],
        "priority": 1,
        "defines": ["amortissements deductibles"],
    },

    "Art. 114-A": {
        "numero": "Art. 114-A",
        "titre": "Taux d'amortissement",
        "section": "Amortissements",
        "themes": ["taux amortissement"],
        "priority": 1,
        "defines": ["taux d'amortissement"],
    },

    "Art. 114-B": {
        "numero": "Art. 114-B",
        "titre": "Amortissement lineaire",
        "section": "Amortissements",
        "themes": ["amortissement lineaire"],
        "priority": 2,
    },

    "Art. 114-C": {
        "numero": "Art. 114-C",
        "titre": "Amortissement degressif",
        "section": "Amortissements",
        "themes": ["amortissement degressif"],
        "priority": 2,
    },

    "Art. 114-F": {
        "numero": "Art. 114-F",
        "titre": "Amortissement accelere",
        "section": "Amortissements",
        "themes": ["amortissement accelere"],
        "priority": 1,
        "valeurs": ["40%", "400.000.000 FCFA"],
    },

    "Art. 114-G": {
        "numero": "Art. 114-G",
        "titre": "Vehicules de tourisme",
        "section": "Amortissements",
        "themes": ["vehicules tourisme", "plafond amortissement"],
        "priority": 1,
        "valeurs": ["40.000.000 FCFA"],
    },

    "Art. 114-H": {
        "numero": "Art. 114-H",
        "titre": "Petits materiels",
        "section": "Amortissements",
        "themes": ["petits materiels", "amortissement 100%"],
        "priority": 2,
        "valeurs": ["500.000 FCFA"],
    },

    "Art. 115": {
        "numero": "Art. 115",
        "titre": "Provisions - Principe",
        "section": "Provisions",
        "themes": ["provisions"],
        "priority": 1,
        "defines": ["provisions deductibles"],
    },

    "Art. 115-A": {
        "numero": "Art. 115-A",
        "titre": "Creances douteuses",
        "section": "Provisions",
        "themes": ["creances douteuses", "provisions clients"],
        "priority": 1,
        "defines": ["provisions pour creances douteuses"],
    },

    "Art. 115-B": {
        "numero": "Art. 115-B",
        "titre": "Provisions COBAC",
        "section": "Provisions",
        "themes": ["COBAC", "banques", "etablissements credit"],
        "priority": 2,
    },

    "Art. 118": {
        "numero": "Art. 118",
        "titre": "Regime des plus-values",
        "section": "Plus-values",
        "themes": ["plus-values", "moins-values"],
        "priority": 1,
        "defines": ["regime des plus-values"],
    },

    "Art. 118-A": {
        "numero": "Art. 118-A",
        "titre": "Remploi des plus-values",
        "section": "Plus-values",
        "themes": ["remploi", "reinvestissement"],
        "priority": 1,
        "defines": ["regime de remploi"],
        "valeurs": ["3 ans"],
    },

    "Art. 118-B": {
        "numero": "Art. 118-B",
        "titre": "Fusions et scissions",
        "section": "Plus-values",
        "themes": ["fusions", "scissions", "restructurations"],
        "priority": 1,
        "defines": ["regime fiscal des fusions"],
    },

    "Art. 119": {
        "numero": "Art. 119",
        "titre": "Report des deficits",
        "section": "Report deficitaire",
        "themes": ["report deficits", "deficits reportables"],
        "priority": 1,
        "defines": ["report deficitaire"],
        "valeurs": ["3 ans"],
    },

    "Art. 120": {
        "numero": "Art. 120",
        "titre": "Prix de transfert - Principe",
        "section": "Prix de transfert",
        "themes": ["prix de transfert", "parties liees"],
        "priority": 1,
        "defines": ["prix de transfert", "entreprises liees"],
    },

    "Art. 120-A": {
        "numero": "Art. 120-A",
        "titre": "Documentation prix de transfert",
        "section": "Prix de transfert",
        "themes": ["documentation", "obligations declaratives"],
        "priority": 1,
        "valeurs": ["500.000.000 FCFA"],
    },

    "Art. 120-B": {
        "numero": "Art. 120-B",
        "titre": "Methodes de prix de transfert",
        "section": "Prix de transfert",
        "themes": ["methodes", "PCML", "MTMN", "OCDE"],
        "priority": 1,
        "defines": ["methodes prix de transfert"],
    },

    "Art. 120-C": {
        "numero": "Art. 120-C",
        "titre": "APP - Accord prealable de prix",
        "section": "Prix de transfert",
        "themes": ["APP", "accord prealable"],
        "priority": 2,
        "defines": ["accord prealable de prix"],
        "valeurs": ["3 ans"],
    },

    "Art. 120-D": {
        "numero": "Art. 120-D",
        "titre": "Sanctions prix de transfert",
        "section": "Prix de transfert",
        "themes": ["sanctions", "amendes"],
        "priority": 2,
        "valeurs": ["5.000.000 FCFA", "25.000.000 FCFA"],
    },

    "Art. 122": {
        "numero": "Art. 122",
        "titre": "Taux de l'IS",
        "section": "Calcul de l'impot",
        "themes": ["taux IS", "30%"],
        "priority": 1,
        "defines": ["taux IS normal"],
        "valeurs": ["30%"],
    },

    "Art. 122-A": {
        "numero": "Art. 122-A",
        "titre": "Taux reduits",
        "section": "Calcul de l'impot",
        "themes": ["taux reduits", "25%", "28%", "33%"],
        "priority": 1,
        "defines": ["taux reduits IS"],
        "valeurs": ["25%", "28%", "33%"],
        "keywords": ["microfinance", "enseignement", "mines", "immobilier", "etrangers"],
    },

    "Art. 122-B": {
        "numero": "Art. 122-B",
        "titre": "Imputation IRVM",
        "section": "Calcul de l'impot",
        "themes": ["IRVM", "imputation"],
        "priority": 2,
    },

    "Art. 124": {
        "numero": "Art. 124",
        "titre": "Declaration d'existence",
        "section": "Obligations",
        "themes": ["declaration existence", "immatriculation"],
        "priority": 1,
        "defines": ["obligation declaration existence"],
        "valeurs": ["3 mois", "15 jours"],
    },

    "Art. 124-A": {
        "numero": "Art. 124-A",
        "titre": "Declaration des resultats",
        "section": "Obligations",
        "themes": ["declaration resultats", "liasse fiscale"],
        "priority": 1,
        "defines": ["obligation declaration annuelle"],
        "valeurs": ["4 mois"],
    },

    "Art. 124-B": {
        "numero": "Art. 124-B",
        "titre": "Acomptes IS",
        "section": "Obligations",
        "themes": ["acomptes IS", "versement spontane"],
        "priority": 1,
        "defines": ["acomptes IS"],
        "valeurs": ["15 fevrier", "15 mai", "15 aout", "15 novembre"],
    },

    "Art. 124-C": {
        "numero": "Art. 124-C",
        "titre": "Cessation d'activites",
        "section": "Obligations",
        "themes": ["cessation", "fermeture"],
        "priority": 2,
        "valeurs": ["15 jours"],
    },

    "Art. 126": {
        "numero": "Art. 126",
        "titre": "Regime mere-fille",
        "section": "Regimes particuliers",
        "themes": ["societes meres", "filiales", "dividendes"],
        "priority": 1,
        "defines": ["regime mere-fille"],
        "valeurs": ["25%", "10%", "2 ans"],
    },

    "Art. 126-A": {
        "numero": "Art. 126-A",
        "titre": "Subventions et abandons",
        "section": "Regimes particuliers",
        "themes": ["subventions", "abandons de creances"],
        "priority": 2,
    },

    "Art. 126-B": {
        "numero": "Art. 126-B",
        "titre": "Succursales",
        "section": "Regimes particuliers",
        "themes": ["succursales", "agences"],
        "priority": 2,
        "defines": ["regime des succursales"],
    },

    "Art. 126-C-1": {
        "numero": "Art. 126-C-1",
        "titre": "Quartiers generaux",
        "section": "Regimes particuliers",
        "themes": ["quartiers generaux", "CEMAC"],
        "priority": 1,
        "defines": ["quartiers generaux"],
    },

    "Art. 126-D": {
        "numero": "Art. 126-D",
        "titre": "Holdings",
        "section": "Regimes particuliers",
        "themes": ["holdings", "societe de participation"],
        "priority": 1,
        "defines": ["regime des holdings"],
        "valeurs": ["deux tiers actif", "5 ans"],
    },

    "Art. 126-E": {
        "numero": "Art. 126-E",
        "titre": "Integration fiscale",
        "section": "Regimes particuliers",
        "themes": ["integration fiscale", "groupe fiscal"],
        "priority": 1,
        "defines": ["integration fiscale"],
        "valeurs": ["95%", "5 exercices"],
    },

    "Art. 126-E-1": {
        "numero": "Art. 126-E-1",
        "titre": "Resultat d'ensemble",
        "section": "Regimes particuliers",
        "themes": ["resultat ensemble", "consolidation"],
        "priority": 2,
    },

    "Art. 126-E-2": {
        "numero": "Art. 126-E-2",
        "titre": "Neutralisation",
        "section": "Regimes particuliers",
        "themes": ["neutralisation", "operations internes"],
        "priority": 2,
    },

    "Art. 126 ter": {
        "numero": "Art. 126 ter",
        "titre": "Personnes morales etrangeres",
        "section": "Personnes morales etrangeres",
        "themes": ["personnes morales etrangeres", "non-residents"],
        "priority": 1,
        "defines": ["regime personnes morales etrangeres"],
        "valeurs": ["22%"],
    },

    "Art. 126 ter A": {
        "numero": "Art. 126 ter A",
        "titre": "Sous-traitants petroliers",
        "section": "Personnes morales etrangeres",
        "themes": ["sous-traitants petroliers", "secteur petrolier"],
        "priority": 1,
    },

    "Art. 126 quater C-1": {
        "numero": "Art. 126 quater C-1",
        "titre": "ATE - Autorisation temporaire",
        "section": "Personnes morales etrangeres",
        "themes": ["ATE", "autorisation temporaire"],
        "priority": 2,
        "defines": ["autorisation temporaire exercer"],
    },

    "Art. 126 quater D": {
        "numero": "Art. 126 quater D",
        "titre": "Quitus fiscal",
        "section": "Personnes morales etrangeres",
        "themes": ["quitus fiscal"],
        "priority": 1,
        "defines": ["quitus fiscal"],
        "valeurs": ["100.000.000.000 FCFA"],
    },

    "Art. 126 septies": {
        "numero": "Art. 126 septies",
        "titre": "Zone Angola",
        "section": "Personnes morales etrangeres",
        "themes": ["zone Angola", "retenue speciale"],
        "priority": 2,
        "valeurs": ["5.75%"],
    },

    "Art. 126 sexies": {
        "numero": "Art. 126 sexies",
        "titre": "Activite petroliere 70%",
        "section": "Personnes morales etrangeres",
        "themes": ["activite petroliere", "derogation"],
        "priority": 2,
        "valeurs": ["70%"],
    },
})

# Theme -> articles, most relevant first
THEME_PRIORITIES = MappingProxyType({
    "taux": ["Art. 122", "Art. 122-A", "Art. 114-A"],
    "exonerations": ["Art. 107-A"],
    "etablissement stable": ["Art. 108"],
    "prix de transfert": ["Art. 120", "Art. 120-A", "Art. 120-B", "Art. 120-C", "Art. 120-D"],
    "amortissements": ["Art. 114", "Art. 114-A", "Art. 114-F", "Art. 114-G"],
    "deficits": ["Art. 119"],
    "frais siege": ["Art. 111"],
    "mere-fille": ["Art. 126", "Art. 126-A"],
    "holding": ["Art. 126-D"],
    "integration fiscale": ["Art. 126-E", "Art. 126-E-1", "Art. 126-E-2"],
    "personnes morales etrangeres": ["Art. 126 ter", "Art. 126 ter A"],
    "acomptes": ["Art. 124-B"],
})
