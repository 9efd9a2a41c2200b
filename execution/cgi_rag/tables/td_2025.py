"""
CGI 2025, Chapter 5: Taxes diverses (Art. 157 to 171 L)

Land taxes, special company tax (TSS), cash vouchers and the company
passenger vehicle tax (TVS).
Metadata priority: 1 = most important, 5 = least.
"""

from types import MappingProxyType

KEYWORDS = MappingProxyType({
    "taxes terrains": ["Art. 157"],
    "taxe terrain": ["Art. 157"],
    "terrain agrement": ["Art. 157", "Art. 159"],
    "terrain non mis en valeur": ["Art. 157", "Art. 159"],
    "terrain insuffisamment mis en valeur": ["Art. 159"],
    "terrain a batir": ["Art. 157", "Art. 159"],
    "terrain inexploite": ["Art. 157", "Art. 160"],
    "terrain insuffisamment exploite": ["Art. 160"],
    "5 fois superficie": ["Art. 159"],
    "jachere": ["Art. 160"],
    "3 ans plantation": ["Art. 160"],
    "51% superficie": ["Art. 160"],

    "brazzaville terrain": ["Art. 158"],
    "pointe-noire terrain": ["Art. 158"],
    "loudima": ["Art. 158"],
    "loubomo terrain": ["Art. 158", "Art. 165"],
    "terrains urbains": ["Art. 158"],

    "exemption terrain": ["Art. 161"],
    "exemption temporaire terrain": ["Art. 162"],
    "lotissement": ["Art. 161"],
    "voie carrossable": ["Art. 161"],
    "100 metres": ["Art. 161"],
    "programme investissement terrain": ["Art. 162"],
    "25% majoration terrain": ["Art. 162"],

    "redevable terrain": ["Art. 163"],
    "proprietaire terrain": ["Art. 163"],
    "usufruitier": ["Art. 163"],
    "emphyteote": ["Art. 163"],
    "1er janvier terrain": ["Art. 164"],
    "fait generateur terrain": ["Art. 164"],

    "tarif terrain": ["Art. 165"],
    "15 f/m2": ["Art. 165"],
    "5 f/m2": ["Art. 165"],
    "40 f/m2": ["Art. 165"],
    "30 f/m2": ["Art. 165"],
    "20 f/m2": ["Art. 165"],
    "10 f/m2": ["Art. 165"],
    "250 f/ha": ["Art. 165"],
    "terrain marecageux": ["Art. 165"],
    "classes terrain": ["Art. 165"],
    "500 fcfa minimum terrain": ["Art. 165"],

    "declaration terrain": ["Art. 166"],
    "1er avril terrain": ["Art. 166"],
    "titre provisoire": ["Art. 167"],
    "titre definitif": ["Art. 167"],
    "exoneration titre": ["Art. 167 bis"],

    "tss": ["Art. 168"],
    "taxe speciale societes": ["Art. 168"],
    "minimum fiscal societes": ["Art. 168"],
    "minimum imposition societes": ["Art. 168"],
    "sa tss": ["Art. 168"],
    "sarl tss": ["Art. 168"],
    "sca": ["Art. 168"],

    "exoneration tss": ["Art. 169"],
    "agriculture tss": ["Art. 169"],
    "peche tss": ["Art. 169"],
    "elevage tss": ["Art. 169"],
    "premier exercice tss": ["Art. 169"],

    "taux tss": ["Art. 170"],
    "1% tss": ["Art. 170"],
    "2% tss": ["Art. 170"],
    "deficitaire tss": ["Art. 170"],
    "2 exercices consecutifs": ["Art. 170"],
    "minimum tss": ["Art. 170"],
    "1 000 000 fcfa tss": ["Art. 170"],
    "500 000 fcfa tss": ["Art. 170"],
    "10 000 000 fcfa ca": ["Art. 170"],
    "societes forestieres": ["Art. 170"],
    "marketeurs petroliers": ["Art. 170"],
    "marge distribution": ["Art. 170"],

    "paiement tss": ["Art. 171"],
    "10-20 mars": ["Art. 171"],
    "imputation tss": ["Art. 171"],
    "deduction is tss": ["Art. 171"],
    "doublement tss": ["Art. 171"],
    "sanction tss": ["Art. 171"],

    "bons de caisse": ["Art. 171 sexies"],
    "bons nominatifs": ["Art. 171 sexies"],
    "bons au porteur": ["Art. 171 sexies", "Art. 171 novies"],
    "impot bons caisse": ["Art. 171 sexies"],
    "territorialite bons": ["Art. 171 septies"],
    "versement bons": ["Art. 171 octies"],
    "15 premiers jours": ["Art. 171 octies"],
    "taux bons nominatifs": ["Art. 171 novies"],
    "15% bons": ["Art. 171 novies"],
    "30% bons porteur": ["Art. 171 novies"],
    "non deductibilite bons": ["Art. 171 decies"],
    "sanctions bons": ["Art. 171 undecies"],

    "bons caisse declaration irpp": ["Art. 61", "Art. 171 novies"],
    "bons caisse irpp": ["Art. 61", "Art. 171 novies"],
    "precompte 15% bons": ["Art. 61", "Art. 171 novies"],
    "precompte liberatoire bons": ["Art. 61", "Art. 171 novies"],
    "declarer bons caisse": ["Art. 61", "Art. 171 novies"],
    "declaration irpp bons": ["Art. 61", "Art. 50", "Art. 58"],
    "bons caisse liberatoire": ["Art. 61", "Art. 97"],

    "tvs": ["Art. 171 A"],
    "taxe vehicules tourisme": ["Art. 171 A"],
    "vehicules tourisme societes": ["Art. 171 A"],
    "voiture societe": ["Art. 171 A"],
    "redevable tvs": ["Art. 171 B"],
    "credit-bail tvs": ["Art. 171 B"],
    "vehicules concernes tvs": ["Art. 171 C"],
    "voitures particulieres": ["Art. 171 C"],
    "exoneration tvs": ["Art. 171 D"],
    "10 ans tvs": ["Art. 171 D"],
    "periode imposition tvs": ["Art. 171 E"],
    "montant tvs": ["Art. 171 F"],
    "200 000 fcfa tvs": ["Art. 171 F"],
    "liquidation tvs": ["Art. 171 G"],
    "declaration tvs": ["Art. 171 I"],
    "1er mars tvs": ["Art. 171 I"],
    "sanctions tvs": ["Art. 171 J"],
    "non deductibilite tvs": ["Art. 171 K"],
    "obligations tvs": ["Art. 171 L"],

    "taxe apprentissage": ["Art. 141"],
    "tus": ["Art. 141"],
    "taxe unique salaires": ["Art. 141"],

    "precompte 15%": ["Art. 171 novies", "Art. 61"],
})

SYNONYMS = MappingProxyType({
    "tss": ["taxe speciale societes", "minimum fiscal", "minimum imposition"],
    "tvs": ["taxe vehicules tourisme", "taxe voitures societes", "vehicule entreprise"],
    "terrain agrement": ["jardin", "terrain autour construction"],
    "terrain a batir": ["terrain nu", "terrain vide", "terrain non construit"],
    "terrain inexploite": ["terrain en friche", "terrain non cultive"],
    "bons de caisse": ["bons nominatifs", "bons au porteur", "emprunts"],
    "bons caisse declaration irpp": ["precompte liberatoire", "irpp bons", "declarer revenus bons"],
    "precompte 15%": ["retenue liberatoire", "impot liberatoire bons"],
})

METADATA = MappingProxyType({
    "Art. 157": {
        "numero": "Art. 157",
        "titre": "Principe des taxes sur les terrains",
        "section": "Taxes terrains",
        "themes": ["taxes terrains", "agrement", "non mis en valeur", "a batir", "inexploites"],
        "priority": 1,
        "defines": ["taxes sur les terrains"],
    },

    "Art. 158": {
        "numero": "Art. 158",
        "titre": "Champ territorial",
        "section": "Taxes terrains",
        "themes": ["communes", "Brazzaville", "Pointe-Noire", "Loudima", "Loubomo"],
        "priority": 1,
        "defines": ["communes concernees"],
    },

    "Art. 159": {
        "numero": "Art. 159",
        "titre": "Definitions des terrains",
        "section": "Taxes terrains",
        "themes": ["definitions", "terrain agrement", "insuffisamment mis en valeur", "a batir"],
        "priority": 1,
        "defines": ["terrain agrement", "terrain insuffisamment mis en valeur", "terrain a batir"],
        "valeurs": ["5 fois superficie"],
    },

    "Art. 160": {
        "numero": "Art. 160",
        "titre": "Exploitation des terrains",
        "section": "Taxes terrains",
        "themes": ["exploitation", "jachere", "plantation", "concession"],
        "priority": 1,
        "defines": ["terrain exploite", "terrain inexploite"],
        "valeurs": ["3 ans", "51%"],
    },

    "Art. 161": {
        "numero": "Art. 161",
        "titre": "Exemptions permanentes",
        "section": "Taxes terrains",
        "themes": ["exemptions permanentes", "lotissement", "voie carrossable"],
        "priority": 1,
        "defines": ["exemptions terrains"],
        "valeurs": ["100 metres"],
    },

    "Art. 162": {
        "numero": "Art. 162",
        "titre": "Exemptions temporaires",
        "section": "Taxes terrains",
        "themes": ["exemptions temporaires", "programme investissement", "majoration"],
        "priority": 1,
        "defines": ["exemption temporaire terrain"],
        "valeurs": ["3 ans", "25%"],
    },

    "Art. 163": {
        "numero": "Art. 163",
        "titre": "Redevable",
        "section": "Taxes terrains",
        "themes": ["redevable", "proprietaire", "usufruitier", "emphyteote"],
        "priority": 2,
        "defines": ["redevable taxe terrain"],
    },

    "Art. 164": {
        "numero": "Art. 164",
        "titre": "Fait generateur",
        "section": "Taxes terrains",
        "themes": ["fait generateur", "1er janvier"],
        "priority": 2,
        "defines": ["fait generateur taxe terrain"],
    },

    "Art. 165": {
        "numero": "Art. 165",
        "titre": "Tarifs des taxes sur les terrains",
        "section": "Taxes terrains",
        "themes": ["tarifs", "taux", "categories", "classes"],
        "priority": 1,
        "defines": ["tarifs taxes terrains"],
        "valeurs": ["15 F/m2", "5 F/m2", "40 F/m2", "30 F/m2", "20 F/m2", "10 F/m2", "250 F/ha", "500 FCFA"],
    },

    "Art. 166": {
        "numero": "Art. 166",
        "titre": "Declarations",
        "section": "Taxes terrains",
        "themes": ["declarations", "obligations"],
        "priority": 2,
        "defines": ["declaration taxe terrain"],
        "valeurs": ["1er avril"],
    },

    "Art. 167": {
        "numero": "Art. 167",
        "titre": "Titre provisoire",
        "section": "Taxes terrains",
        "themes": ["titre provisoire", "titre definitif"],
        "priority": 2,
    },

    "Art. 167 bis": {
        "numero": "Art. 167 bis",
        "titre": "Exoneration titre",
        "section": "Taxes terrains",
        "themes": ["exoneration", "titre"],
        "priority": 2,
    },

    "Art. 168": {
        "numero": "Art. 168",
        "titre": "Champ de la TSS",
        "section": "TSS",
        "themes": ["TSS", "champ application", "societes"],
        "priority": 1,
        "defines": ["taxe speciale societes", "TSS"],
        "keywords": ["SA", "SARL", "SCA", "SNC"],
    },

    "Art. 169": {
        "numero": "Art. 169",
        "titre": "Exonerations TSS",
        "section": "TSS",
        "themes": ["exonerations", "agriculture", "peche", "elevage"],
        "priority": 1,
        "defines": ["exonerations TSS"],
        "valeurs": ["1er janvier 2010"],
    },

    "Art. 170": {
        "numero": "Art. 170",
        "titre": "Taux et minimum TSS",
        "section": "TSS",
        "themes": ["taux", "minimum", "deficitaire"],
        "priority": 1,
        "defines": ["taux TSS", "minimum TSS"],
        "valeurs": ["1%", "2%", "1 000 000 FCFA", "500 000 FCFA", "10 000 000 FCFA", "2 exercices"],
    },

    "Art. 171": {
        "numero": "Art. 171",
        "titre": "Paiement et imputation TSS",
        "section": "TSS",
        "themes": ["paiement", "imputation", "sanctions"],
        "priority": 1,
        "defines": ["paiement TSS", "imputation IS"],
        "valeurs": ["10-20 mars", "doublement"],
    },

    "Art. 171 sexies": {
        "numero": "Art. 171 sexies",
        "titre": "Champ bons de caisse",
        "section": "Bons de caisse",
        "themes": ["bons de caisse", "bons nominatifs", "bons au porteur"],
        "priority": 1,
        "defines": ["impot bons de caisse"],
    },

    "Art. 171 septies": {
        "numero": "Art. 171 septies",
        "titre": "Territorialite bons",
        "section": "Bons de caisse",
        "themes": ["territorialite", "emission"],
        "priority": 2,
    },

    "Art. 171 octies": {
        "numero": "Art. 171 octies",
        "titre": "Versement impot bons",
        "section": "Bons de caisse",
        "themes": ["versement", "paiement"],
        "priority": 1,
        "defines": ["versement impot bons"],
        "valeurs": ["15 premiers jours"],
    },

    "Art. 171 novies": {
        "numero": "Art. 171 novies",
        "titre": "Taux bons de caisse",
        "section": "Bons de caisse",
        "themes": ["taux", "nominatifs", "porteur"],
        "priority": 1,
        "defines": ["taux bons de caisse"],
        "valeurs": ["15%", "30%"],
    },

    "Art. 171 decies": {
        "numero": "Art. 171 decies",
        "titre": "Non-deductibilite bons",
        "section": "Bons de caisse",
        "themes": ["non-deductibilite", "IRPP", "IS"],
        "priority": 2,
    },

    "Art. 171 undecies": {
        "numero": "Art. 171 undecies",
        "titre": "Sanctions bons de caisse",
        "section": "Bons de caisse",
        "themes": ["sanctions", "penalites"],
        "priority": 2,
    },

    "Art. 171 A": {
        "numero": "Art. 171 A",
        "titre": "Principe TVS",
        "section": "TVS",
        "themes": ["TVS", "principe", "vehicules tourisme"],
        "priority": 1,
        "defines": ["taxe vehicules tourisme", "TVS"],
    },

    "Art. 171 B": {
        "numero": "Art. 171 B",
        "titre": "Redevable TVS",
        "section": "TVS",
        "themes": ["redevable", "societes", "credit-bail"],
        "priority": 1,
        "defines": ["redevable TVS"],
    },

    "Art. 171 C": {
        "numero": "Art. 171 C",
        "titre": "Vehicules concernes",
        "section": "TVS",
        "themes": ["vehicules concernes", "voitures particulieres"],
        "priority": 1,
        "defines": ["vehicules soumis TVS"],
    },

    "Art. 171 D": {
        "numero": "Art. 171 D",
        "titre": "Exoneration TVS",
        "section": "TVS",
        "themes": ["exoneration", "anciennete"],
        "priority": 1,
        "defines": ["exoneration TVS"],
        "valeurs": ["10 ans"],
    },

    "Art. 171 E": {
        "numero": "Art. 171 E",
        "titre": "Periode imposition TVS",
        "section": "TVS",
        "themes": ["periode imposition", "annee civile"],
        "priority": 2,
    },

    "Art. 171 F": {
        "numero": "Art. 171 F",
        "titre": "Montant TVS",
        "section": "TVS",
        "themes": ["montant", "tarif"],
        "priority": 1,
        "defines": ["montant TVS"],
        "valeurs": ["200 000 FCFA"],
    },

    "Art. 171 G": {
        "numero": "Art. 171 G",
        "titre": "Liquidation TVS",
        "section": "TVS",
        "themes": ["liquidation", "calcul"],
        "priority": 2,
    },

    "Art. 171 I": {
        "numero": "Art. 171 I",
        "titre": "Declaration TVS",
        "section": "TVS",
        "themes": ["declaration", "paiement"],
        "priority": 1,
        "defines": ["declaration TVS"],
        "valeurs": ["1er mars"],
    },

    "Art. 171 J": {
        "numero": "Art. 171 J",
        "titre": "Sanctions TVS",
        "section": "TVS",
        "themes": ["sanctions", "penalites"],
        "priority": 2,
    },

    "Art. 171 K": {
        "numero": "Art. 171 K",
        "titre": "Non-deductibilite TVS",
        "section": "TVS",
        "themes": ["non-deductibilite", "IS"],
        "priority": 2,
        "defines": ["non-deductibilite TVS"],
    },

    "Art. 171 L": {
        "numero": "Art. 171 L",
        "titre": "Obligations TVS",
        "section": "TVS",
        "themes": ["obligations", "registre"],
        "priority": 2,
    },
})

# Theme -> articles, most relevant first
THEME_PRIORITIES = MappingProxyType({
    "terrains": ["Art. 157", "Art. 159", "Art. 165", "Art. 161"],
    "tss": ["Art. 168", "Art. 170", "Art. 171"],
    "bons caisse": ["Art. 171 sexies", "Art. 171 novies", "Art. 171 octies"],
    "tvs": ["Art. 171 A", "Art. 171 F", "Art. 171 D", "Art. 171 I"],
    "taux": ["Art. 165", "Art. 170", "Art. 171 novies", "Art. 171 F"],
    "exonerations": ["Art. 161", "Art. 162", "Art. 169", "Art. 171 D"],
    "declarations": ["Art. 166", "Art. 171", "Art. 171 octies", "Art. 171 I"],
})
