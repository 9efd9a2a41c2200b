"""
CGI 2025, Chapter 4: Dispositions communes (Art. 127 to 140 bis)

Balance sheet revaluation, exclusive derogatory regimes and the mining
and petroleum deposit reconstitution provisions.
Metadata priority: 1 = most important, 5 = least.
"""

from types import MappingProxyType

KEYWORDS = MappingProxyType({
    "revision bilans": ["Art. 127"],
    "reevaluation": ["Art. 127"],
    "reevaluation bilans": ["Art. 127"],
    "plus-values reevaluation": ["Art. 127"],
    "31 decembre 1964": ["Art. 127"],

    "regimes derogatoires": ["Art. 127 quinquies"],
    "cpp": ["Art. 127 quinquies"],
    "contrat partage production": ["Art. 127 quinquies"],
    "convention etablissement": ["Art. 127 quinquies"],
    "regime privilegie": ["Art. 127 quinquies"],
    "1er janvier 2021": ["Art. 127 quinquies"],
    "non cumul regimes": ["Art. 127 quinquies"],

    "provision reconstitution gisements": ["Art. 133"],
    "prg": ["Art. 133"],
    "provision miniere": ["Art. 133"],
    "provision petroliere": ["Art. 133", "Art. 134"],
    "franchise impot": ["Art. 133"],
    "substances minerales concessibles": ["Art. 133"],

    "hydrocarbures": ["Art. 134"],
    "petrole": ["Art. 134"],
    "gaz naturel": ["Art. 134"],
    "petrole brut": ["Art. 134"],
    "27,5%": ["Art. 134"],
    "27.5%": ["Art. 134"],
    "27,50%": ["Art. 134"],
    "50% benefice": ["Art. 134"],
    "ventes produits marchands": ["Art. 134"],
    "benefice net imposable hydrocarbures": ["Art. 134"],
    "deficit hydrocarbures": ["Art. 134"],
    "5 exercices deficit": ["Art. 134"],
    "report deficit hydrocarbures": ["Art. 134"],
    "redevances minieres": ["Art. 134"],
    "subventions production": ["Art. 134"],

    "inscription bilan provision": ["Art. 135"],
    "passif bilan provision": ["Art. 135"],
    "rubrique speciale provision": ["Art. 135"],
    "dotations exercice": ["Art. 135"],

    "utilisation provision": ["Art. 136"],
    "delai 5 ans provision": ["Art. 136"],
    "emplois autorises provision": ["Art. 136"],
    "travaux recherche hydrocarbures": ["Art. 136"],
    "immobilisations recherche": ["Art. 136"],
    "participations societes recherche": ["Art. 136"],
    "gisement reconnu": ["Art. 136"],
    "titre exploitation": ["Art. 136"],

    "remploi conforme": ["Art. 137"],
    "exoneration definitive": ["Art. 137"],
    "virement reserve": ["Art. 137"],
    "defaut remploi": ["Art. 137"],
    "imposition complementaire": ["Art. 137"],
    "sanction provision": ["Art. 137"],

    "cession entreprise provision": ["Art. 138"],
    "cessation activite provision": ["Art. 138"],
    "fusion provision": ["Art. 138"],
    "deces exploitant provision": ["Art. 138"],
    "heritiers provision": ["Art. 138"],
    "continuation exploitation": ["Art. 138"],
    "societe absorbante": ["Art. 138"],

    "obligations declaratives hydrocarbures": ["Art. 139"],
    "renseignements provision": ["Art. 139"],
    "declaration resultats hydrocarbures": ["Art. 139"],

    "substances minerales": ["Art. 140"],
    "minerais": ["Art. 140"],
    "mines": ["Art. 140"],
    "metaux": ["Art. 140"],
    "fer": ["Art. 140"],
    "cuivre": ["Art. 140"],
    "mattes": ["Art. 140"],
    "speiss": ["Art. 140"],
    "alliages": ["Art. 140"],
    "15% provision": ["Art. 140"],
    "provision 15%": ["Art. 140"],
    "gisements existants": ["Art. 140"],
    "mise en exploitation": ["Art. 140"],
    "amelioration recuperation": ["Art. 140"],

    "non cumul provisions": ["Art. 140 bis"],
    "reductions investissement": ["Art. 140 bis"],
    "cumul avantages": ["Art. 140 bis"],

    "gisement": ["Art. 133", "Art. 136"],
    "remploi": ["Art. 137", "Art. 136"],
})

SYNONYMS = MappingProxyType({
    "provision reconstitution gisements": ["PRG", "provision miniere", "provision petroliere", "dotation gisements"],
    "hydrocarbures": ["petrole", "gaz naturel", "huile", "petrole brut", "ressources petrolieres"],
    "substances minerales": ["minerais", "mines", "metaux", "extraction miniere"],
    "gisement": ["gite", "reserves de gisement"],
    "cpp": ["contrat de partage de production", "contrat petrolier"],
    "reevaluation": ["revision bilans", "plus-values reevaluation", "actualisation"],
    "remploi": ["utilisation provision", "affectation provision", "emploi provision"],
})

METADATA = MappingProxyType({
    "Art. 127": {
        "numero": "Art. 127",
        "titre": "Revision des bilans",
        "section": "Revision des bilans",
        "themes": ["reevaluation", "plus-values", "bilans"],
        "priority": 1,
        "defines": ["plus-values reevaluation"],
        "valeurs": ["31 decembre 1964"],
    },

    "Art. 127 bis": {
        "numero": "Art. 127 bis",
        "titre": "Article abroge",
        "section": "Revision des bilans",
        "themes": ["abroge"],
        "priority": 5,
        "abroge": True,
    },

    "Art. 127 quater": {
        "numero": "Art. 127 quater",
        "titre": "Article abroge",
        "section": "Revision des bilans",
        "themes": ["abroge"],
        "priority": 5,
        "abroge": True,
    },

    "Art. 127 quinquies": {
        "numero": "Art. 127 quinquies",
        "titre": "Exclusion des regimes derogatoires multiples",
        "section": "Revision des bilans",
        "themes": ["regimes derogatoires", "CPP", "convention etablissement", "non-cumul"],
        "priority": 1,
        "defines": ["exclusion regimes multiples"],
        "valeurs": ["1er janvier 2021"],
    },

    "Art. 128": {
        "numero": "Art. 128",
        "titre": "Article abroge",
        "section": "Reductions investissement",
        "themes": ["abroge", "investissement"],
        "priority": 5,
        "abroge": True,
    },

    "Art. 129": {
        "numero": "Art. 129",
        "titre": "Article abroge",
        "section": "Reductions investissement",
        "themes": ["abroge", "investissement"],
        "priority": 5,
        "abroge": True,
    },

    "Art. 130": {
        "numero": "Art. 130",
        "titre": "Article abroge",
        "section": "Reductions investissement",
        "themes": ["abroge", "investissement"],
        "priority": 5,
        "abroge": True,
    },

    "Art. 131": {
        "numero": "Art. 131",
        "titre": "Article abroge",
        "section": "Reductions investissement",
        "themes": ["abroge", "investissement"],
        "priority": 5,
        "abroge": True,
    },

    "Art. 132": {
        "numero": "Art. 132",
        "titre": "Article abroge",
        "section": "Reductions investissement",
        "themes": ["abroge", "investissement"],
        "priority": 5,
        "abroge": True,
    },

    "Art. 133": {
        "numero": "Art. 133",
        "titre": "Provision pour reconstitution des gisements - Principe",
        "section": "Hydrocarbures",
        "themes": ["provision reconstitution gisements", "PRG", "franchise impot"],
        "priority": 1,
        "defines": ["provision reconstitution gisements"],
    },

    "Art. 134": {
        "numero": "Art. 134",
        "titre": "Limites de la provision hydrocarbures",
        "section": "Hydrocarbures",
        "themes": ["provision", "limites", "taux", "ventes", "benefice net"],
        "priority": 1,
        "defines": ["limites provision hydrocarbures"],
        "valeurs": ["27,50%", "50%", "5 exercices"],
        "keywords": ["petrole", "gaz naturel", "deficit", "report"],
    },

    "Art. 135": {
        "numero": "Art. 135",
        "titre": "Inscription au bilan",
        "section": "Hydrocarbures",
        "themes": ["bilan", "passif", "comptabilite"],
        "priority": 2,
        "defines": ["inscription provision bilan"],
    },

    "Art. 136": {
        "numero": "Art. 136",
        "titre": "Utilisation de la provision hydrocarbures",
        "section": "Hydrocarbures",
        "themes": ["utilisation provision", "emplois autorises", "recherche", "participations"],
        "priority": 1,
        "defines": ["emplois autorises provision"],
        "valeurs": ["5 ans"],
        "keywords": ["travaux recherche", "immobilisations", "gisement reconnu"],
    },

    "Art. 137": {
        "numero": "Art. 137",
        "titre": "Remploi et sanctions",
        "section": "Hydrocarbures",
        "themes": ["remploi", "exoneration", "sanctions", "imposition complementaire"],
        "priority": 1,
        "defines": ["remploi conforme", "defaut remploi"],
        "keywords": ["exoneration definitive", "virement reserve"],
    },

    "Art. 138": {
        "numero": "Art. 138",
        "titre": "Cession, cessation et deces",
        "section": "Hydrocarbures",
        "themes": ["cession", "cessation", "deces", "fusion", "continuation"],
        "priority": 1,
        "defines": ["sort provision cession"],
        "keywords": ["heritiers", "societe absorbante", "continuation exploitation"],
    },

    "Art. 139": {
        "numero": "Art. 139",
        "titre": "Obligations declaratives",
        "section": "Hydrocarbures",
        "themes": ["obligations declaratives", "renseignements", "declaration"],
        "priority": 2,
        "defines": ["obligations declaratives hydrocarbures"],
    },

    "Art. 140": {
        "numero": "Art. 140",
        "titre": "Provision substances minerales",
        "section": "Substances minerales",
        "themes": ["provision", "minerais", "substances minerales", "mines"],
        "priority": 1,
        "defines": ["provision substances minerales"],
        "valeurs": ["15%", "50%"],
        "keywords": ["mattes", "speiss", "metaux", "alliages", "gisements existants"],
    },

    "Art. 140 bis": {
        "numero": "Art. 140 bis",
        "titre": "Non-cumul avec reductions investissement",
        "section": "Substances minerales",
        "themes": ["non-cumul", "reductions investissement"],
        "priority": 1,
        "defines": ["non-cumul provisions"],
    },
})

# Theme -> articles, most relevant first
THEME_PRIORITIES = MappingProxyType({
    "hydrocarbures": ["Art. 134", "Art. 136", "Art. 137", "Art. 133"],
    "substances minerales": ["Art. 140", "Art. 140 bis"],
    "provisions": ["Art. 133", "Art. 134", "Art. 140"],
    "utilisation": ["Art. 136", "Art. 140"],
    "sanctions": ["Art. 137"],
    "cession": ["Art. 138"],
    "regimes derogatoires": ["Art. 127 quinquies"],
    "reevaluation": ["Art. 127"],
})
