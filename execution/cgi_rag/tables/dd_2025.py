"""
CGI 2025, Chapter 6: Dispositions diverses (Art. 172 to 185)

Weighted keyword table: (article, weight) pairs, weight in [0, 1].
Metadata entries use a descending priority scale (5 = most important);
the catalog converts it on load.
"""

from types import MappingProxyType

KEYWORDS = MappingProxyType({
    "retenue source": [
        ("Art. 172", 1.0),
        ("Art. 183", 0.8),
        ("Art. 185 ter-A", 0.7),
    ],
    "retenue à la source": [
        ("Art. 172", 1.0),
        ("Art. 183", 0.8),
        ("Art. 185 ter-A", 0.7),
    ],
    "ras": [
        ("Art. 172", 0.9),
        ("Art. 183", 0.8),
        ("Art. 185 ter-A", 0.8),
    ],
    "withholding": [
        ("Art. 172", 0.8),
        ("Art. 185 ter-A", 0.9),
    ],
    "employeur": [
        ("Art. 172", 1.0),
        ("Art. 173", 0.9),
        ("Art. 174", 0.8),
        ("Art. 176", 0.8),
    ],
    "employeurs": [
        ("Art. 172", 1.0),
        ("Art. 173", 0.9),
        ("Art. 174", 0.8),
    ],
    "débirentier": [
        ("Art. 172", 1.0),
        ("Art. 173", 0.9),
    ],
    "débirentiers": [
        ("Art. 172", 1.0),
        ("Art. 173", 0.9),
    ],
    "prélèvement irpp": [
        ("Art. 172", 1.0),
    ],
    "prélèvement salarié": [
        ("Art. 172", 1.0),
    ],
    "salaires": [
        ("Art. 172", 0.9),
        ("Art. 176", 1.0),
        ("Art. 185", 0.7),
    ],
    "traitements": [
        ("Art. 172", 0.9),
        ("Art. 176", 0.9),
    ],
    "pensions": [
        ("Art. 172", 0.8),
        ("Art. 176", 0.8),
        ("Art. 185", 0.8),
    ],
    "rentes": [
        ("Art. 172", 0.9),
        ("Art. 176", 0.8),
    ],
    "rentes viagères": [
        ("Art. 172", 1.0),
    ],

    "versement retenue": [
        ("Art. 173", 1.0),
    ],
    "versement retenues": [
        ("Art. 173", 1.0),
    ],
    "versement mensuel": [
        ("Art. 173", 1.0),
    ],
    "versement trimestriel": [
        ("Art. 173", 1.0),
    ],
    "20 jours": [
        ("Art. 173", 1.0),
        ("Art. 183", 0.7),
    ],
    "vingt jours": [
        ("Art. 173", 1.0),
    ],
    "mois suivant": [
        ("Art. 173", 0.9),
        ("Art. 183", 0.8),
        ("Art. 183 bis", 0.8),
    ],
    "5 personnes": [
        ("Art. 173", 1.0),
    ],
    "cinq personnes": [
        ("Art. 173", 1.0),
    ],
    "trimestre": [
        ("Art. 173", 0.9),
    ],
    "recette impôts": [
        ("Art. 173", 0.9),
    ],

    "livre paie": [
        ("Art. 174", 1.0),
    ],
    "livre de paie": [
        ("Art. 174", 1.0),
    ],
    "registre paie": [
        ("Art. 174", 0.9),
    ],
    "avantages nature": [
        ("Art. 174", 0.9),
        ("Art. 176", 0.8),
    ],
    "avantages en nature": [
        ("Art. 174", 0.9),
        ("Art. 176", 0.8),
    ],
    "bordereau versement": [
        ("Art. 174", 1.0),
    ],
    "enfants charge": [
        ("Art. 174", 0.8),
        ("Art. 176", 0.8),
    ],
    "conservation documents": [
        ("Art. 174", 0.9),
    ],
    "4 ans": [
        ("Art. 174", 0.9),
    ],
    "quatre ans": [
        ("Art. 174", 0.9),
    ],

    "décès employeur": [
        ("Art. 175", 1.0),
    ],
    "cessation employeur": [
        ("Art. 175", 0.9),
        ("Art. 181", 0.8),
    ],
    "15 jours": [
        ("Art. 175", 0.9),
        ("Art. 183 ter", 0.8),
    ],

    "état annuel": [
        ("Art. 176", 1.0),
        ("Art. 180", 0.8),
    ],
    "état annuel salaires": [
        ("Art. 176", 1.0),
    ],
    "déclaration annuelle salaires": [
        ("Art. 176", 1.0),
    ],
    "janvier": [
        ("Art. 176", 0.9),
        ("Art. 180", 0.8),
    ],
    "120000": [
        ("Art. 176", 1.0),
    ],
    "120 000": [
        ("Art. 176", 1.0),
    ],
    "déclaration nominative": [
        ("Art. 176", 1.0),
    ],
    "récapitulatif annuel": [
        ("Art. 176", 0.9),
    ],
    "niu": [
        ("Art. 176", 0.8),
    ],
    "numéro identification": [
        ("Art. 176", 0.8),
    ],

    "3 personnes": [
        ("Art. 177", 1.0),
    ],
    "trois personnes": [
        ("Art. 177", 1.0),
    ],
    "plus 3 personnes": [
        ("Art. 177", 1.0),
    ],
    "déclaration mensuelle": [
        ("Art. 177", 1.0),
    ],

    "fiche individuelle": [
        ("Art. 177 bis", 1.0),
    ],
    "fiche salarié": [
        ("Art. 177 bis", 0.9),
    ],

    "cession": [
        ("Art. 178", 0.8),
        ("Art. 181", 0.9),
    ],
    "cessation": [
        ("Art. 178", 0.8),
        ("Art. 181", 0.9),
    ],
    "6 mois": [
        ("Art. 178", 1.0),
    ],
    "six mois": [
        ("Art. 178", 1.0),
    ],
    "31 janvier": [
        ("Art. 178", 0.9),
    ],

    "rémunérations diverses": [
        ("Art. 179", 1.0),
    ],
    "jetons présence": [
        ("Art. 179", 1.0),
    ],
    "tantièmes": [
        ("Art. 179", 1.0),
    ],
    "allocations forfaitaires": [
        ("Art. 179", 0.9),
    ],
    "remboursement frais": [
        ("Art. 179", 0.9),
    ],
    "5000": [
        ("Art. 179", 0.8),
        ("Art. 183 bis", 0.8),
    ],
    "5 000": [
        ("Art. 179", 0.8),
        ("Art. 183 bis", 0.8),
    ],

    "état global": [
        ("Art. 180", 1.0),
    ],
    "montant global": [
        ("Art. 180", 0.9),
    ],

    "régularisation": [
        ("Art. 181", 1.0),
    ],
    "10 jours": [
        ("Art. 181", 1.0),
    ],
    "dix jours": [
        ("Art. 181", 1.0),
    ],
    "trop perçu": [
        ("Art. 181", 0.9),
        ("Art. 182", 0.9),
    ],

    "réclamation": [
        ("Art. 182", 1.0),
    ],
    "1er avril": [
        ("Art. 182", 1.0),
    ],
    "premier avril": [
        ("Art. 182", 1.0),
    ],
    "restitution": [
        ("Art. 182", 0.9),
    ],

    "retenue 10": [
        ("Art. 183", 1.0),
        ("Art. 185 ter-C", 0.7),
    ],
    "retenue 10%": [
        ("Art. 183", 1.0),
    ],
    "10%": [
        ("Art. 183", 0.9),
        ("Art. 185 ter-C", 0.8),
    ],
    "10 pourcent": [
        ("Art. 183", 0.9),
    ],
    "commissions": [
        ("Art. 183", 1.0),
        ("Art. 185 ter-C", 0.6),
    ],
    "courtages": [
        ("Art. 183", 1.0),
    ],
    "ristournes": [
        ("Art. 183", 1.0),
    ],
    "honoraires": [
        ("Art. 183", 1.0),
    ],
    "droits auteur": [
        ("Art. 183", 1.0),
        ("Art. 183 bis", 0.9),
    ],
    "droits d'auteur": [
        ("Art. 183", 1.0),
        ("Art. 183 bis", 0.9),
    ],
    "vacations": [
        ("Art. 183", 1.0),
    ],
    "gratifications": [
        ("Art. 183", 0.9),
    ],
    "rémunérations occasionnelles": [
        ("Art. 183", 1.0),
    ],
    "prestations occasionnelles": [
        ("Art. 183", 0.9),
    ],
    "défaut retenue": [
        ("Art. 183", 1.0),
    ],
    "défaut reversement": [
        ("Art. 183", 1.0),
    ],
    "amende retenue": [
        ("Art. 183", 1.0),
    ],
    "intérêt 5%": [
        ("Art. 183", 1.0),
    ],
    "5% mois": [
        ("Art. 183", 1.0),
    ],

    "spectacles": [
        ("Art. 183 bis", 1.0),
    ],
    "manifestations": [
        ("Art. 183 bis", 1.0),
    ],
    "représentations": [
        ("Art. 183 bis", 1.0),
    ],
    "artistes": [
        ("Art. 183 bis", 1.0),
    ],
    "auteurs": [
        ("Art. 183 bis", 0.9),
        ("Art. 183", 0.8),
    ],
    "compositeurs": [
        ("Art. 183 bis", 1.0),
    ],

    "commissionnaires douanes": [
        ("Art. 183 ter", 1.0),
    ],
    "commissionnaire douane": [
        ("Art. 183 ter", 1.0),
    ],
    "transitaires": [
        ("Art. 183 ter", 0.9),
    ],
    "déclarant douane": [
        ("Art. 183 ter", 0.9),
    ],
    "avant 15": [
        ("Art. 183 ter", 0.9),
    ],
    "500000": [
        ("Art. 183 ter", 1.0),
    ],
    "500 000": [
        ("Art. 183 ter", 1.0),
    ],
    "amende 500000": [
        ("Art. 183 ter", 1.0),
    ],

    "snc": [
        ("Art. 184", 1.0),
    ],
    "société nom collectif": [
        ("Art. 184", 1.0),
    ],
    "commandite simple": [
        ("Art. 184", 1.0),
    ],
    "associés gérants": [
        ("Art. 184", 1.0),
    ],
    "répartition bénéfices": [
        ("Art. 184", 1.0),
    ],
    "parts bénéfices": [
        ("Art. 184", 0.9),
    ],
    "résultat fiscal": [
        ("Art. 184", 0.8),
    ],

    "source étrangère": [
        ("Art. 185", 1.0),
    ],
    "revenus étrangers": [
        ("Art. 185", 1.0),
    ],
    "revenus étranger": [
        ("Art. 185", 1.0),
    ],
    "pensions étrangères": [
        ("Art. 185", 1.0),
    ],
    "salaires étrangers": [
        ("Art. 185", 1.0),
    ],
    "renseignements source": [
        ("Art. 185", 0.9),
    ],

    "126 ter": [
        ("Art. 185 bis", 1.0),
    ],
    "article 126 ter": [
        ("Art. 185 bis", 1.0),
    ],
    "sociétés étrangères pétrolières": [
        ("Art. 185 bis", 1.0),
    ],
    "sous-traitants pétroliers": [
        ("Art. 185 bis", 1.0),
    ],
    "sous-traitant pétrolier": [
        ("Art. 185 bis", 1.0),
    ],
    "prestataires pétroliers": [
        ("Art. 185 bis", 0.9),
    ],
    "régime 126 ter": [
        ("Art. 185 bis", 1.0),
    ],
    "liste salariés": [
        ("Art. 185 bis", 0.9),
    ],

    "non-résidents": [
        ("Art. 185 ter-A", 1.0),
        ("Art. 185 ter-B", 0.8),
        ("Art. 185 ter-C", 0.9),
    ],
    "non résidents": [
        ("Art. 185 ter-A", 1.0),
        ("Art. 185 ter-B", 0.8),
        ("Art. 185 ter-C", 0.9),
    ],
    "non-résident": [
        ("Art. 185 ter-A", 1.0),
        ("Art. 185 ter-C", 0.9),
    ],
    "sans domicile fiscal": [
        ("Art. 185 ter-A", 1.0),
    ],
    "personnes étrangères": [
        ("Art. 185 ter-A", 0.9),
    ],
    "redevances": [
        ("Art. 185 ter-A", 0.9),
        ("Art. 185 ter-C", 0.9),
    ],
    "royalties": [
        ("Art. 185 ter-A", 0.9),
        ("Art. 185 ter-C", 0.8),
    ],
    "brevets": [
        ("Art. 185 ter-A", 0.9),
    ],
    "marques": [
        ("Art. 185 ter-A", 0.9),
    ],
    "procédés secrets": [
        ("Art. 185 ter-A", 1.0),
    ],
    "know-how": [
        ("Art. 185 ter-A", 0.9),
    ],
    "assistance technique": [
        ("Art. 185 ter-A", 1.0),
    ],
    "assistance financière": [
        ("Art. 185 ter-A", 1.0),
    ],
    "assistance comptable": [
        ("Art. 185 ter-A", 1.0),
    ],
    "location équipements": [
        ("Art. 185 ter-A", 0.9),
    ],
    "location matériel": [
        ("Art. 185 ter-A", 0.9),
    ],
    "trading": [
        ("Art. 185 ter-A", 0.9),
    ],
    "commercialisation hydrocarbures": [
        ("Art. 185 ter-A", 1.0),
    ],
    "frais commercialisation": [
        ("Art. 185 ter-A", 0.9),
    ],
    "propriété intellectuelle": [
        ("Art. 185 ter-A", 0.9),
    ],

    "débiteur résident": [
        ("Art. 185 ter-B", 1.0),
    ],
    "payeur résident": [
        ("Art. 185 ter-B", 0.9),
    ],
    "obligation retenue non-résident": [
        ("Art. 185 ter-B", 1.0),
    ],

    "taux non-résidents": [
        ("Art. 185 ter-C", 1.0),
    ],
    "taux retenue non-résidents": [
        ("Art. 185 ter-C", 1.0),
    ],
    "20%": [
        ("Art. 185 ter-C", 1.0),
    ],
    "20 pourcent": [
        ("Art. 185 ter-C", 1.0),
    ],
    "vingt pourcent": [
        ("Art. 185 ter-C", 1.0),
    ],
    "taux général": [
        ("Art. 185 ter-C", 0.9),
    ],
    "prestations ponctuelles": [
        ("Art. 185 ter-C", 0.9),
    ],
    "redevances audiovisuelles": [
        ("Art. 185 ter-C", 1.0),
    ],
    "streaming": [
        ("Art. 185 ter-C", 0.9),
    ],
    "cemac": [
        ("Art. 185 ter-C", 0.9),
    ],
    "résidents cemac": [
        ("Art. 185 ter-C", 1.0),
    ],
    "5,75%": [
        ("Art. 185 ter-C", 1.0),
    ],
    "5.75%": [
        ("Art. 185 ter-C", 1.0),
    ],
    "zone angola": [
        ("Art. 185 ter-C", 1.0),
    ],
    "angola": [
        ("Art. 185 ter-C", 0.9),
    ],
    "affrètement": [
        ("Art. 185 ter-C", 1.0),
    ],
    "location navires": [
        ("Art. 185 ter-C", 1.0),
    ],
    "location aéronefs": [
        ("Art. 185 ter-C", 1.0),
    ],
    "transport maritime": [
        ("Art. 185 ter-C", 0.9),
    ],
    "transport aérien": [
        ("Art. 185 ter-C", 0.9),
    ],
    "agents portuaires": [
        ("Art. 185 ter-C", 1.0),
    ],
    "5%": [
        ("Art. 185 ter-C", 0.9),
        ("Art. 183", 0.7),
    ],
    "cinq pourcent": [
        ("Art. 185 ter-C", 0.9),
    ],
    "intérêts emprunts": [
        ("Art. 185 ter-C", 1.0),
    ],
    "emprunts pétroliers": [
        ("Art. 185 ter-C", 1.0),
    ],
    "exploration pétrolière": [
        ("Art. 185 ter-C", 0.9),
    ],
    "exploitation pétrolière": [
        ("Art. 185 ter-C", 0.9),
    ],

    "imputation retenue": [
        ("Art. 185 ter-D", 1.0),
    ],
    "crédit impôt": [
        ("Art. 185 ter-D", 0.9),
    ],
    "déduction retenue": [
        ("Art. 185 ter-D", 0.9),
    ],

    "procédure versement": [
        ("Art. 185 ter-E", 1.0),
    ],
    "modalités versement": [
        ("Art. 185 ter-E", 1.0),
    ],

    "exclusions non-résidents": [
        ("Art. 185 ter-F", 1.0),
    ],
    "exonération non-résidents": [
        ("Art. 185 ter-F", 0.9),
    ],
    "dérogation retenue": [
        ("Art. 185 ter-F", 0.9),
    ],
})

SYNONYMS = MappingProxyType({
    "retenue à la source": ["ras", "prélèvement", "withholding", "retenue"],
    "employeur": ["débirentier", "payeur"],
    "non-résident": ["étranger", "sans domicile fiscal", "personne étrangère"],
    "commissions": ["courtages", "ristournes"],
    "honoraires": ["vacations", "rémunérations occasionnelles"],
    "redevances": ["royalties", "licences", "droits usage"],
    "assistance technique": ["consulting", "conseil technique"],
    "snc": ["société en nom collectif"],
    "cemac": ["communauté économique afrique centrale"],
    "affrètement": ["location navires", "charter"],
})

METADATA_PRIORITY_DESCENDING = True

METADATA = (
    {
        "numero": "Art. 172",
        "titre": "Retenue à la source par les employeurs et débirentiers",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["retenue source", "employeur", "irpp", "salaires"],
        "mots_cles": ["retenue", "employeur", "débirentier", "prélèvement", "salaires", "traitements", "pensions", "rentes viagères"],
        "references_croisees": ["Art. 36", "Art. 37", "Art. 185 ter", "Art. 126 quater B-1", "Art. 183", "Art. 39", "Art. 174"],
        "priority": 5,
    },
    {
        "numero": "Art. 173",
        "titre": "Versement des retenues à la recette des impôts",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["versement", "retenue", "délais"],
        "mots_cles": ["versement", "20 jours", "mensuel", "trimestriel", "5 personnes", "recette impôts"],
        "valeurs_cles": {
            "delai_mensuel": "20 jours",
            "seuil_trimestriel": "5 personnes",
        },
        "references_croisees": ["Art. 172"],
        "priority": 5,
    },
    {
        "numero": "Art. 174",
        "titre": "Livre de paie - Mentions obligatoires",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["livre paie", "obligations", "conservation"],
        "mots_cles": ["livre paie", "avantages nature", "bordereau", "enfants charge", "conservation", "4 ans"],
        "valeurs_cles": {
            "conservation": "4 ans",
        },
        "references_croisees": ["Art. 171 bis", "Art. 185"],
        "priority": 4,
    },
    {
        "numero": "Art. 175",
        "titre": "Décès de l'employeur - Versement retenues",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["décès", "employeur", "versement"],
        "mots_cles": ["décès", "employeur", "15 jours", "cessation"],
        "valeurs_cles": {
            "delai_deces": "15 premiers jours du mois suivant",
        },
        "priority": 3,
    },
    {
        "numero": "Art. 176",
        "titre": "État annuel des salaires",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["état annuel", "déclaration", "salaires"],
        "mots_cles": ["état annuel", "janvier", "120 000 FCFA", "nominatif", "NIU", "récapitulatif"],
        "valeurs_cles": {
            "delai": "janvier",
            "seuil_nominatif": "120 000 FCFA",
        },
        "references_croisees": ["Art. 39"],
        "priority": 5,
    },
    {
        "numero": "Art. 177",
        "titre": "Déclaration mensuelle - Plus de 3 personnes",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["déclaration mensuelle", "seuil personnel"],
        "mots_cles": ["3 personnes", "mensuelle", "déclaration"],
        "valeurs_cles": {
            "seuil_personnel": "plus de 3 personnes",
        },
        "references_croisees": ["Art. 176"],
        "priority": 4,
    },
    {
        "numero": "Art. 177 bis",
        "titre": "Fiche individuelle des salariés",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["fiche individuelle", "salarié"],
        "mots_cles": ["fiche individuelle", "salarié", "employé"],
        "references_croisees": ["Art. 176"],
        "priority": 3,
    },
    {
        "numero": "Art. 178",
        "titre": "État annuel en cas de cession, cessation ou décès",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["cession", "cessation", "décès", "état annuel"],
        "mots_cles": ["cession", "cessation", "décès", "6 mois", "31 janvier"],
        "valeurs_cles": {
            "delai_deces": "6 mois (max 31 janvier suivant)",
        },
        "references_croisees": ["Art. 176"],
        "priority": 3,
    },
    {
        "numero": "Art. 179",
        "titre": "Déclaration des rémunérations diverses",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["rémunérations diverses", "jetons présence", "tantièmes"],
        "mots_cles": ["jetons présence", "tantièmes", "allocations forfaitaires", "remboursement frais", "5 000 FCFA"],
        "valeurs_cles": {
            "seuil": "5 000 FCFA/an",
        },
        "references_croisees": ["Art. 14", "Art. 15", "Art. 42", "Art. 107"],
        "priority": 4,
    },
    {
        "numero": "Art. 180",
        "titre": "État global des rémunérations diverses",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["état global", "récapitulatif"],
        "mots_cles": ["état global", "janvier", "montant global"],
        "references_croisees": ["Art. 176"],
        "priority": 3,
    },
    {
        "numero": "Art. 181",
        "titre": "Régularisation en cas de cession ou cessation",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["régularisation", "cession", "cessation"],
        "mots_cles": ["régularisation", "cession", "cessation", "10 jours", "trop perçu"],
        "valeurs_cles": {
            "delai": "10 jours",
        },
        "references_croisees": ["Art. 176"],
        "priority": 3,
    },
    {
        "numero": "Art. 182",
        "titre": "Réclamation du salarié - Trop perçu",
        "section": 1,
        "section_titre": "Obligations des employeurs et débirentiers",
        "themes": ["réclamation", "restitution", "trop perçu"],
        "mots_cles": ["réclamation", "1er avril", "trop perçu", "restitution"],
        "valeurs_cles": {
            "delai_reclamation": "avant le 1er avril",
        },
        "references_croisees": ["Art. 382"],
        "priority": 3,
    },

    {
        "numero": "Art. 183",
        "titre": "Retenue 10% sur commissions, honoraires, droits d'auteur",
        "section": 2,
        "section_titre": "Obligations des personnes versant commissions, courtages, ristournes, honoraires et droits d'auteurs",
        "themes": ["retenue 10%", "commissions", "honoraires", "sanctions"],
        "mots_cles": ["10%", "commissions", "courtages", "ristournes", "honoraires", "droits auteur", "vacations", "gratifications", "amende", "intérêt 5%"],
        "valeurs_cles": {
            "taux": "10%",
            "sanction_defaut_retenue": "amende égale au prélèvement",
            "sanction_defaut_reversement": "amende + intérêt 5%/mois",
        },
        "references_croisees": ["Art. 76-80", "Art. 173-176", "Art. 379"],
        "priority": 5,
    },
    {
        "numero": "Art. 183 bis",
        "titre": "Droits d'auteur sur spectacles et manifestations",
        "section": 2,
        "section_titre": "Obligations des personnes versant commissions, courtages, ristournes, honoraires et droits d'auteurs",
        "themes": ["droits auteur", "spectacles", "artistes"],
        "mots_cles": ["spectacles", "manifestations", "représentations", "artistes", "auteurs", "compositeurs", "15 jours", "5 000 FCFA"],
        "valeurs_cles": {
            "delai": "15 jours",
            "seuil": "5 000 FCFA/an",
        },
        "references_croisees": ["Art. 47"],
        "priority": 4,
    },
    {
        "numero": "Art. 183 ter",
        "titre": "Commissionnaires en douane - Déclaration",
        "section": 2,
        "section_titre": "Obligations des personnes versant commissions, courtages, ristournes, honoraires et droits d'auteurs",
        "themes": ["commissionnaires douane", "transitaires", "sanctions"],
        "mots_cles": ["commissionnaires douanes", "transitaires", "avant 15", "500 000 FCFA", "amende"],
        "valeurs_cles": {
            "delai": "avant le 15 du mois suivant",
            "amende": "500 000 FCFA",
        },
        "priority": 4,
    },

    {
        "numero": "Art. 184",
        "titre": "Déclaration de répartition des bénéfices - SNC",
        "section": 3,
        "section_titre": "Déclaration des rémunérations d'associés et parts de bénéfices",
        "themes": ["snc", "commandite simple", "répartition bénéfices"],
        "mots_cles": ["snc", "société nom collectif", "commandite simple", "associés gérants", "répartition bénéfices", "parts bénéfices"],
        "priority": 4,
    },

    {
        "numero": "Art. 185",
        "titre": "Renseignements sur revenus de source étrangère",
        "section": 4,
        "section_titre": "Renseignements à fournir par les bénéficiaires de revenus de source étrangère",
        "themes": ["source étrangère", "revenus étrangers"],
        "mots_cles": ["source étrangère", "revenus étrangers", "pensions étrangères", "salaires étrangers"],
        "priority": 3,
    },

    {
        "numero": "Art. 185 bis",
        "titre": "Obligations des sociétés étrangères visées à l'article 126 ter",
        "section": 5,
        "section_titre": "Dispositions particulières applicables aux sociétés visées à l'article 126 ter",
        "themes": ["sociétés étrangères", "sous-traitants pétroliers", "126 ter"],
        "mots_cles": ["126 ter", "sociétés étrangères", "sous-traitants pétroliers", "prestataires pétroliers", "liste salariés"],
        "references_croisees": ["Art. 126 ter", "Art. 172", "Art. 75"],
        "priority": 4,
    },

    {
        "numero": "Art. 185 ter-A",
        "titre": "Champ d'application - Retenue sur non-résidents",
        "section": 6,
        "section_titre": "Dispositions particulières applicables aux non-résidents",
        "themes": ["non-résidents", "champ application", "redevances"],
        "mots_cles": ["non-résidents", "redevances", "royalties", "brevets", "marques", "procédés secrets", "assistance technique", "assistance financière", "assistance comptable", "location équipements", "trading", "propriété intellectuelle"],
        "references_croisees": ["Art. 185 ter"],
        "priority": 5,
    },
    {
        "numero": "Art. 185 ter-B",
        "titre": "Débiteur résident - Obligation de retenue",
        "section": 6,
        "section_titre": "Dispositions particulières applicables aux non-résidents",
        "themes": ["débiteur résident", "obligation retenue"],
        "mots_cles": ["débiteur résident", "payeur résident", "obligation retenue"],
        "priority": 4,
    },
    {
        "numero": "Art. 185 ter-C",
        "titre": "Taux de retenue sur non-résidents",
        "section": 6,
        "section_titre": "Dispositions particulières applicables aux non-résidents",
        "themes": ["taux retenue", "non-résidents", "20%", "10%", "5,75%", "5%"],
        "mots_cles": ["20%", "10%", "5,75%", "5%", "cemac", "zone angola", "affrètement", "navires", "aéronefs", "intérêts emprunts", "pétroliers", "streaming", "audiovisuel"],
        "valeurs_cles": {
            "taux_general": "20%",
            "taux_moyen": "10%",
            "taux_reduit": "5,75%",
            "taux_specifique": "5%",
        },
        "references_croisees": ["Art. 185 ter-A"],
        "priority": 5,
    },
    {
        "numero": "Art. 185 ter-D",
        "titre": "Imputation de la retenue",
        "section": 6,
        "section_titre": "Dispositions particulières applicables aux non-résidents",
        "themes": ["imputation", "crédit impôt"],
        "mots_cles": ["imputation", "crédit impôt", "déduction retenue"],
        "priority": 3,
    },
    {
        "numero": "Art. 185 ter-E",
        "titre": "Procédure de versement",
        "section": 6,
        "section_titre": "Dispositions particulières applicables aux non-résidents",
        "themes": ["procédure", "versement", "modalités"],
        "mots_cles": ["procédure versement", "modalités"],
        "references_croisees": ["Art. 185 ter-A"],
        "priority": 4,
    },
    {
        "numero": "Art. 185 ter-F",
        "titre": "Exclusions du régime de retenue",
        "section": 6,
        "section_titre": "Dispositions particulières applicables aux non-résidents",
        "themes": ["exclusions", "exonérations", "dérogations"],
        "mots_cles": ["exclusions", "exonération", "dérogation"],
        "priority": 3,
    },
    {
        "numero": "Art. 185 quater",
        "titre": "Article abrogé",
        "section": 6,
        "section_titre": "Dispositions particulières applicables aux non-résidents",
        "themes": [],
        "mots_cles": [],
        "abroge": True,
        "priority": 0,
    },
)

THEME_PRIORITIES = MappingProxyType({
    "retenue source": ["Art. 172", "Art. 173", "Art. 183"],
    "etat annuel salaires": ["Art. 176"],
    "non-residents": ["Art. 185 ter-A", "Art. 185 ter-C"],
})
