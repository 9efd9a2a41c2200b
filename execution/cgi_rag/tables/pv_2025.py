"""
CGI 2025, Chapter 7: Plus-values sur titres, BTP et réassurance
(Art. 185 quater-A to 185 sexies)

Weighted keyword table: (article, weight) pairs, weight in [0, 1].
Metadata entries use a descending priority scale (5 = most important);
the catalog converts it on load.
"""

from types import MappingProxyType

KEYWORDS = MappingProxyType({
    "plus-values": [
        ("Art. 185 quater-A", 1.0),
        ("Art. 185 quater-B", 0.9),
    ],
    "plus-value": [
        ("Art. 185 quater-A", 1.0),
        ("Art. 185 quater-B", 0.9),
    ],
    "plus values": [
        ("Art. 185 quater-A", 1.0),
        ("Art. 185 quater-B", 0.9),
    ],
    "gains capital": [
        ("Art. 185 quater-A", 0.9),
    ],
    "gains en capital": [
        ("Art. 185 quater-A", 0.9),
    ],
    "cession titres": [
        ("Art. 185 quater-A", 1.0),
        ("Art. 185 quater-B", 0.8),
    ],
    "cession participations": [
        ("Art. 185 quater-A", 1.0),
    ],
    "vente actions": [
        ("Art. 185 quater-A", 0.9),
    ],
    "vente titres": [
        ("Art. 185 quater-A", 0.9),
    ],
    "participations": [
        ("Art. 185 quater-A", 0.8),
    ],
    "sociétés congolaises": [
        ("Art. 185 quater-A", 0.8),
        ("Art. 185 quater-C", 0.7),
    ],
    "société droit congolais": [
        ("Art. 185 quater-A", 0.9),
        ("Art. 185 quater-C", 0.8),
    ],
    "domiciliés étranger": [
        ("Art. 185 quater-A", 0.9),
    ],
    "non-résidents": [
        ("Art. 185 quater-A", 0.6),
    ],
    "impôt spécial": [
        ("Art. 185 quater-A", 0.9),
        ("Art. 185 quater-B", 0.9),
    ],

    "20% plus-values": [
        ("Art. 185 quater-B", 1.0),
    ],
    "taux 20%": [
        ("Art. 185 quater-B", 0.9),
        ("Art. 185 sexies", 0.7),
    ],
    "libératoire": [
        ("Art. 185 quater-B", 1.0),
    ],
    "enregistrement cession": [
        ("Art. 185 quater-B", 1.0),
    ],
    "droits enregistrement": [
        ("Art. 185 quater-B", 0.9),
    ],
    "acte cession": [
        ("Art. 185 quater-B", 0.9),
    ],

    "solidarité paiement": [
        ("Art. 185 quater-C", 1.0),
    ],
    "solidairement responsables": [
        ("Art. 185 quater-C", 1.0),
    ],
    "cédant": [
        ("Art. 185 quater-C", 0.9),
    ],
    "cessionnaire": [
        ("Art. 185 quater-C", 0.9),
    ],
    "responsables solidaires": [
        ("Art. 185 quater-C", 1.0),
    ],

    "btp": [
        ("Art. 185 quinquies", 1.0),
    ],
    "batiments travaux publics": [
        ("Art. 185 quinquies", 1.0),
    ],
    "bâtiments travaux publics": [
        ("Art. 185 quinquies", 1.0),
    ],
    "construction": [
        ("Art. 185 quinquies", 0.9),
    ],
    "travaux publics": [
        ("Art. 185 quinquies", 0.9),
    ],
    "sous-traitants": [
        ("Art. 185 quinquies", 1.0),
    ],
    "sous-traitant": [
        ("Art. 185 quinquies", 1.0),
    ],
    "sous-traitance": [
        ("Art. 185 quinquies", 0.9),
    ],
    "bureaux études": [
        ("Art. 185 quinquies", 1.0),
    ],
    "bureaux d'études": [
        ("Art. 185 quinquies", 1.0),
    ],
    "entrepreneur principal": [
        ("Art. 185 quinquies", 1.0),
    ],
    "adjudicataires": [
        ("Art. 185 quinquies", 0.9),
    ],
    "marchés publics": [
        ("Art. 185 quinquies", 0.9),
    ],
    "marchés privés": [
        ("Art. 185 quinquies", 0.9),
    ],
    "marchés construction": [
        ("Art. 185 quinquies", 0.9),
    ],
    "3%": [
        ("Art. 185 quinquies", 0.9),
    ],
    "trois pourcent": [
        ("Art. 185 quinquies", 0.9),
    ],
    "10% btp": [
        ("Art. 185 quinquies", 1.0),
    ],
    "régime réel": [
        ("Art. 185 quinquies", 0.8),
    ],
    "régime forfait": [
        ("Art. 185 quinquies", 0.8),
    ],
    "retenue btp": [
        ("Art. 185 quinquies", 1.0),
    ],
    "retenue sous-traitants": [
        ("Art. 185 quinquies", 1.0),
    ],
    "acompte impôt": [
        ("Art. 185 quinquies", 0.9),
    ],
    "déclaration trimestrielle": [
        ("Art. 185 quinquies", 0.9),
    ],
    "liste sous-traitants": [
        ("Art. 185 quinquies", 1.0),
    ],
    "bordereau spécial": [
        ("Art. 185 quinquies", 0.9),
    ],
    "enregistrement marché": [
        ("Art. 185 quinquies", 0.9),
    ],
    "enregistrement contrat": [
        ("Art. 185 quinquies", 0.9),
    ],
    "5000000": [
        ("Art. 185 quinquies", 0.9),
    ],
    "5 000 000": [
        ("Art. 185 quinquies", 0.9),
    ],
    "amende btp": [
        ("Art. 185 quinquies", 1.0),
    ],
    "perte déductibilité": [
        ("Art. 185 quinquies", 0.9),
    ],
    "2% mois": [
        ("Art. 185 quinquies", 0.9),
    ],
    "pénalité retard": [
        ("Art. 185 quinquies", 0.9),
    ],

    "réassurance": [
        ("Art. 185 sexies", 1.0),
    ],
    "reassurance": [
        ("Art. 185 sexies", 1.0),
    ],
    "primes cédées": [
        ("Art. 185 sexies", 1.0),
    ],
    "primes réassurance": [
        ("Art. 185 sexies", 1.0),
    ],
    "cima": [
        ("Art. 185 sexies", 1.0),
    ],
    "code cima": [
        ("Art. 185 sexies", 1.0),
    ],
    "art. 308 cima": [
        ("Art. 185 sexies", 1.0),
    ],
    "article 308": [
        ("Art. 185 sexies", 0.9),
    ],
    "hors cima": [
        ("Art. 185 sexies", 1.0),
    ],
    "assurance étranger": [
        ("Art. 185 sexies", 0.9),
    ],
    "plafond réassurance": [
        ("Art. 185 sexies", 0.9),
    ],
    "20% réassurance": [
        ("Art. 185 sexies", 1.0),
    ],
    "retenue réassurance": [
        ("Art. 185 sexies", 1.0),
    ],
    "autorisation ministre": [
        ("Art. 185 sexies", 0.8),
    ],
    "ministre assurances": [
        ("Art. 185 sexies", 0.8),
    ],
})

SYNONYMS = MappingProxyType({
    "plus-values": ["gains en capital", "cession participations", "vente actions", "vente titres"],
    "non-résidents": ["domiciliés à l'étranger", "étrangers", "personnes domiciliées étranger"],
    "btp": ["bâtiments travaux publics", "construction", "travaux publics"],
    "sous-traitants": ["sous-traitance", "bureaux d'études"],
    "réassurance": ["primes cédées", "assurance"],
    "cima": ["conférence interafricaine marchés assurances"],
})

METADATA_PRIORITY_DESCENDING = True

METADATA = (
    {
        "numero": "Art. 185 quater-A",
        "titre": "Champ d'application - Plus-values sur titres non-résidents",
        "section": "Plus-values sur titres",
        "themes": ["plus-values", "cession titres", "non-résidents"],
        "mots_cles": ["plus-values", "cession", "titres", "participations", "non-résidents", "sociétés congolaises", "impôt spécial"],
        "priority": 5,
    },
    {
        "numero": "Art. 185 quater-B",
        "titre": "Taux et paiement - Plus-values sur titres",
        "section": "Plus-values sur titres",
        "themes": ["taux", "plus-values", "libératoire", "enregistrement"],
        "mots_cles": ["20%", "libératoire", "enregistrement", "acte cession", "droits enregistrement"],
        "valeurs_cles": {
            "taux": "20%",
            "caractere": "libératoire",
        },
        "priority": 5,
    },
    {
        "numero": "Art. 185 quater-C",
        "titre": "Solidarité du paiement - Plus-values sur titres",
        "section": "Plus-values sur titres",
        "themes": ["solidarité", "responsabilité"],
        "mots_cles": ["solidarité", "cédant", "cessionnaire", "société congolaise", "responsables solidaires"],
        "priority": 4,
    },

    {
        "numero": "Art. 185 quinquies",
        "titre": "Retenue sur paiements aux sous-traitants BTP",
        "section": "Retenue BTP",
        "themes": ["btp", "sous-traitants", "retenue source", "acompte"],
        "mots_cles": ["btp", "sous-traitants", "bureaux études", "entrepreneur principal", "marchés publics", "marchés privés", "3%", "10%", "régime réel", "régime forfait", "acompte", "trimestriel", "bordereau spécial", "enregistrement", "5 000 000 FCFA", "2% mois"],
        "valeurs_cles": {
            "taux_reel": "3%",
            "taux_forfait": "10%",
            "amende_defaut": "5 000 000 FCFA",
            "penalite_retard": "2% par mois (max 100%)",
        },
        "references_croisees": ["Art. 172", "Art. 173"],
        "priority": 5,
    },

    {
        "numero": "Art. 185 sexies",
        "titre": "Retenue sur primes de réassurance hors CIMA",
        "section": "Réassurance",
        "themes": ["réassurance", "primes", "cima", "retenue"],
        "mots_cles": ["réassurance", "primes cédées", "cima", "art. 308", "hors cima", "20%", "assurance étranger", "autorisation ministre"],
        "valeurs_cles": {
            "taux": "20%",
            "reference_cima": "Art. 308 Code CIMA",
        },
        "references_croisees": ["Art. 185 ter", "Art. 308 Code CIMA"],
        "priority": 4,
    },
)

THEME_PRIORITIES = MappingProxyType({
    "plus-values titres": ["Art. 185 quater-A", "Art. 185 quater-B"],
    "sous-traitants btp": ["Art. 185 quinquies"],
    "reassurance": ["Art. 185 sexies"],
})
