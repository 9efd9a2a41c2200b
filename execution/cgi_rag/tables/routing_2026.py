"""
CGI 2026 routing tables

Direct mappings force one article for an exact phrase. Contextual rules
fire on one required keyword plus, when declared, one context keyword;
the first matching rule wins.
"""

from types import MappingProxyType

DIRECT_KEYWORD_MAPPINGS = MappingProxyType({
    "22%": "Art. 92A",
    "vingt-deux pour cent": "Art. 92A",
    "base forfaitaire": "Art. 92A",
    "forfaitaire étrangers": "Art. 92A",
    "forfaitaire pm": "Art. 92A",
    "assiette forfaitaire": "Art. 92A",
    "mobilisation": "Art. 92A",
    "démobilisation": "Art. 92A",
    "demobilisation": "Art. 92A",
    "mob demob": "Art. 92A",

    "70%": "Art. 92J",
    "soixante-dix": "Art. 92J",
    "seuil pétrolier": "Art. 92J",
    "seuil ca pétrolier": "Art. 92J",
    "régime dérogatoire": "Art. 92J",
    "regime derogatoire": "Art. 92J",
    "dérogatoire pétrolier": "Art. 92J",
    "catering": "Art. 92J",
    "restauration pétrolier": "Art. 92J",
    "restauration sites": "Art. 92J",
    "cantine pétrolier": "Art. 92J",
    "charte investissements": "Art. 92J",
    "charte des investissements": "Art. 92J",
    "éligible charte": "Art. 92J",
    "eligible charte": "Art. 92J",
    "non éligible charte": "Art. 92J",
    "non eligible charte": "Art. 92J",

    "200.000 fcfa": "Art. 26",
    "200000": "Art. 26",
    "espèces": "Art. 26",
    "especes": "Art. 26",
    "paiement cash": "Art. 26",
    "numéraire": "Art. 26",
    "numeraire": "Art. 26",

    "taux irf": "Art. 113",
    "taux de l'irf": "Art. 113",
    "9% loyers": "Art. 113",
    "15% plus-values": "Art. 113",
    "taux loyers": "Art. 113",
    "taux revenus fonciers": "Art. 113",
    "taux plus-values immobilières": "Art. 113",
    "taux plus-values immobilieres": "Art. 113",

    "retenue irf": "Art. 113A",
    "retenue loyers": "Art. 113A",
    "retenue libératoire irf": "Art. 113A",
    "retenue liberatoire irf": "Art. 113A",
    "date limite retenue": "Art. 113A",
    "15 mars irf": "Art. 113A",
    "nouveau bail": "Art. 113A",

    "exonération irf": "Art. 111C",
    "exoneration irf": "Art. 111C",
    "résidence principale": "Art. 111C",
    "residence principale": "Art. 111C",
    "irf famille": "Art. 111C",
    "exonération famille": "Art. 111C",
    "exoneration famille": "Art. 111C",
})

ROUTING_RULES = (
    {
        "rule_id": "R1_forfaitaire_etrangers",
        "required": ["base forfaitaire", "22%", "forfaitaire", "assiette forfaitaire"],
        "context": ["étrang", "pm", "personne morale", "calcul", "comment"],
        "route_to": "Art. 92A",
    },
    {
        "rule_id": "R2_mobilisation",
        "required": ["mobilisation", "démobilisation", "demobilisation", "mob", "demob", "installation chantier", "repli"],
        "route_to": "Art. 92A",
    },
    {
        "rule_id": "R3_seuil_petrolier",
        "required": ["70%", "seuil", "soixante-dix"],
        "context": ["pétrol", "petrol", "dérogatoire", "derogatoire", "ca"],
        "route_to": "Art. 92J",
    },
    {
        "rule_id": "R4_catering",
        "required": ["catering", "restauration", "cantine"],
        "context": ["pétrol", "petrol", "site", "dérogatoire", "derogatoire", "sous-traitant"],
        "route_to": "Art. 92J",
    },
    {
        "rule_id": "R5_charte",
        "required": ["charte", "investissement"],
        "context": ["pétrol", "petrol", "dérogatoire", "derogatoire", "éligible", "eligible", "sous-traitant"],
        "route_to": "Art. 92J",
    },
    {
        "rule_id": "R6_especes",
        "required": ["espèces", "especes", "cash", "liquide", "numéraire", "numeraire"],
        "context": ["plafond", "maximum", "déductible", "deductible", "200", "charge"],
        "route_to": "Art. 26",
    },
    {
        "rule_id": "R7_irf_taux_plus_values",
        "required": ["taux", "plus-value", "plus-values"],
        "context": ["irf", "immobilier", "immobilière", "immobilieres", "foncier", "15%"],
        "route_to": "Art. 113",
    },
    {
        "rule_id": "R8_irf_retenue",
        "required": ["retenue", "source"],
        "context": ["irf", "loyer", "foncier", "locataire", "libératoire", "liberatoire", "date", "15 mars"],
        "route_to": "Art. 113A",
    },
    {
        "rule_id": "R9_irf_exoneration",
        "required": ["exonér", "exoner", "dispense"],
        "context": ["irf", "foncier", "résidence", "residence", "famille", "enfant", "principal"],
        "route_to": "Art. 111C",
    },
    {
        "rule_id": "R10_irf_nouveau_bail",
        "required": ["nouveau bail", "bail"],
        "context": ["retenue", "irf", "délai", "delai", "3 mois"],
        "route_to": "Art. 113A",
    },
    {
        "rule_id": "R11_irf_liberatoire",
        "required": ["libératoire", "liberatoire"],
        "context": ["irf", "retenue", "foncier", "loyer"],
        "route_to": "Art. 113A",
    },
    {
        "rule_id": "R12_logement_gratuit_famille",
        "required": ["gratuitement", "gratuit"],
        "context": ["enfant", "famille", "logement", "loyer", "imposable"],
        "route_to": "Art. 111C",
    },
)
