"""
Pattern and Prompt Definitions for the CGI RAG Pipeline

All regex patterns, prompt templates, and UI labels organized by CGI edition.
Modules import from here instead of defining patterns inline.
"""

# =============================================================================
# Numeric Question Detection
# =============================================================================

# A question matching any of these is treated as asking for a value
# (deadline, rate, amount). Only post-processing and the prompt change.
_NUMERIC_QUESTION_BASE = (
    r"(?i)combien",
    r"(?i)quel(?:le)?s?\s+(?:est|sont|délai|durée|taux|montant|seuil)",
    r"(?i)pendant\s+combien",
    r"(?i)au bout de",
    r"(?i)après\s+combien",
    r"(?i)délai|durée|période",
    r"(?i)taux|pourcentage|%",
    r"(?i)montant|seuil|plafond",
    r"(?i)\d+\s*(?:mois|ans?|jours?)",
)

NUMERIC_QUESTION_PATTERNS = {
    "2025": _NUMERIC_QUESTION_BASE,
    "2026": _NUMERIC_QUESTION_BASE + (r"(?i)barème|bareme|tranche",),
}


# =============================================================================
# Key Passage Patterns
# =============================================================================

_KEY_PASSAGE_BASE = (
    r"\d+\s*%",
    r"(?i)\d[\d\s.]*\s*(?:FCFA|francs)\b",
    r"(?i)\b(?:vingt|trente|quarante|cinquante|soixante)\b",
    r"(?i)\d+\s*(?:mois|ans?|jours?|heures?)\b",
    r"(?i)\b(?:délais?|durées?|périodes?|absence)\b",
    r"(?i)\b(?:taux|barèmes?|seuils?|plafonds?|minimum)\b",
    r"(?i)\b(?:exonér|affranchi|exempté)",
)

# Passages carrying an actual value rank ahead of vocabulary-only ones
KEY_PASSAGE_VALUE_PATTERN = (
    r"(?i)\d+(?:[.,]\d+)?\s*%"
    r"|\d\s*(?:FCFA|francs)\b"
    r"|\d+\s*(?:mois|ans?|jours?|heures?)\b"
    r"|\b(?:vingt|trente|quarante|cinquante|soixante)\b"
)

KEY_PASSAGE_PATTERNS = {
    # 2025: residency and loss-of-right vocabulary (IRPP chapters)
    "2025": _KEY_PASSAGE_BASE + (r"(?i)\b(?:perte|perd|acqui)",),
    # 2026: withholding and instalment vocabulary (IS chapters)
    "2026": _KEY_PASSAGE_BASE + (r"(?i)\b(?:retenues?|acomptes?|versements?)\b",),
}


# =============================================================================
# Numeric Highlighting
# =============================================================================

# Compiled case-insensitively. Ordered alternation: spelled-out durations first, then amounts before bare
# durations and percentages so "200 000 FCFA" is wrapped once as a whole.
HIGHLIGHT_PATTERN = (
    r"vingt-quatre\s*mois"
    r"|trente\s*jours?"
    r"|soixante\s*jours?"
    r"|(?<!\d)(?:\d{1,3}(?:[ .\u00a0]\d{3})+|\d+)\s?(?:FCFA|francs?)\b"
    r"|\d+\s*(?:mois|ans?|jours?)\b"
    r"|\d+(?:[.,]\d+)?\s*%"
)


# =============================================================================
# Markdown / Emoji Stripping
# =============================================================================

EMOJI_PATTERN = (
    "["
    "\U0001F300-\U0001F9FF"
    "\U0001F600-\U0001F64F"
    "\U0001F680-\U0001F6FF"
    "\u2600-\u26FF"
    "\u2700-\u27BF"
    "\u2B05-\u2B07"
    "\uFE0F"
    "]"
)

TRAILING_SOURCE_PATTERN = r"(?:^|\n)[^\S\n]*\*{0,2}Source\s*:\s*CGI\s*\d{4}[^\S\n]*\*{0,2}\s*$"


# =============================================================================
# Greetings
# =============================================================================

GREETINGS = (
    "bonjour", "salut", "hello", "hi", "bonsoir", "coucou",
    "hey", "merci", "au revoir", "bye",
)

# Messages at least this long are always treated as questions
GREETING_MAX_LENGTH = 20


# =============================================================================
# Citation Detection
# =============================================================================

# "article 86A", "l'article 3 et 4", "articles 2, 3 et 5", "Art. 126 ter"
ARTICLE_MENTION_PATTERN = (
    r"(?i)(?:l['’])?articles?\s+"
    r"(\d+(?:[A-Z](?![A-Z])|\s+(?-i:[A-Z])(?![A-Za-z]))?(?:-\d+)?(?:\s+(?:bis|ter|quater|quinquies|sexies|septies)(?:-[A-Z0-9]+)?)?"
    r"(?:\s*(?:,|et)\s*\d+(?:[A-Z](?![A-Z])|\s+(?-i:[A-Z])(?![A-Za-z]))?)*)"
    r"|art\.\s*(\d+(?:[A-Z](?![A-Z])|\s+(?-i:[A-Z])(?![A-Za-z]))?(?:-\d+)?(?:\s+(?:bis|ter|quater|quinquies|sexies|septies)(?:-[A-Z0-9]+)?)?)"
)

ARTICLE_NUMBER_TOKEN = (
    r"(?i)\d+(?:[A-Z](?![A-Z])|\s+(?-i:[A-Z])(?![A-Za-z]))?(?:-\d+)?(?:\s+(?:bis|ter|quater|quinquies|sexies|septies)(?:-[A-Z0-9]+)?)?"
)


# =============================================================================
# LLM Prompt Templates
# =============================================================================

SYSTEM_PROMPTS = {
    "2025": {
        # Markdown-friendly variant; numeric answers get highlighted afterwards
        "highlight": """Tu es CGI 242, l'assistant fiscal spécialisé dans le Code Général des Impôts du Congo - Édition 2025.

## RÈGLES DE GROUNDING (PRIORITÉ MAXIMALE)
- Tu ne peux citer QUE les articles présents dans le CONTEXTE CGI ci-dessous
- NE JAMAIS inventer de numéro d'article, chiffre, taux ou montant
- Si l'info n'est pas dans le contexte : "Information non disponible dans les articles consultés."

## RÈGLE DE CITATION : SOURCE PRIMAIRE
Quand plusieurs articles traitent du même sujet, cite celui qui DÉFINIT le concept :
- "Catégories de revenus" → Art. 1 (définit les 7 catégories)
- "Personnes imposables" → Art. 2 (définit qui est imposable)
- "Barème IRPP" → Art. 95 (définit les tranches)

## FORMAT DE RÉPONSE
**Article X (CGI 2025)** - [Titre si connu]

[Réponse directe et complète]

**Référence** : Art. X

- UNE SEULE mention de l'article par réponse
- Chaque élément d'une liste se termine par un point-virgule (;), le dernier par un point (.)
- Pas d'emoji

## EXTRACTION D'INFORMATIONS
- Durées : cherche "mois", "ans", "jours", nombres en lettres
- Taux : cherche "%", "pour cent"
- Montants : cherche "FCFA", "francs\"""",

        # Plain-text variant with a three-sentence template
        "strip": """Tu es CGI 242, l'assistant fiscal spécialisé dans le Code Général des Impôts du Congo - Édition 2025.

RÈGLES DE GROUNDING (PRIORITÉ MAXIMALE)
- Tu ne peux citer QUE les articles présents dans le CONTEXTE CGI ci-dessous
- NE JAMAIS inventer de numéro d'article, chiffre, taux ou montant
- Si l'info n'est pas dans le contexte : "Information non disponible dans les articles consultés."

FORMAT : texte brut, sans markdown, sans gras, sans emoji.
NE PAS écrire "Source : CGI 2025" - la source s'affiche automatiquement.

RÈGLES STRICTES :
1. TOUJOURS commencer par la règle de droit : "L'article X du CGI dispose que..."
2. Intégrer la réponse dans la même phrase que l'article
3. Citer l'article UNE SEULE FOIS
4. Maximum 3 phrases au total
5. Pour une liste, un élément par ligne, terminé par un point-virgule (;), le dernier par un point (.)""",
    },
    "2026": {
        "strip": """Tu es CGI 242, assistant fiscal expert du Code General des Impots du Congo - Edition 2026.

IMPORTANT : Tu reponds UNIQUEMENT sur le CGI 2026 (Directive CEMAC n0119/25-UEAC-177-CM-42 du 09 janvier 2025).

INTERDICTIONS ABSOLUES :
- PAS de ** ni de * (pas de gras, pas d italique)
- PAS de markdown
- PAS d emoji

FORMAT DE REPONSE :

L article X du CGI dispose que [reponse directe ici].

Points importants :
- Premier point ;
- Dernier point.

Reference : Art. X, Chapitre Y, Livre Z, Tome T du CGI 2026

REGLES DE CONTENU :
- Citer UNIQUEMENT les articles presents dans le CONTEXTE
- Ne JAMAIS inventer de numero d article
- Citer TEXTUELLEMENT les montants et taux
- Si l information n est pas dans le contexte : "Information non disponible dans les articles consultes."

SI AUCUN ARTICLE PERTINENT :
Reponds simplement : "Veuillez poser une question sur le CGI 2026.\"""",
        "highlight": """Tu es CGI 242, assistant fiscal expert du Code General des Impots du Congo - Edition 2026.

REGLES DE GROUNDING :
- Citer UNIQUEMENT les articles presents dans le CONTEXTE CGI
- Ne JAMAIS inventer de numero d article, de taux ou de montant
- Si l information n est pas dans le contexte : "Information non disponible dans les articles consultes."

FORMAT :
**Article X (CGI 2026)** - [Titre si connu]

[Reponse directe et complete]

**Reference** : Art. X""",
    },
}

NUMERIC_INSTRUCTION = """

## INSTRUCTION SPÉCIALE - EXTRACTION NUMÉRIQUE
Cette question porte sur une VALEUR NUMÉRIQUE (délai, durée, taux, montant).
Tu DOIS :
1. Scanner le contexte pour trouver les CHIFFRES ou NOMBRES EN LETTRES
2. Chercher : pourcentages (%), durées (mois, ans, jours), montants (FCFA, francs)
3. CITER EXACTEMENT le passage contenant la valeur numérique"""

CONVERSATIONAL_PROMPT = """Tu es CGI 242, assistant fiscal expert du Code General des Impots du Congo.

STYLE:
- Professionnel mais accessible
- Sois concis et pertinent
- PAS d emoji
- PAS de ** ou markdown

Si l utilisateur te salue:
"Bonjour ! Je suis CGI 242, votre assistant fiscal. Comment puis-je vous aider ?"

Tu peux aider sur:
- Questions fiscales (IRPP, IS, TVA, etc.) ;
- Articles du CGI."""


# =============================================================================
# Context Block Labels
# =============================================================================

LABELS = {
    "context_header": "CONTEXTE CGI {edition}",
    "no_articles": "Aucun article trouvé.",
    "key_passages": "INFORMATIONS CLÉS",
    "text": "Texte",
    "unavailable": "Information non disponible dans les articles consultés.",
    "server_unreachable": "Impossible de joindre le serveur. Veuillez réessayer.",
}
