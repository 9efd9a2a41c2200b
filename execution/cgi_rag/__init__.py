"""
CGI RAG System - Question answering on the Congo Code Général des Impôts

This module provides:
- Curated keyword index with synonyms and routing rules per edition
- Hybrid search (keywords + pgvector) with thematic boosts
- One grounded agent per CGI edition (2025, 2026)
- Streaming answers with article citations

Layout:
- Tables: execution/cgi_rag/tables/ (immutable keyword and metadata data)
- Pipeline: retriever -> agent -> streaming
- HTTP: api.py (FastAPI)
"""

from .edition_config import EditionRules, resolve_edition
from .corpus import Article, ArticleCorpus
from .keyword_index import KeywordIndex
from .article_metadata import ArticleMetadataCatalog
from .retriever import HybridSearchEngine, SearchResult
from .agent import Agent, AgentResponse
from .citation import CitationExtractor
from .streaming import ResponseStreamer, StreamEvent

__all__ = [
    "EditionRules",
    "resolve_edition",
    "Article",
    "ArticleCorpus",
    "KeywordIndex",
    "ArticleMetadataCatalog",
    "HybridSearchEngine",
    "SearchResult",
    "Agent",
    "AgentResponse",
    "CitationExtractor",
    "ResponseStreamer",
    "StreamEvent",
]

__version__ = "1.0.0"
