"""
Shared fixtures and test utilities for CGI RAG tests.

Provides mock services, sample articles, and reusable fixtures so that all
tests can run without API keys, databases, or external network access.
"""

import sys
import hashlib
from pathlib import Path

import pytest
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Path setup - ensure the execution package is importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

load_dotenv(PROJECT_ROOT / ".env")


# ---------------------------------------------------------------------------
# Sample CGI 2026 articles (IS chapter excerpts)
# ---------------------------------------------------------------------------

ART_86 = (
    "L'impôt sur les sociétés est assis sur le bénéfice net réalisé au cours de l'exercice. "
    "Le bénéfice imposable est déterminé d'après les résultats de l'ensemble des opérations "
    "de toute nature effectuées par l'entreprise."
)

ART_86A = (
    "Le taux de l'impôt sur les sociétés est fixé à 28%. "
    "Il est porté à 33% pour les personnes morales étrangères visées à l'Art. 92. "
    "Les sociétés de microfinance et les établissements d'enseignement privé sont imposés au taux de 25%. "
    "Le taux réduit s'applique pendant une durée de cinq ans à compter de la création."
)

ART_86B = (
    "Le minimum de perception est fixé à 1% du chiffre d'affaires de l'exercice. "
    "Il est payé en quatre versements au plus tard les 15 mars, 15 juin, 15 septembre et 15 décembre."
)

ART_92A = (
    "Pour les personnes morales étrangères, le bénéfice imposable est fixé forfaitairement à 22% "
    "du montant brut des sommes perçues. Les frais de mobilisation et de démobilisation sont inclus."
)

ART_52 = (
    "Les amortissements sont calculés selon le mode linéaire. "
    "Le taux d'amortissement des constructions est de 5% par an."
)


@pytest.fixture
def sample_articles():
    """Five CGI 2026 articles."""
    from execution.cgi_rag.corpus import Article
    return [
        Article(numero="Art. 86", contenu=ART_86, version="2026", titre="Assiette de l'IS", priority=1),
        Article(numero="Art. 86A", contenu=ART_86A, version="2026", titre="Taux de l'IS", priority=1),
        Article(numero="Art. 86B", contenu=ART_86B, version="2026", titre="Minimum de perception", priority=1),
        Article(numero="Art. 92A", contenu=ART_92A, version="2026", titre="Base forfaitaire", priority=2),
        Article(numero="Art. 52", contenu=ART_52, version="2026", titre="Amortissements", priority=2),
    ]


@pytest.fixture
def sample_corpus(sample_articles):
    from execution.cgi_rag.corpus import ArticleCorpus
    return ArticleCorpus("2026", sample_articles)


@pytest.fixture
def sample_catalog():
    """Small catalog: curated priorities plus the "taux" theme."""
    from execution.cgi_rag.article_metadata import ArticleMetadata, ArticleMetadataCatalog
    return ArticleMetadataCatalog(
        "2026",
        [
            ArticleMetadata(numero="Art. 86", titre="Assiette de l'IS", priority=1),
            ArticleMetadata(numero="Art. 86A", titre="Taux de l'IS", priority=1, defines=("taux IS",)),
            ArticleMetadata(numero="Art. 86B", titre="Minimum de perception", priority=1),
            ArticleMetadata(numero="Art. 92A", titre="Base forfaitaire", priority=2),
            ArticleMetadata(numero="Art. 52", titre="Amortissements", priority=2),
        ],
        {"taux": ["Art. 86A", "Art. 86B", "Art. 52"]},
    )


@pytest.fixture
def sample_keyword_index(sample_catalog):
    """Keyword index over a small IS chapter with synonyms."""
    from execution.cgi_rag.keyword_index import KeywordChapter, KeywordIndex
    chapter = KeywordChapter.from_table(
        "is",
        {
            "taux is": ["Art. 86A"],
            "minimum de perception": ["Art. 86B"],
            "amortissement": ["Art. 52", "Art. 86"],
            "base forfaitaire": [("Art. 92A", 1.0)],
        },
        {
            "minimum de perception": ["impot minimum", "plancher fiscal"],
            "amortissement": ["depreciation"],
        },
    )
    return KeywordIndex([chapter], catalog=sample_catalog)


@pytest.fixture
def edition_index(sample_keyword_index, sample_catalog, sample_corpus):
    from execution.cgi_rag.retriever import EditionIndex
    return EditionIndex(
        edition="2026",
        keyword_index=sample_keyword_index,
        catalog=sample_catalog,
        corpus=sample_corpus,
    )


# ---------------------------------------------------------------------------
# Mock embedding service
# ---------------------------------------------------------------------------

class MockEmbeddingService:
    """Deterministic mock embedding service -- never calls external APIs."""

    def __init__(self, dimensions=1024, fail=False):
        self._dimensions = dimensions
        self._call_count = 0
        self.fail = fail

    def embed_documents(self, texts):
        return [self._deterministic_embedding(t) for t in texts]

    def embed_query(self, query):
        self._call_count += 1
        if self.fail:
            raise RuntimeError("Voyage AI unavailable")
        return self._deterministic_embedding(query)

    def _deterministic_embedding(self, text):
        h = hashlib.sha256(text.encode()).hexdigest()
        seed = int(h[:8], 16)
        return [((seed + i) % 1000) / 1000.0 for i in range(self._dimensions)]

    @property
    def dimensions(self):
        return self._dimensions


@pytest.fixture
def mock_embedding_service():
    return MockEmbeddingService(dimensions=1024)


# ---------------------------------------------------------------------------
# Mock vector store (no database needed)
# ---------------------------------------------------------------------------

class MockVectorStore:
    """In-memory mock of VectorStore returning scripted hits per edition."""

    def __init__(self):
        self._hits = {}
        self._articles = {}
        self.fail = False
        self.search_calls = []

    def set_hits(self, edition, hits):
        """hits: list of (numero, score, titre, contenu)."""
        self._hits[edition] = hits

    def add_articles(self, edition, articles):
        for article in articles:
            self._articles.setdefault(edition, {})[article.numero] = article.to_payload()

    def connect(self):
        pass

    def initialize_schema(self, editions=None):
        pass

    def search(self, edition, embedding, limit=10):
        from execution.cgi_rag.vector_store import VectorHit
        self.search_calls.append((edition, limit))
        if self.fail:
            raise ConnectionError("could not connect to server")
        return [
            VectorHit(payload={"numero": n, "titre": t, "contenu": c}, score=s)
            for n, s, t, c in self._hits.get(edition, [])[:limit]
        ]

    def fetch_articles(self, edition, numeros):
        if self.fail:
            raise ConnectionError("could not connect to server")
        stored = self._articles.get(edition, {})
        return [dict(stored[n]) for n in numeros if n in stored]

    def ping(self):
        return not self.fail

    def close(self):
        pass


@pytest.fixture
def mock_vector_store():
    return MockVectorStore()


# ---------------------------------------------------------------------------
# Fake LLM client
# ---------------------------------------------------------------------------

class FakeLLMStream:
    """Scripted async stream of text deltas."""

    def __init__(self, chunks, model="test-model", fail_after=None, tokens_used=42):
        self._chunks = list(chunks)
        self._fail_after = fail_after
        self._final_tokens = tokens_used
        self.model = model
        self.tokens_used = 0
        self.closed = False

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        from execution.cgi_rag.errors import GenerationError
        for i, chunk in enumerate(self._chunks):
            if self._fail_after is not None and i >= self._fail_after:
                raise GenerationError("upstream connection reset", model=self.model)
            yield chunk
        if self._fail_after is not None and self._fail_after >= len(self._chunks):
            raise GenerationError("upstream connection reset", model=self.model)
        self.tokens_used = self._final_tokens

    async def aclose(self):
        self.closed = True


class FakeLLMClient:
    """Records calls and returns scripted answers."""

    def __init__(self, answer="", chunks=None, fail=False, fail_after=None, tokens_used=42):
        self.answer = answer
        self.chunks = chunks if chunks is not None else [answer]
        self.fail = fail
        self.fail_after = fail_after
        self.tokens_used = tokens_used
        self.calls = []
        self.last_stream = None

    async def complete(self, system, messages, model=None, temperature=0.0, max_tokens=2000):
        from execution.cgi_rag.errors import GenerationError
        from execution.cgi_rag.llm import Completion
        self.calls.append({"system": system, "messages": messages, "model": model, "temperature": temperature})
        if self.fail:
            raise GenerationError("LLM generation failed: timed out", model=model or "test-model")
        return Completion(text=self.answer, tokens_used=self.tokens_used, model=model or "test-model")

    async def stream(self, system, messages, model=None, temperature=0.0, max_tokens=2000):
        from execution.cgi_rag.errors import GenerationError
        self.calls.append({"system": system, "messages": messages, "model": model, "temperature": temperature})
        if self.fail:
            raise GenerationError("LLM stream failed: timed out", model=model or "test-model")
        self.last_stream = FakeLLMStream(
            self.chunks,
            model=model or "test-model",
            fail_after=self.fail_after,
            tokens_used=self.tokens_used,
        )
        return self.last_stream


@pytest.fixture
def search_engine(edition_index, mock_vector_store, mock_embedding_service):
    from execution.cgi_rag.retriever import HybridSearchEngine
    return HybridSearchEngine(
        [edition_index],
        vector_store=mock_vector_store,
        embedding_service=mock_embedding_service,
    )


@pytest.fixture
def llm_factory():
    """FakeLLMClient class; call with answer/chunks/fail/fail_after."""
    return FakeLLMClient


@pytest.fixture
def agent_factory(search_engine):
    """Build an Agent over the sample search engine."""
    from execution.cgi_rag.agent import Agent

    def _make(llm, edition="2026", postprocess_mode=None):
        return Agent.for_edition(edition, search_engine, llm, postprocess_mode=postprocess_mode)
    return _make


# ---------------------------------------------------------------------------
# Singleton resets between tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_metrics_singleton():
    """Reset the MetricsCollector singleton between tests."""
    import execution.cgi_rag.metrics as metrics_mod
    metrics_mod.MetricsCollector._instance = None
    metrics_mod._collector = None
    yield
    metrics_mod.MetricsCollector._instance = None
    metrics_mod._collector = None
