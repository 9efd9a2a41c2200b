"""
Vector Store with PostgreSQL + pgvector

One article table per CGI edition (cgi_articles_2025, cgi_articles_2026)
with cosine similarity search, plus the messages table used to persist
conversations.
"""

import os
import json
import logging
from typing import Optional
from dataclasses import dataclass, field
from contextlib import contextmanager

from .edition_config import SUPPORTED_EDITIONS, resolve_edition

try:
    import psycopg2
    import psycopg2.extras
    import psycopg2.pool
except ImportError:
    psycopg2 = None  # Will be caught at connect() time

logger = logging.getLogger(__name__)


@dataclass
class VectorStoreConfig:
    """Configuration for vector store."""
    connection_string: Optional[str] = None
    embedding_dimensions: int = 1024
    messages_table: str = "messages"
    pool_min_connections: int = 2
    pool_max_connections: int = 20
    use_pooling: bool = True  # False for simple single-connection mode


@dataclass
class VectorHit:
    """A nearest-neighbour hit: article payload and cosine similarity."""
    payload: dict = field(default_factory=dict)
    score: float = 0.0

    @property
    def numero(self) -> Optional[str]:
        return self.payload.get("numero")

    def to_dict(self) -> dict:
        return {"payload": self.payload, "score": self.score}


def table_for_edition(edition: str) -> str:
    """Article table of an edition ("2026" -> "cgi_articles_2026")."""
    return SUPPORTED_EDITIONS[resolve_edition(edition)]["collection"]


class VectorStore:
    """
    PostgreSQL vector store with pgvector.

    Features:
    - Cosine similarity search per edition table
    - Batch upsert of articles keyed by article number
    - Conversation message persistence
    """

    def __init__(self, config: Optional[VectorStoreConfig] = None):
        self.config = config or VectorStoreConfig()
        self._conn = None
        self._pool = None
        self._connection_string = (
            self.config.connection_string or
            os.getenv("POSTGRES_URL") or
            os.getenv("DATABASE_URL") or
            "postgresql://localhost:5432/cgi_rag"
        )

    def connect(self) -> None:
        """Establish database connection (with optional pooling)."""
        if psycopg2 is None:
            raise ImportError(
                "psycopg2 not installed. Run: pip install psycopg2-binary"
            )
        from psycopg2.extras import RealDictCursor

        try:
            if self.config.use_pooling:
                self._pool = psycopg2.pool.ThreadedConnectionPool(
                    minconn=self.config.pool_min_connections,
                    maxconn=self.config.pool_max_connections,
                    dsn=self._connection_string,
                    cursor_factory=RealDictCursor,
                )
                conn = self._pool.getconn()
                try:
                    with conn.cursor() as cur:
                        cur.execute("CREATE EXTENSION IF NOT EXISTS vector")
                    conn.commit()
                finally:
                    self._pool.putconn(conn)
                logger.info(
                    f"Connection pool initialized (min={self.config.pool_min_connections}, "
                    f"max={self.config.pool_max_connections})"
                )
            else:
                self._conn = psycopg2.connect(
                    self._connection_string,
                    cursor_factory=RealDictCursor
                )
                self._conn.autocommit = False
                with self._conn.cursor() as cur:
                    cur.execute("CREATE EXTENSION IF NOT EXISTS vector")
                self._conn.commit()
                logger.info("Connected to PostgreSQL with pgvector (single connection)")

        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            raise

    def _get_connection(self):
        """Get a database connection (from pool or single connection)."""
        if self._pool:
            return self._pool.getconn()

        if self._conn and self._conn.closed:
            logger.warning("Connection closed, reconnecting...")
            self.connect()
        return self._conn

    def _release_connection(self, conn):
        if self._pool and conn:
            self._pool.putconn(conn)

    def _ensure_connection(self):
        if not self._conn and not self._pool:
            self.connect()
        return self._get_connection()

    @contextmanager
    def get_connection(self):
        """
        Context manager for getting a database connection.

        Usage:
            with store.get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT 1")
        """
        conn = self._ensure_connection()
        try:
            yield conn
        finally:
            self._release_connection(conn)

    def _safe_rollback(self, conn) -> None:
        """Rollback a connection, ignoring errors if the connection is dead."""
        try:
            conn.rollback()
        except (psycopg2.InterfaceError, psycopg2.OperationalError):
            pass

    def _execute_with_retry(self, operation, label="db_operation"):
        """Execute a DB operation with one retry on stale connection.

        Args:
            operation: Callable(conn) that performs the DB work and returns a result.
            label: Human-readable name for logging.

        Returns:
            Whatever ``operation`` returns.
        """
        for attempt in range(2):
            conn = self._ensure_connection()
            try:
                result = operation(conn)
                self._release_connection(conn)
                return result
            except (psycopg2.OperationalError, psycopg2.InterfaceError) as e:
                self._safe_rollback(conn)
                self._release_connection(conn)
                if attempt == 0:
                    logger.warning(f"{label}: stale conn, reconnecting: {e}")
                    self.close()
                    self.connect()
                    continue
                raise
            except Exception:
                self._safe_rollback(conn)
                self._release_connection(conn)
                raise

    def close(self) -> None:
        """Close database connection(s)."""
        if self._pool:
            self._pool.closeall()
            self._pool = None
            logger.info("Connection pool closed")
        if self._conn:
            self._conn.close()
            self._conn = None

    # =========================================================================
    # Schema
    # =========================================================================

    def initialize_schema(self, editions: Optional[list[str]] = None) -> None:
        """Create the article tables of the given editions and the messages table."""
        statements = []
        for edition in editions or list(SUPPORTED_EDITIONS):
            table = table_for_edition(edition)
            statements.append(f"""
            CREATE TABLE IF NOT EXISTS {table} (
                numero TEXT PRIMARY KEY,
                titre TEXT,
                contenu TEXT NOT NULL,
                version VARCHAR(10) NOT NULL,
                section TEXT,
                metadata JSONB DEFAULT '{{}}',
                embedding VECTOR({self.config.embedding_dimensions}),
                updated_at TIMESTAMPTZ DEFAULT NOW()
            );
            CREATE INDEX IF NOT EXISTS idx_{table}_embedding
                ON {table} USING hnsw (embedding vector_cosine_ops);
            """)

        statements.append(f"""
        CREATE TABLE IF NOT EXISTS {self.config.messages_table} (
            id BIGSERIAL PRIMARY KEY,
            conversation_id TEXT NOT NULL,
            role VARCHAR(20) NOT NULL,
            content TEXT NOT NULL,
            citations JSONB,
            response_time_ms FLOAT,
            tokens_used INT,
            created_at TIMESTAMPTZ DEFAULT NOW()
        );
        CREATE INDEX IF NOT EXISTS idx_messages_conversation
            ON {self.config.messages_table}(conversation_id, created_at);
        """)

        def _op(conn):
            with conn.cursor() as cur:
                cur.execute("\n".join(statements))
            conn.commit()
            logger.info("Schema initialized successfully")

        self._execute_with_retry(_op, "initialize_schema")

    # =========================================================================
    # Articles
    # =========================================================================

    def upsert_articles(self, edition: str, articles: list, embeddings: list[list[float]]) -> int:
        """
        Batch upsert articles with their embeddings.

        Args:
            edition: Edition key; selects the table
            articles: Article objects (see corpus.Article)
            embeddings: Corresponding embedding vectors

        Returns:
            Number of rows written
        """
        if len(articles) != len(embeddings):
            raise ValueError(
                f"Mismatch: {len(articles)} articles, {len(embeddings)} embeddings"
            )
        if not articles:
            return 0

        from psycopg2.extras import execute_values

        table = table_for_edition(edition)
        sql = f"""
        INSERT INTO {table} (numero, titre, contenu, version, section, metadata, embedding)
        VALUES %s
        ON CONFLICT (numero) DO UPDATE SET
            titre = EXCLUDED.titre,
            contenu = EXCLUDED.contenu,
            version = EXCLUDED.version,
            section = EXCLUDED.section,
            metadata = EXCLUDED.metadata,
            embedding = EXCLUDED.embedding,
            updated_at = NOW()
        """

        values = []
        for article, embedding in zip(articles, embeddings):
            values.append((
                article.numero,
                article.titre,
                article.contenu,
                article.version,
                article.section,
                json.dumps({
                    "themes": list(article.themes),
                    "tome": article.tome,
                    "chapitre": article.chapitre,
                }),
                embedding,
            ))

        def _op(conn):
            with conn.cursor() as cur:
                execute_values(
                    cur,
                    sql,
                    values,
                    template="(%s, %s, %s, %s, %s, %s, %s::vector)",
                    page_size=500,
                )
            conn.commit()
            logger.info(f"Upserted {len(values)} articles into {table}")
            return len(values)

        return self._execute_with_retry(_op, "upsert_articles")

    def search(self, edition: str, embedding: list[float], limit: int = 10) -> list[VectorHit]:
        """
        Nearest articles of an edition by cosine similarity.

        Returns:
            VectorHit list, best first; score = 1 - cosine distance
        """
        table = table_for_edition(edition)
        sql = f"""
        SELECT numero, titre, contenu,
               1 - (embedding <=> %s::vector) as score
        FROM {table}
        ORDER BY embedding <=> %s::vector
        LIMIT %s
        """

        def _op(conn):
            with conn.cursor() as cur:
                cur.execute(sql, (embedding, embedding, limit))
                rows = cur.fetchall()
            return [
                VectorHit(
                    payload={
                        "numero": row["numero"],
                        "titre": row["titre"],
                        "contenu": row["contenu"],
                    },
                    score=float(row["score"]),
                )
                for row in rows
            ]

        return self._execute_with_retry(_op, "search")

    def fetch_articles(self, edition: str, numeros: list[str]) -> list[dict]:
        """Stored articles by number (numero, titre, contenu)."""
        if not numeros:
            return []
        table = table_for_edition(edition)
        sql = f"SELECT numero, titre, contenu FROM {table} WHERE numero = ANY(%s)"

        def _op(conn):
            with conn.cursor() as cur:
                cur.execute(sql, (list(numeros),))
                rows = cur.fetchall()
            return [dict(row) for row in rows]

        return self._execute_with_retry(_op, "fetch_articles")

    def count_articles(self, edition: str) -> int:
        table = table_for_edition(edition)

        def _op(conn):
            with conn.cursor() as cur:
                cur.execute(f"SELECT COUNT(*) AS n FROM {table}")
                row = cur.fetchone()
            return int(row["n"])

        return self._execute_with_retry(_op, "count_articles")

    def ping(self) -> bool:
        """Health check: True when a trivial query succeeds."""
        def _op(conn):
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
            return True

        try:
            return self._execute_with_retry(_op, "ping")
        except Exception as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    # =========================================================================
    # Messages
    # =========================================================================

    def add_message(
        self,
        conversation_id: str,
        role: str,
        content: str,
        citations: Optional[list] = None,
        response_time_ms: Optional[float] = None,
        tokens_used: Optional[int] = None,
    ) -> dict:
        """Append a message to a conversation."""
        sql = f"""
        INSERT INTO {self.config.messages_table}
            (conversation_id, role, content, citations, response_time_ms, tokens_used)
        VALUES (%s, %s, %s, %s, %s, %s)
        RETURNING id, conversation_id, role, content, citations,
                  response_time_ms, tokens_used, created_at
        """
        citations_json = json.dumps(citations) if citations is not None else None

        def _op(conn):
            with conn.cursor() as cur:
                cur.execute(sql, (conversation_id, role, content, citations_json,
                                  response_time_ms, tokens_used))
                row = cur.fetchone()
            conn.commit()
            return _message_row(row)

        return self._execute_with_retry(_op, "add_message")

    def get_messages(self, conversation_id: str) -> list[dict]:
        """Messages of a conversation, oldest first."""
        sql = f"""
        SELECT id, conversation_id, role, content, citations,
               response_time_ms, tokens_used, created_at
        FROM {self.config.messages_table}
        WHERE conversation_id = %s
        ORDER BY created_at ASC, id ASC
        """

        def _op(conn):
            with conn.cursor() as cur:
                cur.execute(sql, (conversation_id,))
                rows = cur.fetchall()
            return [_message_row(row) for row in rows]

        return self._execute_with_retry(_op, "get_messages")


def _message_row(row) -> dict:
    return {
        "id": str(row["id"]),
        "conversation_id": row["conversation_id"],
        "role": row["role"],
        "content": row["content"],
        "citations": row["citations"],
        "response_time_ms": row["response_time_ms"],
        "tokens_used": row["tokens_used"],
        "created_at": row["created_at"].isoformat(),
    }


# CLI for testing
if __name__ == "__main__":
    import sys
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    store = VectorStore()
    store.connect()
    store.initialize_schema()
    for key in (sys.argv[1:] or list(SUPPORTED_EDITIONS)):
        print(f"CGI {key}: {store.count_articles(key)} articles")
    store.close()
