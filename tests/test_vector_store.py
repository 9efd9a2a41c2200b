"""
Tests for execution/cgi_rag/vector_store.py

Covers: VectorStoreConfig, VectorHit, edition tables, article search,
        fetch and upsert, message persistence, health ping and the
        stale-connection retry.

All database calls are mocked -- no PostgreSQL required.
"""

from datetime import datetime, timezone
from unittest.mock import patch, MagicMock

import pytest


@pytest.fixture
def db():
    """VectorStore wired to a mocked single connection; returns (store, conn, cursor)."""
    from execution.cgi_rag.vector_store import VectorStore, VectorStoreConfig
    store = VectorStore(VectorStoreConfig(use_pooling=False, connection_string="postgresql://test/cgi"))
    conn = MagicMock()
    conn.closed = False
    cursor = conn.cursor.return_value.__enter__.return_value
    store._conn = conn
    return store, conn, cursor


class TestVectorStoreConfig:

    def test_defaults(self):
        from execution.cgi_rag.vector_store import VectorStoreConfig
        cfg = VectorStoreConfig()
        assert cfg.connection_string is None
        assert cfg.embedding_dimensions == 1024
        assert cfg.messages_table == "messages"
        assert cfg.pool_min_connections == 2
        assert cfg.pool_max_connections == 20
        assert cfg.use_pooling is True

    def test_connection_string_from_env(self, monkeypatch):
        from execution.cgi_rag.vector_store import VectorStore
        monkeypatch.setenv("POSTGRES_URL", "postgresql://env/cgi")
        assert VectorStore()._connection_string == "postgresql://env/cgi"


class TestTables:

    def test_table_for_edition(self):
        from execution.cgi_rag.vector_store import table_for_edition
        assert table_for_edition("2025") == "cgi_articles_2025"
        assert table_for_edition("current") == "cgi_articles_2026"

    def test_unknown_edition(self):
        from execution.cgi_rag.errors import UnknownEditionError
        from execution.cgi_rag.vector_store import table_for_edition
        with pytest.raises(UnknownEditionError):
            table_for_edition("2030")

    def test_vector_hit(self):
        from execution.cgi_rag.vector_store import VectorHit
        hit = VectorHit(payload={"numero": "Art. 86A"}, score=0.8)
        assert hit.numero == "Art. 86A"
        assert hit.to_dict() == {"payload": {"numero": "Art. 86A"}, "score": 0.8}


class TestArticles:

    def test_search(self, db):
        store, conn, cursor = db
        cursor.fetchall.return_value = [
            {"numero": "Art. 86A", "titre": "Taux de l'IS", "contenu": "28%", "score": 0.91},
        ]
        hits = store.search("2026", [0.1, 0.2], limit=5)

        assert hits[0].payload == {"numero": "Art. 86A", "titre": "Taux de l'IS", "contenu": "28%"}
        assert hits[0].score == pytest.approx(0.91)
        sql, params = cursor.execute.call_args.args
        assert "FROM cgi_articles_2026" in sql
        assert params == ([0.1, 0.2], [0.1, 0.2], 5)

    def test_fetch_articles(self, db):
        store, conn, cursor = db
        cursor.fetchall.return_value = [{"numero": "Art. 86B", "titre": None, "contenu": "1%"}]
        rows = store.fetch_articles("2025", ["Art. 86B"])

        assert rows == [{"numero": "Art. 86B", "titre": None, "contenu": "1%"}]
        sql, params = cursor.execute.call_args.args
        assert "cgi_articles_2025" in sql
        assert "ANY(%s)" in sql
        assert params == (["Art. 86B"],)

    def test_fetch_no_numbers_skips_db(self, db):
        store, conn, cursor = db
        assert store.fetch_articles("2026", []) == []
        cursor.execute.assert_not_called()

    def test_upsert_mismatch(self, db, sample_articles):
        store, _, _ = db
        with pytest.raises(ValueError):
            store.upsert_articles("2026", sample_articles, [[0.1]])

    def test_upsert(self, db, sample_articles):
        store, conn, cursor = db
        embeddings = [[0.1] * 4 for _ in sample_articles]
        with patch("psycopg2.extras.execute_values") as execute_values:
            written = store.upsert_articles("2026", sample_articles, embeddings)

        assert written == len(sample_articles)
        args = execute_values.call_args.args
        assert "INSERT INTO cgi_articles_2026" in args[1]
        assert args[2][0][0] == "Art. 86"
        conn.commit.assert_called_once()

    def test_count_articles(self, db):
        store, _, cursor = db
        cursor.fetchone.return_value = {"n": 42}
        assert store.count_articles("2026") == 42

    def test_initialize_schema(self, db):
        store, conn, cursor = db
        store.initialize_schema(["2026"])
        sql = cursor.execute.call_args.args[0]
        assert "CREATE TABLE IF NOT EXISTS cgi_articles_2026" in sql
        assert "cgi_articles_2025" not in sql
        assert "CREATE TABLE IF NOT EXISTS messages" in sql
        conn.commit.assert_called_once()


class TestMessages:

    def test_add_message(self, db):
        store, conn, cursor = db
        created = datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc)
        cursor.fetchone.return_value = {
            "id": 7, "conversation_id": "c1", "role": "assistant", "content": "28%.",
            "citations": [{"articleNumber": "Art. 86A"}], "response_time_ms": 800.0,
            "tokens_used": 120, "created_at": created,
        }
        message = store.add_message("c1", "assistant", "28%.", citations=[{"articleNumber": "Art. 86A"}])

        assert message["id"] == "7"
        assert message["created_at"] == created.isoformat()
        params = cursor.execute.call_args.args[1]
        assert params[3] == '[{"articleNumber": "Art. 86A"}]'
        conn.commit.assert_called_once()

    def test_get_messages(self, db):
        store, _, cursor = db
        created = datetime(2026, 3, 1, tzinfo=timezone.utc)
        cursor.fetchall.return_value = [
            {"id": 1, "conversation_id": "c1", "role": "user", "content": "Bonjour",
             "citations": None, "response_time_ms": None, "tokens_used": None, "created_at": created},
        ]
        messages = store.get_messages("c1")
        assert messages[0]["role"] == "user"
        assert cursor.execute.call_args.args[1] == ("c1",)


class TestConnectionHandling:

    def test_ping(self, db):
        store, _, _ = db
        assert store.ping() is True

    def test_ping_failure(self, db):
        store, conn, cursor = db
        cursor.execute.side_effect = Exception("server closed the connection")
        assert store.ping() is False
        conn.rollback.assert_called()

    def test_retry_on_stale_connection(self, db):
        psycopg2 = pytest.importorskip("psycopg2")
        store, conn, cursor = db
        cursor.execute.side_effect = [psycopg2.OperationalError("stale"), None]
        cursor.fetchone.return_value = {"n": 3}
        store.connect = MagicMock(side_effect=lambda: setattr(store, "_conn", conn))

        assert store.count_articles("2026") == 3
        store.connect.assert_called_once()

    def test_connect_without_driver(self):
        from execution.cgi_rag.vector_store import VectorStore
        with patch("execution.cgi_rag.vector_store.psycopg2", None):
            with pytest.raises(ImportError):
                VectorStore().connect()
