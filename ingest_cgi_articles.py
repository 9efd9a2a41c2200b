"""
Batch ingestion of CGI articles into the vector store.

Loads a corpus JSON file for one edition, embeds every article and upserts
it into the edition's pgvector table (cgi_articles_<edition>).

Usage:
    python ingest_cgi_articles.py --edition 2026
    python ingest_cgi_articles.py --edition 2025 --file data/corpus/cgi_2025.json --batch-size 64
    python ingest_cgi_articles.py --edition 2026 --dry-run
"""

import sys
import time
import argparse
import logging
from pathlib import Path
from dotenv import load_dotenv

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def embedding_text(article) -> str:
    """Text sent to the embedding model: number, title, then body."""
    header = article.numero
    if article.titre:
        header += f" - {article.titre}"
    return f"{header}\n\n{article.contenu}"


def ingest_batch(articles: list, embedding_service, store, edition: str) -> int:
    """Embed and upsert one batch. Returns number of rows written."""
    embeddings = embedding_service.embed_documents([embedding_text(a) for a in articles])
    return store.upsert_articles(edition, articles, embeddings)


def main():
    arg_parser = argparse.ArgumentParser(description="Ingest CGI articles into pgvector")
    arg_parser.add_argument(
        "--edition",
        type=str,
        default="current",
        help="CGI edition: 2025, 2026 or current (default: current)",
    )
    arg_parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Corpus JSON file (default: <CGI_CORPUS_DIR>/cgi_<edition>.json)",
    )
    arg_parser.add_argument(
        "--batch-size",
        type=int,
        default=100,
        help="Articles per embedding/upsert batch",
    )
    arg_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Load and validate the corpus without embedding or writing",
    )
    args = arg_parser.parse_args()

    from execution.cgi_rag.article_metadata import ArticleMetadataCatalog
    from execution.cgi_rag.corpus import ArticleCorpus
    from execution.cgi_rag.edition_config import resolve_edition
    from execution.cgi_rag.errors import UnknownEditionError

    try:
        edition = resolve_edition(args.edition)
    except UnknownEditionError as e:
        logger.error(str(e))
        sys.exit(1)

    catalog = ArticleMetadataCatalog.for_edition(edition)
    if args.file:
        path = Path(args.file)
        if not path.exists():
            logger.error(f"File not found: {path}")
            sys.exit(1)
        corpus = ArticleCorpus.load_json(path, edition, catalog=catalog)
    else:
        corpus = ArticleCorpus.for_edition(edition, catalog=catalog)

    articles = [a for a in corpus if a.contenu.strip()]
    if not articles:
        logger.error(f"No articles with content for CGI {edition}")
        sys.exit(1)

    empty = len(corpus) - len(articles)
    logger.info(f"CGI {edition}: {len(articles)} articles to ingest ({empty} without content skipped)")

    if args.dry_run:
        for article in articles[:10]:
            logger.info(f"  {article.numero}: {article.titre or '-'} ({len(article.contenu)} chars)")
        return

    from execution.cgi_rag.embeddings import get_embedding_service
    from execution.cgi_rag.vector_store import VectorStore

    store = VectorStore()
    store.connect()
    store.initialize_schema([edition])
    embedding_service = get_embedding_service()

    start_time = time.time()
    written = 0
    failed = 0
    batches = [articles[i:i + args.batch_size] for i in range(0, len(articles), args.batch_size)]

    for i, batch in enumerate(batches):
        logger.info(f"[{i+1}/{len(batches)}] {batch[0].numero} .. {batch[-1].numero}")
        try:
            written += ingest_batch(batch, embedding_service, store, edition)
        except Exception as e:
            failed += len(batch)
            logger.error(f"  FAILED: {e}")

    elapsed = time.time() - start_time
    total = store.count_articles(edition)
    store.close()

    # Summary
    print("\n" + "=" * 60)
    print("INGESTION COMPLETE")
    print("=" * 60)
    print(f"Edition:         CGI {edition}")
    print(f"Articles written: {written}/{len(articles)} ({failed} failed)")
    print(f"Rows in table:   {total}")
    print(f"Time elapsed:    {elapsed:.1f}s")
    print("=" * 60)


if __name__ == "__main__":
    main()
