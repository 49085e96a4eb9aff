"""
Command-line batch ingestion for the knowledge base.

High-level flow:

    docs dir -> Frontmatter parser -> Chunker -> Embeddings -> Document store

Every markdown file of the directory is ingested in its own transaction.
A failing file is reported and the run continues.

Exit codes:
    0  every document ingested
    1  at least one document failed, or the run aborted
    2  configuration error (missing provider credential or directory)

Usage:
    kb-ingest --docs-dir docs/knowledge
    python -m knowledge_rag.scripts.ingest_knowledge_base
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from langchain_core.embeddings import Embeddings

from knowledge_rag.boundary.db import get_async_engine, get_async_session_factory
from knowledge_rag.boundary.db.create_tables import create_all_tables
from knowledge_rag.boundary.llm import build_embeddings_client
from knowledge_rag.configs import Settings, get_settings
from knowledge_rag.core.document_processing import (
    DocumentPipeline,
    EmbeddingTask,
    IngestionOrchestrator,
)
from knowledge_rag.core.document_processing.models import DocumentOutcome, IngestionSummary
from knowledge_rag.core.exceptions import ConfigurationError
from knowledge_rag.observability import configure_logging

app = typer.Typer(help="Ingest markdown documents into the knowledge base", add_completion=False)
logger = logging.getLogger(__name__)

CONFIG_ERROR_EXIT_CODE = 2
SEPARATOR = "=" * 48


def _print_outcome(outcome: DocumentOutcome) -> None:
    if outcome.succeeded:
        typer.echo(f"  [ok]     {outcome.source}: {outcome.chunk_count} chunks with embeddings")
    else:
        typer.echo(f"  [failed] {outcome.source}: {outcome.error}", err=True)


def _print_summary(summary: IngestionSummary) -> None:
    typer.echo(SEPARATOR)
    typer.echo("Ingestion Summary:")
    typer.echo(f"  Successful: {summary.succeeded}")
    typer.echo(f"  Failed: {summary.failed}")
    typer.echo(f"  Total: {summary.total}")
    typer.echo(SEPARATOR)
    if summary.failed == 0:
        typer.echo("Knowledge base is ready for RAG queries.")


async def run_ingestion(
    settings: Settings,
    client: Embeddings,
    docs_dir: Path,
    create_tables: bool = True,
) -> IngestionSummary:
    """
    Ingest a directory with a fresh engine, disposed when the run ends.

    Args:
        settings: Application settings
        client: Embeddings client shared by every document of the run
        docs_dir: Directory holding the source documents
        create_tables: Create missing tables before ingesting

    Returns:
        IngestionSummary: Per-file outcomes

    Raises:
        IngestionConfigurationError: When the directory does not exist
    """
    engine = get_async_engine(settings.database)
    try:
        if create_tables:
            await create_all_tables(engine)

        embedding_task = EmbeddingTask(
            client=client,
            model_id=settings.embedding.model,
            dimensions=settings.embedding.dimensions,
        )
        pipeline = DocumentPipeline.from_settings(
            session_factory=get_async_session_factory(engine),
            embedding_task=embedding_task,
            settings=settings.ingestion,
        )
        orchestrator = IngestionOrchestrator(
            pipeline,
            file_extensions=settings.ingestion.file_extensions,
        )
        return await orchestrator.ingest_directory(docs_dir, on_outcome=_print_outcome)
    finally:
        await engine.dispose()


@app.command()
def main(
    docs_dir: Optional[Path] = typer.Option(
        None,
        "--docs-dir",
        "-d",
        help="Directory of markdown documents (default: KB_INGEST_DOCS_DIR or docs/knowledge).",
    ),
    create_tables: bool = typer.Option(
        True,
        "--create-tables/--no-create-tables",
        help="Create missing knowledge base tables before ingesting.",
    ),
) -> None:
    """Ingest every markdown document of a directory into the knowledge base."""
    settings = get_settings()
    configure_logging(settings.log_level)
    directory = docs_dir or Path(settings.ingestion.docs_dir)

    typer.echo("Starting Knowledge Base Ingestion")
    typer.echo(SEPARATOR)

    try:
        client = build_embeddings_client(settings.embedding)
        summary = asyncio.run(run_ingestion(settings, client, directory, create_tables))
    except ConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE)
    except Exception as e:
        logger.exception(f"{__name__}:main - Fatal error during ingestion")
        typer.echo(f"Fatal error during ingestion: {e}", err=True)
        raise typer.Exit(code=1)

    _print_summary(summary)
    raise typer.Exit(code=summary.exit_code)


if __name__ == "__main__":
    app()
