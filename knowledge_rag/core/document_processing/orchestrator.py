"""
Batch ingestion orchestrator.

Walks a directory of markdown sources and ingests each one through the
DocumentPipeline. A failing document is logged and counted; the run
always continues with the remaining files.

Dependencies: knowledge_rag.core.document_processing.entrypoint
System role: Knowledge base batch ingestion driver
"""

import logging
from pathlib import Path
from typing import Callable, Iterable

from knowledge_rag.core.exceptions import IngestionConfigurationError
from knowledge_rag.observability.log_utils import log_exception_with_context, log_with_context

from .entrypoint import DocumentPipeline
from .models import DocumentOutcome, IngestionSummary

logger = logging.getLogger(__name__)

OutcomeCallback = Callable[[DocumentOutcome], None]


class IngestionOrchestrator:
    """Ingest every source document of a directory with per-document isolation."""

    def __init__(
        self,
        pipeline: DocumentPipeline,
        file_extensions: Iterable[str] = (".md", ".mdx"),
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            pipeline: Pipeline used for each document
            file_extensions: File suffixes treated as source documents
        """
        self._pipeline = pipeline
        self._extensions = tuple(ext.lower() for ext in file_extensions)

    def discover(self, docs_dir: str | Path) -> list[Path]:
        """
        List source files of a directory in name order.

        Args:
            docs_dir: Directory holding the source documents

        Returns:
            list[Path]: Matching regular files

        Raises:
            IngestionConfigurationError: When the directory does not exist
        """
        directory = Path(docs_dir)
        if not directory.is_dir():
            raise IngestionConfigurationError(
                f"Knowledge base directory not found: {directory}",
                setting="ingestion.docs_dir",
            )
        return sorted(
            path
            for path in directory.iterdir()
            if path.is_file() and path.suffix.lower() in self._extensions
        )

    async def ingest_directory(
        self,
        docs_dir: str | Path,
        on_outcome: OutcomeCallback | None = None,
    ) -> IngestionSummary:
        """
        Ingest every source file, isolating failures per document.

        Args:
            docs_dir: Directory holding the source documents
            on_outcome: Called after each document with its outcome

        Returns:
            IngestionSummary: Per-file outcomes and success/failure tally

        Raises:
            IngestionConfigurationError: When the directory does not exist
        """
        files = self.discover(docs_dir)
        logger.info(f"{__name__}:ingest_directory - Found {len(files)} documents to process")

        summary = IngestionSummary()
        for path in files:
            outcome = await self._ingest_one(path)
            summary.outcomes.append(outcome)
            if on_outcome is not None:
                on_outcome(outcome)

        logger.info(
            f"{__name__}:ingest_directory - Ingestion finished",
            extra={
                "total": summary.total,
                "succeeded": summary.succeeded,
                "failed": summary.failed,
            },
        )
        return summary

    async def _ingest_one(self, path: Path) -> DocumentOutcome:
        try:
            result = await self._pipeline.process(path)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:ingest_directory - Failed to process document",
                e,
                source=path.name,
            )
            return DocumentOutcome(source=path.name, succeeded=False, error=str(e))

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:ingest_directory - Completed document",
            source=result.source,
            document_id=result.document_id,
            chunk_count=result.chunk_count,
        )
        return DocumentOutcome(
            source=path.name,
            succeeded=True,
            chunk_count=result.chunk_count,
        )
