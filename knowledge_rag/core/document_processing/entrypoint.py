"""
Document pipeline orchestrator.

Coordinates parsing, chunking, embedding and saving for one document.
A file is ingested inside a single transaction: a failure at any stage
rolls back and leaves the previously stored chunk set untouched.

Dependencies: All task modules, knowledge_rag.boundary.db
System role: Pipeline orchestration for one document (coordinates only)
"""

import logging
import time
from pathlib import Path
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from knowledge_rag.configs.ingestion import IngestionSettings
from knowledge_rag.core.exceptions import DocumentProcessingError, KnowledgeBaseException

from .models import FrontmatterResult, PipelineResult
from .rate_limiter import RateLimiter
from .tasks import ChunkingTask, EmbeddingTask, ParsingTask, SavingTask, parse_frontmatter
from .tokens import count_tokens

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document ingestion: parse -> upsert -> chunk -> embed -> save."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        embedding_task: EmbeddingTask,
        rate_limiter: RateLimiter | None = None,
        chunking_task: ChunkingTask | None = None,
        parsing_task: ParsingTask | None = None,
        saving_task: SavingTask | None = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            session_factory: Factory for per-document database sessions
            embedding_task: Embedding generator bound to the shared provider client
            rate_limiter: Throttle awaited before every embedding call
            chunking_task: Chunker (defaults: 600 tokens, 100 words overlap)
            parsing_task: Frontmatter parser for files
            saving_task: Document store operations
        """
        self._session_factory = session_factory
        self._embedding_task = embedding_task
        self._rate_limiter = rate_limiter or RateLimiter()
        self._chunking_task = chunking_task or ChunkingTask()
        self._parsing_task = parsing_task or ParsingTask()
        self._saving_task = saving_task or SavingTask()

    @classmethod
    def from_settings(
        cls,
        session_factory: async_sessionmaker[AsyncSession],
        embedding_task: EmbeddingTask,
        settings: IngestionSettings,
    ) -> "DocumentPipeline":
        """Build a pipeline with chunking and throttling taken from ingestion settings."""
        return cls(
            session_factory=session_factory,
            embedding_task=embedding_task,
            rate_limiter=RateLimiter(settings.rate_limit_interval_seconds),
            chunking_task=ChunkingTask(
                chunk_size=settings.chunk_size,
                chunk_overlap=settings.chunk_overlap,
                min_chunk_chars=settings.min_chunk_chars,
            ),
        )

    @property
    def model_id(self) -> str:
        """Embedding model identifier written with every vector."""
        return self._embedding_task.model_id

    async def process(self, file_path: str | Path) -> PipelineResult:
        """
        Ingest one markdown file in its own transaction.

        The file name is the document's source identifier.

        Args:
            file_path: Path to the markdown file

        Returns:
            PipelineResult: Document id, chunk count and timing

        Raises:
            DocumentProcessingError: Any stage failed; nothing was committed
        """
        path = Path(file_path)
        parsed = self._parsing_task.parse(path)
        return await self._ingest_in_transaction(path.name, parsed)

    async def process_text(self, source: str, text: str) -> PipelineResult:
        """
        Ingest raw document text under the given source identifier.

        Args:
            source: Source identifier
            text: Raw markdown including an optional frontmatter block

        Returns:
            PipelineResult: Document id, chunk count and timing
        """
        return await self._ingest_in_transaction(source, parse_frontmatter(text))

    async def _ingest_in_transaction(
        self,
        source: str,
        parsed: FrontmatterResult,
    ) -> PipelineResult:
        start_time = time.perf_counter()
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await self.ingest(session, source, parsed)
        except KnowledgeBaseException:
            raise
        except Exception as e:
            raise DocumentProcessingError(
                f"Document ingestion failed: {e}",
                source=source,
            ) from e

        result.processing_time_ms = (time.perf_counter() - start_time) * 1000
        return result

    async def ingest(
        self,
        session: AsyncSession,
        source: str,
        parsed: FrontmatterResult,
    ) -> PipelineResult:
        """
        Upsert a parsed document and rebuild its chunks inside the caller's transaction.

        Args:
            session: Async database session with an open transaction
            source: Source identifier
            parsed: Frontmatter parse result

        Returns:
            PipelineResult: Result without timing (processing_time_ms = 0)
        """
        metadata = parsed.metadata
        document, created = await self._saving_task.upsert_document(
            session,
            source=source,
            title=metadata.title,
            topic=metadata.topic,
            tags=metadata.tags,
            body=parsed.body,
            metadata={"summary": metadata.summary},
        )
        chunk_count = await self.store_chunks(session, document.id, parsed.body, source)

        return PipelineResult(
            document_id=str(document.id),
            source=source,
            title=document.title,
            chunk_count=chunk_count,
            created=created,
            processing_time_ms=0.0,
        )

    async def store_chunks(
        self,
        session: AsyncSession,
        document_id: UUID,
        body: str,
        source: str,
    ) -> int:
        """
        Chunk a body and store every chunk with its embedding, in index order.

        Chunk i is embedded and saved before chunk i + 1 starts. The caller
        must have removed any previous chunks of the document.

        Args:
            session: Async database session with an open transaction
            document_id: Owning document id
            body: Markdown body to chunk
            source: Source identifier for logs and errors

        Returns:
            int: Number of chunks stored
        """
        chunks = self._chunking_task.chunk(body)
        if not chunks:
            logger.warning(
                f"{__name__}:store_chunks - Document produced no chunks",
                extra={"source": source},
            )

        for index, content in enumerate(chunks):
            chunk = await self._saving_task.insert_chunk(
                session,
                document_id=document_id,
                index=index,
                content=content,
                token_count=count_tokens(content),
            )
            await self._rate_limiter.acquire()
            vector = await self._embedding_task.embed(content, source=source)
            await self._saving_task.insert_embedding(
                session,
                chunk_id=chunk.id,
                vector=vector,
                model_id=self._embedding_task.model_id,
            )
            logger.debug(
                f"{__name__}:store_chunks - Stored chunk {index + 1}/{len(chunks)}",
                extra={"source": source},
            )

        return len(chunks)
