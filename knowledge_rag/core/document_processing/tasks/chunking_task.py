"""
Heading- and paragraph-aware chunking task.

Splits a document body at `## ` headings, keeps small sections whole and
packs paragraphs of large sections into overlapping chunks.

Dependencies: knowledge_rag.core.document_processing.tokens
System role: Second stage of the knowledge base ingestion pipeline
"""

from knowledge_rag.core.document_processing.tokens import TokenEstimator, estimate_tokens

HEADING_SEPARATOR = "\n## "
HEADING_PREFIX = "## "
PARAGRAPH_SEPARATOR = "\n\n"


class ChunkingTask:
    """
    Split document bodies into bounded, overlapping chunks.

    Sizing is measured with the token estimator while overlap is counted
    in whitespace-separated words. A single paragraph larger than
    chunk_size is emitted as one oversized chunk.
    """

    def __init__(
        self,
        chunk_size: int = 600,
        chunk_overlap: int = 100,
        min_chunk_chars: int = 50,
        estimate_tokens: TokenEstimator = estimate_tokens,
    ) -> None:
        """
        Initialize chunking task.

        Args:
            chunk_size: Target chunk size in estimated tokens
            chunk_overlap: Trailing words of a chunk repeated at the start of the next
            min_chunk_chars: Chunks of this length or shorter are dropped
            estimate_tokens: Token estimator applied to sections and paragraphs

        Raises:
            ValueError: When sizes are out of range
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if chunk_overlap < 0:
            raise ValueError("chunk_overlap cannot be negative")

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.min_chunk_chars = min_chunk_chars
        self._estimate = estimate_tokens

    def chunk(self, body: str) -> list[str]:
        """
        Split a document body into ordered chunks.

        Args:
            body: Markdown body (frontmatter already removed)

        Returns:
            list[str]: Chunks in document order, each longer than min_chunk_chars
        """
        chunks: list[str] = []
        for section in self.split_sections(body):
            if self._estimate(section) <= self.chunk_size:
                chunks.append(section.strip())
            else:
                chunks.extend(self._split_paragraphs(section))

        return [chunk for chunk in chunks if len(chunk) > self.min_chunk_chars]

    @staticmethod
    def split_sections(body: str) -> list[str]:
        """Split at `## ` headings, restoring the marker on every later section."""
        parts = body.split(HEADING_SEPARATOR)
        return [parts[0]] + [HEADING_PREFIX + part for part in parts[1:]]

    def _split_paragraphs(self, section: str) -> list[str]:
        """Pack paragraphs of an oversized section into overlapping chunks."""
        chunks: list[str] = []
        current = ""
        current_tokens = 0.0

        for paragraph in section.split(PARAGRAPH_SEPARATOR):
            paragraph_tokens = self._estimate(paragraph)

            if current and current_tokens + paragraph_tokens > self.chunk_size:
                emitted = current.strip()
                chunks.append(emitted)
                overlap = self._overlap_words(emitted)
                current = overlap + PARAGRAPH_SEPARATOR + paragraph
                current_tokens = self._estimate(overlap) + paragraph_tokens
            else:
                current = current + PARAGRAPH_SEPARATOR + paragraph if current else paragraph
                current_tokens += paragraph_tokens

        if current.strip():
            chunks.append(current.strip())
        return chunks

    def _overlap_words(self, text: str) -> str:
        """Last chunk_overlap space-separated words of text."""
        if self.chunk_overlap == 0:
            return ""
        return " ".join(text.split(" ")[-self.chunk_overlap:])
