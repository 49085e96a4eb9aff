"""
Frontmatter parsing task.

Splits a markdown source into its `---` delimited header block and body.
Parsing is lenient: a malformed header line is skipped and reported,
never fatal.

Dependencies: re, knowledge_rag.core.document_processing.models
System role: First stage of the knowledge base ingestion pipeline
"""

import logging
import re
from pathlib import Path

from knowledge_rag.core.document_processing.models import (
    DocumentMetadata,
    FrontmatterResult,
)
from knowledge_rag.core.exceptions import ParsingError

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(r"^---\n(.*?)\n---\n(.*)$", re.DOTALL)


def _parse_value(raw: str) -> str | list[str]:
    """Bracketed values become lists; quotes are dropped from every value."""
    value = raw.strip()
    if value.startswith("[") and value.endswith("]"):
        return [item.strip().replace('"', "") for item in value[1:-1].split(",")]
    return value.replace('"', "")


def parse_frontmatter(text: str) -> FrontmatterResult:
    """
    Parse a document into metadata and body.

    Without a header block the whole input is the body and metadata takes
    its defaults (title "Untitled", no tags, empty summary).

    Args:
        text: Raw document text

    Returns:
        FrontmatterResult: Metadata, body and any skipped header lines
    """
    match = FRONTMATTER_PATTERN.match(text)
    if not match:
        return FrontmatterResult(metadata=DocumentMetadata(), body=text)

    header, body = match.groups()
    fields: dict[str, str | list[str]] = {}
    skipped: list[str] = []

    for line in header.split("\n"):
        if not line.strip():
            continue
        key, sep, raw_value = line.partition(":")
        key = key.strip()
        if not sep or not key or not raw_value.strip():
            skipped.append(line)
            continue
        fields[key] = _parse_value(raw_value)

    tags = fields.get("tags", [])
    if isinstance(tags, str):
        tags = [tags]
    title = fields.get("title")
    summary = fields.get("summary")

    metadata = DocumentMetadata(
        title=title if isinstance(title, str) and title else "Untitled",
        tags=[tag for tag in tags if tag],
        summary=summary if isinstance(summary, str) else "",
    )
    return FrontmatterResult(
        metadata=metadata,
        body=body.strip(),
        skipped_lines=skipped,
        has_frontmatter=True,
    )


class ParsingTask:
    """Read a markdown source file and parse its frontmatter."""

    def parse(self, file_path: str | Path) -> FrontmatterResult:
        """
        Read and parse a source document.

        Args:
            file_path: Path to the markdown file

        Returns:
            FrontmatterResult: Parsed metadata and body

        Raises:
            ParsingError: When the file cannot be read or decoded
        """
        path = Path(file_path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParsingError(
                f"Failed to read document: {e}",
                source=path.name,
            ) from e

        result = parse_frontmatter(text)
        for line in result.skipped_lines:
            logger.warning(
                f"{__name__}:parse - Skipped malformed frontmatter line",
                extra={"source": path.name, "line": line},
            )
        return result
