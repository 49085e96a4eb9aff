"""
Knowledge base ingestion and retrieval-augmented generation core.

Markdown documents with a frontmatter header are parsed, chunked with
overlap, embedded and persisted; queries are answered by cosine-similarity
search over the stored embeddings.
"""

__version__ = "0.1.0"
