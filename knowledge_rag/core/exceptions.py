"""
Exception hierarchy for the knowledge base RAG core.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class KnowledgeBaseException(Exception):
    """Base exception for all knowledge base errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(KnowledgeBaseException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ConfigurationError(KnowledgeBaseException):
    """Raised when required configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the offending setting
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class IngestionConfigurationError(ConfigurationError):
    """Raised when a batch ingestion run cannot start."""

    pass


class DocumentNotFoundError(KnowledgeBaseException):
    """Raised when a knowledge base document cannot be found."""

    def __init__(self, document_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize document not found error.

        Args:
            document_id: ID of the missing document
            details: Additional context
        """
        details = details or {}
        details["document_id"] = document_id
        super().__init__(f"Document not found: {document_id}", details)


class DocumentProcessingError(KnowledgeBaseException):
    """Base exception for document ingestion errors."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            source: Source identifier (filename) of the failing document
            details: Additional context
        """
        details = details or {}
        if source:
            details["source"] = source
        self.source = source
        super().__init__(message, details)


class ParsingError(DocumentProcessingError):
    """Raised when a source document cannot be read."""

    pass


class EmbeddingError(DocumentProcessingError):
    """Raised when embedding generation fails."""

    pass


class DocumentStoreError(DocumentProcessingError):
    """Raised when a document store operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document store error.

        Args:
            message: Error message
            operation: Store operation that failed (upsert, insert_chunk, ...)
            source: Source identifier of the document being written
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, source, details)


class VectorStoreError(KnowledgeBaseException):
    """Raised when vector index operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (add, search, similarity)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class VectorDimensionError(VectorStoreError):
    """Raised when two vectors of different length are compared."""

    pass


class RetrievalError(KnowledgeBaseException):
    """Raised when retrieval operations fail."""

    def __init__(
        self,
        message: str,
        query: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize retrieval error.

        Args:
            message: Error message
            query: Query text for the failed retrieval
            details: Additional context
        """
        details = details or {}
        if query:
            details["query"] = query
        super().__init__(message, details)
