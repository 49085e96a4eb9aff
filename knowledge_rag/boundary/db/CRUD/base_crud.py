"""
Shared CRUD operations for the knowledge base tables.

Documents, chunks and embeddings all key on a UUID `id`; the operations
they share live here and the table-specific queries live in subclasses.
Nothing here commits: callers own the transaction.

Dependencies: sqlalchemy
System role: Parent of the document, chunk and embedding CRUD classes
"""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_rag.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    CRUD operations keyed on a UUID primary key.

    Type Parameters:
        ModelT: ORM model with an `id` column
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Insert a row and load its generated columns.

        The row is flushed, not committed, so it rolls back with the
        surrounding transaction.

        Args:
            session: Async database session
            **kwargs: Column values

        Returns:
            ModelT: Instance with id and timestamps populated
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """Return the row with this id, or None."""
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete the row with this id.

        Returns:
            bool: True if a row was deleted
        """
        stmt = delete(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def count(self, session: AsyncSession) -> int:
        """Number of rows in the table, for the stats endpoint."""
        stmt = select(func.count()).select_from(self.model)
        result = await session.execute(stmt)
        return int(result.scalar_one())
