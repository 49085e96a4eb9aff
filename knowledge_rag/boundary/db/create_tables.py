"""
Database table creation script.

Creates the knowledge base tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, knowledge_rag.configs
System role: Database schema initialization

Usage:
    python -m knowledge_rag.boundary.db.create_tables
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine

from knowledge_rag.boundary.db.base import Base
from knowledge_rag.boundary.db.connection import get_async_engine
from knowledge_rag.configs.database import DatabaseSettings

# Import all models to register them with Base.metadata
from knowledge_rag.boundary.db.models.chunk_model import ChunkModel  # noqa: F401
from knowledge_rag.boundary.db.models.document_model import DocumentModel  # noqa: F401
from knowledge_rag.boundary.db.models.embedding_model import EmbeddingModel  # noqa: F401


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: issues CREATE TABLE only for missing tables, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Engine to use (a new engine from settings if None)

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all knowledge base tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def init_database(db_config: DatabaseSettings | None = None) -> None:
    """
    Create missing tables on a dedicated engine, disposed afterwards.

    Args:
        db_config: Database settings (application settings if None)
    """
    engine = get_async_engine(db_config)
    try:
        await create_all_tables(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(init_database())
    print("All tables created successfully.")
