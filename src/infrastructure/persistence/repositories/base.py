from abc import ABC
from typing import Any, Generic, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(ABC, Generic[ModelType]):
    """
    Base repository implementing common lookup and upsert operations (LSP).

    Works on ORM rows; subclasses translate rows to domain entities.
    Provides a save hook for subclasses to override.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: Any) -> ModelType | None:
        """Get a single record by ID"""
        return await self.db.get(self.model, id)

    async def exists(self, id: Any) -> bool:
        """Check if a record with this ID exists without loading it"""
        # Cast to Any for SQLAlchemy dynamic attribute access
        model: Any = self.model
        result = await self.db.execute(select(exists().where(model.id == id)))
        return bool(result.scalar())

    async def upsert(self, obj: ModelType) -> ModelType:
        """
        Insert or overwrite a record by primary key (last write wins).

        Merges into the session so an existing row is updated in place.
        """
        merged = await self.db.merge(obj)
        await self.db.flush()
        await self._on_after_save(merged)
        return merged

    # Hooks - override in subclasses
    async def _on_after_save(self, obj: ModelType) -> None:
        """Hook called after inserting or updating a record."""
        pass
