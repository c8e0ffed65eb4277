"""Generic SQLAlchemy repository shared by all entities."""

import logging
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SqlAlchemyRepository(Generic[ModelT]):
    """
    CRUD access to one mapped entity.

    Write methods commit the session. When the database rejects a write the
    session is rolled back and the original ``SQLAlchemyError`` propagates;
    translating it into an API error is the caller's responsibility.
    """

    model: type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, entity_id: int) -> ModelT | None:
        stmt = (
            select(self.model)
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self) -> Sequence[ModelT]:
        stmt = (
            select(self.model)
            .order_by(self.model.id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        await self._commit()
        return await self._reload(entity)

    async def update(self, entity: ModelT, changes: dict[str, Any] | None = None) -> ModelT:
        """Apply ``changes`` (attribute -> value) to ``entity`` and persist it."""
        for attribute, value in (changes or {}).items():
            setattr(entity, attribute, value)
        self.db.add(entity)
        await self._commit()
        return await self._reload(entity)

    async def delete(self, entity: ModelT) -> None:
        await self.db.delete(entity)
        await self._commit()

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.warning(
                "Database rejected write",
                extra={"entity": self.model.__name__, "error": str(e)}
            )
            raise

    async def _reload(self, entity: ModelT) -> ModelT:
        # Picks up server defaults and eager-loaded relationships after a write
        return await self.get(entity.id)
