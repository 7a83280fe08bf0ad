"""Generic repository for mapped models."""

import logging
import uuid
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

IdFactory = Callable[[], str]


def new_id() -> str:
    """Generate a fresh opaque identifier."""
    return str(uuid.uuid4())


class Repository(Generic[ModelT]):
    """
    Store for one mapped model.

    Every entity kind gets its own instance; the class itself knows nothing
    about users, roles or products. Identifiers are assigned by ``id_factory``
    the first time an entity is saved.
    """

    def __init__(
        self,
        db: AsyncSession,
        model: type[ModelT],
        id_factory: IdFactory = new_id,
    ) -> None:
        """Initialize repository with database session and model class."""
        self.db = db
        self.model = model
        self.id_factory = id_factory

    async def find(self, **criteria: Any) -> list[ModelT]:  # noqa: ANN401
        """Get all entities matching the equality criteria (all when none given)."""
        stmt = select(self.model).filter_by(**criteria)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find_one(self, **criteria: Any) -> ModelT | None:  # noqa: ANN401
        """Get the first entity matching the equality criteria."""
        stmt = select(self.model).filter_by(**criteria).limit(1)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    def create(self, **fields: Any) -> ModelT:  # noqa: ANN401
        """Build an entity in memory. Nothing is persisted until ``save``."""
        return self.model(**fields)

    async def preload(self, entity_id: str, **fields: Any) -> ModelT | None:  # noqa: ANN401
        """
        Overlay ``fields`` onto the stored version of an entity.

        Args:
            entity_id: Identifier of the stored entity
            **fields: Values replacing the stored ones

        Returns:
            A new, unsaved entity carrying the merged values, or None if no
            entity is stored under ``entity_id``. The stored entity is left as is.
        """
        current = await self.db.get(self.model, entity_id)
        if current is None:
            return None

        mapper = inspect(self.model)
        values = {attr.key: getattr(current, attr.key) for attr in mapper.column_attrs}

        # A replaced relationship owns its foreign key columns
        for relationship in mapper.relationships:
            if relationship.key in fields:
                for column in relationship.local_columns:
                    values.pop(column.key, None)

        values.update(fields)
        return self.model(**values)

    async def save(self, entity: ModelT) -> ModelT:
        """
        Persist an entity.

        New entities get an identifier from the id factory and are inserted;
        entities that already carry an identifier are merged onto the stored row.

        Raises:
            IntegrityError: If a database constraint is violated
        """
        if getattr(entity, "id", None) is None:
            entity.id = self.id_factory()  # type: ignore[attr-defined]
            self.db.add(entity)
        else:
            entity = await self.db.merge(entity)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise

        await self.db.refresh(entity)
        logger.info(f"Saved {self.model.__name__} (id={entity.id})")  # type: ignore[attr-defined]
        return entity

    async def remove(self, entity: ModelT) -> ModelT:
        """Delete an entity and return its last known state."""
        await self.db.delete(entity)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise

        logger.info(f"Removed {self.model.__name__} (id={entity.id})")  # type: ignore[attr-defined]
        return entity
