"""Base repository: generic lookup, create, update-by-id and delete-by-id."""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.orm.interfaces import ORMOption

from roles_api.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository over one integer-keyed model.

    update_by_id and delete_by_id issue a single UPDATE/DELETE ... RETURNING
    and raise sqlalchemy.exc.NoResultFound when no row matches, leaving the
    caller to translate it.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @property
    def _pk(self) -> InstrumentedAttribute[Any]:
        model: Any = self.model
        return model.id

    async def get_by_id(
        self, entity_id: int, *options: ORMOption
    ) -> ModelType | None:
        """Return a single record by primary key, or None."""
        result = await self.db.execute(
            select(self.model).where(self._pk == entity_id).options(*options)
        )
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and reload server-generated columns."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update_by_id(self, entity_id: int, **values: Any) -> ModelType:
        """Set values on the row with entity_id and return it."""
        result = await self.db.execute(
            update(self.model)
            .where(self._pk == entity_id)
            .values(**values)
            .returning(self.model)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    async def delete_by_id(self, entity_id: int) -> ModelType:
        """Delete the row with entity_id and return its last state."""
        result = await self.db.execute(
            delete(self.model).where(self._pk == entity_id).returning(self.model)
        )
        return result.scalar_one()
