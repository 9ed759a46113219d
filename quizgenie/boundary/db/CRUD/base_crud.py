"""
Generic CRUD base.

Model-specific CRUD classes inherit insert, primary-key lookup, and
column update from here. Nothing in this layer commits: callers own the
transaction and decide when a unit of work ends.

Dependencies: sqlalchemy
System role: Shared persistence primitives for all CRUD singletons
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quizgenie.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Persistence primitives bound to one ORM model.

    Attributes:
        model: ORM class operated on
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Insert a row and return it with its database-assigned ID.

        Args:
            session: Async database session
            **values: Column values

        Returns:
            Flushed model instance
        """
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: int) -> ModelT | None:
        """Look a row up by primary key."""
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def update_by_id(
        self,
        session: AsyncSession,
        id: int,
        **values: Any,
    ) -> ModelT | None:
        """
        Overwrite columns of one row.

        Args:
            session: Async database session
            id: Primary key
            **values: Columns to overwrite

        Returns:
            Row as stored after the update, or None if the ID is unknown
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**values)
            .returning(self.model)
            .execution_options(synchronize_session=False)
        )
        return (await session.execute(stmt)).scalar_one_or_none()
