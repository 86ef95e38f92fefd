from __future__ import annotations
from typing import Any, Generic, Sequence, TypeVar
from sqlalchemy import select, delete as sa_delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.inspection import inspect as sa_inspect

T = TypeVar("T")  # SQLAlchemy model class (Declarative)


class BaseRepository(Generic[T]):
    """
    Shared async repository for SQLAlchemy 2.x models.
    - Accepts model instances only (no dicts / pydantic objects).
    - Writes are flushed, never committed: commit/rollback belongs to the caller (service).
    """

    def __init__(self, model: type[T]) -> None:
        self.model = model

    # ------------------------ Read ------------------------

    async def get(self, session: AsyncSession, pk: Any) -> T | None:
        """Fetch one row by primary key"""
        return await session.get(self.model, pk)

    async def find_one_by(self, session: AsyncSession, **filters: Any) -> T | None:
        """First row matching the equality filters, or None"""
        stmt = select(self.model).filter_by(**filters).limit(1)
        res = await session.execute(stmt)
        return res.scalars().first()

    async def list(
        self,
        session: AsyncSession,
        *,
        where: dict[str, Any] | None = None,
        order_by: Sequence[InstrumentedAttribute] | None = None,
        limit: int | None = None,
        offset: int | None = 0,
    ) -> list[T]:
        """List rows, optionally filtered and ordered"""
        stmt = select(self.model)
        if where:
            stmt = stmt.filter_by(**where)
        if order_by:
            stmt = stmt.order_by(*order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        res = await session.execute(stmt)
        return list(res.scalars().all())

    # ------------------------ Write ------------------------

    async def save(self, session: AsyncSession, obj: T) -> T:
        """
        Persist a model as-is, inserting or updating depending on its state.
        - transient without a primary key: add -> flush
        - transient carrying a primary key, or detached: merge(load=True) -> flush
        - persistent: flush (already tracked by the session)
        """
        state = sa_inspect(obj)
        if state.persistent:
            await session.flush()
            return obj
        if state.transient and not self._has_pk(obj):
            session.add(obj)
            await session.flush()
            return obj
        merged = await session.merge(obj, load=True)
        await session.flush()
        return merged

    async def delete_by(self, session: AsyncSession, **filters: Any) -> int:
        """Delete every row matching the equality filters (returns the row count)"""
        if not filters:
            raise ValueError("delete_by(): at least one filter is required, use clear() to delete all")
        stmt = sa_delete(self.model).filter_by(**filters)
        res = await session.execute(stmt)
        return res.rowcount or 0

    async def clear(self, session: AsyncSession) -> int:
        """Delete every row of the table (returns the row count)"""
        res = await session.execute(sa_delete(self.model))
        return res.rowcount or 0

    def _has_pk(self, obj: T) -> bool:
        pk_cols = sa_inspect(self.model).primary_key
        return all(getattr(obj, c.key, None) is not None for c in pk_cols)
