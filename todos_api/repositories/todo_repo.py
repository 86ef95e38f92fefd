from sqlalchemy.ext.asyncio import AsyncSession

from todos_api.models.todo import Todo
from todos_api.repositories.base import BaseRepository


class TodoRepository(BaseRepository[Todo]):
    def __init__(self):
        super().__init__(Todo)

    async def list_sorted_by_order(self, db: AsyncSession) -> list[Todo]:
        return await self.list(db, order_by=(Todo.order.asc(),))

    async def get_by_order(self, db: AsyncSession, order: int) -> Todo | None:
        return await self.find_one_by(db, order=order)
