from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from todos_api.logs import get_logger
from todos_api.models.todo import Todo
from todos_api.repositories.todo_repo import TodoRepository
from todos_api.schemas.todo import TodoPatch, TodoUpdate
from todos_api.services.ordering import check_conflict, check_found, merge_update, next_order

logger = get_logger(__name__)


class TodoService:
    """Todo use cases. Holds no state: every call re-reads from the store."""

    def __init__(self, repo: Optional[TodoRepository] = None):
        self.repo = repo or TodoRepository()

    async def create_todo(self, db: AsyncSession, title: str) -> Todo:
        todos = await self.repo.list_sorted_by_order(db)
        todo = Todo(title=title, completed=False, order=next_order(todos))
        todo = await self.repo.save(db, todo)
        await db.commit()
        logger.info("todo_created", todo_id=todo.id, order=todo.order)
        return todo

    async def list_todos(self, db: AsyncSession) -> list[Todo]:
        return await self.repo.list_sorted_by_order(db)

    async def delete_all(self, db: AsyncSession, completed: Optional[bool] = None) -> None:
        # only an explicit True filters; False deletes everything like None does
        if completed is True:
            count = await self.repo.delete_by(db, completed=True)
        else:
            count = await self.repo.clear(db)
        await db.commit()
        logger.info("todos_deleted", completed=completed, count=count)

    async def get_todo(self, db: AsyncSession, todo_id: str) -> Todo:
        return check_found(await self.repo.get(db, todo_id), todo_id)

    async def update_todo(self, db: AsyncSession, todo_id: str, patch: TodoUpdate | TodoPatch) -> Todo:
        target = check_found(await self.repo.get(db, todo_id), todo_id)
        if patch.order is not None:
            holder = await self.repo.get_by_order(db, patch.order)
            check_conflict(target, holder)
        todo = await self.repo.save(db, merge_update(target, patch))
        await db.commit()
        logger.info("todo_updated", todo_id=todo.id, order=todo.order, completed=todo.completed)
        return todo

    async def delete_todo(self, db: AsyncSession, todo_id: str) -> None:
        check_found(await self.repo.get(db, todo_id), todo_id)
        await self.repo.delete_by(db, id=todo_id)
        await db.commit()
        logger.info("todo_deleted", todo_id=todo_id)
