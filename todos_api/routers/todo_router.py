from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from todos_api.database import get_db
from todos_api.models.todo import Todo
from todos_api.routers.errors import TodoErrorsRoute
from todos_api.schemas.todo import TodoCreate, TodoOut, TodoPatch, TodoUpdate
from todos_api.services.todo_service import TodoService

router = APIRouter(route_class=TodoErrorsRoute)
service = TodoService()


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse the ``completed`` query flag; only "true" and "false" are accepted."""
    if value is None:
        return None
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"Validation failed (boolean string is expected): {value!r}")


def todo_out(request: Request, todo: Todo) -> TodoOut:
    return TodoOut(
        id=todo.id,
        title=todo.title,
        completed=todo.completed,
        order=todo.order,
        url=str(request.url_for("get_todo", todo_id=todo.id)),
    )


@router.post("", response_model=TodoOut, status_code=201)
async def create_todo(request: Request, todo_in: TodoCreate, db: AsyncSession = Depends(get_db)):
    todo = await service.create_todo(db, todo_in.title)
    return todo_out(request, todo)


@router.get("", response_model=list[TodoOut])
async def list_todos(request: Request, db: AsyncSession = Depends(get_db)):
    return [todo_out(request, todo) for todo in await service.list_todos(db)]


@router.delete("", status_code=204)
async def delete_todos(completed: Optional[str] = None, db: AsyncSession = Depends(get_db)):
    await service.delete_all(db, parse_bool(completed))
    return Response(status_code=204)


@router.get("/{todo_id}", response_model=TodoOut)
async def get_todo(request: Request, todo_id: str, db: AsyncSession = Depends(get_db)):
    return todo_out(request, await service.get_todo(db, todo_id))


@router.put("/{todo_id}", response_model=TodoOut)
async def update_todo(request: Request, todo_id: str, todo_in: TodoUpdate, db: AsyncSession = Depends(get_db)):
    return todo_out(request, await service.update_todo(db, todo_id, todo_in))


@router.patch("/{todo_id}", response_model=TodoOut)
async def patch_todo(request: Request, todo_id: str, todo_in: TodoPatch, db: AsyncSession = Depends(get_db)):
    return todo_out(request, await service.update_todo(db, todo_id, todo_in))


@router.delete("/{todo_id}", status_code=204)
async def delete_todo(todo_id: str, db: AsyncSession = Depends(get_db)):
    await service.delete_todo(db, todo_id)
    return Response(status_code=204)
