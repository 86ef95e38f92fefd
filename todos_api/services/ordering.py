"""Order assignment, guards and update merging for todos."""

from typing import Optional, Sequence

from todos_api.errors import conflict, not_found
from todos_api.models.todo import Todo
from todos_api.schemas.todo import TodoPatch, TodoUpdate

UPDATABLE_FIELDS = ("title", "completed", "order")


def next_order(todos: Sequence[Todo]) -> int:
    """Order for a new todo.

    ``todos`` must be the complete list sorted ascending by order, so the
    last element holds the highest order in use.
    """
    if not todos:
        return 0
    return todos[-1].order + 1


def check_found(todo: Optional[Todo], todo_id: str) -> Todo:
    if todo is None:
        raise not_found(todo_id)
    return todo


def check_conflict(target: Todo, holder: Optional[Todo]) -> None:
    """Fail when ``holder`` (the todo owning the requested order) is another todo."""
    if holder is not None and holder.id != target.id:
        raise conflict(holder.order)


def patch_values(patch: TodoUpdate | TodoPatch) -> dict:
    # fields the client actually sent; an explicit null is treated as absent
    return {
        name: value
        for name, value in patch.model_dump(exclude_unset=True).items()
        if name in UPDATABLE_FIELDS and value is not None
    }


def merge_update(existing: Todo, patch: TodoUpdate | TodoPatch) -> Todo:
    """New Todo with the same id, taking each sent field from ``patch``."""
    values = patch_values(patch)
    return Todo(
        id=existing.id,
        title=values.get("title", existing.title),
        completed=values.get("completed", existing.completed),
        order=values.get("order", existing.order),
    )
