"""Domain errors of the todos service and their HTTP translation.

Every failure the service reports is a :class:`TodoError` tagged with an
:class:`ErrorKind`; the transport layer only looks at the kind.
"""

import enum
from http import HTTPStatus


class ErrorKind(enum.Enum):
    NOT_FOUND = HTTPStatus.NOT_FOUND
    CONFLICT = HTTPStatus.CONFLICT
    INTERNAL = HTTPStatus.INTERNAL_SERVER_ERROR

    @property
    def status_code(self) -> int:
        return self.value.value

    @property
    def message(self) -> str:
        return self.value.phrase


class TodoError(Exception):
    def __init__(self, kind: ErrorKind, detail: str | None = None):
        super().__init__(detail or kind.message)
        self.kind = kind
        self.detail = detail


def not_found(todo_id: str) -> TodoError:
    return TodoError(ErrorKind.NOT_FOUND, f"Todo {todo_id} not found")


def conflict(order: int) -> TodoError:
    return TodoError(ErrorKind.CONFLICT, f"Order {order} is already used by another todo")


def error_kind(exc: BaseException) -> ErrorKind:
    """Transport category of any exception; unknown errors are internal."""
    if isinstance(exc, TodoError):
        return exc.kind
    return ErrorKind.INTERNAL


def error_body(kind: ErrorKind) -> dict:
    # detail stays server side, the client only sees the category
    return {"statusCode": kind.status_code, "message": kind.message}
