from mangum import Mangum

from todos_api.errors import ErrorKind, TodoError, conflict, error_body, error_kind, not_found


def test_error_kinds_map_to_http_status():
    assert error_kind(not_found("x")) is ErrorKind.NOT_FOUND
    assert error_kind(conflict(3)) is ErrorKind.CONFLICT
    assert error_kind(ValueError("bad flag")) is ErrorKind.INTERNAL
    assert [kind.status_code for kind in ErrorKind] == [404, 409, 500]


def test_error_body_hides_detail():
    err = TodoError(ErrorKind.CONFLICT, "Order 3 is already used by another todo")
    assert error_body(err.kind) == {"statusCode": 409, "message": "Conflict"}


def test_lambda_handler_wraps_app():
    from todos_api.handlers.todo_handler import handler
    from todos_api.main import app

    assert isinstance(handler, Mangum)
    assert handler.app is app
