from typing import Callable

from fastapi import HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from todos_api.errors import ErrorKind, TodoError, error_body, error_kind
from todos_api.logs import get_logger

logger = get_logger(__name__)


class TodoErrorsRoute(APIRoute):
    """Route class turning any error raised by a handler into its HTTP category.

    Set as ``route_class`` on a router, it wraps every endpoint of that router.
    Framework errors (HTTPException, request validation) keep their own handlers.
    """

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except (HTTPException, RequestValidationError):
                raise
            except Exception as exc:
                return error_response(request, exc)

        return route_handler


def error_response(request: Request, exc: Exception) -> JSONResponse:
    kind = error_kind(exc)
    if kind is ErrorKind.INTERNAL:
        logger.exception("unhandled_error", method=request.method, path=request.url.path)
    else:
        detail = exc.detail if isinstance(exc, TodoError) else None
        logger.info("todo_error", kind=kind.name, detail=detail, path=request.url.path)
    return JSONResponse(status_code=kind.status_code, content=error_body(kind))
