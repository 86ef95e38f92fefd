from contextlib import asynccontextmanager

from fastapi import FastAPI

from todos_api.config import APP_TITLE
from todos_api.database import create_tables
from todos_api.logs import configure_logging, get_logger
from todos_api.routers import todo_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("api_starting")
    await create_tables()
    yield
    logger.info("api_stopping")


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title=APP_TITLE, lifespan=lifespan)
    app.include_router(todo_router.router, prefix="/todos", tags=["Todos"])

    # Root health
    @app.get("/")
    async def read_root():
        return {"status": "ok"}

    return app


app = create_app()
