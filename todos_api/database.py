from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from todos_api.config import DATABASE_URL, SQL_ECHO


class Base(DeclarativeBase):
    pass


engine = create_async_engine(DATABASE_URL, echo=SQL_ECHO, pool_pre_ping=True)
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db():
    async with AsyncSessionLocal() as session:
        yield session


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create every mapped table that does not exist yet."""
    # import for side effect: registers the table on Base.metadata
    from todos_api.models import todo  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
