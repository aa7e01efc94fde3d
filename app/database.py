from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def normalize_database_url(url: str) -> str:
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def build_engine(url: str, **kwargs) -> AsyncEngine:
    url = normalize_database_url(url)

    engine_kwargs: dict = {"echo": False}
    if not _is_sqlite(url):
        engine_kwargs.update(pool_size=5, max_overflow=10, pool_pre_ping=True)
    engine_kwargs.update(kwargs)

    engine = create_async_engine(url, **engine_kwargs)

    if _is_sqlite(url):
        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(settings.database_url)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def create_tables(bind: AsyncEngine | None = None):
    async with (bind or engine).begin() as conn:
        from app.models import vehicle_type, vehicle, user, booking  # noqa: F401
        await conn.run_sync(Base.metadata.create_all)


async def get_db():
    async with async_session() as session:
        yield session
