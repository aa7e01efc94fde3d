import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import build_engine, create_tables, get_db
from app.main import app
from app.models.vehicle import Vehicle
from app.models.vehicle_type import VehicleType
from app.seed import seed_data


@pytest_asyncio.fixture
async def engine():
    # One shared connection so every session sees the same in-memory database.
    engine = build_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def catalog(session_maker):
    """Seed the catalog and return ids keyed by type name and vehicle model name."""
    async with session_maker() as session:
        await seed_data(session)
        types = (await session.execute(select(VehicleType))).scalars().all()
        vehicles = (await session.execute(select(Vehicle))).scalars().all()
    return {
        "types": {t.name: t.id for t in types},
        "vehicles": {v.model_name: v.id for v in vehicles},
    }


@pytest_asyncio.fixture
async def client(session_maker):
    async def _get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
