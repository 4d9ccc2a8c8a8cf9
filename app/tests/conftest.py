# tests/conftest.py
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.database import Database
from app.main import app


@pytest_asyncio.fixture
async def database(tmp_path):
    """A fresh SQLite database per test, installed where the lifespan would put it."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'hrms_test.db'}")
    await db.create_db_and_tables()
    app.state.database = db
    yield db
    app.dependency_overrides.clear()
    await db.dispose()


@pytest_asyncio.fixture
async def client(database) -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def session(database):
    async with database.session_factory() as s:
        yield s
