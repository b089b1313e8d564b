"""
BirdRef Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_store: AsyncMock standing in for BirdStore (service unit tests)
    ├── sqlite_engine: fresh SQLite file database with the birds table
    ├── sqlite_store: SqlAlchemyBirdStore bound to sqlite_engine
    ├── test_client: HTTPX AsyncClient against the app, store overridden
    └── sample_bird_data / sample_bird_row: the American Robin record
"""

import os

# Override settings for testing BEFORE any birdref imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["API_PREFIX"] = ""

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from birdref.database import Base  # noqa: E402
from birdref.models.bird import BirdRecord  # noqa: E402,F401
from birdref.services.sql_store import SqlAlchemyBirdStore, get_bird_store  # noqa: E402
from birdref.services.store_base import BirdStore  # noqa: E402


@pytest.fixture
def mock_store():
    """
    Provides a mock BirdStore.

    Usage:
        mock_store.execute.return_value = QueryResult(rowcount=1, rows=[row])
        result = await bird_service.list_birds(mock_store)
    """
    store = AsyncMock(spec=BirdStore)
    store.execute = AsyncMock()
    store.health_check = AsyncMock(return_value=True)
    return store


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """
    A throwaway SQLite database with the birds table created.

    File-backed (not :memory:) so every pooled connection sees the same data.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'birds.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def sqlite_store(sqlite_engine) -> SqlAlchemyBirdStore:
    return SqlAlchemyBirdStore(
        async_sessionmaker(sqlite_engine, class_=AsyncSession, expire_on_commit=False)
    )


@pytest_asyncio.fixture
async def test_client(sqlite_store):
    """
    Provides an async HTTP test client for endpoint testing.

    The app's store dependency is overridden with the SQLite-backed store, so
    requests run real SQL without a PostgreSQL server.

    Usage:
        async def test_all(test_client):
            response = await test_client.get("/birds/all")
    """
    from birdref.main import app

    app.dependency_overrides[get_bird_store] = lambda: sqlite_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_bird_data():
    """The American Robin as a JSON request body (camelCase keys)."""
    return {
        "formattedComName": "AmericanRobin",
        "comName": "American Robin",
        "sciName": "Turdus migratorius",
        "previewPhoto": "photos/american-robin/preview.jpg",
        "maleBreedingPhoto": "photos/american-robin/male-breeding.jpg",
        "maleNonbreedingPhoto": "photos/american-robin/male-nonbreeding.jpg",
        "femalePhoto": "photos/american-robin/female.jpg",
        "sound": "sounds/american-robin.mp3",
        "shortDesc": "A familiar thrush with a warm orange breast.",
        "longDesc": "American Robins are common on lawns, in parks and in woodlands.",
        "howToFind": "Look for robins running and stopping on open lawns.",
        "habitat": "Lawns, forests, parks",
        "learnMoreLink": "https://www.allaboutbirds.org/guide/American_Robin",
    }


@pytest.fixture
def sample_bird_row(sample_bird_data):
    """The same record as the database returns it (snake_case columns)."""
    return {
        "formatted_com_name": sample_bird_data["formattedComName"],
        "com_name": sample_bird_data["comName"],
        "sci_name": sample_bird_data["sciName"],
        "preview_photo": sample_bird_data["previewPhoto"],
        "male_breeding_photo": sample_bird_data["maleBreedingPhoto"],
        "male_nonbreeding_photo": sample_bird_data["maleNonbreedingPhoto"],
        "female_photo": sample_bird_data["femalePhoto"],
        "sound": sample_bird_data["sound"],
        "short_desc": sample_bird_data["shortDesc"],
        "long_desc": sample_bird_data["longDesc"],
        "how_to_find": sample_bird_data["howToFind"],
        "habitat": sample_bird_data["habitat"],
        "learn_more_link": sample_bird_data["learnMoreLink"],
    }
