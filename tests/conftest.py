import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool
from typing import AsyncGenerator
from sample_bank.config import Settings
from sample_bank.database import Database
from sample_bank.main import create_app

# In-memory SQLite keeps every test isolated; nothing here relies on
# Postgres-specific column types.
TEST_DATABASE_URL = "sqlite+aiosqlite://"
TEST_ORIGIN = "http://localhost:3500"


@pytest_asyncio.fixture(scope="function")
async def database() -> AsyncGenerator[Database, None]:
    """Fresh schema for each test."""
    db = Database(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db.create_all()
    yield db
    await db.dispose()

@pytest_asyncio.fixture(scope="function")
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session_factory() as session:
        yield session

@pytest.fixture
def app(database: Database):
    settings = Settings(BACKEND_CORS_ORIGINS=[TEST_ORIGIN], SQL_ECHO=False, AUTO_CREATE_SCHEMA=False)
    app = create_app(settings)
    # The lifespan does not run under ASGITransport, so hand over the handle directly
    app.state.database = database
    return app

@pytest_asyncio.fixture(scope="function")
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Client for testing API endpoints."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def client_payload() -> dict:
    return {
        "firstName": "Kofi",
        "lastName": "Mensah",
        "dateOfBirth": "1990-04-12",
        "phoneNumber": "+233201234567",
        "accountNumber": 111222333345,
        "branch": "Dansoman",
        "occupation": "Teacher",
        "snnitNumber": 987654321,
        "accounts": [
            {"accountType": "checking"},
            {"accountType": "savings"},
        ],
    }
