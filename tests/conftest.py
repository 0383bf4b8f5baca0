import os
import sys
from collections.abc import AsyncGenerator
from datetime import timedelta
from uuid import uuid4

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

# Load environment variables from .env file
load_dotenv()

# Settings are read on import, so defaults must be in place first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./clinic_admin.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")  # pragma: allowlist secret
os.environ.setdefault("LOG_FORMAT", "console")

from clinic_admin.config import settings  # noqa: E402
from clinic_admin.core.security import create_access_token  # noqa: E402
from clinic_admin.database import get_db  # noqa: E402
from clinic_admin.main import app  # noqa: E402
from clinic_admin.models import clinics, metadata  # noqa: E402

# Test database URL - MUST be different from the application database
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///./clinic_admin_test.db")

if settings.database_url == TEST_DATABASE_URL:
    print("\n❌ CRITICAL ERROR: Test database URL is same as application database!")
    print("This would DROP all application data during tests.")
    print("Please set TEST_DATABASE_URL to a separate test database")
    sys.exit(1)

# Ensure we're using asyncpg driver for async operations
if TEST_DATABASE_URL.startswith("postgresql://"):
    TEST_DATABASE_URL = TEST_DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)

# Use NullPool to avoid event loop issues between tests
test_engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,  # Set to True for SQL debugging
    poolclass=NullPool,
)

TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session on freshly created tables."""
    async with test_engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
        await conn.run_sync(metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    # Drop tables after test
    async with test_engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_clinic(db_session: AsyncSession):
    """Create a test clinic."""
    clinic_id = uuid4()
    await db_session.execute(insert(clinics).values(id=clinic_id, name="Test Health Clinic"))
    await db_session.commit()
    return clinic_id


@pytest.fixture
def auth_headers(test_clinic) -> dict:
    """Bearer token of a subscribed user acting for the test clinic."""
    token_data = {
        "sub": str(uuid4()),
        "clinic_id": str(test_clinic),
        "plan": "essential",
    }
    token = create_access_token(data=token_data, expires_delta=timedelta(minutes=30))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_doctor_data() -> dict:
    """Doctor working Monday to Friday, 08:00 to 12:00, for R$ 150,00."""
    return {
        "name": "Dr. Ana Souza",
        "specialty": "cardiology",
        "appointment_price_in_cents": 15000,
        "available_from_week_day": 1,
        "available_to_week_day": 5,
        "available_from_time": "08:00:00",
        "available_to_time": "12:00:00",
    }


@pytest.fixture
def sample_patient_data() -> dict:
    """Sample patient data for testing."""
    return {
        "name": "Carlos Lima",
        "email": "Carlos.Lima@Example.com",
        "phone_number": "+55 11 98765-4321",
        "sex": "male",
    }
