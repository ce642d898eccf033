"""
Fixtures for integration tests.

Provides:
- In-memory database for testing
- Test client for the FastAPI app bound to that database
- Identity headers for two distinct users
"""

from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from command_center.main import app
from command_center.infrastructure.database import Base, get_db_session

AS_OF = date(2025, 3, 10)


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client whose every request shares the test session.

    Repositories only flush, so rows written by one request are visible
    to the next without committing.
    """
    async def override_get_db_session():
        yield test_session

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def user_headers() -> dict:
    return {"X-User-ID": "user_aiman"}


@pytest.fixture
def other_user_headers() -> dict:
    return {"X-User-ID": "user_other"}


@pytest.fixture
def as_of_params() -> dict:
    """Pin date-dependent endpoints to a fixed day."""
    return {"as_of": AS_OF.isoformat()}


@pytest.fixture
def scalar_plan_request() -> dict:
    """1200 over 12 x 100 with 3 paid."""
    return {
        "merchant": "Shopee",
        "item_name": "Air fryer",
        "total_amount": "1200.00",
        "installments_total": 12,
        "installment_amount": "100.00",
        "installments_paid": 3,
        "next_due_date": "2025-03-12",
    }


@pytest.fixture
def schedule_plan_request() -> dict:
    """Five 100s with the first two paid."""
    return {
        "merchant": "Atome",
        "total_amount": "500.00",
        "schedule": [
            {"sequence": 1, "amount": "100.00", "due_date": "2025-01-10", "is_paid": True},
            {"sequence": 2, "amount": "100.00", "due_date": "2025-02-10", "is_paid": True},
            {"sequence": 3, "amount": "100.00", "due_date": "2025-03-10"},
            {"sequence": 4, "amount": "100.00", "due_date": "2025-04-10"},
            {"sequence": 5, "amount": "100.00", "due_date": "2025-05-10"},
        ],
    }
