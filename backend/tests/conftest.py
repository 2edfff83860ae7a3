"""
NexParcel Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own in-memory SQLite database (aiosqlite on a
       StaticPool), an application bound to it, and an HTTPX client that
       talks to the app through ASGITransport. No server, no PostgreSQL,
       no Stripe account.

Fixture Hierarchy:
    database ─┬─ db_session         (service-level tests)
              └─ app ── test_client (HTTP tests)
    mock_db_session                 (error-path tests, no database)
    make_user / auth_headers        (seed accounts, sign tokens)
"""

import os

# Override settings BEFORE any nexparcel import: `settings` is built on import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["ACCESS_TOKEN_SECRET"] = "test-secret-not-real-0123456789abcdef"
os.environ["STRIPE_SECRET_KEY"] = "sk_test_not_real"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_REQUESTS"] = "100000"

from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from nexparcel.database import Database
from nexparcel.main import create_app
from nexparcel.models.booking import Booking
from nexparcel.models.user import User
from nexparcel.services.token_service import token_service


ADMIN_EMAIL = "admin@nexparcel.test"
DELIVERY_EMAIL = "rider@nexparcel.test"
CUSTOMER_EMAIL = "ann@nexparcel.test"


# ══════════════════════════════════════════════════════════════════════════
# Storage Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database():
    """Fresh in-memory database with all tables created."""
    db = Database("sqlite+aiosqlite://", echo=False)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    """
    One unit-of-work session, committed when the test ends.

    Usage:
        async def test_create(db_session):
            result = await user_service.create_user(db_session, {"email": "a@b.c"})
    """
    async with database.session() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Mock async session for driving error paths without a database.

    Usage:
        mock_db_session.execute.side_effect = SQLAlchemyError("boom")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Application Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app(database):
    return create_app(database=database)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the app.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Seed Data Helpers
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def make_user(database):
    """Insert a user document directly and return its id."""

    async def _make_user(email: str, role: Optional[str] = None, **fields: Any) -> str:
        document: Dict[str, Any] = {"email": email, "name": email.split("@")[0], **fields}
        if role is not None:
            document["role"] = role
        user = User.from_document(document)
        async with database.session() as session:
            session.add(user)
        return user.id

    return _make_user


@pytest.fixture
def make_booking(database):
    """Insert a booking document directly and return its id."""

    async def _make_booking(**fields: Any) -> str:
        booking = Booking.from_document(fields)
        async with database.session() as session:
            session.add(booking)
        return booking.id

    return _make_booking


@pytest.fixture
def auth_headers():
    """Authorization header carrying a freshly signed token for `email`."""

    def _auth_headers(email: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token_service.issue({'email': email})}"}

    return _auth_headers


@pytest_asyncio.fixture
async def seeded(make_user):
    """One admin, one delivery man and one customer. Returns their ids by role."""
    return {
        "admin": await make_user(ADMIN_EMAIL, role="Admin"),
        "delivery": await make_user(DELIVERY_EMAIL, role="Delivery Men"),
        "customer": await make_user(CUSTOMER_EMAIL),
    }
