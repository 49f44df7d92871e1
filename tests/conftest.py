"""Shared test fixtures for Team Tasks API tests"""

import os
import uuid
from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Set test environment before importing app
os.environ["ENVIRONMENT"] = "development"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["DATABASE_PATH"] = ":memory:"


# =============================================================================
# Database Fixture
# =============================================================================

@pytest.fixture
def db():
    """In-memory TinyDB store, emptied before every test"""
    from teamtasks.services.database import db_service

    db_service.truncate()
    yield db_service
    db_service.truncate()


# =============================================================================
# Application and Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def app(db):
    """Get the FastAPI application backed by the in-memory store"""
    from teamtasks.main import app as fastapi_app
    return fastapi_app


@pytest_asyncio.fixture
async def test_client(app) -> AsyncGenerator:
    """Create async HTTP client for testing"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user() -> dict:
    """Caller identity for the test user"""
    user_id = str(uuid.uuid4())
    return {
        "id": user_id,
        "email": f"testuser-{user_id[:8]}@example.com",
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


@pytest.fixture
def another_user() -> dict:
    """Caller identity for a second, unrelated user"""
    user_id = str(uuid.uuid4())
    return {
        "id": user_id,
        "email": f"another-{user_id[:8]}@example.com",
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


# =============================================================================
# JWT Token Fixtures
# =============================================================================

@pytest.fixture
def jwt_token(test_user) -> str:
    """Generate a valid JWT token for the test user"""
    from teamtasks.auth.jwt import create_access_token
    return create_access_token(data={"sub": test_user["id"], "email": test_user["email"]})


@pytest.fixture
def jwt_headers(jwt_token) -> dict:
    """HTTP headers with JWT authorization"""
    return {"Authorization": f"Bearer {jwt_token}"}


@pytest.fixture
def another_jwt_headers(another_user) -> dict:
    """HTTP headers with a JWT for another user"""
    from teamtasks.auth.jwt import create_access_token
    token = create_access_token(data={"sub": another_user["id"], "email": another_user["email"]})
    return {"Authorization": f"Bearer {token}"}


# =============================================================================
# Record Fixtures
# =============================================================================

@pytest.fixture
def alpha_team(db, test_user) -> dict:
    """Team "Alpha" with members A and B, both with capacity 2"""
    from tests.factories import create_member
    return db.create_team(test_user["id"], "Alpha", [
        create_member("A", capacity=2),
        create_member("B", capacity=2),
    ])


@pytest.fixture
def alpha_project(db, alpha_team) -> dict:
    """Project "P1" under team Alpha"""
    return db.create_project(alpha_team["id"], "P1", "First project")


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
