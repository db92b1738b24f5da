# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-32chars!"  # nosec - test-only secret  # noqa: S105
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from freightops_hq.database import get_db
from freightops_hq.main import app
from freightops_hq.models import Base, User
from freightops_hq.rbac import Department, Role, build_default_registry
from freightops_hq.schemas.principal import HQPrincipal
from freightops_hq.security import get_password_hash

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "Secret123!"  # noqa: S105


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def registry():
    """A freshly built default registry."""
    return build_default_registry()


@pytest.fixture
def make_user(db_session):
    """Factory for persisted users. Pass employee_id=None for a tenant user."""
    counter = {"n": 0}

    def _make_user(
        role: str = Role.SUPPORT_SPECIALIST.value,
        department: str | None = Department.SUPPORT.value,
        employee_id: str | None = "auto",
        email: str | None = None,
        is_active: bool = True,
    ) -> User:
        counter["n"] += 1
        if employee_id == "auto":
            employee_id = str(100000 + counter["n"])
        user = User(
            employee_id=employee_id,
            email=email or f"user{counter['n']}@freightops.test",
            hashed_password=get_password_hash(TEST_PASSWORD),
            first_name="Test",
            last_name=f"User{counter['n']}",
            role=role,
            department=department,
            position="Staff",
            is_active=is_active,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def login(client):
    """Log the test client in as the given user."""

    def _login(user: User) -> TestClient:
        response = client.post(
            "/api/v1/auth/login",
            json={"email": user.email, "password": TEST_PASSWORD},
        )
        assert response.status_code == 200
        return client

    return _login


@pytest.fixture
def make_principal():
    """Factory for in-memory principals."""

    def _make_principal(
        role: str = Role.SUPPORT_SPECIALIST.value,
        department: str | None = Department.SUPPORT.value,
        employee_id: str | None = "123456",
        permissions: list[str] | None = None,
    ) -> HQPrincipal:
        return HQPrincipal(
            id="00000000-0000-0000-0000-000000000001",
            employee_id=employee_id,
            email="staff@freightops.test",
            first_name="Dana",
            last_name="Staff",
            role=role,
            department=department,
            permissions=permissions or [],
        )

    return _make_principal
