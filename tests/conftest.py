import os
import uuid
from typing import Generator

# Must be set before the app modules read their configuration
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from main import app as fastapi_app
from app.core.db import Base, get_db
from app.models.user import Role
from app.schemas.auth import Principal
from app.services import registration_service

PASSWORD = "secret123"


def unique(prefix: str = "user") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


@pytest.fixture
def session_factory():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def db(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory) -> Generator[TestClient, None, None]:
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(fastapi_app)
    finally:
        fastapi_app.dependency_overrides.clear()


def create_user(session_factory, name: str, role: Role = Role.USER, password: str = PASSWORD) -> int:
    with session_factory() as session:
        user = registration_service.register(session, name, f"{name}@example.com", password, role=role)
        return user.id


def principal_for(user_id: int, name: str, role: Role = Role.USER) -> Principal:
    return Principal(user_id=user_id, email=f"{name}@example.com", roles=(role.value,))


def login_headers(client: TestClient, email: str, password: str = PASSWORD) -> dict:
    resp = client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def admin(client, session_factory) -> dict:
    name = unique("admin")
    user_id = create_user(session_factory, name, role=Role.ADMIN)
    return {"id": user_id, "name": name, "headers": login_headers(client, f"{name}@example.com")}


@pytest.fixture
def player(client, session_factory) -> dict:
    name = unique("player")
    user_id = create_user(session_factory, name)
    return {"id": user_id, "name": name, "headers": login_headers(client, f"{name}@example.com")}
