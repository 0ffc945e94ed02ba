from __future__ import annotations

import os

# Settings are read once and cached; point them at test values before any
# accounts module is imported.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from accounts.domain.models.user import User
from accounts.domain.schemas.user import UserCreate
from accounts.infrastructure.database import Base, get_db
from accounts.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from accounts.main import app

PASSWORD = "Password1"


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def repo(db_session: Session) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(db_session, User)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_db] = lambda: db_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_payload() -> Callable[..., dict[str, Any]]:
    def _make(email: str = "pedro@picapiedra.org", **overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": "Pedro Picapiedra",
            "email": email,
            "password": PASSWORD,
            "phones": [{"number": "987654321", "citycode": "2", "countrycode": "56"}],
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def new_user(user_payload: Callable[..., dict[str, Any]]) -> Callable[..., UserCreate]:
    def _make(email: str = "pedro@picapiedra.org", **overrides: Any) -> UserCreate:
        return UserCreate(**user_payload(email, **overrides))

    return _make
