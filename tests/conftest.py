from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from user_management_api.app.core.db import init_db
from user_management_api.app.main import create_app
from user_management_api.app.repositories.user_repository import (
    InMemoryUserRepository,
    SQLiteUserRepository,
)
from user_management_api.app.schemas.user import UserDto
from user_management_api.app.services.user_service import UserService


@pytest.fixture()
def database_path(tmp_path: Path) -> str:
    db_path = str(tmp_path / "users.sqlite3")
    init_db(db_path)
    return db_path


@pytest.fixture()
def sqlite_repository(database_path: str) -> SQLiteUserRepository:
    return SQLiteUserRepository(database_path)


@pytest.fixture()
def memory_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def service(memory_repository: InMemoryUserRepository) -> UserService:
    return UserService(memory_repository)


@pytest.fixture()
def client(sqlite_repository: SQLiteUserRepository):
    app = create_app(repository=sqlite_repository)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def emma() -> UserDto:
    return UserDto(
        first_name="Emma",
        last_name="Watson",
        email="emma.watson@example.com",
        date_of_birth=date(1990, 4, 15),
    )
