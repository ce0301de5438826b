"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient

from users_api.api.app import create_app
from users_api.config import Settings
from users_api.containers import AppContainer
from users_api.domain.models import UserRecord
from users_api.errors import UserStoreError
from users_api.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserRecord] = field(default_factory=dict)
    writes: int = 0

    def list_users(self) -> list[UserRecord]:
        return list(self.users.values())

    def get_user(self, user_id: str) -> UserRecord | None:
        return self.users.get(user_id)

    def put_user(self, user: UserRecord) -> None:
        self.writes += 1
        self.users[user.id] = user

    def update_user(self, user_id: str, name: str, age: int) -> None:
        self.writes += 1
        self.users[user_id] = UserRecord(id=user_id, name=name, age=age)

    def delete_user(self, user_id: str) -> None:
        self.writes += 1
        self.users.pop(user_id, None)


@dataclass
class FailingUserRepository(UserRepository):
    """Repository whose every call fails with the configured error."""

    error: Exception = field(
        default_factory=lambda: UserStoreError(
            "User: arn:aws:iam::123:user/x is not authorized",
            operation="Scan",
            code="AccessDeniedException",
        )
    )

    def list_users(self) -> list[UserRecord]:
        raise self.error

    def get_user(self, user_id: str) -> UserRecord | None:
        raise self.error

    def put_user(self, user: UserRecord) -> None:
        raise self.error

    def update_user(self, user_id: str, name: str, age: int) -> None:
        raise self.error

    def delete_user(self, user_id: str) -> None:
        raise self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        table_name="users-test",
        aws_region="us-east-1",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def container(
    settings: Settings, user_repository: InMemoryUserRepository
) -> AppContainer:
    return AppContainer(settings=settings, user_service=UserService(user_repository))


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
