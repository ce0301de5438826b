"""User CRUD operations."""

from dataclasses import dataclass, replace
from typing import Protocol

from users_api.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user records."""

    def list_users(self) -> list[UserRecord]:
        """Return every stored user."""

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return the user for an id, if present."""

    def put_user(self, user: UserRecord) -> None:
        """Write a user, replacing any existing record with the same id."""

    def update_user(self, user_id: str, name: str, age: int) -> None:
        """Set name and age on the record keyed by user_id."""

    def delete_user(self, user_id: str) -> None:
        """Delete the record keyed by user_id if it exists."""


@dataclass
class UserService:
    """Application service for user CRUD actions."""

    repository: UserRepository

    def list_users(self) -> list[UserRecord]:
        """Return all users."""
        return self.repository.list_users()

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return a single user or None when it does not exist."""
        return self.repository.get_user(user_id)

    def create_user(self, user: UserRecord) -> UserRecord:
        """Store a user unconditionally and return it."""
        self.repository.put_user(user)
        return user

    def update_user(self, user_id: str, user: UserRecord) -> UserRecord:
        """Overwrite name and age of the user keyed by user_id.

        The id carried by ``user`` is ignored and the returned record carries
        user_id instead, so the result matches what a later read returns. A
        missing record is created with only name and age set.
        """
        self.repository.update_user(user_id, user.name, user.age)
        return replace(user, id=user_id)

    def delete_user(self, user_id: str) -> None:
        """Delete a user; deleting a missing id is not an error."""
        self.repository.delete_user(user_id)
