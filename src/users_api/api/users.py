"""User CRUD endpoints."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel, ConfigDict, Field

from users_api.domain.models import UserRecord
from users_api.errors import UserStoreError

if TYPE_CHECKING:
    from users_api.services.users import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


class UserPayload(BaseModel):
    """JSON shape of a user; absent fields fall back to zero values."""

    model_config = ConfigDict(strict=True, extra="ignore")

    id: str = ""
    name: str = ""
    age: int = Field(default=0, ge=-(2**63), le=2**63 - 1)

    def to_record(self) -> UserRecord:
        return UserRecord(id=self.id, name=self.name, age=self.age)

    @classmethod
    def from_record(cls, user: UserRecord) -> UserPayload:
        return cls(id=user.id, name=user.name, age=user.age)


def _user_service(request: Request) -> UserService:
    return request.app.state.container.user_service


@contextmanager
def _store_errors(message: str) -> Iterator[None]:
    try:
        yield
    except UserStoreError as exc:
        logger.error("%s: %s", message, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
        ) from exc


@router.get("")
def list_users(request: Request) -> list[UserPayload]:
    """Return every stored user."""
    with _store_errors("Failed to retrieve users"):
        users = _user_service(request).list_users()
    return [UserPayload.from_record(user) for user in users]


@router.get("/{user_id:path}")
def get_user(user_id: str, request: Request) -> UserPayload:
    """Return a single user by id."""
    with _store_errors("Failed to retrieve user"):
        user = _user_service(request).get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    return UserPayload.from_record(user)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(payload: UserPayload, request: Request) -> UserPayload:
    """Create or overwrite a user keyed by the body id."""
    with _store_errors("Failed to create user"):
        user = _user_service(request).create_user(payload.to_record())
    return UserPayload.from_record(user)


@router.put("/{user_id:path}")
def update_user(user_id: str, payload: UserPayload, request: Request) -> UserPayload:
    """Set name and age on the user keyed by the path id."""
    with _store_errors("Failed to update user"):
        user = _user_service(request).update_user(user_id, payload.to_record())
    return UserPayload.from_record(user)


@router.delete("/{user_id:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, request: Request) -> Response:
    """Delete a user; succeeds whether or not it existed."""
    with _store_errors("Failed to delete user"):
        _user_service(request).delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
