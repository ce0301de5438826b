"""Domain models for the users API."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the table."""

    id: str
    name: str
    age: int
