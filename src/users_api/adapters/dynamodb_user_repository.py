"""DynamoDB-backed user repository."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from users_api.domain.models import UserRecord
from users_api.errors import UserStoreError, store_error_from
from users_api.services.users import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class DynamoDBUserRepository(UserRepository):
    """DynamoDB implementation for user persistence.

    ``table`` is a boto3 ``Table`` resource shared for the lifetime of the
    process.
    """

    table: Any

    @classmethod
    def create(
        cls,
        table_name: str,
        region_name: str,
        endpoint_url: str | None = None,
    ) -> "DynamoDBUserRepository":
        """Create a repository with its own boto3 session and table handle."""
        try:
            session = boto3.session.Session(region_name=region_name)
            dynamodb = session.resource("dynamodb", endpoint_url=endpoint_url)
            table = dynamodb.Table(table_name)
        except (BotoCoreError, ValueError) as exc:
            logger.error("Failed to create DynamoDB resource: %s", exc)
            raise UserStoreError(
                f"Failed to create DynamoDB resource: {exc}", operation="Connect"
            ) from exc
        logger.info("Using DynamoDB table %s in %s", table_name, region_name)
        return cls(table=table)

    def list_users(self) -> list[UserRecord]:
        """Scan the whole table, following continuation keys."""
        items: list[dict[str, Any]] = []
        scan_kwargs: dict[str, Any] = {}
        while True:
            response = self._call("Scan", self.table.scan, **scan_kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            scan_kwargs["ExclusiveStartKey"] = last_key
        return [_to_record(item, "Scan") for item in items]

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return the user stored under user_id, if present."""
        response = self._call("GetItem", self.table.get_item, Key={"id": user_id})
        item = response.get("Item")
        if item is None:
            return None
        return _to_record(item, "GetItem")

    def put_user(self, user: UserRecord) -> None:
        """Write the full record, overwriting any previous one."""
        self._call(
            "PutItem",
            self.table.put_item,
            Item={"id": user.id, "name": user.name, "age": user.age},
        )

    def update_user(self, user_id: str, name: str, age: int) -> None:
        """Set name and age without checking that the record exists."""
        self._call(
            "UpdateItem",
            self.table.update_item,
            Key={"id": user_id},
            UpdateExpression="SET #n = :n, #a = :a",
            ExpressionAttributeNames={"#n": "name", "#a": "age"},
            ExpressionAttributeValues={":n": name, ":a": age},
        )

    def delete_user(self, user_id: str) -> None:
        """Delete the record; missing keys are not an error."""
        self._call("DeleteItem", self.table.delete_item, Key={"id": user_id})

    def _call(self, operation: str, method: Any, **kwargs: Any) -> dict[str, Any]:
        try:
            return method(**kwargs)
        except (ClientError, BotoCoreError) as exc:
            raise store_error_from(exc, operation) from exc


def _to_record(item: dict[str, Any], operation: str) -> UserRecord:
    try:
        user_id = item["id"]
        name = item["name"]
        age = item["age"]
        if not isinstance(user_id, str) or not isinstance(name, str):
            raise TypeError("id and name must be strings")
        if not isinstance(age, Decimal | int) or isinstance(age, bool):
            raise TypeError("age must be a number")
        if age != int(age):
            raise ValueError("age must be an integer")
    except (KeyError, TypeError, ValueError) as exc:
        raise UserStoreError(
            f"Malformed user item: {exc}",
            operation=operation,
            code="MalformedItem",
        ) from exc
    return UserRecord(id=user_id, name=name, age=int(age))
