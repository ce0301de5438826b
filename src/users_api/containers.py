"""Dependency container wiring for the application."""

from dataclasses import dataclass

from users_api.adapters.dynamodb_user_repository import DynamoDBUserRepository
from users_api.config import Settings
from users_api.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    user_repository = DynamoDBUserRepository.create(
        table_name=resolved_settings.table_name,
        region_name=resolved_settings.aws_region,
        endpoint_url=resolved_settings.dynamodb_endpoint_url,
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
    )
