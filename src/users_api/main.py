"""Command-line entrypoint that serves the users API."""

import logging

import uvicorn
from pydantic import ValidationError

from users_api.api.app import create_app
from users_api.app_logging import configure_logging
from users_api.config import Settings
from users_api.containers import build_container
from users_api.errors import UserStoreError

logger = logging.getLogger("users_api.main")


def main() -> None:
    """Validate configuration, build dependencies and serve until stopped."""
    configure_logging()
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.critical("Invalid configuration: %s", exc)
        raise SystemExit(1) from exc
    configure_logging(settings.log_level)

    try:
        container = build_container(settings)
    except UserStoreError as exc:
        logger.critical("Failed to initialise the user store: %s", exc)
        raise SystemExit(1) from exc

    logger.info("Server starting on %s:%s", settings.host, settings.port)
    uvicorn.run(
        create_app(container),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()
