"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from users_api.api.middleware import log_requests, recover_errors
from users_api.api.users import router as users_router
from users_api.app_logging import configure_logging
from users_api.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Users API")
    app.state.container = container

    # The last registered middleware runs outermost.
    app.middleware("http")(recover_errors)
    app.middleware("http")(log_requests)

    @app.exception_handler(RequestValidationError)
    async def invalid_payload(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(
            "Rejected payload for %s %s: %s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request payload"},
        )

    app.include_router(users_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
