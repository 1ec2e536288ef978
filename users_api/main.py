"""FastAPI application entrypoint for the users API."""

import logging

from fastapi import FastAPI

from users_api.api.users import router as users_router
from users_api.core.config import get_settings
from users_api.core.errors import register_error_handlers

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the application with routes and error handlers attached."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Starting users API with settings=%s", settings.safe_for_logging())

    application = FastAPI(title="Users API")
    register_error_handlers(application)
    application.include_router(users_router)

    @application.get("/health")
    def health() -> dict[str, str]:
        """Health check stub endpoint for service readiness."""
        return {"status": "ok"}

    return application


app = create_app()
