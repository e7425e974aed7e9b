from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel

from src.api.cors import register_cors_policy
from src.core.config import CORSPolicy, config
from src.core.utils.logging import configure_logging

logger = structlog.get_logger(__name__)


class HealthResponse(BaseModel):
    """Payload of the root health check."""

    status: str
    message: str
    environment: str


# --- Application Lifecycle ---


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup and shutdown logging."""
    logger.info("application_startup", app=app.title, version=app.version, environment=config.environment)
    yield
    logger.info("application_shutdown", app=app.title)


# --- Application Setup ---


def create_app(cors_policy: CORSPolicy | None = None) -> FastAPI:
    """Build the FastAPI app with its CORS policy installed."""
    configure_logging(config.logging)
    policy = cors_policy or config.cors
    config.validate(policy)

    application = FastAPI(
        title=config.server.app_name,
        description="REST API for the Banque accounts frontend.",
        version=config.server.app_version,
        debug=config.debug,
        lifespan=lifespan,
    )

    # --- CORS Configuration ---

    register_cors_policy(application, policy)

    # --- Root Endpoint ---

    @application.get("/", tags=["Health Check"], response_model=HealthResponse)
    async def read_root() -> HealthResponse:
        """A simple health check endpoint to confirm the service is running."""
        return HealthResponse(
            status="ok",
            message=f"{application.title} is running.",
            environment=config.environment,
        )

    return application


app = create_app()


def run() -> None:
    """Serve the module-level app with uvicorn."""
    uvicorn.run(
        "src.main:app",
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower(),
    )


if __name__ == "__main__":
    run()
