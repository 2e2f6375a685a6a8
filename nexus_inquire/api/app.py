"""FastAPI application for the completion proxy.

The sidebar may be embedded in other sites, so CORS defaults to any origin;
set CORS_ORIGINS to a comma-separated list to narrow it.
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nexus_inquire import __version__
from nexus_inquire.api.routes import router as completion_router

logger = logging.getLogger(__name__)


def cors_origins_from_env() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    logger.info(f"Completion proxy {app.version} ready")
    yield
    logger.info("Completion proxy stopped")


def create_app(cors_origins: list[str] | None = None) -> FastAPI:
    """Build the proxy app.

    Args:
        cors_origins: Allowed browser origins. Read from CORS_ORIGINS if omitted.

    Returns:
        App exposing /health and the completion endpoint.
    """
    application = FastAPI(
        title="Nexus Inquire API",
        description=(
            "Completion proxy for the Nexus Inquire chat sidebar. Forwards the "
            "user's question and session context to a hosted language model "
            "and returns the reply text."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    origins = cors_origins if cors_origins is not None else cors_origins_from_env()
    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentialed requests cannot be combined with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["POST"],
        allow_headers=["*"],
    )

    application.include_router(completion_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "service": "nexus-inquire"}

    return application


app = create_app()
