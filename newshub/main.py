"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from newshub.api.errors import register_error_handlers
from newshub.api.v1.router import api_router
from newshub.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
)
for _name in ("botocore", "aiobotocore", "aioboto3", "httpx", "sqlalchemy.engine"):
    logging.getLogger(_name).setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    # Startup
    settings = get_settings()
    logger.info("Starting %s in %s mode", settings.app_name, settings.environment)

    from newshub.db.postgres import init_db
    from newshub.db.storage import get_storage
    from newshub.services.auth_service import get_auth_client

    try:
        await init_db()
        logger.info("PostgreSQL tables initialized")
    except (SQLAlchemyError, OSError):
        logger.exception("PostgreSQL init error (may be offline)")

    try:
        await get_storage().ensure_buckets()
        logger.info("Storage buckets ready")
    except (BotoCoreError, ClientError):
        logger.warning("Storage init error (may be offline)", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down...")
    await get_auth_client().close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Article publishing: public reader API and admin dashboard",
        version="0.1.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    return app


app = create_app()
