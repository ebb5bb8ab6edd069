"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_api.config import settings
from portfolio_api.logging_config import configure_logging

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=settings.log_json)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the single MongoDB client for the process lifetime.

    Startup is fatal when no connection string is configured or the
    server cannot be reached; there is no retry.
    """
    from portfolio_api.db.client import create_db_client, get_projects_collection
    from portfolio_api.errors.exceptions import StoreError
    from portfolio_api.repositories.project_repo import ProjectRepository

    if not settings.mongodb_uri:
        logger.error("MONGODB_URI is not set")
        raise SystemExit(1)

    client = create_db_client(settings.mongodb_uri)
    repo = ProjectRepository(get_projects_collection(client))
    try:
        await repo.ping()
    except StoreError as exc:
        logger.error("database connection failed: %s", exc.__cause__ or exc)
        await client.close()
        raise SystemExit(1) from exc

    app.state.db_client = client
    app.state.project_repo = repo
    logger.info("connected to MongoDB (db=%s)", settings.database_name)
    yield

    await client.close()
    logger.info("Portfolio API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Portfolio API",
        version="1.0.0",
        description="CRUD service for the portfolio website's project entries.",
        lifespan=lifespan,
    )

    # Permissive CORS for the portfolio front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    # Added last so it wraps CORS and sees every response
    from portfolio_api.api.middleware.request_log import RequestLogMiddleware
    app.add_middleware(RequestLogMiddleware)

    from portfolio_api.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from portfolio_api.api.router import api_router, root_router
    app.include_router(root_router)
    app.include_router(api_router)

    return app


app = create_app()
