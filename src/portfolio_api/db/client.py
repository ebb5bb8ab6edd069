"""Async MongoDB client creation."""

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from portfolio_api.config import settings


def create_db_client(uri: str | None = None) -> AsyncMongoClient:
    """Create an async MongoDB client. Connections are opened lazily by the driver."""
    return AsyncMongoClient(
        uri or settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
        tz_aware=True,
    )


def get_projects_collection(client: AsyncMongoClient) -> AsyncCollection:
    """Return the projects collection in the application database."""
    return client[settings.database_name][settings.projects_collection]
