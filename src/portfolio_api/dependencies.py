"""FastAPI dependency injection providers."""

from typing import Annotated

from bson import ObjectId
from fastapi import Depends, Request

from portfolio_api.repositories.base import parse_object_id
from portfolio_api.repositories.project_repo import ProjectRepository


def get_project_repo(request: Request) -> ProjectRepository:
    """Return the project repository constructed at startup."""
    return request.app.state.project_repo


def get_project_id(project_id: str) -> ObjectId:
    """Validate the ``{project_id}`` path parameter before any query runs."""
    return parse_object_id(project_id)


# Type aliases for dependency injection
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repo)]
ProjectId = Annotated[ObjectId, Depends(get_project_id)]
