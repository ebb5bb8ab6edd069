"""Project CRUD API routes."""

import logging

from fastapi import APIRouter

from portfolio_api.dependencies import ProjectId, ProjectRepo
from portfolio_api.errors.exceptions import NotFoundError
from portfolio_api.models.common import DeleteAck
from portfolio_api.models.project import Project, ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.post("", status_code=201)
async def create_project(project: ProjectCreate, repo: ProjectRepo) -> dict:
    doc = await repo.create(project)
    logger.info("project_created", extra={"project_id": str(doc["_id"])})
    return Project.from_document(doc).to_response()


@router.get("")
async def list_projects(repo: ProjectRepo) -> list[dict]:
    """All projects, newest first."""
    docs = await repo.list_all()
    return [Project.from_document(doc).to_response() for doc in docs]


@router.get("/{project_id}")
async def get_project(project_id: ProjectId, repo: ProjectRepo) -> dict:
    doc = await repo.get(project_id)
    if doc is None:
        raise NotFoundError()
    return Project.from_document(doc).to_response()


@router.put("/{project_id}")
async def update_project(project_id: ProjectId, project: ProjectUpdate, repo: ProjectRepo) -> dict:
    doc = await repo.replace(project_id, project)
    if doc is None:
        raise NotFoundError()
    logger.info("project_updated", extra={"project_id": str(project_id)})
    return Project.from_document(doc).to_response()


@router.delete("/{project_id}")
async def delete_project(project_id: ProjectId, repo: ProjectRepo) -> dict:
    if not await repo.delete(project_id):
        raise NotFoundError()
    logger.info("project_deleted", extra={"project_id": str(project_id)})
    return DeleteAck().model_dump()
