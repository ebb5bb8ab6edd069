"""Project repository."""

from typing import Any

from bson import ObjectId

from portfolio_api.models.project import ProjectCreate, ProjectUpdate
from portfolio_api.repositories.base import BaseRepository

OPTIONAL_FIELDS = ("link",)


class ProjectRepository(BaseRepository):
    async def create(self, project: ProjectCreate) -> dict[str, Any]:
        return await self.insert(project.to_document())

    async def list_all(self) -> list[dict[str, Any]]:
        return await self.find_all("createdAt")

    async def get(self, object_id: ObjectId) -> dict[str, Any] | None:
        return await self.find_by_id(object_id)

    async def replace(self, object_id: ObjectId, project: ProjectUpdate) -> dict[str, Any] | None:
        """Replace all editable fields; optional fields missing from the body are removed."""
        fields = project.to_document()
        unset = [name for name in OPTIONAL_FIELDS if name not in fields]
        return await self.replace_fields(object_id, fields, unset=unset)

    async def delete(self, object_id: ObjectId) -> bool:
        return await self.delete_by_id(object_id)
