"""Pydantic models for the Project entity."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ProjectCreate(BaseModel):
    """Request body for creating a project.

    Unknown keys are ignored and numbers are accepted as text (``2023`` ->
    ``"2023"``). ``link`` is optional; a blank link is treated as absent.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    date: RequiredText
    company: RequiredText
    role: RequiredText
    link: str | None = None
    img: RequiredText

    @field_validator("link", mode="before")
    @classmethod
    def _blank_link_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    def to_document(self) -> dict[str, Any]:
        """Return the editable fields as a store document (absent link omitted)."""
        return self.model_dump(exclude_none=True)


class ProjectUpdate(ProjectCreate):
    """Request body for replacing the editable fields of a project."""


class Project(BaseModel):
    """Project as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    date: str
    company: str
    role: str
    link: str | None = None
    img: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Project":
        """Build a response model from a raw store document."""
        return cls(
            id=str(doc["_id"]),
            date=doc["date"],
            company=doc["company"],
            role=doc["role"],
            link=doc.get("link"),
            img=doc["img"],
            created_at=doc["createdAt"],
            updated_at=doc["updatedAt"],
        )

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
