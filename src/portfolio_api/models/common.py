"""Pydantic models shared across routes."""

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error body returned for every non-2xx JSON response."""

    model_config = ConfigDict(extra="forbid")

    error: str
    code: str
    request_id: str | None = None


class DeleteAck(BaseModel):
    """Acknowledgement returned after a successful delete."""

    ok: bool = True
