from typing import Any, Optional

from pydantic import BaseModel


class ListResponse(BaseModel):
    success: bool = True
    data: list[dict[str, Any]]
    message: str


class RecordResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]
    message: str


class DeleteResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class RelayResponse(BaseModel):
    success: bool = True
    message: str
    request_id: Optional[str] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    store: str
    relay_configured: bool
    pending_background_tasks: int
