"""
Notes Frontend - Pydantic Schemas
==================================

What:  Pydantic models for the Notes API wire contract and the frontend's
       own JSON responses.
How:   The API client validates Notes API bodies against `Note`; routes use
       the response models for serialization and OpenAPI docs.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr


# ══════════════════════════════════════════════════════════════════════════
# Notes API contract (consumed)
# ══════════════════════════════════════════════════════════════════════════


class Note(BaseModel):
    """
    What:  A note record as returned by the Notes API.

    `id` is opaque: whatever number or string the API assigned. It must be
    present and non-null; the client never interprets or generates it.
    Extra fields sent by the API are kept so that nothing returned by the
    server is silently dropped.
    """
    id: Union[StrictInt, StrictStr, StrictFloat] = Field(
        description="Server-assigned identifier (opaque)"
    )
    text: StrictStr = Field(description="Note body")

    model_config = {"extra": "allow", "frozen": True}


class NoteCreate(BaseModel):
    """Request body for POST /api/notes. No trimming or length limits."""
    text: str = Field(description="Note text exactly as typed, may be empty")


# ══════════════════════════════════════════════════════════════════════════
# Frontend responses (provided)
# ══════════════════════════════════════════════════════════════════════════


class OperationStatusResponse(BaseModel):
    """Status of one view operation (load or create)."""
    status: str = Field(description="idle, loading, succeeded or failed")
    pending: int = Field(default=0, description="Requests currently in flight")


class ViewStateResponse(BaseModel):
    """
    What:  JSON snapshot of the hosted view.
    Who:   Returned by GET /view/state.
    """
    notes: List[Note] = Field(description="Notes in display order")
    draft_text: str = Field(description="Current uncommitted input")
    load: OperationStatusResponse
    create: OperationStatusResponse
    active: bool = Field(description="Whether the view is currently activated")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all frontend errors.

    Example:
        {
            "error": "bad_gateway",
            "message": "Notes API call failed",
            "details": {"operation": "list_notes"},
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and Notes API status."""
    status: str = Field(description="Overall service status: healthy, degraded")
    version: str = Field(description="Application version")
    notes_api: str = Field(description="Notes API status: available, unavailable")
    view: str = Field(description="Load status of the hosted view")
    uptime_seconds: float = Field(description="Seconds since service started")
