"""
Notes Frontend - HTTP Notes API Client
=======================================

What:  Concrete NotesAPI implementation that talks to the Notes API with httpx.
How:   One shared `httpx.AsyncClient` (created in the app lifespan) issues
       GET/POST requests against `<NOTES_API_URL><prefix>/notes`; responses
       are validated against the `Note` schema.
Who:   Used by NotesView; constructed by main.py at startup.

Failure Translation:
    httpx transport error / timeout       → RemoteCallError(cause="transport")
    non-2xx status                        → RemoteCallError(cause="http_status")
    body is not JSON (or nested too deep) → RemoteCallError(cause="invalid_json")
    JSON of the wrong shape               → RemoteCallError(cause="invalid_shape")

    All four are the same error kind to the caller. Nothing is retried.
"""

import logging
import time
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError as SchemaError

from notes_frontend.config import settings
from notes_frontend.exceptions import RemoteCallError
from notes_frontend.middleware.request_id import request_id_var
from notes_frontend.schemas.note import Note, NoteCreate
from notes_frontend.services.api_base import NotesAPI

logger = logging.getLogger(__name__)

LIST_NOTES = "list_notes"
CREATE_NOTE = "create_note"


def build_http_client(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create the shared AsyncClient for the Notes API.

    Args:
        base_url:  Defaults to settings.notes_api_url
        timeout:   Defaults to settings.notes_api_timeout (seconds)
        transport: Optional transport override (httpx.MockTransport in tests)
    """
    return httpx.AsyncClient(
        base_url=base_url or settings.notes_api_url,
        timeout=timeout if timeout is not None else settings.notes_api_timeout,
        headers={"Accept": "application/json"},
        transport=transport,
    )


class HttpNotesAPI(NotesAPI):
    """
    Notes API client over HTTP.

    The client does not own the AsyncClient: whoever created it closes it
    (the app lifespan in production, the fixture in tests).
    """

    def __init__(self, client: httpx.AsyncClient, endpoint: Optional[str] = None):
        self._client = client
        self._endpoint = endpoint or settings.notes_endpoint

    async def list_notes(self) -> List[Note]:
        payload = await self._request(LIST_NOTES, "GET")

        if not isinstance(payload, list):
            raise RemoteCallError(
                LIST_NOTES,
                message="Notes API returned something other than a JSON array",
                cause="invalid_shape",
                context={"body_type": type(payload).__name__},
            )
        try:
            notes = [Note.model_validate(item) for item in payload]
        except SchemaError as e:
            raise RemoteCallError(
                LIST_NOTES,
                message="Notes API returned a malformed note record",
                cause="invalid_shape",
                context={"errors": e.error_count()},
            )

        logger.info("Fetched %d notes", len(notes))
        return notes

    async def create_note(self, text: str) -> Note:
        body = NoteCreate(text=text).model_dump()
        payload = await self._request(
            CREATE_NOTE,
            "POST",
            json=body,
            headers={"Content-Type": "application/json"},
        )

        if not isinstance(payload, dict):
            raise RemoteCallError(
                CREATE_NOTE,
                message="Notes API returned something other than a JSON object",
                cause="invalid_shape",
                context={"body_type": type(payload).__name__},
            )
        try:
            note = Note.model_validate(payload)
        except SchemaError as e:
            raise RemoteCallError(
                CREATE_NOTE,
                message="Notes API returned a note without id or text",
                cause="invalid_shape",
                context={"errors": e.error_count()},
            )

        logger.info("Created note id=%s (%d chars)", note.id, len(note.text))
        return note

    async def health_check(self) -> bool:
        try:
            response = await self._client.get(self._endpoint)
        except httpx.HTTPError as e:
            logger.warning("Notes API health check failed: %s", str(e))
            return False
        return response.is_success

    async def _request(self, operation: str, method: str, **kwargs: Any) -> Any:
        """
        Send one request and return the decoded JSON body.

        Raises:
            RemoteCallError: for every failure mode listed in the module docstring.
        """
        rid = request_id_var.get("")
        if rid:
            headers = dict(kwargs.pop("headers", None) or {})
            headers["X-Request-ID"] = rid
            kwargs["headers"] = headers

        start_time = time.perf_counter()
        try:
            response = await self._client.request(method, self._endpoint, **kwargs)
        except httpx.HTTPError as e:
            raise RemoteCallError(
                operation,
                message=f"Could not reach the Notes API: {e}",
                cause="transport",
                context={"error_type": type(e).__name__},
            )
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.debug(
            "%s %s -> %d in %.1fms",
            method,
            self._endpoint,
            response.status_code,
            duration_ms,
        )

        if not response.is_success:
            raise RemoteCallError(
                operation,
                message=f"Notes API responded with HTTP {response.status_code}",
                cause="http_status",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except (ValueError, RecursionError) as e:
            raise RemoteCallError(
                operation,
                message="Notes API response body is not valid JSON",
                cause="invalid_json",
                status_code=response.status_code,
                context={"error_type": type(e).__name__},
            )
