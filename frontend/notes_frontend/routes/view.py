"""
Notes Frontend - View Route Handlers
=====================================

What:  HTML page for the notes view plus the form posts that drive it.
How:   Each handler fetches the process-wide NotesView from app.state,
       calls one view operation and either renders the page or redirects
       back to it (POST/redirect/GET).
Who:   Browsers. The page submits the input together with "Add", so
       /add carries the text it stores; /draft is for clients that keep
       the draft on the server between submissions.

Failure behaviour:
    A failed Notes API call never turns into an error page. The view has
    already reported it to the diagnostic log; the redirect simply shows
    the unchanged list and the draft that is still in the input.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from notes_frontend.exceptions import ValidationError
from notes_frontend.schemas.note import (
    ErrorResponse,
    OperationStatusResponse,
    ViewStateResponse,
)
from notes_frontend.view.notes_view import NotesView

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["View"])


def get_view(request: Request) -> NotesView:
    """Dependency returning the view created by the app lifespan."""
    return request.app.state.view


async def _form_text(request: Request) -> str | None:
    """
    Read the `text` form field, keeping an empty string as "".

    FastAPI's Form() maps an empty form value to "missing", which would
    make an empty submission indistinguishable from no field at all.
    """
    form = await request.form()
    value = form.get("text")
    if value is None or isinstance(value, str):
        return value
    raise ValidationError(message="Form field 'text' must be a string", field="text")


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Notes page",
    description="Renders the notes list, the draft input and the Add button.",
)
async def show_notes(request: Request, view: NotesView = Depends(get_view)) -> HTMLResponse:
    snapshot = view.render()
    return templates.TemplateResponse(request, "notes.html", {"view": snapshot})


@router.post(
    "/draft",
    status_code=303,
    responses={400: {"description": "Missing text field", "model": ErrorResponse}},
    summary="Update the draft",
    description="Replaces the draft text with the submitted `text` form field as-is.",
)
async def edit_draft(request: Request, view: NotesView = Depends(get_view)) -> RedirectResponse:
    text = await _form_text(request)
    if text is None:
        raise ValidationError(message="Form field 'text' is required", field="text")

    view.set_draft(text)
    return RedirectResponse(url="/", status_code=303)


@router.post(
    "/add",
    status_code=303,
    summary="Add a note",
    description=(
        "Optionally sets the draft from the `text` form field, then submits the "
        "draft to the Notes API. Always redirects back to the notes page."
    ),
)
async def add_note(request: Request, view: NotesView = Depends(get_view)) -> RedirectResponse:
    text = await _form_text(request)
    if text is not None:
        view.set_draft(text)

    note = await view.add_note()
    if note is not None:
        logger.info("Note %s added from the page", note.id)

    return RedirectResponse(url="/", status_code=303)


@router.get(
    "/view/state",
    response_model=ViewStateResponse,
    summary="View state snapshot",
    description="JSON form of what the notes page currently renders.",
)
async def view_state(view: NotesView = Depends(get_view)) -> ViewStateResponse:
    snapshot = view.render()
    return ViewStateResponse(
        notes=list(snapshot.notes),
        draft_text=snapshot.draft_text,
        load=OperationStatusResponse(status=snapshot.load_status.value),
        create=OperationStatusResponse(
            status=snapshot.create_status.value,
            pending=snapshot.create_pending,
        ),
        active=snapshot.active,
    )
