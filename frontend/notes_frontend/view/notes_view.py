"""
Notes Frontend - Notes View
============================

What:  The note-list view: in-memory notes, the draft being typed, and the
       two remote operations that change them.
How:   Plain asyncio object driven by the routes. Each activation starts a
       new lifecycle identified by a generation number; a response is only
       applied if its generation is still current, so nothing arriving after
       teardown can touch state.
Who:   Created and activated in the app lifespan; read and mutated by
       routes/view.py.

Operations:
    activate()      → Notes List Loader: one GET /api/notes per lifecycle
    set_draft(v)    → Draft Editor: replace draft_text with v
    add_note()      → Note Creator: POST draft_text, append result, clear draft
    teardown()      → end the lifecycle, cancel the outstanding load
    render()        → ViewSnapshot for templates / JSON

Failure policy:
    RemoteCallError is caught here, reported through the ErrorReporter and
    never re-raised. On a failed load the list stays empty; on a failed
    creation both the list and the draft stay as they were.
"""

import asyncio
import logging
from typing import List, Optional

from notes_frontend.exceptions import RemoteCallError
from notes_frontend.schemas.note import Note
from notes_frontend.services.api_base import NotesAPI
from notes_frontend.services.error_reporter import (
    ErrorReport,
    ErrorReporter,
    LoggingErrorReporter,
)
from notes_frontend.view.state import OperationState, ViewSnapshot

logger = logging.getLogger(__name__)


class NotesView:
    """
    Process-local state of one note-list view.

    Only the view mutates its own state. All mutation happens on the event
    loop between awaits, so no locking is needed.
    """

    def __init__(self, api: NotesAPI, reporter: Optional[ErrorReporter] = None):
        self._api = api
        self._reporter = reporter or LoggingErrorReporter()

        self._notes: List[Note] = []
        self._draft_text = ""
        self._load = OperationState()
        self._create = OperationState()

        self._active = False
        self._generation = 0
        self._load_task: Optional[asyncio.Task] = None

    # ── Read-only accessors ───────────────────────────────────────────────

    @property
    def notes(self) -> List[Note]:
        return list(self._notes)

    @property
    def draft_text(self) -> str:
        return self._draft_text

    @property
    def active(self) -> bool:
        return self._active

    @property
    def generation(self) -> int:
        return self._generation

    # ── Lifecycle ─────────────────────────────────────────────────────────

    def activate(self) -> asyncio.Task:
        """
        Start a lifecycle and schedule the initial notes fetch.

        Must be called from a running event loop. The fetch runs as a task,
        so the view can be rendered (load status "loading") while it is
        outstanding. Calling activate() on an already active view does not
        fetch again and returns the existing task.
        """
        if self._active and self._load_task is not None:
            return self._load_task

        self._generation += 1
        self._active = True
        self._notes = []
        self._draft_text = ""
        self._load = OperationState()
        self._create = OperationState()

        logger.info("Activating notes view (generation %d)", self._generation)
        self._load.start()
        self._load_task = asyncio.get_running_loop().create_task(
            self._load_notes(self._generation)
        )
        return self._load_task

    def teardown(self) -> None:
        """
        End the current lifecycle.

        Any response still in flight belongs to an old generation and will be
        discarded when it arrives, though it still settles the operation status
        it started. The outstanding load task is cancelled and marked failed.
        """
        if not self._active:
            return

        self._active = False
        self._generation += 1

        if self._load_task is not None and not self._load_task.done():
            self._load_task.cancel()
            self._load.finish(succeeded=False)
        self._load_task = None
        logger.info("Notes view torn down")

    async def wait_until_loaded(self) -> None:
        """Wait for the initial fetch of the current lifecycle to settle."""
        task = self._load_task
        if task is not None:
            await asyncio.wait({task})

    # ── Notes List Loader ─────────────────────────────────────────────────

    async def _load_notes(self, generation: int) -> None:
        try:
            notes = await self._api.list_notes()
        except RemoteCallError as e:
            if self._is_current(generation):
                self._load.finish(succeeded=False)
                self._report(e)
            else:
                logger.debug("Dropping load failure from stale generation %d", generation)
            return

        if not self._is_current(generation):
            logger.debug("Dropping notes list from stale generation %d", generation)
            return

        self._notes = list(notes)
        self._load.finish(succeeded=True)

    # ── Draft Editor ──────────────────────────────────────────────────────

    def set_draft(self, value: str) -> None:
        """Replace the draft with `value` exactly as given."""
        self._draft_text = value

    # ── Note Creator ──────────────────────────────────────────────────────

    async def add_note(self) -> Optional[Note]:
        """
        Submit the current draft as a new note.

        The POST is sent even when the draft is empty. On success the
        returned record is appended to the list as it is *now* (not as it was
        when the request started), and the draft is cleared.

        Returns:
            The created Note, or None if the call failed or the result was
            discarded because the view was torn down meanwhile.
        """
        if not self._active:
            logger.warning("add_note() called on an inactive view; ignoring")
            return None

        generation = self._generation
        text = self._draft_text
        create = self._create
        create.start()

        try:
            note = await self._api.create_note(text)
        except RemoteCallError as e:
            create.finish(succeeded=False)
            if self._is_current(generation):
                self._report(e)
            else:
                logger.debug("Dropping creation failure from stale generation %d", generation)
            return None

        create.finish(succeeded=True)
        if not self._is_current(generation):
            logger.debug("Dropping created note %s from stale generation %d", note.id, generation)
            return None

        self._notes.append(note)
        self._draft_text = ""
        return note

    # ── Rendering ─────────────────────────────────────────────────────────

    def render(self) -> ViewSnapshot:
        return ViewSnapshot(
            notes=tuple(self._notes),
            draft_text=self._draft_text,
            load_status=self._load.status,
            create_status=self._create.status,
            create_pending=self._create.pending,
            active=self._active,
        )

    # ── Helpers ───────────────────────────────────────────────────────────

    def _is_current(self, generation: int) -> bool:
        return self._active and generation == self._generation

    def _report(self, error: RemoteCallError) -> None:
        self._reporter.report(ErrorReport.from_error(error))
