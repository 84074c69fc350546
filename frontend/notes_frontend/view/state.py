"""
Notes Frontend - View State
============================

What:  Explicit request status per view operation and the immutable
       snapshot that rendering is derived from.
Who:   NotesView mutates OperationState; routes and templates only ever
       see ViewSnapshot.

Operation lifecycle:
    IDLE ──start()──▶ LOADING ──finish(ok)──▶ SUCCEEDED
                         │
                         └────finish(fail)──▶ FAILED

    Overlapping requests (e.g. a double-clicked "Add") keep the operation in
    LOADING until the last one settles; the final status is the outcome of
    whichever request settled last.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from notes_frontend.schemas.note import Note


class RequestStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class OperationState:
    """Mutable status of one operation (load or create) of a single view lifecycle."""

    status: RequestStatus = RequestStatus.IDLE
    pending: int = 0

    def start(self) -> None:
        self.pending += 1
        self.status = RequestStatus.LOADING

    def finish(self, succeeded: bool) -> None:
        self.pending = max(0, self.pending - 1)
        if self.pending:
            return
        self.status = RequestStatus.SUCCEEDED if succeeded else RequestStatus.FAILED


@dataclass(frozen=True)
class ViewSnapshot:
    """
    Everything needed to render the view once.

    Rendering the same snapshot twice gives the same output; taking a
    snapshot never mutates the view.
    """

    notes: Tuple[Note, ...]
    draft_text: str
    load_status: RequestStatus
    create_status: RequestStatus
    create_pending: int
    active: bool

    @property
    def is_loading(self) -> bool:
        return self.load_status is RequestStatus.LOADING
