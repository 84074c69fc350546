"""
Notes Frontend - Abstract Notes API Interface
==============================================

What:  Abstract base class defining what the view needs from a Notes API.
How:   `HttpNotesAPI` implements it over httpx; tests substitute in-memory
       fakes without touching the network.
Who:   Called by NotesView for the initial load and for note creation.
"""

from abc import ABC, abstractmethod
from typing import List

from notes_frontend.schemas.note import Note


class NotesAPI(ABC):
    """
    Abstract interface to the external Notes API.

    Contract:
        - list_notes() returns notes in the server's order
        - create_note() returns the record the server created
        - Every failure is raised as RemoteCallError, whatever its cause
        - Implementations never retry
    """

    @abstractmethod
    async def list_notes(self) -> List[Note]:
        """
        Fetch all notes via GET /api/notes.

        Returns:
            List[Note]: Parsed array body, order preserved.

        Raises:
            RemoteCallError: Network failure, non-2xx status, body that is
                not a JSON array of {id, text} objects.
        """
        ...

    @abstractmethod
    async def create_note(self, text: str) -> Note:
        """
        Create a note via POST /api/notes with JSON body {"text": text}.

        Args:
            text: Draft text, sent as-is even when empty.

        Returns:
            Note: The server's record, including the id it assigned.

        Raises:
            RemoteCallError: Network failure, non-2xx status, body that is
                not a JSON object with at least `id` and `text`.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Return True if the Notes API answers, False otherwise. Never raises."""
        ...
