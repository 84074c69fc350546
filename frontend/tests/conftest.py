"""
Notes Frontend - Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    fake_api            In-memory NotesAPI with switchable failures and gates
    collecting_reporter ErrorReporter that keeps reports in a list
    notes_view          NotesView over fake_api (not yet activated)
    frontend_app        FastAPI app with its lifespan entered, initial load settled
    test_client         HTTPX AsyncClient bound to frontend_app
"""

import asyncio
import os
from typing import List, Optional

# Settings are read at import time, so the environment goes first
os.environ["NOTES_API_URL"] = "http://notes-api.test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notes_frontend.exceptions import RemoteCallError
from notes_frontend.schemas.note import Note
from notes_frontend.services.api_base import NotesAPI
from notes_frontend.services.error_reporter import ErrorReport, ErrorReporter
from notes_frontend.view.notes_view import NotesView


class FakeNotesAPI(NotesAPI):
    """
    Stand-in for the Notes API.

    Attributes tests may set:
        list_error / create_error:  RemoteCallError to raise instead of answering
        list_gate:                  asyncio.Event the next list call waits on
        create_gates:               Events consumed one per create call, in order
        next_id:                    id given to the next created note
        healthy:                    health_check() result
    """

    def __init__(self, notes: Optional[List[dict]] = None):
        self.notes = [Note(**n) for n in (notes or [])]
        self.list_calls = 0
        self.created_texts: List[str] = []
        self.list_error: Optional[RemoteCallError] = None
        self.create_error: Optional[RemoteCallError] = None
        self.list_gate: Optional[asyncio.Event] = None
        self.create_gates: List[asyncio.Event] = []
        self.next_id = 100
        self.healthy = True

    async def list_notes(self) -> List[Note]:
        self.list_calls += 1
        if self.list_gate is not None:
            await self.list_gate.wait()
        if self.list_error is not None:
            raise self.list_error
        return list(self.notes)

    async def create_note(self, text: str) -> Note:
        self.created_texts.append(text)
        if self.create_gates:
            await self.create_gates.pop(0).wait()
        if self.create_error is not None:
            raise self.create_error
        note = Note(id=self.next_id, text=text)
        self.next_id += 1
        self.notes.append(note)
        return note

    async def health_check(self) -> bool:
        return self.healthy


class CollectingReporter(ErrorReporter):
    """Keeps every report so tests can assert on the diagnostic channel."""

    def __init__(self):
        self.reports: List[ErrorReport] = []

    def report(self, report: ErrorReport) -> None:
        self.reports.append(report)


@pytest.fixture
def fake_api():
    """Notes API answering with two notes: a, b."""
    return FakeNotesAPI([{"id": 1, "text": "a"}, {"id": 2, "text": "b"}])


@pytest.fixture
def collecting_reporter():
    return CollectingReporter()


@pytest.fixture
def notes_view(fake_api, collecting_reporter):
    """
    A view over fake_api that has not been activated yet.

    Usage:
        async def test_x(notes_view):
            await notes_view.activate()
    """
    return NotesView(fake_api, reporter=collecting_reporter)


@pytest_asyncio.fixture
async def frontend_app(fake_api, collecting_reporter):
    """
    Provides the FastAPI app with its lifespan running.

    ASGITransport does not send lifespan events, so the lifespan context is
    entered here and the initial notes fetch is awaited before the test runs.
    """
    from notes_frontend.main import create_app

    app = create_app(notes_api=fake_api, error_reporter=collecting_reporter)
    async with app.router.lifespan_context(app):
        await app.state.view.wait_until_loaded()
        yield app


@pytest_asyncio.fixture
async def test_client(frontend_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=frontend_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
