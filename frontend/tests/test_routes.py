"""
Notes Frontend - Route Tests
=============================

What:  End-to-end tests of the FastAPI app over ASGITransport with a fake Notes API.

What we test:
    ✅ The page lists the notes loaded at startup, in order
    ✅ POST /add appends on success and keeps the draft on failure
    ✅ POST /draft updates the draft; a missing field is a 400
    ✅ /view/state and /health
    ✅ Startup load failure renders an empty list without an error page
"""

import pytest
from httpx import ASGITransport, AsyncClient

from notes_frontend.exceptions import NotesFrontendError, RemoteCallError
from notes_frontend.main import create_app
from notes_frontend.services.notes_api import CREATE_NOTE, LIST_NOTES

from conftest import CollectingReporter, FakeNotesAPI


class TestNotesPage:

    @pytest.mark.asyncio
    async def test_page_lists_notes_in_order(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert "<h1>Notes</h1>" in response.text
        assert response.text.count("<li ") == 2
        assert response.text.index(">a</li>") < response.text.index(">b</li>")

    @pytest.mark.asyncio
    async def test_reloading_page_does_not_refetch(self, test_client, fake_api):
        first = await test_client.get("/")
        second = await test_client.get("/")

        assert first.text == second.text
        assert fake_api.list_calls == 1

    @pytest.mark.asyncio
    async def test_note_text_is_escaped(self, test_client, fake_api):
        fake_api.next_id = 7
        await test_client.post("/add", data={"text": "<b>bold</b>"})

        response = await test_client.get("/")

        assert "&lt;b&gt;bold&lt;/b&gt;" in response.text
        assert "<b>bold</b>" not in response.text

    @pytest.mark.asyncio
    async def test_input_is_submitted_with_add(self, test_client):
        response = await test_client.get("/")

        assert '<form method="post" action="/add">' in response.text
        assert 'name="text"' in response.text
        assert "/draft" not in response.text

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"


class TestAddNote:

    @pytest.mark.asyncio
    async def test_add_appends_and_clears_draft(self, test_client, fake_api):
        fake_api.next_id = 3

        response = await test_client.post("/add", data={"text": "hello"})

        assert response.status_code == 303
        assert response.headers["location"] == "/"
        state = (await test_client.get("/view/state")).json()
        assert state["notes"][-1] == {"id": 3, "text": "hello"}
        assert len(state["notes"]) == 3
        assert state["draft_text"] == ""
        assert state["create"]["status"] == "succeeded"

    @pytest.mark.asyncio
    async def test_failed_add_keeps_draft_in_input(
        self, test_client, fake_api, collecting_reporter
    ):
        fake_api.create_error = RemoteCallError(CREATE_NOTE, status_code=500)

        response = await test_client.post("/add", data={"text": "keep me"})
        assert response.status_code == 303

        page = await test_client.get("/")
        assert 'value="keep me"' in page.text
        assert page.text.count("<li ") == 2
        assert collecting_reporter.reports[-1].prefix == "Failed to add note"

    @pytest.mark.asyncio
    async def test_empty_submission_is_posted(self, test_client, fake_api):
        await test_client.post("/add", data={"text": ""})

        assert fake_api.created_texts == [""]

    @pytest.mark.asyncio
    async def test_add_without_field_submits_current_draft(self, test_client, fake_api):
        await test_client.post("/draft", data={"text": "typed"})

        await test_client.post("/add")

        assert fake_api.created_texts == ["typed"]


class TestDraft:

    @pytest.mark.asyncio
    async def test_draft_is_stored_verbatim(self, test_client):
        response = await test_client.post("/draft", data={"text": " hi "})

        assert response.status_code == 303
        state = (await test_client.get("/view/state")).json()
        assert state["draft_text"] == " hi "

    @pytest.mark.asyncio
    async def test_missing_text_is_rejected(self, test_client):
        response = await test_client.post("/draft", data={})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"] == {"field": "text"}

    @pytest.mark.asyncio
    async def test_input_is_empty_after_successful_add(self, test_client):
        await test_client.post("/add", data={"text": "hello"})

        page = await test_client.get("/")

        assert 'value=""' in page.text


class TestErrorHandlers:

    @pytest.mark.asyncio
    async def test_frontend_error_becomes_json_500(self, frontend_app, test_client):
        async def broken():
            raise NotesFrontendError("view unavailable", context={"secret": "x"})

        frontend_app.add_api_route("/broken", broken)

        response = await test_client.get("/broken", headers={"X-Request-ID": "rid42"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "server_error",
            "message": "view unavailable",
            "request_id": "rid42",
        }


class TestViewState:

    @pytest.mark.asyncio
    async def test_snapshot_after_startup(self, test_client):
        state = (await test_client.get("/view/state")).json()

        assert state == {
            "notes": [{"id": 1, "text": "a"}, {"id": 2, "text": "b"}],
            "draft_text": "",
            "load": {"status": "succeeded", "pending": 0},
            "create": {"status": "idle", "pending": 0},
            "active": True,
        }


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        body = (await test_client.get("/health")).json()

        assert body["status"] == "healthy"
        assert body["notes_api"] == "available"
        assert body["view"] == "succeeded"

    @pytest.mark.asyncio
    async def test_degraded_when_notes_api_is_down(self, test_client, fake_api):
        fake_api.healthy = False

        body = (await test_client.get("/health")).json()

        assert body["status"] == "degraded"
        assert body["notes_api"] == "unavailable"


class TestStartupFailure:

    @pytest.mark.asyncio
    async def test_load_failure_renders_empty_list(self):
        api = FakeNotesAPI([{"id": 1, "text": "a"}])
        api.list_error = RemoteCallError(LIST_NOTES, cause="transport")
        reporter = CollectingReporter()
        app = create_app(notes_api=api, error_reporter=reporter)

        async with app.router.lifespan_context(app):
            await app.state.view.wait_until_loaded()
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                page = await client.get("/")
                state = (await client.get("/view/state")).json()

        assert page.status_code == 200
        assert "<li " not in page.text
        assert state["notes"] == []
        assert state["load"]["status"] == "failed"
        assert [r.prefix for r in reporter.reports] == ["Failed to fetch notes"]

    @pytest.mark.asyncio
    async def test_shutdown_tears_view_down(self, fake_api):
        app = create_app(notes_api=fake_api)

        async with app.router.lifespan_context(app):
            await app.state.view.wait_until_loaded()
            view = app.state.view

        assert view.active is False
