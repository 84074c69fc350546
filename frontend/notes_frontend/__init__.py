"""
Notes Frontend - Application Package Initializer
=================================================

What: Marks the `notes_frontend` directory as a Python package.
Who:  Imported by uvicorn (`notes_frontend.main:app`), pytest and the modules below.

Architecture Note:
    The frontend hosts a single note-list view and talks to an external
    Notes API over HTTP:

    ┌─────────────────────────────────────┐
    │        Routes (HTML + form posts)   │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        View (NotesView + state)     │  ← notes, draft, request status
    ├─────────────────────────────────────┤
    │      Services (Notes API client,    │  ← httpx calls, error reporting
    │        error reporter)              │
    ├─────────────────────────────────────┤
    │        Notes API (external)         │  ← GET/POST /api/notes
    └─────────────────────────────────────┘

    The view never touches HTTP details of the browser side, and the API
    client never touches view state.
"""

__version__ = "1.0.0"
