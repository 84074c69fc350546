# Routes package init
"""
Notes Frontend - Routes Package
================================

Route Inventory:
    - view.py:    GET  /              (rendered notes page)
                  POST /draft         (draft editor)
                  POST /add           (note creator)
                  GET  /view/state    (JSON snapshot of the view)
    - health.py:  GET  /health        (service health check)

Routes stay thin: read the form, call the NotesView, redirect or render.
"""
