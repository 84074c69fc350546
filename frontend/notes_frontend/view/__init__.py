# View package init
"""
Notes Frontend - View Package

What:  The note-list view and its state model.
    - state.py:       RequestStatus, OperationState, ViewSnapshot
    - notes_view.py:  NotesView (loader, draft editor, note creator)
"""
