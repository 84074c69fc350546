# Services package init
"""
Notes Frontend - Services Layer
================================

What:  Everything between the view and the outside world.

Service Inventory:
    - NotesAPI (abstract): What the view needs from the Notes API
    - HttpNotesAPI: Concrete implementation over httpx
    - ErrorReporter (abstract) / LoggingErrorReporter: Diagnostic channel
      for failed remote calls
"""
