# Middleware package init
"""
Notes Frontend - Middleware Package
====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → Route Handler

    - Request ID runs first so every log line of the request, including the
      access log and outgoing Notes API calls, carries the same ID.
    - Logging measures the full duration and records the final status.
"""
