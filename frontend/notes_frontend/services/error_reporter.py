"""
Notes Frontend - Error Reporting
=================================

What:  Structured reporting of failed remote calls.
How:   NotesView turns each caught RemoteCallError into an ErrorReport
       (kind + operation + message) and hands it to an ErrorReporter.
       The default reporter writes to the operator-facing diagnostic logger
       with a static per-operation prefix; nothing reaches the end user.
Who:   NotesView; main.py wires the default reporter.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict

from notes_frontend.exceptions import RemoteCallError
from notes_frontend.services.notes_api import CREATE_NOTE, LIST_NOTES

diagnostics = logging.getLogger("notes_frontend.diagnostics")

# Static prefixes identifying which operation failed
OPERATION_PREFIXES = {
    LIST_NOTES: "Failed to fetch notes",
    CREATE_NOTE: "Failed to add note",
}


@dataclass(frozen=True)
class ErrorReport:
    """One failed remote call, as seen by an ErrorReporter."""

    kind: str
    operation: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)

    @property
    def prefix(self) -> str:
        return OPERATION_PREFIXES.get(self.operation, f"Failed to {self.operation}")

    @classmethod
    def from_error(cls, error: RemoteCallError) -> "ErrorReport":
        return cls(
            kind=error.kind,
            operation=error.operation,
            message=error.message,
            context=dict(error.context),
        )


class ErrorReporter(ABC):
    """
    Sink for ErrorReports.

    Implementations decide whether a failure is only logged or also shown
    to someone. They must not raise.
    """

    @abstractmethod
    def report(self, report: ErrorReport) -> None:
        ...


class LoggingErrorReporter(ErrorReporter):
    """Writes each report to the `notes_frontend.diagnostics` logger."""

    def __init__(self, logger: logging.Logger = diagnostics):
        self._logger = logger

    def report(self, report: ErrorReport) -> None:
        self._logger.error(
            "%s: %s",
            report.prefix,
            report.message,
            extra={
                "error_kind": report.kind,
                "operation": report.operation,
                "error_context": report.context,
            },
        )
