"""Exceptions raised by the LaTeX compilation service adapter."""

from typing import Optional

GENERIC_DIAGNOSTIC = "Compilation returned non-PDF response"


class CompilationError(Exception):
    """Base class for failures of a single compilation attempt."""


class CompilationTransportError(CompilationError):
    """
    The compilation service did not respond successfully.

    Covers network failures, timeouts and non-2xx responses. Retryable by the
    caller; the adapter never retries on its own.

    Attributes:
        status_code: HTTP status of the response, None when no response arrived
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class CompilationDiagnosticError(CompilationError):
    """
    The service responded but produced no PDF (the source failed to compile).

    Attributes:
        diagnostic: First error line of the service's log, None if none was found
    """

    def __init__(self, diagnostic: Optional[str] = None):
        self.diagnostic = diagnostic
        super().__init__(diagnostic or GENERIC_DIAGNOSTIC)
