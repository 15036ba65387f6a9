"""Custom exceptions for the browser telemetry server."""

from typing import Optional


class TelemetryError(Exception):
    """Base exception for all browser telemetry errors."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        recoverable: bool = True
    ):
        self.message = message
        self.details = details
        self.recoverable = recoverable
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class BrowserError(TelemetryError):
    """Errors related to browser operations."""
    pass


class NavigationError(BrowserError):
    """Errors during page navigation."""
    pass


class EnrichmentError(BrowserError):
    """A DOM context lookup for a captured click failed."""

    def __init__(
        self,
        selector: str,
        message: Optional[str] = None,
        **kwargs
    ):
        self.selector = selector
        msg = message or f"Could not resolve DOM context for: {selector}"
        super().__init__(msg, **kwargs)


class InvalidSliceError(TelemetryError, ValueError):
    """A head/tail selection argument is out of range."""

    def __init__(self, name: str, value: int, **kwargs):
        self.name = name
        self.value = value
        super().__init__(
            f"'{name}' must be a non-negative integer, got {value}",
            recoverable=False,
            **kwargs
        )


class SessionError(TelemetryError):
    """Errors related to session management."""
    pass


class SessionExpiredError(SessionError):
    """Browser session has not started or has been closed."""

    def __init__(self, session_id: str, **kwargs):
        self.session_id = session_id
        super().__init__(
            f"Session '{session_id}' is not running",
            recoverable=False,
            **kwargs
        )
