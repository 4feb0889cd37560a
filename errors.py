from typing import Optional


class LocationError(Exception):
    """Base class for everything the location tooling raises on purpose."""


class ServiceUnavailable(LocationError):
    """The Google endpoint could not be reached or returned an unreadable body."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class ExternalApiError(LocationError):
    """The Google endpoint answered with a status other than OK / ZERO_RESULTS."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


class InvalidOperatorInput(LocationError):
    """Operator typed something that cannot be used; the prompt is shown again."""


class UnsupportedOperation(LocationError):
    """The host has no facility for the requested action (e.g. no web browser)."""
