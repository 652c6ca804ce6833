"""Classify text-generator failures.

Only transient, server and timeout failures are worth another attempt;
everything else resolves straight to "no candidate".
"""

from __future__ import annotations

from enum import Enum


class ErrorClass(Enum):
    TRANSIENT = "transient"  # rate limited, connection dropped
    SERVER = "server"  # 5xx from the generation backend
    TIMEOUT = "timeout"  # deadline exceeded
    CLIENT = "client"  # bad request, auth, quota
    UNKNOWN = "unknown"


class GenerationError(Exception):
    """Failure reported by a text generator, optionally with an HTTP status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


_MESSAGE_MARKERS: tuple[tuple[ErrorClass, tuple[str, ...]], ...] = (
    (ErrorClass.TIMEOUT, ("timeout", "timed out", "deadline")),
    (ErrorClass.TRANSIENT, ("429", "rate limit", "rate_limit", "overloaded")),
    (ErrorClass.SERVER, ("500", "502", "503", "504")),
    (ErrorClass.TRANSIENT, ("econnrefused", "connection", "reset by peer")),
    (ErrorClass.CLIENT, ("400", "401", "403", "404", "quota")),
)


def _classify_status(status_code: int) -> ErrorClass | None:
    if status_code in (408, 504):
        return ErrorClass.TIMEOUT
    if status_code == 429:
        return ErrorClass.TRANSIENT
    if 400 <= status_code < 500:
        return ErrorClass.CLIENT
    if 500 <= status_code < 600:
        return ErrorClass.SERVER
    return None


def classify_error(error: BaseException) -> ErrorClass:
    """Classify by status code, then exception type, then message text."""
    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int):
        by_status = _classify_status(status_code)
        if by_status is not None:
            return by_status

    if isinstance(error, TimeoutError):
        return ErrorClass.TIMEOUT
    if isinstance(error, ConnectionError):
        return ErrorClass.TRANSIENT

    msg = str(error).lower()
    for error_class, markers in _MESSAGE_MARKERS:
        if any(marker in msg for marker in markers):
            return error_class
    return ErrorClass.UNKNOWN


_RETRYABLE = frozenset({
    ErrorClass.TRANSIENT,
    ErrorClass.SERVER,
    ErrorClass.TIMEOUT,
})


def is_retryable(error: BaseException) -> bool:
    return classify_error(error) in _RETRYABLE
