"""Tests for error classification."""

from __future__ import annotations

import pytest

from cvarbiter.resilience.errors import (
    ErrorClass,
    GenerationError,
    classify_error,
    is_retryable,
)


class _StatusCodeError(Exception):
    """Exception with a status_code attribute."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


# ── classify_error ───────────────────────────────────────────


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (429, ErrorClass.TRANSIENT),
        (401, ErrorClass.CLIENT),
        (403, ErrorClass.CLIENT),
        (408, ErrorClass.TIMEOUT),
        (500, ErrorClass.SERVER),
        (503, ErrorClass.SERVER),
        (504, ErrorClass.TIMEOUT),
    ],
)
def test_classify_status_code(status_code: int, expected: ErrorClass) -> None:
    assert classify_error(_StatusCodeError("boom", status_code)) == expected


def test_generation_error_carries_status() -> None:
    err = GenerationError("rate limited", status_code=429)
    assert err.status_code == 429
    assert classify_error(err) == ErrorClass.TRANSIENT


def test_classify_timeout_error_type() -> None:
    """TimeoutError instance → TIMEOUT (no string matching)."""
    assert classify_error(TimeoutError()) == ErrorClass.TIMEOUT


def test_classify_connection_error_type() -> None:
    assert classify_error(ConnectionResetError()) == ErrorClass.TRANSIENT


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("rate limit exceeded for model xyz", ErrorClass.TRANSIENT),
        ("connection refused to host", ErrorClass.TRANSIENT),
        ("request timed out after 30s", ErrorClass.TIMEOUT),
        ("upstream returned 502", ErrorClass.SERVER),
        ("quota exhausted", ErrorClass.CLIENT),
    ],
)
def test_classify_message_fallback(message: str, expected: ErrorClass) -> None:
    assert classify_error(Exception(message)) == expected


def test_classify_unknown() -> None:
    """Unrecognized exception → UNKNOWN."""
    assert classify_error(Exception("something unexpected")) == ErrorClass.UNKNOWN


# ── is_retryable ─────────────────────────────────────────────


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (GenerationError("slow down", 429), True),
        (GenerationError("bad gateway", 502), True),
        (TimeoutError(), True),
        (GenerationError("bad request", 400), False),
        (ValueError("something unexpected"), False),
    ],
)
def test_is_retryable(error: Exception, expected: bool) -> None:
    assert is_retryable(error) is expected
