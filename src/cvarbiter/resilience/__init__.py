"""Failure classification for the generation boundary."""

from cvarbiter.resilience.errors import (
    ErrorClass,
    GenerationError,
    classify_error,
    is_retryable,
)

__all__ = [
    "ErrorClass",
    "GenerationError",
    "classify_error",
    "is_retryable",
]
