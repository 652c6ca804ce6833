"""Caller-side input guard.

The core scores any string, however short. Callers that need a minimum
evidentiary basis (single-unit scoring, the CLI) check it here first.
"""

from __future__ import annotations

from cvarbiter.constants import DEFAULT_MIN_UNIT_LENGTH


def validate_unit_text(text: str, min_length: int = DEFAULT_MIN_UNIT_LENGTH) -> str:
    """Return ``text`` stripped, or raise ``ValueError`` if it is too short."""
    stripped = text.strip()
    if len(stripped) < min_length:
        raise ValueError(
            f"text too short to score ({len(stripped)} chars, min {min_length})"
        )
    return stripped
