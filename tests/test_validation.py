"""Tests for the caller-side unit text guard."""

from __future__ import annotations

import pytest

from cvarbiter.validation import validate_unit_text


def test_returns_stripped_text() -> None:
    assert validate_unit_text("  Managed the product roadmap \n") == (
        "Managed the product roadmap"
    )


def test_too_short_raises() -> None:
    with pytest.raises(ValueError, match=r"too short to score \(3 chars, min 20\)"):
        validate_unit_text("  Led   ")


def test_custom_minimum() -> None:
    assert validate_unit_text("Led", min_length=3) == "Led"
