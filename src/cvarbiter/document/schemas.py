"""Pydantic models for document-level scoring."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cvarbiter.constants import (
    COMPETENCY_DIMENSIONS,
    DIMENSION_SCORE_MAX,
    DIMENSION_SCORE_MIN,
    DOCUMENT_DIGITS,
    NEUTRAL_DIMENSION_SCORE,
)
from cvarbiter.scoring.aggregator import average, round_half_up
from cvarbiter.scoring.weights import WeightProfile


class IndicatorEntry(BaseModel):
    """Score for one competency dimension."""

    model_config = ConfigDict(frozen=True)

    dimension_id: int = Field(ge=1)
    name: str
    score: float = Field(ge=DIMENSION_SCORE_MIN, le=DIMENSION_SCORE_MAX)
    evidence: str = ""
    suggestion: str = ""

    @property
    def slug(self) -> str:
        known = COMPETENCY_DIMENSIONS.get(self.dimension_id)
        return known[0] if known else self.name.lower().replace(" ", "_")


class IndicatorSet(BaseModel):
    """Competency scores ordered by ``dimension_id``."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[IndicatorEntry, ...] = ()

    @field_validator("entries")
    @classmethod
    def _sort_unique(
        cls, v: tuple[IndicatorEntry, ...]
    ) -> tuple[IndicatorEntry, ...]:
        ids = [e.dimension_id for e in v]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate dimension_id in indicator set")
        return tuple(sorted(v, key=lambda e: e.dimension_id))

    def get(self, dimension_id: int) -> IndicatorEntry | None:
        for entry in self.entries:
            if entry.dimension_id == dimension_id:
                return entry
        return None

    def average(self) -> float:
        """Mean score, one decimal half-up; 5.0 for an empty set."""
        if not self.entries:
            return NEUTRAL_DIMENSION_SCORE
        return average((e.score for e in self.entries), DOCUMENT_DIGITS)

    def weighted_average(self, profile: WeightProfile) -> float:
        """Mean weighted by ``profile``, renormalized over present dimensions.

        Falls back to the plain average when no entry is weighted.
        """
        pairs = [
            (e.score, profile.weight(e.slug))
            for e in self.entries
            if profile.weight(e.slug) > 0
        ]
        total_weight = math.fsum(w for _, w in pairs)
        if not pairs or total_weight <= 0:
            return self.average()
        value = math.fsum(s * w for s, w in pairs) / total_weight
        return round_half_up(value, DOCUMENT_DIGITS)


class DocumentScore(BaseModel):
    """Combined document score and its components."""

    model_config = ConfigDict(frozen=True)

    overall: float
    core: float
    structural_format: float
    keyword_match: float = 0.0  # 0 when no job description was given
    profile: str
