"""Heuristic ten-dimension competency scoring for whole documents."""

from __future__ import annotations

from cvarbiter.analysis.lexicon import COMPETENCY_TERMS, find_terms
from cvarbiter.constants import COMPETENCY_DIMENSIONS, DIMENSION_SCORE_MAX
from cvarbiter.document.schemas import IndicatorEntry, IndicatorSet

POINTS_PER_HIT = 3
SUGGESTION_EXAMPLES = 2


def score_dimension(text: str, dimension_id: int) -> IndicatorEntry:
    """1 + 3 per distinct signal term, capped at 10."""
    _, name = COMPETENCY_DIMENSIONS[dimension_id]
    terms = COMPETENCY_TERMS[dimension_id]
    hits = find_terms(text, terms)
    score = min(DIMENSION_SCORE_MAX, 1.0 + POINTS_PER_HIT * len(hits))
    if hits:
        return IndicatorEntry(
            dimension_id=dimension_id,
            name=name,
            score=score,
            evidence=f"Signals: {', '.join(hits)}",
        )
    examples = ", ".join(terms[:SUGGESTION_EXAMPLES])
    return IndicatorEntry(
        dimension_id=dimension_id,
        name=name,
        score=score,
        suggestion=f"Add evidence of {name.lower()} (e.g. {examples})",
    )


def score_indicator_dimensions(text: str) -> IndicatorSet:
    return IndicatorSet(
        entries=tuple(score_dimension(text, i) for i in COMPETENCY_DIMENSIONS)
    )
