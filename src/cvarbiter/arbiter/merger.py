"""Non-regression merge of two indicator sets.

Each dimension keeps the better of base and candidate independently,
so a rewrite that improves one dimension but weakens another keeps the
improvement without the regression.
"""

from __future__ import annotations

import logging

from cvarbiter.arbiter.schemas import DimensionRegression
from cvarbiter.document.schemas import IndicatorEntry, IndicatorSet

logger = logging.getLogger(__name__)


def _merge_entry(base: IndicatorEntry, candidate: IndicatorEntry) -> IndicatorEntry:
    # ties keep base
    winner, other = (
        (candidate, base) if candidate.score > base.score else (base, candidate)
    )
    return winner.model_copy(
        update={
            "evidence": winner.evidence or other.evidence,
            "suggestion": winner.suggestion or other.suggestion,
        }
    )


def merge_indicator_sets(
    base: IndicatorSet, candidate: IndicatorSet
) -> IndicatorSet:
    """Per-dimension max of ``base`` and ``candidate``.

    Base-only dimensions are kept. Candidate-only dimensions are added
    when the base is empty or when they score at least the base
    average, so ``merged.average() >= base.average()`` always holds.
    """
    by_id = {e.dimension_id: e for e in candidate.entries}
    merged: list[IndicatorEntry] = []
    improved = 0
    for entry in base.entries:
        other = by_id.pop(entry.dimension_id, None)
        if other is None:
            merged.append(entry)
            continue
        chosen = _merge_entry(entry, other)
        if chosen.score > entry.score:
            improved += 1
        merged.append(chosen)

    floor = base.average() if base.entries else None
    added = [e for e in by_id.values() if floor is None or e.score >= floor]
    skipped = len(by_id) - len(added)
    merged.extend(added)

    result = IndicatorSet(entries=tuple(merged))
    logger.debug(
        "event=indicator_merge base_avg=%.1f merged_avg=%.1f improved=%d "
        "added=%d skipped=%d",
        base.average(),
        result.average(),
        improved,
        len(added),
        skipped,
    )
    return result


def regressions(
    base: IndicatorSet, candidate: IndicatorSet
) -> list[DimensionRegression]:
    """Dimensions where ``candidate`` scores below ``base``, by id."""
    found: list[DimensionRegression] = []
    for entry in base.entries:
        other = candidate.get(entry.dimension_id)
        if other is not None and other.score < entry.score:
            found.append(
                DimensionRegression(
                    dimension_id=entry.dimension_id,
                    name=entry.name,
                    base_score=entry.score,
                    candidate_score=other.score,
                )
            )
    return found
