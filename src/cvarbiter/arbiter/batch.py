"""Batch pipeline — arbitrate positional (original, candidate) pairs.

Pairing rules:
- a missing candidate means "no rewrite": the original is compared with
  itself (delta 0, original wins, no reasons);
- an extra candidate is a new unit: it is compared with an empty
  original, always kept, and does not count toward the original total.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from cvarbiter.analysis.analyzer import analyze
from cvarbiter.arbiter.arbiter import decide
from cvarbiter.arbiter.schemas import ArbiterDecision, ArbiterResult
from cvarbiter.constants import BATCH_MAX_CONCURRENCY, Winner
from cvarbiter.scoring.weights import BULLET_PROFILE, WeightProfile

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = BATCH_MAX_CONCURRENCY


@dataclass(frozen=True)
class _PairOutcome:
    decision: ArbiterDecision
    has_original: bool


def _arbitrate_pair(
    index: int,
    originals: Sequence[str],
    candidates: Sequence[str],
    profile: WeightProfile,
) -> _PairOutcome:
    if index >= len(originals):
        candidate = candidates[index]
        empty = analyze("", profile)
        tailored = analyze(candidate, profile)
        decision = ArbiterDecision(
            bullet=candidate,
            winner=Winner.TAILORED,
            score_delta=tailored.total_score - empty.total_score,
            original_analysis=empty,
            tailored_analysis=tailored,
        )
        return _PairOutcome(decision=decision, has_original=False)

    original = originals[index]
    original_analysis = analyze(original, profile)
    if index >= len(candidates):
        decision = decide(original, original, original_analysis, original_analysis)
    else:
        candidate = candidates[index]
        decision = decide(
            original, candidate, original_analysis, analyze(candidate, profile)
        )
    return _PairOutcome(decision=decision, has_original=True)


def _summarize(outcomes: Sequence[_PairOutcome]) -> ArbiterResult:
    original_total = sum(
        o.decision.original_analysis.total_score
        for o in outcomes
        if o.has_original
    )
    optimised_total = sum(o.decision.winner_total for o in outcomes)
    result = ArbiterResult(
        decisions=tuple(o.decision for o in outcomes),
        optimised_bullets=tuple(o.decision.bullet for o in outcomes),
        original_total_score=original_total,
        optimised_total_score=optimised_total,
        methodology_preserved=optimised_total >= original_total,
    )
    logger.info(
        "event=batch_complete units=%d improved=%d original_total=%d "
        "optimised_total=%d preserved=%s",
        len(outcomes),
        result.improved_count,
        original_total,
        optimised_total,
        result.methodology_preserved,
    )
    return result


def run_batch(
    originals: Sequence[str],
    candidates: Sequence[str],
    *,
    profile: WeightProfile = BULLET_PROFILE,
) -> ArbiterResult:
    """Arbitrate every position and aggregate the totals."""
    size = max(len(originals), len(candidates))
    outcomes = [
        _arbitrate_pair(i, originals, candidates, profile) for i in range(size)
    ]
    return _summarize(outcomes)


async def run_batch_concurrent(
    originals: Sequence[str],
    candidates: Sequence[str],
    *,
    profile: WeightProfile = BULLET_PROFILE,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> ArbiterResult:
    """Same result as ``run_batch``, with pairs scored in worker threads.

    Output order follows input order regardless of completion order.
    """
    if max_concurrency < 1:
        raise ValueError("max_concurrency must be at least 1")
    size = max(len(originals), len(candidates))
    semaphore = asyncio.Semaphore(max_concurrency)

    async def _run_pair(index: int) -> _PairOutcome:
        async with semaphore:
            return await asyncio.to_thread(
                _arbitrate_pair, index, originals, candidates, profile
            )

    outcomes = await asyncio.gather(*(_run_pair(i) for i in range(size)))
    return _summarize(outcomes)
