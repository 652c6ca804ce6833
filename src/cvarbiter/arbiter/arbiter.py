"""Unit arbiter — keep the original or adopt the rewrite.

Decision order:
1. Analyze both units with the same weight profile.
2. If any quantifiable token of the original is missing from the
   candidate, keep the original (metric protection).
3. Otherwise adopt the candidate only when its total is strictly higher.

When the original is kept, every stage it won is reported as a
``RejectionReason``, in stage declaration order. A protected decision
always carries at least one reason: when the candidate hid the dropped
token behind other signals and no stage fell, the loss is charged to the
indicator stage's metric credit.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cvarbiter.analysis.analyzer import analyze
from cvarbiter.analysis.metrics import (
    MetricToken,
    extract_metrics,
    missing_metrics,
)
from cvarbiter.analysis.schemas import AnalysisResult
from cvarbiter.analysis.stages.indicators import METRIC_POINTS
from cvarbiter.arbiter.schemas import ArbiterDecision, RejectionReason
from cvarbiter.constants import STAGE_LABELS, Stage, Winner
from cvarbiter.scoring.weights import BULLET_PROFILE, WeightProfile

logger = logging.getLogger(__name__)

METRIC_PROTECTION_LABEL = "Metric protection"


def protection_reason(
    original: str, dropped: Sequence[MetricToken]
) -> RejectionReason:
    """Metric credit of the original's tokens against the ones kept."""
    protected = {t.key for t in extract_metrics(original)}
    before = METRIC_POINTS * len(protected)
    after = before - METRIC_POINTS * len({t.key for t in dropped})
    return RejectionReason(
        stage=Stage.INDICATORS,
        stage_name=METRIC_PROTECTION_LABEL,
        original_score=before,
        tailored_score=after,
        drop=before - after,
        detail=f"Dropped {', '.join(t.text for t in dropped)}",
    )


def rejection_reasons(
    original: AnalysisResult, tailored: AnalysisResult
) -> tuple[RejectionReason, ...]:
    """One reason per stage where ``original`` scored strictly higher."""
    reasons: list[RejectionReason] = []
    for stage in Stage:
        before = original.stage(stage).score
        after = tailored.stage(stage).score
        if before > after:
            reasons.append(
                RejectionReason(
                    stage=stage,
                    stage_name=STAGE_LABELS[stage],
                    original_score=before,
                    tailored_score=after,
                    drop=before - after,
                )
            )
    return tuple(reasons)


def decide(
    original: str,
    candidate: str,
    original_analysis: AnalysisResult,
    tailored_analysis: AnalysisResult,
) -> ArbiterDecision:
    """Arbitrate from precomputed analyses."""
    delta = tailored_analysis.total_score - original_analysis.total_score
    missing = missing_metrics(original, candidate)
    dropped = tuple(t.text for t in missing)

    if dropped:
        winner = Winner.ORIGINAL
    elif delta > 0:
        winner = Winner.TAILORED
    else:
        winner = Winner.ORIGINAL

    reasons: tuple[RejectionReason, ...] = ()
    if winner == Winner.ORIGINAL:
        reasons = rejection_reasons(original_analysis, tailored_analysis)
    if dropped and not reasons:
        reasons = (protection_reason(original, missing),)

    decision = ArbiterDecision(
        bullet=candidate if winner == Winner.TAILORED else original,
        winner=winner,
        score_delta=delta,
        original_analysis=original_analysis,
        tailored_analysis=tailored_analysis,
        rejection_reasons=reasons,
        dropped_metrics=dropped,
        metric_protected=bool(dropped),
    )
    logger.debug(
        "event=arbiter_decision winner=%s delta=%d original=%d tailored=%d "
        "reasons=%d dropped_metrics=%d",
        winner,
        delta,
        original_analysis.total_score,
        tailored_analysis.total_score,
        len(reasons),
        len(dropped),
    )
    return decision


def arbitrate(
    original: str,
    candidate: str,
    *,
    profile: WeightProfile = BULLET_PROFILE,
) -> ArbiterDecision:
    """Choose between ``original`` and its rewrite ``candidate``."""
    return decide(
        original,
        candidate,
        analyze(original, profile),
        analyze(candidate, profile),
    )
