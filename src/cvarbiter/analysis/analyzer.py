"""Run the four stage analyzers and aggregate their scores."""

from __future__ import annotations

import logging
from collections.abc import Callable

from cvarbiter.analysis.schemas import AnalysisResult, StageResult
from cvarbiter.analysis.stages import (
    analyze_ats,
    analyze_domain_intelligence,
    analyze_indicators,
    analyze_recruiter_ux,
)
from cvarbiter.constants import BULLET_DIGITS, Stage
from cvarbiter.scoring.aggregator import aggregate
from cvarbiter.scoring.weights import BULLET_PROFILE, WeightProfile

logger = logging.getLogger(__name__)

STAGE_ANALYZERS: dict[Stage, Callable[[str], StageResult]] = {
    Stage.INDICATORS: analyze_indicators,
    Stage.ATS: analyze_ats,
    Stage.RECRUITER_UX: analyze_recruiter_ux,
    Stage.DOMAIN_INTELLIGENCE: analyze_domain_intelligence,
}


def analyze(text: str, profile: WeightProfile = BULLET_PROFILE) -> AnalysisResult:
    """Score one text unit on every stage.

    Never raises for short, empty or odd input; such text simply
    scores low.
    """
    results = {stage.value: run(text) for stage, run in STAGE_ANALYZERS.items()}
    scores = {name: result.score for name, result in results.items()}
    total = aggregate(scores, profile, BULLET_DIGITS)
    logger.debug(
        "event=analysis_complete total=%d profile=%s chars=%d",
        int(total.value),
        total.profile,
        len(text),
    )
    return AnalysisResult(**results, total_score=int(total.value))
