"""Pydantic models for bullet-level analysis output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from cvarbiter.constants import STAGE_SCORE_MAX, STAGE_SCORE_MIN, Stage


class StageResult(BaseModel):
    """Score and human-readable findings from one analyzer."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=STAGE_SCORE_MIN, le=STAGE_SCORE_MAX)
    details: tuple[str, ...] = Field(min_length=1)


class AnalysisResult(BaseModel):
    """All four stage results plus the weighted total.

    Built by ``cvarbiter.analysis.analyzer.analyze``; ``total_score``
    is always derived from the stage scores.
    """

    model_config = ConfigDict(frozen=True)

    indicators: StageResult
    ats: StageResult
    recruiter_ux: StageResult
    domain_intelligence: StageResult
    total_score: int = Field(ge=STAGE_SCORE_MIN, le=STAGE_SCORE_MAX)

    def stage(self, stage: Stage) -> StageResult:
        return getattr(self, stage.value)

    def stage_scores(self) -> dict[str, int]:
        """Stage name → score, in stage declaration order."""
        return {s.value: self.stage(s).score for s in Stage}
