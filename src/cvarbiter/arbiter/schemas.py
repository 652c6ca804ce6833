"""Pydantic models for arbitration output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cvarbiter.analysis.schemas import AnalysisResult
from cvarbiter.constants import Stage, Winner


class RejectionReason(BaseModel):
    """One stage where the original outscored the candidate.

    A metric-protection reason is charged to the indicator stage's metric
    credit and names the dropped tokens in ``detail``.
    """

    model_config = ConfigDict(frozen=True)

    stage: Stage
    stage_name: str
    original_score: int
    tailored_score: int
    drop: int = Field(gt=0)
    detail: str = ""

    @model_validator(mode="after")
    def _check_drop(self) -> RejectionReason:
        if self.drop != self.original_score - self.tailored_score:
            raise ValueError(
                "drop must equal original_score - tailored_score"
            )
        return self


class DimensionRegression(BaseModel):
    """A competency dimension the candidate scored lower on."""

    model_config = ConfigDict(frozen=True)

    dimension_id: int
    name: str
    base_score: float
    candidate_score: float

    @property
    def drop(self) -> float:
        return self.base_score - self.candidate_score


class ArbiterDecision(BaseModel):
    """Outcome of arbitrating one unit, with the evidence for it."""

    model_config = ConfigDict(frozen=True)

    bullet: str
    winner: Winner
    score_delta: int
    original_analysis: AnalysisResult
    tailored_analysis: AnalysisResult
    rejection_reasons: tuple[RejectionReason, ...] = ()
    dropped_metrics: tuple[str, ...] = ()
    metric_protected: bool = False

    @model_validator(mode="after")
    def _check_consistency(self) -> ArbiterDecision:
        if self.metric_protected and self.winner != Winner.ORIGINAL:
            raise ValueError("metric-protected decisions keep the original")
        if self.winner == Winner.TAILORED and self.rejection_reasons:
            raise ValueError("a tailored winner carries no rejection reasons")
        return self

    @property
    def winner_total(self) -> int:
        if self.winner == Winner.TAILORED:
            return self.tailored_analysis.total_score
        return self.original_analysis.total_score


class ArbiterResult(BaseModel):
    """Batch outcome across all units."""

    model_config = ConfigDict(frozen=True)

    decisions: tuple[ArbiterDecision, ...] = ()
    optimised_bullets: tuple[str, ...] = ()
    original_total_score: int = 0
    optimised_total_score: int = 0
    methodology_preserved: bool = True

    @model_validator(mode="after")
    def _check_preserved(self) -> ArbiterResult:
        expected = self.optimised_total_score >= self.original_total_score
        if self.methodology_preserved != expected:
            raise ValueError(
                "methodology_preserved must equal "
                "optimised_total_score >= original_total_score"
            )
        return self

    @property
    def improved_count(self) -> int:
        return sum(1 for d in self.decisions if d.winner == Winner.TAILORED)
