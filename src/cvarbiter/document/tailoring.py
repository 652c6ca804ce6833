"""Section-level tailoring: arbitrate each section of a rewritten document.

Sections are aligned by name through an injected matcher. A base
section with no counterpart is kept as is; a matched pair goes through
the unit arbiter; a candidate-only section longer than 50 characters is
added as a new section. Re-assembling the sections into a document is
the caller's job.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from cvarbiter.analysis.analyzer import analyze
from cvarbiter.arbiter.arbiter import arbitrate
from cvarbiter.arbiter.schemas import ArbiterDecision
from cvarbiter.collaborators.protocols import NameMatcher, Section, SectionSplitter
from cvarbiter.constants import NEW_SECTION_MIN_CHARS, Winner
from cvarbiter.scoring.weights import BULLET_PROFILE, WeightProfile

logger = logging.getLogger(__name__)

REASON_NOT_FOUND = "Section not found in tailored version; keeping original"
REASON_NEW = "New section added by tailoring"
REASON_EQUAL = "Scores equal; keeping original"
REASON_ORIGINAL_HIGHER = "Original version scored higher; keeping it"


class SectionDecision(BaseModel):
    """What happened to one section and why."""

    model_config = ConfigDict(frozen=True)

    section_name: str
    chosen: Winner
    base_score: int
    tailored_score: int
    improvement: int
    reason: str
    decision: ArbiterDecision | None = None


class TailoringResult(BaseModel):
    """Per-section decisions and the sections to assemble."""

    model_config = ConfigDict(frozen=True)

    decisions: tuple[SectionDecision, ...] = ()
    final_sections: tuple[Section, ...] = ()
    sections_improved: int = 0
    sections_kept_original: int = 0
    base_total_score: int = 0
    final_total_score: int = 0
    methodology_preserved: bool = True


def _reason(decision: ArbiterDecision) -> str:
    if decision.winner == Winner.TAILORED:
        return f"Tailored version scored higher (+{decision.score_delta} points)"
    if decision.metric_protected:
        return (
            "Tailored version dropped metrics: "
            + ", ".join(decision.dropped_metrics)
        )
    if decision.score_delta == 0:
        return REASON_EQUAL
    return REASON_ORIGINAL_HIGHER


def tailor_sections(
    base_sections: Sequence[Section],
    candidate_sections: Sequence[Section],
    names_match: NameMatcher,
    *,
    profile: WeightProfile = BULLET_PROFILE,
) -> TailoringResult:
    decisions: list[SectionDecision] = []
    final: list[Section] = []
    improved = 0
    kept = 0
    base_total = 0
    final_total = 0

    for base in base_sections:
        match = next(
            (c for c in candidate_sections if names_match(c.name, base.name)),
            None,
        )
        if match is None:
            score = analyze(base.text, profile).total_score
            base_total += score
            final_total += score
            kept += 1
            final.append(base)
            decisions.append(
                SectionDecision(
                    section_name=base.name,
                    chosen=Winner.ORIGINAL,
                    base_score=score,
                    tailored_score=0,
                    improvement=0,
                    reason=REASON_NOT_FOUND,
                )
            )
            continue

        decision = arbitrate(base.text, match.text, profile=profile)
        base_total += decision.original_analysis.total_score
        final_total += decision.winner_total
        if decision.winner == Winner.TAILORED:
            improved += 1
            final.append(Section(name=base.name, text=match.text))
        else:
            kept += 1
            final.append(base)
        decisions.append(
            SectionDecision(
                section_name=base.name,
                chosen=decision.winner,
                base_score=decision.original_analysis.total_score,
                tailored_score=decision.tailored_analysis.total_score,
                improvement=(
                    decision.score_delta
                    if decision.winner == Winner.TAILORED
                    else 0
                ),
                reason=_reason(decision),
                decision=decision,
            )
        )

    for candidate in candidate_sections:
        if any(names_match(b.name, candidate.name) for b in base_sections):
            continue
        if len(candidate.text) <= NEW_SECTION_MIN_CHARS:
            logger.debug(
                "event=new_section_skipped name=%s chars=%d",
                candidate.name,
                len(candidate.text),
            )
            continue
        score = analyze(candidate.text, profile).total_score
        final_total += score
        improved += 1
        final.append(candidate)
        decisions.append(
            SectionDecision(
                section_name=candidate.name,
                chosen=Winner.TAILORED,
                base_score=0,
                tailored_score=score,
                improvement=score,
                reason=REASON_NEW,
            )
        )

    logger.info(
        "event=tailoring_complete sections=%d improved=%d kept=%d "
        "base_total=%d final_total=%d",
        len(final),
        improved,
        kept,
        base_total,
        final_total,
    )
    return TailoringResult(
        decisions=tuple(decisions),
        final_sections=tuple(final),
        sections_improved=improved,
        sections_kept_original=kept,
        base_total_score=base_total,
        final_total_score=final_total,
        methodology_preserved=final_total >= base_total,
    )


def tailor_document(
    base_text: str,
    candidate_text: str,
    splitter: SectionSplitter,
    names_match: NameMatcher,
    *,
    profile: WeightProfile = BULLET_PROFILE,
) -> TailoringResult:
    """Split both documents with ``splitter`` and tailor section by section."""
    return tailor_sections(
        splitter.split(base_text),
        splitter.split(candidate_text),
        names_match,
        profile=profile,
    )
