"""Recruiter-UX analyzer — the six-second skim.

Components (max 100): front-loading 30, length 25, run-on structure 20,
"so what?" 15, specificity 10. Independent of the ATS checks.
"""

from __future__ import annotations

import re

from cvarbiter.analysis.lexicon import (
    ACTION_VERBS,
    GENERIC_PHRASES,
    IMPACT_WORDS,
    OUTCOME_PHRASES,
    SUBORDINATE_MARKERS,
    count_term,
    find_terms,
    words,
)
from cvarbiter.analysis.metrics import has_metric
from cvarbiter.analysis.schemas import StageResult
from cvarbiter.constants import (
    STAGE_SCORE_MAX,
    UX_CONCISE_CHARS,
    UX_DENSE_WORDS,
    UX_MAX_CHARS,
    UX_OPENING_WORDS,
    UX_RUN_ON_MARKERS,
    UX_RUN_ON_WORDS,
    MetricKind,
)

_SEGMENT_BREAKS = re.compile(r"[,;:.!?()]|\s[-–—]\s|[–—]")
_DIGIT = re.compile(r"\d")


def _front_loading(text: str) -> tuple[int, str]:
    opening = " ".join(words(text)[:UX_OPENING_WORDS])
    has_verb = bool(find_terms(opening, ACTION_VERBS))
    has_impact = bool(find_terms(opening, IMPACT_WORDS)) or bool(
        _DIGIT.search(opening)
    )
    if has_verb and has_impact:
        return 30, "Front-loads action and impact"
    if has_verb:
        return 15, "Front-loads the action but not the impact"
    return 0, "Key information is not front-loaded"


def _length(text: str) -> tuple[int, str]:
    chars = len(text.strip())
    if chars == 0:
        return 0, "Empty text"
    if chars <= UX_CONCISE_CHARS:
        return 25, f"Concise ({chars} characters)"
    if chars <= UX_MAX_CHARS:
        return 15, f"Slightly long ({chars} characters)"
    return 0, f"Too long: over {UX_MAX_CHARS} characters ({chars})"


def _structure(text: str) -> tuple[int, str]:
    dense = False
    for segment in _SEGMENT_BREAKS.split(text):
        count = len(words(segment))
        markers = sum(count_term(segment, m) for m in SUBORDINATE_MARKERS)
        if markers >= UX_RUN_ON_MARKERS or count > UX_RUN_ON_WORDS:
            return 0, "Run-on sentence"
        if markers == UX_RUN_ON_MARKERS - 1 or count > UX_DENSE_WORDS:
            dense = True
    if dense:
        return 10, "Dense clause structure"
    return 20, "Scannable structure"


def _so_what(text: str) -> tuple[int, str]:
    causal = bool(find_terms(text, OUTCOME_PHRASES))
    outcome = has_metric(text, MetricKind.PERCENTAGE, MetricKind.CURRENCY)
    if causal and outcome:
        return 15, "Answers 'so what?' with a measured outcome"
    if causal or outcome:
        return 8, "Partially answers 'so what?'"
    return 0, "Does not answer 'so what?'"


def _specificity(text: str) -> tuple[int, str]:
    generic = find_terms(text, GENERIC_PHRASES)
    if generic:
        return 0, f"Generic phrasing: {', '.join(generic)}"
    return 10, "Specific phrasing"


def analyze_recruiter_ux(text: str) -> StageResult:
    parts = [
        _front_loading(text),
        _length(text),
        _structure(text),
        _so_what(text),
        _specificity(text),
    ]
    score = min(STAGE_SCORE_MAX, sum(points for points, _ in parts))
    return StageResult(score=score, details=tuple(d for _, d in parts))
