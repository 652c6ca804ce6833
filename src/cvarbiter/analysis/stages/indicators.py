"""Cold-Indicator analyzer — lexical competency signals.

Scoring:
- 8 points per competency dimension with at least one hit (diversity)
- 2 points per extra distinct term within matched dimensions (max 20)
- 15 points per distinct quantifiable token (max 30)
- 10 points when a role verb is present
- 5 points per named tool or framework (max 10)

Capped at 100. Adding a matched dimension never lowers the score.
"""

from __future__ import annotations

from cvarbiter.analysis.lexicon import (
    ACTION_VERBS,
    COMPETENCY_TERMS,
    find_terms,
    named_tools,
)
from cvarbiter.analysis.metrics import extract_metrics
from cvarbiter.analysis.schemas import StageResult
from cvarbiter.constants import COMPETENCY_DIMENSIONS, STAGE_SCORE_MAX

DIMENSION_POINTS = 8
EXTRA_TERM_POINTS = 2
EXTRA_TERM_CAP = 20
METRIC_POINTS = 15
METRIC_CAP = 30
ROLE_VERB_POINTS = 10
TOOL_POINTS = 5
TOOL_CAP = 10

NO_SIGNALS = "No strong signals detected"


def competency_hits(text: str) -> dict[int, list[str]]:
    """dimension_id → distinct terms found, for dimensions with hits."""
    hits: dict[int, list[str]] = {}
    for dimension_id, terms in COMPETENCY_TERMS.items():
        found = find_terms(text, terms)
        if found:
            hits[dimension_id] = found
    return hits


def analyze_indicators(text: str) -> StageResult:
    hits = competency_hits(text)
    extra_terms = sum(len(found) - 1 for found in hits.values())

    metrics = {t.key: t for t in extract_metrics(text)}
    verbs = find_terms(text, ACTION_VERBS)
    tools = named_tools(text)

    score = DIMENSION_POINTS * len(hits)
    score += min(EXTRA_TERM_CAP, EXTRA_TERM_POINTS * extra_terms)
    score += min(METRIC_CAP, METRIC_POINTS * len(metrics))
    score += ROLE_VERB_POINTS if verbs else 0
    score += min(TOOL_CAP, TOOL_POINTS * len(tools))

    details: list[str] = [
        f"{COMPETENCY_DIMENSIONS[dimension_id][1]}: {', '.join(found)}"
        for dimension_id, found in hits.items()
    ]
    if metrics:
        details.append(
            "Quantified metrics: "
            + ", ".join(t.text for t in metrics.values())
        )
    if verbs:
        details.append(f"Role verb: {verbs[0]}")
    if tools:
        details.append(f"Named tools: {', '.join(tools)}")
    if not details:
        details.append(NO_SIGNALS)

    return StageResult(score=min(STAGE_SCORE_MAX, score), details=tuple(details))
