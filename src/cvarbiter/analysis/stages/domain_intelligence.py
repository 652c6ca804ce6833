"""Domain-Intelligence analyzer — outcome over output.

Five components of 20 points each: causal/result language, problem
framing, collaboration breadth, quantified outcome and beneficiary or
business impact.
"""

from __future__ import annotations

import re

from cvarbiter.analysis.lexicon import (
    BENEFICIARY_TERMS,
    CAUSAL_PHRASES,
    CROSS_FUNCTIONAL_TERMS,
    PROBLEM_TERMS,
    find_terms,
)
from cvarbiter.analysis.metrics import has_metric
from cvarbiter.analysis.schemas import StageResult
from cvarbiter.constants import MetricKind

COMPONENT_POINTS = 20
HALF_POINTS = 10

_TEAM_SIZE = re.compile(
    r"\bteams?\s+of\s+\d+"
    r"|(?<![\d,.])\d[\d,]*\+?\s+(?:[a-z-]+\s+)?"
    r"(?:engineer|developer|designer|member|people|person|employee"
    r"|report|analyst|hire|staff)s?\b",
    re.IGNORECASE,
)

_LEVELS: tuple[tuple[int, str], ...] = (
    (80, "Strong outcome framing"),
    (60, "Good outcome signals"),
    (40, "Some outcome framing"),
    (0, "Activity-only framing"),
)


def _level(score: int) -> str:
    for threshold, label in _LEVELS:
        if score >= threshold:
            return label
    return _LEVELS[-1][1]


def analyze_domain_intelligence(text: str) -> StageResult:
    score = 0
    found: list[str] = []
    missing: list[str] = []

    causal = find_terms(text, CAUSAL_PHRASES)
    if causal:
        score += COMPONENT_POINTS
        found.append(f"Causal language: {', '.join(causal)}")
    else:
        missing.append("causal or result language")

    problem = find_terms(text, PROBLEM_TERMS)
    if problem:
        score += COMPONENT_POINTS
        found.append(f"Problem framing: {', '.join(problem)}")
    else:
        missing.append("problem framing")

    team = _TEAM_SIZE.search(text)
    cross = find_terms(text, CROSS_FUNCTIONAL_TERMS)
    if team:
        score += HALF_POINTS
        found.append(f"Team scope: {team.group(0)}")
    if cross:
        score += HALF_POINTS
        found.append(f"Collaboration: {', '.join(cross)}")
    if not team and not cross:
        missing.append("collaboration breadth")

    if has_metric(
        text, MetricKind.PERCENTAGE, MetricKind.CURRENCY, MetricKind.MULTIPLIER
    ):
        score += COMPONENT_POINTS
        found.append("Quantified outcome")
    else:
        missing.append("quantified outcome")

    impact = find_terms(text, BENEFICIARY_TERMS)
    if impact:
        score += COMPONENT_POINTS
        found.append(f"Business impact: {', '.join(impact)}")
    else:
        missing.append("beneficiary or business impact")

    details = [f"{_level(score)} ({score}/100)", *found]
    if missing:
        details.append(f"Missing: {', '.join(missing)}")
    return StageResult(score=score, details=tuple(details))
