"""ATS-compatibility analyzer.

Starts from a base of 50 and applies one adjustment per check. Missing
quantification carries the largest single penalty.
"""

from __future__ import annotations

import re

from cvarbiter.analysis.lexicon import (
    ACTION_VERBS,
    INDUSTRY_TERMS,
    PASSIVE_OPENERS,
    find_terms,
    starts_with_any,
    words,
)
from cvarbiter.analysis.metrics import has_metric
from cvarbiter.analysis.schemas import StageResult
from cvarbiter.constants import (
    ATS_ACCEPTABLE_WORDS,
    ATS_BASE_SCORE,
    ATS_IDEAL_WORDS,
    STAGE_SCORE_MAX,
    STAGE_SCORE_MIN,
)

ACTION_VERB_BONUS = 15
PASSIVE_OPENER_PENALTY = -15
WEAK_OPENER_PENALTY = -5
METRIC_BONUS = 20
NO_METRIC_PENALTY = -25
GLYPH_PENALTY = -15
CLEAN_FORMAT_BONUS = 5
IDEAL_LENGTH_BONUS = 10
BAD_LENGTH_PENALTY = -10
TERMINOLOGY_BONUS = 10
SINGLE_TERM_BONUS = 5

# box drawing, tab runs, table pipes, braces/brackets, backslash, tilde, backtick
_FORBIDDEN_GLYPHS = re.compile(r"[\u2500-\u257f]|\t{3,}|[|{}<>\\~`]")
_LEADING_NOISE = re.compile(r"^[^\w]+")


def _opening_word(text: str) -> str:
    tokens = words(_LEADING_NOISE.sub("", text))
    return tokens[0].lower().strip(".,;:!?") if tokens else ""


def analyze_ats(text: str) -> StageResult:
    score = ATS_BASE_SCORE
    details: list[str] = []
    body = _LEADING_NOISE.sub("", text)

    if starts_with_any(body, PASSIVE_OPENERS):
        score += PASSIVE_OPENER_PENALTY
        details.append("Passive or generic opener")
    elif _opening_word(body) in ACTION_VERBS:
        score += ACTION_VERB_BONUS
        details.append("Opens with an action verb")
    else:
        score += WEAK_OPENER_PENALTY
        details.append("Does not open with an action verb")

    if has_metric(text):
        score += METRIC_BONUS
        details.append("Contains a quantifiable result")
    else:
        score += NO_METRIC_PENALTY
        details.append("No quantifiable result")

    if _FORBIDDEN_GLYPHS.search(text):
        score += GLYPH_PENALTY
        details.append("Contains characters ATS parsers mishandle")
    else:
        score += CLEAN_FORMAT_BONUS
        details.append("Clean plain-text formatting")

    count = len(words(text))
    ideal_low, ideal_high = ATS_IDEAL_WORDS
    ok_low, ok_high = ATS_ACCEPTABLE_WORDS
    if ideal_low <= count <= ideal_high:
        score += IDEAL_LENGTH_BONUS
        details.append(f"Ideal length ({count} words)")
    elif ok_low <= count <= ok_high:
        details.append(f"Acceptable length ({count} words)")
    else:
        score += BAD_LENGTH_PENALTY
        details.append(f"Length outside ATS range ({count} words)")

    terms = find_terms(text, INDUSTRY_TERMS)
    if len(terms) >= 2:
        score += TERMINOLOGY_BONUS
    elif terms:
        score += SINGLE_TERM_BONUS
    if terms:
        details.append(f"Industry terminology: {', '.join(terms)}")

    score = max(STAGE_SCORE_MIN, min(STAGE_SCORE_MAX, score))
    return StageResult(score=score, details=tuple(details))
