"""Keyword match between a document and a job description."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from cvarbiter.constants import KEYWORD_LIMIT, KEYWORD_MIN_CHARS, UNAVAILABLE_SCORE
from cvarbiter.scoring.aggregator import round_half_up

STOP_WORDS = frozenset({
    "the", "and", "for", "with", "that", "this", "from", "have", "will",
    "are", "you", "our", "your", "can", "all", "been", "would", "there",
    "their", "what", "about", "which", "when", "make", "like", "time",
    "just", "know", "take", "come", "could", "work", "year", "over",
    "such", "into", "other", "than", "then", "now", "look", "only",
    "new", "more", "also", "after", "use", "well", "way", "want",
    "because", "any", "these", "give", "day", "most", "ability", "able",
})

_SPLIT = re.compile(r"[\s,;:.!?()\[\]{}'\"]+")

# (minimum match percentage, score), highest band first
_BANDS: tuple[tuple[int, int], ...] = (
    (80, 9),
    (70, 8),
    (60, 7),
    (50, 6),
    (40, 5),
    (30, 4),
    (20, 3),
)
_FLOOR_SCORE = 2


class KeywordReport(BaseModel):
    """Job-description keywords found in and missing from a document."""

    model_config = ConfigDict(frozen=True)

    score: int
    match_percentage: int
    keywords_found: tuple[str, ...] = ()
    keywords_missing: tuple[str, ...] = ()

    @property
    def total_keywords(self) -> int:
        return len(self.keywords_found) + len(self.keywords_missing)


def extract_keywords(job_description: str) -> list[str]:
    """Distinct significant words of ``job_description``, in order."""
    significant = (
        w
        for w in _SPLIT.split(job_description.lower())
        if len(w) >= KEYWORD_MIN_CHARS and w not in STOP_WORDS
    )
    return list(dict.fromkeys(significant))[:KEYWORD_LIMIT]


def band_score(match_percentage: int) -> int:
    for threshold, score in _BANDS:
        if match_percentage >= threshold:
            return score
    return _FLOOR_SCORE


def score_keyword_match(text: str, job_description: str | None) -> KeywordReport:
    """Band the share of JD keywords present in ``text`` to 2..9.

    Without a job description (or one with no significant words) the
    score is the unavailable sentinel 0.
    """
    keywords = extract_keywords(job_description or "")
    if not keywords:
        return KeywordReport(score=UNAVAILABLE_SCORE, match_percentage=0)
    lowered = text.lower()
    found = [k for k in keywords if k in lowered]
    missing = [k for k in keywords if k not in lowered]
    percentage = int(round_half_up(100 * len(found) / len(keywords)))
    return KeywordReport(
        score=band_score(percentage),
        match_percentage=percentage,
        keywords_found=tuple(found),
        keywords_missing=tuple(missing),
    )
