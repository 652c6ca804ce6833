"""Structural-format scorer — layout hygiene of a whole document.

Five 1–10 sub-scores, combined with the ``document.structural_format``
profile:
- structure (0.25): section headers, header case, contact info, length
- ATS format (0.25): red-flag glyphs, sections, contact info, bullets
- visual clarity (0.20): blank-line ratio, line length, bullets, sections
- content density (0.15): word count, metrics, action verbs
- formatting (0.15): bullet-style consistency, header case, sections
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from cvarbiter.analysis.lexicon import (
    ACTION_VERBS,
    SECTION_HEADERS,
    find_terms,
    words,
)
from cvarbiter.analysis.metrics import has_metric
from cvarbiter.constants import (
    DIMENSION_SCORE_MAX,
    DIMENSION_SCORE_MIN,
    DOCUMENT_DIGITS,
    WORDS_PER_PAGE,
    StructuralComponent,
)
from cvarbiter.scoring.aggregator import aggregate, round_half_up
from cvarbiter.scoring.weights import STRUCTURAL_PROFILE

_RED_FLAGS: tuple[re.Pattern[str], ...] = (
    re.compile("\u2022"),
    re.compile(r"\t{3,}"),
    re.compile(r"\|"),
    re.compile(r"[\u2500-\u257f]"),
    re.compile(r"^[ \t]*[A-Z]{2,}[ \t]*$", re.MULTILINE),
)
_BULLET = re.compile(r"^\s*([-•*▸►◆→]|\d+[.)]|[a-z][.)])\s", re.IGNORECASE)
_EMAIL = re.compile(r"(?<![\w.-])[\w.-]+@[\w.-]+\.\w+")
_PHONE = re.compile(r"(\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
_LINKEDIN = re.compile(r"linkedin\.com", re.IGNORECASE)
_HEADER_NOISE = re.compile(r"[:\-–—]")


@dataclass(frozen=True)
class LayoutFacts:
    """Raw layout measurements the sub-scores are computed from."""

    section_count: int
    bullet_count: int
    has_contact_info: bool
    has_metrics: bool
    has_action_verbs: bool
    average_line_length: float
    blank_line_ratio: float
    word_count: int
    estimated_pages: int
    proper_header_case: bool
    consistent_bullets: bool
    red_flags: int
    issues: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()


class StructuralReport(BaseModel):
    """Structural-format sub-scores (1–10) and their combination."""

    model_config = ConfigDict(frozen=True)

    structure: float
    ats_format: float
    visual_clarity: float
    content_density: float
    formatting: float
    score: float
    issues: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()


def _clamp(value: float) -> float:
    return max(DIMENSION_SCORE_MIN, min(DIMENSION_SCORE_MAX, value))


def _is_header(line: str) -> bool:
    clean = _HEADER_NOISE.sub("", line.strip().lower()).strip()
    return any(clean == h or clean.startswith(h + " ") for h in SECTION_HEADERS)


def measure_layout(text: str) -> LayoutFacts:
    lines = text.split("\n")
    non_empty = [line for line in lines if line.strip()]
    headers = [line.strip() for line in lines if _is_header(line)]
    bullet_styles: set[str] = set()
    bullet_count = 0
    for line in non_empty:
        match = _BULLET.match(line)
        if match:
            bullet_count += 1
            bullet_styles.add(re.sub(r"\d+", "N", match.group(1)))

    has_contact = bool(
        _EMAIL.search(text) or _PHONE.search(text) or _LINKEDIN.search(text)
    )
    has_metrics = has_metric(text)
    has_verbs = bool(find_terms(text, ACTION_VERBS))
    word_count = len(words(text))
    consistent = len(bullet_styles) <= 2

    issues: list[str] = []
    strengths: list[str] = []
    if len(headers) < 3:
        issues.append("Limited section organization; add clear section headers")
    else:
        strengths.append(f"Well organized with {len(headers)} distinct sections")
    if has_contact:
        strengths.append("Contact information is present and parseable")
    else:
        issues.append("Missing or hard to parse contact information")
    if bullet_count < 5:
        issues.append("Few bullet points; add more for readability")
    else:
        strengths.append(f"Good use of bullet points ({bullet_count} items)")
    if has_metrics:
        strengths.append("Includes quantifiable achievements")
    else:
        issues.append("No quantifiable achievements found")
    if has_verbs:
        strengths.append("Uses strong action verbs")
    else:
        issues.append("Few action verbs")
    if word_count < 200:
        issues.append("Document appears too brief")
    elif word_count > 1000:
        issues.append("Document may be too long; condense to 1-2 pages")
    if not consistent and bullet_count > 3:
        issues.append("Inconsistent bullet styles")

    return LayoutFacts(
        section_count=len(headers),
        bullet_count=bullet_count,
        has_contact_info=has_contact,
        has_metrics=has_metrics,
        has_action_verbs=has_verbs,
        average_line_length=(
            sum(len(line) for line in non_empty) / len(non_empty)
            if non_empty
            else 0.0
        ),
        blank_line_ratio=(len(lines) - len(non_empty)) / len(lines),
        word_count=word_count,
        estimated_pages=math.ceil(word_count / WORDS_PER_PAGE),
        proper_header_case=all(not h.isupper() for h in headers),
        consistent_bullets=consistent,
        red_flags=sum(len(p.findall(text)) for p in _RED_FLAGS),
        issues=tuple(issues),
        strengths=tuple(strengths),
    )


def _structure(facts: LayoutFacts) -> float:
    score = 5.0
    if facts.section_count >= 5:
        score += 2
    elif facts.section_count >= 3:
        score += 1
    elif facts.section_count < 2:
        score -= 2
    if facts.proper_header_case:
        score += 1
    if facts.has_contact_info:
        score += 1
    if 1 <= facts.estimated_pages <= 2:
        score += 1
    elif facts.estimated_pages > 3:
        score -= 1
    return _clamp(score)


def _ats_format(facts: LayoutFacts) -> float:
    score = 7.0
    if facts.red_flags > 10:
        score -= 3
    elif facts.red_flags > 5:
        score -= 2
    elif facts.red_flags > 0:
        score -= 1
    if facts.section_count > 0:
        score += 1
    if facts.has_contact_info:
        score += 1
    if facts.bullet_count > 0 and facts.consistent_bullets:
        score += 1
    return _clamp(score)


def _visual_clarity(facts: LayoutFacts) -> float:
    score = 5.0
    if 0.15 <= facts.blank_line_ratio <= 0.30:
        score += 2
    elif facts.blank_line_ratio < 0.10 or facts.blank_line_ratio > 0.40:
        score -= 1
    if 40 <= facts.average_line_length <= 80:
        score += 2
    elif facts.average_line_length < 30 or facts.average_line_length > 100:
        score -= 1
    if facts.bullet_count >= 10:
        score += 1
    elif facts.bullet_count >= 5:
        score += 0.5
    if facts.section_count >= 4:
        score += 1
    return _clamp(score)


def _content_density(facts: LayoutFacts) -> float:
    score = 5.0
    if 300 <= facts.word_count <= 800:
        score += 3
    elif 200 <= facts.word_count <= 1000:
        score += 1
    elif facts.word_count < 150:
        score -= 2
    elif facts.word_count > 1200:
        score -= 1
    if facts.has_metrics:
        score += 1
    if facts.has_action_verbs:
        score += 1
    return _clamp(score)


def _formatting(facts: LayoutFacts) -> float:
    score = 5.0
    if facts.consistent_bullets:
        score += 2
    elif facts.bullet_count > 3:
        score -= 1
    if facts.proper_header_case:
        score += 1
    if facts.section_count >= 4:
        score += 1
    if facts.bullet_count > 0:
        score += 1
    return _clamp(score)


def score_structural_format(text: str) -> StructuralReport:
    facts = measure_layout(text)
    parts = {
        StructuralComponent.STRUCTURE: _structure(facts),
        StructuralComponent.ATS_FORMAT: _ats_format(facts),
        StructuralComponent.VISUAL_CLARITY: _visual_clarity(facts),
        StructuralComponent.CONTENT_DENSITY: _content_density(facts),
        StructuralComponent.FORMATTING: _formatting(facts),
    }
    combined = aggregate(parts, STRUCTURAL_PROFILE, DOCUMENT_DIGITS)
    return StructuralReport(
        **{k.value: round_half_up(v, DOCUMENT_DIGITS) for k, v in parts.items()},
        score=combined.value,
        issues=facts.issues,
        strengths=facts.strengths,
    )
