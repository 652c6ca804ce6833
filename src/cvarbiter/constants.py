"""Shared constants — single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
StrEnum members are str-compatible, so downstream code (JSON payloads,
log lines, CLI output) works unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class Stage(StrEnum):
    """Bullet-level analysis stages, in declaration order.

    Declaration order is the order rejection reasons are reported in.
    """

    INDICATORS = "indicators"
    ATS = "ats"
    RECRUITER_UX = "recruiter_ux"
    DOMAIN_INTELLIGENCE = "domain_intelligence"


class Winner(StrEnum):
    """Which side of an arbitration was kept."""

    ORIGINAL = "original"
    TAILORED = "tailored"


class DocumentDimension(StrEnum):
    """Document-level score components combined by the aggregator."""

    CORE = "core"
    KEYWORD_MATCH = "keyword_match"
    STRUCTURAL_FORMAT = "structural_format"


class StructuralComponent(StrEnum):
    """Sub-scores of the structural-format scorer."""

    STRUCTURE = "structure"
    ATS_FORMAT = "ats_format"
    VISUAL_CLARITY = "visual_clarity"
    CONTENT_DENSITY = "content_density"
    FORMATTING = "formatting"


class MetricKind(StrEnum):
    """Classes of quantifiable tokens protected by the arbiter."""

    PERCENTAGE = "percentage"
    CURRENCY = "currency"
    MULTIPLIER = "multiplier"
    COUNT = "count"


# ── Stage Labels (user-facing) ───────────────────────────

STAGE_LABELS: dict[str, str] = {
    Stage.INDICATORS: "Cold Indicators",
    Stage.ATS: "ATS Compatibility",
    Stage.RECRUITER_UX: "Recruiter UX",
    Stage.DOMAIN_INTELLIGENCE: "Domain Intelligence",
}

# ── Competency Dimensions ────────────────────────────────

# dimension_id → (weight-profile key, display name)
COMPETENCY_DIMENSIONS: dict[int, tuple[str, str]] = {
    1: ("job_knowledge", "Job Knowledge"),
    2: ("problem_solving", "Problem-Solving"),
    3: ("communication", "Communication"),
    4: ("social_skills", "Social Skills"),
    5: ("integrity", "Integrity"),
    6: ("adaptability", "Adaptability"),
    7: ("learning_agility", "Learning Agility"),
    8: ("leadership", "Leadership"),
    9: ("creativity", "Creativity"),
    10: ("motivation", "Motivation"),
}

# ── Score Bounds ─────────────────────────────────────────

STAGE_SCORE_MIN = 0
STAGE_SCORE_MAX = 100
DIMENSION_SCORE_MIN = 1.0
DIMENSION_SCORE_MAX = 10.0
NEUTRAL_DIMENSION_SCORE = 5.0  # empty indicator set

# ── Aggregation ──────────────────────────────────────────

WEIGHT_SUM_TOLERANCE = 1e-9
UNAVAILABLE_SCORE = 0  # sentinel: dimension could not be computed
BULLET_DIGITS = 0
DOCUMENT_DIGITS = 1

# ── Profile Names ────────────────────────────────────────

BULLET_PROFILE_NAME = "bullet.four_stage"
DOCUMENT_PROFILE_NAME = "document.holy_trinity"
DOCUMENT_FALLBACK_PROFILE_NAME = "document.core_structural"
DOCUMENT_TWO_STAGE_PROFILE_NAME = "document.two_stage"
STRUCTURAL_PROFILE_NAME = "document.structural_format"
INDUSTRY_PROFILE_PREFIX = "industry."

# ── Recruiter UX Thresholds ──────────────────────────────

UX_CONCISE_CHARS = 150
UX_MAX_CHARS = 220
UX_OPENING_WORDS = 8
UX_RUN_ON_WORDS = 25
UX_DENSE_WORDS = 18
UX_RUN_ON_MARKERS = 3

# ── ATS Thresholds ───────────────────────────────────────

ATS_BASE_SCORE = 50
ATS_IDEAL_WORDS = (8, 35)
ATS_ACCEPTABLE_WORDS = (5, 50)

# ── Document Scoring ─────────────────────────────────────

NEW_SECTION_MIN_CHARS = 50
KEYWORD_LIMIT = 20
KEYWORD_MIN_CHARS = 3
WORDS_PER_PAGE = 500

# ── Generation Retry ─────────────────────────────────────

RETRY_MAX_ATTEMPTS = 3
RETRY_INITIAL_WAIT = 1.0  # seconds
RETRY_MAX_WAIT = 8.0
GENERATION_MAX_CONCURRENCY = 4
BATCH_MAX_CONCURRENCY = 4

# ── Validation ───────────────────────────────────────────

DEFAULT_MIN_UNIT_LENGTH = 20
ERROR_TRUNCATION_CHARS = 200
