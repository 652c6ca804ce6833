"""Named weight profiles for the stage and document aggregators.

Each profile maps a dimension name to a weight. Profiles are validated
when registered, so a malformed built-in profile fails at import time
instead of on the first scoring call.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from cvarbiter.constants import (
    BULLET_PROFILE_NAME,
    COMPETENCY_DIMENSIONS,
    DOCUMENT_FALLBACK_PROFILE_NAME,
    DOCUMENT_PROFILE_NAME,
    DOCUMENT_TWO_STAGE_PROFILE_NAME,
    INDUSTRY_PROFILE_PREFIX,
    STRUCTURAL_PROFILE_NAME,
    WEIGHT_SUM_TOLERANCE,
    DocumentDimension,
    Stage,
    StructuralComponent,
)

logger = logging.getLogger(__name__)


class WeightProfileError(ValueError):
    """Raised when a weight profile violates the weighting contract."""


@dataclass(frozen=True)
class WeightProfile:
    """Validated mapping of dimension name to weight."""

    name: str
    weights: Mapping[str, float]
    fallback: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        frozen = {str(k): float(v) for k, v in self.weights.items()}
        object.__setattr__(self, "weights", MappingProxyType(frozen))

    @property
    def dimensions(self) -> tuple[str, ...]:
        return tuple(self.weights)

    def weight(self, dimension: str) -> float:
        return self.weights.get(dimension, 0.0)


_REGISTRY: dict[str, WeightProfile] = {}


def validate_profile(profile: WeightProfile) -> None:
    """Check the weighting contract, raising ``WeightProfileError``."""
    if not profile.name:
        raise WeightProfileError("weight profile must have a name")
    if not profile.weights:
        raise WeightProfileError(f"profile {profile.name!r} has no weights")
    for dimension, weight in profile.weights.items():
        if not 0.0 <= weight <= 1.0:
            raise WeightProfileError(
                f"profile {profile.name!r}: weight for {dimension!r} "
                f"must lie in [0, 1], got {weight}"
            )
    total = math.fsum(profile.weights.values())
    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        raise WeightProfileError(
            f"profile {profile.name!r}: weights sum to {total!r}, expected 1.0"
        )
    if profile.fallback is not None:
        fallback = _REGISTRY.get(profile.fallback)
        if fallback is None:
            raise WeightProfileError(
                f"profile {profile.name!r}: fallback {profile.fallback!r} "
                "is not registered"
            )
        extra = set(fallback.weights) - set(profile.weights)
        if extra:
            raise WeightProfileError(
                f"profile {profile.name!r}: fallback {profile.fallback!r} "
                f"weights unknown dimensions {sorted(extra)}"
            )


def register_profile(profile: WeightProfile) -> WeightProfile:
    """Validate and register ``profile``; re-registering a name replaces it."""
    validate_profile(profile)
    if profile.name in _REGISTRY:
        logger.warning("event=profile_replaced name=%s", profile.name)
    _REGISTRY[profile.name] = profile
    return profile


def get_profile(name: str) -> WeightProfile:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(
            f"unknown weight profile {name!r}; known profiles: "
            f"{', '.join(list_profiles())}"
        ) from None


def list_profiles() -> list[str]:
    return sorted(_REGISTRY)


def industry_profile(industry: str) -> WeightProfile:
    """Look up ``industry.<industry>`` (case-insensitive)."""
    return get_profile(f"{INDUSTRY_PROFILE_PREFIX}{industry.strip().lower()}")


def list_industries() -> list[str]:
    prefix = INDUSTRY_PROFILE_PREFIX
    return [n.removeprefix(prefix) for n in list_profiles() if n.startswith(prefix)]


# ── Built-in Profiles ────────────────────────────────────

BULLET_PROFILE = register_profile(
    WeightProfile(
        name=BULLET_PROFILE_NAME,
        weights={
            Stage.INDICATORS: 0.20,
            Stage.ATS: 0.30,
            Stage.RECRUITER_UX: 0.20,
            Stage.DOMAIN_INTELLIGENCE: 0.30,
        },
        description="Four-stage bullet formula.",
    )
)

DOCUMENT_FALLBACK_PROFILE = register_profile(
    WeightProfile(
        name=DOCUMENT_FALLBACK_PROFILE_NAME,
        weights={
            DocumentDimension.CORE: 0.70,
            DocumentDimension.STRUCTURAL_FORMAT: 0.30,
        },
        description="Core and structure only, used without a job description.",
    )
)

DOCUMENT_PROFILE = register_profile(
    WeightProfile(
        name=DOCUMENT_PROFILE_NAME,
        weights={
            DocumentDimension.CORE: 0.50,
            DocumentDimension.KEYWORD_MATCH: 0.30,
            DocumentDimension.STRUCTURAL_FORMAT: 0.20,
        },
        fallback=DOCUMENT_FALLBACK_PROFILE_NAME,
        description="Core, keyword match and structural format.",
    )
)

DOCUMENT_TWO_STAGE_PROFILE = register_profile(
    WeightProfile(
        name=DOCUMENT_TWO_STAGE_PROFILE_NAME,
        weights={
            DocumentDimension.CORE: 0.70,
            DocumentDimension.KEYWORD_MATCH: 0.30,
        },
        description="Earlier two-stage document formula, kept for comparison.",
    )
)

STRUCTURAL_PROFILE = register_profile(
    WeightProfile(
        name=STRUCTURAL_PROFILE_NAME,
        weights={
            StructuralComponent.STRUCTURE: 0.25,
            StructuralComponent.ATS_FORMAT: 0.25,
            StructuralComponent.VISUAL_CLARITY: 0.20,
            StructuralComponent.CONTENT_DENSITY: 0.15,
            StructuralComponent.FORMATTING: 0.15,
        },
        description="Sub-score weighting of the structural-format scorer.",
    )
)

# industry → {dimension_id: weight}
_INDUSTRY_WEIGHTS: dict[str, dict[int, float]] = {
    "technology": {
        1: 0.18, 2: 0.16, 7: 0.12, 8: 0.11, 9: 0.10,
        3: 0.09, 6: 0.08, 4: 0.07, 10: 0.06, 5: 0.03,
    },
    "healthcare": {
        4: 0.17, 5: 0.16, 6: 0.14, 1: 0.13, 3: 0.12,
        2: 0.09, 10: 0.07, 7: 0.05, 8: 0.04, 9: 0.03,
    },
    "education": {
        3: 0.18, 9: 0.14, 7: 0.13, 4: 0.13, 6: 0.12,
        8: 0.10, 1: 0.08, 5: 0.05, 2: 0.04, 10: 0.03,
    },
    "retail": {
        4: 0.19, 10: 0.16, 8: 0.14, 6: 0.13, 3: 0.11,
        2: 0.09, 1: 0.07, 5: 0.05, 7: 0.04, 9: 0.02,
    },
    "finance": {
        5: 0.18, 2: 0.17, 1: 0.16, 3: 0.12, 6: 0.10,
        7: 0.08, 4: 0.07, 8: 0.06, 10: 0.04, 9: 0.02,
    },
    "generic": {dimension_id: 0.10 for dimension_id in COMPETENCY_DIMENSIONS},
}

INDUSTRY_PROFILES: dict[str, WeightProfile] = {
    industry: register_profile(
        WeightProfile(
            name=f"{INDUSTRY_PROFILE_PREFIX}{industry}",
            weights={
                COMPETENCY_DIMENSIONS[dimension_id][0]: weight
                for dimension_id, weight in sorted(by_id.items())
            },
            description=f"Competency weighting for {industry} roles.",
        )
    )
    for industry, by_id in _INDUSTRY_WEIGHTS.items()
}
