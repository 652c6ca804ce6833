"""Weighted-sum aggregation with fallback and half-up rounding."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from cvarbiter.constants import UNAVAILABLE_SCORE
from cvarbiter.scoring.weights import WeightProfile, get_profile

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties going up: 2.25 → 2.3, 82.5 → 83."""
    factor = 10**digits
    # round(…, 9) drops binary noise such as 22.499999999999996
    return math.floor(round(value * factor, 9) + 0.5) / factor


def average(values: Iterable[float], digits: int = 1) -> float:
    """Arithmetic mean rounded half-up; 0.0 for no values."""
    items = list(values)
    if not items:
        return 0.0
    return round_half_up(math.fsum(items) / len(items), digits)


@dataclass(frozen=True)
class Aggregate:
    """Aggregated value and the profile that produced it."""

    value: float
    profile: str


def select_profile(
    scores: Mapping[str, float], profile: WeightProfile
) -> WeightProfile:
    """Return ``profile`` or its fallback when a weighted signal is unavailable.

    A dimension is unavailable when its score is the sentinel 0 (or
    absent). The fallback applies only when it does not weight the
    unavailable dimension itself.
    """
    if profile.fallback is None:
        return profile
    unavailable = {
        dim
        for dim, weight in profile.weights.items()
        if weight > 0 and scores.get(dim, UNAVAILABLE_SCORE) == UNAVAILABLE_SCORE
    }
    if not unavailable:
        return profile
    fallback = get_profile(profile.fallback)
    if unavailable.isdisjoint(fallback.weights):
        logger.debug(
            "event=profile_fallback primary=%s fallback=%s unavailable=%s",
            profile.name,
            fallback.name,
            ",".join(sorted(unavailable)),
        )
        return fallback
    return profile


def weighted_sum(scores: Mapping[str, float], profile: WeightProfile) -> float:
    """Unrounded Σ score × weight; missing dimensions count as 0."""
    return math.fsum(
        scores.get(dim, UNAVAILABLE_SCORE) * weight
        for dim, weight in profile.weights.items()
    )


def aggregate(
    scores: Mapping[str, float],
    profile: WeightProfile,
    digits: int = 0,
) -> Aggregate:
    """Combine ``scores`` with ``profile`` (or its fallback) and round."""
    chosen = select_profile(scores, profile)
    value = round_half_up(weighted_sum(scores, chosen), digits)
    return Aggregate(value=value, profile=chosen.name)
