"""Stage aggregation — weight profiles and the weighted-sum formula."""

from cvarbiter.scoring.aggregator import (
    Aggregate,
    aggregate,
    average,
    round_half_up,
    select_profile,
    weighted_sum,
)
from cvarbiter.scoring.weights import (
    BULLET_PROFILE,
    DOCUMENT_FALLBACK_PROFILE,
    DOCUMENT_PROFILE,
    DOCUMENT_TWO_STAGE_PROFILE,
    INDUSTRY_PROFILES,
    STRUCTURAL_PROFILE,
    WeightProfile,
    WeightProfileError,
    get_profile,
    industry_profile,
    list_industries,
    list_profiles,
    register_profile,
)

__all__ = [
    "BULLET_PROFILE",
    "DOCUMENT_FALLBACK_PROFILE",
    "DOCUMENT_PROFILE",
    "DOCUMENT_TWO_STAGE_PROFILE",
    "INDUSTRY_PROFILES",
    "STRUCTURAL_PROFILE",
    "Aggregate",
    "WeightProfile",
    "WeightProfileError",
    "aggregate",
    "average",
    "get_profile",
    "industry_profile",
    "list_industries",
    "list_profiles",
    "register_profile",
    "round_half_up",
    "select_profile",
    "weighted_sum",
]
