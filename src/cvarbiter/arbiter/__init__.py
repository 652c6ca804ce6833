"""Arbitration — unit arbiter, indicator merge and batch pipeline."""

from cvarbiter.arbiter.arbiter import (
    arbitrate,
    decide,
    protection_reason,
    rejection_reasons,
)
from cvarbiter.arbiter.batch import run_batch, run_batch_concurrent
from cvarbiter.arbiter.merger import merge_indicator_sets, regressions
from cvarbiter.arbiter.schemas import (
    ArbiterDecision,
    ArbiterResult,
    DimensionRegression,
    RejectionReason,
)

__all__ = [
    "ArbiterDecision",
    "ArbiterResult",
    "DimensionRegression",
    "RejectionReason",
    "arbitrate",
    "decide",
    "merge_indicator_sets",
    "protection_reason",
    "regressions",
    "rejection_reasons",
    "run_batch",
    "run_batch_concurrent",
]
