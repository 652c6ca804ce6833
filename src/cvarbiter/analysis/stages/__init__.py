"""Signal analyzers — one deterministic heuristic per stage."""

from cvarbiter.analysis.stages.ats import analyze_ats
from cvarbiter.analysis.stages.domain_intelligence import (
    analyze_domain_intelligence,
)
from cvarbiter.analysis.stages.indicators import (
    analyze_indicators,
    competency_hits,
)
from cvarbiter.analysis.stages.recruiter_ux import analyze_recruiter_ux

__all__ = [
    "analyze_ats",
    "analyze_domain_intelligence",
    "analyze_indicators",
    "analyze_recruiter_ux",
    "competency_hits",
]
