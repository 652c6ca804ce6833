"""Bullet-level analysis — lexical signals, metrics and the four stages."""

from cvarbiter.analysis.analyzer import STAGE_ANALYZERS, analyze
from cvarbiter.analysis.metrics import (
    MetricToken,
    extract_metrics,
    has_metric,
    missing_metrics,
)
from cvarbiter.analysis.schemas import AnalysisResult, StageResult

__all__ = [
    "STAGE_ANALYZERS",
    "AnalysisResult",
    "MetricToken",
    "StageResult",
    "analyze",
    "extract_metrics",
    "has_metric",
    "missing_metrics",
]
