"""Document-level scoring and section tailoring."""

from cvarbiter.document.indicators import score_indicator_dimensions
from cvarbiter.document.keywords import (
    KeywordReport,
    extract_keywords,
    score_keyword_match,
)
from cvarbiter.document.schemas import DocumentScore, IndicatorEntry, IndicatorSet
from cvarbiter.document.scoring import (
    DocumentReport,
    analyze_document,
    combine_document_score,
    score_document,
)
from cvarbiter.document.structure import StructuralReport, score_structural_format
from cvarbiter.document.tailoring import (
    SectionDecision,
    TailoringResult,
    tailor_document,
    tailor_sections,
)

__all__ = [
    "DocumentReport",
    "DocumentScore",
    "IndicatorEntry",
    "IndicatorSet",
    "KeywordReport",
    "SectionDecision",
    "StructuralReport",
    "TailoringResult",
    "analyze_document",
    "combine_document_score",
    "extract_keywords",
    "score_document",
    "score_indicator_dimensions",
    "score_keyword_match",
    "score_structural_format",
    "tailor_document",
    "tailor_sections",
]
