"""Combine core, keyword-match and structural scores for a document."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from cvarbiter.constants import DOCUMENT_DIGITS, DocumentDimension
from cvarbiter.document.indicators import score_indicator_dimensions
from cvarbiter.document.keywords import KeywordReport, score_keyword_match
from cvarbiter.document.schemas import DocumentScore, IndicatorSet
from cvarbiter.document.structure import StructuralReport, score_structural_format
from cvarbiter.scoring.aggregator import aggregate
from cvarbiter.scoring.weights import DOCUMENT_PROFILE, WeightProfile, industry_profile

logger = logging.getLogger(__name__)


class DocumentReport(BaseModel):
    """A document score together with the reports it was built from."""

    model_config = ConfigDict(frozen=True)

    score: DocumentScore
    indicators: IndicatorSet
    structure: StructuralReport
    keywords: KeywordReport
    industry: str | None = None


def combine_document_score(
    core: float,
    structural_format: float,
    keyword_match: float = 0.0,
    *,
    profile: WeightProfile = DOCUMENT_PROFILE,
) -> DocumentScore:
    """Weight the three components; keyword match 0 triggers the fallback."""
    result = aggregate(
        {
            DocumentDimension.CORE: core,
            DocumentDimension.KEYWORD_MATCH: keyword_match,
            DocumentDimension.STRUCTURAL_FORMAT: structural_format,
        },
        profile,
        DOCUMENT_DIGITS,
    )
    return DocumentScore(
        overall=result.value,
        core=core,
        structural_format=structural_format,
        keyword_match=keyword_match,
        profile=result.profile,
    )


def core_score(indicators: IndicatorSet, industry: str | None = None) -> float:
    """Plain average, or the industry-weighted average when ``industry`` is set."""
    if industry is None:
        return indicators.average()
    return indicators.weighted_average(industry_profile(industry))


def analyze_document(
    text: str,
    job_description: str | None = None,
    *,
    industry: str | None = None,
    profile: WeightProfile = DOCUMENT_PROFILE,
) -> DocumentReport:
    indicators = score_indicator_dimensions(text)
    structure = score_structural_format(text)
    keywords = score_keyword_match(text, job_description)
    score = combine_document_score(
        core_score(indicators, industry),
        structure.score,
        keywords.score,
        profile=profile,
    )
    logger.debug(
        "event=document_scored overall=%.1f core=%.1f structure=%.1f "
        "keywords=%d profile=%s industry=%s",
        score.overall,
        score.core,
        score.structural_format,
        keywords.score,
        score.profile,
        industry,
    )
    return DocumentReport(
        score=score,
        indicators=indicators,
        structure=structure,
        keywords=keywords,
        industry=industry,
    )


def score_document(
    text: str,
    job_description: str | None = None,
    *,
    industry: str | None = None,
) -> DocumentScore:
    return analyze_document(text, job_description, industry=industry).score
