"""Tests for document score combination."""

from __future__ import annotations

import pytest

from cvarbiter.constants import DOCUMENT_FALLBACK_PROFILE_NAME, DOCUMENT_PROFILE_NAME
from cvarbiter.document.schemas import IndicatorEntry, IndicatorSet
from cvarbiter.document.scoring import (
    analyze_document,
    combine_document_score,
    core_score,
    score_document,
)
from cvarbiter.scoring.weights import DOCUMENT_TWO_STAGE_PROFILE


class TestCombine:
    def test_three_components(self) -> None:
        score = combine_document_score(7.0, 8.0, 6.0)
        assert score.overall == 6.9
        assert score.profile == DOCUMENT_PROFILE_NAME

    def test_without_keywords_uses_fallback(self) -> None:
        score = combine_document_score(7.0, 8.0)
        assert score.overall == 7.3
        assert score.keyword_match == 0.0
        assert score.profile == DOCUMENT_FALLBACK_PROFILE_NAME

    def test_alternate_profile(self) -> None:
        score = combine_document_score(
            7.0, 8.0, 6.0, profile=DOCUMENT_TWO_STAGE_PROFILE
        )
        assert score.overall == 6.7


class TestCoreScore:
    def _indicators(self) -> IndicatorSet:
        return IndicatorSet(
            entries=(
                IndicatorEntry(dimension_id=1, name="Job Knowledge", score=10),
                IndicatorEntry(dimension_id=5, name="Integrity", score=2),
            )
        )

    def test_plain_average(self) -> None:
        assert core_score(self._indicators()) == 6.0

    def test_industry_weighted(self) -> None:
        assert core_score(self._indicators(), "finance") == 5.8

    def test_unknown_industry(self) -> None:
        with pytest.raises(KeyError, match="industry.aerospace"):
            core_score(self._indicators(), "aerospace")


class TestAnalyzeDocument:
    def test_without_job_description(self, sample_cv: str) -> None:
        report = analyze_document(sample_cv)
        assert report.keywords.score == 0
        assert report.score.profile == DOCUMENT_FALLBACK_PROFILE_NAME
        assert report.score.core == report.indicators.average()
        assert report.score.structural_format == report.structure.score

    def test_with_job_description(self, sample_cv: str, sample_job: str) -> None:
        report = analyze_document(sample_cv, sample_job)
        assert 2 <= report.keywords.score <= 9
        assert "roadmap" in report.keywords.keywords_found
        assert report.score.profile == DOCUMENT_PROFILE_NAME
        assert 0.0 < report.score.overall <= 10.0

    def test_industry_recorded(self, sample_cv: str) -> None:
        report = analyze_document(sample_cv, industry="technology")
        assert report.industry == "technology"

    def test_score_document_matches_report(
        self, sample_cv: str, sample_job: str
    ) -> None:
        assert score_document(sample_cv, sample_job) == analyze_document(
            sample_cv, sample_job
        ).score

    def test_deterministic(self, sample_cv: str, sample_job: str) -> None:
        reports = [analyze_document(sample_cv, sample_job) for _ in range(5)]
        assert all(r == reports[0] for r in reports)
