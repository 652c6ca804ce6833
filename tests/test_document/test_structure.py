"""Tests for the structural-format scorer."""

from __future__ import annotations

import pytest

from cvarbiter.document.structure import measure_layout, score_structural_format
from cvarbiter.scoring.aggregator import aggregate
from cvarbiter.scoring.weights import STRUCTURAL_PROFILE


def test_measure_layout(sample_cv: str) -> None:
    facts = measure_layout(sample_cv)
    assert facts.section_count == 4
    assert facts.bullet_count == 7
    assert facts.has_contact_info
    assert facts.has_metrics
    assert facts.has_action_verbs
    assert facts.consistent_bullets
    assert facts.proper_header_case
    assert facts.estimated_pages == 1


def test_sub_scores_in_range(sample_cv: str) -> None:
    report = score_structural_format(sample_cv)
    for value in (
        report.structure,
        report.ats_format,
        report.visual_clarity,
        report.content_density,
        report.formatting,
        report.score,
    ):
        assert 1.0 <= value <= 10.0


def test_score_is_weighted_sub_scores(sample_cv: str) -> None:
    report = score_structural_format(sample_cv)
    expected = aggregate(
        {
            "structure": report.structure,
            "ats_format": report.ats_format,
            "visual_clarity": report.visual_clarity,
            "content_density": report.content_density,
            "formatting": report.formatting,
        },
        STRUCTURAL_PROFILE,
        1,
    )
    assert report.score == expected.value


def test_strengths_and_issues(sample_cv: str) -> None:
    report = score_structural_format(sample_cv)
    assert "Contact information is present and parseable" in report.strengths
    assert "Includes quantifiable achievements" in report.strengths
    assert "Document appears too brief" in report.issues


def test_red_flags_lower_ats_format(sample_cv: str) -> None:
    clean = score_structural_format(sample_cv)
    flagged = score_structural_format(
        sample_cv.replace("- ", "• ") + "\n| Skill | Level |\n"
    )
    assert flagged.ats_format < clean.ats_format


def test_all_caps_headers(sample_cv: str) -> None:
    shouting = sample_cv.replace("Experience\n", "EXPERIENCE\n")
    assert measure_layout(shouting).proper_header_case is False


@pytest.mark.parametrize("text", ["", "   ", "just one line"])
def test_degenerate_input(text: str) -> None:
    report = score_structural_format(text)
    assert 1.0 <= report.score <= 10.0
    assert "Missing or hard to parse contact information" in report.issues
