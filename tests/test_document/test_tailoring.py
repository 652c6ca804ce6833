"""Tests for section-level tailoring."""

from __future__ import annotations

import logging

import pytest

from cvarbiter.collaborators.fakes import HeaderSectionSplitter, names_match
from cvarbiter.collaborators.protocols import Section
from cvarbiter.constants import Winner
from cvarbiter.document.tailoring import (
    REASON_EQUAL,
    REASON_NEW,
    REASON_NOT_FOUND,
    TailoringResult,
    tailor_document,
    tailor_sections,
)

BASE_DOC = """\
Summary
Managed the product roadmap

Experience
Increased retention by 40%

Education
BSc Computer Science
"""

CANDIDATE_DOC = """\
Summary
Led product roadmap strategy using RICE, shipping 15 features resulting in 25% revenue growth

Work Experience
Improved retention

Projects
Built an internal analytics platform adopted by 12 product teams across the company

Awards
Best PM 2020
"""


@pytest.fixture
def result(splitter: HeaderSectionSplitter) -> TailoringResult:
    return tailor_document(BASE_DOC, CANDIDATE_DOC, splitter, names_match)


def test_section_outcomes(result: TailoringResult) -> None:
    by_name = {d.section_name: d for d in result.decisions}
    assert by_name["Summary"].chosen == Winner.TAILORED
    assert by_name["Summary"].improvement == 50
    assert by_name["Experience"].chosen == Winner.ORIGINAL
    assert by_name["Experience"].reason.startswith("Tailored version dropped metrics")
    assert by_name["Education"].reason == REASON_NOT_FOUND
    assert by_name["Projects"].reason == REASON_NEW
    assert "Awards" not in by_name


def test_final_sections(result: TailoringResult) -> None:
    assert [s.name for s in result.final_sections] == [
        "Summary",
        "Experience",
        "Education",
        "Projects",
    ]
    assert result.final_sections[1].text == "Increased retention by 40%"
    assert result.final_sections[0].text.startswith("Led product roadmap")


def test_counts_and_totals(result: TailoringResult) -> None:
    assert result.sections_improved == 2
    assert result.sections_kept_original == 2
    assert result.final_total_score >= result.base_total_score
    assert result.methodology_preserved is True


def test_equal_sections_keep_original() -> None:
    sections = [Section(name="Summary", text="Managed the product roadmap")]
    outcome = tailor_sections(sections, sections, names_match)
    decision = outcome.decisions[0]
    assert decision.chosen == Winner.ORIGINAL
    assert decision.reason == REASON_EQUAL
    assert decision.improvement == 0


def test_short_new_section_skipped(caplog: pytest.LogCaptureFixture) -> None:
    base = [Section(name="Summary", text="Managed the product roadmap")]
    candidate = [*base, Section(name="Awards", text="Best PM 2020")]
    with caplog.at_level(logging.DEBUG, logger="cvarbiter.document.tailoring"):
        outcome = tailor_sections(base, candidate, names_match)
    assert [s.name for s in outcome.final_sections] == ["Summary"]
    assert "event=new_section_skipped name=Awards" in caplog.text


def test_empty_documents(splitter: HeaderSectionSplitter) -> None:
    outcome = tailor_document("", "", splitter, names_match)
    assert outcome.decisions == ()
    assert outcome.methodology_preserved is True
