"""Tests for the four-stage analyzer and its aggregation."""

from __future__ import annotations

import time

import pytest

from cvarbiter.analysis.analyzer import STAGE_ANALYZERS, analyze
from cvarbiter.constants import Stage
from cvarbiter.scoring.aggregator import round_half_up
from cvarbiter.scoring.weights import (
    BULLET_PROFILE,
    WeightProfile,
    list_profiles,
    register_profile,
)


def test_runs_every_stage() -> None:
    assert list(STAGE_ANALYZERS) == list(Stage)


def test_weak_bullet_scores(weak_bullet: str) -> None:
    result = analyze(weak_bullet)
    assert result.stage_scores() == {
        "indicators": 28,
        "ats": 45,
        "recruiter_ux": 70,
        "domain_intelligence": 0,
    }
    assert result.total_score == 33


def test_strong_bullet_scores(strong_bullet: str) -> None:
    result = analyze(strong_bullet)
    assert result.stage_scores() == {
        "indicators": 77,
        "ats": 100,
        "recruiter_ux": 100,
        "domain_intelligence": 60,
    }
    assert result.total_score == 83


@pytest.mark.parametrize(
    "text",
    [
        "Managed the product roadmap",
        "Increased retention by 40%",
        "Led product roadmap strategy, resulting in 25% revenue growth",
        "",
    ],
)
def test_total_matches_weighted_formula(text: str) -> None:
    result = analyze(text)
    expected = round_half_up(
        0.20 * result.indicators.score
        + 0.30 * result.ats.score
        + 0.20 * result.recruiter_ux.score
        + 0.30 * result.domain_intelligence.score
    )
    assert result.total_score == int(expected)


def test_deterministic(strong_bullet: str) -> None:
    results = [analyze(strong_bullet) for _ in range(5)]
    assert all(r == results[0] for r in results)


def test_empty_text_does_not_raise() -> None:
    result = analyze("")
    assert result.stage_scores() == {
        "indicators": 0,
        "ats": 15,
        "recruiter_ux": 30,
        "domain_intelligence": 0,
    }
    assert result.total_score == 11
    assert all(result.stage(s).details for s in Stage)


@pytest.mark.usefixtures("isolated_profiles")
def test_custom_profile_changes_total(weak_bullet: str) -> None:
    ats_only = register_profile(
        WeightProfile(
            name="test.ats_only",
            weights={
                Stage.INDICATORS: 0.0,
                Stage.ATS: 1.0,
                Stage.RECRUITER_UX: 0.0,
                Stage.DOMAIN_INTELLIGENCE: 0.0,
            },
        )
    )
    assert analyze(weak_bullet, ats_only).total_score == 45
    assert analyze(weak_bullet, BULLET_PROFILE).total_score == 33
    assert "test.ats_only" in list_profiles()


def test_custom_profile_does_not_leak() -> None:
    assert "test.ats_only" not in list_profiles()


# ── Degenerate input ──

DEGENERATE_INPUTS = {
    "control_characters": "\x00\x07\t\t\tLed\x0b roadmap\x1f\r\n" * 50,
    "only_control_characters": "\x00\x01\x02\x1b\x7f" * 200,
    "long_repeated_text": "Led team " * 2000,
    "long_repeated_bullet": (
        "Led product roadmap strategy using RICE, shipping 15 features "
        "resulting in 25% revenue growth\x00 "
    ) * 200,
    "long_digit_run": "1" * 20000,
    "digit_run_before_unit": "9" * 10000 + " engineers",
    "comma_grouped_digits": "1," * 10000,
    "many_short_tokens": "grew 1% " * 5000,
}


@pytest.mark.parametrize(
    "text", list(DEGENERATE_INPUTS.values()), ids=list(DEGENERATE_INPUTS)
)
def test_degenerate_input_is_bounded(text: str) -> None:
    started = time.perf_counter()
    result = analyze(text)
    assert time.perf_counter() - started < 5.0
    assert 0 <= result.total_score <= 100
    for stage in Stage:
        assert 0 <= result.stage(stage).score <= 100
        assert result.stage(stage).details
