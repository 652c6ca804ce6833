"""Tests for quantifiable-token extraction."""

from __future__ import annotations

import time

import pytest

from cvarbiter.analysis.metrics import extract_metrics, has_metric, missing_metrics
from cvarbiter.constants import MetricKind


@pytest.mark.parametrize(
    ("text", "kind", "value"),
    [
        ("grew revenue 25%", MetricKind.PERCENTAGE, 25.0),
        ("cut costs 12.5 percent", MetricKind.PERCENTAGE, 12.5),
        ("saved $1.5M", MetricKind.CURRENCY, 1_500_000.0),
        ("saved $1.5 million", MetricKind.CURRENCY, 1_500_000.0),
        ("raised €200k", MetricKind.CURRENCY, 200_000.0),
        ("3x faster builds", MetricKind.MULTIPLIER, 3.0),
        ("onboarded 50K users", MetricKind.COUNT, 50_000.0),
        ("served 50,000 active customers", MetricKind.COUNT, 50_000.0),
        ("managed a team of 8", MetricKind.COUNT, 8.0),
    ],
)
def test_extracts_single_token(text: str, kind: MetricKind, value: float) -> None:
    tokens = extract_metrics(text)
    assert len(tokens) == 1
    assert tokens[0].kind == kind
    assert tokens[0].value == pytest.approx(value)


def test_currency_span_not_double_counted() -> None:
    """'$2M' is one currency token, not a currency and a count."""
    tokens = extract_metrics("generated $2M in pipeline")
    assert [t.kind for t in tokens] == [MetricKind.CURRENCY]


def test_reading_order() -> None:
    tokens = extract_metrics("15 features, 25% growth and $3M saved")
    assert [t.kind for t in tokens] == [
        MetricKind.COUNT,
        MetricKind.PERCENTAGE,
        MetricKind.CURRENCY,
    ]


def test_plain_numbers_are_not_metrics() -> None:
    assert extract_metrics("Joined the company in 2019") == []


def test_has_metric_kind_filter() -> None:
    assert has_metric("shipped 15 features")
    assert not has_metric("shipped 15 features", MetricKind.PERCENTAGE)
    assert has_metric("lifted NPS 10%", MetricKind.PERCENTAGE, MetricKind.CURRENCY)


class TestMissingMetrics:
    def test_dropped_token_reported(self) -> None:
        missing = missing_metrics("Increased retention by 40%", "Improved retention")
        assert [t.text for t in missing] == ["40%"]

    def test_equivalent_spelling_is_kept(self) -> None:
        assert missing_metrics("saved $1.5M", "saved $1.5 million annually") == []

    def test_paraphrased_value_counts_as_dropped(self) -> None:
        missing = missing_metrics("grew sales 40%", "nearly doubled sales")
        assert len(missing) == 1

    def test_changed_value_counts_as_dropped(self) -> None:
        assert missing_metrics("grew sales 40%", "grew sales 45%")

    def test_duplicates_reported_once(self) -> None:
        missing = missing_metrics("40% and again 40%", "no numbers")
        assert len(missing) == 1

    def test_no_metrics_in_original(self) -> None:
        assert missing_metrics("Managed the roadmap", "Led the roadmap") == []


# ── Long digit runs ──


class TestLongDigitRuns:
    @pytest.mark.parametrize(
        "text",
        ["9" * 20000, "1," * 10000, "4." * 10000, "$" + "7" * 20000 + " pages"],
        ids=["digits", "comma_grouped", "dotted", "currency_prefix"],
    )
    def test_unmatched_run_is_fast(self, text: str) -> None:
        started = time.perf_counter()
        extract_metrics(text)
        assert time.perf_counter() - started < 2.0

    def test_many_tokens_are_fast(self) -> None:
        started = time.perf_counter()
        tokens = extract_metrics("1% " * 20000)
        assert time.perf_counter() - started < 2.0
        assert len(tokens) == 20000

    def test_token_after_long_run_still_found(self) -> None:
        tokens = extract_metrics("9" * 5000 + " and grew revenue 25%")
        assert [(t.kind, t.value) for t in tokens] == [(MetricKind.PERCENTAGE, 25.0)]

    def test_match_starts_at_head_of_run(self) -> None:
        [token] = extract_metrics("served 1,200 users")
        assert token.text == "1,200 users"
        assert token.value == 1200.0
