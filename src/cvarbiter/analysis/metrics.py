"""Quantifiable-token extraction and comparison.

A quantifiable token is a percentage, a currency amount, a multiplier
("3x") or an explicit count of people, users, projects and the like.
Tokens normalize to a float so "$1.5M" and "$1.5 million" compare equal,
as do "50K users" and "50,000 customers".
"""

from __future__ import annotations

import re
from bisect import bisect_left, insort
from dataclasses import dataclass

from cvarbiter.constants import MetricKind

COUNT_UNITS: tuple[str, ...] = (
    "account", "client", "country", "customer", "designer", "developer",
    "employee", "engineer", "feature", "hire", "location", "market",
    "member", "partner", "patient", "people", "person", "product",
    "project", "release", "report", "service", "site", "stakeholder",
    "store", "student", "team", "user", "vendor",
)

_SCALE: dict[str, float] = {
    "k": 1e3,
    "thousand": 1e3,
    "m": 1e6,
    "mm": 1e6,
    "million": 1e6,
    "b": 1e9,
    "bn": 1e9,
    "billion": 1e9,
}

# starts only at the head of a digit run
_NUMBER = r"(?<![\d,.])\d[\d,]*(?:\.\d+)?"
_SUFFIX = r"(?:\s*(?P<suffix>k|mm|m|bn|b|thousand|million|billion)\b)?"

_PATTERNS: tuple[tuple[MetricKind, re.Pattern[str]], ...] = (
    (
        MetricKind.CURRENCY,
        re.compile(
            rf"(?P<symbol>[$€£])\s*(?P<number>{_NUMBER}){_SUFFIX}",
            re.IGNORECASE,
        ),
    ),
    (
        MetricKind.PERCENTAGE,
        re.compile(
            rf"(?P<number>{_NUMBER})\s*(?:%|percent\b|pct\b)",
            re.IGNORECASE,
        ),
    ),
    (
        MetricKind.MULTIPLIER,
        re.compile(rf"(?P<number>{_NUMBER})\s*x\b", re.IGNORECASE),
    ),
    (
        MetricKind.COUNT,
        re.compile(
            rf"(?P<number>{_NUMBER})(?:(?P<suffix>k|m|b)\b|\s*(?P<word>"
            r"thousand|million|billion)\b)?\+?\s+(?:[a-z-]+\s+)?"
            rf"(?:{'|'.join(COUNT_UNITS)})s?\b",
            re.IGNORECASE,
        ),
    ),
    (
        MetricKind.COUNT,
        re.compile(rf"\bteams?\s+of\s+(?P<number>{_NUMBER})", re.IGNORECASE),
    ),
)


@dataclass(frozen=True)
class MetricToken:
    """One quantifiable token found in a text unit."""

    kind: MetricKind
    value: float
    text: str

    @property
    def key(self) -> tuple[MetricKind, float]:
        return (self.kind, round(self.value, 4))


def _normalize(match: re.Match[str]) -> float:
    groups = match.groupdict()
    number = float(groups["number"].replace(",", ""))
    suffix = groups.get("suffix") or groups.get("word")
    if suffix:
        number *= _SCALE[suffix.lower()]
    return number


def extract_metrics(text: str) -> list[MetricToken]:
    """Return the quantifiable tokens of ``text`` in reading order.

    Patterns are tried in priority order and a span already claimed by
    an earlier pattern is not matched again, so "$2M" is one currency
    token rather than a currency and a count.
    """
    # claimed spans never overlap, so sorting by start also sorts by end
    claimed: list[tuple[int, int]] = []
    found: list[tuple[int, MetricToken]] = []
    for kind, pattern in _PATTERNS:
        for match in pattern.finditer(text):
            start, end = match.span()
            i = bisect_left(claimed, (end,))
            if i and claimed[i - 1][1] > start:
                continue
            insort(claimed, (start, end))
            token = MetricToken(
                kind=kind,
                value=_normalize(match),
                text=match.group(0).strip(),
            )
            found.append((start, token))
    found.sort(key=lambda item: item[0])
    return [token for _, token in found]


def has_metric(text: str, *kinds: MetricKind) -> bool:
    """True if ``text`` holds a token, optionally restricted to ``kinds``."""
    tokens = extract_metrics(text)
    if not kinds:
        return bool(tokens)
    return any(t.kind in kinds for t in tokens)


def missing_metrics(original: str, candidate: str) -> list[MetricToken]:
    """Tokens of ``original`` with no same-kind, same-value token in ``candidate``."""
    available = {t.key for t in extract_metrics(candidate)}
    missing: list[MetricToken] = []
    seen: set[tuple[MetricKind, float]] = set()
    for token in extract_metrics(original):
        if token.key in available or token.key in seen:
            continue
        seen.add(token.key)
        missing.append(token)
    return missing
