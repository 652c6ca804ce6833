"""Deterministic stand-ins for the external collaborators.

No network, no randomness: the same input always gives the same
output, so arbiter tests built on these stay deterministic.
"""

from __future__ import annotations

import re

from cvarbiter.analysis.lexicon import (
    PASSIVE_OPENERS,
    SECTION_HEADERS,
    starts_with_any,
    words,
)
from cvarbiter.collaborators.protocols import Section

_OPENER_REWRITES: dict[str, str] = {
    "was responsible for": "Led",
    "were responsible for": "Led",
    "responsible for": "Led",
    "duties included": "Delivered",
    "tasked with": "Delivered",
    "worked on": "Built",
    "involved in": "Contributed to",
    "participated in": "Contributed to",
    "helped": "Drove",
    "assisted": "Supported",
}
_NAME_NOISE = re.compile(r"[^a-z0-9 ]+")


class RuleBasedGenerator:
    """Fixed rule-based rewrite: strong opener plus the job context.

    Swaps a passive opener for an action verb and, when ``job_context``
    is given, appends it as a focus clause. Quantified facts in the
    original are kept verbatim.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    async def generate(self, original: str, job_context: str) -> str:
        self.calls.append((original, job_context))
        text = original.strip()
        opener = starts_with_any(text, PASSIVE_OPENERS)
        if opener is not None:
            rest = " ".join(words(text)[len(opener.split()):])
            replacement = _OPENER_REWRITES.get(opener)
            text = f"{replacement} {rest}".strip() if replacement else rest
        if job_context.strip():
            text = f"{text.rstrip('.')}, focused on {job_context.strip()}"
        return text


class FailingGenerator:
    """Raises ``error`` for the first ``failures`` calls, then echoes."""

    def __init__(self, error: Exception, failures: int | None = None) -> None:
        self.error = error
        self.failures = failures
        self.calls = 0

    async def generate(self, original: str, job_context: str) -> str:
        self.calls += 1
        if self.failures is None or self.calls <= self.failures:
            raise self.error
        return original


class ScriptedGenerator:
    """Returns canned responses keyed by the original text."""

    def __init__(self, responses: dict[str, str]) -> None:
        self.responses = responses

    async def generate(self, original: str, job_context: str) -> str:
        return self.responses.get(original, original)


class HeaderSectionSplitter:
    """Splits on lines that are known section headers.

    Text before the first header goes into a section named
    ``preamble_name``.
    """

    def __init__(self, preamble_name: str = "Header") -> None:
        self.preamble_name = preamble_name

    def split(self, document: str) -> list[Section]:
        sections: list[Section] = []
        name = self.preamble_name
        body: list[str] = []
        for line in document.splitlines():
            header = _header_name(line)
            if header is None:
                body.append(line)
                continue
            if name != self.preamble_name or any(b.strip() for b in body):
                sections.append(Section(name=name, text="\n".join(body).strip()))
            name = header
            body = []
        if name != self.preamble_name or any(b.strip() for b in body):
            sections.append(Section(name=name, text="\n".join(body).strip()))
        return sections


def _header_name(line: str) -> str | None:
    stripped = line.strip().rstrip(":").strip()
    if stripped.lower() in SECTION_HEADERS:
        return stripped
    return None


def _tokens(name: str) -> set[str]:
    return set(_NAME_NOISE.sub(" ", name.lower()).split())


def names_match(a: str, b: str) -> bool:
    """Normalized token containment: "Work Experience" ≈ "Experience"."""
    left, right = _tokens(a), _tokens(b)
    if not left or not right:
        return False
    return left <= right or right <= left
