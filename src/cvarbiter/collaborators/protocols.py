"""Protocol-based interfaces for the collaborators around the core.

Real implementations satisfy these protocols structurally (no
inheritance). Test doubles live in ``cvarbiter.collaborators.fakes``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Section:
    """A named block of a document, e.g. "Experience"."""

    name: str
    text: str


class TextGenerator(Protocol):
    async def generate(self, original: str, job_context: str) -> str: ...


class SectionSplitter(Protocol):
    def split(self, document: str) -> list[Section]: ...


class NameMatcher(Protocol):
    def __call__(self, a: str, b: str) -> bool: ...
