"""Collaborator interfaces, deterministic fakes and the generation boundary."""

from cvarbiter.collaborators.fakes import (
    FailingGenerator,
    HeaderSectionSplitter,
    RuleBasedGenerator,
    ScriptedGenerator,
    names_match,
)
from cvarbiter.collaborators.generation import (
    GeneratedRewrite,
    collect_candidates,
    generate_with_retry,
    parse_generated_rewrite,
)
from cvarbiter.collaborators.protocols import (
    NameMatcher,
    Section,
    SectionSplitter,
    TextGenerator,
)

__all__ = [
    "FailingGenerator",
    "GeneratedRewrite",
    "HeaderSectionSplitter",
    "NameMatcher",
    "RuleBasedGenerator",
    "ScriptedGenerator",
    "Section",
    "SectionSplitter",
    "TextGenerator",
    "collect_candidates",
    "generate_with_retry",
    "names_match",
    "parse_generated_rewrite",
]
