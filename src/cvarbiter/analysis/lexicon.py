"""Term lists and word-boundary matching shared by the signal analyzers.

Terms are lowercase. Matching is case-insensitive, anchored on word
boundaries, and tolerates a trailing plural ``s`` so ``feature`` also
matches ``features``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

ACTION_VERBS: tuple[str, ...] = (
    "accelerated", "achieved", "analyzed", "architected", "automated",
    "boosted", "built", "coordinated", "created", "cut", "delivered",
    "designed", "developed", "directed", "drove", "eliminated",
    "established", "executed", "expanded", "generated", "grew", "headed",
    "implemented", "improved", "increased", "introduced", "launched",
    "led", "managed", "mentored", "migrated", "negotiated", "optimized",
    "orchestrated", "owned", "partnered", "pioneered", "redesigned",
    "reduced", "resolved", "saved", "scaled", "secured", "shipped",
    "solved", "spearheaded", "streamlined", "supervised", "trained",
    "transformed",
)

PASSIVE_OPENERS: tuple[str, ...] = (
    "was responsible for",
    "were responsible for",
    "responsible for",
    "duties included",
    "tasked with",
    "worked on",
    "involved in",
    "participated in",
    "helped",
    "assisted",
    "was",
    "were",
    "did",
)

IMPACT_WORDS: tuple[str, ...] = (
    "adoption", "arr", "churn", "conversion", "cost", "csat",
    "efficiency", "engagement", "growth", "kpi", "latency", "margin",
    "mrr", "nps", "productivity", "profit", "retention", "revenue", "roi",
    "sales", "satisfaction", "savings", "throughput", "uptime",
)

INDUSTRY_TERMS: tuple[str, ...] = (
    "agile", "analytics", "api", "backlog", "budget", "compliance",
    "dashboard", "deployment", "feature", "infrastructure", "integration",
    "pipeline", "platform", "product", "release", "requirement",
    "roadmap", "scrum", "specification", "sprint", "stakeholder",
    "strategy",
)

GENERIC_PHRASES: tuple[str, ...] = (
    "responsible for",
    "worked on",
    "helped with",
    "involved in",
    "participated in",
    "assisted with",
    "duties included",
    "tasked with",
    "various",
    "stuff",
)

CAUSAL_PHRASES: tuple[str, ...] = (
    "resulting in",
    "resulted in",
    "which led to",
    "leading to",
    "led to",
    "thereby",
    "enabling",
    "so that",
    "contributing to",
    "which drove",
)

# "So what?" phrasing for the recruiter lens: causal links plus
# outcome gerunds that usually precede a result.
OUTCOME_PHRASES: tuple[str, ...] = CAUSAL_PHRASES + (
    "achieving",
    "generating",
    "saving",
    "improving",
    "increasing",
    "reducing",
)

PROBLEM_TERMS: tuple[str, ...] = (
    "addressed", "bottleneck", "challenge", "cut", "decreased",
    "eliminated", "fixed", "mitigated", "pain point", "prevented",
    "problem", "reduced", "resolved", "root cause", "solve", "solved",
    "streamlined",
)

CROSS_FUNCTIONAL_TERMS: tuple[str, ...] = (
    "aligned", "c-suite", "collaborated", "company-wide", "cross-functional",
    "cross-team", "department", "executive", "multidisciplinary",
    "partnered", "stakeholder",
)

BENEFICIARY_TERMS: tuple[str, ...] = (
    "adoption", "churn", "client", "conversion", "customer", "engagement",
    "market share", "patient", "profit", "retention", "revenue", "sales",
    "satisfaction", "savings", "student", "user",
)

SUBORDINATE_MARKERS: tuple[str, ...] = (
    "which", "that", "who", "while", "because", "although", "whereas",
    "when", "and", "so", "but", "in order to", "as well as",
)

SECTION_HEADERS: tuple[str, ...] = (
    "summary", "objective", "profile", "about",
    "experience", "work experience", "employment", "professional experience",
    "education", "academic", "qualifications",
    "skills", "technical skills", "core competencies", "expertise",
    "certifications", "licenses", "credentials",
    "projects", "achievements", "accomplishments",
    "volunteer", "activities", "interests",
    "publications", "awards", "honors",
    "references", "professional memberships",
)

TOOL_NAMES: tuple[str, ...] = (
    "amplitude", "aws", "azure", "confluence", "docker", "excel", "figma",
    "gcp", "hubspot", "java", "javascript", "jira", "kubernetes", "looker",
    "mixpanel", "python", "react", "salesforce", "snowflake", "spark",
    "sql", "tableau", "terraform", "typescript",
)

# Upper-case tokens that are business metrics, not tools or frameworks.
NON_TOOL_ACRONYMS = frozenset({
    "ARR", "CSAT", "DAU", "KPI", "MAU", "MRR", "NPS", "ROI", "USD",
})

# dimension_id → signal terms for the ten competency dimensions
COMPETENCY_TERMS: dict[int, tuple[str, ...]] = {
    1: (
        "analytics", "api", "architecture", "data", "expertise",
        "framework", "infrastructure", "pipeline", "platform", "product",
        "roadmap", "strategy", "systems", "technical",
    ),
    2: (
        "analysis", "analyzed", "bottleneck", "challenge", "diagnosed",
        "eliminated", "optimized", "problem", "reduced", "resolved",
        "root cause", "solve", "solved", "troubleshot",
    ),
    3: (
        "articulated", "briefed", "communicated", "documented",
        "negotiated", "pitched", "presentation", "presented", "published",
        "reported", "storytelling", "wrote",
    ),
    4: (
        "client", "coached", "collaborated", "customer", "facilitated",
        "mentored", "partnered", "relationship", "stakeholder",
        "supported",
    ),
    5: (
        "accountability", "accuracy", "accurate", "audit", "compliance",
        "ethical", "governance", "privacy", "regulatory", "security",
        "transparent",
    ),
    6: (
        "adapted", "agile", "ambiguity", "change management", "flexible",
        "migrated", "pivoted", "restructured", "transformed",
        "transitioned",
    ),
    7: (
        "certification", "certified", "experimented", "iterated",
        "learned", "researched", "self-taught", "studied", "trained",
        "upskilled",
    ),
    8: (
        "cross-functional", "directed", "executive", "headed", "led",
        "managed", "oversaw", "owned", "spearheaded", "supervised", "team",
    ),
    9: (
        "conceived", "created", "designed", "innovative", "invented",
        "launched", "novel", "pioneered", "prototyped", "redesigned",
    ),
    10: (
        "accelerated", "achieved", "delivered", "drove", "exceeded",
        "growth", "initiative", "revenue", "shipped", "shipping",
        "surpassed",
    ),
}

_WORD_RE = re.compile(r"\S+")
_ACRONYM_RE = re.compile(r"\b[A-Z][A-Z0-9]{1,5}\b")


@lru_cache(maxsize=1024)
def _term_pattern(term: str) -> re.Pattern[str]:
    return re.compile(
        rf"(?<![\w-]){re.escape(term)}s?(?![\w-])", re.IGNORECASE
    )


def contains_term(text: str, term: str) -> bool:
    """Return True if ``term`` occurs in ``text`` on word boundaries."""
    return _term_pattern(term).search(text) is not None


def find_terms(text: str, terms: Iterable[str]) -> list[str]:
    """Return the distinct terms found in ``text``, in ``terms`` order."""
    return [t for t in dict.fromkeys(terms) if contains_term(text, t)]


def count_term(text: str, term: str) -> int:
    return len(_term_pattern(term).findall(text))


def words(text: str) -> list[str]:
    """Whitespace-delimited tokens."""
    return _WORD_RE.findall(text)


def starts_with_any(text: str, phrases: Iterable[str]) -> str | None:
    """Return the first phrase ``text`` opens with, or None."""
    lowered = " ".join(words(text.lower()))
    for phrase in phrases:
        if lowered == phrase or lowered.startswith(phrase + " "):
            return phrase
    return None


def named_tools(text: str) -> list[str]:
    """Named tools and frameworks: known tool names plus acronyms."""
    found = find_terms(text, TOOL_NAMES)
    seen = {t.lower() for t in found}
    for acronym in _ACRONYM_RE.findall(text):
        if acronym in NON_TOOL_ACRONYMS or acronym.lower() in seen:
            continue
        seen.add(acronym.lower())
        found.append(acronym)
    return found
