"""Shared test fixtures — sample units, documents and fakes."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from cvarbiter.collaborators.fakes import HeaderSectionSplitter, RuleBasedGenerator

WEAK_BULLET = "Managed the product roadmap"
STRONG_BULLET = (
    "Led product roadmap strategy using RICE, shipping 15 features "
    "resulting in 25% revenue growth"
)
METRIC_BULLET = "Increased retention by 40%"
NO_METRIC_BULLET = "Improved retention"

SAMPLE_CV = """\
Jordan Rivera
jordan.rivera@example.com | 555-123-4567 | linkedin.com/in/jrivera

Summary
Product manager with eight years of platform and analytics experience.

Experience
- Led product roadmap strategy, shipping 15 features resulting in 25% revenue growth
- Managed a team of 8 engineers and collaborated with stakeholder groups
- Reduced churn by 12% after diagnosing the root cause of onboarding problems
- Launched a self-serve analytics dashboard used by 40,000 customers
- Negotiated vendor contracts saving $1.2M per year

Education
- BSc Computer Science, 2014

Skills
- SQL, Python, Jira, Figma, Tableau
"""

SAMPLE_JOB = """\
Senior Product Manager. You will own the product roadmap and strategy,
partner with engineering, drive revenue growth and analytics adoption.
Experience with SQL and experimentation required.
"""


@pytest.fixture
def weak_bullet() -> str:
    return WEAK_BULLET


@pytest.fixture
def strong_bullet() -> str:
    return STRONG_BULLET


@pytest.fixture
def sample_cv() -> str:
    return SAMPLE_CV


@pytest.fixture
def sample_job() -> str:
    return SAMPLE_JOB


@pytest.fixture
def generator() -> RuleBasedGenerator:
    return RuleBasedGenerator()


@pytest.fixture
def splitter() -> HeaderSectionSplitter:
    return HeaderSectionSplitter()


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Reset the setup_logging singleton flag around a test."""
    import cvarbiter.logging_config as mod

    mod._configured = False
    yield
    mod._configured = False
    logging.getLogger("asyncio").setLevel(logging.NOTSET)
    logging.getLogger("tenacity").setLevel(logging.NOTSET)


@pytest.fixture
def isolated_profiles(monkeypatch: pytest.MonkeyPatch) -> None:
    """Profiles registered during a test are dropped afterwards."""
    import cvarbiter.scoring.weights as mod

    monkeypatch.setattr(mod, "_REGISTRY", dict(mod._REGISTRY))
