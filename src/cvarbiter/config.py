"""Environment-based configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from cvarbiter.constants import (
    BATCH_MAX_CONCURRENCY,
    BULLET_PROFILE_NAME,
    DEFAULT_MIN_UNIT_LENGTH,
    DOCUMENT_PROFILE_NAME,
    RETRY_MAX_ATTEMPTS,
)
from cvarbiter.scoring.weights import get_profile, list_industries

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and ``CVARBITER_``-prefixed environment variables."""

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path("logs")

    # Scoring
    bullet_profile: str = BULLET_PROFILE_NAME
    document_profile: str = DOCUMENT_PROFILE_NAME
    industry: str | None = None
    min_unit_length: int = DEFAULT_MIN_UNIT_LENGTH

    # Concurrency and generation
    batch_max_concurrency: int = BATCH_MAX_CONCURRENCY
    generation_max_attempts: int = RETRY_MAX_ATTEMPTS

    @field_validator("log_level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {v!r}")
        return level

    @field_validator("bullet_profile", "document_profile")
    @classmethod
    def _validate_profile(cls, v: str) -> str:
        try:
            get_profile(v)
        except KeyError as exc:
            raise ValueError(str(exc)) from exc
        return v

    @field_validator("industry")
    @classmethod
    def _validate_industry(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        name = v.strip().lower()
        known = list_industries()
        if name not in known:
            raise ValueError(
                f"unknown industry {v!r}; known industries: {', '.join(known)}"
            )
        return name

    @field_validator(
        "batch_max_concurrency", "generation_max_attempts", "min_unit_length"
    )
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "CVARBITER_",
        "extra": "ignore",
    }
