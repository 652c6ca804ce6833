"""Caller-side boundary to the text generator.

The core never calls a generator. Callers use ``collect_candidates`` to
obtain one candidate per original before arbitrating. Every failure
resolves to "no candidate", i.e. the original text itself, so a batch
never aborts because one rewrite could not be produced.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Sequence

from pydantic import BaseModel, ValidationError, field_validator
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from cvarbiter.collaborators.protocols import TextGenerator
from cvarbiter.config import Settings
from cvarbiter.constants import (
    ERROR_TRUNCATION_CHARS,
    GENERATION_MAX_CONCURRENCY,
    RETRY_INITIAL_WAIT,
    RETRY_MAX_ATTEMPTS,
    RETRY_MAX_WAIT,
)
from cvarbiter.resilience.errors import classify_error, is_retryable

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(
    r"^```(?:json|markdown|md|text)?\s*\n(.*?)```\s*$",
    re.DOTALL,
)


class GeneratedRewrite(BaseModel):
    """Structured generator output: ``{"rewrite": "..."}``."""

    rewrite: str

    @field_validator("rewrite")
    @classmethod
    def _validate_rewrite(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("rewrite must not be empty")
        return stripped


def _strip_fences(text: str) -> str:
    """Remove wrapping ``` fences from generator output."""
    m = _FENCE_RE.match(text.strip())
    return m.group(1).strip() if m else text.strip()


def parse_generated_rewrite(raw: str) -> str | None:
    """Return the rewrite in ``raw``, or None when it is unusable.

    A JSON object must validate as ``GeneratedRewrite``; anything else
    non-empty is taken as plain text.
    """
    content = _strip_fences(raw)
    if not content:
        return None
    if not content.startswith("{"):
        return content
    try:
        return GeneratedRewrite.model_validate_json(content).rewrite
    except ValidationError as ve:
        logger.warning(
            "event=rewrite_validation_failed error=%s",
            str(ve)[:ERROR_TRUNCATION_CHARS],
        )
        return None


async def generate_with_retry(
    generator: TextGenerator,
    original: str,
    job_context: str,
    *,
    max_attempts: int = RETRY_MAX_ATTEMPTS,
    initial_wait: float = RETRY_INITIAL_WAIT,
    max_wait: float = RETRY_MAX_WAIT,
) -> str:
    """Call ``generator`` retrying transient, server and timeout errors.

    Client and unclassified errors propagate on the first attempt.
    """
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential_jitter(initial=initial_wait, max=max_wait),
        retry=retry_if_exception(is_retryable),
        reraise=True,
    ):
        with attempt:
            return await generator.generate(original, job_context)
    raise AssertionError("unreachable")  # pragma: no cover


async def collect_candidates(
    generator: TextGenerator,
    originals: Sequence[str],
    job_context: str,
    *,
    max_concurrency: int = GENERATION_MAX_CONCURRENCY,
    max_attempts: int = RETRY_MAX_ATTEMPTS,
    initial_wait: float = RETRY_INITIAL_WAIT,
    max_wait: float = RETRY_MAX_WAIT,
    settings: Settings | None = None,
) -> list[str]:
    """One candidate per original, in input order.

    Failed or unusable generations fall back to the original text. When
    ``settings`` is given, its ``generation_max_attempts`` replaces
    ``max_attempts``.
    """
    if settings is not None:
        max_attempts = settings.generation_max_attempts
    if max_concurrency < 1:
        raise ValueError("max_concurrency must be at least 1")
    semaphore = asyncio.Semaphore(max_concurrency)

    async def _one(index: int, original: str) -> str:
        async with semaphore:
            try:
                raw = await generate_with_retry(
                    generator,
                    original,
                    job_context,
                    max_attempts=max_attempts,
                    initial_wait=initial_wait,
                    max_wait=max_wait,
                )
            except Exception as exc:
                logger.warning(
                    "event=generation_failed index=%d error_class=%s error=%s",
                    index,
                    classify_error(exc).value,
                    str(exc)[:ERROR_TRUNCATION_CHARS],
                )
                return original
        parsed = parse_generated_rewrite(raw)
        if parsed is None:
            logger.warning("event=generation_unusable index=%d", index)
            return original
        return parsed

    return list(
        await asyncio.gather(*(_one(i, o) for i, o in enumerate(originals)))
    )

