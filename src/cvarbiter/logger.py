"""Structured JSON audit log of arbiter decisions."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from cvarbiter.arbiter.schemas import ArbiterDecision, ArbiterResult
from cvarbiter.constants import ERROR_TRUNCATION_CHARS
from cvarbiter.logging_config import LOG_DATEFMT, LOG_FORMAT

__all__ = ["DecisionLogger", "LOG_FORMAT", "LOG_DATEFMT"]

DECISION_LOG_NAME = "decisions.log"


class DecisionLogger:
    """Writes one JSON object per decision or batch summary."""

    def __init__(self, log_dir: Path, level: str = "INFO") -> None:
        self._log_dir = log_dir
        self._log_dir.mkdir(parents=True, exist_ok=True)
        self._path = log_dir / DECISION_LOG_NAME
        self._logger = logging.getLogger("cvarbiter.decisions")
        self._logger.setLevel(getattr(logging, level.upper()))
        self._logger.propagate = False

        if not any(
            isinstance(h, logging.FileHandler)
            and Path(h.baseFilename) == self._path.resolve()
            for h in self._logger.handlers
        ):
            handler = logging.FileHandler(self._path)
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)

    @property
    def path(self) -> Path:
        return self._path

    def log_decision(
        self,
        decision: ArbiterDecision,
        *,
        index: int | None = None,
        original: str | None = None,
    ) -> None:
        self._logger.info(
            json.dumps({
                "type": "decision",
                "timestamp": datetime.now(UTC).isoformat(),
                "index": index,
                "winner": decision.winner.value,
                "score_delta": decision.score_delta,
                "original_total": decision.original_analysis.total_score,
                "tailored_total": decision.tailored_analysis.total_score,
                "metric_protected": decision.metric_protected,
                "dropped_metrics": list(decision.dropped_metrics),
                "rejected_stages": [
                    r.stage.value for r in decision.rejection_reasons
                ],
                "original": (
                    original[:ERROR_TRUNCATION_CHARS]
                    if original is not None
                    else None
                ),
                "bullet": decision.bullet[:ERROR_TRUNCATION_CHARS],
            })
        )

    def log_batch(self, result: ArbiterResult) -> None:
        for index, decision in enumerate(result.decisions):
            self.log_decision(decision, index=index)
        self._logger.info(
            json.dumps({
                "type": "batch",
                "timestamp": datetime.now(UTC).isoformat(),
                "units": len(result.decisions),
                "improved": result.improved_count,
                "original_total": result.original_total_score,
                "optimised_total": result.optimised_total_score,
                "methodology_preserved": result.methodology_preserved,
            })
        )

    def log_error(self, component: str, error: str) -> None:
        self._logger.error(
            json.dumps({
                "type": "error",
                "timestamp": datetime.now(UTC).isoformat(),
                "component": component,
                "error": error[:ERROR_TRUNCATION_CHARS],
            })
        )

    def close(self) -> None:
        for handler in list(self._logger.handlers):
            if (
                isinstance(handler, logging.FileHandler)
                and Path(handler.baseFilename) == self._path.resolve()
            ):
                handler.close()
                self._logger.removeHandler(handler)
