"""CLI entry point — score, arbitrate and merge from the command line."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from cvarbiter import __version__
from cvarbiter.analysis.analyzer import analyze
from cvarbiter.arbiter.arbiter import arbitrate
from cvarbiter.arbiter.batch import run_batch, run_batch_concurrent
from cvarbiter.arbiter.merger import merge_indicator_sets, regressions
from cvarbiter.config import Settings
from cvarbiter.document.schemas import IndicatorSet
from cvarbiter.document.scoring import analyze_document
from cvarbiter.logger import DecisionLogger
from cvarbiter.logging_config import setup_logging
from cvarbiter.scoring.weights import get_profile, list_profiles
from cvarbiter.validation import validate_unit_text

logger = logging.getLogger(__name__)

EXIT_USAGE = 2


class CLIError(Exception):
    """User-facing error: printed to stderr, exit status 2."""


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"cvarbiter {__version__}")
        return

    if args.command is None:
        parser.print_help()
        return

    audit: DecisionLogger | None = None
    try:
        overrides = {"log_level": args.log_level} if args.log_level else {}
        settings = Settings(**overrides)
        setup_logging(settings.log_level)
        log_dir = args.log_dir or (settings.log_dir if args.audit else None)
        audit = DecisionLogger(Path(log_dir)) if log_dir else None
        payload = _COMMANDS[args.command](args, settings, audit)
    except (CLIError, ValidationError, KeyError, ValueError, OSError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        logger.debug("event=cli_error command=%s", args.command, exc_info=True)
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(EXIT_USAGE)
    finally:
        if audit is not None:
            audit.close()

    print(_to_json(payload))


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cvarbiter",
        description=(
            "Score CV bullets and documents, and keep a rewrite only "
            "when it does not regress."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Write the JSON decision audit log to this directory",
    )
    parser.add_argument(
        "--audit",
        action="store_true",
        help="Write the decision audit log to the configured log directory",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: from settings)",
    )

    sub = parser.add_subparsers(dest="command")

    analyze_parser = sub.add_parser("analyze", help="Score one text unit")
    analyze_parser.add_argument("text", help="Bullet or section text")
    analyze_parser.add_argument(
        "--profile",
        default=None,
        help="Bullet weight profile (default: from settings)",
    )

    arbitrate_parser = sub.add_parser(
        "arbitrate", help="Choose between an original and a rewrite"
    )
    arbitrate_parser.add_argument("original")
    arbitrate_parser.add_argument("candidate")
    arbitrate_parser.add_argument("--profile", default=None)

    batch_parser = sub.add_parser(
        "batch",
        help='Arbitrate a JSON file {"originals": [...], "candidates": [...]}',
    )
    batch_parser.add_argument("file", type=Path)
    batch_parser.add_argument("--profile", default=None)
    batch_parser.add_argument(
        "--concurrent",
        action="store_true",
        help="Score pairs in worker threads",
    )

    merge_parser = sub.add_parser(
        "merge", help="Non-regression merge of two indicator-set JSON files"
    )
    merge_parser.add_argument("base", type=Path)
    merge_parser.add_argument("candidate", type=Path)

    document_parser = sub.add_parser("document", help="Score a whole document")
    document_parser.add_argument("file", type=Path)
    document_parser.add_argument(
        "--job",
        type=Path,
        default=None,
        help="Job description file for keyword matching",
    )
    document_parser.add_argument(
        "--industry",
        default=None,
        help="Industry weighting for the competency average",
    )

    sub.add_parser("profiles", help="List registered weight profiles")

    return parser


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CLIError(f"{path}: invalid JSON ({exc.msg})") from exc


def _to_json(payload: Any) -> str:
    if isinstance(payload, BaseModel):
        return payload.model_dump_json(indent=2)
    return json.dumps(payload, indent=2, default=_encode)


def _encode(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"cannot serialize {type(value).__name__}")


def _run_analyze(
    args: argparse.Namespace, settings: Settings, audit: DecisionLogger | None
) -> Any:
    text = validate_unit_text(args.text, settings.min_unit_length)
    return analyze(text, get_profile(args.profile or settings.bullet_profile))


def _run_arbitrate(
    args: argparse.Namespace, settings: Settings, audit: DecisionLogger | None
) -> Any:
    profile = get_profile(args.profile or settings.bullet_profile)
    decision = arbitrate(args.original, args.candidate, profile=profile)
    if audit is not None:
        audit.log_decision(decision, original=args.original)
    return decision


def _run_batch(
    args: argparse.Namespace, settings: Settings, audit: DecisionLogger | None
) -> Any:
    data = _read_json(args.file)
    if not isinstance(data, dict):
        raise CLIError(f"{args.file}: expected a JSON object")
    originals = data.get("originals", [])
    candidates = data.get("candidates", [])
    for key, items in (("originals", originals), ("candidates", candidates)):
        if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
            raise CLIError(f"{args.file}: {key!r} must be a list of strings")

    profile = get_profile(args.profile or settings.bullet_profile)
    if args.concurrent:
        result = asyncio.run(
            run_batch_concurrent(
                originals,
                candidates,
                profile=profile,
                max_concurrency=settings.batch_max_concurrency,
            )
        )
    else:
        result = run_batch(originals, candidates, profile=profile)
    if audit is not None:
        audit.log_batch(result)
    return result


def _load_indicator_set(path: Path) -> IndicatorSet:
    data = _read_json(path)
    if isinstance(data, list):
        data = {"entries": data}
    return IndicatorSet.model_validate(data)


def _run_merge(
    args: argparse.Namespace, settings: Settings, audit: DecisionLogger | None
) -> Any:
    base = _load_indicator_set(args.base)
    candidate = _load_indicator_set(args.candidate)
    merged = merge_indicator_sets(base, candidate)
    return {
        "merged": merged,
        "base_average": base.average(),
        "merged_average": merged.average(),
        "regressions_blocked": regressions(base, candidate),
    }


def _run_document(
    args: argparse.Namespace, settings: Settings, audit: DecisionLogger | None
) -> Any:
    text = args.file.read_text(encoding="utf-8")
    job = args.job.read_text(encoding="utf-8") if args.job else None
    industry = args.industry or settings.industry
    return analyze_document(
        text,
        job,
        industry=industry,
        profile=get_profile(settings.document_profile),
    )


def _run_profiles(
    args: argparse.Namespace, settings: Settings, audit: DecisionLogger | None
) -> Any:
    profiles = [get_profile(name) for name in list_profiles()]
    return [
        {
            "name": p.name,
            "weights": dict(p.weights),
            "fallback": p.fallback,
            "description": p.description,
        }
        for p in profiles
    ]


_COMMANDS = {
    "analyze": _run_analyze,
    "arbitrate": _run_arbitrate,
    "batch": _run_batch,
    "merge": _run_merge,
    "document": _run_document,
    "profiles": _run_profiles,
}


if __name__ == "__main__":
    main()
