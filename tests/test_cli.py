"""Tests for CLI argument parsing and command output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from cvarbiter import __version__
from cvarbiter.cli import _build_parser, main


@pytest.fixture(autouse=True)
def _isolated_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep Settings from reading a developer's .env file."""
    monkeypatch.chdir(tmp_path)


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> Any:
    main(list(argv))
    return json.loads(capsys.readouterr().out)


class TestArgParser:
    def test_version_flag(self) -> None:
        args = _build_parser().parse_args(["--version"])
        assert args.version is True

    def test_no_command(self) -> None:
        args = _build_parser().parse_args([])
        assert args.command is None

    def test_document_options(self) -> None:
        args = _build_parser().parse_args(
            ["document", "cv.txt", "--job", "jd.txt", "--industry", "finance"]
        )
        assert args.file == Path("cv.txt")
        assert args.job == Path("jd.txt")
        assert args.industry == "finance"


def test_version_output(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--version"])
    assert capsys.readouterr().out.strip() == f"cvarbiter {__version__}"


def test_analyze(capsys: pytest.CaptureFixture[str], weak_bullet: str) -> None:
    out = _run(capsys, "analyze", weak_bullet)
    assert out["total_score"] == 33
    assert out["ats"]["score"] == 45


def test_analyze_too_short(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["analyze", "Led"])
    assert exc_info.value.code == 2
    assert "too short to score" in capsys.readouterr().err


def test_arbitrate_with_audit_log(
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
    weak_bullet: str,
    strong_bullet: str,
) -> None:
    out = _run(
        capsys, "--log-dir", str(tmp_path / "audit"), "arbitrate", weak_bullet, strong_bullet
    )
    assert out["winner"] == "tailored"
    assert out["score_delta"] == 50
    log_lines = (tmp_path / "audit" / "decisions.log").read_text().splitlines()
    assert json.loads(log_lines[0])["winner"] == "tailored"


def test_audit_flag_uses_configured_log_dir(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    weak_bullet: str,
    strong_bullet: str,
) -> None:
    monkeypatch.setenv("CVARBITER_LOG_DIR", str(tmp_path / "configured"))
    _run(capsys, "--audit", "arbitrate", weak_bullet, strong_bullet)
    log_lines = (tmp_path / "configured" / "decisions.log").read_text().splitlines()
    assert json.loads(log_lines[0])["type"] == "decision"


def test_no_audit_log_by_default(
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
    weak_bullet: str,
    strong_bullet: str,
) -> None:
    _run(capsys, "arbitrate", weak_bullet, strong_bullet)
    assert not (tmp_path / "logs").exists()


def test_batch(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    path = tmp_path / "batch.json"
    path.write_text(
        json.dumps({
            "originals": ["Increased retention by 40%"],
            "candidates": ["Improved retention"],
        })
    )
    out = _run(capsys, "batch", str(path))
    assert out["optimised_bullets"] == ["Increased retention by 40%"]
    assert out["methodology_preserved"] is True


def test_batch_concurrent_matches_sequential(
    capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    path = tmp_path / "batch.json"
    path.write_text(
        json.dumps({
            "originals": ["Managed the product roadmap", "Improved retention"],
            "candidates": ["Led the product roadmap", "Increased retention by 40%"],
        })
    )
    sequential = _run(capsys, "batch", str(path))
    concurrent = _run(capsys, "batch", str(path), "--concurrent")
    assert concurrent == sequential


def test_batch_invalid_json(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    path = tmp_path / "batch.json"
    path.write_text("{not json")
    with pytest.raises(SystemExit) as exc_info:
        main(["batch", str(path)])
    assert exc_info.value.code == 2
    assert "invalid JSON" in capsys.readouterr().err


def test_merge(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    base = tmp_path / "base.json"
    candidate = tmp_path / "candidate.json"
    base.write_text(
        json.dumps({
            "entries": [
                {"dimension_id": 1, "name": "Job Knowledge", "score": 6},
                {"dimension_id": 2, "name": "Problem-Solving", "score": 8},
            ]
        })
    )
    candidate.write_text(
        json.dumps([
            {"dimension_id": 1, "name": "Job Knowledge", "score": 9},
            {"dimension_id": 2, "name": "Problem-Solving", "score": 4},
        ])
    )
    out = _run(capsys, "merge", str(base), str(candidate))
    assert [e["score"] for e in out["merged"]["entries"]] == [9, 8]
    assert out["merged_average"] >= out["base_average"]
    assert [r["dimension_id"] for r in out["regressions_blocked"]] == [2]


def test_document(
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
    sample_cv: str,
    sample_job: str,
) -> None:
    cv = tmp_path / "cv.txt"
    jd = tmp_path / "jd.txt"
    cv.write_text(sample_cv)
    jd.write_text(sample_job)
    out = _run(capsys, "document", str(cv), "--job", str(jd), "--industry", "technology")
    assert out["score"]["profile"] == "document.holy_trinity"
    assert out["industry"] == "technology"


def test_document_unknown_industry(
    capsys: pytest.CaptureFixture[str], tmp_path: Path, sample_cv: str
) -> None:
    cv = tmp_path / "cv.txt"
    cv.write_text(sample_cv)
    with pytest.raises(SystemExit) as exc_info:
        main(["document", str(cv), "--industry", "aerospace"])
    assert exc_info.value.code == 2
    assert "unknown weight profile" in capsys.readouterr().err


def test_unknown_profile(capsys: pytest.CaptureFixture[str], weak_bullet: str) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["analyze", weak_bullet, "--profile", "nope"])
    assert exc_info.value.code == 2


def test_profiles(capsys: pytest.CaptureFixture[str]) -> None:
    out = _run(capsys, "profiles")
    names = [p["name"] for p in out]
    assert "bullet.four_stage" in names
    assert "document.holy_trinity" in names
    assert "industry.finance" in names
