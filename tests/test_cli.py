from __future__ import annotations

import os
import re
import subprocess
import sys
from pathlib import Path

import pytest

from ringtarget.cli import build_parser, config_from_args, main


PACKAGE_SRC = Path(__file__).resolve().parents[1] / "python"


def _run(argv: list[str]) -> int:
    try:
        return main(argv)
    except SystemExit as exc:
        return int(exc.code)


def test_parser_defaults() -> None:
    cfg = config_from_args(build_parser().parse_args([]))
    assert cfg.size == "8.5x11"
    assert cfg.margin_in == 0.25
    assert cfg.output == Path("target.pdf")
    assert (cfg.rings, cfg.inner_rings, cfg.outer_rings) == (8, 3, 2)
    assert cfg.line_width_in == 0.05
    assert cfg.background is False


def test_parser_all_flags() -> None:
    args = build_parser().parse_args(
        ["-s", "11x17", "-m", "0.5", "-o", "big.pdf", "-r", "10", "-I", "4", "-O", "3", "-l", "0.02", "-b"]
    )
    cfg = config_from_args(args)
    assert (cfg.width_in, cfg.height_in) == (11.0, 17.0)
    assert cfg.margin_in == 0.5
    assert cfg.output == Path("big.pdf")
    assert (cfg.rings, cfg.inner_rings, cfg.outer_rings) == (10, 4, 3)
    assert cfg.line_width_in == 0.02
    assert cfg.background is True


def test_default_run_writes_letter_pdf(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run([]) == 0

    out = workdir / "target.pdf"
    data = out.read_bytes()
    assert data.startswith(b"%PDF")
    assert len(re.findall(rb"/Type\s*/Page(?![A-Za-z])", data)) == 1
    assert "Wrote target.pdf" in capsys.readouterr().out


def test_output_flag(workdir: Path) -> None:
    assert _run(["-o", "custom.pdf", "-b", "-s", "11x8.5"]) == 0
    assert (workdir / "custom.pdf").exists()
    assert not (workdir / "target.pdf").exists()


def test_size_without_separator_is_usage_error(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["-s", "8.5"]) == 2
    err = capsys.readouterr().err
    assert "usage:" in err
    assert not (workdir / "target.pdf").exists()


@pytest.mark.parametrize(
    "argv",
    [
        ["-x"],
        ["-r", "eight"],
        ["-m", "1/4"],
        ["-l", ""],
        ["-r", "4", "-I", "3", "-O", "2"],
        ["-m", "5"],
        ["-r"],
        ["-l", "nan"],
        ["-m", "nan"],
        ["-s", "infx11"],
        ["-s", "8.5xnan"],
        ["-m", "inf"],
    ],
)
def test_usage_errors_exit_2(workdir: Path, argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(argv) == 2
    assert "usage:" in capsys.readouterr().err
    assert not (workdir / "target.pdf").exists()


def test_missing_image_exits_1(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.chdir(tmp_path)
    assert _run([]) == 1
    err = capsys.readouterr().err
    assert "Could not load image koi.png" in err
    assert not (tmp_path / "target.pdf").exists()


def test_unwritable_output_exits_1(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["-o", str(workdir / "no" / "such" / "dir.pdf")]) == 1
    assert "Operation failed" in capsys.readouterr().err


def test_module_entry_point(workdir: Path) -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PACKAGE_SRC), env.get("PYTHONPATH")]))
    proc = subprocess.run(
        [sys.executable, "-m", "ringtarget", "-s", "8.5"],
        cwd=workdir,
        env=env,
        capture_output=True,
        text=True,
    )
    assert proc.returncode == 2
    assert "usage:" in proc.stderr


def test_batch_tool_renders_each_size(workdir: Path) -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PACKAGE_SRC), env.get("PYTHONPATH")]))
    script = PACKAGE_SRC.parent / "tools" / "gen_targets.py"
    proc = subprocess.run(
        [sys.executable, str(script), "--out_dir", "out", "--sizes", "8.5x11", "11x8.5"],
        cwd=workdir,
        env=env,
        capture_output=True,
        text=True,
    )
    assert proc.returncode == 0, proc.stderr
    assert (workdir / "out" / "target-8.5x11.pdf").exists()
    assert (workdir / "out" / "target-11x8.5.pdf").exists()


def test_batch_tool_rejects_page_too_small(workdir: Path) -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PACKAGE_SRC), env.get("PYTHONPATH")]))
    script = PACKAGE_SRC.parent / "tools" / "gen_targets.py"
    proc = subprocess.run(
        [sys.executable, str(script), "--out_dir", "out", "--sizes", "0.5x0.5"],
        cwd=workdir,
        env=env,
        capture_output=True,
        text=True,
    )
    assert proc.returncode == 2
    assert "no room" in proc.stderr
    assert "Traceback" not in proc.stderr
    assert not (workdir / "out" / "target-0.5x0.5.pdf").exists()
