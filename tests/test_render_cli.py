"""Headless render harness."""

from __future__ import annotations

from pathlib import Path

import pytest

from gfs.svg import render_cli


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    for key in ("GFS_DEPTH", "GFS_CANVAS_W", "GFS_CANVAS_H", "GFS_SECONDARY_SPIRAL"):
        monkeypatch.delenv(key, raising=False)


def test_writes_svg(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "f.svg"
    rc = render_cli.main(["--out", str(out), "--depth", "3", "--square", "--rectangle"])

    assert rc == 0
    text = out.read_text(encoding="utf-8")
    assert "gs-square" in text and "gs-rect" in text and "gs-spiral" in text
    assert "depth=3" in capsys.readouterr().out


def test_sweep_and_flags(tmp_path: Path) -> None:
    out = tmp_path / "sweep.svg"
    rc = render_cli.main(["--out", str(out), "--depth", "4", "--sweep", "--no-secondary", "--bezier"])

    assert rc == 0
    text = out.read_text(encoding="utf-8")
    assert "depth-3" in text
    assert " Q " in text
    assert "depth-4" not in text


def test_bad_dimensions_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = render_cli.main(["--out", str(tmp_path / "x.svg"), "--width", "500", "--height", "100"])

    assert rc == 2
    assert "ERROR" in capsys.readouterr().out
    assert not (tmp_path / "x.svg").exists()


def test_png_render(tmp_path: Path) -> None:
    pytest.importorskip("PySide6.QtSvg")
    png = tmp_path / "f.png"

    rc = render_cli.main(["--out", str(tmp_path / "f.svg"), "--depth", "2", "--png", str(png)])

    assert rc == 0
    assert png.exists()
    assert png.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
