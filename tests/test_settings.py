"""gfs_settings.json + environment overrides."""

from __future__ import annotations

import json
from pathlib import Path

from gfs.core.settings import FractalSettings, find_project_settings_path
from gfs.core.version import DEFAULT_DEPTH, DEFAULT_INTERVAL_MS


def _write(dirpath: Path, data) -> Path:
    p = dirpath / "gfs_settings.json"
    p.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
    return p


def test_settings_file_is_found_from_subfolders(tmp_path: Path) -> None:
    p = _write(tmp_path, {})
    sub = tmp_path / "a" / "b"
    sub.mkdir(parents=True)
    assert find_project_settings_path(sub) == p.resolve()


def test_load_reads_json_values(tmp_path: Path) -> None:
    _write(tmp_path, {
        "fractal": {"depth": 7},
        "canvas": {"width": 300, "height": 200, "margin": 2},
        "viewer": {"interval_ms": 500, "max_depth": 8},
        "driver": {"golden_spiral": {"glyphs": {"square": True}, "secondarySpiral": False}},
    })
    s = FractalSettings.load(tmp_path, env={})
    assert s.depth == 7
    assert (s.canvas_w, s.canvas_h, s.margin) == (300.0, 200.0, 2.0)
    assert s.interval_ms == 500
    assert s.max_depth == 8
    assert s.driver_options == {"glyphs": {"square": True}, "secondarySpiral": False}
    assert s.source == (tmp_path / "gfs_settings.json").resolve()


def test_env_overrides_json(tmp_path: Path) -> None:
    _write(tmp_path, {"fractal": {"depth": 3}, "driver": {"golden_spiral": {"secondarySpiral": True}}})
    env = {"GFS_DEPTH": "9", "GFS_SECONDARY_SPIRAL": "off"}

    s = FractalSettings.load(tmp_path, env=env)
    assert s.depth == 9
    assert s.driver_options["secondarySpiral"] is False

    s = FractalSettings.load(tmp_path, env=env, prefer_env=False)
    assert s.depth == 3
    assert s.driver_options["secondarySpiral"] is True


def test_values_are_clamped_and_bad_json_is_ignored(tmp_path: Path) -> None:
    _write(tmp_path, {"fractal": {"depth": 500}, "viewer": {"interval_ms": "fast"}})
    s = FractalSettings.load(tmp_path, env={})
    assert s.depth == 30
    assert s.interval_ms == DEFAULT_INTERVAL_MS

    _write(tmp_path, "{ not json")
    s = FractalSettings.load(tmp_path, env={})
    assert s.depth == DEFAULT_DEPTH
    assert s.driver_options == {}
    assert s.source is None
