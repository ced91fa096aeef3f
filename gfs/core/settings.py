# File: gfs/core/settings.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Settings del proyecto (gfs_settings.json) + overrides por variables de entorno.
# Notes: No depende de Qt. Nunca rompe por un JSON inválido: loggea y usa defaults.
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from gfs.core.version import (
    DEFAULT_CANVAS_PX,
    DEFAULT_DEPTH,
    DEFAULT_INTERVAL_MS,
    DEFAULT_MARGIN_PX,
    DEFAULT_MAX_DEPTH,
)

log = logging.getLogger(__name__)

# Archivo esperado: gfs_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "gfs_settings.json"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca gfs_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        _log.warning("%s: la raíz no es un objeto JSON, se ignora", p)
        return {}
    return data


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _coerce_int(v: Any, min_v: int, max_v: int, default: int) -> int:
    try:
        n = int(v)
    except (TypeError, ValueError):
        return int(default)
    if n < min_v:
        return min_v
    if n > max_v:
        return max_v
    return n


def _coerce_float(v: Any, min_v: float, max_v: float, default: float) -> float:
    try:
        f = float(v)
    except (TypeError, ValueError):
        return float(default)
    if f != f:  # NaN
        return float(default)
    return max(min_v, min(max_v, f))


def _coerce_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on", "si", "sí"):
            return True
        if s in ("0", "false", "no", "off"):
            return False
    if isinstance(v, (int, float)):
        return bool(v)
    return default


@dataclass
class FractalSettings:
    """Defaults reproducibles para la demo / el harness CLI."""

    depth: int = DEFAULT_DEPTH
    canvas_w: float = DEFAULT_CANVAS_PX[0]
    canvas_h: float = DEFAULT_CANVAS_PX[1]
    margin: float = DEFAULT_MARGIN_PX
    interval_ms: int = DEFAULT_INTERVAL_MS
    max_depth: int = DEFAULT_MAX_DEPTH
    # Opciones del driver (mismo formato que GoldenSpiralOptions.from_dict).
    driver_options: Dict[str, Any] = field(default_factory=dict)
    source: Optional[Path] = None

    @classmethod
    def load(cls, start: Path | None = None, *, prefer_env: bool = True,
             env: Optional[Dict[str, str]] = None) -> "FractalSettings":
        """gfs_settings.json (si existe) + variables de entorno.

        - Con `prefer_env=True` una env var seteada gana sobre el JSON.
        """
        env = os.environ if env is None else env
        data = load_project_settings(start)
        out = cls()
        out.source = find_project_settings_path(start) if data else None

        def _val(json_key: str, env_key: str) -> Any:
            raw_env = env.get(env_key)
            json_v = _deep_get(data, json_key)
            if raw_env not in (None, "") and (prefer_env or json_v is None):
                return raw_env
            return json_v

        out.depth = _coerce_int(_val("fractal.depth", "GFS_DEPTH"), 1, 30, out.depth)
        out.canvas_w = _coerce_float(_val("canvas.width", "GFS_CANVAS_W"), 1.0, 20000.0, out.canvas_w)
        out.canvas_h = _coerce_float(_val("canvas.height", "GFS_CANVAS_H"), 1.0, 20000.0, out.canvas_h)
        out.margin = _coerce_float(_deep_get(data, "canvas.margin"), 0.0, 1000.0, out.margin)
        out.interval_ms = _coerce_int(_val("viewer.interval_ms", "GFS_INTERVAL_MS"), 16, 60000, out.interval_ms)
        out.max_depth = _coerce_int(_val("viewer.max_depth", "GFS_MAX_DEPTH"), 1, 30, out.max_depth)

        opts = _deep_get(data, "driver.golden_spiral")
        out.driver_options = dict(opts) if isinstance(opts, dict) else {}
        sec = env.get("GFS_SECONDARY_SPIRAL")
        if sec not in (None, "") and (prefer_env or "secondarySpiral" not in out.driver_options):
            out.driver_options["secondarySpiral"] = _coerce_bool(sec, True)

        if data:
            log.info("Settings de proyecto aplicados desde %s", out.source)
        return out
