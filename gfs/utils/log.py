# File: gfs/utils/log.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.1
# Status: stable
# Date: 2026-10-19
# Purpose: Logging centralizado (consola + archivo) y helpers.
# Notes:
# - Se llama una sola vez desde los entry-points (app / render_cli).
# - GFS_LOG_LEVEL (nombre o número) pisa el nivel pedido por el entry-point.
# - El engine loguea cada nivel en DEBUG; en INFO solo queda el resumen del draw().
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

_LOGGER_CONFIGURED = False

LOG_FILENAME = "gfs.log"
ENV_LOG_LEVEL = "GFS_LOG_LEVEL"


def resolve_level(default: int, env: Optional[Mapping[str, str]] = None) -> int:
    """Nivel efectivo: GFS_LOG_LEVEL ('debug', 'WARNING', '10') o `default`."""
    env = os.environ if env is None else env
    raw = (env.get(ENV_LOG_LEVEL) or "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    lvl = logging.getLevelName(raw.upper())
    return lvl if isinstance(lvl, int) else default


def setup_logging(log_dir: str | os.PathLike | None = "logs", level: int = logging.INFO) -> None:
    """Configura logging en consola + archivo.

    Nota:
        - No lanza excepción si no puede escribir el archivo; cae a consola.
        - `log_dir=None` deja solo la consola (útil en el harness CLI).
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    level = resolve_level(level)
    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(d / LOG_FILENAME, encoding="utf-8"))
        except OSError as e:
            logging.getLogger(__name__).warning("Sin log a archivo (%s): %s", log_dir, e)

    for h in handlers:
        h.setLevel(level)
        h.setFormatter(fmt)
        root.addHandler(h)

    _LOGGER_CONFIGURED = True
    logging.getLogger(__name__).debug(
        "logging listo: level=%s archivo=%s", logging.getLevelName(level), log_dir or "-"
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
