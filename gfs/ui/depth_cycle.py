# File: gfs/ui/depth_cycle.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Secuencia ping-pong de profundidades para el loop de la demo (1 -> max -> 1 ...).
# Notes: Sin Qt, para poder testearla sola.
from __future__ import annotations


class DepthCycle:
    """Devuelve la próxima profundidad en cada `next()`; rebota en 1 y en `max_depth`."""

    def __init__(self, max_depth: int = 10, start: int = 1) -> None:
        self.max_depth = max(1, int(max_depth))
        self.depth = min(max(1, int(start)), self.max_depth)
        self.inc = 1

    def __iter__(self) -> "DepthCycle":
        return self

    def __next__(self) -> int:
        current = self.depth
        if self.max_depth == 1:
            return current
        self.depth += self.inc
        if self.depth >= self.max_depth:
            self.depth = self.max_depth
            self.inc = -1
        elif self.depth <= 1:
            self.depth = 1
            self.inc = 1
        return current
