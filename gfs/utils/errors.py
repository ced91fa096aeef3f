# File: gfs/utils/errors.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Errores tipados del proyecto.
# Notes: Todos son fatales para el caller; el engine no reintenta.
from __future__ import annotations


class GfsError(Exception):
    """Error base del proyecto."""


class GfsConfigError(GfsError):
    """Configuración inválida (falta driver, falta nodo inicial, opciones mal formadas)."""


class GfsInvalidDimensions(GfsError):
    """El nodo inicial no tiene un ancho/alto utilizable (o excede la proporción áurea)."""


class GfsDriverContractError(GfsError):
    """El driver y el engine no coinciden en el contrato (índice inesperado, lista vacía...).

    Es un bug del driver, no una condición de runtime.
    """


class GfsIOError(GfsError):
    """Error de E/S (export SVG / render PNG)."""
