"""Log level resolution for the entry points."""

from __future__ import annotations

import logging

import pytest

from gfs.utils.log import ENV_LOG_LEVEL, resolve_level


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        (" error ", logging.ERROR),
        ("15", 15),
        ("", logging.INFO),
        ("chatty", logging.INFO),
    ],
)
def test_resolve_level_from_env(raw: str, expected: int) -> None:
    assert resolve_level(logging.INFO, env={ENV_LOG_LEVEL: raw}) == expected


def test_resolve_level_without_env_keeps_default() -> None:
    assert resolve_level(logging.WARNING, env={}) == logging.WARNING
