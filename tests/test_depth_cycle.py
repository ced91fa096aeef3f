"""Ping-pong depth sequence driving the demo loop."""

from __future__ import annotations

from itertools import islice

from gfs.ui.depth_cycle import DepthCycle


def test_bounces_between_one_and_max() -> None:
    assert list(islice(DepthCycle(3), 8)) == [1, 2, 3, 2, 1, 2, 3, 2]


def test_single_depth_cycle_is_constant() -> None:
    assert list(islice(DepthCycle(1), 3)) == [1, 1, 1]


def test_start_is_clamped() -> None:
    assert next(DepthCycle(4, start=9)) == 4
