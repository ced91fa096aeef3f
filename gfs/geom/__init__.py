"""Geometry helpers.

Pure functions only (transform strings, path commands, color ramp, length
parsing). Nothing here touches the node tree.
"""

from __future__ import annotations
