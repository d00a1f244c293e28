# signature/models/geometry.py
from __future__ import annotations

from typing import NamedTuple


class Point(NamedTuple):
    """Pointer position relative to the surface's top-left corner."""
    x: float
    y: float
