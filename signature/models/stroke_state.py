# signature/models/stroke_state.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional

from .geometry import Point


@dataclass
class StrokeState:
    """
    Transient pen state of a capture session.

    Attributes:
        active (bool): True while a stroke is in progress (Drawing).
        last_point (Point | None): End of the last drawn segment.
        pointer_id: Pointer/touch that started the stroke; None for a mouse.
    """
    active: bool = False
    last_point: Optional[Point] = None
    pointer_id: Optional[Hashable] = None

    def reset(self) -> None:
        self.active = False
        self.last_point = None
        self.pointer_id = None
