# signature/models/surface_settings.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

RGBA = Tuple[int, int, int, int]


def _hex_to_rgba(hexstr: str) -> RGBA:
    """
    Convert hex color (#RRGGBB or #RGB) into an opaque RGBA tuple for PIL.
    """
    s = (hexstr or "#000000").strip()
    if not s.startswith("#"):
        s = "#" + s
    if len(s) == 4:
        r = int(s[1] * 2, 16); g = int(s[2] * 2, 16); b = int(s[3] * 2, 16)
    elif len(s) == 7:
        r = int(s[1:3], 16); g = int(s[3:5], 16); b = int(s[5:7], 16)
    else:
        raise ValueError(f"Unsupported color {hexstr!r}")
    return (r, g, b, 255)


@dataclass(frozen=True)
class SurfaceSettings:
    """
    Size and pen of the signature surface.

    The width depends on the viewport class (narrow below the breakpoint),
    the height is constant. Both are fixed once a surface is built.
    """
    width_wide: int = 500
    width_narrow: int = 250
    narrow_breakpoint: int = 640
    height: int = 200
    stroke_color: str = "#ffffff"
    stroke_width: int = 2

    def width_for_viewport(self, viewport_width: int) -> int:
        return self.width_narrow if viewport_width < self.narrow_breakpoint else self.width_wide

    @property
    def stroke_rgba(self) -> RGBA:
        return _hex_to_rgba(self.stroke_color)

    @classmethod
    def from_config(cls, cfg) -> "SurfaceSettings":
        """Build from the ``[Signature]`` config section dataclass."""
        return cls(
            width_wide=int(cfg.width_wide),
            width_narrow=int(cfg.width_narrow),
            narrow_breakpoint=int(cfg.narrow_breakpoint),
            height=int(cfg.height),
            stroke_color=str(cfg.stroke_color),
            stroke_width=max(1, int(cfg.stroke_width)),
        )
