# signature/logic/signature_surface.py
"""
Freehand signature surface (no UI).

Pointer events from any source (Tk mouse bindings, touch, tests) drive a
two-state machine:

    Idle    --pointer_down-->          Drawing  (remember the point, draw nothing)
    Drawing --pointer_move-->          Drawing  (one segment last_point -> point)
    Drawing --pointer_up / _leave-->   Idle     (encode raster, notify observer)

The Pillow raster accumulates all strokes until clear(). Raw points are not
kept; the raster is the only state.
"""
from __future__ import annotations

import io
import logging
from typing import Callable, Hashable, Optional

from PIL import Image, ImageDraw

from ..exceptions.errors import ImageEncodingFailure, StaleMoveEventError, SurfaceClosedError
from ..models.geometry import Point
from ..models.signature_artifact import SignatureArtifact
from ..models.stroke_state import StrokeState
from ..models.surface_settings import SurfaceSettings

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)

# Receives the new artifact, or None when the surface could not be encoded.
StrokeCompleteCallback = Callable[[Optional[SignatureArtifact]], None]


class SignatureSurface:
    """Raster drawing surface with an Idle/Drawing stroke state machine."""

    def __init__(self, width: int, height: int, *,
                 stroke_color: str = "#ffffff", stroke_width: int = 2) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Surface size must not be negative, got {width}x{height}")
        self._size = (int(width), int(height))
        pen = SurfaceSettings(stroke_color=stroke_color, stroke_width=stroke_width)
        self._stroke_rgba = pen.stroke_rgba
        self._stroke_width = max(1, int(stroke_width))
        self._state = StrokeState()
        self._observer: Optional[StrokeCompleteCallback] = None
        self._image: Optional[Image.Image] = Image.new("RGBA", self._size, TRANSPARENT)
        self._draw: Optional[ImageDraw.ImageDraw] = ImageDraw.Draw(self._image)

    @classmethod
    def for_viewport(cls, viewport_width: int, settings: Optional[SurfaceSettings] = None) -> "SignatureSurface":
        """Build a surface sized for the viewport class of *viewport_width*."""
        s = settings or SurfaceSettings()
        return cls(s.width_for_viewport(viewport_width), s.height,
                   stroke_color=s.stroke_color, stroke_width=s.stroke_width)

    # -------- Read-only views -----------------------------------------------
    @property
    def size(self) -> tuple[int, int]:
        return self._size

    @property
    def is_drawing(self) -> bool:
        return self._state.active

    @property
    def last_point(self) -> Optional[Point]:
        return self._state.last_point

    @property
    def is_blank(self) -> bool:
        img = self._require_image()
        return img.getchannel("A").getbbox() is None

    @property
    def closed(self) -> bool:
        return self._image is None

    # -------- Observer ------------------------------------------------------
    def on_stroke_complete(self, callback: Optional[StrokeCompleteCallback]) -> None:
        """Register the single stroke-complete observer (replaces any previous one)."""
        self._observer = callback

    # -------- Transitions ---------------------------------------------------
    def pointer_down(self, x: float, y: float, pointer_id: Optional[Hashable] = None) -> bool:
        """
        Start a stroke at (x, y). Returns False if a stroke is already running,
        in which case the event is ignored.
        """
        self._require_image()
        if self._state.active:
            return False
        self._state.active = True
        self._state.last_point = Point(x, y)
        self._state.pointer_id = pointer_id
        return True

    def pointer_move(self, x: float, y: float, pointer_id: Optional[Hashable] = None) -> bool:
        """Extend the stroke to (x, y). Returns False when the event was dropped."""
        try:
            self._segment_to(Point(x, y), pointer_id)
        except StaleMoveEventError as ex:
            logger.debug("Dropped pointer move: %s", ex)
            return False
        return True

    def pointer_up(self, pointer_id: Optional[Hashable] = None) -> Optional[SignatureArtifact]:
        """
        End the stroke and publish the encoded surface.

        Returns the artifact handed to the observer; None when no stroke was in
        progress or when encoding failed.
        """
        self._require_image()
        if not self._state.active or not self._same_pointer(pointer_id):
            return None
        self._state.reset()

        try:
            artifact: Optional[SignatureArtifact] = self.encode()
        except ImageEncodingFailure as ex:
            logger.error("Signature could not be encoded: %s", ex)
            artifact = None

        if self._observer is not None:
            self._observer(artifact)
        return artifact

    def pointer_leave(self, pointer_id: Optional[Hashable] = None) -> Optional[SignatureArtifact]:
        """Leaving the surface ends the stroke like a release."""
        return self.pointer_up(pointer_id)

    # -------- Actions -------------------------------------------------------
    def clear(self) -> None:
        """Blank the raster and drop any running stroke. Does not notify."""
        self._require_image().close()
        self._image = Image.new("RGBA", self._size, TRANSPARENT)
        self._draw = ImageDraw.Draw(self._image)
        self._state.reset()

    def encode(self) -> SignatureArtifact:
        """Encode the whole raster as PNG."""
        img = self._require_image()
        w, h = self._size
        if w == 0 or h == 0:
            raise ImageEncodingFailure(f"Cannot encode a {w}x{h} surface")
        buf = io.BytesIO()
        try:
            img.save(buf, format="PNG")
        except (OSError, ValueError) as ex:
            raise ImageEncodingFailure(str(ex)) from ex
        return SignatureArtifact(png_bytes=buf.getvalue(), width=w, height=h)

    def close(self) -> None:
        """Deregister the observer and release the raster."""
        self._observer = None
        self._state.reset()
        self._draw = None
        if self._image is not None:
            self._image.close()
            self._image = None

    # -------- Internal helpers ----------------------------------------------
    def _require_image(self) -> Image.Image:
        if self._image is None:
            raise SurfaceClosedError("Signature surface has been closed")
        return self._image

    def _same_pointer(self, pointer_id: Optional[Hashable]) -> bool:
        # None is an id of its own (mouse); it never matches a tagged pointer
        return pointer_id == self._state.pointer_id

    def _segment_to(self, point: Point, pointer_id: Optional[Hashable]) -> None:
        self._require_image()
        if not self._state.active or self._state.last_point is None:
            raise StaleMoveEventError(f"move to {tuple(point)} while idle")
        if not self._same_pointer(pointer_id):
            raise StaleMoveEventError(f"move from pointer {pointer_id!r} during another stroke")
        self._draw.line([self._state.last_point, point], fill=self._stroke_rgba, width=self._stroke_width)
        self._state.last_point = point
