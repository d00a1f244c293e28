"""Signature capture exceptions."""
from __future__ import annotations


class SignatureCaptureError(Exception):
    """Base exception for the signature capture feature."""


class StaleMoveEventError(SignatureCaptureError):
    """A pointer-move arrived while no stroke is in progress (or from another pointer)."""


class ImageEncodingFailure(SignatureCaptureError):
    """The drawing surface could not be encoded into an image artifact."""


class SurfaceClosedError(SignatureCaptureError, RuntimeError):
    """The surface has been closed and its raster released."""
