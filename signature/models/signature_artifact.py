# signature/models/signature_artifact.py
from __future__ import annotations

import base64
import hashlib
import io
from dataclasses import dataclass

from PIL import Image

PNG_MIME = "image/png"


@dataclass(frozen=True)
class SignatureArtifact:
    """
    PNG snapshot of the whole signature surface, taken when a stroke ends.

    The bytes are immutable, so observers may keep an artifact for as long as
    they like while drawing continues on the surface.
    """
    png_bytes: bytes
    width: int
    height: int

    @property
    def data_url(self) -> str:
        """``data:image/png;base64,...`` form, as placed in the submission payload."""
        return f"data:{PNG_MIME};base64," + base64.b64encode(self.png_bytes).decode("ascii")

    @property
    def sha256(self) -> str:
        return hashlib.sha256(self.png_bytes).hexdigest()

    def to_image(self) -> Image.Image:
        """Decode into a new RGBA Pillow image."""
        with Image.open(io.BytesIO(self.png_bytes)) as img:
            return img.convert("RGBA")

    def __len__(self) -> int:
        return len(self.png_bytes)

    @classmethod
    def from_data_url(cls, data_url: str) -> "SignatureArtifact":
        prefix = f"data:{PNG_MIME};base64,"
        if not data_url.startswith(prefix):
            raise ValueError("Not a PNG data URL")
        raw = base64.b64decode(data_url[len(prefix):])
        with Image.open(io.BytesIO(raw)) as img:
            width, height = img.size
        return cls(png_bytes=raw, width=width, height=height)
