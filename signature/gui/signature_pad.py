# signature/gui/signature_pad.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from core.i18n.translation_manager import T
from ..logic.signature_surface import SignatureSurface, StrokeCompleteCallback
from ..models.surface_settings import SurfaceSettings


class SignaturePad(ttk.Frame):
    """
    Tk front-end of a SignatureSurface.

    Mouse events are forwarded to the surface, which owns the raster and the
    stroke state; the canvas only mirrors the segments for the user. The
    surface size is chosen once from the screen width and never changes.
    """
    CANVAS_BG = "#2e1065"

    def __init__(self, parent: tk.Misc, *, settings: Optional[SurfaceSettings] = None,
                 on_change: Optional[StrokeCompleteCallback] = None,
                 on_clear: Optional[Callable[[], None]] = None) -> None:
        super().__init__(parent)
        self._settings = settings or SurfaceSettings()
        self._on_clear = on_clear
        self.surface = SignatureSurface.for_viewport(self.winfo_screenwidth(), self._settings)
        if on_change is not None:
            self.surface.on_stroke_complete(on_change)

        w, h = self.surface.size
        self.columnconfigure(0, weight=1)

        # Canvas
        self.canvas = tk.Canvas(
            self, width=w, height=h, bg=self.CANVAS_BG,
            highlightthickness=1, highlightbackground="#888"
        )
        self.canvas.grid(row=0, column=0, sticky="w", pady=4)
        self.canvas.bind("<ButtonPress-1>", self._on_down)
        self.canvas.bind("<B1-Motion>", self._on_move)
        self.canvas.bind("<ButtonRelease-1>", self._on_up)
        self.canvas.bind("<Leave>", self._on_leave)

        bar = ttk.Frame(self)
        bar.grid(row=1, column=0, sticky="w")
        ttk.Button(bar, text=T("signature.clear") or "Clear", command=self.clear).pack(side="left")

        self.bind("<Destroy>", self._on_destroy, add="+")

    # Canvas handlers
    def _on_down(self, e):
        self.surface.pointer_down(e.x, e.y)

    def _on_move(self, e):
        start = self.surface.last_point
        if self.surface.pointer_move(e.x, e.y) and start is not None:
            self.canvas.create_line(
                start.x, start.y, e.x, e.y,
                fill=self._settings.stroke_color,
                width=self._settings.stroke_width,
                capstyle="round",
            )

    def _on_up(self, e):
        self.surface.pointer_up()

    def _on_leave(self, e):
        self.surface.pointer_leave()

    # Actions
    def clear(self):
        self.canvas.delete("all")
        self.surface.clear()
        if self._on_clear is not None:
            self._on_clear()

    def _on_destroy(self, e):
        if e.widget is self and not self.surface.closed:
            self.surface.close()
