from __future__ import annotations

import logging
import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from typing import Optional

from core.i18n.translation_manager import T
from ..exceptions.errors import UploadLimitError
from ..logic.upload_slot import UploadSlot

logger = logging.getLogger(__name__)


class UploadSlotWidget(ttk.LabelFrame):
    """File picker + list for one UploadSlot. Only paths are kept, files are never opened."""

    def __init__(self, parent: tk.Misc, slot: UploadSlot, *, title: str, hint: Optional[str] = None) -> None:
        super().__init__(parent, text=title, padding=8)
        self.slot = slot
        self.columnconfigure(0, weight=1)

        if hint:
            ttk.Label(self, text=hint, wraplength=460, justify="left").grid(row=0, column=0, columnspan=2, sticky="w")

        self._list = tk.Listbox(self, height=3, selectmode="extended")
        self._list.grid(row=1, column=0, sticky="ew", pady=4)

        btns = ttk.Frame(self)
        btns.grid(row=1, column=1, sticky="n", padx=(6, 0), pady=4)
        ttk.Button(btns, text=T("upload.add"), command=self._on_add).pack(fill="x")
        ttk.Button(btns, text=T("upload.remove"), command=self._on_remove).pack(fill="x", pady=(4, 0))

        self._count_var = tk.StringVar()
        ttk.Label(self, textvariable=self._count_var).grid(row=2, column=0, sticky="w")
        self._refresh()

    def _on_add(self):
        paths = filedialog.askopenfilenames(
            parent=self,
            title=self.cget("text"),
            filetypes=[(T("upload.images"), "*.png *.jpg *.jpeg *.gif *.bmp *.webp"), (T("upload.all"), "*.*")],
        )
        try:
            for p in paths:
                self.slot.add(p)
        except UploadLimitError as ex:
            logger.info("Upload refused: %s", ex)
            messagebox.showwarning(T("common.error"), T("upload.limit"), parent=self)
        self._refresh()

    def _on_remove(self):
        files = self.slot.files
        for i in self._list.curselection():
            self.slot.remove(files[i])
        self._refresh()

    def _refresh(self):
        self._list.delete(0, "end")
        for p in self.slot.files:
            self._list.insert("end", p.name)
        self._count_var.set(f"{self.slot.count}/{self.slot.max_files} {T('upload.files')}")
