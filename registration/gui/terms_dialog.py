from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from core.i18n.translation_manager import T
from ..logic.terms import TERMS_CLAUSES, TERMS_TITLE


class TermsDialog(tk.Toplevel):
    """
    Read-only modal window with the rental terms.
    Usage:
        dlg = TermsDialog(parent)
        parent.wait_window(dlg)
    """
    def __init__(self, parent: tk.Misc) -> None:
        super().__init__(parent)
        self.title(TERMS_TITLE)
        self.transient(parent)
        self.grab_set()
        self.resizable(False, False)

        ttk.Label(self, text=TERMS_TITLE, font=("Segoe UI", 12, "bold"))\
            .grid(row=0, column=0, padx=10, pady=(10, 6), sticky="w")
        for row, clause in enumerate(TERMS_CLAUSES, start=1):
            ttk.Label(self, text=clause, wraplength=480, justify="left")\
                .grid(row=row, column=0, padx=10, pady=2, sticky="w")

        btns = ttk.Frame(self); btns.grid(row=len(TERMS_CLAUSES) + 1, column=0, padx=10, pady=(8, 10), sticky="e")
        ttk.Button(btns, text=T("common.close"), command=self.destroy).pack(side="right")

        self.columnconfigure(0, weight=1)
        self.bind("<Escape>", lambda e: self.destroy())
        self.bind("<Return>", lambda e: self.destroy())
