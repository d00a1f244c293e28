from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Optional

from core.i18n.translation_manager import T
from guests.logic.country_catalog import CountryCatalog
from guests.models.guest_entry import GuestEntry, Sex

SUGGESTION_LIMIT = 15

FieldChanged = Callable[[int, str, Any], None]


class GuestPanel(ttk.Frame):
    """
    One collapsible section of the guest accordion.

    The header toggles the body; the owner decides which panel is open.
    Field edits are reported through *on_field* as (index, field, value).
    """

    def __init__(self, parent: tk.Misc, index: int, *, catalog: CountryCatalog,
                 on_field: FieldChanged, on_toggle: Callable[[int], None],
                 entry: Optional[GuestEntry] = None) -> None:
        super().__init__(parent)
        self.index = index
        self._catalog = catalog
        self._on_field = on_field
        self._sex_labels = {T("guest.sex.male"): Sex.MALE, T("guest.sex.female"): Sex.FEMALE}
        entry = entry or GuestEntry()

        self.columnconfigure(0, weight=1)
        self._header = ttk.Button(self, command=lambda: on_toggle(self.index))
        self._header.grid(row=0, column=0, sticky="ew")

        self._body = ttk.Frame(self, padding=(12, 6))
        self._body.columnconfigure(1, weight=1)

        ttk.Label(self._body, text=T("guest.full_name")).grid(row=0, column=0, sticky="w", pady=2)
        self._name_var = tk.StringVar(value=entry.full_name)
        ttk.Entry(self._body, textvariable=self._name_var).grid(row=0, column=1, sticky="ew", pady=2)

        ttk.Label(self._body, text=T("guest.sex")).grid(row=1, column=0, sticky="w", pady=2)
        self._sex_var = tk.StringVar(value=self._label_for(entry.sex))
        sex_box = ttk.Combobox(self._body, textvariable=self._sex_var,
                               values=list(self._sex_labels), state="readonly")
        sex_box.grid(row=1, column=1, sticky="ew", pady=2)
        sex_box.bind("<<ComboboxSelected>>", self._on_sex)

        ttk.Label(self._body, text=T("guest.nationality")).grid(row=2, column=0, sticky="w", pady=2)
        self._nat_var = tk.StringVar(value=entry.nationality)
        self._nat_box = ttk.Combobox(self._body, textvariable=self._nat_var,
                                     values=[c.name for c in catalog.lookup_countries()])
        self._nat_box.grid(row=2, column=1, sticky="ew", pady=2)
        self._nat_box.bind("<KeyRelease>", self._on_nationality_typed)

        # traces are added last so the initial values are not echoed back
        self._name_var.trace_add("write", lambda *_: self._on_field(self.index, "full_name", self._name_var.get()))
        self._nat_var.trace_add("write", lambda *_: self._on_field(self.index, "nationality", self._nat_var.get()))

        self.set_expanded(False)

    def set_expanded(self, expanded: bool) -> None:
        marker = "▾" if expanded else "▸"
        self._header.configure(text=f"{marker} {T('registration.guest')} {self.index + 1}")
        if expanded:
            self._body.grid(row=1, column=0, sticky="ew")
        else:
            self._body.grid_remove()

    # --- Handlers -----------------------------------------------------------

    def _label_for(self, sex: Sex) -> str:
        for label, value in self._sex_labels.items():
            if value is sex:
                return label
        return ""

    def _on_sex(self, _e=None):
        sex = self._sex_labels.get(self._sex_var.get())
        if sex is not None:
            self._on_field(self.index, "sex", sex)

    def _on_nationality_typed(self, _e=None):
        # narrow the drop-down; any free text is still accepted
        hits = self._catalog.suggest(self._nat_var.get(), limit=SUGGESTION_LIMIT)
        self._nat_box.configure(values=[c.name for c in hits])
