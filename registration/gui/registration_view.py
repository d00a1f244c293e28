"""
RegistrationView (Tkinter)
--------------------------
The whole guest registration form on one scrollable-free page:

- guest count selector and an accordion of guest panels
- identification upload, marriage certificate upload (only while required)
- terms acceptance with a link to the clauses
- signature pad and submit button

All state lives in RegistrationForm; the view only forwards user input and
re-renders on roster events.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox, ttk
from typing import Any, Callable, Dict, List, Optional

from core.i18n.translation_manager import T
from guests.logic.country_catalog import CountryCatalog
from guests.models.roster_state import RosterChangedEvent
from signature.gui.signature_pad import SignaturePad
from signature.models.surface_settings import SurfaceSettings

from ..exceptions.errors import SubmissionRejectedError
from ..logic.registration_form import RegistrationForm
from ..logic.terms import ACCEPTANCE_TOKEN
from .guest_panel import GuestPanel
from .terms_dialog import TermsDialog
from .upload_slot_widget import UploadSlotWidget

logger = logging.getLogger(__name__)


class RegistrationView(ttk.Frame):
    """Mount into any container; the caller owns and closes the form."""

    def __init__(self, parent: tk.Misc, form: RegistrationForm, *,
                 catalog: Optional[CountryCatalog] = None,
                 signature_settings: Optional[SurfaceSettings] = None,
                 sink: Optional[Callable[[Dict[str, Any]], None]] = None,
                 on_submitted: Optional[Callable[[Dict[str, Any]], None]] = None) -> None:
        super().__init__(parent, padding=12)
        self._form = form
        self._catalog = catalog or CountryCatalog()
        self._sink = sink or (lambda payload: None)
        self._on_submitted = on_submitted
        self._panels: List[GuestPanel] = []
        self._expanded: Optional[int] = None

        self._build_ui(signature_settings)
        self._sync_panels()
        self._toggle_panel(0)
        self._show_certificate(form.requires_marriage_certificate)

        form.subscribe_roster(self._on_roster_changed)
        self.bind("<Destroy>", self._on_destroy, add="+")

    # --- UI -----------------------------------------------------------------

    def _build_ui(self, signature_settings: Optional[SurfaceSettings]) -> None:
        self.columnconfigure(0, weight=1)

        count_row = ttk.Frame(self)
        count_row.grid(row=0, column=0, sticky="w", pady=(0, 8))
        ttk.Label(count_row, text=T("registration.guest_count")).pack(side="left")
        self._count_var = tk.StringVar(value=str(self._form.guest_count))
        count_box = ttk.Combobox(count_row, textvariable=self._count_var, width=4, state="readonly",
                                 values=[str(n) for n in self._form.allowed_guest_counts])
        count_box.pack(side="left", padx=(6, 0))
        count_box.bind("<<ComboboxSelected>>", self._on_count_selected)

        self._guests_frame = ttk.LabelFrame(self, text=T("registration.guests"), padding=6)
        self._guests_frame.grid(row=1, column=0, sticky="ew")
        self._guests_frame.columnconfigure(0, weight=1)

        UploadSlotWidget(self, self._form.identification,
                         title=T("registration.identification"),
                         hint=T("registration.identification.hint")).grid(row=2, column=0, sticky="ew", pady=(8, 0))
        self._certificate = UploadSlotWidget(self, self._form.marriage_certificate,
                                             title=T("registration.marriage_certificate"),
                                             hint=T("registration.marriage_certificate.hint"))
        self._certificate.grid(row=3, column=0, sticky="ew", pady=(8, 0))

        terms_row = ttk.Frame(self)
        terms_row.grid(row=4, column=0, sticky="w", pady=(8, 0))
        self._terms_var = tk.StringVar(value="")
        ttk.Radiobutton(terms_row, text=T("registration.terms.accept"), value=ACCEPTANCE_TOKEN,
                        variable=self._terms_var, command=self._on_terms).pack(side="left")
        link = ttk.Label(terms_row, text=T("registration.terms.read"), foreground="#1d4ed8", cursor="hand2")
        link.pack(side="left", padx=(8, 0))
        link.bind("<Button-1>", lambda _e: self._open_terms())

        sig = ttk.LabelFrame(self, text=T("registration.signature"), padding=6)
        sig.grid(row=5, column=0, sticky="ew", pady=(8, 0))
        ttk.Label(sig, text=T("registration.signature.hint")).grid(row=0, column=0, sticky="w")
        self._pad = SignaturePad(sig, settings=signature_settings, on_clear=self._form.discard_signature)
        self._pad.grid(row=1, column=0, sticky="w")
        self._form.attach_signature(self._pad.surface)

        ttk.Button(self, text=T("registration.submit"), command=self._on_submit)\
            .grid(row=6, column=0, sticky="e", pady=(12, 0))

    # --- Roster -------------------------------------------------------------

    def _on_count_selected(self, _e=None):
        self._form.set_guest_count(int(self._count_var.get()))

    def _on_roster_changed(self, ev: RosterChangedEvent) -> None:
        if ev.type == "resized":
            self._sync_panels()
        self._show_certificate(ev.state.requires_marriage_certificate)

    def _sync_panels(self) -> None:
        """Add or drop panels at the tail so there is one per guest."""
        guests = self._form.roster
        while len(self._panels) > len(guests):
            self._panels.pop().destroy()
        for i in range(len(self._panels), len(guests)):
            panel = GuestPanel(self._guests_frame, i, catalog=self._catalog, entry=guests[i],
                               on_field=self._form.update_guest, on_toggle=self._toggle_panel)
            panel.grid(row=i, column=0, sticky="ew", pady=1)
            self._panels.append(panel)
        if self._expanded is not None and self._expanded >= len(self._panels):
            self._expanded = None

    def _toggle_panel(self, index: int) -> None:
        """Accordion: open *index* and close the others; clicking the open one closes it."""
        self._expanded = None if self._expanded == index else index
        for panel in self._panels:
            panel.set_expanded(panel.index == self._expanded)

    def _show_certificate(self, required: bool) -> None:
        if required:
            self._certificate.grid()
        else:
            self._certificate.grid_remove()

    # --- Terms / submit -----------------------------------------------------

    def _on_terms(self):
        self._form.accept_terms(self._terms_var.get())

    def _open_terms(self):
        dlg = TermsDialog(self.winfo_toplevel())
        self.wait_window(dlg)

    def _on_submit(self):
        try:
            payload = self._form.submit(self._sink)
        except SubmissionRejectedError as ex:
            lines = "\n".join(f"- {issue.message}" for issue in ex.issues)
            messagebox.showerror(T("common.error"), f"{T('registration.rejected')}\n\n{lines}", parent=self)
            return
        messagebox.showinfo(T("registration.submit"), T("registration.submitted"), parent=self)
        if self._on_submitted is not None:
            self._on_submitted(payload)

    def _on_destroy(self, e):
        if e.widget is self:
            self._form.detach_signature()
            self._form.unsubscribe_roster(self._on_roster_changed)
