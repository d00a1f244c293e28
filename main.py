import json
import logging
import tkinter as tk
from tkinter import Frame, Label, X

from core.config.config_service import config_service
from core.i18n.translation_manager import T
from core.logging.log_setup import configure_logging
from guests.logic.country_catalog import CountryCatalog
from registration.gui.registration_view import RegistrationView
from registration.logic.registration_form import RegistrationForm
from signature.models.surface_settings import SurfaceSettings

logger = logging.getLogger(__name__)


def log_sink(payload):
    """Stand-in transport: the payload is handed over to the log only."""
    summary = dict(payload, signature="<png>" if payload.get("signature") else None)
    logger.info("Registration payload: %s", json.dumps(summary, ensure_ascii=False))


class MainWindow(tk.Tk):
    def __init__(self):
        super().__init__()

        self.title(T("app.title"))
        self.geometry("720x900")

        self.form = RegistrationForm.from_config(config_service)

        # Anzeige-Bereich (Mitte)
        self.display_area = Frame(self)
        self.display_area.pack(fill="both", expand=True)

        # Statusleiste (unten)
        self.status_bar = Label(self, text=T("app.status.ready"), anchor="w", bg="#eeeeee")
        self.status_bar.pack(side="bottom", fill=X)

        self.active_view = RegistrationView(
            self.display_area,
            self.form,
            catalog=CountryCatalog(config_service.roster.countries_file),
            signature_settings=SurfaceSettings.from_config(config_service.signature),
            sink=log_sink,
            on_submitted=lambda _p: self.set_status(T("app.status.submitted")),
        )
        self.active_view.pack(fill="both", expand=True)

        self.protocol("WM_DELETE_WINDOW", self.on_close)

    def set_status(self, message):
        """Aktualisiert die Statusleiste."""
        self.status_bar.config(text=message)

    def on_close(self):
        self.active_view.destroy()
        self.form.close()
        self.destroy()


if __name__ == "__main__":
    configure_logging(config_service.logging)
    logger.info("%s %s starting", config_service.general.app_name, config_service.general.version)
    app = MainWindow()
    app.mainloop()
