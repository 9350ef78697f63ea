from __future__ import annotations

"""
Main Window Construction.

Creates the CustomTkinter root window and its static header (title, reload
and shutdown trigger). Panels are attached by the application entrypoint.
"""

from typing import Any, Callable

import customtkinter as ctk

from mdnavigator.domain import constants as const
from mdnavigator.utils.i18n import i18n


def create_main_window(base_url: str) -> ctk.CTk:
    """
    Initialize the root window.

    Args:
        base_url: Server root displayed in the title bar.

    Returns:
        ctk.CTk: Configured application window.
    """
    ctk.set_appearance_mode("System")
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title(f"{i18n.t('app.title', default='Markdown Navigator')} v{const.CURRENT_CONFIG_VERSION} - {base_url}")
    app.geometry("960x640")
    app.minsize(640, 420)

    app.grid_columnconfigure(0, weight=1, minsize=280)
    app.grid_columnconfigure(1, weight=2)
    app.grid_rowconfigure(1, weight=1)
    return app


class HeaderBar(ctk.CTkFrame):
    """Top bar holding the reload action and the shutdown trigger."""

    def __init__(self, master: Any, on_reload: Callable[[], None], on_shutdown: Callable[[], None], **kwargs: Any):
        super().__init__(master, corner_radius=0, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self,
            text=i18n.t("app.title", default="Markdown Navigator"),
            font=ctk.CTkFont(size=18, weight="bold"),
            anchor="w",
        ).grid(row=0, column=0, sticky="w", padx=15, pady=10)

        self.btn_reload = ctk.CTkButton(
            self,
            text=i18n.t("gui.buttons.reload", default="Reload"),
            width=90,
            fg_color="transparent",
            border_width=1,
            command=on_reload,
        )
        self.btn_reload.grid(row=0, column=1, padx=5, pady=10)

        self.btn_shutdown = ctk.CTkButton(
            self,
            text=i18n.t("gui.buttons.shutdown", default="Shutdown"),
            width=110,
            fg_color="#E04F5F",
            command=on_shutdown,
        )
        self.btn_shutdown.grid(row=0, column=2, padx=(5, 15), pady=10)
