from __future__ import annotations

"""
Shutdown Confirmation Overlay.

An in-window overlay (backdrop plus centered dialog) bound to the
ShutdownDialogController through the event bus. Clicking the backdrop or
"No" cancels; "Yes" confirms. When the controller reaches its terminal
state the whole window content is replaced by the static notice.
"""

from typing import Any

import customtkinter as ctk

from mdnavigator.core.services.event_bus import EventBus
from mdnavigator.domain.dialog_models import ShutdownDialogModel
from mdnavigator.domain.events import (
    CancelShutdownDialog,
    ConfirmShutdown,
    ShutdownDialogChanged,
    ShutdownOverlayClicked,
)
from mdnavigator.interface.gui import presenters
from mdnavigator.utils.i18n import i18n


class ShutdownOverlay(ctk.CTkFrame):
    """
    Backdrop covering the main window while the dialog is visible.

    Args:
        master: Main application window.
        dialog: Model rendered by the overlay.
        bus: Message bus shared with the controller.
    """

    def __init__(self, master: Any, dialog: ShutdownDialogModel, bus: EventBus, **kwargs: Any):
        super().__init__(master, corner_radius=0, fg_color=("gray70", "gray15"), **kwargs)
        self.app = master
        self.dialog = dialog
        self.bus = bus

        # Only clicks on the backdrop itself reach this binding
        self.bind("<Button-1>", lambda _e: self.bus.publish(ShutdownOverlayClicked(on_background=True)))

        self.box = ctk.CTkFrame(self, corner_radius=12)
        self.box.place(relx=0.5, rely=0.5, anchor="center")

        ctk.CTkLabel(
            self.box,
            text=i18n.t("gui.dialogs.shutdown_title", default="Shut down server"),
            font=ctk.CTkFont(size=18, weight="bold"),
        ).pack(padx=30, pady=(20, 5))

        self.lbl_message = ctk.CTkLabel(self.box, text=dialog.message, wraplength=320)
        self.lbl_message.pack(padx=30, pady=(5, 15))

        btn_frame = ctk.CTkFrame(self.box, fg_color="transparent")
        btn_frame.pack(fill="x", padx=20, pady=(0, 20))

        self.btn_no = ctk.CTkButton(
            btn_frame,
            text=i18n.t("gui.buttons.no", default="No"),
            fg_color="transparent",
            border_width=1,
            text_color=presenters.TEXT_COLOR,
            command=lambda: self.bus.publish(CancelShutdownDialog()),
        )
        self.btn_no.pack(side="left", expand=True, padx=5)

        self.btn_yes = ctk.CTkButton(
            btn_frame,
            text=i18n.t("gui.buttons.yes", default="Yes"),
            fg_color=presenters.ERROR_COLOR,
            command=lambda: self.bus.publish(ConfirmShutdown()),
        )
        self.btn_yes.pack(side="left", expand=True, padx=5)

        self.bus.subscribe(ShutdownDialogChanged, self._on_changed)

    def _on_changed(self, _event: ShutdownDialogChanged) -> None:
        if self.dialog.terminated:
            self._replace_window_content()
            return

        self.lbl_message.configure(
            text=self.dialog.message,
            text_color=presenters.dialog_message_color(self.dialog),
        )
        self.btn_yes.configure(state="disabled" if self.dialog.pending else "normal")

        if self.dialog.visible:
            self.place(relx=0, rely=0, relwidth=1, relheight=1)
            self.lift()
        else:
            self.place_forget()

    def _replace_window_content(self) -> None:
        """Swap every widget of the window for the terminal notice."""
        for widget in list(self.app.winfo_children()):
            widget.destroy()
        ctk.CTkLabel(
            self.app,
            text=self.dialog.page_body or "",
            font=ctk.CTkFont(size=16),
        ).place(relx=0.5, rely=0.5, anchor="center")
