from __future__ import annotations

"""
Content Frame Panel.

Desktop counterpart of the page's ``content_frame``: shows the current
``/view`` target and opens it in the system web browser, where the server
renders the Markdown document.
"""

import logging
import webbrowser
from typing import Any

import customtkinter as ctk

from mdnavigator.core.services.event_bus import EventBus
from mdnavigator.domain.events import ContentTargetChanged
from mdnavigator.domain.tree_models import ContentFrame
from mdnavigator.infra.network import ViewerApiClient
from mdnavigator.interface.gui import presenters
from mdnavigator.utils.i18n import i18n

logger = logging.getLogger(__name__)


class ContentPanel(ctk.CTkFrame):
    """Right pane mirroring the content frame target."""

    def __init__(
            self,
            master: Any,
            content: ContentFrame,
            client: ViewerApiClient,
            bus: EventBus,
            auto_open: bool = True,
            **kwargs: Any
    ):
        super().__init__(master, corner_radius=10, **kwargs)
        self.content = content
        self.client = client
        self.auto_open = auto_open

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self.lbl_target = ctk.CTkLabel(
            self,
            text=presenters.content_caption(content.src),
            anchor="w",
            wraplength=420,
        )
        self.lbl_target.grid(row=0, column=0, sticky="ew", padx=15, pady=(15, 5))

        self.lbl_url = ctk.CTkLabel(self, text="", text_color="gray", anchor="nw", wraplength=420)
        self.lbl_url.grid(row=1, column=0, sticky="new", padx=15)

        self.btn_open = ctk.CTkButton(
            self,
            text=i18n.t("gui.buttons.open_browser", default="Open in browser"),
            state="disabled",
            command=self.open_in_browser,
        )
        self.btn_open.grid(row=2, column=0, sticky="e", padx=15, pady=15)

        bus.subscribe(ContentTargetChanged, self._on_target_changed)

    def _on_target_changed(self, event: ContentTargetChanged) -> None:
        self.lbl_target.configure(text=presenters.content_caption(event.target))
        self.lbl_url.configure(text=self.client.view_url(event.target))
        self.btn_open.configure(state="normal")
        if self.auto_open:
            self.open_in_browser()

    def open_in_browser(self) -> None:
        url = self.client.view_url(self.content.src)
        if not url:
            return
        logger.info(f"Opening {url} in the web browser")
        if not webbrowser.open(url):
            logger.warning(f"No web browser available to open {url}")
