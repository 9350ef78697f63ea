from __future__ import annotations

"""
Directory Tree Panel.

Hosts a ttk.Treeview inside a CustomTkinter frame. The widget is a
projection of the TreeModel: clicks are published as ToggleNode/SelectFile
commands and the affected rows are rebuilt whenever a NodeChanged event
arrives.
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Any

import customtkinter as ctk

from mdnavigator.core.services.event_bus import EventBus
from mdnavigator.domain.events import NodeChanged, SelectFile, ToggleNode
from mdnavigator.domain.tree_models import NodeState, TreeModel
from mdnavigator.interface.gui import presenters

logger = logging.getLogger(__name__)


class TreePanel(ctk.CTkFrame):
    """
    Left pane listing the server directories.

    The model root maps to the Treeview's invisible root item ("").
    """

    def __init__(self, master: Any, model: TreeModel, bus: EventBus, **kwargs: Any):
        super().__init__(master, corner_radius=10, **kwargs)
        self.model = model
        self.bus = bus
        self._suppress_release = False

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self.tree = ttk.Treeview(self, show="tree", selectmode="browse")
        self.tree.grid(row=0, column=0, sticky="nsew", padx=(8, 0), pady=8)

        scrollbar = ctk.CTkScrollbar(self, command=self.tree.yview)
        scrollbar.grid(row=0, column=1, sticky="ns", pady=8)
        self.tree.configure(yscrollcommand=scrollbar.set)

        self.tree.tag_configure("empty", foreground="gray")
        self.tree.tag_configure("failed", foreground=presenters.ERROR_COLOR)
        self.tree.tag_configure("placeholder", foreground="gray")

        # -----------------------------------------------------------------------------
        # EVENT WIRING
        # -----------------------------------------------------------------------------
        self.tree.bind("<ButtonRelease-1>", self._on_click)
        self.tree.bind("<Double-Button-1>", self._on_double_click)
        self.tree.bind("<Return>", self._on_activate)
        self.tree.bind("<<TreeviewOpen>>", self._on_native_toggle)
        self.tree.bind("<<TreeviewClose>>", self._on_native_toggle)
        self.bus.subscribe(NodeChanged, self._on_node_changed)

    # -------------------------------------------------------------------------
    # INPUT
    # -------------------------------------------------------------------------

    def _on_click(self, event: tk.Event) -> None:
        if self._suppress_release:
            # Release that closes a double click; the first click already acted
            self._suppress_release = False
            return
        if self.tree.identify_element(event.x, event.y) == "Treeitem.indicator":
            return  # handled by <<TreeviewOpen>>/<<TreeviewClose>>
        iid = self.tree.identify_row(event.y)
        if iid:
            self._activate(iid)

    def _on_double_click(self, _event: tk.Event) -> str:
        self._suppress_release = True
        return "break"

    def _on_activate(self, _event: tk.Event) -> str:
        iid = self.tree.focus()
        if iid:
            self._activate(iid)
        return "break"

    def _on_native_toggle(self, _event: tk.Event) -> None:
        iid = self.tree.focus()
        if iid in self.model:
            self.bus.publish(ToggleNode(iid))

    def _activate(self, iid: str) -> None:
        if iid not in self.model:
            return
        node = self.model.get(iid)
        if node.is_dir:
            self.bus.publish(ToggleNode(iid))
        else:
            self.bus.publish(SelectFile(iid))

    # -------------------------------------------------------------------------
    # PROJECTION
    # -------------------------------------------------------------------------

    def _on_node_changed(self, event: NodeChanged) -> None:
        if not self.tree.winfo_exists() or event.path not in self.model:
            return
        is_root = event.path == self.model.root.path
        parent_iid = "" if is_root else event.path
        if not is_root and not self.tree.exists(parent_iid):
            logger.debug(f"TreePanel: Row for '{event.path}' not displayed yet")
            return
        self._render_children(event.path, parent_iid)

    def _render_children(self, path: str, parent_iid: str) -> None:
        node = self.model.get(path)

        if parent_iid:
            row = presenters.node_row(node)
            self.tree.item(parent_iid, text=row.text, tags=row.tags, open=node.expanded)

        # Rebuild only when the set of child rows changes
        expected = [c.path for c in self.model.children_of(path)] if node.state is NodeState.LOADED else []
        placeholder = presenters.placeholder_row(node)
        if placeholder:
            expected = [placeholder.iid]
        if list(self.tree.get_children(parent_iid)) == expected:
            return

        self.tree.delete(*self.tree.get_children(parent_iid))
        if placeholder:
            self.tree.insert(parent_iid, "end", iid=placeholder.iid, text=placeholder.text, tags=placeholder.tags)
            if parent_iid and node.state is NodeState.FAILED:
                self.tree.item(parent_iid, open=True)
            return

        for child in self.model.children_of(path):
            row = presenters.node_row(child)
            self.tree.insert(parent_iid, "end", iid=row.iid, text=row.text, tags=row.tags, open=child.expanded)
            if child.is_dir and child.children:
                self._render_children(child.path, child.path)
