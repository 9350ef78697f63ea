from __future__ import annotations

"""
GUI Presentation Helpers.

Toolkit-independent mapping from model objects to the strings, tags and
placeholder rows the Tk widgets display. Kept free of tkinter imports so the
mapping can be verified headless.
"""

from typing import List, NamedTuple, Optional

from mdnavigator.domain import constants as const
from mdnavigator.domain.dialog_models import ShutdownDialogModel
from mdnavigator.domain.tree_models import NodeState, TreeNode
from mdnavigator.utils.i18n import i18n

ERROR_COLOR = "#E04F5F"
TEXT_COLOR = ("gray10", "#DCE4EE")


class RowSpec(NamedTuple):
    """One Treeview row: item id, display text and tags."""
    iid: str
    text: str
    tags: tuple


def node_row(node: TreeNode) -> RowSpec:
    """Row displayed for a tree node."""
    tags: List[str] = ["dir" if node.is_dir else "file"]
    if node.is_empty:
        tags.append(const.CSS_EMPTY)
    if node.state is NodeState.FAILED:
        tags.append("failed")
    return RowSpec(iid=node.path, text=f"{node.icon} {node.name}", tags=tuple(tags))


def placeholder_row(node: TreeNode) -> Optional[RowSpec]:
    """
    Synthetic child shown while a directory is loading or after it failed.

    Returns:
        Optional[RowSpec]: The placeholder, or None when real children (or
        nothing at all) should be displayed.
    """
    if node.state is NodeState.LOADING:
        return RowSpec(f"{node.path}#loading", i18n.t("tree.loading", default="Loading..."), ("placeholder",))
    if node.state is NodeState.FAILED:
        text = i18n.t("tree.load_error", default=const.MSG_LOAD_ERROR)
        return RowSpec(f"{node.path}#error", text, ("placeholder", "failed"))
    return None


def content_caption(target: Optional[str]) -> str:
    if not target:
        return i18n.t("gui.content.placeholder", default="Select a file in the tree to view it.")
    return i18n.t("gui.content.target", default="Viewing: {target}", target=target)


def dialog_message_color(dialog: ShutdownDialogModel):
    """Text color of the dialog message (red once a failure was reported)."""
    return ERROR_COLOR if dialog.is_error else TEXT_COLOR
