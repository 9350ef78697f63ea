from __future__ import annotations

"""
HTML Projection.

Renders the tree and dialog models into the markup contract expected by the
viewer page (element ids and class names). The output is a pure function of
the models: rendering twice without intervening commands yields identical
markup.
"""

from html import escape
from typing import List

from mdnavigator.domain import constants as const
from mdnavigator.domain.dialog_models import ShutdownDialogModel
from mdnavigator.domain.tree_models import NodeState, TreeModel, TreeNode, view_target
from mdnavigator.utils.i18n import i18n

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_html(model: TreeModel) -> str:
    """
    Render the whole tree inside the ``tree-container`` element.

    Args:
        model: Tree model to project.

    Returns:
        str: HTML fragment.
    """
    root = model.root
    inner = _render_subtree(model, root)
    return f'<div id="{const.DOM_IDS["tree"]}">{inner}</div>'


def render_shutdown_modal_html(dialog: ShutdownDialogModel) -> str:
    """Render the confirmation overlay with its current message."""
    display = "flex" if dialog.visible else "none"
    style = f' style="color: {const.ERROR_TEXT_COLOR}"' if dialog.is_error else ""
    return (
        f'<div id="{const.DOM_IDS["modal"]}" style="display: {display}">'
        f'<div class="modal-content">'
        f'<p{style}>{escape(dialog.message)}</p>'
        f'<button id="{const.DOM_IDS["yes"]}">{escape(i18n.t("gui.buttons.yes", default="Yes"))}</button>'
        f'<button id="{const.DOM_IDS["no"]}">{escape(i18n.t("gui.buttons.no", default="No"))}</button>'
        f'</div></div>'
    )


def render_page_body_html(model: TreeModel, dialog: ShutdownDialogModel) -> str:
    """
    Render the page body: tree, shutdown trigger and overlay.

    Once the dialog is terminated the body is only the static notice.
    """
    if dialog.terminated:
        body = escape(dialog.page_body or i18n.t("shutdown.done", default=const.MSG_SHUTDOWN_DONE))
        return f'<div style="padding: 20px; text-align: center;">{body}</div>'

    return (
        render_tree_html(model)
        + f'<button id="{const.DOM_IDS["trigger"]}">{escape(i18n.t("gui.buttons.shutdown", default="Shutdown"))}</button>'
        + render_shutdown_modal_html(dialog)
    )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_subtree(model: TreeModel, node: TreeNode) -> str:
    """Children area of a directory node, according to its load state."""
    if node.state is NodeState.FAILED:
        return escape(i18n.t("tree.load_error", default=const.MSG_LOAD_ERROR))
    if node.state is not NodeState.LOADED:
        return ""

    items: List[str] = [_render_node(model, child) for child in model.children_of(node.path)]
    return "<ul>" + "".join(items) + "</ul>"


def _render_node(model: TreeModel, node: TreeNode) -> str:
    icon_classes = const.CSS_ICON
    if node.is_empty:
        icon_classes += f" {const.CSS_EMPTY}"

    attrs = f' data-path="{escape(node.path)}"' if node.is_dir else f' data-target="{escape(view_target(node.path))}"'
    label = (
        f'<div class="{const.CSS_NODE_LABEL}">'
        f'<span class="{icon_classes}">{node.icon}</span>'
        f'<a href="javascript:void(0)">{escape(node.name)}</a>'
        f'</div>'
    )

    children = ""
    if node.is_dir and (node.has_children_container or node.state is NodeState.FAILED):
        classes = const.CSS_CHILDREN
        if node.expanded or node.state is NodeState.FAILED:
            classes += f" {const.CSS_EXPANDED}"
        children = f'<div class="{classes}">{_render_subtree(model, node)}</div>'

    return f'<li class="{const.CSS_NODE_CONTAINER}"{attrs}>{label}{children}</li>'
