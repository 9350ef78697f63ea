from __future__ import annotations

"""
Tree Text Renderer.

Converts the tree model into an indented ASCII representation for terminal
output. Only nodes visible in the model (expanded ancestors) are printed.
"""

from typing import List, Optional

from mdnavigator.domain import constants as const
from mdnavigator.domain.tree_models import NodeState, TreeModel
from mdnavigator.utils.i18n import i18n

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_text(model: TreeModel, path: Optional[str] = None) -> List[str]:
    """
    Render the visible part of the tree below a node.

    Args:
        model: Tree model to project.
        path: Start node (defaults to the root, which is printed first).

    Returns:
        List[str]: Output lines.
    """
    start = model.root if path is None else model.get(path)
    lines: List[str] = [start.path]
    _render_children(model, start.path, lines, prefix="")
    return lines


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_children(model: TreeModel, path: str, lines: List[str], prefix: str) -> None:
    node = model.get(path)

    if node.state is NodeState.FAILED:
        lines.append(f"{prefix}└── ! {i18n.t('tree.load_error', default=const.MSG_LOAD_ERROR)}")
        return
    if node.state is NodeState.LOADING:
        lines.append(f"{prefix}└── ...")
        return

    children = model.children_of(path)
    total = len(children)

    for i, child in enumerate(children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        suffix = " (empty)" if child.is_empty else ""
        lines.append(f"{prefix}{connector}{child.icon} {child.name}{suffix}")

        if child.is_dir and (child.expanded or child.state is NodeState.FAILED):
            new_prefix = prefix + ("    " if is_last else "│   ")
            _render_children(model, child.path, lines, new_prefix)
