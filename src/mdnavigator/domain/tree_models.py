from __future__ import annotations

"""
Directory Tree Data Models.

Provides the listing records returned by the server and the explicit,
path-indexed tree model that the TreeView controller mutates. Views are
projections of this model and never hold tree state of their own.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from mdnavigator.domain import constants as const

# -----------------------------------------------------------------------------
# LISTING RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ListingEntry:
    """
    One immediate child of a directory as reported by the listing API.

    Attributes:
        name: Display label.
        path: Absolute server-side path.
        is_dir: Whether the entry is a directory.
    """
    name: str
    path: str
    is_dir: bool

    @classmethod
    def from_dict(cls, data: Any) -> "ListingEntry":
        """
        Build an entry from one decoded JSON object.

        Raises:
            ValueError: If the object lacks the listing keys or mistypes them.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Listing entry must be an object, got {type(data).__name__}.")
        try:
            name = data["name"]
            path = data["path"]
        except KeyError as e:
            raise ValueError(f"Listing entry is missing key {e}.") from e
        if not isinstance(name, str) or not isinstance(path, str):
            raise ValueError("Listing entry 'name' and 'path' must be strings.")
        is_dir = data.get("is_dir", False)
        if not isinstance(is_dir, bool):
            raise ValueError(f"Listing entry 'is_dir' must be a boolean, got {type(is_dir).__name__}.")
        return cls(name=name, path=path, is_dir=is_dir)


# -----------------------------------------------------------------------------
# NODE STATE
# -----------------------------------------------------------------------------

class NodeState(Enum):
    """Load lifecycle of a directory node."""
    UNLOADED = "UNLOADED"
    LOADING = "LOADING"
    LOADED = "LOADED"
    EMPTY = "EMPTY"
    FAILED = "FAILED"


@dataclass
class TreeNode:
    """
    UI representation of one filesystem entry.

    Directory nodes move through NodeState; file nodes stay UNLOADED and
    are never expanded.
    """
    name: str
    path: str
    is_dir: bool
    state: NodeState = NodeState.UNLOADED
    expanded: bool = False
    children: List[str] = field(default_factory=list)
    error: Optional[str] = None
    request_id: int = 0

    @property
    def children_loaded(self) -> bool:
        return self.state in (NodeState.LOADED, NodeState.EMPTY)

    @property
    def is_empty(self) -> bool:
        return self.state is NodeState.EMPTY

    @property
    def has_children_container(self) -> bool:
        """True once a load is in flight or has produced children."""
        return self.state in (NodeState.LOADING, NodeState.LOADED)

    @property
    def icon(self) -> str:
        if not self.is_dir:
            return const.GLYPH_FILE
        return const.GLYPH_EXPANDED if self.expanded else const.GLYPH_COLLAPSED


# -----------------------------------------------------------------------------
# TREE MODEL
# -----------------------------------------------------------------------------

class TreeModel:
    """
    Path-indexed ownership of every node created in the session.

    The root is a directory node for ``root_path``. Nodes are created when a
    listing is attached to their parent and are never removed.
    """

    def __init__(self, root_path: str = const.DEFAULT_ROOT_PATH):
        self._root_path = root_path
        self._request_seq = 0
        self._nodes: Dict[str, TreeNode] = {
            root_path: TreeNode(name=root_path, path=root_path, is_dir=True)
        }

    @property
    def root(self) -> TreeNode:
        return self._nodes[self._root_path]

    def __contains__(self, path: object) -> bool:
        return path in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def get(self, path: str) -> TreeNode:
        """
        Look up a node by path.

        Raises:
            KeyError: If no node was ever created for the path.
        """
        return self._nodes[path]

    def children_of(self, path: str) -> List[TreeNode]:
        return [self._nodes[p] for p in self._nodes[path].children]

    def attach_listing(self, path: str, entries: Optional[Sequence[ListingEntry]]) -> List[TreeNode]:
        """
        Record a successful listing for a directory node.

        An empty or missing listing marks the node EMPTY. Otherwise one child
        node is created per entry, preserving order.

        Args:
            path: Directory that was listed.
            entries: Decoded listing (None for a null body).

        Returns:
            List[TreeNode]: Children now attached to the node.
        """
        node = self._nodes[path]
        node.error = None

        if not entries:
            node.children = []
            node.state = NodeState.EMPTY
            return []

        created: List[TreeNode] = []
        for entry in entries:
            child = self._nodes.get(entry.path)
            if child is None:
                child = TreeNode(name=entry.name, path=entry.path, is_dir=entry.is_dir)
                self._nodes[entry.path] = child
            created.append(child)

        node.children = [c.path for c in created]
        node.state = NodeState.LOADED
        return created

    def reset(self) -> None:
        """Drop every node except a fresh, unloaded root."""
        root_path = self._root_path
        self._nodes = {root_path: TreeNode(name=root_path, path=root_path, is_dir=True)}

    def mark_loading(self, path: str) -> TreeNode:
        """Start a load under a fresh request id; ids keep counting across reset()."""
        node = self._nodes[path]
        self._request_seq += 1
        node.request_id = self._request_seq
        node.state = NodeState.LOADING
        node.expanded = True
        node.error = None
        return node

    def mark_failed(self, path: str, message: str) -> TreeNode:
        """Record a failed load; the node reads as collapsed afterwards."""
        node = self._nodes[path]
        node.state = NodeState.FAILED
        node.expanded = False
        node.children = []
        node.error = message
        return node

    def walk(self, path: Optional[str] = None, *, visible_only: bool = True) -> Iterator[Tuple[int, TreeNode]]:
        """
        Depth-first traversal below a node, excluding the node itself.

        Args:
            path: Start node (defaults to the root).
            visible_only: Skip the subtrees of collapsed directories.

        Yields:
            Tuple[int, TreeNode]: Depth (0 for direct children) and node.
        """
        start = self._root_path if path is None else path
        stack: List[Tuple[int, str]] = [
            (0, p) for p in reversed(self._nodes[start].children)
        ]
        while stack:
            depth, current = stack.pop()
            node = self._nodes[current]
            yield depth, node
            if node.is_dir and (node.expanded or not visible_only):
                stack.extend((depth + 1, p) for p in reversed(node.children))


@dataclass
class ContentFrame:
    """Sibling frame that displays the selected document."""
    name: str = const.CONTENT_FRAME_NAME
    src: Optional[str] = None


def view_target(path: str) -> str:
    """Navigation target for a file path: ``/view`` + path, unmodified."""
    return f"{const.VIEW_PREFIX}{path}"
