from __future__ import annotations

"""
Unit tests for the Directory Tree Data Models.

Verifies listing entry decoding, node state transitions and the
visibility-aware traversal.
"""

import pytest

from mdnavigator.domain import constants as const
from mdnavigator.domain.tree_models import (
    ListingEntry,
    NodeState,
    TreeModel,
    TreeNode,
    view_target,
)


# -----------------------------------------------------------------------------
# LISTING ENTRY
# -----------------------------------------------------------------------------

def test_listing_entry_from_dict() -> None:
    entry = ListingEntry.from_dict({"name": "sub", "path": "/sub", "is_dir": True})

    assert entry == ListingEntry(name="sub", path="/sub", is_dir=True)


def test_listing_entry_defaults_to_file() -> None:
    entry = ListingEntry.from_dict({"name": "a.md", "path": "/a.md"})

    assert entry.is_dir is False


@pytest.mark.parametrize("payload", [
    "a.md",
    {"name": "a.md"},
    {"path": "/a.md"},
    {"name": 3, "path": "/a.md"},
    {"name": "a", "path": "/a", "is_dir": "false"},
    {"name": "a", "path": "/a", "is_dir": 1},
])
def test_listing_entry_rejects_malformed(payload) -> None:
    with pytest.raises(ValueError):
        ListingEntry.from_dict(payload)


# -----------------------------------------------------------------------------
# NODE
# -----------------------------------------------------------------------------

def test_node_icons() -> None:
    """Files show the document glyph; directories follow expansion."""
    file_node = TreeNode(name="a.md", path="/a.md", is_dir=False)
    dir_node = TreeNode(name="sub", path="/sub", is_dir=True)

    assert file_node.icon == const.GLYPH_FILE
    assert dir_node.icon == const.GLYPH_COLLAPSED

    dir_node.expanded = True
    assert dir_node.icon == const.GLYPH_EXPANDED


def test_view_target_prefix() -> None:
    assert view_target("/docs/guide.md") == "/view/docs/guide.md"


# -----------------------------------------------------------------------------
# MODEL TRANSITIONS
# -----------------------------------------------------------------------------

def test_new_model_has_unloaded_root() -> None:
    model = TreeModel()

    assert model.root.path == "/"
    assert model.root.state is NodeState.UNLOADED
    assert "/" in model
    assert len(model) == 1


def test_attach_listing_creates_children_in_order() -> None:
    model = TreeModel()
    model.mark_loading("/")

    created = model.attach_listing("/", [
        ListingEntry("z.md", "/z.md", False),
        ListingEntry("a", "/a", True),
    ])

    assert [n.path for n in created] == ["/z.md", "/a"]
    assert model.root.children == ["/z.md", "/a"]
    assert model.root.state is NodeState.LOADED
    assert model.get("/a").state is NodeState.UNLOADED


@pytest.mark.parametrize("entries", [[], None])
def test_attach_empty_listing_marks_empty(entries) -> None:
    model = TreeModel()

    assert model.attach_listing("/", entries) == []
    assert model.root.state is NodeState.EMPTY
    assert model.root.children_loaded


def test_mark_loading_clears_previous_error() -> None:
    model = TreeModel()
    model.mark_failed("/", "Failed to fetch")

    node = model.mark_loading("/")

    assert node.state is NodeState.LOADING
    assert node.expanded is True
    assert node.error is None
    assert node.has_children_container


def test_mark_failed_collapses_node() -> None:
    model = TreeModel()
    model.mark_loading("/")

    node = model.mark_failed("/", "Failed to fetch")

    assert node.state is NodeState.FAILED
    assert node.expanded is False
    assert node.error == "Failed to fetch"
    assert not node.has_children_container


def test_get_unknown_path_raises() -> None:
    with pytest.raises(KeyError):
        TreeModel().get("/missing")


def test_reset_keeps_only_root() -> None:
    model = TreeModel("/docs")
    model.attach_listing("/docs", [ListingEntry("a.md", "/docs/a.md", False)])

    model.reset()

    assert len(model) == 1
    assert model.root.path == "/docs"
    assert model.root.state is NodeState.UNLOADED


def test_request_ids_keep_counting_across_reset() -> None:
    model = TreeModel()
    first = model.mark_loading("/").request_id

    model.reset()

    assert model.root.request_id == 0
    assert model.mark_loading("/").request_id > first


# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def _nested_model() -> TreeModel:
    model = TreeModel()
    model.attach_listing("/", [
        ListingEntry("docs", "/docs", True),
        ListingEntry("b.md", "/b.md", False),
    ])
    model.attach_listing("/docs", [ListingEntry("a.md", "/docs/a.md", False)])
    return model


def test_walk_skips_collapsed_subtrees() -> None:
    model = _nested_model()

    visible = [(d, n.path) for d, n in model.walk()]

    assert visible == [(0, "/docs"), (0, "/b.md")]


def test_walk_includes_expanded_and_hidden_when_requested() -> None:
    model = _nested_model()

    assert [(d, n.path) for d, n in model.walk(visible_only=False)] == [
        (0, "/docs"),
        (1, "/docs/a.md"),
        (0, "/b.md"),
    ]

    model.get("/docs").expanded = True
    assert [n.path for _, n in model.walk()] == ["/docs", "/docs/a.md", "/b.md"]
