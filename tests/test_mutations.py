"""Tests for copy-on-write tree edits."""

from __future__ import annotations

import pytest

from mapweaver.errors import CannotDeleteRoot, NodeNotFound
from mapweaver.models.outline import MapNode
from mapweaver.mutations import NEW_NODE_TITLE, add_child, delete_node, fresh_id, rename_node
from mapweaver.tree import find_node, node_ids, normalize
from mapweaver.utils.ids import fresh_node_id


@pytest.fixture
def tree() -> MapNode:
    return normalize(
        {
            "title": "Topic",
            "children": [
                {"title": "A", "children": [{"title": "A1"}]},
                {"title": "B"},
            ],
        }
    )


def test_add_child_twice_yields_two_fresh_ids() -> None:
    root = normalize({"title": "Topic"})
    before = node_ids(root)

    once = add_child(root, root.id)
    twice = add_child(once, once.id)

    assert len(twice.children) == 2
    new_ids = [c.id for c in twice.children]
    assert new_ids[0] != new_ids[1]
    assert not set(new_ids) & before
    assert all(c.title == NEW_NODE_TITLE for c in twice.children)


def test_add_child_appends_and_leaves_input_untouched(tree: MapNode) -> None:
    snapshot = tree.model_copy(deep=True)
    updated = add_child(tree, "n_1", title="A2")

    assert tree == snapshot
    assert [c.title for c in updated.children[0].children] == ["A1", "A2"]
    assert updated.children[0].children[0].id == "n_2"


def test_add_then_delete_restores_original(tree: MapNode) -> None:
    """Adding a leaf and deleting it again gives back an equal tree."""

    added = add_child(tree, "n_2")
    new_id = added.children[0].children[0].children[0].id
    assert delete_node(added, new_id) == tree


def test_add_child_unknown_parent(tree: MapNode) -> None:
    with pytest.raises(NodeNotFound) as exc_info:
        add_child(tree, "ghost")
    assert exc_info.value.node_id == "ghost"


def test_rename_replaces_only_title(tree: MapNode) -> None:
    renamed = rename_node(tree, "n_1", "Alpha")

    assert find_node(renamed, "n_1").title == "Alpha"
    assert find_node(tree, "n_1").title == "A"
    assert node_ids(renamed) == node_ids(tree)
    assert renamed.children[0].children == tree.children[0].children


def test_rename_blank_title_falls_back(tree: MapNode) -> None:
    assert find_node(rename_node(tree, "n_3", "   "), "n_3").title == "Untitled"


def test_rename_unknown_node(tree: MapNode) -> None:
    with pytest.raises(NodeNotFound):
        rename_node(tree, "ghost", "x")


def test_delete_removes_subtree(tree: MapNode) -> None:
    pruned = delete_node(tree, "n_1")

    assert node_ids(pruned) == {"n_0", "n_3"}
    assert node_ids(tree) == {"n_0", "n_1", "n_2", "n_3"}


def test_delete_root_is_rejected(tree: MapNode) -> None:
    with pytest.raises(CannotDeleteRoot):
        delete_node(tree, tree.id)


def test_delete_unknown_node(tree: MapNode) -> None:
    with pytest.raises(NodeNotFound):
        delete_node(tree, "ghost")


def test_delete_only_child_leaves_root() -> None:
    root = normalize({"title": "Topic", "children": [{"title": "Only"}]})
    single = delete_node(root, root.children[0].id)
    assert single.children == []
    assert single.id == root.id


def test_fresh_id_avoids_existing_ids(tree: MapNode) -> None:
    assert fresh_id(tree) not in node_ids(tree)


def test_fresh_node_id_redraws_on_collision(monkeypatch: pytest.MonkeyPatch) -> None:
    """Same timestamp and count as an existing id still yields a new id."""

    monkeypatch.setattr("mapweaver.utils.ids.time.time_ns", lambda: 5)
    taken = {"node_5_3", "node_5_3_1"}
    assert fresh_node_id(taken, visited=3) == "node_5_3_2"
