"""Unit tests for the node model and JSON tree loading."""

from __future__ import annotations

import json
from pathlib import Path

import msgspec.json as msgspec_json
import pytest

from doxywiki.errors import OutputFileError, TreeLoadError
from doxywiki.model import FolderCategory, Kind, Node, load_tree
from tests._helpers import make_node, make_root


def test_categories_follow_kind() -> None:
    """Compounds map to folders; members have no category."""
    assert make_node("s", Kind.STRUCT).category is FolderCategory.CLASSES
    assert make_node("g", Kind.MODULE).category is FolderCategory.MODULES
    assert make_node("d", Kind.DIR).category is FolderCategory.FILES
    assert make_node("f", Kind.FUNCTION).category is None
    assert make_node("d", Kind.DIR).is_file_or_dir
    assert not make_node("p", Kind.PAGE).is_file_or_dir


def test_walk_is_preorder() -> None:
    """Traversal visits parents before children, in document order."""
    root = make_root(
        make_node("a", Kind.NAMESPACE, "a", make_node("b", Kind.CLASS)),
        make_node("c", Kind.CLASS),
    )
    assert [node.refid for node in root.walk()] == ["a", "b", "c"]


def test_load_tree_decodes_nested_nodes(tmp_path: Path) -> None:
    """Kinds decode from their tag names and omitted fields take defaults."""
    payload = {
        "refid": "index",
        "kind": "index",
        "name": "index",
        "children": [
            {
                "refid": "group__io",
                "kind": "group",
                "name": "io",
                "title": "I/O",
                "children": [{"refid": "fn", "kind": "function", "name": "read"}],
            }
        ],
    }
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    root = load_tree(path)

    group = root.children[0]
    assert group.kind is Kind.MODULE
    assert group.title == "I/O"
    assert group.children[0].kind is Kind.FUNCTION
    assert group.children[0].url == ""


def test_load_tree_round_trips_msgspec_encoding(tmp_path: Path) -> None:
    """Trees written with msgspec load back unchanged."""
    root = make_root(make_node("classA", Kind.CLASS, "A", qualified_name="ns::A"))
    path = tmp_path / "tree.json"
    path.write_bytes(msgspec_json.encode(root))

    assert load_tree(path) == root


def test_load_tree_rejects_duplicate_refids(tmp_path: Path) -> None:
    """Refids must be unique across the tree."""
    root = make_root(make_node("dup", Kind.CLASS), make_node("dup", Kind.STRUCT))
    path = tmp_path / "tree.json"
    path.write_bytes(msgspec_json.encode(root))

    with pytest.raises(TreeLoadError, match="dup"):
        load_tree(path)


def test_load_tree_rejects_unknown_kind(tmp_path: Path) -> None:
    """Unknown kinds are schema errors."""
    path = tmp_path / "tree.json"
    path.write_text('{"refid": "x", "kind": "widget", "name": "x"}', encoding="utf-8")

    with pytest.raises(TreeLoadError):
        load_tree(path)


def test_load_tree_missing_file(tmp_path: Path) -> None:
    """An unreadable tree is an I/O error carrying the path."""
    missing = tmp_path / "missing.json"
    with pytest.raises(OutputFileError) as excinfo:
        load_tree(missing)
    assert excinfo.value.path == missing


def test_node_equality_is_structural() -> None:
    """Nodes compare by value, which the loader tests rely on."""
    assert Node("a", Kind.CLASS, "A") == Node("a", Kind.CLASS, "A")
