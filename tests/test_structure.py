"""Tests for structure loading."""

from __future__ import annotations

import json
from pathlib import Path

from mapweaver.structure import dump_structure, load_structure, parse_structure
from mapweaver.tree import normalize


def test_parse_envelope_and_bare_node() -> None:
    node = {"title": "Topic", "children": [{"title": "A"}]}
    assert parse_structure({"root": node}) == node
    assert parse_structure(json.dumps({"root": node})) == node
    assert parse_structure(node) == node


def test_parse_invalid_json_falls_back_to_titled_root() -> None:
    root = parse_structure("{not json", fallback_title="Biology")
    assert root == {"title": "Biology", "children": []}


def test_parse_missing_root_uses_default_title() -> None:
    assert parse_structure({"root": "oops"})["title"] == "Mind Map"
    assert parse_structure(None)["children"] == []


def test_load_structure_falls_back_on_non_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes('{"root": {"title": "Caf\xe9"}}'.encode("latin-1"))
    assert load_structure(path, fallback_title="Menu") == {"title": "Menu", "children": []}


def test_load_structure_reads_utf8(tmp_path: Path) -> None:
    path = tmp_path / "map.json"
    path.write_text(json.dumps({"root": {"title": "Café", "children": []}}), encoding="utf-8")
    assert load_structure(path)["title"] == "Café"


def test_dump_structure_reloads_to_same_tree() -> None:
    tree = normalize({"title": "Topic", "children": [{"title": "A", "children": [{"title": "A1"}]}]})
    payload = json.loads(json.dumps(dump_structure(tree)))
    assert normalize(parse_structure(payload)) == tree
