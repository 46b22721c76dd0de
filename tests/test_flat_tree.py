"""Tests for flattening, the list controller and the layout index."""

from __future__ import annotations

from conftest import build_tree
from ui.flat_tree import FlatTree
from ui.index import LayoutIndex
from ui.model import flatten_tree


def names(rows):
    return [row.node.data for row in rows]


def test_flatten_skips_collapsed_children(simple_tree):
    root, n = simple_tree
    rows = flatten_tree(root)
    assert names(rows) == ["A", "B"]
    assert all(row.parent is root for row in rows)

    n["B"].is_expanded = True
    rows = flatten_tree(root)
    assert names(rows) == ["A", "B", "B1", "B2"]
    assert [row.level for row in rows] == [0, 0, 1, 1]
    assert rows[3].index == 1


def test_expand_and_collapse_reflatten(simple_tree):
    root, n = simple_tree
    changes = []
    flat = FlatTree(root)
    flat.on_change = lambda: changes.append(len(flat.rows))

    flat.expand(n["B"])
    assert flat.is_visible(n["B1"])
    assert flat.find_row_index(n["B2"]) == 3

    flat.collapse(n["B"])
    assert not flat.is_visible(n["B1"])
    assert flat.find_row_index(n["B1"]) is None
    assert changes == [4, 2]


def test_unchanged_state_does_not_reflatten(simple_tree):
    root, n = simple_tree
    changes = []
    flat = FlatTree(root, on_change=lambda: changes.append(1))
    changes.clear()

    assert not flat.set_collapsed_state(n["B"], True)
    assert not flat.set_collapsed_state(root, True)
    assert not flat.toggle_collapse(n["A"])
    assert changes == []


def test_toggle_collapse(simple_tree):
    root, n = simple_tree
    flat = FlatTree(root)
    assert flat.toggle_collapse(n["B"])
    assert n["B"].is_expanded
    assert flat.toggle_collapse(n["B"])
    assert not n["B"].is_expanded


def test_rebuild_picks_up_structural_edits(simple_tree):
    root, n = simple_tree
    flat = FlatTree(root)
    n["A"].remove_from_parent()
    assert flat.is_visible(n["A"])
    flat.rebuild()
    assert not flat.is_visible(n["A"])


def test_layout_index_lookup():
    root, _ = build_tree(["A", "B", "C"])
    index = LayoutIndex()
    index.rebuild(flatten_tree(root), lambda row: 20)

    assert index.content_height() == 60
    assert index.row_top(2) == 40
    assert index.row_height(1) == 20
    assert index.find_row_at_y(0) == (0, 0)
    assert index.find_row_at_y(25) == (1, 5)
    assert index.find_row_at_y(59) == (2, 19)
    assert index.find_row_at_y(60) == (-1, 0)
    assert index.find_row_at_y(-1) == (-1, 0)


def test_layout_index_empty():
    index = LayoutIndex()
    index.rebuild([])
    assert index.content_height() == 0
    assert index.find_row_at_y(0) == (-1, 0)
    assert index.row_top(3) == 0


def test_layout_index_spans_and_zero_height_rows():
    root, _ = build_tree(["A", "B", "C"])
    heights = {"A": 10, "B": 0, "C": 15}
    index = LayoutIndex()
    index.rebuild(flatten_tree(root), lambda row: heights[row.node.data])

    assert index.row_span(0) == (0, 10)
    assert index.row_span(1) == (10, 10)
    assert index.row_span(2) == (10, 25)
    assert index.find_row_at_y(10) == (2, 0)
