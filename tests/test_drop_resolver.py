"""Tests for drop resolution and the structural move."""

from __future__ import annotations

from conftest import RecordingController, build_tree, labels
from core.cycle_guard import is_valid_move
from core.drop_resolver import DropZone, apply_drop, resolve


def _drop(dragged, zone, target, root, controller):
    placement = resolve(zone, target, root)
    assert is_valid_move(dragged, placement.parent, placement.index)
    return apply_drop(dragged, placement, controller)


def test_resolve_above_and_below_use_target_parent(simple_tree):
    root, n = simple_tree
    above = resolve(DropZone.ABOVE, n["B2"], root)
    below = resolve(DropZone.BELOW, n["B2"], root)
    assert (above.parent, above.index) == (n["B"], 1)
    assert (below.parent, below.index) == (n["B"], 2)


def test_resolve_inside_appends(simple_tree):
    root, n = simple_tree
    placement = resolve(DropZone.INSIDE, n["B"], root)
    assert placement.parent is n["B"]
    assert placement.index == 2


def test_resolve_top_level_uses_virtual_root(simple_tree):
    root, n = simple_tree
    placement = resolve(DropZone.ABOVE, n["A"], root)
    assert placement.parent is root
    assert placement.index == 0


def test_earlier_sibling_dropped_below_later_sibling():
    root, n = build_tree(["A", "B", "C", "D"])
    final = _drop(n["A"], DropZone.BELOW, n["C"], root, RecordingController())
    assert labels(root) == ["B", "C", "A", "D"]
    assert final == 2


def test_earlier_sibling_dropped_above_later_sibling():
    root, n = build_tree(["A", "B", "C", "D"])
    _drop(n["A"], DropZone.ABOVE, n["D"], root, RecordingController())
    assert labels(root) == ["B", "C", "A", "D"]


def test_later_sibling_dropped_above_earlier_sibling():
    root, n = build_tree(["A", "B", "C", "D"])
    _drop(n["D"], DropZone.ABOVE, n["B"], root, RecordingController())
    assert labels(root) == ["A", "D", "B", "C"]


def test_below_target_with_children_stays_a_sibling():
    root, n = build_tree(["X", ("T", ["T1", "T2", "T3"]), "Y"])
    _drop(n["X"], DropZone.BELOW, n["T"], root, RecordingController())
    assert labels(root) == ["T", "X", "Y"]
    assert labels(n["T"]) == ["T1", "T2", "T3"]


def test_inside_appends_in_drop_order():
    root, n = build_tree(["A", "B", "C", "T"])
    ctl = RecordingController()
    for name in ("A", "B", "C"):
        _drop(n[name], DropZone.INSIDE, n["T"], root, ctl)
    assert labels(n["T"]) == ["A", "B", "C"]


def test_inside_moves_child_to_end_of_its_own_parent(simple_tree):
    root, n = simple_tree
    _drop(n["B1"], DropZone.INSIDE, n["B"], root, RecordingController())
    assert labels(n["B"]) == ["B2", "B1"]


def test_collapsed_parent_is_expanded_once():
    root, n = build_tree(["A", ("T", ["T1"])])
    ctl = RecordingController()
    _drop(n["A"], DropZone.INSIDE, n["T"], root, ctl)
    assert ctl.expanded == [n["T"]]
    assert ctl.rebuilds == 0
    assert n["T"].is_expanded


def test_expanded_parent_is_rebuilt_once():
    root, n = build_tree(["A", ("T", ["T1"])], expanded=True)
    ctl = RecordingController()
    _drop(n["A"], DropZone.BELOW, n["T1"], root, ctl)
    assert ctl.rebuilds == 1
    assert ctl.expanded == []
    assert labels(n["T"]) == ["T1", "A"]


def test_top_level_drop_rebuilds(simple_tree):
    root, n = simple_tree
    ctl = RecordingController()
    _drop(n["B1"], DropZone.ABOVE, n["A"], root, ctl)
    assert labels(root) == ["B1", "A", "B"]
    assert ctl.rebuilds == 1


def test_nodes_are_conserved():
    root, n = build_tree(["A", ("B", ["B1", ("B2", ["C1"])]), "D"])
    before = {id(x) for x in n.values()}
    _drop(n["B2"], DropZone.ABOVE, n["A"], root, RecordingController())
    _drop(n["D"], DropZone.INSIDE, n["C1"], root, RecordingController())

    seen = []

    def walk(node):
        for child in node.children:
            seen.append(id(child))
            assert child.parent is node
            walk(child)

    walk(root)
    assert len(seen) == len(before)
    assert set(seen) == before


def test_first_child_dropped_below_its_own_parent():
    root, n = build_tree([("T", ["C1", "C2", "C3"]), "Y"])
    final = _drop(n["C1"], DropZone.BELOW, n["T"], root, RecordingController())
    assert labels(root) == ["T", "C1", "Y"]
    assert labels(n["T"]) == ["C2", "C3"]
    assert final == 1


def test_resolve_inside_first(simple_tree):
    root, n = simple_tree
    placement = resolve(DropZone.INSIDE_FIRST, n["B"], root)
    assert (placement.parent, placement.index) == (n["B"], 0)


def test_inside_first_prepends():
    root, n = build_tree(["A", ("T", ["T1", "T2"])], expanded=True)
    ctl = RecordingController()
    final = _drop(n["A"], DropZone.INSIDE_FIRST, n["T"], root, ctl)
    assert final == 0
    assert labels(n["T"]) == ["A", "T1", "T2"]
    assert ctl.rebuilds == 1


def test_inside_first_on_current_first_child_is_a_noop():
    root, n = build_tree([("T", ["T1", "T2"])], expanded=True)
    placement = resolve(DropZone.INSIDE_FIRST, n["T"], root)
    assert not is_valid_move(n["T1"], placement.parent, placement.index)
    assert is_valid_move(n["T2"], placement.parent, placement.index)
