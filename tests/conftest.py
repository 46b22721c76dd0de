"""Test setup for treedrop."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.log import Log  # noqa: E402
from core.tree_node import TreeNode  # noqa: E402


class FakeTimer:
    """Handle returned by FakeScheduler."""

    def __init__(self, scheduler, due, fn, interval=None):
        self.scheduler = scheduler
        self.due = due
        self.fn = fn
        self.interval = interval
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False


class FakeScheduler:
    """Manual clock standing in for the UI loop's timers."""

    def __init__(self):
        self.now = 0
        self.timers = []

    def call_later(self, delay_ms, fn):
        timer = FakeTimer(self, self.now + delay_ms, fn)
        self.timers.append(timer)
        return timer

    def call_every(self, interval_ms, fn):
        timer = FakeTimer(self, self.now + interval_ms, fn, interval=interval_ms)
        self.timers.append(timer)
        return timer

    def pending(self):
        return [t for t in self.timers if t.active]

    def advance(self, ms):
        """Move the clock forward, firing every timer that comes due in order."""
        end = self.now + ms
        while True:
            due = [t for t in self.timers if t.active and t.due <= end]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.now = timer.due
            if timer.interval is None:
                timer._active = False
            else:
                timer.due += timer.interval
            timer.fn()
        self.now = end

    def tick(self, count=1, interval=16):
        for _ in range(count):
            self.advance(interval)


class RecordingController:
    """List controller that records calls and flips expansion on the nodes."""

    def __init__(self, hidden=None):
        self.expanded = []
        self.collapsed = []
        self.rebuilds = 0
        self.hidden = set(id(n) for n in (hidden or ()))

    def expand(self, node):
        self.expanded.append(node)
        node.is_expanded = True

    def collapse(self, node):
        self.collapsed.append(node)
        node.is_expanded = False

    def rebuild(self):
        self.rebuilds += 1

    def is_visible(self, node):
        return id(node) not in self.hidden

    def hide(self, node):
        self.hidden.add(id(node))


class FakeAnchor:
    """Scrollable with a plain numeric offset."""

    def __init__(self, offset=0.0, min_offset=0.0, max_offset=1000.0):
        self.offset = float(offset)
        self.min_offset = float(min_offset)
        self.max_offset = float(max_offset)
        self.authority = object()
        self.calls = []

    def animate_scroll_to(self, offset):
        self.calls.append(offset)
        self.offset = float(offset)


def build_tree(spec, expanded=False):
    """
    Build a forest from nested (label, [children]) tuples or bare labels.
    Returns (root, {label: node}).
    """
    nodes = {}

    def make(item):
        if isinstance(item, tuple):
            label, kids = item
        else:
            label, kids = item, []
        node = TreeNode(label, expanded=expanded)
        nodes[label] = node
        for kid in kids:
            node.add_child(make(kid))
        return node

    root = TreeNode.virtual_root([make(item) for item in spec])
    return root, nodes


def labels(node):
    return [child.data for child in node.children]


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def controller():
    return RecordingController()


@pytest.fixture
def anchor():
    return FakeAnchor(offset=500.0)


@pytest.fixture
def simple_tree():
    """Root -> [A, B], B -> [B1, B2]; everything collapsed."""
    return build_tree(["A", ("B", ["B1", "B2"])])


@pytest.fixture
def verbose_log():
    Log.clear()
    Log.set_verbosity(3)
    yield Log
    Log.set_verbosity(0)
