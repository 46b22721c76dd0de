# core/tree_node.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import itertools
from typing import Any, Generic, Iterable, List, Optional, Protocol, Sequence, TypeVar

__all__ = ["NodeLike", "TreeNode"]

T = TypeVar("T")

_keys = itertools.count()


class NodeLike(Protocol):
    """
    Capability set the drag subsystem needs from a host node.

    Read side: parent, children, index, is_expanded, is_leaf.
    Write side: remove_from_parent(), insert_child_at(index, node).
    """

    @property
    def parent(self) -> Optional["NodeLike"]: ...

    @property
    def children(self) -> Sequence["NodeLike"]: ...

    @property
    def index(self) -> int: ...

    @property
    def is_expanded(self) -> bool: ...

    @property
    def is_leaf(self) -> bool: ...

    def remove_from_parent(self) -> None: ...

    def insert_child_at(self, index: int, node: Any) -> None: ...


class TreeNode(Generic[T]):
    """
    A node in a host-owned forest.

    • key         – stable identity, unique per process
    • data        – arbitrary payload (label, entry id, ...)
    • children    – ordered, owned by this node
    • is_expanded – whether children are shown when flattened

    Top-level nodes hang off a virtual root created with
    TreeNode.virtual_root(); the root is never shown and never dragged.
    """

    __slots__ = ("key", "data", "_parent", "_children", "_expanded", "_is_virtual_root")

    def __init__(
            self,
            data: T = None,
            children: Optional[Iterable["TreeNode[T]"]] = None,
            expanded: bool = False,
    ):
        self.key = next(_keys)
        self.data = data
        self._parent: Optional[TreeNode[T]] = None
        self._children: List[TreeNode[T]] = []
        self._expanded = expanded
        self._is_virtual_root = False

        for child in children or ():
            self.insert_child_at(len(self._children), child)

    @classmethod
    def virtual_root(cls, children: Optional[Iterable["TreeNode[T]"]] = None) -> "TreeNode[T]":
        root = cls(data=None, children=children, expanded=True)
        root._is_virtual_root = True
        return root

    def __repr__(self) -> str:
        if self._is_virtual_root:
            return "TreeNode(<root>)"
        return f"TreeNode({self.data!r})"

    # ------------------------------------------------------------------ #
    # Read side
    # ------------------------------------------------------------------ #

    @property
    def is_virtual_root(self) -> bool:
        return self._is_virtual_root

    @property
    def parent(self) -> Optional["TreeNode[T]"]:
        return self._parent

    @property
    def children(self) -> Sequence["TreeNode[T]"]:
        return tuple(self._children)

    @property
    def index(self) -> int:
        """Position among siblings, or -1 for a detached node."""
        if self._parent is None:
            return -1
        for i, sibling in enumerate(self._parent._children):
            if sibling is self:
                return i
        return -1

    @property
    def is_leaf(self) -> bool:
        return not self._children

    @property
    def is_expanded(self) -> bool:
        # The root always shows its children.
        return self._is_virtual_root or self._expanded

    @is_expanded.setter
    def is_expanded(self, value: bool) -> None:
        if not self._is_virtual_root:
            self._expanded = bool(value)

    # ------------------------------------------------------------------ #
    # Write side
    # ------------------------------------------------------------------ #

    def remove_from_parent(self) -> None:
        """Detach from the current parent. No-op when already detached."""
        parent = self._parent
        if parent is None:
            return
        idx = self.index
        if idx >= 0:
            parent._children.pop(idx)
        self._parent = None

    def insert_child_at(self, index: int, node: "TreeNode[T]") -> None:
        """Insert a detached node as a child at `index` (0 .. len(children))."""
        if node._is_virtual_root:
            raise ValueError("The virtual root cannot become a child")
        if node._parent is not None:
            raise RuntimeError(f"{node!r} still belongs to {node._parent!r}; remove it first")
        if not (0 <= index <= len(self._children)):
            raise ValueError(f"Insert index {index} out of range 0..{len(self._children)}")

        self._children.insert(index, node)
        node._parent = self

    def add_child(self, node: "TreeNode[T]") -> "TreeNode[T]":
        """Append `node` as the last child and return it."""
        self.insert_child_at(len(self._children), node)
        return node
