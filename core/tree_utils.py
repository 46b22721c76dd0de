from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from core.tree_node import NodeLike

__all__ = [
    "parent_or_root",
    "get_ancestors",
    "is_descendant_of",
    "iter_descendants",
    "find_child_index",
    "snapshot_edges",
    "move_node",
]

def parent_or_root(node: NodeLike, root: NodeLike) -> NodeLike:
    """Parent of node, with host nodes that report None mapped onto the virtual root."""
    parent = node.parent
    return root if parent is None else parent

def find_child_index(parent: NodeLike, child: NodeLike) -> int:
    """Find index of child among parent's children by identity. Returns -1 if not found."""
    return next((i for i, c in enumerate(parent.children) if c is child), -1)

def get_ancestors(node: NodeLike) -> List[NodeLike]:
    """Get all ancestors from parent up to the top (excluding node itself)."""
    ancestors = []
    current = node.parent
    while current is not None:
        ancestors.append(current)
        current = current.parent
    return ancestors  # [parent, grandparent, great-grandparent, ...]

def is_descendant_of(candidate: NodeLike, ancestor: NodeLike) -> bool:
    """True if `ancestor` appears on the parent chain of `candidate` (or is candidate itself)."""
    current = candidate
    while current is not None:
        if current is ancestor:
            return True
        current = current.parent
    return False

def iter_descendants(node: NodeLike) -> Iterator[NodeLike]:
    """Pre-order walk of everything below node."""
    stack = list(reversed(node.children))
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))

def snapshot_edges(root: NodeLike) -> Dict[int, Tuple[Optional[int], int]]:
    """
    Map id(node) -> (id(parent), index) for every node under root.
    Two snapshots compare equal iff the parent/child structure is identical.
    """
    edges = {}
    for node in iter_descendants(root):
        parent = node.parent
        edges[id(node)] = (id(parent) if parent is not None else None, node.index)
    return edges

# ---------- Structural move ----------

def move_node(node: NodeLike, new_parent: NodeLike, reindex) -> int:
    """
    Move node under new_parent.

    `reindex` is called after node has been detached and must return the
    insertion index derived from the tree as it is now; callers that
    captured an index before the removal would be off by one whenever node
    was an earlier sibling of the drop target. Returns the final index.
    """
    node.remove_from_parent()
    index = reindex()
    index = max(0, min(index, len(new_parent.children)))
    new_parent.insert_child_at(index, node)
    return index
