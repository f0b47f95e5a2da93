# load-scheduler/load_scheduler/index.py
"""
Ordered index of unassigned loads for the nearest-pickup strategy.

An unbalanced binary search tree keyed by each load's distance from the
depot to its pickup. There is no tree object and no parent links: every
operation takes a subtree root and the mutating ones return the new root,
which the caller must store back (the root changes when the tree was empty
or when the root itself is deleted).

Ordering rules:
- Equal keys are inserted into the left subtree
- search() returns the exact-key node, or the last node visited before
  falling off the tree. That is a path-local approximation of the nearest
  load, not a metric nearest-neighbour query
- An empty tree is represented by None, and every lookup on it returns None

No rebalancing is done, so loads inserted in pickup-distance order degrade
the tree to a list. All walks are iterative for that reason.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from . import utils
from .models import Load, Point


@dataclass(eq=False)
class Node:
    """One load in the index, with its cached pickup-distance key."""
    load: Load
    left: Optional[Node] = None
    right: Optional[Node] = None
    key: float = field(init=False)

    def __post_init__(self) -> None:
        self.key = utils.distance_to_pickup(self.load)

    def __repr__(self) -> str:
        text = ""
        if self.left is not None:
            text += f"<{self.left.load.load_id}>"
        text += f" {self.load.load_id} "
        if self.right is not None:
            text += f"<{self.right.load.load_id}>"
        return f"Node({text.strip()})"


def insert(root: Optional[Node], node: Node) -> Node:
    """
    Insert a node and return the root of the tree.

    Args:
        root: Current root, or None for an empty tree
        node: Fresh node to insert (must have no children)

    Returns:
        The new root, which is `node` itself when the tree was empty
    """
    if root is None:
        return node

    current = root
    while True:
        if current.key < node.key:
            if current.right is None:
                current.right = node
                return root
            current = current.right
        else:
            if current.left is None:
                current.left = node
                return root
            current = current.left


def minimum(root: Optional[Node]) -> Optional[Node]:
    """Leftmost node, i.e. the load whose pickup is closest to the depot."""
    if root is None:
        return None

    current = root
    while current.left is not None:
        current = current.left
    return current


def search(root: Optional[Node], point: Point) -> Optional[Node]:
    """
    Find the load whose pickup key matches the point's distance from the depot.

    Returns the matching node, otherwise the last node visited on the way
    down, or None for an empty tree.
    """
    key = utils.distance_from_depot(point)
    previous: Optional[Node] = None
    current = root

    while current is not None:
        previous = current
        if current.key < key:
            current = current.right
        elif key < current.key:
            current = current.left
        else:
            return current

    return previous


def _locate(root: Optional[Node], load: Load, key: float) -> Tuple[Optional[Node], Optional[Node]]:
    """Return (parent, node) holding `load`, or (None, None) if absent."""
    # Successor splicing can leave equal keys on either side of a node,
    # so ties are explored left first, then right.
    pending: List[Tuple[Optional[Node], Optional[Node]]] = [(None, root)]

    while pending:
        parent, current = pending.pop()
        while current is not None:
            if current.key < key:
                parent, current = current, current.right
            elif key < current.key:
                parent, current = current, current.left
            elif current.load == load:
                return parent, current
            else:
                pending.append((current, current.right))
                parent, current = current, current.left

    return None, None


def delete(root: Optional[Node], node: Node) -> Optional[Node]:
    """
    Remove the node's load from the tree and return the new root.

    A node with two children takes over the load of its in-order successor
    (the minimum of its right subtree), and the successor's original
    position is unlinked. Deleting from an empty tree, or deleting a load
    that is not indexed, leaves the tree unchanged.
    """
    if root is None:
        return None

    parent, target = _locate(root, node.load, node.key)
    if target is None:
        return root

    if target.left is not None and target.right is not None:
        successor_parent, successor = target, target.right
        while successor.left is not None:
            successor_parent, successor = successor, successor.left

        target.load, target.key = successor.load, successor.key
        if successor_parent is target:
            successor_parent.right = successor.right
        else:
            successor_parent.left = successor.right
        return root

    replacement = target.left if target.left is not None else target.right
    if parent is None:
        return replacement
    if parent.left is target:
        parent.left = replacement
    else:
        parent.right = replacement
    return root


def build_index(loads: Iterable[Load]) -> Optional[Node]:
    """Insert every load in the given order and return the root."""
    root: Optional[Node] = None
    for load in loads:
        root = insert(root, Node(load))
    return root


def in_order(root: Optional[Node]) -> Iterator[Node]:
    """Yield nodes in ascending key order."""
    stack: List[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def height(root: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path (0 when empty)."""
    if root is None:
        return 0

    deepest = 0
    stack: List[Tuple[Node, int]] = [(root, 1)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        if current.left is not None:
            stack.append((current.left, depth + 1))
        if current.right is not None:
            stack.append((current.right, depth + 1))
    return deepest
