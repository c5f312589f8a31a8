"""Cartesian trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """Binary tree node."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_cartesian_tree(values: Iterable[Any]) -> TreeNode | None:
    """Max-heap ordered tree whose in-order walk gives ``values``; later equal values rise."""
    spine: list[TreeNode] = []
    for value in values:
        node = TreeNode(value)
        last: TreeNode | None = None
        while spine and spine[-1].data <= value:
            last = spine.pop()
        node.left = last
        if spine:
            spine[-1].right = node
        spine.append(node)
    return spine[0] if spine else None


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield the values of a binary tree in order."""
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.data
        node = node.right