"""Unbalanced binary search tree with subtree sizes and order statistics."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class BSTNode:
    """A tree cell holding a value, its children and its subtree size."""

    value: int
    left: BSTNode | None = None
    right: BSTNode | None = None
    size: int = 1


class BST:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None

    def insert(self, value: int) -> None:
        node = BSTNode(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def find(self, value: int) -> BSTNode | None:
        """Node holding value, or None when absent."""
        current = self.root
        while current is not None and current.value != value:
            current = current.left if value < current.value else current.right
        return current

    def _preorder(self) -> Iterator[tuple[BSTNode, int]]:
        pending: list[tuple[BSTNode | None, int]] = [(self.root, 1)]
        while pending:
            node, level = pending.pop()
            if node is None:
                continue
            yield node, level
            pending.append((node.right, level + 1))
            pending.append((node.left, level + 1))

    def traverse(self) -> str:
        """Pre-order listing, one node per line, indented by depth."""
        return "".join(
            f"{'-' * (2 * level)}{node.value} | s = {node.size}\n"
            for node, level in self._preorder()
        )

    def ascending(self) -> list[int]:
        """All values in non-decreasing order."""
        values: list[int] = []
        pending: list[BSTNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            values.append(node.value)
            node = node.right
        return values

    def update_sizes(self) -> None:
        """Recompute the subtree size stored in every node."""
        nodes = [node for node, _ in self._preorder()]
        for node in reversed(nodes):
            left = node.left.size if node.left is not None else 0
            right = node.right.size if node.right is not None else 0
            node.size = left + right + 1

    def kth_element(self, k: int) -> BSTNode | None:
        """Node at one-based rank k, using the stored sizes; None if out of range."""
        node = self.root
        while node is not None:
            position = (node.left.size if node.left is not None else 0) + 1
            if k == position:
                return node
            if k > position:
                k -= position
                node = node.right
            else:
                node = node.left
        return None