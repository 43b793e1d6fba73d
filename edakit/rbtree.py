"""Red-black tree with parent links, and a reader for binary key files."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from enum import Enum
from pathlib import Path

from edakit.avl import NodeType


class NodeColor(Enum):
    RED = 10
    BLACK = 20


class RBNode:
    """Red-black tree cell; new nodes start red."""

    def __init__(self, value: int = -1, parent: RBNode | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: RBNode | None = None
        self.right: RBNode | None = None
        self.color = NodeColor.RED
        self.type = NodeType.LEFT

    def __repr__(self) -> str:
        return f"RBNode({self.value!r}, {self.color.name})"

    @property
    def is_left(self) -> bool:
        return self.type is NodeType.LEFT

    @property
    def is_right(self) -> bool:
        return self.type is NodeType.RIGHT

    def set_left(self, node: RBNode | None) -> None:
        self.left = node
        if node is not None:
            node.parent = self
            node.type = NodeType.LEFT

    def set_right(self, node: RBNode | None) -> None:
        self.right = node
        if node is not None:
            node.parent = self
            node.type = NodeType.RIGHT


def _is_red(node: RBNode | None) -> bool:
    return node is not None and node.color is NodeColor.RED


class RBTree:
    """Red-black tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self.root: RBNode | None = None

    def insert(self, value: int) -> None:
        if self.root is None:
            self.root = RBNode(value)
            self.root.color = NodeColor.BLACK
            return
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    node = RBNode(value, current)
                    current.set_left(node)
                    break
                current = current.left
            else:
                if current.right is None:
                    node = RBNode(value, current)
                    current.set_right(node)
                    break
                current = current.right
        self._fix_after_insert(node)

    def _fix_after_insert(self, node: RBNode) -> None:
        while _is_red(node.parent):
            parent = node.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if _is_red(uncle):
                    parent.color = uncle.color = NodeColor.BLACK
                    grand.color = NodeColor.RED
                    node = grand
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                parent.color = NodeColor.BLACK
                grand.color = NodeColor.RED
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if _is_red(uncle):
                    parent.color = uncle.color = NodeColor.BLACK
                    grand.color = NodeColor.RED
                    node = grand
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                parent.color = NodeColor.BLACK
                grand.color = NodeColor.RED
                self._rotate_left(grand)
        self.root.color = NodeColor.BLACK

    def _reattach(self, parent: RBNode | None, was_left: bool, replacement: RBNode) -> None:
        if parent is None:
            self.root = replacement
            replacement.parent = None
        elif was_left:
            parent.set_left(replacement)
        else:
            parent.set_right(replacement)

    def _rotate_left(self, node: RBNode) -> None:
        child = node.right
        parent = node.parent
        was_left = parent is not None and parent.left is node
        node.set_right(child.left)
        child.set_left(node)
        self._reattach(parent, was_left, child)

    def _rotate_right(self, node: RBNode) -> None:
        child = node.left
        parent = node.parent
        was_left = parent is not None and parent.left is node
        node.set_left(child.right)
        child.set_right(node)
        self._reattach(parent, was_left, child)

    def find(self, value: int) -> RBNode | None:
        """Node holding value, or None when absent."""
        current = self.root
        while current is not None and current.value != value:
            current = current.left if value < current.value else current.right
        return current

    def _preorder(self) -> Iterator[tuple[RBNode, int]]:
        pending: list[tuple[RBNode | None, int]] = [(self.root, 1)]
        while pending:
            node, level = pending.pop()
            if node is None:
                continue
            yield node, level
            pending.append((node.right, level + 1))
            pending.append((node.left, level + 1))

    def traverse(self) -> str:
        """Pre-order listing: depth stars, value and side (L or R)."""
        return "".join(
            f"{'*' * level}{node.value}  {'L' if node.is_left else 'R'}\n"
            for node, level in self._preorder()
        )


def read_keys(path: str | Path) -> list[int]:
    """Read consecutive 4-byte little-endian signed integers; a trailing partial record is ignored."""
    data = Path(path).read_bytes()
    usable = len(data) - len(data) % 4
    return [key for (key,) in struct.iter_unpack("<i", data[:usable])]