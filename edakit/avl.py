"""Self-balancing AVL tree with parent links and cached child heights."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum


class NodeType(Enum):
    """Which side of its parent a node hangs from."""

    LEFT = 10
    RIGHT = 20


class RotationType(Enum):
    LEFT = 10
    RIGHT = 20
    LEFT_RIGHT = 30
    RIGHT_LEFT = 40


class AVLNode:
    """AVL tree cell with the heights of both subtrees."""

    def __init__(self, value: int = -1, parent: AVLNode | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: AVLNode | None = None
        self.right: AVLNode | None = None
        self.h_left = 0
        self.h_right = 0
        self.type = NodeType.LEFT

    def __repr__(self) -> str:
        return f"AVLNode({self.value!r})"

    @property
    def is_left(self) -> bool:
        return self.type is NodeType.LEFT

    @property
    def is_right(self) -> bool:
        return self.type is NodeType.RIGHT

    def set_left(self, node: AVLNode | None) -> None:
        self.left = node
        if node is not None:
            node.parent = self
            node.type = NodeType.LEFT

    def set_right(self, node: AVLNode | None) -> None:
        self.right = node
        if node is not None:
            node.parent = self
            node.type = NodeType.RIGHT

    def height(self) -> int:
        return max(self.h_left, self.h_right)

    def balance_score(self) -> int:
        return abs(self.h_left - self.h_right)

    def update_children_heights(self) -> None:
        self.h_left = self.left.height() + 1 if self.left is not None else 0
        self.h_right = self.right.height() + 1 if self.right is not None else 0


class AVL:
    """AVL tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def insert(self, value: int) -> None:
        if self.root is None:
            self.root = AVLNode(value)
        else:
            self._insert(value, self.root)

    def _insert(self, value: int, node: AVLNode) -> None:
        if value < node.value:
            if node.left is None:
                node.set_left(AVLNode(value, node))
            else:
                self._insert(value, node.left)
        else:
            if node.right is None:
                node.set_right(AVLNode(value, node))
            else:
                self._insert(value, node.right)
        node.update_children_heights()
        if node.balance_score() > 1:
            self._balance(node)

    @staticmethod
    def _rotation_type(node: AVLNode) -> RotationType:
        if node.h_left > node.h_right:
            child = node.left
            if child.h_left > child.h_right:
                return RotationType.RIGHT
            return RotationType.LEFT_RIGHT
        child = node.right
        if child.h_left > child.h_right:
            return RotationType.RIGHT_LEFT
        return RotationType.LEFT

    def _balance(self, node: AVLNode) -> None:
        rotation = self._rotation_type(node)
        if rotation is RotationType.LEFT:
            self._rotate_left(node)
        elif rotation is RotationType.RIGHT:
            self._rotate_right(node)
        elif rotation is RotationType.LEFT_RIGHT:
            self._rotate_left(node.left)
            self._rotate_right(node)
        else:
            self._rotate_right(node.right)
            self._rotate_left(node)

    def _reattach(self, node: AVLNode, parent: AVLNode | None, was_left: bool, replacement: AVLNode) -> None:
        if node is self.root:
            self.root = replacement
            replacement.parent = None
            return
        if was_left:
            parent.set_left(replacement)
        else:
            parent.set_right(replacement)
        parent.update_children_heights()

    def _rotate_left(self, node: AVLNode) -> None:
        child = node.right
        parent = node.parent
        was_left = node.is_left
        node.set_right(child.left)
        child.set_left(node)
        node.update_children_heights()
        child.update_children_heights()
        self._reattach(node, parent, was_left, child)

    def _rotate_right(self, node: AVLNode) -> None:
        child = node.left
        parent = node.parent
        was_left = node.is_left
        node.set_left(child.right)
        child.set_right(node)
        node.update_children_heights()
        child.update_children_heights()
        self._reattach(node, parent, was_left, child)

    def find(self, value: int) -> AVLNode | None:
        """Node holding value, or None when absent."""
        current = self.root
        while current is not None and current.value != value:
            current = current.left if value < current.value else current.right
        return current

    def _preorder(self) -> Iterator[tuple[AVLNode, int]]:
        pending: list[tuple[AVLNode | None, int]] = [(self.root, 1)]
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