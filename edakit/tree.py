"""General tree whose nodes keep an ordered list of children."""

from __future__ import annotations

from collections.abc import Iterator


class TreeNode:
    """A tree cell with a value, its parent and its children (newest first)."""

    def __init__(self, value: int = -1) -> None:
        self.value = value
        self.parent: TreeNode | None = None
        self.children: list[TreeNode] = []

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"

    def remove_child(self, value: int) -> None:
        """Drop every direct child holding value, with its descendants."""
        self.children = [child for child in self.children if child.value != value]

    def find_child(self, value: int) -> TreeNode | None:
        """First direct child holding value, or None."""
        return next((child for child in self.children if child.value == value), None)


class Tree:
    """A rooted tree of TreeNode cells."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def set_root(self, node: TreeNode) -> None:
        """Use node as root; ignored once a root is set."""
        if self.root is None:
            self.root = node

    def attach(self, child: TreeNode, parent: TreeNode | None) -> None:
        """Make child the first child of parent; nothing happens without a parent."""
        if parent is not None:
            child.parent = parent
            parent.children.insert(0, child)

    def insert(self, value: int, parent_value: int) -> TreeNode | None:
        """Add value under the first node holding parent_value; None if there is none."""
        parent = self.find(parent_value)
        if parent is None:
            return None
        child = TreeNode(value)
        self.attach(child, parent)
        return child

    def _preorder(self) -> Iterator[tuple[TreeNode, int]]:
        pending: list[tuple[TreeNode, int]] = [] if self.root is None else [(self.root, 1)]
        while pending:
            node, level = pending.pop()
            yield node, level
            pending.extend((child, level + 1) for child in reversed(node.children))

    def find(self, value: int) -> TreeNode | None:
        """First node holding value in pre-order, or None."""
        return next((node for node, _ in self._preorder() if node.value == value), None)

    def traverse(self) -> str:
        """Pre-order listing, one node per line, indented by depth."""
        return "".join(
            f"{'-' * (2 * level)}{node.value} at level {level}\n"
            for node, level in self._preorder()
        )