import random
import struct

import pytest

from edakit.avl import NodeType
from edakit.rbtree import NodeColor, RBNode, RBTree, read_keys


def _black_height(node):
    """Check red-black rules below node and return its black height."""
    if node is None:
        return 1
    if node.color is NodeColor.RED:
        for child in (node.left, node.right):
            assert child is None or child.color is NodeColor.BLACK
    for child, side in ((node.left, NodeType.LEFT), (node.right, NodeType.RIGHT)):
        if child is not None:
            assert child.parent is node
            assert child.type is side
    left = _black_height(node.left)
    right = _black_height(node.right)
    assert left == right
    return left + (1 if node.color is NodeColor.BLACK else 0)


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.value] + _inorder(node.right)


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def test_single_node_traverse():
    tree = RBTree()
    tree.insert(7)
    assert tree.traverse() == "*7  L\n"
    assert tree.root.color is NodeColor.BLACK


def test_new_node_defaults():
    node = RBNode(4)
    assert node.color is NodeColor.RED
    assert node.is_left
    assert node.parent is None


def test_set_children_links():
    parent = RBNode(5)
    left, right = RBNode(2), RBNode(9)
    parent.set_left(left)
    parent.set_right(right)
    assert left.parent is parent and left.is_left
    assert right.parent is parent and right.is_right


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_random_inserts_keep_invariants(seed):
    rng = random.Random(seed)
    values = [rng.randint(-500, 500) for _ in range(400)]
    tree = RBTree()
    for value in values:
        tree.insert(value)
    assert tree.root.color is NodeColor.BLACK
    assert tree.root.parent is None
    _black_height(tree.root)
    assert _inorder(tree.root) == sorted(values)


def test_sorted_inserts_stay_shallow():
    tree = RBTree()
    for value in range(1024):
        tree.insert(value)
    _black_height(tree.root)
    assert _inorder(tree.root) == list(range(1024))
    assert _height(tree.root) <= 20


def test_find():
    tree = RBTree()
    for value in (5, 3, 8, 1, 4):
        tree.insert(value)
    assert tree.find(4).value == 4
    assert tree.find(6) is None
    assert RBTree().find(1) is None


def test_read_keys_round_trip(tmp_path):
    keys = [5, -2, 1024, 33554432]
    path = tmp_path / "keys.bin"
    path.write_bytes(struct.pack(f"<{len(keys)}i", *keys))
    assert read_keys(path) == keys


def test_read_keys_ignores_partial_record(tmp_path):
    path = tmp_path / "keys.bin"
    path.write_bytes(struct.pack("<2i", 1, 2) + b"\x01\x02")
    assert read_keys(path) == [1, 2]


def test_read_keys_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_keys(tmp_path / "absent.bin")