import random

import pytest

from edakit.avl import AVL, AVLNode, NodeType

SOURCE_VALUES = [16, 32, 45, 8, 10, 15]


@pytest.fixture
def tree():
    avl = AVL()
    for value in SOURCE_VALUES:
        avl.insert(value)
    return avl


def _nodes(node):
    if node is None:
        return []
    return [node] + _nodes(node.left) + _nodes(node.right)


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.value] + _inorder(node.right)


def _real_height(node):
    if node is None:
        return -1
    return 1 + max(_real_height(node.left), _real_height(node.right))


def test_traverse_after_source_insertions(tree):
    expected = (
        "*16  L\n"
        "**10  L\n"
        "***8  L\n"
        "***15  R\n"
        "**32  R\n"
        "***45  R\n"
    )
    assert tree.traverse() == expected


def test_root_and_height(tree):
    assert tree.root.value == 16
    assert tree.root.height() == 2
    assert tree.root.parent is None


def test_find(tree):
    assert tree.find(15).value == 15
    assert tree.find(99) is None


def test_parent_links_consistent(tree):
    for node in _nodes(tree.root):
        if node.left is not None:
            assert node.left.parent is node
            assert node.left.type is NodeType.LEFT
        if node.right is not None:
            assert node.right.parent is node
            assert node.right.type is NodeType.RIGHT


def test_set_children_and_heights():
    parent = AVLNode(5)
    left = AVLNode(3)
    right = AVLNode(8)
    parent.set_left(left)
    parent.set_right(right)
    assert left.parent is parent and left.is_left
    assert right.parent is parent and right.is_right
    parent.update_children_heights()
    assert (parent.h_left, parent.h_right) == (1, 1)
    assert parent.balance_score() == 0
    parent.set_right(None)
    parent.update_children_heights()
    assert parent.balance_score() == 1


def test_default_node():
    node = AVLNode()
    assert node.value == -1
    assert node.height() == 0


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_random_inserts_stay_balanced(seed):
    rng = random.Random(seed)
    values = rng.sample(range(1000), 300)
    avl = AVL()
    for value in values:
        avl.insert(value)
    assert _inorder(avl.root) == sorted(values)
    for node in _nodes(avl.root):
        assert node.balance_score() <= 1
        assert node.h_left == _real_height(node.left) + 1
        assert node.h_right == _real_height(node.right) + 1


def test_sorted_inserts_stay_shallow():
    avl = AVL()
    for value in range(1023):
        avl.insert(value)
    assert _inorder(avl.root) == list(range(1023))
    assert avl.root.height() <= 14