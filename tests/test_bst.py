import random

import pytest

from edakit.bst import BST

SOURCE_VALUES = [16, 4, 2, 20, 15, 18, 35, 50]


@pytest.fixture
def tree():
    bst = BST()
    for value in SOURCE_VALUES:
        bst.insert(value)
    bst.update_sizes()
    return bst


def test_kth_elements_from_source(tree):
    found = [tree.kth_element(k).value for k in range(1, 9)]
    assert found == [2, 4, 15, 16, 18, 20, 35, 50]


def test_traverse_lists_preorder_with_sizes(tree):
    expected = (
        "--16 | s = 8\n"
        "----4 | s = 3\n"
        "------2 | s = 1\n"
        "------15 | s = 1\n"
        "----20 | s = 4\n"
        "------18 | s = 1\n"
        "------35 | s = 2\n"
        "--------50 | s = 1\n"
    )
    assert tree.traverse() == expected


def test_ascending(tree):
    assert tree.ascending() == sorted(SOURCE_VALUES)


def test_find_present_and_absent(tree):
    assert tree.find(18).value == 18
    assert tree.find(17) is None


def test_kth_out_of_range(tree):
    assert tree.kth_element(0) is None
    assert tree.kth_element(9) is None


def test_root_size_counts_all_nodes(tree):
    assert tree.root.size == len(SOURCE_VALUES)


def test_empty_tree():
    bst = BST()
    assert bst.ascending() == []
    assert bst.traverse() == ""
    assert bst.find(3) is None
    assert bst.kth_element(1) is None


def test_random_order_statistics():
    rng = random.Random(7)
    values = [rng.randint(0, 50) for _ in range(200)]
    bst = BST()
    for value in values:
        bst.insert(value)
    bst.update_sizes()
    ordered = sorted(values)
    assert bst.ascending() == ordered
    assert [bst.kth_element(k).value for k in range(1, len(values) + 1)] == ordered