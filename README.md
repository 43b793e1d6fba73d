# edakit

A collection of classic data structures and algorithms, each small enough
to read in one sitting and complete enough to use:

| Module | What it holds |
| --- | --- |
| `edakit.misc` | `is_prime`, and three maximum-subsequence-sum solvers (`mss_cubic`, `mss_quadratic`, `mss_linear`) returning the start, end and sum of the best run |
| `edakit.sorting` | `selection_sort`, randomized `quick_sort`, quickselect (`k_smallest`), random array helpers, `linspace` |
| `edakit.linked` | `LinkedList` of singly linked `Node`s, plus `Stack` and `Queue` |
| `edakit.parenthesis` | `validate_parentheses`, a stack-based bracket checker |
| `edakit.bst` | `BST` with order statistics (`update_sizes`, `kth_element`) |
| `edakit.avl` | self-balancing `AVL` tree |
| `edakit.rbtree` | `RBTree` red-black tree and `read_keys` for files of 4-byte little-endian integers |
| `edakit.grid_path` | depth-first search on a square boolean grid: `path_exists`, `find_path`, `format_path` |
| `edakit.maze` | random `Maze` generation by depth-first carving |
| `edakit.vectors`, `edakit.matrix`, `edakit.cluster` | vector helpers, a row-major `Matrix` with 2-D float32 `.npy` loading, and k-means `Cluster` |
| `edakit.poscodes` | `Poscode` records (`ddddLL`) sorted by radix, merge and 3-way quick sort |
| `edakit.tree` | general (n-ary) `Tree` of `TreeNode`s |

The package has no dependencies beyond Python 3.10 or later.

## Installation

```
pip install edakit
```

To run the test suite:

```
pip install "edakit[test]"
pytest
```

## Library use

```python
from edakit.linked import LinkedList, Stack
from edakit.misc import mss_linear
from edakit.bst import BST

items = LinkedList()
for value in (1, 3, 5, 15, 5, 17):
    items.insert_first(value)
items.remove(5)
print(items)          # 17 -> 15 -> 3 -> 1 ->
print(len(items))     # 4

stack = Stack()
stack.push(10)
stack.push(20)
print(stack.top())    # 20

print(mss_linear([-2, 11, -1, 3, -3, -2]))   # Subsequence(start=1, end=3, total=13)

tree = BST()
for value in (16, 4, 2, 20, 15, 18, 35, 50):
    tree.insert(value)
tree.update_sizes()
print(tree.kth_element(3).value)   # 15
```

Functions that draw random numbers, such as `quick_sort`, `k_smallest`,
`Matrix.set_all_random` and `Cluster.apply_clustering`, take an `rng`
argument so results can be made repeatable with a seeded `random.Random`;
`Maze` takes one in its constructor.

## Command-line tools

Check bracket balance of a line typed on standard input:

```
edakit-parens
```

Search for a route through the built-in 8 x 8 grid and print it
(defaults: from row 1, column 2 to row 5, column 4):

```
edakit-grid-path --start 1 2 --end 5 4
```

Sort a file of postal codes (one `ddddLL` code per line) and report timing:

```
edakit-poscodes --algo=radix --file=codes.txt --n=500000 --print=10
```

`--algo` is one of `radix`, `merge` or `quick`. When the file holds fewer
than `--n` lines the list is padded with `0000AA`.

## What it does not do

The package does not read or display image files, and it has no command
for printing text files; its readers cover only `.npy` matrices, binary
integer key files and postal-code lists.