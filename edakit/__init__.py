"""Classic data structures and algorithms: lists, trees, sorting, mazes and clustering."""

__version__ = "1.0.0"

__all__ = [
    "avl",
    "bst",
    "cluster",
    "grid_path",
    "linked",
    "matrix",
    "maze",
    "misc",
    "parenthesis",
    "poscodes",
    "rbtree",
    "sorting",
    "tree",
    "vectors",
]