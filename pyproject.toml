[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edakit"
version = "1.0.0"
description = "Classic data structures and algorithms: lists, stacks, queues, search trees, sorting, mazes, clustering and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "binary search tree",
    "avl",
    "red-black tree",
    "sorting",
    "radix sort",
    "k-means",
    "maze",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edakit-parens = "edakit.parenthesis:main"
edakit-grid-path = "edakit.grid_path:main"
edakit-poscodes = "edakit.poscodes:main"

[tool.hatch.build.targets.wheel]
packages = ["edakit"]

[tool.hatch.build.targets.sdist]
include = ["edakit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
