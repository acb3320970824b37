[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treegraph"
version = "0.1.0"
description = "Small graph and binary tree algorithms: breadth-first search, m-colouring, and classic tree queries and traversals"
requires-python = ">=3.12"
dependencies = []
keywords = [
    "graph",
    "bfs",
    "graph-colouring",
    "backtracking",
    "binary-tree",
    "traversal",
    "algorithms",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treegraph-bfs = "treegraph.bfs:main"
treegraph-colouring = "treegraph.colouring:main"
treegraph-tree = "treegraph.tree_queries:main"
treegraph-traverse = "treegraph.tree_traversals:main"

[tool.hatch.build.targets.wheel]
packages = ["treegraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py312"

[tool.mypy]
python_version = "3.12"
strict = true
