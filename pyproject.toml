[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphwork"
version = "0.1.0"
description = "Graph and tree algorithms: traversal, shortest paths, bridges, SCCs, cycles, walks and LCA queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "tree", "bfs", "dfs", "dijkstra", "lca", "union-find", "bridges", "scc", "mex"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["graphwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
