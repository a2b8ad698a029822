[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hypergraph_bu"
version = "0.1.0"
description = "Hypergraphs in the hMetis format, with fixing, biasing, BFS and Dijkstra distances"
requires-python = ">=3.10"
dependencies = []
keywords = ["hypergraph", "hmetis", "partitioning", "bfs", "dijkstra"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hypergraph-bu = "hypergraph_bu.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hypergraph_bu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
