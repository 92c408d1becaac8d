[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hwkit"
version = "0.1.0"
description = "Small data structures and algorithms: palindromes, binary conversion, stacks, queues, linked lists, search trees, partitioning and graph reachability."
requires-python = ">=3.10"
dependencies = []
keywords = ["data-structures", "algorithms", "stack", "queue", "linked-list", "binary-tree", "graph"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hwkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
