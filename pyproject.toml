[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algopack"
version = "0.1.0"
description = "Classic algorithms and data structures: sorting, graphs, dynamic programming, number theory, linked structures, backtracking, the banker's algorithm and two small terminal games."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "graphs",
    "dynamic-programming",
    "number-theory",
    "backtracking",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algopack-games = "algopack.games:main"

[tool.hatch.build.targets.wheel]
packages = ["algopack"]

[tool.pytest.ini_options]
addopts = "-ra"
