[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bajtocja"
version = "0.1.0"
description = "Solutions to the Bajtocja contest puzzles as plain Python functions and classes"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "algorithms", "competitive-programming", "graphs", "union-find"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bajtocja"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
