[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "aocdays"
version = "0.1.0"
description = "Solvers for a series of daily programming puzzles, with a command to run them on puzzle input"
requires-python = ">=3.10"
keywords = ["puzzles", "advent", "solutions", "grid"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aocdays = "aocdays.cli:main"

[tool.setuptools.packages.find]
include = ["aocdays*"]

[tool.pytest.ini_options]
addopts = "-ra"
