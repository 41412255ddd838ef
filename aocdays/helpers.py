"""Small shared utilities for the puzzle solvers."""

from __future__ import annotations

from os import PathLike


def load_text(path: str | PathLike[str]) -> str:
    """Return the full contents of a text file, line endings untouched."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()