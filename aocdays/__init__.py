"""Solvers for daily programming puzzles (days 1-9 and 12-14) and a command to run them."""

__version__ = "0.1.0"