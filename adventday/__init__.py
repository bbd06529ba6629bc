"""Puzzle solutions for the December programming calendar and a runner for them."""

__version__ = "0.1.0"