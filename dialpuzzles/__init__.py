"""Solvers for five daily input-file puzzles and shared input helpers."""

__version__ = "0.1.0"
__all__ = ["lineio", "day1", "day2", "day3", "day4", "day5"]