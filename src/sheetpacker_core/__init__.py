"""Level-oriented two-dimensional sheet packing."""

from .algorithms import first_fit_decreasing_height, next_fit_decreasing_height
from .engine import ALGORITHMS, algorithm_names, pack, pack_best
from .models import Item, PackedItem, PackedSheet, Problem, Sheet, Solution
from .validation import NoSolutionError, find_infeasible_item, validate_problem

__all__ = [
    "Sheet",
    "Item",
    "Problem",
    "PackedItem",
    "PackedSheet",
    "Solution",
    "NoSolutionError",
    "find_infeasible_item",
    "validate_problem",
    "next_fit_decreasing_height",
    "first_fit_decreasing_height",
    "ALGORITHMS",
    "algorithm_names",
    "pack",
    "pack_best",
]
