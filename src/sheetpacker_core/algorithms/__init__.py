from .ffdh import first_fit_decreasing_height
from .nfdh import next_fit_decreasing_height
from .sorting import sort_decreasing_height

__all__ = [
    "first_fit_decreasing_height",
    "next_fit_decreasing_height",
    "sort_decreasing_height",
]
