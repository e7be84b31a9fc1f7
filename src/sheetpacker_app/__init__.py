"""Command line front end, file formats and rendering for sheetpacker."""

from .bom import BomFormatError, group_by_thickness, read_bom, write_problem_files
from .problem_io import (
    ProblemFormatError,
    dump_solution,
    load_problem,
    problem_from_dict,
    save_problem,
    solution_to_dict,
)
from .svg_render import render_solution

__all__ = [
    "BomFormatError",
    "ProblemFormatError",
    "dump_solution",
    "group_by_thickness",
    "load_problem",
    "problem_from_dict",
    "read_bom",
    "render_solution",
    "save_problem",
    "solution_to_dict",
    "write_problem_files",
]
