from __future__ import annotations

import logging

from ..metrics import sheet_cost
from ..models import PackedItem, PackedSheet, Problem, Solution
from ..validation import validate_problem
from .sorting import sort_decreasing_height

logger = logging.getLogger(__name__)


def next_fit_decreasing_height(problem: Problem) -> Solution:
    """Pack items level by level, never revisiting a closed level.

    Next-fit-decreasing-height of Coffman, Garey, Johnson and Tarjan,
    "Performance Bounds for Level-Oriented Two-Dimensional Packing
    Algorithms", SIAM J. Comput. 9(4), 1980.

    Each level is as tall as its first item. A level that would run past
    the bottom of a bounded sheet is moved to a fresh sheet as a whole.
    """

    validate_problem(problem)

    sheet = problem.sheet
    per_sheet = sheet_cost(sheet)
    solution = Solution(sheets=[], cost=per_sheet)

    current = PackedSheet(sheet=sheet)
    level_y = 0
    level_height = 0
    fill = 0
    for item in sort_decreasing_height(problem.items):
        if level_height and fill + item.width > sheet.width:
            level_y += level_height
            fill = 0
            level_height = 0

        if not level_height:
            level_height = item.height
            if sheet.bounded and level_y + level_height > sheet.height:
                solution.sheets.append(current)
                current = PackedSheet(sheet=sheet)
                level_y = 0
                solution.cost += per_sheet
                logger.debug("Sheet %d full, opening another", len(solution.sheets))
            logger.debug("Level at y=%d with height %d", level_y, level_height)

        current.items.append(PackedItem(item=item, x=fill, y=level_y))
        fill += item.width
    solution.sheets.append(current)

    return solution
