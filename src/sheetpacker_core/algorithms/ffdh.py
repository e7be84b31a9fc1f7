from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..metrics import solution_cost
from ..models import PackedItem, PackedSheet, Problem, Solution
from ..validation import validate_problem
from .sorting import sort_decreasing_height

logger = logging.getLogger(__name__)


@dataclass
class _Level:
    height: int
    space_left: int
    items: List[PackedItem] = field(default_factory=list)


def _first_fitting_level(levels: List[_Level], width: int, height: int) -> Optional[_Level]:
    for level in levels:
        if level.height >= height and level.space_left >= width:
            return level
    return None


def first_fit_decreasing_height(problem: Problem) -> Solution:
    """Place every item into the first open level with room for it.

    First-fit-decreasing-height of Coffman, Garey, Johnson and Tarjan (1980).
    Items are first assigned to levels, then levels are stacked onto sheets
    in the order they were opened.
    """

    validate_problem(problem)

    sheet = problem.sheet
    levels: List[_Level] = []
    for item in sort_decreasing_height(problem.items):
        level = _first_fitting_level(levels, item.width, item.height)
        if level is None:
            level = _Level(height=item.height, space_left=sheet.width)
            levels.append(level)
            logger.debug("Opened level %d with height %d", len(levels), item.height)
        level.items.append(PackedItem(item=item, x=sheet.width - level.space_left, y=0))
        level.space_left -= item.width

    sheets: List[PackedSheet] = []
    current = PackedSheet(sheet=sheet)
    fill = 0
    for level in levels:
        if sheet.bounded and fill + level.height > sheet.height:
            sheets.append(current)
            current = PackedSheet(sheet=sheet)
            fill = 0
        current.items.extend(
            PackedItem(item=packed.item, x=packed.x, y=fill) for packed in level.items
        )
        fill += level.height
    sheets.append(current)

    return Solution(sheets=sheets, cost=solution_cost(sheet, len(sheets)))
