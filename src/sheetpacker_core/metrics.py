from __future__ import annotations

from .models import Sheet, Solution


def sheet_cost(sheet: Sheet) -> int:
    """Charge for one sheet. Zero for unbounded sheets."""
    return sheet.width * sheet.height


def solution_cost(sheet: Sheet, sheets_used: int) -> int:
    return sheets_used * sheet_cost(sheet)


def consumed_area(solution: Solution) -> int:
    """Sheet area actually covered by levels, measured to the lowest item edge.

    This is the meaningful figure for unbounded sheets whose cost is zero.
    """
    return sum(packed.width * packed.used_height for packed in solution.sheets)


def item_area(solution: Solution) -> int:
    return sum(packed.item.area for _, packed in solution.placements())


def utilization(solution: Solution) -> float:
    area = item_area(solution)
    if area <= 0:
        return 0.0
    charged = solution.cost if solution.cost > 0 else consumed_area(solution)
    if charged <= 0:
        return 0.0
    return area / charged
