from __future__ import annotations

from .models import Item, Problem


class NoSolutionError(ValueError):
    """Raised when an item can never fit on the problem's sheet."""

    def __init__(self, item: Item, reason: str) -> None:
        super().__init__(reason)
        self.item = item
        self.reason = reason

    def __str__(self) -> str:
        return self.reason


def find_infeasible_item(problem: Problem) -> NoSolutionError | None:
    """Return the error for the first item that cannot fit, without raising.

    Width is checked before height. Height only matters for bounded sheets.
    """

    sheet = problem.sheet
    for item in problem.items:
        if item.width > sheet.width:
            return NoSolutionError(
                item,
                f'item "{item.name}" is wider than the sheet '
                f"({item.width} > {sheet.width})",
            )
        if sheet.bounded and item.height > sheet.height:
            return NoSolutionError(
                item,
                f'item "{item.name}" is taller than the sheet '
                f"({item.height} > {sheet.height})",
            )
    return None


def validate_problem(problem: Problem) -> None:
    error = find_infeasible_item(problem)
    if error is not None:
        raise error
