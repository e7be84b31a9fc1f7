from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from sheetpacker_core.models import Item, PackedItem, PackedSheet, Problem, Sheet, Solution

PathLike = Union[str, Path]


class ProblemFormatError(ValueError):
    """The problem document does not describe a sheet and items."""


def _parse_dim(value: Any, what: str, *, allow_zero: bool = False) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProblemFormatError(f"{what} must be a number, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ProblemFormatError(f"{what} must be a whole number, got {value!r}")
        value = int(value)
    if value < 0 or (value == 0 and not allow_zero):
        raise ProblemFormatError(f"{what} must be positive, got {value!r}")
    return value


def sheet_from_dict(data: Any) -> Sheet:
    if not isinstance(data, dict):
        raise ProblemFormatError("sheet must be an object")
    if "width" not in data:
        raise ProblemFormatError("sheet width is required")
    width = _parse_dim(data["width"], "sheet width")
    height = _parse_dim(data.get("height") or 0, "sheet height", allow_zero=True)
    return Sheet(width=width, height=height)


def item_from_dict(data: Any, index: int) -> Item:
    if not isinstance(data, dict):
        raise ProblemFormatError(f"item {index} must be an object")
    for key in ("width", "height"):
        if key not in data:
            raise ProblemFormatError(f"item {index} is missing {key}")
    return Item(
        name=str(data.get("name", "")),
        width=_parse_dim(data["width"], f"item {index} width"),
        height=_parse_dim(data["height"], f"item {index} height"),
    )


def problem_from_dict(data: Any) -> Problem:
    """Build a problem from ``{"sheet": {...}, "items": [...]}``."""
    if not isinstance(data, dict):
        raise ProblemFormatError("problem must be an object")
    if "sheet" not in data:
        raise ProblemFormatError("problem has no sheet")
    items = data.get("items")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise ProblemFormatError("items must be a list")
    return Problem(
        sheet=sheet_from_dict(data["sheet"]),
        items=[item_from_dict(item, index) for index, item in enumerate(items)],
    )


def sheet_to_dict(sheet: Sheet) -> Dict[str, Any]:
    data: Dict[str, Any] = {"width": sheet.width}
    # unbounded sheets omit height
    if sheet.height:
        data["height"] = sheet.height
    return data


def item_to_dict(item: Item) -> Dict[str, Any]:
    return {"name": item.name, "width": item.width, "height": item.height}


def packed_item_to_dict(packed: PackedItem) -> Dict[str, Any]:
    data = item_to_dict(packed.item)
    data["x"] = packed.x
    data["y"] = packed.y
    return data


def packed_sheet_to_dict(packed_sheet: PackedSheet) -> Dict[str, Any]:
    data = sheet_to_dict(packed_sheet.sheet)
    data["items"] = [packed_item_to_dict(packed) for packed in packed_sheet.items]
    return data


def problem_to_dict(problem: Problem) -> Dict[str, Any]:
    return {
        "sheet": sheet_to_dict(problem.sheet),
        "items": [item_to_dict(item) for item in problem.items],
    }


def solution_to_dict(solution: Solution) -> Dict[str, Any]:
    return {
        "sheet": [packed_sheet_to_dict(sheet) for sheet in solution.sheets],
        "cost": solution.cost,
    }


def dump_solution(solution: Solution, indent: int = 2) -> str:
    return json.dumps(solution_to_dict(solution), ensure_ascii=False, indent=indent)


def load_problem(path: PathLike) -> Problem:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ProblemFormatError(f"invalid JSON: {e}") from e
    return problem_from_dict(data)


def save_problem(path: PathLike, problem: Problem, indent: int = 4) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(problem_to_dict(problem), f, ensure_ascii=False, indent=indent)
