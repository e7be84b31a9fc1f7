"""Convert a CSV bill of materials into per-thickness problem files.

The input is the CSV BOM exported from Autodesk Fusion 360: a header row,
then ``name, quantity, dim1, dim2, dim3`` per part. The smallest of the
three dimensions is taken as the material thickness, and parts sharing a
thickness end up in the same problem file.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from sheetpacker_core.models import Item, Problem, Sheet

from .problem_io import save_problem

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class BomFormatError(ValueError):
    """A BOM row cannot be turned into items."""


def row_to_item(record: Sequence[str], row_num: int = 0) -> Tuple[Item, str]:
    """Return the item described by ``record`` and its thickness key."""

    if len(record) < 5:
        raise BomFormatError(f"row {row_num}: expected 5 columns, got {len(record)}")
    dims: List[int] = []
    for value in record[2:5]:
        try:
            dims.append(int(float(value)))
        except ValueError as e:
            raise BomFormatError(f"row {row_num}: cannot parse dimension {value!r}") from e

    smallest = dims.index(min(dims))
    thickness = str(dims.pop(smallest))
    return Item(name=record[0], width=dims[0], height=dims[1]), thickness


def group_by_thickness(rows: Iterable[Sequence[str]]) -> Dict[str, List[Item]]:
    """Expand quantities and group items by thickness. The first row is a header."""

    groups: Dict[str, List[Item]] = {}
    for row_num, record in enumerate(rows, start=1):
        if row_num == 1 or not record:
            continue
        if len(record) < 2:
            raise BomFormatError(f"row {row_num}: expected 5 columns, got {len(record)}")
        try:
            qty = int(record[1])
        except ValueError as e:
            raise BomFormatError(f"row {row_num}: cannot parse quantity {record[1]!r}") from e
        item, thickness = row_to_item(record, row_num)
        group = groups.setdefault(thickness, [])
        for q in range(qty):
            group.append(Item(name=f"{item.name}.{q:03d}", width=item.width, height=item.height))
    return groups


def read_bom(path: PathLike) -> Dict[str, List[Item]]:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return group_by_thickness(csv.reader(f))


def problem_file_path(path: PathLike, thickness: str) -> Path:
    source = Path(path)
    return source.with_name(f"{source.stem}_sheet{thickness}.json")


def write_problem_files(path: PathLike, sheet: Optional[Sheet] = None) -> List[Path]:
    """Write one problem file per thickness next to the BOM.

    Without ``sheet`` the files carry a zero-width sheet to be filled in by hand.
    """

    groups = read_bom(path)
    target_sheet = sheet if sheet is not None else Sheet(width=0)
    if sheet is None:
        logger.warning("No sheet size given, problem files need a sheet width")
    written: List[Path] = []
    for thickness, items in groups.items():
        target = problem_file_path(path, thickness)
        save_problem(target, Problem(sheet=target_sheet, items=items))
        logger.info("Wrote %d items of thickness %s to %s", len(items), thickness, target)
        written.append(target)
    return written
