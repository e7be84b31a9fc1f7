from __future__ import annotations

from typing import Dict, List, Tuple

from .models import PackedItem, PackedSheet, Rect, Solution


def rects_overlap(a: Rect, b: Rect) -> bool:
    """True when the interiors intersect. Shared edges do not count."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return not (ax + aw <= bx or bx + bw <= ax or ay + ah <= by or by + bh <= ay)


def find_overlaps(packed_sheet: PackedSheet) -> List[Tuple[PackedItem, PackedItem]]:
    items = packed_sheet.items
    pairs = []
    for i, first in enumerate(items):
        for second in items[i + 1 :]:
            if rects_overlap(first.rect, second.rect):
                pairs.append((first, second))
    return pairs


def out_of_bounds(packed_sheet: PackedSheet) -> List[PackedItem]:
    sheet = packed_sheet.sheet
    outside = []
    for packed in packed_sheet.items:
        if packed.x < 0 or packed.y < 0 or packed.right > sheet.width:
            outside.append(packed)
        elif sheet.bounded and packed.bottom > sheet.height:
            outside.append(packed)
    return outside


def level_rows(packed_sheet: PackedSheet) -> Dict[int, List[PackedItem]]:
    """Group placed items by the y offset of their level."""
    rows: Dict[int, List[PackedItem]] = {}
    for packed in packed_sheet.items:
        rows.setdefault(packed.y, []).append(packed)
    return rows


def layout_problems(solution: Solution) -> List[str]:
    """Describe every overlap and out-of-bounds placement in the solution."""
    problems: List[str] = []
    for index, packed_sheet in enumerate(solution.sheets):
        for packed in out_of_bounds(packed_sheet):
            problems.append(
                f'sheet {index}: item "{packed.name}" at ({packed.x}, {packed.y}) '
                f"leaves the sheet"
            )
        for first, second in find_overlaps(packed_sheet):
            problems.append(
                f'sheet {index}: items "{first.name}" and "{second.name}" overlap'
            )
    return problems
