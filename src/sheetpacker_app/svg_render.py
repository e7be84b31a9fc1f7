"""SVG rendering of packed solutions.

Every entity has its own render function returning an ``svgwrite`` element;
``render_solution`` composes them into one document. Sheets are stacked
vertically with a gap of ``sheet_gap`` times the sheet height.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import svgwrite
from svgwrite.container import Group
from svgwrite.shapes import Rect
from svgwrite.text import Text

from sheetpacker_core.models import Item, PackedItem, PackedSheet, Sheet, Solution

DEFAULT_SHEET_GAP = 0.05

DEFAULT_STYLE: Dict[str, Any] = {
    "sheet_fill": "#f5f5f5",
    "item_fill": "#add8e6",
    "stroke": "#000000",
    "font_size": 12,
}


def _css(style: Dict[str, Any]) -> str:
    return (
        f".sheet {{ fill: {style['sheet_fill']}; stroke: {style['stroke']}; }}\n"
        f".item {{ fill: {style['item_fill']}; stroke: {style['stroke']}; }}\n"
        f".label {{ font-size: {style['font_size']}px; font-family: sans-serif; }}"
    )


def drawn_height(packed_sheet: PackedSheet) -> int:
    """Height to draw; unbounded sheets are drawn down to their lowest item."""
    if packed_sheet.sheet.bounded:
        return packed_sheet.height
    return packed_sheet.used_height


def render_sheet(sheet: Sheet, height: Optional[int] = None) -> Rect:
    drawn = sheet.height if height is None else height
    return Rect(insert=(0, 0), size=(sheet.width, drawn), class_="sheet")


def render_item(item: Item) -> Group:
    group = Group(class_="item-group")
    group.add(Rect(insert=(0, 0), size=(item.width, item.height), class_="item"))
    group.add(
        Text(
            item.name,
            insert=(item.width / 2, item.height / 2),
            class_="label",
            text_anchor="middle",
            dominant_baseline="middle",
        )
    )
    return group


def render_packed_item(packed: PackedItem) -> Group:
    group = Group()
    group.translate(packed.x, packed.y)
    group.add(render_item(packed.item))
    return group


def render_packed_sheet(packed_sheet: PackedSheet) -> Group:
    group = Group(class_="packed-sheet")
    group.add(render_sheet(packed_sheet.sheet, drawn_height(packed_sheet)))
    for packed in packed_sheet.items:
        group.add(render_packed_item(packed))
    return group


def render_solution(
    solution: Solution,
    style: Optional[Dict[str, Any]] = None,
    sheet_gap: float = DEFAULT_SHEET_GAP,
) -> str:
    merged = dict(DEFAULT_STYLE)
    if style:
        merged.update(style)

    width = max((packed.width for packed in solution.sheets), default=0)
    offset = 0.0
    groups = []
    for packed_sheet in solution.sheets:
        group = Group()
        group.translate(0, offset)
        group.add(render_packed_sheet(packed_sheet))
        groups.append(group)
        offset += drawn_height(packed_sheet) * (1 + sheet_gap)

    drawing = svgwrite.Drawing(size=(width, offset), debug=False)
    drawing.viewbox(0, 0, width, offset)
    drawing.defs.add(drawing.style(_css(merged)))
    for group in groups:
        drawing.add(group)
    return drawing.tostring()
