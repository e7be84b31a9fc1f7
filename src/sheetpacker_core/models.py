from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

# Rectangle as (x, y, w, h)
Rect = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Sheet:
    """Container the items are packed on.

    A height of zero means a single sheet of unbounded height.
    """

    width: int
    height: int = 0

    @property
    def bounded(self) -> bool:
        return self.height > 0


@dataclass(frozen=True)
class Item:
    """Rectangle to be packed, never rotated."""

    name: str
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass
class Problem:
    sheet: Sheet
    items: List[Item] = field(default_factory=list)


@dataclass(frozen=True)
class PackedItem:
    """An item placed at an offset on its sheet."""

    item: Item
    x: int
    y: int

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def width(self) -> int:
        return self.item.width

    @property
    def height(self) -> int:
        return self.item.height

    @property
    def right(self) -> int:
        return self.x + self.item.width

    @property
    def bottom(self) -> int:
        return self.y + self.item.height

    @property
    def rect(self) -> Rect:
        return self.x, self.y, self.item.width, self.item.height


@dataclass
class PackedSheet:
    sheet: Sheet
    items: List[PackedItem] = field(default_factory=list)

    @property
    def width(self) -> int:
        return self.sheet.width

    @property
    def height(self) -> int:
        return self.sheet.height

    @property
    def used_height(self) -> int:
        return max((packed.bottom for packed in self.items), default=0)


@dataclass
class Solution:
    """Items packed on sheets together with the charged sheet area."""

    sheets: List[PackedSheet] = field(default_factory=list)
    cost: int = 0

    @property
    def sheet_count(self) -> int:
        return len(self.sheets)

    @property
    def item_count(self) -> int:
        return sum(len(sheet.items) for sheet in self.sheets)

    def placements(self) -> Iterator[Tuple[int, PackedItem]]:
        for index, sheet in enumerate(self.sheets):
            for packed in sheet.items:
                yield index, packed
