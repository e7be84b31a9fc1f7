from __future__ import annotations

from typing import Iterable, List

from ..models import Item


def sort_decreasing_height(items: Iterable[Item]) -> List[Item]:
    """Tallest first. Equal heights keep their input order."""
    return sorted(items, key=lambda item: -item.height)
