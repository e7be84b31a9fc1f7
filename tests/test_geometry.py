from sheetpacker_core.geometry import (
    find_overlaps,
    layout_problems,
    level_rows,
    out_of_bounds,
    rects_overlap,
)
from sheetpacker_core.models import Item, PackedItem, PackedSheet, Sheet, Solution


def test_touching_rects_do_not_overlap():
    assert not rects_overlap((0, 0, 10, 10), (10, 0, 10, 10))
    assert not rects_overlap((0, 0, 10, 10), (0, 10, 10, 10))
    assert rects_overlap((0, 0, 10, 10), (9, 9, 10, 10))


def test_overlap_and_bounds_are_reported():
    a = PackedItem(Item("a", 60, 50), 0, 0)
    b = PackedItem(Item("b", 60, 50), 50, 0)
    c = PackedItem(Item("c", 10, 10), 0, 95)
    packed_sheet = PackedSheet(Sheet(100, 100), [a, b, c])

    assert find_overlaps(packed_sheet) == [(a, b)]
    assert out_of_bounds(packed_sheet) == [b, c]

    problems = layout_problems(Solution(sheets=[packed_sheet], cost=10000))
    assert len(problems) == 3
    assert any('"a" and "b" overlap' in problem for problem in problems)


def test_unbounded_sheet_has_no_bottom():
    packed_sheet = PackedSheet(Sheet(100), [PackedItem(Item("deep", 10, 10), 0, 5000)])
    assert out_of_bounds(packed_sheet) == []


def test_level_rows_group_by_offset():
    a = PackedItem(Item("a", 10, 30), 0, 0)
    b = PackedItem(Item("b", 10, 20), 10, 0)
    c = PackedItem(Item("c", 10, 10), 0, 30)
    rows = level_rows(PackedSheet(Sheet(20), [a, b, c]))
    assert rows == {0: [a, b], 30: [c]}
