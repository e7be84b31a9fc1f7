from sheetpacker_core.models import Item, PackedItem, PackedSheet, Sheet, Solution


def test_sheet_without_height_is_unbounded():
    assert not Sheet(width=1000).bounded
    assert Sheet(width=1000, height=900).bounded


def test_packed_item_edges():
    packed = PackedItem(item=Item("a", 500, 200), x=495, y=400)
    assert packed.name == "a"
    assert packed.right == 995
    assert packed.bottom == 600
    assert packed.rect == (495, 400, 500, 200)


def test_used_height_of_empty_sheet_is_zero():
    assert PackedSheet(sheet=Sheet(100, 100)).used_height == 0


def test_solution_placements_carry_sheet_index():
    first = PackedSheet(Sheet(100, 100), [PackedItem(Item("a", 10, 10), 0, 0)])
    second = PackedSheet(
        Sheet(100, 100),
        [PackedItem(Item("b", 10, 10), 0, 0), PackedItem(Item("c", 10, 10), 10, 0)],
    )
    solution = Solution(sheets=[first, second], cost=20000)

    assert [(index, packed.name) for index, packed in solution.placements()] == [
        (0, "a"),
        (1, "b"),
        (1, "c"),
    ]
    assert solution.sheet_count == 2
    assert solution.item_count == 3
