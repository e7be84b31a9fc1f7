import random

import pytest

from sheetpacker_app.problem_io import dump_solution
from sheetpacker_core import ALGORITHMS
from sheetpacker_core.geometry import layout_problems, level_rows
from sheetpacker_core.models import Item, Problem, Sheet


def _random_problem(seed, sheet):
    rng = random.Random(seed)
    max_height = sheet.height or 300
    items = [
        Item(f"p{idx}", rng.randint(1, sheet.width), rng.randint(1, max_height))
        for idx in range(60)
    ]
    return Problem(sheet=sheet, items=items)


SHEETS = [Sheet(100, 80), Sheet(250, 400), Sheet(120)]


@pytest.mark.parametrize("algorithm", sorted(ALGORITHMS))
@pytest.mark.parametrize("sheet", SHEETS)
@pytest.mark.parametrize("seed", [1, 7, 42])
def test_no_overlap_and_containment(algorithm, sheet, seed):
    problem = _random_problem(seed, sheet)

    solution = ALGORITHMS[algorithm](problem)

    assert layout_problems(solution) == []
    placed = sorted(packed.name for _, packed in solution.placements())
    assert placed == sorted(item.name for item in problem.items)


@pytest.mark.parametrize("algorithm", sorted(ALGORITHMS))
@pytest.mark.parametrize("sheet", SHEETS)
def test_first_item_of_each_level_is_tallest(algorithm, sheet):
    solution = ALGORITHMS[algorithm](_random_problem(3, sheet))

    for packed_sheet in solution.sheets:
        for row in level_rows(packed_sheet).values():
            assert row[0].height == max(packed.height for packed in row)
            assert row[0].x == 0


@pytest.mark.parametrize("algorithm", sorted(ALGORITHMS))
def test_levels_never_split_across_sheets(algorithm):
    solution = ALGORITHMS[algorithm](_random_problem(11, Sheet(100, 80)))

    for packed_sheet in solution.sheets:
        rows = level_rows(packed_sheet)
        tops = sorted(rows)
        assert tops[0] == 0
        for upper, lower in zip(tops, tops[1:]):
            assert lower == upper + rows[upper][0].height


@pytest.mark.parametrize("algorithm", sorted(ALGORITHMS))
def test_repeated_runs_are_identical(algorithm):
    problem = _random_problem(5, Sheet(100, 80))

    first = ALGORITHMS[algorithm](problem)
    second = ALGORITHMS[algorithm](problem)

    assert first == second
    assert dump_solution(first) == dump_solution(second)


@pytest.mark.parametrize("algorithm", sorted(ALGORITHMS))
def test_bounded_cost_counts_sheets(algorithm):
    sheet = Sheet(100, 80)
    solution = ALGORITHMS[algorithm](_random_problem(9, sheet))
    assert solution.cost == len(solution.sheets) * sheet.width * sheet.height
