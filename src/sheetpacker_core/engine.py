from __future__ import annotations

import logging
from typing import Callable, Dict, List, Tuple

from .algorithms import first_fit_decreasing_height, next_fit_decreasing_height
from .metrics import consumed_area, utilization
from .models import Problem, Solution

logger = logging.getLogger(__name__)

Heuristic = Callable[[Problem], Solution]

ALGORITHMS: Dict[str, Heuristic] = {
    "nfdh": next_fit_decreasing_height,
    "ffdh": first_fit_decreasing_height,
}

DEFAULT_ALGORITHM = "nfdh"


def algorithm_names() -> List[str]:
    return list(ALGORITHMS)


def pack(problem: Problem, algorithm: str = DEFAULT_ALGORITHM) -> Solution:
    """Run one registered heuristic on ``problem``.

    ``NoSolutionError`` from validation propagates unchanged.
    """

    try:
        heuristic = ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(
            f"unknown algorithm {algorithm!r}, expected one of {algorithm_names()}"
        ) from None

    solution = heuristic(problem)
    logger.info(
        "%s packed %d items on %d sheet(s), cost %d, utilization %.1f%%",
        algorithm,
        solution.item_count,
        solution.sheet_count,
        solution.cost,
        utilization(solution) * 100,
    )
    return solution


def _ranking_key(entry: Tuple[int, str, Solution]) -> tuple:
    order, _, solution = entry
    return solution.cost, solution.sheet_count, consumed_area(solution), order


def pack_best(problem: Problem) -> Tuple[str, Solution]:
    """Run every heuristic and keep the cheapest layout.

    Ties fall back to fewer sheets, then less consumed area, then
    registration order.
    """

    candidates = [
        (order, name, pack(problem, name)) for order, name in enumerate(ALGORITHMS)
    ]
    _, name, solution = min(candidates, key=_ranking_key)
    logger.info("Selected %s", name)
    return name, solution
