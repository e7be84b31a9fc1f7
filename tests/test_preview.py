from sheetpacker_app.preview import plot_solution
from sheetpacker_core.algorithms import first_fit_decreasing_height
from sheetpacker_core.models import Item, Problem, Sheet


def test_plot_solution_writes_png(tmp_path):
    items = [Item("a", 60, 60), Item("b", 60, 50), Item("c", 60, 40)]
    solution = first_fit_decreasing_height(Problem(Sheet(100, 100), items))
    path = tmp_path / "layout.png"

    plot_solution(solution, path)

    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
