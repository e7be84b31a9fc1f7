from __future__ import annotations

import argparse
import logging
import sys
from importlib import metadata
from typing import List, Optional

from sheetpacker_core import NoSolutionError, Sheet, algorithm_names, pack, pack_best

from .bom import BomFormatError, write_problem_files
from .logger import setup_logging
from .problem_io import ProblemFormatError, dump_solution, load_problem
from .settings import SettingsError, load_settings
from .svg_render import render_solution

logger = logging.getLogger(__name__)


def _get_app_version() -> str:
    try:
        return metadata.version("sheetpacker")
    except metadata.PackageNotFoundError:
        return "dev"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheetpacker",
        description="Pack rectangular items onto sheets using level heuristics.",
    )
    parser.add_argument("--version", action="version", version=_get_app_version())
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("2d", help="Solve a 2D packing problem")
    solve.add_argument("problem", help="Problem JSON file")
    solve.add_argument(
        "-a",
        "--algorithm",
        choices=algorithm_names() + ["best"],
        help="Packing heuristic (default from settings)",
    )
    solve.add_argument("--svg", action="store_true", help="Print solution as SVG")
    solve.add_argument("--png", metavar="PATH", help="Also save a PNG preview")
    solve.add_argument("-o", "--output", metavar="PATH", help="Write to file instead of stdout")

    bom = sub.add_parser("bom", help="Convert a CSV BOM into problem files")
    bom.add_argument("bom", help="CSV bill of materials")
    bom.add_argument("--sheet-width", type=int, help="Sheet width for the problem files")
    bom.add_argument("--sheet-height", type=int, default=0, help="Sheet height, 0 for unbounded")
    return parser


def _emit(text: str, output: Optional[str]) -> None:
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        logger.info("Wrote %s", output)
    else:
        print(text)


def run_2d(args: argparse.Namespace, settings: dict) -> int:
    try:
        problem = load_problem(args.problem)
    except (OSError, ProblemFormatError) as e:
        print(f"cannot read problem: {e}", file=sys.stderr)
        return 1

    algorithm = args.algorithm or settings["algorithm"]
    if algorithm not in algorithm_names() + ["best"]:
        print(f"cannot solve problem: unknown algorithm {algorithm!r}", file=sys.stderr)
        return 1
    try:
        if algorithm == "best":
            _, solution = pack_best(problem)
        else:
            solution = pack(problem, algorithm)
    except NoSolutionError as e:
        logger.debug("Infeasible item: %s", e.item)
        print(f"cannot solve problem: {e}", file=sys.stderr)
        return 1

    if args.png:
        from .preview import plot_solution

        plot_solution(solution, args.png, settings["svg"], settings["sheet_gap"])

    if args.svg:
        text = render_solution(solution, settings["svg"], settings["sheet_gap"])
    else:
        text = dump_solution(solution, indent=settings["json_indent"])
    _emit(text, args.output)
    return 0


def run_bom(args: argparse.Namespace) -> int:
    sheet = None
    if args.sheet_width:
        sheet = Sheet(width=args.sheet_width, height=args.sheet_height or 0)
    try:
        written = write_problem_files(args.bom, sheet)
    except (OSError, BomFormatError) as e:
        print(f"cannot convert BOM: {e}", file=sys.stderr)
        return 1
    for path in written:
        print(path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args.config)
    except (OSError, SettingsError) as e:
        print(f"cannot load settings: {e}", file=sys.stderr)
        return 1
    setup_logging(logging.DEBUG if args.verbose else settings["log_level"])

    if args.command == "2d":
        return run_2d(args, settings)
    return run_bom(args)


if __name__ == "__main__":
    sys.exit(main())
