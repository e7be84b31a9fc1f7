from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from sheetpacker_core.models import Solution

from .svg_render import DEFAULT_SHEET_GAP, DEFAULT_STYLE, drawn_height

logger = logging.getLogger(__name__)


def plot_solution(
    solution: Solution,
    path: Union[str, Path],
    style: Optional[Dict[str, Any]] = None,
    sheet_gap: float = DEFAULT_SHEET_GAP,
    dpi: int = 100,
) -> None:
    """Draw the stacked sheets with their items and save the image to ``path``."""

    merged = dict(DEFAULT_STYLE)
    if style:
        merged.update(style)

    fig = Figure(figsize=(6, 8))
    ax = fig.add_subplot(111)
    width = max((packed.width for packed in solution.sheets), default=0)
    offset = 0.0
    for packed_sheet in solution.sheets:
        height = drawn_height(packed_sheet)
        ax.add_patch(
            Rectangle(
                (0, offset),
                packed_sheet.width,
                height,
                facecolor=merged["sheet_fill"],
                edgecolor=merged["stroke"],
                lw=1.5,
            )
        )
        for packed in packed_sheet.items:
            ax.add_patch(
                Rectangle(
                    (packed.x, offset + packed.y),
                    packed.width,
                    packed.height,
                    facecolor=merged["item_fill"],
                    edgecolor=merged["stroke"],
                    lw=0.8,
                )
            )
            ax.text(
                packed.x + packed.width / 2,
                offset + packed.y + packed.height / 2,
                packed.name,
                ha="center",
                va="center",
                fontsize=8,
            )
        offset += height * (1 + sheet_gap)

    ax.set_xlim(0, max(width, 1))
    # sheets are drawn top-down like the SVG output
    ax.set_ylim(max(offset, 1), 0)
    ax.set_aspect("equal")
    ax.axis("off")
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    logger.info("Saved preview to %s", path)
