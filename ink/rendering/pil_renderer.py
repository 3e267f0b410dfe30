"""
Rail Ink - PIL Renderer

PIL-based rendering of boards to PNG images, with an optional highlight
("signal") over the cells behind one scoring category.
"""

from typing import Iterable, Optional

try:
    from PIL import Image, ImageDraw
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.cell_repo import Cell, CellRepo
from ..core.direction import ALL, VECTOR
from ..core.edge import EdgeType
from ..core.palettes import (
    CELL_SIZE,
    COLOR_BACKGROUND,
    COLOR_BORDER,
    COLOR_CELL,
    COLOR_CENTER,
    COLOR_ROUND,
    COLOR_SIGNAL,
    EDGE_COLORS,
    EDGE_WIDTH,
    GRID_GAP,
)
from ..core.score import Score

SIGNAL_CATEGORIES = ("road", "rail", "deadends", "forests")


def cell_origin(cell: Cell) -> tuple[int, int]:
    """Top-left pixel of a cell."""
    step = CELL_SIZE + GRID_GAP
    return GRID_GAP + cell.x * step, GRID_GAP + cell.y * step


def signal_cells(score: Score, category: str) -> list[Cell]:
    """
    Cells to highlight for a scoring category.

    Raises:
        ValueError: For categories without cells to show.
    """
    if category in ("road", "rail", "forests"):
        return list(getattr(score, category))
    if category == "deadends":
        return [deadend.cell for deadend in score.deadends]
    raise ValueError(
        f"Cannot signal {category!r}; choose one of {', '.join(SIGNAL_CATEGORIES)}"
    )


def render_board_to_image(
    cells: CellRepo,
    signal: Optional[Iterable[Cell]] = None,
    show_rounds: bool = True,
) -> Image.Image:
    """
    Render a board to a PIL Image.

    Args:
        cells: Board to draw
        signal: Cells to highlight (optional)
        show_rounds: Draw one pip per round number on placed tiles

    Returns:
        PIL Image object
    """
    signalled = set(signal or ())
    size = GRID_GAP + cells.size * (CELL_SIZE + GRID_GAP)
    img = Image.new("RGB", (size, size), COLOR_BACKGROUND)
    draw = ImageDraw.Draw(img)

    for cell in cells:
        left, top = cell_origin(cell)
        box = (left, top, left + CELL_SIZE - 1, top + CELL_SIZE - 1)

        if cell in signalled:
            fill = COLOR_SIGNAL
        elif cell.border:
            fill = COLOR_BORDER
        elif cell.center:
            fill = COLOR_CENTER
        else:
            fill = COLOR_CELL
        draw.rectangle(box, fill=fill)

        if cell.tile is not None:
            _draw_tile(draw, cell, left, top)
            if show_rounds and cell.round:
                _draw_round(draw, cell.round, left, top)

    return img


def _draw_tile(draw: ImageDraw.ImageDraw, cell: Cell, left: int, top: int):
    half = CELL_SIZE // 2
    cx, cy = left + half, top + half

    for d in ALL:
        edge_type = cell.tile.edge(d).type
        if edge_type == EdgeType.NONE:
            continue
        dx, dy = VECTOR[d]
        end = (cx + dx * (half - 1), cy + dy * (half - 1))
        draw.line([(cx, cy), end], fill=EDGE_COLORS[edge_type], width=EDGE_WIDTH)


def _draw_round(draw: ImageDraw.ImageDraw, round_number: int, left: int, top: int):
    # One pip per round along the top-left corner, clear of the north edge
    pip = 3
    for i in range(round_number):
        x = left + 2 + i * (pip + 1)
        if x + pip >= left + CELL_SIZE // 2 - EDGE_WIDTH:
            break
        draw.rectangle((x, top + 2, x + pip - 1, top + 2 + pip - 1), fill=COLOR_ROUND)
