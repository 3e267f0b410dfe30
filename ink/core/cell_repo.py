"""
Rail Ink - Cell Repository

Fixed-size grid of board cells. The playable interior is ringed by border
cells that stand for map exits; lookups outside the grid resolve to a
shared border sentinel so neighbor lookups never fail.
"""

from __future__ import annotations

from typing import Callable, Iterator

from .constants import (
    CENTER_MAX,
    CENTER_MIN,
    EXIT_LAYOUT,
    EXIT_OFFSETS,
    GRID_SIZE,
)
from .direction import VECTOR, Direction, opposite
from .edge import EdgeType
from .tile import Tile

EXIT_EDGE_TYPES = {"R": EdgeType.ROAD, "T": EdgeType.RAIL}


class Cell:
    """One grid position, optionally holding a tile."""

    __slots__ = ("x", "y", "border", "center", "tile", "round")

    def __init__(self, x: int, y: int, border: bool, center: bool = False):
        self.x = x
        self.y = y
        self.border = border
        self.center = center
        self.tile: Tile | None = None
        self.round = 0  # round the tile was placed in, 0 for setup tiles

    def __repr__(self):
        kind = "border" if self.border else "center" if self.center else "cell"
        return f"Cell({self.x}, {self.y}, {kind}{', tile' if self.tile else ''})"


class _OffGridCell(Cell):
    """Border cell returned for coordinates outside the grid. Never holds a tile."""

    __slots__ = ()

    def __init__(self):
        object.__setattr__(self, "x", -1)
        object.__setattr__(self, "y", -1)
        object.__setattr__(self, "border", True)
        object.__setattr__(self, "center", False)
        object.__setattr__(self, "tile", None)
        object.__setattr__(self, "round", 0)

    def __setattr__(self, name, value):
        raise AttributeError("Off-grid cell is immutable")

    def __repr__(self):
        return "Cell(off-grid)"


OFF_GRID = _OffGridCell()


def is_border(x: int, y: int, size: int = GRID_SIZE) -> bool:
    return not (0 < x < size - 1 and 0 < y < size - 1)


def is_center(x: int, y: int) -> bool:
    return CENTER_MIN <= x <= CENTER_MAX and CENTER_MIN <= y <= CENTER_MAX


class CellRepo:
    """
    The board grid.

    Cells are stored row-major (y outer, x inner) and keep their identity
    for the life of the repository; only the tile slots change.
    """

    def __init__(self, size: int = GRID_SIZE):
        self.size = size
        self._cells = [
            Cell(x, y, is_border(x, y, size), is_center(x, y))
            for y in range(size)
            for x in range(size)
        ]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def in_grid(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def at(self, x: int, y: int) -> Cell:
        """Cell at (x, y), or the off-grid border sentinel."""
        if not self.in_grid(x, y):
            return OFF_GRID
        return self._cells[y * self.size + x]

    def filter(self, predicate: Callable[[Cell], bool]) -> list[Cell]:
        return [cell for cell in self._cells if predicate(cell)]

    def neighbor(self, cell: Cell, direction: int) -> Cell:
        dx, dy = VECTOR[Direction(direction)]
        return self.at(cell.x + dx, cell.y + dy)

    # Board-layer mutation. The scoring engine never calls these.

    def place(self, x: int, y: int, tile: Tile | None, round_number: int = 0) -> Cell:
        """
        Put a tile on a cell (None clears it).

        Raises:
            IndexError: If (x, y) is outside the grid.
        """
        if not self.in_grid(x, y):
            raise IndexError(f"Coordinate ({x},{y}) out of bounds.")
        cell = self._cells[y * self.size + x]
        cell.tile = tile
        cell.round = round_number if tile else 0
        return cell

    def remove(self, x: int, y: int) -> Cell:
        return self.place(x, y, None)

    def exit_cells(self) -> list[tuple[int, int, Direction, EdgeType]]:
        """
        Exit positions on the border ring.

        Returns:
            List of (x, y, inward direction, edge type) tuples
        """
        last = self.size - 1
        exits = []
        for side, letters in EXIT_LAYOUT.items():
            for offset, letter in zip(EXIT_OFFSETS, letters):
                if side == "N":
                    x, y, inward = offset, 0, Direction.S
                elif side == "S":
                    x, y, inward = offset, last, Direction.N
                elif side == "E":
                    x, y, inward = last, offset, Direction.W
                else:
                    x, y, inward = 0, offset, Direction.E
                exits.append((x, y, inward, EXIT_EDGE_TYPES[letter]))
        return exits

    def place_exits(self):
        """Place the fixed exit tiles, each pointing into the interior."""
        for x, y, inward, edge_type in self.exit_cells():
            self.place(x, y, exit_tile(inward, edge_type))


def exit_tile(inward: Direction, edge_type: EdgeType) -> Tile:
    """Single-sided tile whose only edge faces `inward`."""
    sides = [EdgeType.NONE] * 4
    sides[inward] = edge_type
    return Tile.from_sides(sides, links=[])


def facing_edge(neighbor: Cell, direction: int) -> EdgeType:
    """
    Edge type the neighbor shows back towards a cell that looked at it
    through `direction`. NONE when the neighbor is empty.
    """
    if neighbor.tile is None:
        return EdgeType.NONE
    return neighbor.tile.edge(opposite(direction)).type
