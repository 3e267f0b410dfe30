"""
Rail Ink - Board Scoring

Derives the structural scoring metrics of a finished board (connected
exits, longest road and rail, deadends, lakes, forest-adjacent cells and
the center count) and reduces them to a single number.

Every analysis reads the grid only; scoring the same board twice gives
the same result.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import NamedTuple

import structlog

from .cell_repo import Cell, CellRepo, facing_edge
from .constants import MAX_EXIT_GROUP, MAX_EXIT_GROUP_POINTS, POINTS_PER_EXTRA_EXIT
from .direction import ALL, Direction, opposite
from .edge import TRANSPORT, EdgeType

logger = structlog.get_logger(__name__)

EdgeKey = tuple[tuple[int, int], tuple[int, int]]


class Deadend(NamedTuple):
    cell: Cell
    direction: Direction


@dataclass
class Score:
    """Per-category scoring detail for one board."""

    exits: list[int] = field(default_factory=list)
    center: int = 0
    deadends: list[Deadend] = field(default_factory=list)
    road: list[Cell] = field(default_factory=list)
    rail: list[Cell] = field(default_factory=list)
    lakes: list[int] = field(default_factory=list)
    forests: list[Cell] = field(default_factory=list)


def edge_key(a: Cell, b: Cell) -> EdgeKey:
    """Order-independent key for the connection between two cells."""
    first, second = sorted(((a.x, a.y), (b.x, b.y)))
    return first, second


def out_directions(cell: Cell, entry: Direction | None) -> tuple[Direction, ...]:
    """
    Directions a traversal may leave a cell by.

    A traversal starting on the cell may use any side; one that entered
    through `entry` is limited to the sides wired to that edge.
    """
    if entry is None:
        return ALL
    return cell.tile.edge(entry).connects


class BoardScorer:
    """
    Runs the scoring analyses over one board.

    The scorer keeps a reference to the grid and nothing else; each
    analysis builds its own working state and drops it on return.
    """

    def __init__(self, cells: CellRepo):
        self.cells = cells

    def score(self) -> Score:
        """Run every analysis and collect the results."""
        result = Score(
            exits=self.get_exits(),
            center=self.get_center_count(),
            rail=self.get_longest(EdgeType.RAIL),
            road=self.get_longest(EdgeType.ROAD),
            deadends=self.get_deadends(),
            lakes=self.get_lakes(),
            forests=self.get_forests(),
        )
        logger.debug(
            "Board scored",
            exits=result.exits,
            center=result.center,
            road=len(result.road),
            rail=len(result.rail),
            deadends=len(result.deadends),
            lakes=result.lakes,
            forests=len(result.forests),
        )
        return result

    # =========================================================================
    # Exits
    # =========================================================================

    def get_subgraph(self, start: Cell) -> list[Cell]:
        """
        Find every cell connected to `start` through matching, wired edges.

        Breadth-first over (cell, entry direction) pairs. A cell can be
        entered more than once through different edges (each entry opens a
        different set of sides), but each cell-to-cell connection is
        followed at most once and each cell is reported once.

        Returns:
            Connected cells in discovery order, `start` first
        """
        subgraph: list[Cell] = []
        seen: set[Cell] = set()
        locked: set[EdgeKey] = set()
        queue: deque[tuple[Cell, Direction | None]] = deque([(start, None)])

        while queue:
            cell, entry = queue.popleft()
            tile = cell.tile
            if tile is None:
                continue

            if cell not in seen:
                seen.add(cell)
                subgraph.append(cell)

            for d in out_directions(cell, entry):
                edge_type = tile.edge(d).type
                if edge_type == EdgeType.NONE:
                    continue

                neighbor = self.cells.neighbor(cell, d)
                if neighbor.tile is None:
                    continue
                if facing_edge(neighbor, d) != edge_type:
                    continue

                key = edge_key(cell, neighbor)
                if key in locked:
                    continue
                locked.add(key)
                queue.append((neighbor, opposite(d)))

        return subgraph

    def get_connected_exits(self, start: Cell) -> list[Cell]:
        return [cell for cell in self.get_subgraph(start) if cell.border]

    def get_exits(self) -> list[int]:
        """
        Sizes of the exit groups: border cells joined by one network.

        Single exits that reach no other exit are not groups and are left out.
        """
        results = []
        remaining = self.cells.filter(lambda cell: cell.border and cell.tile is not None)

        while remaining:
            connected = self.get_connected_exits(remaining[0])
            if len(connected) > 1:
                results.append(len(connected))
            connected_set = set(connected)
            connected_set.add(remaining[0])
            remaining = [cell for cell in remaining if cell not in connected_set]

        return results

    # =========================================================================
    # Longest road / rail
    # =========================================================================

    def get_longest_from(
        self,
        cell: Cell,
        entry: Direction | None,
        edge_type: EdgeType,
        locked: set[Cell],
    ) -> list[Cell]:
        """
        Longest simple path of `edge_type` that starts at `cell`.

        `locked` holds the cells on the path being built; they cannot be
        re-entered. The cell is released again before returning, so other
        branches may route through it.
        """
        tile = cell.tile
        if tile is None:
            return []

        best: list[Cell] = []
        locked.add(cell)
        try:
            for d in out_directions(cell, entry):
                if tile.edge(d).type != edge_type:
                    continue

                neighbor = self.cells.neighbor(cell, d)
                if neighbor.border or neighbor.tile is None:
                    continue
                if neighbor in locked:
                    continue
                if facing_edge(neighbor, d) != edge_type:
                    continue

                subpath = self.get_longest_from(neighbor, opposite(d), edge_type, locked)
                if len(subpath) > len(best):
                    best = subpath
        finally:
            locked.discard(cell)

        return [cell] + best

    def get_longest(self, edge_type: EdgeType) -> list[Cell]:
        """
        Longest simple road or rail path on the board.

        Every interior tile showing the edge type is tried as a start;
        the first longest path found wins.
        """
        starts = self.cells.filter(
            lambda cell: not cell.border and cell.tile is not None and cell.tile.has(edge_type)
        )

        best_path: list[Cell] = []
        for cell in starts:
            path = self.get_longest_from(cell, None, edge_type, set())
            if len(path) > len(best_path):
                best_path = path

        return best_path

    # =========================================================================
    # Deadends
    # =========================================================================

    def is_deadend(self, cell: Cell, direction: Direction) -> bool:
        tile = cell.tile
        if tile is None:
            return False

        edge_type = tile.edge(direction).type
        if edge_type not in TRANSPORT:
            return False

        neighbor = self.cells.neighbor(cell, direction)
        if neighbor.border:
            return False  # open exit, not a deadend

        if neighbor.tile is None:
            return True
        return facing_edge(neighbor, direction) != edge_type

    def get_deadends(self) -> list[Deadend]:
        """Road and rail edges that lead nowhere, row-major then N, E, S, W."""
        return [
            Deadend(cell, d)
            for cell in self.cells.filter(lambda cell: not cell.border)
            for d in ALL
            if self.is_deadend(cell, d)
        ]

    # =========================================================================
    # Lakes
    # =========================================================================

    def extract_lake(self, lake_cells: list[Cell]) -> list[Cell]:
        """
        Pull one lake out of `lake_cells` (which is modified in place).

        The first remaining cell seeds the lake; neighbors joined to it by
        lake edges on both sides are removed from `lake_cells` and flooded
        in turn.
        """
        pending = deque([lake_cells.pop(0)])
        processed: list[Cell] = []

        while pending:
            current = pending.popleft()
            processed.append(current)

            tile = current.tile
            if tile is None:
                continue

            for d in ALL:
                if tile.edge(d).type != EdgeType.LAKE:
                    continue
                neighbor = self.cells.neighbor(current, d)
                if facing_edge(neighbor, d) != EdgeType.LAKE:
                    continue
                if neighbor not in lake_cells:
                    continue
                lake_cells.remove(neighbor)
                pending.append(neighbor)

        return processed

    def get_lakes(self) -> list[int]:
        """Size of every lake, in discovery order."""
        lake_cells = self.cells.filter(
            lambda cell: cell.tile is not None and cell.tile.has(EdgeType.LAKE)
        )

        sizes = []
        while lake_cells:
            sizes.append(len(self.extract_lake(lake_cells)))
        return sizes

    # =========================================================================
    # Forests and center
    # =========================================================================

    def has_forest_neighbor(self, cell: Cell) -> bool:
        return any(
            facing_edge(self.cells.neighbor(cell, d), d) == EdgeType.FOREST for d in ALL
        )

    def get_forests(self) -> list[Cell]:
        """Interior non-forest tiles that face at least one forest edge."""
        return [
            cell
            for cell in self.cells
            if not cell.border
            and cell.tile is not None
            and not cell.tile.has(EdgeType.FOREST)
            and self.has_forest_neighbor(cell)
        ]

    def get_center_count(self) -> int:
        return len(self.cells.filter(lambda cell: cell.center and cell.tile is not None))


# =============================================================================
# Aggregation
# =============================================================================


def get_score(cells: CellRepo) -> Score:
    """Score a board."""
    return BoardScorer(cells).score()


def exit_points(count: int) -> int:
    if count == MAX_EXIT_GROUP:
        return MAX_EXIT_GROUP_POINTS
    return (count - 1) * POINTS_PER_EXTRA_EXIT


def map_exits(score: Score) -> list[int]:
    """Points for each exit group."""
    return [exit_points(count) for count in score.exits]


def sum_lakes(score: Score) -> int:
    """Lake points: the size of the smallest lake, 0 without lakes."""
    return min(score.lakes) if score.lakes else 0


def total(score: Score) -> int:
    """Final score of a board."""
    return (
        sum(map_exits(score))
        + len(score.road)
        + len(score.rail)
        + score.center
        - len(score.deadends)
        + sum_lakes(score)
        + len(score.forests)
    )
