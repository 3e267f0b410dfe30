"""
Rail Ink core.

This package contains the board model (directions, edges, tiles, cells)
and the scoring engine that turns a finished board into a score.
"""

from .cell_repo import Cell, CellRepo, OFF_GRID
from .direction import Direction
from .edge import Edge, EdgeType
from .network_score import NetworkScore, to_network_score
from .score import BoardScorer, Deadend, Score, get_score, map_exits, sum_lakes, total
from .tile import Tile

__all__ = [
    "BoardScorer",
    "Cell",
    "CellRepo",
    "Deadend",
    "Direction",
    "Edge",
    "EdgeType",
    "NetworkScore",
    "OFF_GRID",
    "Score",
    "Tile",
    "get_score",
    "map_exits",
    "sum_lakes",
    "to_network_score",
    "total",
]
