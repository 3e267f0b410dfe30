"""
Rail Ink - Edge Types

Classification of a tile side, and the per-side edge record carrying
the tile's internal wiring.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from .direction import ALL, Direction


class EdgeType(IntEnum):
    NONE = 0
    ROAD = 1
    RAIL = 2
    LAKE = 3
    FOREST = 4


# Edge types a road/rail network is built from
TRANSPORT = frozenset({EdgeType.ROAD, EdgeType.RAIL})


def direction_mask(directions: Iterable[int]) -> int:
    """Pack a set of directions into a bitset."""
    mask = 0
    for d in directions:
        mask |= 1 << int(d)
    return mask


@dataclass(frozen=True)
class Edge:
    """
    One side of a tile.

    `mask` is a bitset of the other directions this side is wired to
    inside the tile: a traversal entering through this side may leave
    through any of them.
    """

    type: EdgeType = EdgeType.NONE
    mask: int = 0

    @property
    def connects(self) -> tuple[Direction, ...]:
        return tuple(d for d in ALL if self.mask & (1 << d))

    def links(self, direction: int) -> bool:
        return bool(self.mask & (1 << int(direction)))


NO_EDGE = Edge()
