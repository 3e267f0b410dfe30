"""
Rail Ink - Tile Model

A placed tile: one typed edge per direction plus the tile's internal
wiring (which sides a road or rail entering through one side can leave by).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .direction import ALL, Direction, mirror, rotate
from .edge import NO_EDGE, Edge, EdgeType, direction_mask


@dataclass(frozen=True)
class Tile:
    """Immutable tile with edges indexed by direction (N, E, S, W)."""

    edges: tuple[Edge, Edge, Edge, Edge] = (NO_EDGE, NO_EDGE, NO_EDGE, NO_EDGE)

    def __post_init__(self):
        if len(self.edges) != len(ALL):
            raise ValueError(f"Tile needs {len(ALL)} edges, got {len(self.edges)}")
        for d, edge in zip(ALL, self.edges):
            if edge.links(d):
                raise ValueError(f"Edge {d.name} cannot connect to itself")
            if edge.mask and edge.type == EdgeType.NONE:
                raise ValueError(f"Side {d.name} has no edge to link")
            for other in edge.connects:
                if self.edges[other].type == EdgeType.NONE:
                    raise ValueError(f"Side {other.name} has no edge to link")

    @classmethod
    def from_sides(
        cls,
        sides: Sequence[EdgeType],
        links: Iterable[Iterable[int]] | None = None,
    ) -> "Tile":
        """
        Build a tile from side types and wiring groups.

        Args:
            sides: Edge type per direction, in N, E, S, W order.
            links: Groups of directions wired together inside the tile.
                A side connects to every other side sharing a group with it.
                None wires every non-NONE side to every other one.

        Returns:
            New Tile

        Raises:
            ValueError: If the side count is wrong or a group links a NONE side.
        """
        if len(sides) != len(ALL):
            raise ValueError(f"Tile needs {len(ALL)} sides, got {len(sides)}")
        sides = [EdgeType(s) for s in sides]

        if links is None:
            groups = [[d for d in ALL if sides[d] != EdgeType.NONE]]
        else:
            groups = [[Direction(d) for d in group] for group in links]

        masks = [0] * len(ALL)
        for group in groups:
            for d in group:
                if sides[d] == EdgeType.NONE:
                    raise ValueError(f"Side {d.name} has no edge to link")
                masks[d] |= direction_mask(o for o in group if o != d)

        return cls(tuple(Edge(sides[d], masks[d]) for d in ALL))

    def edge(self, direction: int) -> Edge:
        return self.edges[direction]

    def types(self) -> tuple[EdgeType, ...]:
        return tuple(e.type for e in self.edges)

    def has(self, edge_type: EdgeType) -> bool:
        return any(e.type == edge_type for e in self.edges)

    def rotated(self, quarter_turns: int) -> "Tile":
        """Return a copy turned clockwise by `quarter_turns` * 90 degrees."""
        return self._remap(lambda d: rotate(d, quarter_turns))

    def mirrored(self) -> "Tile":
        """Return a copy flipped across the vertical axis."""
        return self._remap(mirror)

    def transformed(self, rotation: int = 0, flip: bool = False) -> "Tile":
        """Mirror first (if requested), then rotate."""
        tile = self.mirrored() if flip else self
        return tile.rotated(rotation) if rotation % len(ALL) else tile

    def _remap(self, move) -> "Tile":
        # The side that ends up at direction move(d) is the old side d.
        edges: list[Edge] = [NO_EDGE] * len(ALL)
        for d in ALL:
            old = self.edges[d]
            edges[move(d)] = Edge(old.type, direction_mask(move(c) for c in old.connects))
        return Tile(tuple(edges))
