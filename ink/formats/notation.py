"""
Rail Ink - Tile Notation

Text notation for tile sides and wiring used in board files.

Sides are four letters in N, E, S, W order:
    .  none      R  road      T  rail (track)
    L  lake      F  forest
e.g. "R.R." is a straight north-south road.

Wiring is four space-separated tokens, one per side, listing the sides
that side connects to ("." for none), e.g. "S . N ." for that road.
Link groups are a shorter hand-written form: "NS EW" wires N with S and
E with W; "*" wires every non-empty side together.
"""

from typing import List, Optional

from ..core.direction import ALL, Direction, parse_direction
from ..core.edge import Edge, EdgeType, direction_mask
from ..core.tile import Tile

SIDE_LETTERS = {
    ".": EdgeType.NONE,
    "R": EdgeType.ROAD,
    "T": EdgeType.RAIL,
    "L": EdgeType.LAKE,
    "F": EdgeType.FOREST,
}
LETTER_FOR_TYPE = {edge_type: letter for letter, edge_type in SIDE_LETTERS.items()}

ALL_LINKED = "*"


def _require_text(value, what: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{what} must be a string, got {value!r}")
    return value


def parse_sides(text: str) -> List[EdgeType]:
    """
    Parse a side string into edge types.

    Example:
        >>> parse_sides("R.R.")
        [<EdgeType.ROAD: 1>, <EdgeType.NONE: 0>, <EdgeType.ROAD: 1>, <EdgeType.NONE: 0>]

    Raises:
        ValueError: On unknown letters or a side count other than four.
    """
    letters = _require_text(text, "Sides").replace(" ", "").upper()
    if len(letters) != len(ALL):
        raise ValueError(f"Expected {len(ALL)} sides, got {text!r}")
    try:
        return [SIDE_LETTERS[letter] for letter in letters]
    except KeyError as e:
        raise ValueError(f"Unknown side letter {e.args[0]!r} in {text!r}") from None


def format_sides(types: List[EdgeType]) -> str:
    return "".join(LETTER_FOR_TYPE[EdgeType(t)] for t in types)


def parse_links(text: str) -> Optional[List[List[Direction]]]:
    """
    Parse link groups. "*" means every side is linked (returns None).

    Example:
        >>> parse_links("NS")
        [[<Direction.N: 0>, <Direction.S: 2>]]
    """
    if _require_text(text, "Links").strip() == ALL_LINKED:
        return None
    return [[parse_direction(letter) for letter in group] for group in text.split()]


def _format_directions(directions) -> str:
    return "".join(d.name for d in directions) or "."


def format_wiring(tile: Tile) -> str:
    """
    Example:
        >>> format_wiring(Tile.from_sides(parse_sides("R.R."), [[0, 2]]))
        'S . N .'
    """
    return " ".join(_format_directions(tile.edge(d).connects) for d in ALL)


def parse_wiring(sides: List[EdgeType], text: str) -> Tile:
    """
    Build a tile from side types and an exact per-side wiring string.

    Raises:
        ValueError: On malformed tokens or a side wired to itself.
    """
    tokens = _require_text(text, "Wiring").split()
    if len(tokens) != len(ALL):
        raise ValueError(f"Expected {len(ALL)} wiring tokens, got {text!r}")

    edges = []
    for d, token in zip(ALL, tokens):
        connects = [] if token == "." else [parse_direction(c) for c in token]
        edges.append(Edge(EdgeType(sides[d]), direction_mask(connects)))
    return Tile(tuple(edges))


def parse_tile(sides: str, links: Optional[str] = None, wiring: Optional[str] = None) -> Tile:
    """Build a tile from notation. `wiring` wins over `links` when both are set."""
    types = parse_sides(sides)
    if wiring is not None:
        return parse_wiring(types, wiring)
    groups = parse_links(links) if links is not None else None
    return Tile.from_sides(types, groups)
