"""
Rail Ink - Direction Model

Compass directions, their grid offsets, and the reflect/rotate/mirror
operations used by tiles and traversals.
"""

from enum import IntEnum


class Direction(IntEnum):
    N = 0
    E = 1
    S = 2
    W = 3


ALL = (Direction.N, Direction.E, Direction.S, Direction.W)

# (dx, dy) offsets; y grows southwards
VECTOR = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
}


def clamp(value: int) -> Direction:
    """Wrap any integer into the direction range."""
    return Direction(value % len(ALL))


def opposite(direction: int) -> Direction:
    """
    Reflect a direction.

    The edge of a neighboring cell that faces `direction` is found on
    the neighbor's opposite side.
    """
    return clamp(direction + 2)


def rotate(direction: int, quarter_turns: int) -> Direction:
    """Rotate clockwise by a number of quarter turns (negative for ccw)."""
    return clamp(direction + quarter_turns)


def mirror(direction: int) -> Direction:
    """Mirror across the vertical axis (east and west swap)."""
    if direction == Direction.E:
        return Direction.W
    if direction == Direction.W:
        return Direction.E
    return Direction(direction)


def parse_direction(letter: str) -> Direction:
    """
    Parse a direction letter (N, E, S or W, case-insensitive).

    Raises:
        ValueError: If the letter is not a direction.
    """
    try:
        return Direction[letter.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown direction: {letter!r}") from None
