"""
Rail Ink - Network Score

Count-only form of a Score, small enough to send to other players, and
the side-by-side comparison of several players' scores.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from .score import Score, map_exits, sum_lakes

# Comparison table rows: (label, field)
CATEGORIES = [
    ("Exits", "exits"),
    ("Road", "road"),
    ("Rail", "rail"),
    ("Center", "center"),
    ("Deadends", "deadends"),
    ("Smallest lake", "lakes"),
    ("Forest", "forests"),
]


@dataclass
class NetworkScore:
    exits: list[int] = field(default_factory=list)  # points per exit group
    center: int = 0
    deadends: int = 0
    road: int = 0
    rail: int = 0
    lakes: int = 0  # lake points, not sizes
    forests: int = 0

    def total(self) -> int:
        return (
            sum(self.exits)
            + self.road
            + self.rail
            + self.center
            - self.deadends
            + self.lakes
            + self.forests
        )

    def category_points(self, name: str) -> int:
        """Signed contribution of one category to the total."""
        if name == "exits":
            return sum(self.exits)
        if name == "deadends":
            return -self.deadends
        return getattr(self, name)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NetworkScore":
        """
        Parse a score received from another player.

        Raises:
            ValueError: If a field is missing or has the wrong shape.
        """
        try:
            return cls(
                exits=[int(points) for points in data["exits"]],
                center=int(data["center"]),
                deadends=int(data["deadends"]),
                road=int(data["road"]),
                rail=int(data["rail"]),
                lakes=int(data["lakes"]),
                forests=int(data["forests"]),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid network score: {e}") from e


def to_network_score(score: Score) -> NetworkScore:
    return NetworkScore(
        exits=map_exits(score),
        center=score.center,
        deadends=len(score.deadends),
        road=len(score.road),
        rail=len(score.rail),
        lakes=sum_lakes(score),
        forests=len(score.forests),
    )


def rank_players(players: dict[str, NetworkScore]) -> list[tuple[str, NetworkScore]]:
    """Players ordered by total, best first. Equal totals keep input order."""
    return sorted(players.items(), key=lambda item: item[1].total(), reverse=True)


def format_comparison(players: dict[str, NetworkScore]) -> str:
    """
    Plain-text table comparing players, one column per player (best first).

    Args:
        players: Mapping of player name to their network score

    Returns:
        Multi-line table; empty string when there are no players
    """
    ranked = rank_players(players)
    if not ranked:
        return ""

    label_width = max(len(label) for label, _ in CATEGORIES + [("Total", "")])
    widths = [max(len(name), 5) for name, _ in ranked]

    def row(label: str, values: list[str]) -> str:
        cells = [value.rjust(width) for value, width in zip(values, widths)]
        return "  ".join([label.ljust(label_width)] + cells).rstrip()

    lines = [row("", [name for name, _ in ranked])]
    for label, name in CATEGORIES:
        lines.append(row(label, [str(s.category_points(name)) for _, s in ranked]))
    lines.append(row("Total", [str(s.total()) for _, s in ranked]))
    return "\n".join(lines)
