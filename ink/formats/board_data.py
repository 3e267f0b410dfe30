"""
Rail Ink - Board Data Model

Loads and saves finished (or in-progress) boards as JSON files and builds
the cell repository the scoring engine reads.

File layout:
    {
      "name": "...",
      "exits": true,
      "tiles": [
        {"x": 1, "y": 4, "sides": "R.R.", "wiring": "S . N .", "round": 1},
        ...
      ]
    }

Hand-written files may use "links" ("NS EW" or "*") instead of "wiring",
and may give "rotation" (quarter turns clockwise) and "mirror" to place a
tile in a transformed position. Saved files always store the final sides
and exact wiring.
"""

from typing import Any, Dict, List, Optional

from . import compact_json as json
from . import notation
from ..core.cell_repo import CellRepo
from ..core.tile import Tile


class PlacedTile:
    """A tile at a board position."""

    def __init__(self, x: int, y: int, tile: Tile, round_number: int = 0):
        self.x = x
        self.y = y
        self.tile = tile
        self.round = round_number

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "x": self.x,
            "y": self.y,
            "sides": notation.format_sides(list(self.tile.types())),
            "wiring": notation.format_wiring(self.tile),
        }
        if self.round:
            data["round"] = self.round
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlacedTile":
        """
        Raises:
            ValueError: If the record is missing fields or has bad notation.
        """
        try:
            x = int(data["x"])
            y = int(data["y"])
            sides = data["sides"]
            rotation = int(data.get("rotation", 0))
            round_number = int(data.get("round", 0))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid tile record {data!r}: {e}") from e

        tile = notation.parse_tile(sides, data.get("links"), data.get("wiring"))
        tile = tile.transformed(rotation, bool(data.get("mirror", False)))
        return cls(x, y, tile, round_number)


class BoardData:
    """Manages a board: its name, placed tiles and whether exits are set up."""

    def __init__(self, name: str = ""):
        self.name = name
        self.exits = True
        self.tiles: List[PlacedTile] = []
        self.filepath: Optional[str] = None
        self.modified = False

    def load(self, path: str):
        """
        Load board data from JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not valid board JSON.
        """
        with open(path, "r") as f:
            try:
                data = json.load(f)
            except ValueError as e:
                raise ValueError(f"{path}: not valid JSON ({e})") from e
        self.from_dict(data)
        self.filepath = path
        self.modified = False

    def from_dict(self, data: Dict[str, Any]):
        if not isinstance(data, dict) or not isinstance(data.get("tiles", []), list):
            raise ValueError("Board data must be an object with a 'tiles' list")
        self.name = data.get("name", "")
        self.exits = bool(data.get("exits", True))
        self.tiles = [PlacedTile.from_dict(record) for record in data.get("tiles", [])]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "exits": self.exits,
            "tiles": [placed.to_dict() for placed in self.tiles],
        }

    def save(self, path: Optional[str] = None):
        """Save board data to JSON file."""
        if path is None:
            path = self.filepath
        if path is None:
            raise ValueError("No save path specified")

        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

        self.filepath = path
        self.modified = False

    def place(self, x: int, y: int, tile: Tile, round_number: int = 0):
        """Place a tile, replacing anything already at (x, y)."""
        self.tiles = [p for p in self.tiles if (p.x, p.y) != (x, y)]
        self.tiles.append(PlacedTile(x, y, tile, round_number))
        self.modified = True

    def remove(self, x: int, y: int):
        before = len(self.tiles)
        self.tiles = [p for p in self.tiles if (p.x, p.y) != (x, y)]
        if len(self.tiles) != before:
            self.modified = True

    def to_cells(self) -> CellRepo:
        """
        Build the cell repository for this board.

        Raises:
            IndexError: If a tile lies outside the grid.
        """
        cells = CellRepo()
        if self.exits:
            cells.place_exits()
        for placed in self.tiles:
            cells.place(placed.x, placed.y, placed.tile, placed.round)
        return cells

    @classmethod
    def from_cells(cls, cells: CellRepo, name: str = "") -> "BoardData":
        """Capture the player-placed tiles of a repository (exits excluded)."""
        board = cls(name)
        exit_positions = {(x, y) for x, y, _, _ in cells.exit_cells()}
        board.exits = any(cells.at(x, y).tile is not None for x, y in exit_positions)
        for cell in cells:
            if cell.tile is None:
                continue
            if (cell.x, cell.y) in exit_positions:
                continue
            board.tiles.append(PlacedTile(cell.x, cell.y, cell.tile, cell.round))
        return board
