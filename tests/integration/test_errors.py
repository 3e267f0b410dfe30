"""
Integration tests for malformed board input.
"""

import json

import pytest

from ink.formats.board_data import BoardData, PlacedTile


def write_board(tmp_path, data):
    path = tmp_path / "board.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        BoardData().load(str(tmp_path / "nope.json"))


def test_invalid_json(tmp_path):
    path = tmp_path / "board.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="not valid JSON"):
        BoardData().load(str(path))


def test_tiles_must_be_list(tmp_path):
    with pytest.raises(ValueError, match="'tiles' list"):
        BoardData().load(write_board(tmp_path, {"tiles": {}}))


def test_missing_coordinates():
    with pytest.raises(ValueError, match="Invalid tile record"):
        PlacedTile.from_dict({"sides": "R.R."})


def test_bad_sides(tmp_path):
    path = write_board(tmp_path, {"tiles": [{"x": 1, "y": 1, "sides": "R?R."}]})
    with pytest.raises(ValueError, match="Unknown side letter"):
        BoardData().load(path)


@pytest.mark.parametrize(
    "record, message",
    [
        ({"x": 1, "y": 1, "sides": 5}, "Sides must be a string"),
        ({"x": 1, "y": 1, "sides": "R.R.", "links": 5}, "Links must be a string"),
        ({"x": 1, "y": 1, "sides": "R.R.", "wiring": ["S"]}, "Wiring must be a string"),
        ({"x": 1, "y": 1, "sides": "R.R.", "rotation": "half"}, "Invalid tile record"),
        ("R.R.", "Invalid tile record"),
    ],
)
def test_wrongly_typed_fields(tmp_path, record, message):
    path = write_board(tmp_path, {"tiles": [record]})
    with pytest.raises(ValueError, match=message):
        BoardData().load(path)


def test_tile_off_grid(tmp_path):
    path = write_board(tmp_path, {"tiles": [{"x": 12, "y": 1, "sides": "R.R."}]})
    board = BoardData()
    board.load(path)
    with pytest.raises(IndexError):
        board.to_cells()


def test_save_without_path():
    with pytest.raises(ValueError, match="No save path"):
        BoardData().save()


def test_board_without_exits(tmp_path):
    path = write_board(tmp_path, {"exits": False, "tiles": []})
    board = BoardData()
    board.load(path)
    cells = board.to_cells()
    assert cells.filter(lambda c: c.tile is not None) == []
