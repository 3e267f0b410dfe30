"""Shared pytest fixtures for board and scoring tests."""

from pathlib import Path

import pytest
import structlog

from ink.core.cell_repo import CellRepo
from ink.formats.board_data import BoardData
from ink.formats.notation import parse_tile


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a tool applied during the test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_tile():
    """Build a tile from notation, e.g. make_tile("R.R.", "NS")."""
    return parse_tile


@pytest.fixture
def cells():
    """Empty 9x9 board without exit tiles."""
    return CellRepo()


@pytest.fixture
def cells_with_exits():
    """Empty 9x9 board with the 12 exit tiles placed."""
    repo = CellRepo()
    repo.place_exits()
    return repo


@pytest.fixture
def sample_board_path():
    """Path to the hand-built sample board."""
    return Path(__file__).parent / "fixtures" / "sample_board.json"


@pytest.fixture
def sample_board(sample_board_path):
    """Load the sample board (straight road between two exits, lakes, forest)."""
    board = BoardData()
    board.load(str(sample_board_path))
    return board


@pytest.fixture
def sample_cells(sample_board):
    return sample_board.to_cells()
