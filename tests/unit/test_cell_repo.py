"""
Unit tests for the cell repository.
"""

import pytest

from ink.core.cell_repo import OFF_GRID, CellRepo, exit_tile
from ink.core.direction import Direction
from ink.core.edge import EdgeType


class TestGrid:
    def test_grid_is_9x9(self, cells):
        assert len(cells) == 81
        assert cells.size == 9

    def test_row_major_order(self, cells):
        coords = [(c.x, c.y) for c in cells]
        assert coords[:3] == [(0, 0), (1, 0), (2, 0)]
        assert coords[9] == (0, 1)

    def test_coordinates_unique(self, cells):
        assert len({(c.x, c.y) for c in cells}) == len(cells)

    def test_border_ring(self, cells):
        border = cells.filter(lambda c: c.border)
        assert len(border) == 81 - 49
        assert cells.at(0, 4).border
        assert cells.at(8, 8).border
        assert not cells.at(1, 1).border
        assert not cells.at(7, 7).border

    def test_center_region(self, cells):
        center = cells.filter(lambda c: c.center)
        assert len(center) == 9
        assert {(c.x, c.y) for c in center} == {
            (x, y) for x in range(3, 6) for y in range(3, 6)
        }

    def test_small_grid_border(self):
        repo = CellRepo(size=3)
        interior = repo.filter(lambda c: not c.border)
        assert [(c.x, c.y) for c in interior] == [(1, 1)]
        assert not interior[0].center


class TestLookup:
    def test_at_returns_same_cell(self, cells):
        assert cells.at(3, 4) is cells.at(3, 4)
        assert (cells.at(3, 4).x, cells.at(3, 4).y) == (3, 4)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (9, 4), (4, 9), (100, 100)])
    def test_off_grid_is_border_sentinel(self, cells, x, y):
        cell = cells.at(x, y)
        assert cell is OFF_GRID
        assert cell.border
        assert cell.tile is None

    def test_sentinel_is_immutable(self, make_tile):
        with pytest.raises(AttributeError):
            OFF_GRID.tile = make_tile("RRRR")

    def test_neighbor(self, cells):
        cell = cells.at(4, 4)
        assert cells.neighbor(cell, Direction.N) is cells.at(4, 3)
        assert cells.neighbor(cell, Direction.E) is cells.at(5, 4)
        assert cells.neighbor(cell, Direction.S) is cells.at(4, 5)
        assert cells.neighbor(cell, Direction.W) is cells.at(3, 4)

    def test_neighbor_of_border_cell_off_grid(self, cells):
        assert cells.neighbor(cells.at(0, 0), Direction.N) is OFF_GRID

    def test_filter(self, cells, make_tile):
        cells.place(2, 2, make_tile("R.R."))
        assert cells.filter(lambda c: c.tile is not None) == [cells.at(2, 2)]


class TestPlacement:
    def test_place_and_remove(self, cells, make_tile):
        tile = make_tile("R.R.", "NS")
        cell = cells.place(2, 3, tile, round_number=4)
        assert cell.tile is tile
        assert cell.round == 4

        cells.remove(2, 3)
        assert cell.tile is None
        assert cell.round == 0

    def test_place_off_grid_raises(self, cells, make_tile):
        with pytest.raises(IndexError, match="out of bounds"):
            cells.place(9, 0, make_tile("R.R."))


class TestExits:
    def test_twelve_exits_on_border(self, cells):
        exits = cells.exit_cells()
        assert len(exits) == 12
        for x, y, _, _ in exits:
            assert cells.at(x, y).border

    def test_exit_layout(self, cells):
        by_position = {(x, y): (d, t) for x, y, d, t in cells.exit_cells()}
        assert by_position[(2, 0)] == (Direction.S, EdgeType.ROAD)
        assert by_position[(4, 0)] == (Direction.S, EdgeType.RAIL)
        assert by_position[(8, 2)] == (Direction.W, EdgeType.RAIL)
        assert by_position[(0, 4)] == (Direction.E, EdgeType.ROAD)
        assert by_position[(6, 8)] == (Direction.N, EdgeType.ROAD)

    def test_exit_tiles_face_inward(self, cells_with_exits):
        tile = cells_with_exits.at(2, 0).tile
        assert tile.edge(Direction.S).type == EdgeType.ROAD
        assert tile.edge(Direction.N).type == EdgeType.NONE
        assert tile.edge(Direction.S).connects == ()

    def test_exit_tile(self):
        tile = exit_tile(Direction.W, EdgeType.RAIL)
        assert tile.types() == (EdgeType.NONE, EdgeType.NONE, EdgeType.NONE, EdgeType.RAIL)
