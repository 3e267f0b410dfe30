"""
Integration tests scoring the sample board file end to end.

The sample board has a straight road between the two west-column road
exits, a stub road and a stub rail (two deadends), a two-tile lake in the
center, a one-tile lake next to a forest.
"""

from ink.core.direction import Direction
from ink.core.network_score import to_network_score
from ink.core.score import get_score, map_exits, sum_lakes, total
from ink.formats.board_data import BoardData


def coords(cell_list):
    return [(c.x, c.y) for c in cell_list]


class TestSampleBoard:
    def test_loads_tiles(self, sample_board):
        assert sample_board.name == "sample"
        assert sample_board.exits
        assert len(sample_board.tiles) == 13

    def test_rotation_applied(self, sample_cells):
        tile = sample_cells.at(2, 4).tile
        assert tile.edge(Direction.N).connects == (Direction.S,)

    def test_rounds_kept(self, sample_cells):
        assert sample_cells.at(6, 6).round == 7
        assert sample_cells.at(2, 0).round == 0

    def test_exits(self, sample_cells):
        score = get_score(sample_cells)
        assert score.exits == [2]
        assert map_exits(score) == [4]

    def test_paths(self, sample_cells):
        score = get_score(sample_cells)
        assert coords(score.road) == [(2, y) for y in range(1, 8)]
        assert coords(score.rail) == [(7, 2)]

    def test_deadends(self, sample_cells):
        score = get_score(sample_cells)
        assert [(d.cell.x, d.cell.y, d.direction) for d in score.deadends] == [
            (3, 1, Direction.W),
            (7, 2, Direction.W),
        ]

    def test_lakes_forests_center(self, sample_cells):
        score = get_score(sample_cells)
        assert score.lakes == [2, 1]
        assert sum_lakes(score) == 1
        assert coords(score.forests) == [(5, 6)]
        assert score.center == 2

    def test_total(self, sample_cells):
        # 4 exits + 7 road + 1 rail + 2 center - 2 deadends + 1 lake + 1 forest
        score = get_score(sample_cells)
        assert total(score) == 14
        assert to_network_score(score).total() == 14


class TestBoardFiles:
    def test_save_and_reload_scores_the_same(self, sample_board, tmp_path):
        path = tmp_path / "saved.json"
        sample_board.save(str(path))

        reloaded = BoardData()
        reloaded.load(str(path))

        assert reloaded.name == sample_board.name
        assert total(get_score(reloaded.to_cells())) == 14
        assert [p.to_dict() for p in reloaded.tiles] == [p.to_dict() for p in sample_board.tiles]

    def test_saved_file_uses_wiring(self, sample_board, tmp_path):
        path = tmp_path / "saved.json"
        sample_board.save(str(path))
        text = path.read_text()
        assert '"wiring": "S . N ."' in text
        assert '"links"' not in text

    def test_from_cells_skips_exit_tiles(self, sample_cells):
        board = BoardData.from_cells(sample_cells, name="copy")
        assert board.exits
        assert len(board.tiles) == 13
        assert total(get_score(board.to_cells())) == 14

    def test_place_and_remove(self, sample_board, make_tile):
        sample_board.remove(3, 1)
        sample_board.place(6, 2, make_tile(".T..", "*"), round_number=7)

        assert sample_board.modified
        score = get_score(sample_board.to_cells())
        assert score.deadends == []
        assert len(score.rail) == 2
