import pytest

from bnmo.snakeboard import CELLS, EMPTY, Grid, SnakeBody


def test_new_grid_is_blank():
    grid = Grid()
    assert all(grid.cell(i) == EMPTY for i in range(CELLS))


def test_put_uses_column_plus_five_rows():
    grid = Grid()
    grid.put(2, 3, "H")
    assert grid.cell(2 + 3 * 5) == "H"
    assert sum(grid.cell(i) == "H" for i in range(CELLS)) == 1


def test_put_off_board_is_ignored():
    grid = Grid()
    grid.put(-1, -1, "m")
    assert all(grid.cell(i) == EMPTY for i in range(CELLS))


def test_wipe_clears():
    grid = Grid()
    grid.put(0, 0, "O")
    grid.put(4, 4, "Z")
    grid.wipe()
    assert grid.cell(0) == EMPTY
    assert grid.cell(24) == EMPTY


def test_cell_out_of_range():
    with pytest.raises(IndexError):
        Grid().cell(25)
    with pytest.raises(IndexError):
        Grid().cell(-1)


def test_render_rows():
    grid = Grid()
    grid.put(0, 0, "H")
    lines = grid.render().splitlines()
    assert lines[0] == "Berikut merupakan peta permainan"
    assert lines[1] == "=========================="
    assert lines[2].startswith("| H |")
    assert len(lines) == 12


def test_body_add_and_contains():
    body = SnakeBody()
    assert body.tail() is None
    body.add_tail(1, 1)
    body.add_tail(0, 1)
    assert body.tail() == (0, 1)
    assert body.contains(1, 1)
    assert not body.contains(2, 2)
    assert list(body) == [(0, 1), (1, 1)]


def test_remove_member_then_absent():
    body = SnakeBody()
    body.add_tail(3, 3)
    body.add_tail(2, 3)
    body.add_tail(1, 3)
    body.remove(2, 3)
    assert not body.contains(2, 3)
    assert len(body) == 2


def test_remove_missing_is_noop():
    body = SnakeBody()
    body.add_tail(3, 3)
    body.add_tail(2, 3)
    body.remove(4, 0)
    assert list(body) == [(2, 3), (3, 3)]


def test_remove_tail_matches_column_only():
    body = SnakeBody()
    body.add_tail(2, 0)
    body.add_tail(2, 1)
    body.remove(2, 0)
    assert list(body) == [(2, 0)]


def test_remove_from_empty_body():
    body = SnakeBody()
    body.remove(0, 0)
    assert len(body) == 0