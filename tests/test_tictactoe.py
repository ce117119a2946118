import pytest

from bnmo.tictactoe import (
    DRAW_SCORE,
    LOSE_SCORE,
    WIN_SCORE,
    Outcome,
    check_win,
    new_board,
    play_tictactoe,
    render_board,
)


def scripted(answers):
    it = iter(answers)
    return lambda prompt: next(it)


def collect():
    lines = []
    return lines, lines.append


def test_new_board_holds_digits():
    assert new_board() == ["1", "2", "3", "4", "5", "6", "7", "8", "9"]


def test_new_board_is_ongoing():
    assert check_win(new_board()) is Outcome.ONGOING


@pytest.mark.parametrize("line", [(1, 2, 3), (4, 5, 6), (7, 8, 9), (1, 4, 7), (2, 5, 8), (3, 6, 9), (1, 5, 9), (3, 5, 7)])
def test_every_line_wins(line):
    cells = new_board()
    for number in line:
        cells[number - 1] = "O"
    assert check_win(cells) is Outcome.WIN


def test_full_board_without_line_is_draw():
    cells = ["X", "O", "X", "X", "O", "O", "O", "X", "X"]
    assert check_win(cells) is Outcome.DRAW


def test_wrong_size_board_rejected():
    with pytest.raises(ValueError):
        check_win(["X"] * 3)


def test_render_shows_marks_and_free_cells():
    cells = new_board()
    cells[4] = "X"
    text = render_board(cells)
    assert "  4  |  X  |  6 " in text
    assert "PEMAIN 1 (X)  -  PEMAIN 2 (O)" in text


def test_player_one_wins():
    lines, out = collect()
    scores = play_tictactoe(scripted(["1", "4", "2", "5", "3"]), out)
    assert scores == (WIN_SCORE, LOSE_SCORE)
    assert "PEMAIN 1 MENANG!!!" in lines


def test_player_two_wins():
    lines, out = collect()
    scores = play_tictactoe(scripted(["1", "4", "2", "5", "9", "6"]), out)
    assert scores == (LOSE_SCORE, WIN_SCORE)
    assert "PEMAIN 2 MENANG!!!" in lines


def test_draw_gives_both_draw_score():
    moves = ["1", "2", "3", "5", "4", "6", "8", "7", "9"]
    lines, out = collect()
    assert play_tictactoe(scripted(moves), out) == (DRAW_SCORE, DRAW_SCORE)
    assert "PERMAINAN SERI!!!" in lines


def test_invalid_moves_keep_same_player():
    moves = ["1", "1", "abc", "10", "4", "2", "5", "3"]
    lines, out = collect()
    scores = play_tictactoe(scripted(moves), out)
    assert scores == (WIN_SCORE, LOSE_SCORE)
    assert lines.count("INVALID MOVE! SILAKAN COBA LAGI!") == 3