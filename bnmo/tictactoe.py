"""Two-player tic-tac-toe played on a numbered 3x3 board."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

WIN_SCORE = 100
LOSE_SCORE = 0
DRAW_SCORE = 50

MARKS = {1: "X", 2: "O"}

_LINES = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    (1, 5, 9),
    (3, 5, 7),
)


class Outcome(Enum):
    """State of a board after a move."""

    ONGOING = -1
    DRAW = 0
    WIN = 1


def new_board() -> list[str]:
    """Return an empty board: cell n holds the digit n until it is taken."""
    return [str(number) for number in range(1, 10)]


def _cell(cells: list[str], number: int) -> str:
    return cells[number - 1]


def check_win(cells: list[str]) -> Outcome:
    """Tell whether the board has a completed line, is full, or is still open."""
    if len(cells) != 9:
        raise ValueError("a board has exactly nine cells")
    for a, b, c in _LINES:
        if _cell(cells, a) == _cell(cells, b) == _cell(cells, c):
            return Outcome.WIN
    if all(cell != str(number) for number, cell in enumerate(cells, start=1)):
        return Outcome.DRAW
    return Outcome.ONGOING


def render_board(cells: list[str]) -> str:
    """Draw the board with the players' marks."""
    rows = [
        "Tic Tac Toe",
        "",
        "PEMAIN 1 (X)  -  PEMAIN 2 (O)",
        "",
        "     |     |     ",
    ]
    for start in (1, 4, 7):
        a, b, c = (_cell(cells, start + offset) for offset in range(3))
        rows.append(f"  {a}  |  {b}  |  {c} ")
        if start != 7:
            rows.append("_____|_____|_____")
        rows.append("     |     |     ")
    return "\n".join(rows)


def _parse_choice(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def play_tictactoe(
    ask: Callable[[str], str], out: Callable[[str], None]
) -> tuple[int, int]:
    """Play one game; return the scores of player 1 and player 2."""
    cells = new_board()
    player = 1
    last_mover = 1
    outcome = Outcome.ONGOING
    while outcome is Outcome.ONGOING:
        out(render_board(cells))
        out(f"PEMAIN {player}")
        choice = _parse_choice(ask("MASUKKAN NOMOR : "))
        if 1 <= choice <= 9 and cells[choice - 1] == str(choice):
            cells[choice - 1] = MARKS[player]
            last_mover = player
            player = 2 if player == 1 else 1
        else:
            out("INVALID MOVE! SILAKAN COBA LAGI!")
        outcome = check_win(cells)

    out(render_board(cells))
    if outcome is Outcome.WIN:
        out(f"PEMAIN {last_mover} MENANG!!!")
        scores = (WIN_SCORE, LOSE_SCORE) if last_mover == 1 else (LOSE_SCORE, WIN_SCORE)
    else:
        out("PERMAINAN SERI!!!")
        scores = (DRAW_SCORE, DRAW_SCORE)
    out("---------- SCOREBOARD ----------")
    out(f"PEMAIN 1 : {scores[0]}")
    out(f"PEMAIN 2 : {scores[1]}")
    return scores