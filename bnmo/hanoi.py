"""Tower of Hanoi with five discs on three pegs named A, B and C."""

from __future__ import annotations

from collections.abc import Callable, Iterable

DISCS = (9, 7, 5, 3, 1)
PEGS = ("A", "B", "C")
LEVELS = 5
BASE_SCORE = 10
PAR_MOVES = 31
PENALTY_STEP = 5
_CELL_WIDTH = 9
_GAP = " " * 12


class InvalidMove(Exception):
    """Raised when a requested move breaks the rules of the game."""


class Tower:
    """A peg holding discs, the last one pushed being on top."""

    def __init__(self, discs: Iterable[int] = ()) -> None:
        self._discs = list(discs)

    def __len__(self) -> int:
        return len(self._discs)

    def __iter__(self):
        return iter(self._discs)

    def __repr__(self) -> str:
        return f"Tower({self._discs!r})"

    def push(self, disc: int) -> None:
        """Place disc on top of the peg."""
        self._discs.append(disc)

    def pop(self) -> int:
        """Take the top disc off the peg."""
        if not self._discs:
            raise IndexError("pop from an empty tower")
        return self._discs.pop()

    def top(self) -> int:
        """Return the top disc without removing it."""
        if not self._discs:
            raise IndexError("top of an empty tower")
        return self._discs[-1]

    def is_empty(self) -> bool:
        """Tell whether the peg holds no disc."""
        return not self._discs

    def disc_at(self, level: int) -> int | None:
        """Return the disc at level (0 is the bottom), or None if there is none."""
        if 0 <= level < len(self._discs):
            return self._discs[level]
        return None


def _picture(disc: int | None) -> str:
    return ("|" if disc is None else "*" * disc).center(_CELL_WIDTH)


class HanoiGame:
    """Three pegs with every disc starting on peg A; counts the moves made."""

    def __init__(self) -> None:
        self.towers = {"A": Tower(DISCS), "B": Tower(), "C": Tower()}
        self.moves = 0

    def move(self, source: str, target: str) -> None:
        """Move the top disc from source to target.

        Only the first character of each name is looked at. Every attempt
        counts as a move except one from an empty peg.
        """
        src_name, dst_name = source[:1], target[:1]
        if src_name not in self.towers:
            self.moves += 1
            raise InvalidMove("Input invalid")
        src = self.towers[src_name]
        if src.is_empty():
            raise InvalidMove("Input invalid")
        self.moves += 1
        if dst_name not in self.towers or dst_name == src_name:
            raise InvalidMove("Input Invalid")
        dst = self.towers[dst_name]
        if not dst.is_empty() and dst.top() < src.top():
            raise InvalidMove("Input invalid")
        dst.push(src.pop())

    def is_solved(self) -> bool:
        """Tell whether every disc stands on peg C."""
        return tuple(self.towers["C"]) == DISCS

    def render(self) -> str:
        """Draw the three pegs side by side."""
        rows = [
            _GAP.join(_picture(self.towers[peg].disc_at(level)) for peg in PEGS)
            for level in range(LEVELS - 1, -1, -1)
        ]
        rows.append(_GAP.join("-------".center(_CELL_WIDTH) for _ in PEGS))
        rows.append(_GAP.join(peg.center(_CELL_WIDTH) for peg in PEGS))
        return "\n".join(rows)


def score_for_moves(moves: int) -> int:
    """Score a finished game: full marks up to 31 moves, one less per 5 beyond."""
    score = BASE_SCORE
    while moves > PAR_MOVES:
        moves -= PENALTY_STEP
        score -= 1
    return score


def play_hanoi(ask: Callable[[str], str], out: Callable[[str], None]) -> int:
    """Play until every disc is on peg C; return the score."""
    game = HanoiGame()
    while not game.is_solved():
        out(game.render())
        source = ask("TIANG ASAL: ")
        target = ask("TIANG TUJUAN: ")
        try:
            game.move(source, target)
        except InvalidMove as error:
            out(str(error))
    score = score_for_moves(game.moves)
    out(f"Skor didapatkan : {score}")
    out(game.render())
    out("Kamu berhasil!")
    return score