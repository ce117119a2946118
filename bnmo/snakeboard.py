"""The 5x5 board and the snake's body used by Snake on Meteor."""

from __future__ import annotations

SIZE = 5
CELLS = SIZE * SIZE
EMPTY = " "
_RULE = "=========================="


class Grid:
    """A 5x5 board of one symbol per cell, cells numbered x + 5 * y."""

    def __init__(self) -> None:
        self._cells = [EMPTY] * CELLS

    def wipe(self) -> None:
        """Clear every cell."""
        self._cells = [EMPTY] * CELLS

    def put(self, x: int, y: int, symbol: str) -> None:
        """Write symbol at (x, y); positions off the board are ignored."""
        index = x + y * SIZE
        if 0 <= index < CELLS:
            self._cells[index] = symbol

    def cell(self, index: int) -> str:
        """Return the symbol in cell index."""
        if not 0 <= index < CELLS:
            raise IndexError(f"no cell {index} on the board")
        return self._cells[index]

    def render(self) -> str:
        """Draw the board row by row."""
        lines = ["Berikut merupakan peta permainan", _RULE]
        for row in range(SIZE):
            cells = self._cells[row * SIZE:(row + 1) * SIZE]
            lines.append("| " + " | ".join(cells) + " |")
            lines.append(_RULE)
        return "\n".join(lines)


class SnakeBody:
    """Body segments of the snake, ordered from the tail to the neck."""

    def __init__(self) -> None:
        self.segments: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def add_tail(self, x: int, y: int) -> None:
        """Attach a new tail segment at (x, y)."""
        self.segments.insert(0, (x, y))

    def contains(self, x: int, y: int) -> bool:
        """Tell whether a segment lies at (x, y)."""
        return (x, y) in self.segments

    def remove(self, x: int, y: int) -> None:
        """Drop the segment at (x, y).

        The tail is dropped whenever its column equals x, whatever its row;
        otherwise the first segment at (x, y) is dropped, if any.
        """
        if not self.segments:
            return
        if self.segments[0][0] == x:
            del self.segments[0]
            return
        try:
            self.segments.remove((x, y))
        except ValueError:
            pass

    def tail(self) -> tuple[int, int] | None:
        """Return the tail segment, or None if the body is empty."""
        return self.segments[0] if self.segments else None