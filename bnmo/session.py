"""The game library, play queue, history and scoreboards of one session."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterator
from pathlib import Path

PROTECTED_GAMES = 5
SKIP_LIMIT = 100
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SessionError(Exception):
    """Raised when a session command cannot be carried out."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_score_line(line: str) -> tuple[str, int]:
    """Split a saved score line 'name score' at its first space."""
    name, sep, rest = line.rstrip("\r\n").partition(" ")
    if not sep:
        raise SessionError(f"baris skor tidak valid: {line!r}")
    return name, _atoi(rest)


class Session:
    """Everything the console keeps between commands."""

    def __init__(self) -> None:
        self.games: list[str] = []
        self.queue: deque[str] = deque()
        self.history: list[str] = []
        self.scoreboards: dict[str, dict[str, int]] = {}

    def _reset(self) -> None:
        self.games.clear()
        self.queue.clear()
        self.history.clear()
        self.scoreboards.clear()

    def _add_game(self, name: str) -> None:
        self.games.append(name)
        self.scoreboards.setdefault(name, {})

    def load_config(self, path: str | Path) -> None:
        """Read the game list: a count line, then one game name per line."""
        lines = Path(path).read_text().splitlines()
        self._reset()
        for line in lines[1:]:
            if line.strip():
                self._add_game(line.rstrip("\r"))

    def load_save(self, path: str | Path) -> None:
        """Restore games, history (newest first in the file) and scoreboards."""
        path = Path(path)
        if not path.is_file():
            raise SessionError("File tidak ditemukan.")
        lines: Iterator[str] = iter(line.rstrip("\r") for line in path.read_text().splitlines())

        def take() -> str:
            try:
                return next(lines)
            except StopIteration:
                raise SessionError("Save file tidak lengkap.") from None

        def take_count() -> int:
            text = take()
            try:
                return int(text.strip())
            except ValueError:
                raise SessionError(f"jumlah tidak valid: {text!r}") from None

        self._reset()
        for _ in range(take_count()):
            self._add_game(take())
        newest_first = [take() for _ in range(take_count())]
        self.history.extend(reversed(newest_first))
        for game in self.games:
            board = self.scoreboards[game]
            for _ in range(take_count()):
                name, score = parse_score_line(take())
                board.setdefault(name, score)

    def save(self, path: str | Path) -> None:
        """Write the session in the format read by load_save."""
        parts = [f"{len(self.games)}\n", "\n".join(self.games)]
        parts.append(f"\n{len(self.history)}\n")
        parts.extend(f"{game}\n" for game in reversed(self.history))
        for game in self.games:
            board = self.scoreboards.get(game, {})
            parts.append(f"{len(board)}\n")
            parts.extend(f"{name} {score}\n" for name, score in board.items())
        Path(path).write_text("".join(parts))

    def create_game(self, name: str) -> None:
        """Add a new game to the library."""
        if name in self.games:
            raise SessionError("Game sudah tersedia.")
        self._add_game(name)

    def delete_game(self, number: int) -> str:
        """Remove the game with this 1-based number; return its name.

        The first five games cannot be removed, nor can a queued game.
        """
        if 0 < number <= PROTECTED_GAMES:
            raise SessionError("Game gagal dihapus")
        if not 0 < number <= len(self.games):
            raise SessionError("Nomor game tidak valid.")
        name = self.games[number - 1]
        if name in self.queue:
            raise SessionError("Game masih dalam antrean. Game gagal dihapus.")
        del self.games[number - 1]
        if name not in self.games:
            self.scoreboards.pop(name, None)
        return name

    def enqueue_game(self, number: int) -> str:
        """Put the game with this 1-based number at the back of the queue."""
        if not 0 < number <= len(self.games):
            raise SessionError(
                "Nomor permainan tidak valid, silahkan masuk nomor game pada list."
            )
        name = self.games[number - 1]
        self.queue.append(name)
        return name

    def skip_games(self, n: int) -> list[str]:
        """Drop n games from the front of the queue; return the ones dropped."""
        if not self.queue:
            raise SessionError("Tidak ada permainan dalam daftar antrian kamu.")
        if n > SKIP_LIMIT or n == 0:
            raise SessionError(f"Tidak dapat melakukan skip sebanyak {n} kali.")
        if n < 0:
            raise SessionError("Masukan tidak valid.")
        return [self.queue.popleft() for _ in range(min(n, len(self.queue)))]

    def next_game(self) -> str:
        """Take the game at the front of the queue and record it as played."""
        if not self.queue:
            raise SessionError("Antrean Game Kosong.")
        name = self.queue.popleft()
        self.history.append(name)
        return name

    def recent_history(self, n: int) -> list[str]:
        """Return up to n played games, most recent first."""
        if n <= 0:
            return []
        return list(reversed(self.history))[:n]

    def reset_history(self) -> None:
        """Forget every played game."""
        self.history.clear()

    def record_score(self, game: str, name: str, score: int) -> None:
        """Add a player's score to a game's scoreboard."""
        board = self._board(game)
        if name in board:
            raise SessionError("User sudah ada.")
        board[name] = score

    def has_player(self, game: str, name: str) -> bool:
        """Tell whether a game's scoreboard already holds this player."""
        return name in self._board(game)

    def _board(self, game: str) -> dict[str, int]:
        try:
            return self.scoreboards[game]
        except KeyError:
            raise SessionError(f"Game {game} tidak ditemukan.") from None

    def reset_scoreboard(self, choice: int) -> None:
        """Empty every scoreboard (choice 0) or the one numbered choice."""
        if choice == 0:
            for board in self.scoreboards.values():
                board.clear()
        elif 0 < choice <= len(self.games):
            self.scoreboards[self.games[choice - 1]].clear()
        else:
            raise SessionError("Input invalid")

    def render_scoreboards(self) -> str:
        """Draw every game's scoreboard."""
        rule = "---------------------------------------------"
        lines: list[str] = []
        for game in self.games:
            board = self.scoreboards.get(game, {})
            lines.append(f"----- SCOREBOARD GAME {game}-----")
            lines.append(rule)
            if board:
                lines.append("| NAMA               | SKOR                 |")
                lines.append(rule)
                lines.extend(f"| {name:<18} | {score:<20} |" for name, score in board.items())
            else:
                lines.append("|           SCOREBOARD MASIH KOSONG         |")
            lines.append(rule)
            lines.append("")
        return "\n".join(lines)