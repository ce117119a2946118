"""Snake on Meteor: steer a snake on a wrapping 5x5 board while meteors fall."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass

from bnmo.snakeboard import SIZE, Grid, SnakeBody

METEOR_MISS = 0
METEOR_BODY = 1
METEOR_HEAD = 2

INITIAL_LENGTH = 3
POINTS_PER_SEGMENT = 2

_MOVES = {
    "w": (0, SIZE - 1),
    "a": (SIZE - 1, 0),
    "s": (0, 1),
    "d": (1, 0),
}
_OFF_BOARD = -(SIZE + 1)


@dataclass(frozen=True)
class Point:
    """A cell on the board: x is the column, y the row."""

    x: int
    y: int

    @property
    def index(self) -> int:
        return self.x + self.y * SIZE


def _index(point: Point | None) -> int:
    return _OFF_BOARD if point is None else point.index


def next_head(command: str, head: Point) -> Point | None:
    """Return where the head goes for a w/a/s/d command, wrapping at the edges.

    Returns None for any other command.
    """
    step = _MOVES.get(command)
    if step is None:
        return None
    dx, dy = step
    return Point((head.x + dx) % SIZE, (head.y + dy) % SIZE)


def hits_meteor(position: Point, meteor: Point | None) -> bool:
    """Tell whether position is the hot crater left by the last meteor."""
    return meteor is not None and position.index == meteor.index


def hits_body(position: Point, body: SnakeBody) -> bool:
    """Tell whether position lies on a body segment, the tail included."""
    return any(x + y * SIZE == position.index for x, y in body)


def move_body(body: SnakeBody, head: Point) -> None:
    """Slide every segment one step toward the head; the neck takes the head's cell."""
    if not len(body):
        return
    body.segments[:] = body.segments[1:] + [(head.x, head.y)]


def meteor_hit(body: SnakeBody, head: Point, meteor: Point | None) -> int:
    """Tell what the meteor struck: METEOR_MISS, METEOR_BODY or METEOR_HEAD."""
    if meteor is None:
        return METEOR_MISS
    if meteor.index == head.index:
        return METEOR_HEAD
    if hits_body(meteor, body):
        return METEOR_BODY
    return METEOR_MISS


def fill_grid(
    grid: Grid,
    head: Point,
    body: SnakeBody,
    obstacle: Point,
    meteor: Point | None,
    food: Point,
) -> None:
    """Draw food, head, obstacle, the numbered body and the meteor, in that order."""
    grid.put(food.x, food.y, "O")
    grid.put(head.x, head.y, "H")
    grid.put(obstacle.x, obstacle.y, "Z")
    for number, (x, y) in zip(range(len(body), 0, -1), body):
        grid.put(x, y, str(number))
    if meteor is not None:
        grid.put(meteor.x, meteor.y, "m")


def _beside(x: int, y: int) -> tuple[int, int]:
    if x - 1 < 0:
        return (x, y + 1) if y - 1 < 0 else (x, y - 1)
    return (x - 1, y)


def _random_point(rng: random.Random) -> Point:
    return Point(rng.randrange(SIZE), rng.randrange(SIZE))


def _place(
    rng: random.Random, head: Point, body: SnakeBody, *others: Point | None
) -> Point:
    taken = {_index(other) for other in others}
    while True:
        point = _random_point(rng)
        if (
            point.index != head.index
            and not body.contains(point.x, point.y)
            and point.index not in taken
        ):
            return point


def _grow_beside_head(
    head: Point, obstacle: Point, food: Point, meteor: Point | None
) -> tuple[int, int] | None:
    targets = {obstacle.index, food.index, _index(meteor)}
    if len(targets) != 1:
        return None
    (target,) = targets
    candidates = []
    if head.x - 1 >= 0:
        candidates.append((head.x - 1, head.y))
    if head.y - 1 >= 0:
        candidates.append((head.x, head.y - 1))
    candidates.append((head.x, head.y + 1))
    candidates.append((head.x + 1, head.y))
    for x, y in candidates:
        if x + y * SIZE == target:
            return (x, y)
    return None


def play_snake(
    ask: Callable[[str], str],
    out: Callable[[str], None],
    rng: random.Random | None = None,
) -> int:
    """Play until the snake dies; return twice its final length."""
    rng = rng or random.Random()
    game_over = False
    turn = 1
    length = INITIAL_LENGTH

    head = _random_point(rng)
    body = SnakeBody()
    body.add_tail(*_beside(head.x, head.y))
    body.add_tail(*_beside(*body.tail()))

    obstacle = _place(rng, head, body)
    food = _place(rng, head, body, obstacle)

    grid = Grid()
    fill_grid(grid, head, body, obstacle, None, food)
    out("Selamat datang di snake on meteor!")
    out("Mengenerate peta, snake dan makanan . . .")
    out("Berhasil digenerate!")
    out("---------------------------------------------")
    out(grid.render())

    meteor: Point | None = None
    while not game_over:
        out(f"Turn {turn}")
        position = next_head(ask("Silahkan masukkan command anda: "), head)
        while (
            position is None
            or hits_meteor(position, meteor)
            or hits_body(position, body)
        ):
            out("Input invalid")
            position = next_head(ask("Silahkan masukkan command anda: "), head)

        old_tail = body.tail()
        out("Berhasil bergerak!")
        turn += 1
        grid.wipe()
        move_body(body, head)
        head = position

        if position.index == food.index:
            if old_tail is not None:
                body.add_tail(*old_tail)
                length += 1
            else:
                spot = _grow_beside_head(head, obstacle, food, meteor)
                if spot is not None:
                    body.add_tail(*spot)
                    length += 1
                else:
                    out("Ekor snake tidak dapat tumbuh!")
                    game_over = True
            food = _place(rng, head, body, obstacle, meteor)

        meteor = _place(rng, head, body, obstacle, food)
        fill_grid(grid, head, body, obstacle, meteor, food)
        out(grid.render())

        if position.index == obstacle.index:
            game_over = True
            out("Kepala snake menabrak obstacle!")
            continue

        hit = meteor_hit(body, head, meteor)
        if hit == METEOR_MISS:
            out("Anda beruntung tidak terkena meteor!")
            if not game_over:
                out("Silahkan lanjutkan permainan")
        elif hit == METEOR_BODY:
            body.remove(meteor.x, meteor.y)
            length -= 1
            out("Anda terkena meteor!")
            grid.wipe()
            fill_grid(grid, head, body, obstacle, meteor, food)
            out(grid.render())
            if not game_over:
                out("Silahkan lanjutkan permainan")
        else:
            length -= 1
            game_over = True
            out("Kepala snake terkena meteor!")

    score = length * POINTS_PER_SEGMENT
    out(f"Game berakhir. Skor: {score}")
    return score