"""Diner Dash: cook and serve a queue of food orders before it grows too long."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, replace

INITIAL_ORDERS = 3
MAX_WAITING = 7
SERVE_TARGET = 15
DURATION_RANGE = (1, 5)
PRICE_RANGE = (10, 50)
PRICE_UNIT = 1000
_SEPARATOR = "================================================"


@dataclass
class Dish:
    """One food order: its id, cooking time, shelf life once cooked, and price."""

    id: int
    duration: int
    durability: int
    price: int

    @property
    def label(self) -> str:
        return f"M{self.id}"


class InvalidCommand(Exception):
    """Raised when a command cannot be carried out in the current state."""


def food_id(text: str | None) -> int | None:
    """Parse a food label such as 'M12' into its number, or None if it is not one."""
    if not text or len(text) < 2 or text[0] != "M":
        return None
    digits = text[1:]
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits)


class Kitchen:
    """The orders waiting, the dishes cooking and the dishes ready to serve."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.orders: deque[Dish] = deque()
        self.cooking: list[Dish] = []
        self.ready: list[Dish] = []
        self.balance = 0
        self.served = 0
        self._next_id = 0
        for _ in range(INITIAL_ORDERS):
            self.new_order()

    def new_order(self) -> Dish:
        """Add a randomly made order to the back of the queue and return it."""
        dish = Dish(
            id=self._next_id,
            duration=self._rng.randrange(*DURATION_RANGE),
            durability=self._rng.randrange(*DURATION_RANGE),
            price=self._rng.randrange(*PRICE_RANGE) * PRICE_UNIT,
        )
        self._next_id += 1
        self.orders.append(dish)
        return dish

    def cook(self, food_id: int | None) -> None:
        """Start cooking the ordered dish with this id."""
        order = next((dish for dish in self.orders if dish.id == food_id), None)
        if order is None:
            raise InvalidCommand("Masukan tidak valid. Silahkan coba lagi.")
        self.cooking.append(replace(order))
        # The round that follows this command takes one unit off at once.
        first = next(dish for dish in self.cooking if dish.id == food_id)
        first.duration += 1

    def serve(self, food_id: int | None) -> int:
        """Serve the ready dish for the order at the head of the queue.

        Returns the price earned.
        """
        if not self.orders:
            raise InvalidCommand("Masukan tidak valid. Silahkan coba lagi.")
        head = self.orders[0]
        if food_id != head.id:
            label = f"M{food_id}" if food_id is not None else "Makanan"
            raise InvalidCommand(
                f"{label} belum dapat disajikan karena {head.label} belum selesai"
            )
        dish = next((item for item in self.ready if item.id == food_id), None)
        if dish is None:
            raise InvalidCommand("Masukan tidak valid. Silahkan coba lagi.")
        self.ready.remove(dish)
        self.served += 1
        self.balance += dish.price
        self.orders.popleft()
        return dish.price

    def advance(self) -> list[Dish]:
        """Play one round; return the dishes that finished cooking."""
        self.new_order()

        for dish in self.ready:
            dish.durability -= 1
        self.ready = [dish for dish in self.ready if dish.durability != 0]

        finished: list[Dish] = []
        still_cooking: list[Dish] = []
        for dish in self.cooking:
            dish.duration -= 1
            (finished if dish.duration == 0 else still_cooking).append(dish)
        self.cooking = still_cooking
        self.ready.extend(finished)
        return finished

    def is_over(self) -> bool:
        """Tell whether the queue grew too long or enough dishes were served."""
        return len(self.orders) > MAX_WAITING or self.served >= SERVE_TARGET

    def render(self) -> str:
        """Draw the balance and the three tables."""
        lines = [
            f"SALDO: {self.balance}",
            "",
            "Daftar Pesanan",
            "------------------------------------------------",
            "| Makanan | Durasi memasak | Ketahanan | Harga |",
            "------------------------------------------------",
        ]
        lines += [
            f"|    {dish.label}   |        {dish.duration}       |"
            f"     {dish.durability}     | {dish.price} |"
            for dish in self.orders
        ]
        lines += [
            "------------------------------------------------",
            "",
            "Daftar Makanan yang sedang dimasak",
            "---------------------------------",
            "| Makanan | Sisa durasi memasak |",
            "---------------------------------",
        ]
        if self.cooking:
            lines += [
                f"|   {dish.label}    |          {dish.duration}          |"
                for dish in self.cooking
            ]
        else:
            lines.append("|         |                     |")
        lines += [
            "---------------------------------",
            "",
            "Daftar Makanan yang dapat disajikan",
            "------------------------------------",
            "| Makanan | Sisa ketahanan makanan |",
            "------------------------------------",
        ]
        if self.ready:
            lines += [
                f"|    {dish.label}   |           {dish.durability}            |"
                for dish in self.ready
            ]
        else:
            lines.append("|         |                        |")
        lines.append("------------------------------------")
        return "\n".join(lines)


def _split(command: str) -> tuple[str, str]:
    action, _, rest = command.strip().partition(" ")
    return action, rest.strip()


def _execute(kitchen: Kitchen, command: str) -> str:
    action, target = _split(command)
    if action == "COOK":
        kitchen.cook(food_id(target))
        return f"Berhasil memasak {target}"
    if action == "SERVE":
        kitchen.serve(food_id(target))
        return f"Berhasil mengantar {target}"
    if action == "SKIP":
        return "Skip berhasil"
    raise InvalidCommand("Masukan tidak valid. Silahkan coba lagi.")


def play_dinerdash(
    ask: Callable[[str], str],
    out: Callable[[str], None],
    rng: random.Random | None = None,
) -> int:
    """Play one game; return the balance earned."""
    kitchen = Kitchen(rng)
    out("Selamat Datang di Diner Dash!")
    while not kitchen.is_over():
        out(kitchen.render())
        while True:
            try:
                message = _execute(kitchen, ask("ENTER COMMAND: "))
                break
            except InvalidCommand as error:
                out(str(error))
        out(message)
        for dish in kitchen.advance():
            out(f"Makanan {dish.label} telah selesai dimasak")
        out(_SEPARATOR)
    out("GAME OVER!!!")
    out(f"Skor akhir: {kitchen.balance}")
    return kitchen.balance