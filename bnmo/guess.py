"""Guess the number: find a secret number below 100 in ten tries."""

from __future__ import annotations

import random
from collections.abc import Callable

MAX_NUMBER = 100
TRIES = 10
POINTS_PER_TRY = 10
_RULE = "-------------------------------------------------"


def score_for_tries(tries_left: int) -> int:
    """Score a correct guess given the tries left after making it."""
    return (tries_left + 1) * POINTS_PER_TRY


def _parse_guess(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def play_guess(
    ask: Callable[[str], str],
    out: Callable[[str], None],
    rng: random.Random | None = None,
) -> int:
    """Play one game; return the score, 0 when the number was never found."""
    rng = rng or random.Random()
    number = rng.randrange(MAX_NUMBER)
    tries = TRIES
    while tries > 0:
        out("Tebaklah angka dari 0-100!")
        out(_RULE)
        out(f"Anda mempunyai kesempatan menebak sebanyak {tries} kali")
        guess = _parse_guess(ask("Masukkan tebakan Anda: "))
        tries -= 1
        if guess == number:
            score = score_for_tries(tries)
            out(_RULE)
            out("Tebakan Anda benar!")
            out(f"Score Anda = {score}")
            out(_RULE)
            return score
        if tries == 0:
            out("Maaf Anda kurang beruntung. Silakan coba lagi")
        elif guess is not None:
            out(_RULE)
            out("Lebih Kecil" if guess > number else "Lebih Besar")
            ask("Tekan ENTER untuk melanjutkan")
    return 0