import pytest

from bnmo.guess import TRIES, play_guess, score_for_tries


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        assert stop == 100
        return self.value


def scripted(answers):
    feed = iter(answers)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return next(feed)

    return ask, prompts


def test_first_try_scores_full_marks():
    ask, _ = scripted(["42"])
    lines = []
    score = play_guess(ask, lines.append, FixedRng(42))
    assert score == 100
    assert score == score_for_tries(TRIES - 1)
    assert "Tebakan Anda benar!" in lines


def test_hints_point_toward_the_number():
    ask, _ = scripted(["80", "", "10", "", "42"])
    lines = []
    score = play_guess(ask, lines.append, FixedRng(42))
    assert lines.index("Lebih Kecil") < lines.index("Lebih Besar")
    assert score == score_for_tries(TRIES - 3)


def test_never_found_scores_zero():
    ask, prompts = scripted(["0", ""] * 9 + ["0"])
    lines = []
    assert play_guess(ask, lines.append, FixedRng(42)) == 0
    assert "Maaf Anda kurang beruntung. Silakan coba lagi" in lines
    assert sum(p.startswith("Masukkan") for p in prompts) == TRIES


def test_last_try_correct():
    ask, _ = scripted(["0", ""] * 9 + ["42"])
    assert play_guess(ask, lambda _: None, FixedRng(42)) == score_for_tries(0)


def test_non_number_uses_a_try_without_hint():
    ask, _ = scripted(["abc", "42"])
    lines = []
    score = play_guess(ask, lines.append, FixedRng(42))
    assert score == score_for_tries(TRIES - 2)
    assert "Lebih Kecil" not in lines and "Lebih Besar" not in lines


@pytest.mark.parametrize("left", range(0, 9))
def test_score_falls_with_each_try(left):
    assert score_for_tries(left) < score_for_tries(left + 1)