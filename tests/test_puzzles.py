import random
from collections import Counter

import pytest

from algoshelf.puzzles import (
    BOARD_SIZE,
    Move,
    monty_hall,
    place_bishops,
    random_enemies,
    running_character_counts,
    tower_of_hanoi,
)


def _simulate(n, moves):
    rods = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for move in moves:
        assert rods[move.source] and rods[move.source][-1] == move.disk
        if rods[move.target]:
            assert rods[move.target][-1] > move.disk
        rods[move.target].append(rods[move.source].pop())
    return rods


def test_hanoi_single_disk():
    assert list(tower_of_hanoi(1)) == [Move(1, "A", "C")]


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 6])
def test_hanoi_moves_are_legal_and_complete(n):
    moves = list(tower_of_hanoi(n))
    assert len(moves) == 2**n - 1
    rods = _simulate(n, moves)
    assert rods["C"] == list(range(n, 0, -1))
    assert rods["A"] == [] and rods["B"] == []


def test_hanoi_custom_rod_names():
    moves = list(tower_of_hanoi(2, "x", "z", "y"))
    assert {m.source for m in moves} | {m.target for m in moves} <= {"x", "y", "z"}
    assert moves[-1].target == "z"


def test_hanoi_negative_rejected():
    with pytest.raises(ValueError):
        tower_of_hanoi(-1)


def test_random_enemies_distinct_on_board():
    enemies = random_enemies(10, random.Random(3))
    assert len(enemies) == 10
    assert all(0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE for r, c in enemies)


def test_random_enemies_seeded_is_reproducible():
    first = random_enemies(7, random.Random(5))
    second = random_enemies(7, random.Random(5))
    assert len(first) == 7
    assert all(0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE for r, c in first)
    assert first == second


def test_random_enemies_too_many():
    with pytest.raises(ValueError):
        random_enemies(BOARD_SIZE * BOARD_SIZE + 1)


def _on_diagonal(a, b):
    return a != b and abs(a[0] - b[0]) == abs(a[1] - b[1])


@pytest.mark.parametrize("seed", range(6))
def test_every_enemy_is_covered(seed):
    enemies = random_enemies(12, random.Random(seed))
    bishops = place_bishops(enemies)
    assert not bishops & enemies
    assert len(bishops) <= len(enemies)
    for enemy in enemies:
        assert any(_on_diagonal(enemy, bishop) for bishop in bishops)


def test_single_enemy_needs_one_bishop():
    bishops = place_bishops([(3, 3)])
    assert len(bishops) == 1
    assert _on_diagonal((3, 3), next(iter(bishops)))


def test_full_board_leaves_no_room():
    everything = [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
    assert place_bishops(everything) == frozenset()


def test_place_bishops_rejects_off_board():
    with pytest.raises(ValueError):
        place_bishops([(BOARD_SIZE, 0)])


def test_monty_hall_seeded_is_reproducible():
    first = monty_hall(500, random.Random(9))
    second = monty_hall(500, random.Random(9))
    assert first.games == 500
    assert first.stay_wins + first.switch_wins <= 500
    assert first == second


def test_monty_hall_counts_are_bounded():
    result = monty_hall(1000, random.Random(2))
    assert result.games == 1000
    assert result.stay_wins + result.switch_wins <= result.games


def test_monty_hall_switching_wins_more():
    result = monty_hall(10_000, random.Random(1))
    assert result.switch_wins > result.stay_wins


def test_monty_hall_no_games():
    assert monty_hall(0, random.Random(0)) == (0, 0, 0)


def test_monty_hall_negative_rejected():
    with pytest.raises(ValueError):
        monty_hall(-1)


def test_running_counts_example():
    assert running_character_counts("hello") == [
        ("h", 1),
        ("e", 1),
        ("l", 1),
        ("l", 2),
        ("o", 1),
    ]


def test_running_counts_final_values_match_counter():
    text = "mississippi river"
    counts = running_character_counts(text)
    assert [char for char, _ in counts] == list(text)
    last = {}
    for char, count in counts:
        last[char] = count
    assert last == dict(Counter(text))


def test_running_counts_empty():
    assert running_character_counts("") == []