import pytest

from algoshelf.dynamic import (
    egg_drop,
    is_subset_sum,
    knapsack,
    longest_common_subsequence,
    min_coins,
)


def _is_subsequence(part, whole):
    remaining = iter(whole)
    return all(item in remaining for item in part)


def test_min_coins_zero_amount():
    assert min_coins(0) == 0


@pytest.mark.parametrize("coin", [1, 2, 5, 10])
def test_min_coins_single_denomination_is_one_coin(coin):
    assert min_coins(coin) == 1


def test_min_coins_is_subadditive():
    for a in range(1, 30):
        for b in range(1, 30):
            assert min_coins(a + b) <= min_coins(a) + min_coins(b)


def test_min_coins_unreachable():
    assert min_coins(3, (2,)) is None


def test_min_coins_rejects_bad_input():
    with pytest.raises(ValueError):
        min_coins(-1)
    with pytest.raises(ValueError):
        min_coins(5, (0, 1))


def test_knapsack_worked_example():
    assert knapsack(50, [10, 20, 30], [60, 100, 120]) == 220


def test_knapsack_nothing_fits():
    assert knapsack(5, [10, 20, 30], [60, 100, 120]) == 0


def test_knapsack_everything_fits():
    values = [60, 100, 120]
    assert knapsack(1000, [10, 20, 30], values) == sum(values)


def test_knapsack_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack(10, [1, 2], [3])


def test_lcs_classic_example():
    a, b = "ABCBDAB", "BDCABA"
    result = longest_common_subsequence(a, b)
    assert len(result) == 4
    assert _is_subsequence(result, a)
    assert _is_subsequence(result, b)


def test_lcs_empty_input():
    assert longest_common_subsequence("", "ABC") == ""


def test_lcs_of_identical_sequences():
    assert longest_common_subsequence("HELLO", "HELLO") == "HELLO"


def test_lcs_list_input():
    result = longest_common_subsequence([1, 2, 3, 4], [2, 4, 5])
    assert result == [2, 4]


def test_subset_sum_worked_example():
    assert is_subset_sum([3, 34, 4, 12, 5, 2], 9) is True


def test_subset_sum_exceeding_total_is_false():
    values = [3, 34, 4, 12, 5, 2]
    assert is_subset_sum(values, sum(values) + 1) is False
    assert is_subset_sum(values, sum(values)) is True


def test_subset_sum_zero_is_always_reachable():
    assert is_subset_sum([], 0) is True


def test_subset_sum_rejects_negative_value():
    with pytest.raises(ValueError):
        is_subset_sum([1, -2], 3)


def test_egg_drop_one_egg_is_linear():
    for floors in range(0, 30):
        assert egg_drop(1, floors) == floors


def test_egg_drop_two_eggs_hundred_floors():
    assert egg_drop(2, 100) == 14


def test_egg_drop_more_eggs_never_hurts():
    for floors in range(1, 60):
        results = [egg_drop(eggs, floors) for eggs in range(1, 8)]
        assert results == sorted(results, reverse=True)


def test_egg_drop_rejects_no_eggs():
    with pytest.raises(ValueError):
        egg_drop(0, 10)