import pytest

from algopack.dynamic import (
    cut_rod,
    fibonacci,
    grid_traveler,
    lcs_length,
    max_knapsack_value,
    max_subarray,
    shortest_supersequence_length,
    wildcard_match,
)


def test_fibonacci_seeds():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


def test_fibonacci_recurrence():
    for n in range(2, 40):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_cut_rod_linear_prices():
    prices = [3 * size for size in range(1, 11)]
    assert cut_rod(prices, 7) == 21


def test_cut_rod_zero_length():
    assert cut_rod([1, 5, 8], 0) == 0


def test_cut_rod_invariants():
    prices = [1, 5, 8, 9, 10, 17, 17, 20]
    for length in range(1, 9):
        assert cut_rod(prices, length) >= prices[length - 1]
        for a in range(1, length):
            assert cut_rod(prices, length) >= cut_rod(prices, a) + cut_rod(prices, length - a)


def test_cut_rod_negative_length():
    with pytest.raises(ValueError):
        cut_rod([1], -1)


ITEMS = [(3, 30), (8, 50), (5, 60), (4, 10), (2, 15)]


def test_knapsack_zero_capacity():
    assert max_knapsack_value(ITEMS, 0) == 0


def test_knapsack_everything_fits():
    capacity = sum(w for w, _ in ITEMS)
    assert max_knapsack_value(ITEMS, capacity) == sum(v for _, v in ITEMS)


def test_knapsack_monotone_in_capacity():
    results = [max_knapsack_value(ITEMS, c) for c in range(25)]
    assert results == sorted(results)


def test_knapsack_single_item():
    assert max_knapsack_value([(5, 9)], 4) == 0
    assert max_knapsack_value([(5, 9)], 5) == 9


def test_knapsack_negative_capacity():
    with pytest.raises(ValueError):
        max_knapsack_value(ITEMS, -1)


def test_grid_traveler_base_cases():
    assert grid_traveler(1, 1) == 1
    assert grid_traveler(0, 5) == 0
    assert grid_traveler(5, 0) == 0


def test_grid_traveler_symmetry_and_recurrence():
    for m in range(2, 10):
        for n in range(2, 10):
            assert grid_traveler(m, n) == grid_traveler(n, m)
            assert grid_traveler(m, n) == grid_traveler(m - 1, n) + grid_traveler(m, n - 1)


def test_grid_traveler_negative():
    with pytest.raises(ValueError):
        grid_traveler(-1, 2)


def test_lcs_invariants():
    assert lcs_length("ABCDEF", "ABCDEF") == 6
    assert lcs_length("ABC", "") == 0
    assert lcs_length("AGGTAB", "GXTXAYB") == lcs_length("GXTXAYB", "AGGTAB")


def test_shortest_supersequence_example():
    assert shortest_supersequence_length("AGGTAB", "GXTXAYB") == 9


def test_shortest_supersequence_bounds():
    for x, y in [("abc", "abd"), ("", "xyz"), ("aaaa", "aa")]:
        length = shortest_supersequence_length(x, y)
        assert max(len(x), len(y)) <= length <= len(x) + len(y)
        assert length == len(x) + len(y) - lcs_length(x, y)


@pytest.mark.parametrize(
    ("text", "pattern", "expected"),
    [("aa", "a", False), ("aa", "*", True), ("cb", "?a", False), ("adceb", "*a*b", True)],
)
def test_wildcard_documented_cases(text, pattern, expected):
    assert wildcard_match(text, pattern) is expected


def test_max_subarray_example():
    assert tuple(max_subarray([-2, -3, 4, -1, -2, 1, 5, -3])) == (7, 2, 6)


def test_max_subarray_range_sums_to_total():
    values = [3, -4, 5, -1, 2, -6, 4, 1]
    result = max_subarray(values)
    assert sum(values[result.start:result.end + 1]) == result.total
    assert all(
        sum(values[i:j]) <= result.total
        for i in range(len(values))
        for j in range(i + 1, len(values) + 1)
    )


def test_max_subarray_all_negative_picks_largest():
    values = [-8, -3, -6, -2, -5]
    assert max_subarray(values).total == max(values)


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray([])