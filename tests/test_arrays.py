import random

import pytest

from algopack.arrays import (
    binary_search,
    is_palindrome,
    leaders,
    matrix_multiply,
    power_set,
    rotate_left,
    sorted_union,
)


def test_leaders_documented_example():
    assert leaders([16, 17, 4, 3, 5, 2]) == [17, 5, 2]


def test_leaders_invariants():
    rng = random.Random(3)
    data = [rng.randint(1, 30) for _ in range(40)]
    result = leaders(data)
    assert result[-1] == data[-1]
    assert result == sorted(result, reverse=True)


def test_leaders_empty():
    assert leaders([]) == []


def test_rotate_left_first_element():
    data = [1, 2, 3, 4, 5]
    result = rotate_left(data, 2)
    assert result[0] == data[2]
    assert sorted(result) == data


def test_rotate_left_round_trip():
    data = list(range(11))
    for d in range(len(data) + 1):
        assert rotate_left(rotate_left(data, d), len(data) - d) == data


def test_rotate_left_zero_and_full():
    data = [4, 8, 15, 16]
    assert rotate_left(data, 0) == data
    assert rotate_left(data, len(data)) == data


def test_rotate_left_empty():
    assert rotate_left([], 3) == []


def test_power_set_small():
    assert power_set("abc") == ["a", "ab", "abc", "ac", "b", "bc", "c"]


def test_power_set_size_and_order():
    result = power_set("dcbae")
    assert len(result) == 2 ** 5 - 1
    assert result == sorted(result)
    assert "" not in result


def test_sorted_union_source_example():
    a = [1, 2, 5, 6, 2, 3, 5]
    b = [2, 4, 5, 6, 8, 9, 4, 6, 5]
    assert sorted_union(a, b) == [1, 2, 3, 4, 5, 6, 8, 9]


def test_sorted_union_invariants():
    a = [7, 3, 3, 1]
    b = [3, 9]
    result = sorted_union(a, b)
    assert len(result) == len(set(result))
    assert result == sorted(result)
    assert all(x in result for x in a + b)


def test_binary_search_found():
    data = [9, 2, 7, 4, 1, 8]
    for target in data:
        index = binary_search(data, target)
        assert sorted(data)[index] == target


def test_binary_search_single_element():
    assert binary_search([5], 5) == 0


def test_binary_search_missing():
    assert binary_search([1, 3, 5], 4) is None
    assert binary_search([], 4) is None


def test_matrix_multiply_small():
    assert matrix_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_matrix_multiply_identity():
    m = [[2, -1, 3], [0, 4, 5]]
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert matrix_multiply(m, identity) == m


def test_matrix_multiply_shape():
    a = [[1, 2, 3]] * 4
    b = [[1, 2]] * 3
    result = matrix_multiply(a, b)
    assert len(result) == 4
    assert all(len(row) == 2 for row in result)


def test_matrix_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        matrix_multiply([[1, 2]], [[1, 2]])


def test_is_palindrome_true():
    assert is_palindrome("abba")
    assert is_palindrome("racecar")
    assert is_palindrome("x")


def test_is_palindrome_false():
    assert not is_palindrome("abc")
    assert not is_palindrome("ab")


def test_is_palindrome_empty_is_false():
    assert not is_palindrome("")


def test_is_palindrome_mirror_construction():
    word = "algorithm"
    assert is_palindrome(word + word[::-1])