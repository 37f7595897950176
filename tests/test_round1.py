import pytest

from bajtocja.round1 import (
    cartographer,
    first_letters,
    is_fufsopalindrome,
    max_subtree_sum,
    minutes_to_seconds,
)


@pytest.mark.parametrize("n", [0, 1, 17, 10**12])
def test_minutes_to_seconds_round_trip(n):
    seconds = minutes_to_seconds(n)
    assert seconds % 60 == 0
    assert seconds // 60 == n


def test_first_letters():
    words = ["ala", "ma", "kota", "x"]
    result = first_letters(words)
    assert len(result) == len(words)
    assert all(char == word[0] for char, word in zip(result, words))


@pytest.mark.parametrize(
    "number,expected",
    [("69", True), ("818", True), ("609", True), ("6", False), ("3", False), ("12", False)],
)
def test_fufsopalindrome(number, expected):
    assert is_fufsopalindrome(number) is expected


def test_max_subtree_single_node():
    assert max_subtree_sum([42], [], 1) == 42


def test_max_subtree_two_nodes_k1():
    values = [3, 9]
    assert max_subtree_sum(values, [1], 1) == max(values)


def test_max_subtree_many_nodes_k1():
    assert max_subtree_sum([1, 2, 3], [1, 1], 1) == -1


def test_max_subtree_two_branches():
    values = [5, 3, 4]
    assert max_subtree_sum(values, [1, 1], 2) == values[1] + values[2]


def test_max_subtree_siblings_in_one_branch():
    values = [0, 1, 7, 8]
    assert max_subtree_sum(values, [1, 2, 2], 2) == values[2] + values[3]


def test_max_subtree_chain_has_no_choice():
    assert max_subtree_sum([0, 5, 6], [1, 2], 2) == -1


def test_max_subtree_k_too_large():
    assert max_subtree_sum([1, 2], [1], 3) == -1


def test_max_subtree_rejects_zero_k():
    with pytest.raises(ValueError):
        max_subtree_sum([1, 2], [1], 0)


def test_cartographer_fills_blurred_road():
    result = cartographer(3, [(1, 2, -1), (2, 3, 2)], 5)
    assert result[1] == 2
    assert sum(result) == 5


def test_cartographer_exact_length_keeps_roads():
    assert cartographer(3, [(1, 2, 1), (2, 3, 2)], 3) == [1, 2]


def test_cartographer_exact_length_blurred_becomes_one():
    assert cartographer(3, [(1, 2, -1), (2, 3, 2)], 3) == [1, 2]


def test_cartographer_too_short():
    assert cartographer(3, [(1, 2, -1), (2, 3, 2)], 1) is None


def test_cartographer_nothing_blurred():
    assert cartographer(3, [(1, 2, 1), (2, 3, 2)], 7) is None


def test_cartographer_unreachable():
    assert cartographer(3, [(1, 2, -1)], 5) is None


def test_cartographer_uses_shortest_route():
    result = cartographer(3, [(1, 3, 10), (1, 2, -1), (2, 3, 1)], 4)
    assert result[0] == 10
    assert result[2] == 1
    assert result[1] + result[2] == 4


def test_cartographer_first_blurred_on_path_is_stretched():
    result = cartographer(3, [(1, 2, -1), (2, 3, -1), (1, 3, 5)], 6)
    assert result[0] + result[1] == 6
    assert result[2] == 5