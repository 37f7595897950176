import random

import pytest

from bajtocja.round2 import (
    ProductionLine,
    interview_verdict,
    jubilee_gap,
    kumquat_juice,
    longest_stone_stack,
    park_survey,
)


def test_interview_correct():
    assert interview_verdict(3, 4, 12) == "DOBRZE"


def test_interview_wrong():
    assert interview_verdict(3, 4, 13) == "TYLKO SZYBKO"


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8, 100, 1000, 1025])
def test_jubilee_reaches_power_of_two(n):
    target = n + jubilee_gap(n)
    assert target & (target - 1) == 0
    assert target >= n
    assert target < 2 * n or n == 1


def test_stone_stack_example():
    assert longest_stone_stack([5, 1, 2, 3, 10]) == 3


def test_stone_stack_order_and_duplicates_do_not_matter():
    stones = [4, 7, 5, 6, 1, 2, 20]
    shuffled = stones[:]
    random.Random(3).shuffle(shuffled)
    assert longest_stone_stack(shuffled) == longest_stone_stack(stones)
    assert longest_stone_stack(stones + [5, 6, 6]) == longest_stone_stack(stones)


def test_stone_stack_single():
    assert longest_stone_stack([42]) == 1


def test_kumquat_ranges_add_up():
    prod = [2, 3, 7]
    ops = [("V", 2, 5, 4), ("Q", 1, 1, 10), ("Q", 2, 3, 10), ("Q", 1, 3, 10)]
    a, b, whole = kumquat_juice(prod, ops)
    assert a + b == whole


def test_kumquat_zero_rate_freezes_output():
    first, later = kumquat_juice([3], [("V", 1, 0, 5), ("Q", 1, 1, 5), ("Q", 1, 1, 20)])
    assert first == later


def test_kumquat_fire_forgets_production():
    assert kumquat_juice([5], [("F", 1, 3), ("Q", 1, 1, 10)]) == [0]


def test_kumquat_hire_after_fire_starts_over():
    rehired = kumquat_juice([5], [("F", 1, 3), ("H", 1, 4, 6), ("Q", 1, 1, 10)])
    fresh = kumquat_juice([0], [("V", 1, 4, 6), ("Q", 1, 1, 10)])
    assert rehired == fresh


def test_kumquat_needs_workers():
    with pytest.raises(ValueError):
        kumquat_juice([], [])


def test_kumquat_bad_worker():
    with pytest.raises(IndexError):
        kumquat_juice([1], [("V", 0, 2, 3)])


def test_production_line_matches_replay_without_firing():
    prod = [2, 3, 7]
    ops = [("V", 2, 5, 4), ("Q", 1, 3, 6), ("V", 1, 1, 8), ("Q", 2, 3, 9), ("Q", 1, 3, 12)]
    line = ProductionLine(prod)
    answers = []
    for kind, *args in ops:
        if kind == "V":
            worker, value, day = args
            line.change_productivity(worker - 1, value, day)
        else:
            first, last, day = args
            answers.append(line.query_range(first - 1, last - 1, day))
    assert answers == kumquat_juice(prod, ops)


def test_production_line_fired_worker_is_skipped():
    line = ProductionLine([4, 6])
    line.fire(0, 5)
    alone = ProductionLine([6])
    assert line.query_range(0, 1, 10) == alone.query_range(0, 0, 10)


def test_production_line_hire_starts_at_given_time():
    line = ProductionLine([9])
    line.fire(0, 2)
    line.hire(0, 3, 5)
    reference = ProductionLine([3])
    assert line.query_range(0, 0, 15) == reference.query_range(0, 0, 10)


def test_production_line_bad_index():
    line = ProductionLine([1, 2])
    with pytest.raises(IndexError):
        line.fire(2, 1)


def test_park_survey_asks_every_attraction_in_order():
    calls = []

    def ask(attraction):
        calls.append(attraction)
        return attraction * 10

    answers = park_survey(4, ask)
    assert calls == [1, 2, 3, 4]
    assert answers == [10, 20, 30, 40]