import random

import pytest
from hypothesis import given, strategies as st

from dynprog.progression import (
    can_make_arithmetic_progression,
    can_make_arithmetic_progression_sorted,
    merge_sort,
)

ints = st.lists(st.integers(-50, 50), max_size=40)


@given(ints)
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


@given(ints)
def test_merge_sort_leaves_input_untouched(values):
    original = list(values)
    merge_sort(values)
    assert values == original


@pytest.mark.parametrize("arr", [[], [4], [9, -3]])
def test_short_lists_are_progressions(arr):
    assert can_make_arithmetic_progression(arr) is True
    assert can_make_arithmetic_progression_sorted(arr) is True


def test_examples():
    assert can_make_arithmetic_progression([3, 5, 1]) is True
    assert can_make_arithmetic_progression([1, 2, 4]) is False
    assert can_make_arithmetic_progression_sorted([3, 5, 1]) is True
    assert can_make_arithmetic_progression_sorted([1, 2, 4]) is False


def test_constant_and_duplicates():
    assert can_make_arithmetic_progression([7, 7, 7, 7]) is True
    assert can_make_arithmetic_progression([1, 1, 2, 3]) is False
    assert can_make_arithmetic_progression_sorted([7, 7, 7, 7]) is True
    assert can_make_arithmetic_progression_sorted([1, 1, 2, 3]) is False


@given(
    start=st.integers(-100, 100),
    step=st.integers(-10, 10),
    length=st.integers(3, 30),
    seed=st.integers(0, 1000),
)
def test_shuffled_progression_detected(start, step, length, seed):
    values = [start + i * step for i in range(length)]
    random.Random(seed).shuffle(values)
    assert can_make_arithmetic_progression(values) is True
    assert can_make_arithmetic_progression_sorted(values) is True


@given(ints)
def test_both_checks_agree(values):
    assert can_make_arithmetic_progression(values) == can_make_arithmetic_progression_sorted(
        values
    )


@given(st.lists(st.integers(-20, 20), min_size=3, max_size=15))
def test_agree_on_progression_with_one_value_changed(values):
    values = sorted(set(values))
    if len(values) < 3:
        values = [0, 1, 3]
    assert can_make_arithmetic_progression(values) == can_make_arithmetic_progression_sorted(
        values
    )