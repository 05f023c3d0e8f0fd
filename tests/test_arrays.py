import pytest
from hypothesis import given
from hypothesis import strategies as st

from algopuzzles.arrays import (
    candy,
    divide_array,
    max_adjacent_distance,
    maximum_difference,
    minimize_max,
    partition_array,
)

small_lists = st.lists(st.integers(min_value=0, max_value=50), min_size=1, max_size=20)


def test_candy_worked_example():
    assert candy([1, 0, 2]) == 5


def test_candy_empty():
    assert candy([]) == 0


@given(st.integers(min_value=1, max_value=30), st.integers())
def test_candy_equal_ratings_get_one_each(size, rating):
    assert candy([rating] * size) == size


@given(small_lists)
def test_candy_symmetric_under_reversal(ratings):
    assert candy(ratings) == candy(list(reversed(ratings)))


@given(small_lists)
def test_candy_at_least_one_each(ratings):
    assert candy(ratings) >= len(ratings)


@given(st.integers(min_value=1, max_value=20))
def test_candy_increasing_equals_decreasing(size):
    assert candy(list(range(size))) == candy(list(range(size, 0, -1)))


def test_maximum_difference_worked_example():
    assert maximum_difference([7, 1, 5, 4]) == 4


def test_maximum_difference_no_increase():
    assert maximum_difference([9, 4, 3, 2]) == -1
    assert maximum_difference([5, 5, 5]) == -1


@given(small_lists)
def test_maximum_difference_bounds(nums):
    result = maximum_difference(nums)
    assert result == -1 or 0 < result <= max(nums) - min(nums)


@given(small_lists)
def test_maximum_difference_positive_iff_increasing_pair(nums):
    has_pair = any(b > a for i, a in enumerate(nums) for b in nums[i + 1:])
    assert (maximum_difference(nums) > 0) == has_pair


def test_partition_array_large_k_is_one_group():
    assert partition_array([3, 6, 1, 2, 5], 100) == 1


def test_partition_array_does_not_mutate():
    nums = [3, 6, 1, 2, 5]
    partition_array(nums, 2)
    assert nums == [3, 6, 1, 2, 5]


@given(small_lists)
def test_partition_array_zero_k_counts_distinct(nums):
    assert partition_array(nums, 0) == len(set(nums))


@given(small_lists, st.integers(min_value=0, max_value=60))
def test_partition_array_bounds(nums, k):
    assert 1 <= partition_array(nums, k) <= len(nums)


def test_minimize_max_zero_pairs():
    assert minimize_max([10, 1, 2], 0) == 0


def test_minimize_max_too_many_pairs():
    with pytest.raises(ValueError):
        minimize_max([1, 2, 3], 2)


def test_minimize_max_negative_p():
    with pytest.raises(ValueError):
        minimize_max([1, 2], -1)


@given(st.lists(st.integers(min_value=0, max_value=50), min_size=2, max_size=20))
def test_minimize_max_bounds(nums):
    result = minimize_max(nums, 1)
    assert 0 <= result <= max(nums) - min(nums)


@given(st.lists(st.integers(min_value=0, max_value=50), min_size=4, max_size=20))
def test_minimize_max_monotone_in_p(nums):
    assert minimize_max(nums, 1) <= minimize_max(nums, 2)


@given(st.lists(st.integers(min_value=0, max_value=50), min_size=2, max_size=20))
def test_minimize_max_single_pair_is_smallest_gap(nums):
    ordered = sorted(nums)
    assert minimize_max(nums, 1) == min(b - a for a, b in zip(ordered, ordered[1:]))


def test_divide_array_worked_example():
    assert divide_array([1, 3, 4, 8, 7, 9, 3, 5, 1], 2) == [[1, 1, 3], [3, 4, 5], [7, 8, 9]]


def test_divide_array_impossible():
    assert divide_array([1, 3, 3, 2, 7, 3], 3) == []


def test_divide_array_bad_length():
    with pytest.raises(ValueError):
        divide_array([1, 2], 5)


@given(
    st.integers(min_value=1, max_value=6).flatmap(
        lambda t: st.lists(st.integers(0, 30), min_size=3 * t, max_size=3 * t)
    ),
    st.integers(min_value=0, max_value=30),
)
def test_divide_array_invariants(nums, k):
    triples = divide_array(nums, k)
    if triples:
        assert sorted(x for t in triples for x in t) == sorted(nums)
        assert all(len(t) == 3 and t == sorted(t) and t[2] - t[0] <= k for t in triples)
    else:
        ordered = sorted(nums)
        assert any(ordered[i + 2] - ordered[i] > k for i in range(0, len(ordered), 3))


def test_max_adjacent_distance_single():
    assert max_adjacent_distance([5]) == 0


def test_max_adjacent_distance_empty():
    with pytest.raises(ValueError):
        max_adjacent_distance([])


@given(small_lists, st.integers(min_value=0, max_value=19))
def test_max_adjacent_distance_rotation_invariant(nums, shift):
    shift %= len(nums)
    assert max_adjacent_distance(nums) == max_adjacent_distance(nums[shift:] + nums[:shift])


@given(small_lists)
def test_max_adjacent_distance_covers_wraparound(nums):
    result = max_adjacent_distance(nums)
    assert abs(nums[0] - nums[-1]) <= result <= max(nums) - min(nums)