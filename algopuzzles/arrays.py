"""Puzzles over integer arrays: candies, differences, partitions and pairs."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import pairwise
from typing import Sequence


def candy(ratings: Sequence[int]) -> int:
    """Fewest candies for children in a row.

    Every child gets at least one, and a child rated higher than a
    neighbour gets more than that neighbour.
    """
    if not ratings:
        return 0

    from_left = [1]
    for prev, cur in pairwise(ratings):
        from_left.append(from_left[-1] + 1 if cur > prev else 1)

    from_right = [1]
    for prev, cur in pairwise(reversed(ratings)):
        from_right.append(from_right[-1] + 1 if cur > prev else 1)
    from_right.reverse()

    return sum(max(a, b) for a, b in zip(from_left, from_right))


def maximum_difference(nums: Sequence[int]) -> int:
    """Largest ``nums[j] - nums[i]`` with ``i < j`` and ``nums[i] < nums[j]``, or -1."""
    best = -1
    lowest: int | None = None
    for value in nums:
        if lowest is not None and value > lowest:
            best = max(best, value - lowest)
        lowest = value if lowest is None else min(lowest, value)
    return best


def partition_array(nums: Sequence[int], k: int) -> int:
    """Fewest groups such that within each group max minus min is at most ``k``."""
    ordered = sorted(nums)
    groups = 0
    start = 0
    while start < len(ordered):
        start = bisect_right(ordered, ordered[start] + k, lo=start)
        groups += 1
    return groups


def _has_pairs_within(ordered: Sequence[int], diff: int, p: int) -> bool:
    """Whether ``p`` disjoint adjacent pairs of ``ordered`` each differ by at most ``diff``."""
    found = 0
    gaps = (b - a for a, b in pairwise(ordered))
    for gap in gaps:
        if gap <= diff:
            found += 1
            if found >= p:
                return True
            next(gaps, None)
    return False


def minimize_max(nums: Sequence[int], p: int) -> int:
    """Smallest possible largest difference over ``p`` disjoint index pairs."""
    if p < 0:
        raise ValueError("p must not be negative")
    if p == 0:
        return 0
    if p > len(nums) // 2:
        raise ValueError("p is larger than the number of available pairs")
    ordered = sorted(nums)
    spread = ordered[-1] - ordered[0]
    return bisect_left(
        range(spread + 1), True, key=lambda diff: _has_pairs_within(ordered, diff, p)
    )


def divide_array(nums: Sequence[int], k: int) -> list[list[int]]:
    """Split ``nums`` into triples whose spread is at most ``k``; empty if impossible."""
    if len(nums) % 3:
        raise ValueError("the number of elements must be a multiple of three")
    ordered = sorted(nums)
    triples = [ordered[start:start + 3] for start in range(0, len(ordered), 3)]
    if any(triple[2] - triple[0] > k for triple in triples):
        return []
    return triples


def max_adjacent_distance(nums: Sequence[int]) -> int:
    """Largest absolute difference between neighbours in a circular array."""
    if not nums:
        raise ValueError("nums must not be empty")
    rotated = list(nums[1:]) + [nums[0]]
    return max(abs(a - b) for a, b in zip(nums, rotated))