"""Counting puzzles: candy distributions, good arrays and boxes of candies."""

from __future__ import annotations

from collections import deque
from math import comb
from typing import Sequence

MOD = 1_000_000_007


def distribute_candies(n: int, limit: int) -> int:
    """Ways to give ``n`` candies to three children with at most ``limit`` each."""
    if n < 0 or limit < 0:
        raise ValueError("n and limit must not be negative")
    total = 0
    for over in range(4):
        rest = n - over * (limit + 1)
        if rest < 0:
            break
        total += (-1) ** over * comb(3, over) * comb(rest + 2, 2)
    return total


def count_good_arrays(n: int, m: int, k: int) -> int:
    """Arrays of length ``n`` over ``1..m`` with exactly ``k`` equal neighbours, mod 1e9+7."""
    if n < 1 or m < 1:
        raise ValueError("n and m must be positive")
    if not 0 <= k < n:
        raise ValueError("k must be between 0 and n - 1")
    return m * pow(m - 1, n - k - 1, MOD) * comb(n - 1, k) % MOD


def max_candies(
    status: Sequence[int],
    candies: Sequence[int],
    keys: Sequence[Sequence[int]],
    contained_boxes: Sequence[Sequence[int]],
    initial_boxes: Sequence[int],
) -> int:
    """Candies collected by opening every box reachable from ``initial_boxes``.

    A box with status 1 is open; keys found inside boxes open others, and
    boxes found inside boxes join the ones at hand.
    """
    is_open = [bool(flag) for flag in status]
    pending = deque(initial_boxes)
    total = 0
    stalled = 0
    while pending:
        box = pending.popleft()
        if not is_open[box]:
            pending.append(box)
            stalled += 1
            if stalled >= len(pending):
                break
            continue
        stalled = 0
        total += candies[box]
        for key in keys[box]:
            is_open[key] = True
        pending.extend(contained_boxes[box])
    return total