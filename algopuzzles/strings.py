"""Puzzles over strings: equivalences, stacks, stars, frequencies and moves."""

from __future__ import annotations

import heapq
from collections import Counter
from itertools import accumulate


def smallest_equivalent_string(s1: str, s2: str, base: str) -> str:
    """Replace each character of ``base`` by the smallest character equivalent to it.

    ``s1[i]`` and ``s2[i]`` are declared equivalent; equivalence is reflexive,
    symmetric and transitive.
    """
    if len(s1) != len(s2):
        raise ValueError("s1 and s2 must have the same length")

    parent: dict[str, str] = {}

    def find(ch: str) -> str:
        root = ch
        while parent.get(root, root) != root:
            root = parent[root]
        while ch != root:
            parent[ch], ch = root, parent[ch]
        return root

    for a, b in zip(s1, s2):
        ra, rb = find(a), find(b)
        if ra != rb:
            low, high = sorted((ra, rb))
            parent[high] = low

    return "".join(find(ch) for ch in base)


def robot_with_string(s: str) -> str:
    """Lexicographically smallest string a robot can write using an intermediate stack."""
    if not s:
        return ""
    suffix_min = list(accumulate(reversed(s), min))[::-1]
    following = suffix_min[1:] + [None]

    stack: list[str] = []
    written: list[str] = []
    for ch, rest_min in zip(s, following):
        stack.append(ch)
        while stack and (rest_min is None or stack[-1] <= rest_min):
            written.append(stack.pop())
    return "".join(written)


def clear_stars(s: str) -> str:
    """Remove every '*' together with the smallest character to its left.

    Among equal smallest characters the rightmost one is removed.
    """
    heap: list[tuple[str, int]] = []
    removed: set[int] = set()
    for index, ch in enumerate(s):
        if ch == "*":
            if not heap:
                raise ValueError(f"star at position {index} has nothing to remove")
            _, neg_index = heapq.heappop(heap)
            removed.add(-neg_index)
        else:
            heapq.heappush(heap, (ch, -index))
    return "".join(
        ch for index, ch in enumerate(s) if ch != "*" and index not in removed
    )


def answer_string(word: str, num_friends: int) -> str:
    """Largest piece obtainable when ``word`` is split into ``num_friends`` non-empty parts."""
    if num_friends == 1:
        return word
    if num_friends < 1 or num_friends > len(word):
        raise ValueError("num_friends must be between 1 and len(word)")
    width = len(word) - num_friends + 1
    return max(word[start:start + width] for start in range(len(word)))


def minimum_deletions(word: str, k: int) -> int:
    """Fewest deletions so that any two character frequencies differ by at most ``k``."""
    counts = sorted(Counter(word).values())
    if not counts:
        return 0

    def cost(floor: int) -> int:
        return sum(
            count if count < floor else max(0, count - floor - k) for count in counts
        )

    return min(cost(floor) for floor in range(counts[0], counts[-1] + 1))


def max_parity_frequency_difference(s: str) -> int:
    """Largest odd character frequency minus smallest even (positive) frequency."""
    counts = Counter(s).values()
    largest_odd = max((c for c in counts if c % 2), default=0)
    smallest_even = min((c for c in counts if c % 2 == 0), default=len(s))
    return largest_odd - smallest_even


def max_manhattan_distance(moves: str, k: int) -> int:
    """Greatest distance from the origin reached when up to ``k`` moves may be changed."""
    counts: Counter[str] = Counter()
    best = 0
    for steps, move in enumerate(moves, start=1):
        counts[move] += 1
        distance = abs(counts["N"] - counts["S"]) + abs(counts["E"] - counts["W"])
        best = max(best, distance + min(2 * k, steps - distance))
    return best