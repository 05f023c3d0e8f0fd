"""Puzzles over decimal digits and lexicographic order of integers."""

from __future__ import annotations


def max_diff(num: int) -> int:
    """Largest difference between two numbers made by remapping one digit of ``num`` twice.

    Neither result may have a leading zero or be zero.
    """
    if num < 1:
        raise ValueError("num must be a positive integer")
    digits = str(num)

    to_raise = next((d for d in digits if d != "9"), None)
    high = digits.replace(to_raise, "9") if to_raise else digits

    if digits[0] == "1":
        to_lower = next((d for d in digits if d not in "01"), None)
        low = digits.replace(to_lower, "0") if to_lower else digits
    else:
        low = digits.replace(digits[0], "1")

    return int(high) - int(low)


def min_max_difference(num: int) -> int:
    """Difference between the largest and smallest values from remapping one digit."""
    digits = str(num)
    first_non9 = next((d for d in digits if d in "012345678"), None)
    first_non0 = next((d for d in digits if d in "123456789"), None)
    high = digits.replace(first_non9, "9") if first_non9 else digits
    low = digits.replace(first_non0, "0") if first_non0 else digits
    return int(high) - int(low)


def lexical_order(n: int) -> list[int]:
    """The integers 1..n in lexicographic order of their decimal form."""
    order: list[int] = []
    current = 1
    for _ in range(n):
        order.append(current)
        if current * 10 <= n:
            current *= 10
        else:
            if current >= n:
                current //= 10
            current += 1
            while current % 10 == 0:
                current //= 10
    return order


def find_kth_number(n: int, k: int) -> int:
    """The k-th (1-based) integer of 1..n in lexicographic order."""
    if not 1 <= k <= n:
        raise ValueError("k must be between 1 and n")
    current = 1
    remaining = k - 1
    while remaining > 0:
        steps = 0
        first, last = current, current + 1
        while first <= n:
            steps += min(n + 1, last) - first
            first *= 10
            last *= 10
        if steps <= remaining:
            current += 1
            remaining -= steps
        else:
            current *= 10
            remaining -= 1
    return current