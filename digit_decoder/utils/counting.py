"""Counting partitions without materializing them."""

from typing import Callable


def count_partitions(length: int) -> int:
    """Count the partitions of a sequence into groups of size 1 or 2.

    Follows P(n) = P(n-1) + P(n-2) with P(0) = P(1) = 1, independent of
    the digit values.

    Args:
        length: Length of the digit sequence

    Returns:
        Number of distinct partitions
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    previous, current = 1, 1
    for _ in range(length - 1):
        previous, current = current, previous + current
    return current


def count_valid_partitions(digits: str, is_valid: Callable[[str], bool]) -> int:
    """Count the partitions of ``digits`` whose groups all pass ``is_valid``.

    Memoized by suffix start index, filled right to left.

    Args:
        digits: Validated digit sequence
        is_valid: Predicate over the digits of a single group

    Returns:
        Number of valid partitions
    """
    n = len(digits)
    counts = [0] * (n + 1)
    counts[n] = 1
    for i in range(n - 1, -1, -1):
        total = 0
        if is_valid(digits[i]):
            total += counts[i + 1]
        if i + 1 < n and is_valid(digits[i : i + 2]):
            total += counts[i + 2]
        counts[i] = total
    return counts[0]
