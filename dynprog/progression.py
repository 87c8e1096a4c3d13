"""Checks whether numbers can be reordered into an arithmetic progression."""

from collections.abc import Sequence

__all__ = [
    "merge_sort",
    "can_make_arithmetic_progression_sorted",
    "can_make_arithmetic_progression",
]


def _merge(left: list[int], right: list[int]) -> list[int]:
    result: list[int] = []
    li = iter(left)
    ri = iter(right)
    a = next(li, None)
    b = next(ri, None)
    while a is not None and b is not None:
        if a <= b:
            result.append(a)
            a = next(li, None)
        else:
            result.append(b)
            b = next(ri, None)
    if a is not None:
        result.append(a)
        result.extend(li)
    if b is not None:
        result.append(b)
        result.extend(ri)
    return result


def merge_sort(values: Sequence[int]) -> list[int]:
    """Return a new list with the values in ascending order (stable merge sort)."""
    if len(values) <= 1:
        return list(values)
    mid = len(values) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def can_make_arithmetic_progression_sorted(arr: Sequence[int]) -> bool:
    """Decide by sorting and comparing consecutive differences."""
    if len(arr) <= 2:
        return True
    ordered = merge_sort(arr)
    d = ordered[1] - ordered[0]
    return all(b - a == d for a, b in zip(ordered[1:], ordered[2:]))


def can_make_arithmetic_progression(arr: Sequence[int]) -> bool:
    """Decide in linear time from the extremes and a set of the values."""
    n = len(arr)
    if n <= 2:
        return True
    lo, hi = min(arr), max(arr)
    d, rest = divmod(hi - lo, n - 1)
    if rest:
        return False
    if hi == lo:
        return True
    seen = set(arr)
    if len(seen) != n:
        return False
    return all(lo + i * d in seen for i in range(n))