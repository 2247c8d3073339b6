"""Small helpers for comparing strings and sorting with a comparer."""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

Comparer = Callable[[T, T], int]


def compare_string(s1: str, s2: str) -> int:
    """Compare two strings byte by byte.

    Returns -1 if ``s1`` sorts before ``s2``, 1 if after and 0 if equal.
    When one string is a prefix of the other, the shorter one is the greater.
    """
    b1 = s1.encode("utf-8")
    b2 = s2.encode("utf-8")
    for c1, c2 in zip(b1, b2):
        if c1 < c2:
            return -1
        if c1 > c2:
            return 1
    if len(b1) < len(b2):
        return 1
    if len(b1) > len(b2):
        return -1
    return 0


def merge_sort(items: Sequence[T], comparer: Comparer) -> list[T]:
    """Return a new list sorted with ``comparer`` (-1, 0 or 1 like ``cmp``).

    On ties the element from the right half is taken first.
    """
    items = list(items)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return _merge(
        merge_sort(items[:middle], comparer),
        merge_sort(items[middle:], comparer),
        comparer,
    )


def _merge(left: list[T], right: list[T], comparer: Comparer) -> list[T]:
    result: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if comparer(left[i], right[j]) == -1:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result