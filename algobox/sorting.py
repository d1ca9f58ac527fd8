"""A collection of sorting algorithms, each returning a new sorted list."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any


def bitonic_sort(values: Iterable[Any], ascending: bool = True) -> list[Any]:
    """Bitonic sort; the number of values must be a power of two (or zero)."""
    items = list(values)
    n = len(items)
    if n & (n - 1):
        raise ValueError("bitonic sort needs a power-of-two number of values")

    def merge(low: int, count: int, up: bool) -> None:
        if count > 1:
            k = count // 2
            for i in range(low, low + k):
                if (items[i] > items[i + k]) == up:
                    items[i], items[i + k] = items[i + k], items[i]
            merge(low, k, up)
            merge(low + k, k, up)

    def sort(low: int, count: int, up: bool) -> None:
        if count > 1:
            k = count // 2
            sort(low, k, True)
            sort(low + k, k, False)
            merge(low, count, up)

    sort(0, n, ascending)
    return items


def cocktail_selection_sort(values: Iterable[Any]) -> list[Any]:
    """Place the minimum and maximum of the unsorted middle at both ends each pass."""
    items = list(values)
    low, high = 0, len(items) - 1
    while low < high:
        min_index, max_index = low, high
        for i in range(low, high + 1):
            if items[i] >= items[max_index]:
                max_index = i
            if items[i] <= items[min_index]:
                min_index = i
        items[low], items[min_index] = items[min_index], items[low]
        if max_index == low:
            max_index = min_index
        items[high], items[max_index] = items[max_index], items[high]
        low += 1
        high -= 1
    return items


def counting_sort_string(text: str) -> str:
    """The characters of text in order of their code points, by counting."""
    counts = Counter(text)
    return "".join(char * counts[char] for char in sorted(counts))


def counting_sort(values: Iterable[int]) -> list[int]:
    """Counting sort of integers over the range from their minimum to maximum."""
    items = list(values)
    if not items:
        return []
    low = min(items)
    counts = [0] * (max(items) - low + 1)
    for value in items:
        counts[value - low] += 1
    result: list[int] = []
    for offset, count in enumerate(counts):
        result.extend([low + offset] * count)
    return result


def numeric_string_key(text: str) -> tuple[int, str]:
    """Sort key ordering digit strings by numeric value, ignoring leading zeros."""
    stripped = text.lstrip("0")
    return len(stripped), stripped


def numeric_sort(strings: Iterable[str]) -> list[str]:
    """Digit strings in numeric rather than alphabetical order."""
    return sorted(strings, key=numeric_string_key)


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Bucket sort of numbers in [0, 1), one bucket per value."""
    items = list(values)
    n = len(items)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"{value} is not in [0, 1)")
        buckets[min(int(n * value), n - 1)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def comb_sort(values: Iterable[Any]) -> list[Any]:
    """Comb sort: bubble sort over a gap that shrinks by a factor of 1.3."""
    items = list(values)
    gap = len(items)
    swapped = True
    while gap != 1 or swapped:
        gap = max(1, gap * 10 // 13)
        swapped = False
        for i in range(len(items) - gap):
            if items[i] > items[i + gap]:
                items[i], items[i + gap] = items[i + gap], items[i]
                swapped = True
    return items