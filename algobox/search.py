"""Searching text for a word and sorted sequences by ternary search."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

# Below this span a ternary split is not worth it and the range is scanned.
_LINEAR_THRESHOLD = 10


def find_word(paragraph: str, word: str) -> int | None:
    """Position of the first occurrence of word in paragraph, or None if absent."""
    if not paragraph:
        raise ValueError("the paragraph is empty")
    index = paragraph.find(word)
    return None if index == -1 else index


def _scan(values: Sequence[Any], left: int, right: int, target: Any) -> int | None:
    return next((i for i in range(left, right + 1) if values[i] == target), None)


def _split(left: int, right: int) -> tuple[int, int]:
    third = (right - left) // 3
    return left + third, right - third


def ternary_search(values: Sequence[Any], target: Any) -> int | None:
    """Index of target in the ascending sequence values, or None; iterative."""
    left, right = 0, len(values) - 1
    while left <= right:
        if right - left < _LINEAR_THRESHOLD:
            return _scan(values, left, right, target)
        one_third, two_third = _split(left, right)
        if values[one_third] == target:
            return one_third
        if values[two_third] == target:
            return two_third
        if target > values[two_third]:
            left = two_third + 1
        elif target < values[one_third]:
            right = one_third - 1
        else:
            left, right = one_third + 1, two_third - 1
    return None


def ternary_search_recursive(values: Sequence[Any], target: Any) -> int | None:
    """Index of target in the ascending sequence values, or None; recursive."""

    def search(left: int, right: int) -> int | None:
        if left > right:
            return None
        if right - left < _LINEAR_THRESHOLD:
            return _scan(values, left, right, target)
        one_third, two_third = _split(left, right)
        if values[one_third] == target:
            return one_third
        if values[two_third] == target:
            return two_third
        if target < values[one_third]:
            return search(left, one_third - 1)
        if target > values[two_third]:
            return search(two_third + 1, right)
        return search(one_third + 1, two_third - 1)

    return search(0, len(values) - 1)