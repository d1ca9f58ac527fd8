"""A fixed-size hash table of integers with separate chaining."""

from __future__ import annotations


class ChainedHashTable:
    """Integers hashed by remainder into buckets, each an insertion-ordered chain."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("hash table size must be positive")
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    @property
    def size(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def hash(self, value: int) -> int:
        """Remainder of value by the table size, carrying the sign of value."""
        remainder = abs(value) % self.size
        return -remainder if value < 0 else remainder

    def _slot(self, value: int) -> int:
        return abs(self.hash(value))

    def add(self, value: int) -> None:
        """Append value to the end of its bucket's chain."""
        self._buckets[self._slot(value)].append(value)

    def contains(self, value: int) -> bool:
        """Tell whether value has been added."""
        return value in self._buckets[self._slot(value)]

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def bucket(self, key: int) -> list[int]:
        """The values in bucket key, in the order they were added."""
        if not 0 <= key < self.size:
            raise IndexError(f"key {key} is not in 0..{self.size - 1}")
        return list(self._buckets[key])

    def describe(self) -> str:
        """One line per bucket, saying whether it is empty or listing its values."""
        lines = []
        for key, chain in enumerate(self._buckets):
            if chain:
                values = " ".join(str(value) for value in chain)
                lines.append(f"Key {key} has values = {values}\n")
            else:
                lines.append(f"Key {key} is empty\n")
        return "".join(lines)