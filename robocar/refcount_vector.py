"""Reference counts over a linear index space, with reuse of freed indices."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from robocar.dvector import DVector
from robocar.iterators import filtered, mapped

INVALID = -1
_SHORT_MAX = 32767
_INT_SIZE = 4


class RefCountVector:
    """Track which indices of a linear index list are in use.

    Freed indices go onto a free list and are handed out again by
    :meth:`allocate`. Iterating with :meth:`indices` yields only the
    indices whose reference count is positive. Counts are limited to the
    range of a 16-bit signed integer.
    """

    def __init__(self) -> None:
        self._ref_counts = DVector()
        self._free_indices = DVector()
        self._used_count = 0

    def raw_ref_counts(self) -> list[int]:
        """Return a copy of the raw count for every index."""
        return list(self._ref_counts)

    def empty(self) -> bool:
        """Return True when no index is in use."""
        return self._used_count == 0

    def count(self) -> int:
        """Number of indices in use."""
        return self._used_count

    def max_index(self) -> int:
        """One past the largest index ever allocated."""
        return len(self._ref_counts)

    def is_dense(self) -> bool:
        """Return True when the free list is empty."""
        return len(self._free_indices) == 0

    def is_valid(self, index: int) -> bool:
        """Return True when ``index`` is in range and in use."""
        return 0 <= index < len(self._ref_counts) and self._ref_counts[index] > 0

    def is_valid_unsafe(self, index: int) -> bool:
        """Return True when ``index`` is in use, without a range check."""
        return self._ref_counts[index] > 0

    def ref_count(self, index: int) -> int:
        """Reference count of ``index``; freed indices report 0."""
        n = self._ref_counts[index]
        return 0 if n == INVALID else n

    def raw_ref_count(self, index: int) -> int:
        """Stored count of ``index``; freed indices report -1."""
        return self._ref_counts[index]

    def allocate(self) -> int:
        """Take a free index, or a new one, with a count of 1."""
        self._used_count += 1
        while not self._free_indices.empty():
            index = self._free_indices.back()
            self._free_indices.pop_back()
            if index != INVALID:
                self._ref_counts[index] = 1
                return index
        self._ref_counts.append(1)
        return len(self._ref_counts) - 1

    def increment(self, index: int, amount: int = 1) -> int:
        """Add ``amount`` to the count of ``index`` and return the new count."""
        if not self.is_valid(index):
            raise IndexError(f"index {index} is not in use")
        new_count = self._ref_counts[index] + amount
        if not 0 < new_count <= _SHORT_MAX:
            raise OverflowError(f"reference count of {index} out of range")
        self._ref_counts[index] = new_count
        return new_count

    def decrement(self, index: int, amount: int = 1) -> None:
        """Subtract ``amount`` from the count, freeing ``index`` at zero."""
        if not self.is_valid(index):
            raise IndexError(f"index {index} is not in use")
        new_count = self._ref_counts[index] - amount
        if new_count < 0:
            raise ValueError(f"reference count of {index} would become negative")
        if new_count == 0:
            self._free_indices.append(index)
            self._ref_counts[index] = INVALID
            self._used_count -= 1
        else:
            self._ref_counts[index] = new_count

    def allocate_at(self, index: int) -> bool:
        """Allocate exactly ``index``.

        Indices skipped over when growing go onto the free list. Returns
        False when ``index`` is already in use or is not on the free list.
        """
        size = len(self._ref_counts)
        if index >= size:
            for skipped in range(size, index):
                self._ref_counts.append(INVALID)
                self._free_indices.append(skipped)
            self._ref_counts.append(1)
            self._used_count += 1
            return True
        if self._ref_counts[index] > 0:
            return False
        for position, free in enumerate(self._free_indices):
            if free == index:
                self._free_indices[position] = INVALID
                self._ref_counts[index] = 1
                self._used_count += 1
                return True
        return False

    def allocate_at_unsafe(self, index: int) -> bool:
        """Allocate exactly ``index`` without touching the free list.

        Call :meth:`rebuild_free_list` afterwards.
        """
        size = len(self._ref_counts)
        if index >= size:
            for _ in range(size, index):
                self._ref_counts.append(INVALID)
            self._ref_counts.append(1)
            self._used_count += 1
            return True
        if self._ref_counts[index] > 0:
            return False
        self._ref_counts[index] = 1
        self._used_count += 1
        return True

    def set_unsafe(self, index: int, count: int) -> None:
        """Overwrite the stored count of ``index`` directly."""
        self._ref_counts[index] = count

    def rebuild_free_list(self) -> None:
        """Recompute the free list and used count from the stored counts."""
        self._free_indices = DVector()
        self._used_count = 0
        for index, n in enumerate(self._ref_counts):
            if n > 0:
                self._used_count += 1
            else:
                self._free_indices.append(index)

    def trim(self, max_index: int) -> None:
        """Cut the index space to ``max_index`` entries, all counted as used."""
        self._free_indices = DVector()
        self._ref_counts.resize(max_index)
        self._used_count = max_index

    def indices(self) -> Iterator[int]:
        """Yield every index in use, in increasing order."""
        for index, n in enumerate(self._ref_counts):
            if n > 0:
                yield index

    def mapped_indices(self, func: Callable[[int], Any]) -> Iterator[Any]:
        """Yield ``func(index)`` for every index in use."""
        return mapped(self.indices(), func)

    def filtered_indices(self, predicate: Callable[[int], bool]) -> Iterator[int]:
        """Yield the indices in use for which ``predicate`` is true."""
        return filtered(self.indices(), predicate)

    def usage_stats(self) -> str:
        """Short summary of sizes and free-list memory."""
        free_kb = self._free_indices.byte_count(_INT_SIZE) // 1024
        return (
            f"RefCountSize {len(self._ref_counts)}"
            f" FreeSize {len(self._free_indices)}"
            f" FreeMem {free_kb}kb"
        )