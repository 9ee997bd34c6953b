"""Block-allocated growable sequence."""

from __future__ import annotations

import operator
from itertools import chain, islice
from typing import Any, Callable, Iterable, Iterator


class DVector:
    """A growable sequence stored in fixed-size blocks.

    Storage grows one block at a time, so appending never moves existing
    elements. Slots that were never written hold ``0``.
    """

    BLOCK_SIZE = 2048
    _SHIFT = 11
    _MASK = BLOCK_SIZE - 1

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._blocks: list[list[Any]] = [self._new_block()]
        self._size = 0
        self.extend(items)

    @classmethod
    def _new_block(cls) -> list[Any]:
        return [0] * cls.BLOCK_SIZE

    def _normalize(self, index: int) -> int:
        index = operator.index(index)
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("DVector index out of range")
        return index

    def _put(self, index: int, value: Any) -> None:
        self._blocks[index >> self._SHIFT][index & self._MASK] = value

    def clear(self) -> None:
        """Remove all elements and release all but one block."""
        self._blocks = [self._new_block()]
        self._size = 0

    def fill(self, value: Any) -> None:
        """Set every allocated slot, used or not, to ``value``."""
        for block in self._blocks:
            block[:] = [value] * self.BLOCK_SIZE

    def resize(self, count: int, fill: Any = None) -> None:
        """Change the length to ``count``.

        New positions are set to ``fill`` when it is given; otherwise they
        keep whatever their slot last held.
        """
        if count < 0:
            raise ValueError("DVector size cannot be negative")
        if count == self._size:
            return
        needed = 1 + count // self.BLOCK_SIZE
        if needed > len(self._blocks):
            self._blocks.extend(
                self._new_block() for _ in range(needed - len(self._blocks))
            )
        else:
            del self._blocks[needed:]
        old_size = self._size
        self._size = count
        if fill is not None:
            for position in range(old_size, count):
                self._put(position, fill)

    def empty(self) -> bool:
        """Return True when the vector holds no elements."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def block_size(self) -> int:
        """Number of elements held by one block."""
        return self.BLOCK_SIZE

    def byte_count(self, item_size: int) -> int:
        """Bytes allocated for all blocks, given the size of one element."""
        return len(self._blocks) * self.BLOCK_SIZE * item_size

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        if self._size >> self._SHIFT == len(self._blocks):
            self._blocks.append(self._new_block())
        self._put(self._size, value)
        self._size += 1

    def extend(self, values: Iterable[Any]) -> None:
        """Append every element of ``values`` in order."""
        for value in values:
            self.append(value)

    def pop_back(self) -> None:
        """Drop the last element; does nothing when empty."""
        if self._size:
            self._size -= 1

    def insert_at(self, value: Any, index: int) -> None:
        """Store ``value`` at ``index``, growing the vector if needed."""
        if index < 0:
            raise IndexError("DVector index out of range")
        if index == self._size:
            self.append(value)
        elif index > self._size:
            self.resize(index)
            self.append(value)
        else:
            self[index] = value

    def front(self) -> Any:
        """Return the first element."""
        return self[0]

    def back(self) -> Any:
        """Return the last element."""
        return self[-1]

    def __getitem__(self, index: int) -> Any:
        index = self._normalize(index)
        return self._blocks[index >> self._SHIFT][index & self._MASK]

    def __setitem__(self, index: int, value: Any) -> None:
        self._put(self._normalize(index), value)

    def __iter__(self) -> Iterator[Any]:
        return islice(chain.from_iterable(self._blocks), self._size)

    def apply(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each element in order."""
        for value in self:
            func(value)

    def __repr__(self) -> str:
        return f"DVector({list(self)!r})"