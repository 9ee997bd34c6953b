"""A pooled store of many small integer lists."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Tuple

NULL = -1
BLOCKSIZE = 8
BLOCK_LIST_OFFSET = BLOCKSIZE + 1
_INT_SIZE = 4


class SmallListSet:
    """Many variable-size integer lists packed into a few flat buffers.

    Each list owns a block ``[count, item0 .. item7, link]`` in a shared
    block store. Items past the first eight spill into a singly linked list
    kept in a second flat buffer, with new items pushed at its head. Freed
    blocks and link nodes are pooled and reused.
    """

    def __init__(self) -> None:
        self._list_heads: list[int] = []
        self._block_store: list[int] = []
        self._free_blocks: list[int] = []
        self._allocated_count = 0
        self._linked_store: list[int] = []
        self._free_head_ptr = NULL

    def __len__(self) -> int:
        return len(self._list_heads)

    def resize(self, new_size: int) -> None:
        """Grow the number of list slots to ``new_size``; never shrinks."""
        if new_size > len(self._list_heads):
            self._list_heads.extend([NULL] * (new_size - len(self._list_heads)))

    def allocate_at(self, list_index: int) -> None:
        """Make an empty list slot at ``list_index``."""
        if list_index >= len(self._list_heads):
            self.resize(list_index + 1)
        elif self._list_heads[list_index] != NULL:
            raise ValueError(f"list at {list_index} is not empty")

    def insert(self, list_index: int, val: int) -> None:
        """Add ``val`` to the list at ``list_index``."""
        block_ptr = self._list_heads[list_index]
        if block_ptr == NULL:
            block_ptr = self._allocate_block()
            self._block_store[block_ptr] = 0
            self._list_heads[list_index] = block_ptr

        store = self._block_store
        n = store[block_ptr]
        if n < BLOCKSIZE:
            store[block_ptr + n + 1] = val
        else:
            cur_head = store[block_ptr + BLOCK_LIST_OFFSET]
            if self._free_head_ptr == NULL:
                new_ptr = len(self._linked_store)
                self._linked_store.extend((val, cur_head))
            else:
                new_ptr = self._free_head_ptr
                self._free_head_ptr = self._linked_store[new_ptr + 1]
                self._linked_store[new_ptr] = val
                self._linked_store[new_ptr + 1] = cur_head
            store[block_ptr + BLOCK_LIST_OFFSET] = new_ptr
        store[block_ptr] += 1

    def remove(self, list_index: int, val: int) -> bool:
        """Remove one ``val`` from the list; False if it was not there."""
        block_ptr = self._list_heads[list_index]
        if block_ptr == NULL:
            return False
        store = self._block_store
        n = store[block_ptr]
        end = block_ptr + min(n, BLOCKSIZE)
        for i in range(block_ptr + 1, end + 1):
            if store[i] != val:
                continue
            store[i:end] = store[i + 1 : end + 1]
            if n > BLOCKSIZE:
                cur_ptr = store[block_ptr + BLOCK_LIST_OFFSET]
                store[block_ptr + BLOCK_LIST_OFFSET] = self._linked_store[cur_ptr + 1]
                store[end] = self._linked_store[cur_ptr]
                self._add_free_link(cur_ptr)
            store[block_ptr] -= 1
            return True

        if n > BLOCKSIZE and self._remove_from_linked_list(block_ptr, val):
            store[block_ptr] -= 1
            return True
        return False

    def move(self, from_index: int, to_index: int) -> None:
        """Move the list at ``from_index`` to the empty slot ``to_index``."""
        if self._list_heads[to_index] != NULL:
            raise ValueError(f"list at {to_index} is not empty")
        if self._list_heads[from_index] == NULL:
            raise ValueError(f"no list at {from_index}")
        self._list_heads[to_index] = self._list_heads[from_index]
        self._list_heads[from_index] = NULL

    def clear(self, list_index: int) -> None:
        """Remove every element of the list at ``list_index``."""
        block_ptr = self._list_heads[list_index]
        if block_ptr == NULL:
            return
        store = self._block_store
        if store[block_ptr] > BLOCKSIZE:
            cur_ptr = store[block_ptr + BLOCK_LIST_OFFSET]
            while cur_ptr != NULL:
                free_ptr = cur_ptr
                cur_ptr = self._linked_store[cur_ptr + 1]
                self._add_free_link(free_ptr)
            store[block_ptr + BLOCK_LIST_OFFSET] = NULL
        store[block_ptr] = 0
        self._free_blocks.append(block_ptr)
        self._list_heads[list_index] = NULL

    def count(self, list_index: int) -> int:
        """Number of elements in the list at ``list_index``."""
        block_ptr = self._list_heads[list_index]
        return 0 if block_ptr == NULL else self._block_store[block_ptr]

    def contains(self, list_index: int, val: int) -> bool:
        """Return True when ``val`` is in the list at ``list_index``."""
        return any(store[pos] == val for store, pos in self._slots(list_index))

    def first(self, list_index: int) -> int:
        """First element of the list at ``list_index``."""
        if self.count(list_index) == 0:
            raise IndexError(f"list at {list_index} is empty")
        return self._block_store[self._list_heads[list_index] + 1]

    def values(
        self, list_index: int, map_func: Optional[Callable[[int], int]] = None
    ) -> Iterator[int]:
        """Yield the list's elements, passed through ``map_func`` if given."""
        for store, pos in self._slots(list_index):
            value = store[pos]
            yield value if map_func is None else map_func(value)

    def find(
        self,
        list_index: int,
        predicate: Callable[[int], bool],
        invalid_value: int = -1,
    ) -> int:
        """First element satisfying ``predicate``, else ``invalid_value``."""
        for store, pos in self._slots(list_index):
            if predicate(store[pos]):
                return store[pos]
        return invalid_value

    def replace(
        self, list_index: int, predicate: Callable[[int], bool], new_value: int
    ) -> bool:
        """Replace the first element satisfying ``predicate``; False if none."""
        for store, pos in self._slots(list_index):
            if predicate(store[pos]):
                store[pos] = new_value
                return True
        return False

    def memory_usage(self) -> str:
        """Short summary of sizes and memory held by the buffers."""
        return (
            f"ListSize {len(self._list_heads)}"
            f"  Blocks Count {self._allocated_count}"
            f" Free {len(self._free_blocks) * _INT_SIZE // 1024}"
            f" Mem {len(self._block_store)}"
            f"kb  Linked Mem {len(self._linked_store) * _INT_SIZE // 1024}kb"
        )

    def _slots(self, list_index: int) -> Iterator[Tuple[list[int], int]]:
        """Yield ``(buffer, position)`` for each element, in list order."""
        block_ptr = self._list_heads[list_index]
        if block_ptr == NULL:
            return
        store = self._block_store
        n = store[block_ptr]
        for pos in range(block_ptr + 1, block_ptr + min(n, BLOCKSIZE) + 1):
            yield store, pos
        if n < BLOCKSIZE:
            return
        cur_ptr = store[block_ptr + BLOCK_LIST_OFFSET]
        while cur_ptr != NULL:
            yield self._linked_store, cur_ptr
            cur_ptr = self._linked_store[cur_ptr + 1]

    def _allocate_block(self) -> int:
        if self._free_blocks:
            return self._free_blocks.pop()
        ptr = len(self._block_store)
        self._block_store.extend([0] * BLOCK_LIST_OFFSET + [NULL])
        self._allocated_count += 1
        return ptr

    def _add_free_link(self, ptr: int) -> None:
        self._linked_store[ptr + 1] = self._free_head_ptr
        self._free_head_ptr = ptr

    def _remove_from_linked_list(self, block_ptr: int, val: int) -> bool:
        linked = self._linked_store
        cur_ptr = self._block_store[block_ptr + BLOCK_LIST_OFFSET]
        prev_ptr = NULL
        while cur_ptr != NULL:
            if linked[cur_ptr] == val:
                next_ptr = linked[cur_ptr + 1]
                if prev_ptr == NULL:
                    self._block_store[block_ptr + BLOCK_LIST_OFFSET] = next_ptr
                else:
                    linked[prev_ptr + 1] = next_ptr
                self._add_free_link(cur_ptr)
                return True
            prev_ptr = cur_ptr
            cur_ptr = linked[cur_ptr + 1]
        return False