"""Lazy helpers for mapping, filtering and expanding iterables."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Tuple


def mapped(iterable: Iterable[Any], func: Callable[[Any], Any]) -> Iterator[Any]:
    """Yield ``func(item)`` for each item."""
    for item in iterable:
        yield func(item)


def filtered(
    iterable: Iterable[Any], predicate: Callable[[Any], bool]
) -> Iterator[Any]:
    """Yield only the items for which ``predicate`` is true."""
    for item in iterable:
        if predicate(item):
            yield item


def expand(
    iterable: Iterable[Any], func: Callable[[Any, int], Tuple[Any, int]]
) -> Iterator[Any]:
    """Yield any number of outputs for each input item.

    ``func(item, state)`` returns ``(output, new_state)``. The state is -1
    when an item is first seen. Returning a new state of -1 finishes the
    item and discards that output; any other state yields the output and
    calls ``func`` again with that state.
    """
    state = -1
    for item in iterable:
        while True:
            output, state = func(item, state)
            if state == -1:
                break
            yield output