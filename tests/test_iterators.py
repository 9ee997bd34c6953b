from itertools import count, islice
from operator import itemgetter

import pytest

from robocar.iterators import expand, filtered, mapped


def test_mapped_applies_function():
    pairs = [(1, "a"), (2, "b"), (3, "c")]
    assert list(mapped(pairs, itemgetter(1))) == ["a", "b", "c"]


def test_mapped_is_lazy():
    result = mapped(count(), lambda x: (x, x))
    assert list(islice(result, 2)) == [(0, 0), (1, 1)]


def test_mapped_empty():
    assert list(mapped([], str)) == []


def test_filtered_keeps_matching():
    assert list(filtered([1, 2, 3, 4], lambda x: x % 2 == 0)) == [2, 4]


def test_filtered_skips_leading_rejects():
    assert list(filtered([0, 0, 5], bool)) == [5]


def test_filtered_none_match():
    assert list(filtered(["a", "b"], lambda s: False)) == []


def _twice(item, state):
    if state == -1:
        return item, 0
    if state == 0:
        return item, 1
    return None, -1


def test_expand_emits_multiple_per_item():
    assert list(expand(["a", "b"], _twice)) == ["a", "a", "b", "b"]


def test_expand_can_skip_items():
    def only_truthy(item, state):
        if state == -1 and item:
            return item, 0
        return None, -1

    assert list(expand([0, "x", 0, "y"], only_truthy)) == ["x", "y"]


def test_expand_state_sequence():
    states = []

    def record(item, state):
        states.append(state)
        return _twice(item, state)

    result = list(expand(["q"], record))
    assert result == ["q", "q"]
    assert states == [-1, 0, 1]


def test_expand_propagates_errors():
    def boom(item, state):
        raise KeyError(item)

    with pytest.raises(KeyError):
        list(expand(["k"], boom))