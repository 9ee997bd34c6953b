"""Index identifiers and helpers for triangle vertex triples."""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Tuple, Union

INVALID_ID = -1
NON_MANIFOLD_ID = -2
MARKER_ID1 = -10
MARKER_ID2 = -11
MARKER_ID3 = -12
INVALID_GROUP_ID = 1 << 30

_Mapper = Union[Mapping[Any, Any], Sequence[Any]]


def same_pair_unordered(a0: Any, a1: Any, b0: Any, b1: Any) -> bool:
    """Return True when ``{a0, a1}`` and ``{b0, b1}`` are the same pair."""
    if a0 == b0:
        return a1 == b1
    return a0 == b1 and a1 == b0


def find_tri_index(a: Any, tri_verts: Sequence[Any]) -> int:
    """Position of ``a`` in the triple, or INVALID_ID."""
    for position in range(3):
        if tri_verts[position] == a:
            return position
    return INVALID_ID


def find_edge_index_in_tri(a: Any, b: Any, tri_verts: Sequence[Any]) -> int:
    """Index of the edge ``{a, b}`` in the triangle, or INVALID_ID."""
    for j in range(3):
        if same_pair_unordered(a, b, tri_verts[j], tri_verts[(j + 1) % 3]):
            return j
    return INVALID_ID


def find_tri_ordered_edge(a: Any, b: Any, tri_verts: Sequence[Any]) -> int:
    """Position of ``a`` where ``[a, b]`` appears in order (mod 3), or INVALID_ID."""
    for j in range(3):
        if tri_verts[j] == a and tri_verts[(j + 1) % 3] == b:
            return j
    return INVALID_ID


def find_tri_other_vtx(a: Any, b: Any, tri_verts: Sequence[Any]) -> Any:
    """The vertex opposite edge ``{a, b}``, or INVALID_ID."""
    for j in range(3):
        if same_pair_unordered(a, b, tri_verts[j], tri_verts[(j + 1) % 3]):
            return tri_verts[(j + 2) % 3]
    return INVALID_ID


def find_tri_other_vtx_in_array(
    a: Any, b: Any, tri_array: Sequence[Any], ti: int
) -> Any:
    """As :func:`find_tri_other_vtx` for triangle ``ti`` of a flat index array."""
    base = 3 * ti
    return find_tri_other_vtx(a, b, [tri_array[base + j] for j in range(3)])


def find_tri_other_index(a: Any, b: Any, tri_verts: Sequence[Any]) -> int:
    """Position of the vertex opposite edge ``{a, b}``, or INVALID_ID."""
    for j in range(3):
        if same_pair_unordered(a, b, tri_verts[j], tri_verts[(j + 1) % 3]):
            return (j + 2) % 3
    return INVALID_ID


def orient_tri_edge(
    a: Any, b: Any, tri_verts: Sequence[Any]
) -> Tuple[Any, Any, bool]:
    """Order ``a, b`` as they run in the triangle.

    Returns ``(a, b, swapped)``. Both vertices are assumed to be in the
    triangle; otherwise the result is meaningless.
    """
    for j in range(3):
        if a == tri_verts[j]:
            if tri_verts[(j + 2) % 3] == b:
                return b, a, True
            return a, b, False
    return a, b, False


def orient_tri_edge_and_find_other_vtx(
    a: Any, b: Any, tri_verts: Sequence[Any]
) -> Tuple[Any, Any, Any]:
    """Order edge ``{a, b}`` as in the triangle and find the third vertex.

    Returns ``(a, b, other)``; ``other`` is INVALID_ID and ``a, b`` are
    unchanged when the edge is not in the triangle.
    """
    for j in range(3):
        if same_pair_unordered(a, b, tri_verts[j], tri_verts[(j + 1) % 3]):
            return tri_verts[j], tri_verts[(j + 1) % 3], tri_verts[(j + 2) % 3]
    return a, b, INVALID_ID


def apply_map(v: Sequence[Any], mapper: _Mapper) -> Tuple[Any, Any, Any]:
    """Return the triple ``(mapper[v[0]], mapper[v[1]], mapper[v[2]])``."""
    return tuple(mapper[v[j]] for j in range(3))  # type: ignore[return-value]