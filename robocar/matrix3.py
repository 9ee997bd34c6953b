"""3x3 matrix of floats stored by rows."""

from __future__ import annotations

import math
import sys
from numbers import Real
from typing import Any, Iterator, List, Sequence, Tuple, Union

Vector3 = Tuple[float, float, float]
MACHINE_EPSILON = sys.float_info.epsilon


def _vec3(value: Sequence[float]) -> Vector3:
    items = tuple(float(x) for x in value)
    if len(items) != 3:
        raise ValueError("a 3-component vector is required")
    return items  # type: ignore[return-value]


class Matrix3:
    """A 3x3 matrix.

    Built from nothing (identity), one number (every element), nine
    numbers or a flat sequence of nine (row by row), three rows, or another
    matrix. ``m * v`` multiplies a column vector, ``v * m`` a row vector.
    ``a * b`` yields the matrix whose action on a column vector is ``a``
    followed by ``b``.
    """

    __slots__ = ("_rows",)

    def __init__(self, *args: Any) -> None:
        if not args:
            rows: List[List[Any]] = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
        elif len(args) == 9:
            rows = [list(args[0:3]), list(args[3:6]), list(args[6:9])]
        elif len(args) == 1:
            (arg,) = args
            if isinstance(arg, Matrix3):
                rows = [list(r) for r in arg._rows]
            elif isinstance(arg, Real):
                rows = [[arg] * 3 for _ in range(3)]
            else:
                items = list(arg)
                if len(items) == 9 and all(isinstance(x, Real) for x in items):
                    rows = [items[0:3], items[3:6], items[6:9]]
                elif len(items) == 3:
                    rows = [list(_vec3(r)) for r in items]
                else:
                    raise ValueError("expected 9 values or 3 rows of 3")
        else:
            raise TypeError("Matrix3 takes 0, 1 or 9 arguments")
        self._rows = [[float(x) for x in r] for r in rows]

    def __getitem__(self, index: Union[int, Tuple[int, int]]) -> Any:
        if isinstance(index, tuple):
            i, j = index
            return self._rows[i][j]
        return tuple(self._rows[index])

    def __setitem__(self, index: Union[int, Tuple[int, int]], row: Any) -> None:
        if isinstance(index, tuple):
            i, j = index
            self._rows[i][j] = float(row)
        else:
            self._rows[index] = list(_vec3(row))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[Vector3]:
        return (tuple(r) for r in self._rows)  # type: ignore[misc]

    def data(self) -> Tuple[float, ...]:
        """All nine elements, row by row."""
        return tuple(x for r in self._rows for x in r)

    def column(self, i: int) -> Vector3:
        """Column ``i`` as a vector."""
        if not 0 <= i < 3:
            raise IndexError("column index out of range")
        return tuple(r[i] for r in self._rows)  # type: ignore[return-value]

    def row(self, i: int) -> Vector3:
        """Row ``i`` as a vector."""
        if not 0 <= i < 3:
            raise IndexError("row index out of range")
        return tuple(self._rows[i])  # type: ignore[return-value]

    def _map(self, func: Any) -> "Matrix3":
        return Matrix3([[func(x) for x in r] for r in self._rows])

    def __add__(self, other: Any) -> "Matrix3":
        if isinstance(other, Matrix3):
            return Matrix3(
                [[a + b for a, b in zip(r, o)] for r, o in zip(self._rows, other._rows)]
            )
        if isinstance(other, Real):
            return self._map(lambda x: x + other)
        return NotImplemented

    def __sub__(self, other: Any) -> "Matrix3":
        if isinstance(other, Matrix3):
            return Matrix3(
                [[a - b for a, b in zip(r, o)] for r, o in zip(self._rows, other._rows)]
            )
        if isinstance(other, Real):
            return self._map(lambda x: x - other)
        return NotImplemented

    def __neg__(self) -> "Matrix3":
        return self._map(lambda x: -x)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Matrix3):
            columns = list(zip(*self._rows))
            return Matrix3(
                [
                    [sum(a * b for a, b in zip(orow, col)) for col in columns]
                    for orow in other._rows
                ]
            )
        if isinstance(other, Real):
            return self._map(lambda x: x * other)
        try:
            vector = _vec3(other)
        except (TypeError, ValueError):
            return NotImplemented
        return tuple(sum(a * b for a, b in zip(r, vector)) for r in self._rows)

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, Real):
            return self._map(lambda x: x * other)
        try:
            vector = _vec3(other)
        except (TypeError, ValueError):
            return NotImplemented
        return tuple(sum(a * b for a, b in zip(col, vector)) for col in zip(*self._rows))

    def __truediv__(self, other: Any) -> "Matrix3":
        if isinstance(other, Real):
            return self._map(lambda x: x / other)
        return NotImplemented

    def determinant_of_minor(self, row: int, column: int) -> float:
        """Determinant of the 2x2 minor left after removing ``row`` and ``column``."""
        x1 = 1 if column == 0 else 0
        x2 = 1 if column == 2 else 2
        y1 = 1 if row == 0 else 0
        y2 = 1 if row == 2 else 2
        m = self._rows
        return m[y1][x1] * m[y2][x2] - m[y1][x2] * m[y2][x1]

    def determinant(self) -> float:
        m = self._rows
        return (
            m[0][0] * self.determinant_of_minor(0, 0)
            - m[1][0] * self.determinant_of_minor(1, 0)
            + m[2][0] * self.determinant_of_minor(2, 0)
        )

    def inverse(self) -> "Matrix3":
        """Inverse matrix; raises ValueError for a singular matrix."""
        det = self.determinant()
        if abs(det) <= MACHINE_EPSILON:
            raise ValueError("matrix is singular")
        (m00, m01, m02), (m10, m11, m12), (m20, m21, m22) = self._rows
        adjugate = Matrix3(
            m11 * m22 - m21 * m12,
            -(m01 * m22 - m21 * m02),
            m01 * m12 - m02 * m11,
            -(m10 * m22 - m20 * m12),
            m00 * m22 - m20 * m02,
            -(m00 * m12 - m10 * m02),
            m10 * m21 - m20 * m11,
            -(m00 * m21 - m20 * m01),
            m00 * m11 - m01 * m10,
        )
        return (1.0 / det) * adjugate

    def transpose(self) -> "Matrix3":
        return Matrix3([list(c) for c in zip(*self._rows)])

    def absolute(self) -> "Matrix3":
        """Matrix of the absolute values of the elements."""
        return self._map(abs)

    def trace(self) -> float:
        return self._rows[0][0] + self._rows[1][1] + self._rows[2][2]

    def ortho_normalized(self) -> "Matrix3":
        """Copy with every row scaled to unit length."""
        rows = []
        for r in self._rows:
            length = math.sqrt(sum(x * x for x in r))
            if length == 0.0:
                raise ValueError("cannot normalize a zero row")
            rows.append([x / length for x in r])
        return Matrix3(rows)

    def __str__(self) -> str:
        return "".join(
            "|\t" + "".join(f"{x:g}\t" for x in r) + "|\n" for r in self._rows
        )

    def __repr__(self) -> str:
        return f"Matrix3({[list(r) for r in self._rows]!r})"


def identity() -> Matrix3:
    """The multiplicative identity."""
    return Matrix3()


def zeros() -> Matrix3:
    """The additive identity."""
    return Matrix3(0.0)


def outer(lhs: Sequence[float], rhs: Sequence[float]) -> Matrix3:
    """Outer product: element ``(i, j)`` is ``lhs[i] * rhs[j]``."""
    a, b = _vec3(lhs), _vec3(rhs)
    return Matrix3([[x * y for y in b] for x in a])