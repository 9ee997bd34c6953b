"""Euler angles, Jacobi diagonalization and Gram-Schmidt frames for 3x3 matrices."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from robocar.matrix3 import MACHINE_EPSILON, Matrix3

Vector3 = Tuple[float, float, float]


def _cross(a: Sequence[float], b: Sequence[float]) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalized(a: Sequence[float]) -> Vector3:
    length = math.sqrt(sum(x * x for x in a))
    if length == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return (a[0] / length, a[1] / length, a[2] / length)


def euler_angles(matrix: Matrix3) -> Vector3:
    """Rotation angles ``(x, y, z)`` in radians extracted from ``matrix``."""
    row0, row1, row2 = matrix.row(0), matrix.row(1), matrix.row(2)
    rot_x = math.atan2(-row1[2], row2[2])
    cos_y = math.sqrt(row0[0] ** 2 + row0[1] ** 2)
    rot_y = math.atan2(row0[2], cos_y)
    sin_x, cos_x = math.sin(rot_x), math.cos(rot_x)
    rot_z = math.atan2(
        cos_x * row1[0] + sin_x * row2[0],
        cos_x * row1[1] + sin_x * row2[1],
    )
    return (rot_x, rot_y, rot_z)


def diagonalize(
    matrix: Matrix3, threshold: float, max_steps: int
) -> Tuple[Matrix3, Matrix3]:
    """Diagonalize a symmetric matrix by Jacobi rotations.

    Returns ``(rotation, diagonal)`` where ``diagonal = R^T A R`` with
    ``R`` the rotation. The input matrix is left unchanged. Iteration stops
    after ``max_steps`` rotations, or once the largest off-diagonal element
    falls below ``threshold`` times the sum of the absolute diagonal.
    """
    m = [list(r) for r in matrix]
    rot = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]

    for _ in range(max_steps):
        p, q, r = 0, 1, 2
        largest = abs(m[0][1])
        v = abs(m[0][2])
        if v > largest:
            q, r, largest = 2, 1, v
        v = abs(m[1][2])
        if v > largest:
            p, q, r, largest = 1, 2, 0, v

        t = threshold * (abs(m[0][0]) + abs(m[1][1]) + abs(m[2][2]))
        last = False
        if largest <= t:
            if largest <= MACHINE_EPSILON * t:
                break
            last = True

        mpq = m[p][q]
        theta = (m[q][q] - m[p][p]) / (2.0 * mpq)
        theta2 = theta * theta
        if theta2 * theta2 < 10.0 / MACHINE_EPSILON:
            root = math.sqrt(1.0 + theta2)
            t = 1.0 / (theta + root) if theta >= 0 else 1.0 / (theta - root)
            cos = 1.0 / math.sqrt(1.0 + t * t)
        else:
            t = 1.0 / (theta * (2.0 + 0.5 / theta2))
            cos = 1.0 - 0.5 * t * t
        sin = cos * t

        m[p][q] = m[q][p] = 0.0
        m[p][p] -= t * mpq
        m[q][q] += t * mpq
        mrp, mrq = m[r][p], m[r][q]
        m[r][p] = m[p][r] = cos * mrp - sin * mrq
        m[r][q] = m[q][r] = cos * mrq + sin * mrp

        for row in rot:
            mrp, mrq = row[p], row[q]
            row[p] = cos * mrp - sin * mrq
            row[q] = cos * mrq + sin * mrp

        if last:
            break

    return Matrix3(rot), Matrix3(m)


def gram_schmidt(direction: Sequence[float]) -> Matrix3:
    """Orthonormal frame with rows ``(front, up, right)``; front follows ``direction``."""
    values = tuple(float(x) for x in direction)
    if len(values) != 3:
        raise ValueError("a 3-component vector is required")
    front = _normalized(values)
    if abs(front[2]) > 0.5 + 0.001:
        helper = (-front[1], front[2], 0.0)
    else:
        helper = (-front[1], front[0], 0.0)
    right = _normalized(_cross(front, helper))
    up = _cross(right, front)
    return Matrix3([list(front), list(up), list(right)])