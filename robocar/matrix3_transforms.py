"""Factories for 3x3 transform matrices and helpers that compose them."""

from __future__ import annotations

import math
from numbers import Real
from typing import Sequence, Tuple, Union

from robocar.matrix3 import MACHINE_EPSILON, Matrix3, identity

Vector3 = Tuple[float, float, float]
Quaternion = Sequence[float]


def _vec(value: Sequence[float]) -> Vector3:
    items = tuple(float(x) for x in value)
    if len(items) != 3:
        raise ValueError("a 3-component vector is required")
    return items  # type: ignore[return-value]


def _sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(a: Vector3, k: float) -> Vector3:
    return (a[0] * k, a[1] * k, a[2] * k)


def _dot(a: Vector3, b: Vector3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalized(a: Vector3) -> Vector3:
    length = math.sqrt(_dot(a, a))
    if length == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return _scale(a, 1.0 / length)


def _outer_plus_identity(factor: float, n: Vector3) -> Matrix3:
    """Matrix ``I + factor * n n^T``."""
    return Matrix3(
        [
            [(1.0 if i == j else 0.0) + factor * n[i] * n[j] for j in range(3)]
            for i in range(3)
        ]
    )


def _quaternion(quaternion: Quaternion) -> Tuple[float, float, float, float]:
    items = tuple(float(x) for x in quaternion)
    if len(items) != 4:
        raise ValueError("a quaternion is given as (w, x, y, z)")
    return items  # type: ignore[return-value]


def create_scale(
    x: Union[float, Sequence[float]],
    y: float | None = None,
    z: float | None = None,
) -> Matrix3:
    """Diagonal scaling matrix.

    ``create_scale(k)`` scales uniformly, ``create_scale((x, y, z))`` and
    ``create_scale(x, y, z)`` scale each axis separately.
    """
    if y is None and z is None:
        if isinstance(x, Real):
            sx = sy = sz = float(x)
        else:
            sx, sy, sz = _vec(x)
    elif y is not None and z is not None and isinstance(x, Real):
        sx, sy, sz = float(x), float(y), float(z)
    else:
        raise TypeError("create_scale takes one factor, one vector or three factors")
    return Matrix3(sx, 0.0, 0.0, 0.0, sy, 0.0, 0.0, 0.0, sz)


def create_scale_around_axis(axis: Sequence[float], scale: float) -> Matrix3:
    """Matrix scaling by ``scale`` along ``axis`` and leaving its normal plane."""
    return _outer_plus_identity(scale - 1.0, _vec(axis))


def create_lorentz_boost(velocity: Sequence[float], light_speed: float) -> Matrix3:
    """Spatial part of a Lorentz boost for ``velocity``.

    The factor applied along the direction of motion is
    ``sqrt(1 - v^2 / c^2)``.
    """
    vel = _vec(velocity)
    v = math.sqrt(_dot(vel, vel))
    if v == 0.0:
        raise ValueError("velocity must be non-zero")
    ratio = 1.0 - (v * v) / (light_speed * light_speed)
    if ratio < 0.0:
        raise ValueError("speed exceeds the light speed")
    gamma = math.sqrt(ratio)
    return _outer_plus_identity(gamma - 1.0, _scale(vel, 1.0 / v))


def create_lorentz_boost_gamma(gamma: float, direction: Sequence[float]) -> Matrix3:
    """Boost matrix ``I + (gamma - 1) n n^T`` for a given factor and direction."""
    return _outer_plus_identity(gamma - 1.0, _vec(direction))


def create_translation(x: float, y: float, z: float = 1.0) -> Matrix3:
    """2D homogeneous translation: identity with the last row ``(x, y, z)``."""
    m = identity()
    m[2] = (x, y, z)
    return m


def create_rotation_euler(roll: float, pitch: float, yaw: float) -> Matrix3:
    """Rotation from roll, pitch and yaw angles in radians."""
    sr, sp, sy = math.sin(roll), math.sin(pitch), math.sin(yaw)
    cr, cp, cy = math.cos(roll), math.cos(pitch), math.cos(yaw)
    return Matrix3(
        cp * cy,
        cp * sy,
        sp,
        sr * sp * cy - cr * sy,
        sr * sp * sy + cr * cy,
        -sr * cp,
        -(cr * sp * cy + sr * sy),
        cy * sr - cr * sp * sy,
        cr * cp,
    )


def create_rotation_axis(axis: Sequence[float], angle: float) -> Matrix3:
    """Rotation by ``angle`` radians about the unit vector ``axis``."""
    x, y, z = _vec(axis)
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    return Matrix3(
        c + t * x * x,
        t * x * y + z * s,
        t * x * z - y * s,
        t * x * y - z * s,
        c + t * y * y,
        t * y * z + x * s,
        t * x * z + y * s,
        t * y * z - x * s,
        c + t * z * z,
    )


def create_rotation(quaternion: Quaternion) -> Matrix3:
    """Rotation matrix of a unit quaternion given as ``(w, x, y, z)``."""
    w, x, y, z = _quaternion(quaternion)
    d1, d2, d3 = 2.0 * x * x, 2.0 * y * y, 2.0 * z * z
    w2 = 2.0 * w
    d4, d5, d6 = x * w2, y * w2, z * w2
    d7, d8, d9 = 2.0 * x * y, 2.0 * x * z, 2.0 * y * z
    return Matrix3(
        1.0 - d2 - d3,
        d7 + d6,
        d8 - d5,
        d7 - d6,
        1.0 - d1 - d3,
        d9 + d4,
        d8 + d5,
        d9 - d4,
        1.0 - d1 - d2,
    )


def skew_symmetric(vector: Sequence[float]) -> Matrix3:
    """Matrix ``S`` such that ``S * w`` is the cross product ``vector x w``."""
    x, y, z = _vec(vector)
    return Matrix3(0.0, -z, y, z, 0.0, -x, -y, x, 0.0)


def _look_at(z_axis: Vector3, up: Vector3) -> Matrix3:
    if all(abs(c) < MACHINE_EPSILON for c in z_axis):
        return identity()
    z_axis = _normalized(z_axis)
    x_axis = _normalized(_cross(up, z_axis))
    y_axis = _cross(z_axis, x_axis)
    return Matrix3([list(c) for c in zip(x_axis, y_axis, z_axis)])


def look_at_lh(
    eye: Sequence[float], target: Sequence[float], up: Sequence[float]
) -> Matrix3:
    """Left-handed look-at rotation; its columns are the camera axes."""
    return _look_at(_sub(_vec(target), _vec(eye)), _vec(up))


def look_at_rh(
    eye: Sequence[float], target: Sequence[float], up: Sequence[float]
) -> Matrix3:
    """Right-handed look-at rotation; its columns are the camera axes."""
    return _look_at(_sub(_vec(eye), _vec(target)), _vec(up))


def _billboard(
    difference: Vector3, camera_up: Sequence[float], camera_forward: Sequence[float]
) -> Matrix3:
    length_sq = _dot(difference, difference)
    if abs(length_sq) < MACHINE_EPSILON:
        difference = _scale(_vec(camera_forward), -1.0)
    else:
        difference = _scale(difference, 1.0 / math.sqrt(length_sq))
    crossed = _normalized(_cross(_vec(camera_up), difference))
    final = _cross(difference, crossed)
    return Matrix3([list(crossed), list(final), list(difference)])


def billboard_lh(
    object_position: Sequence[float],
    camera_position: Sequence[float],
    camera_up: Sequence[float],
    camera_forward: Sequence[float],
) -> Matrix3:
    """Left-handed spherical billboard rotating around ``object_position``."""
    difference = _sub(_vec(camera_position), _vec(object_position))
    return _billboard(difference, camera_up, camera_forward)


def billboard_rh(
    object_position: Sequence[float],
    camera_position: Sequence[float],
    camera_up: Sequence[float],
    camera_forward: Sequence[float],
) -> Matrix3:
    """Right-handed spherical billboard rotating around ``object_position``."""
    difference = _sub(_vec(object_position), _vec(camera_position))
    return _billboard(difference, camera_up, camera_forward)


def apply_scale(matrix: Matrix3, x: float, y: float, z: float) -> Matrix3:
    """``matrix`` composed with a per-axis scale."""
    return matrix * create_scale(x, y, z)


def apply_translation(matrix: Matrix3, x: float, y: float) -> Matrix3:
    """``matrix`` composed with a 2D homogeneous translation."""
    return matrix * create_translation(x, y)


def apply_rotation_axis(
    matrix: Matrix3, angle: float, axis: Sequence[float]
) -> Matrix3:
    """``matrix`` composed with a rotation about ``axis``."""
    return matrix * create_rotation_axis(axis, angle)


def apply_rotation(matrix: Matrix3, quaternion: Quaternion) -> Matrix3:
    """``matrix`` composed with the rotation of ``quaternion``."""
    return matrix * create_rotation(quaternion)