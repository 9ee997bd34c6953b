import math

import pytest

from robocar.matrix3 import Matrix3, identity
from robocar.matrix3_transforms import (
    apply_rotation,
    apply_rotation_axis,
    apply_scale,
    apply_translation,
    billboard_lh,
    billboard_rh,
    create_lorentz_boost,
    create_lorentz_boost_gamma,
    create_rotation,
    create_rotation_axis,
    create_rotation_euler,
    create_scale,
    create_scale_around_axis,
    create_translation,
    look_at_lh,
    look_at_rh,
    skew_symmetric,
)


def assert_matrix_close(a, b):
    assert a.data() == pytest.approx(b.data(), abs=1e-9)


def assert_orthonormal(m):
    assert_matrix_close(m * m.transpose(), identity())


def test_create_scale_per_axis():
    m = create_scale(2, 3, 4)
    assert m * (1, 1, 1) == (2.0, 3.0, 4.0)
    assert m == create_scale((2, 3, 4))


def test_create_scale_uniform():
    assert create_scale(2) == Matrix3(2, 0, 0, 0, 2, 0, 0, 0, 2)


def test_create_scale_bad_arguments():
    with pytest.raises(TypeError):
        create_scale(1, 2)


def test_scale_around_axis():
    m = create_scale_around_axis((1, 0, 0), 3)
    assert (1, 0, 0) * m == pytest.approx((3.0, 0.0, 0.0))
    assert (0, 1, 0) * m == pytest.approx((0.0, 1.0, 0.0))
    assert m == m.transpose()


def test_scale_around_axis_of_one_is_identity():
    assert create_scale_around_axis((0, 0.6, 0.8), 1.0) == identity()


def test_lorentz_boost_gamma_one_is_identity():
    assert create_lorentz_boost_gamma(1.0, (0, 1, 0)) == identity()


def test_lorentz_boost_along_x():
    m = create_lorentz_boost((0.6, 0, 0), 1.0)
    assert m[0, 0] == pytest.approx(0.8)
    assert m[1, 1] == pytest.approx(1.0)
    assert m == m.transpose()


def test_lorentz_boost_matches_gamma_form():
    m = create_lorentz_boost((0, 0, 0.6), 1.0)
    assert_matrix_close(m, create_lorentz_boost_gamma(m[2, 2], (0, 0, 1)))


def test_lorentz_boost_errors():
    with pytest.raises(ValueError):
        create_lorentz_boost((0, 0, 0), 1.0)
    with pytest.raises(ValueError):
        create_lorentz_boost((2, 0, 0), 1.0)


def test_translation_moves_row_vector():
    t = create_translation(5, 7)
    assert t.row(2) == (5.0, 7.0, 1.0)
    assert (2, 3, 1) * t == (2 + 5, 3 + 7, 1)


@pytest.mark.parametrize("angles", [(0.1, 0.2, 0.3), (1.0, -0.5, 2.5), (3.0, 1.2, -0.7)])
def test_euler_rotation_is_orthonormal(angles):
    m = create_rotation_euler(*angles)
    assert_orthonormal(m)
    assert m.determinant() == pytest.approx(1.0)


def test_euler_rotation_zero_is_identity():
    assert_matrix_close(create_rotation_euler(0, 0, 0), identity())


def test_rotation_axis_preserves_axis():
    axis = (0.0, 0.6, 0.8)
    m = create_rotation_axis(axis, 1.1)
    assert axis * m == pytest.approx(axis)
    assert_orthonormal(m)
    assert m.determinant() == pytest.approx(1.0)


def test_rotation_axis_quarter_turn_about_z():
    m = create_rotation_axis((0, 0, 1), math.pi / 2)
    assert (1, 0, 0) * m == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


@pytest.mark.parametrize("angle", [0.3, 1.7, -2.2])
def test_quaternion_matches_axis_rotation(angle):
    axis = (0.48, 0.6, 0.64)
    s = math.sin(angle / 2)
    q = (math.cos(angle / 2), axis[0] * s, axis[1] * s, axis[2] * s)
    assert_matrix_close(create_rotation(q), create_rotation_axis(axis, angle))


def test_identity_quaternion():
    assert create_rotation((1, 0, 0, 0)) == identity()


def test_quaternion_wrong_length():
    with pytest.raises(ValueError):
        create_rotation((1, 0, 0))


def test_skew_symmetric():
    a = (1.0, 2.0, 3.0)
    s = skew_symmetric(a)
    assert s * a == pytest.approx((0.0, 0.0, 0.0))
    assert s.transpose() == -s
    assert skew_symmetric((1, 0, 0)) * (0, 1, 0) == (0.0, 0.0, 1.0)


def test_look_at_rh_axes():
    eye, target = (1.0, 2.0, 5.0), (0.0, 0.0, 0.0)
    m = look_at_rh(eye, target, (0, 1, 0))
    assert_orthonormal(m)
    norm = math.sqrt(sum(c * c for c in eye))
    assert m.column(2) == pytest.approx(tuple(c / norm for c in eye))


def test_look_at_rh_down_z_is_identity():
    assert_matrix_close(look_at_rh((0, 0, 5), (0, 0, 0), (0, 1, 0)), identity())


def test_look_at_lh_points_to_target():
    m = look_at_lh((0, 0, 0), (3, 0, 4), (0, 1, 0))
    assert_orthonormal(m)
    assert m.column(2) == pytest.approx((0.6, 0.0, 0.8))


def test_look_at_same_point_is_identity():
    assert look_at_lh((1, 1, 1), (1, 1, 1), (0, 1, 0)) == identity()
    assert look_at_rh((1, 1, 1), (1, 1, 1), (0, 1, 0)) == identity()


def test_look_at_parallel_up_raises():
    with pytest.raises(ValueError):
        look_at_rh((0, 5, 0), (0, 0, 0), (0, 1, 0))


def test_billboard_rows():
    lh = billboard_lh((0, 0, 0), (0, 0, 5), (0, 1, 0), (0, 0, -1))
    rh = billboard_rh((0, 0, 0), (0, 0, 5), (0, 1, 0), (0, 0, -1))
    assert_orthonormal(lh)
    assert_orthonormal(rh)
    assert lh.row(2) == pytest.approx((0.0, 0.0, 1.0))
    assert rh.row(2) == pytest.approx((0.0, 0.0, -1.0))


def test_billboard_coincident_uses_forward():
    m = billboard_rh((1, 2, 3), (1, 2, 3), (0, 1, 0), (0, 0, -1))
    assert m.row(2) == pytest.approx((0.0, 0.0, 1.0))


def test_apply_scale_on_identity():
    assert apply_scale(identity(), 2, 3, 4) == create_scale(2, 3, 4)


def test_apply_translation_composes():
    a = apply_translation(create_translation(1, 2), 3, 4)
    b = apply_translation(create_translation(3, 4), 1, 2)
    assert a == b
    assert (0, 0, 1) * a == pytest.approx((1 + 3, 2 + 4, 1))


def test_apply_rotation_axis_halves():
    axis = (0.0, 0.0, 1.0)
    half = apply_rotation_axis(identity(), 0.4, axis)
    assert_matrix_close(apply_rotation_axis(half, 0.4, axis), create_rotation_axis(axis, 0.8))


def test_apply_rotation_on_identity():
    q = (math.cos(0.35), 0.0, math.sin(0.35), 0.0)
    assert_matrix_close(apply_rotation(identity(), q), create_rotation(q))