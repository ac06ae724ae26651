import math
from dataclasses import astuple, replace

import pytest

from scenegraph.math.matrix4 import Matrix4
from scenegraph.math.quaternion import Quaternion
from scenegraph.math.vector3 import Plane, Vector3


def test_length_sq_is_dot_with_self():
    v = Vector3(1.0, 2.0, 3.0)
    assert v.length_sq() == v.dot(v)
    assert v.length_sq() == 14.0


def test_dot_of_orthogonal_vectors_is_zero():
    assert Vector3(1.0, 0.0, 0.0).dot(Vector3(0.0, 5.0, -2.0)) == 0.0


def test_scaled_multiplies_components():
    assert Vector3(1.0, -2.0, 3.0).scaled(2.0) == Vector3(2.0, -4.0, 6.0)


def test_quarter_turn_about_z():
    q = Quaternion.from_axis_angle(0.0, 0.0, 1.0, math.pi / 2)
    assert astuple(Vector3(1.0, 0.0, 0.0).rotate(q)) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_quaternion_and_matrix_rotation_agree():
    q = Quaternion.from_axis_angle(1.0, 2.0, -0.5, 0.9)
    v = Vector3(0.3, -1.2, 2.5)
    assert astuple(v.rotate(q)) == pytest.approx(astuple(v.rotate(Matrix4.from_quaternion(q))))


def test_rotation_preserves_length():
    q = Quaternion.from_axis_angle(-1.0, 0.5, 2.0, 2.2)
    v = Vector3(4.0, -1.0, 0.5)
    assert v.rotate(q).length_sq() == pytest.approx(v.length_sq())


def test_rotate_with_unsupported_type_raises():
    with pytest.raises(TypeError):
        Vector3(1.0, 0.0, 0.0).rotate(3)


def test_transform_applies_translation():
    m = replace(Matrix4.identity(), m41=1.0, m42=-2.0, m43=0.5)
    assert Vector3(3.0, 3.0, 3.0).transform(m) == Vector3(4.0, 1.0, 3.5)


def test_rotate_by_matrix_ignores_translation():
    m = replace(Matrix4.identity(), m41=1.0, m42=-2.0, m43=0.5)
    assert Vector3(3.0, 3.0, 3.0).rotate(m) == Vector3(3.0, 3.0, 3.0)


def test_transform_and_project_with_affine_matrix_equals_transform():
    m = replace(Matrix4.z_rotation(0.4), m41=1.0, m42=2.0, m43=3.0)
    v = Vector3(0.5, -0.5, 2.0)
    assert astuple(v.transform_and_project(m)) == pytest.approx(astuple(v.transform(m)))


def test_transform_and_project_divides_by_w():
    m = Matrix4.identity().scaled(2.0)
    v = Vector3(1.0, 2.0, 3.0)
    assert astuple(v.transform_and_project(m)) == pytest.approx(astuple(v))


def test_plane_normalize_gives_unit_normal_and_true_distance():
    plane = Plane(Vector3(0.0, 0.0, 2.0), 4.0)
    on_plane = Vector3(1.0, 1.0, -2.0)
    plane.normalize()
    assert plane.normal.length_sq() == pytest.approx(1.0)
    assert plane.distance_to_point(on_plane) == pytest.approx(0.0)
    assert plane.distance_to_point(Vector3(0.0, 0.0, 3.0)) == pytest.approx(5.0)


def test_plane_normalize_leaves_degenerate_plane():
    plane = Plane(Vector3(0.0, 0.0, 0.0), 3.0)
    plane.normalize()
    assert plane == Plane(Vector3(0.0, 0.0, 0.0), 3.0)


def test_plane_normalize_leaves_unit_plane():
    plane = Plane(Vector3(0.0, 1.0, 0.0), 3.0)
    plane.normalize()
    assert plane == Plane(Vector3(0.0, 1.0, 0.0), 3.0)


def test_distance_sign_tells_side():
    plane = Plane(Vector3(1.0, 0.0, 0.0), -1.0)
    assert plane.distance_to_point(Vector3(2.0, 0.0, 0.0)) > 0
    assert plane.distance_to_point(Vector3(0.0, 0.0, 0.0)) < 0