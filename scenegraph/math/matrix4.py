"""Four by four matrices for 3D transforms, acting on row vectors."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass

from scenegraph.math.quaternion import FLT_EPSILON, Quaternion, difference_of_products


@dataclass(frozen=True)
class Matrix4:
    """A 4x4 matrix; ``mRC`` is the entry in row R, column C."""

    m11: float
    m12: float
    m13: float
    m14: float
    m21: float
    m22: float
    m23: float
    m24: float
    m31: float
    m32: float
    m33: float
    m34: float
    m41: float
    m42: float
    m43: float
    m44: float

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)

    @classmethod
    def zero(cls) -> Matrix4:
        return cls(*([0.0] * 16))

    @classmethod
    def from_quaternion(cls, q: Quaternion) -> Matrix4:
        """The rotation matrix equivalent to a unit quaternion."""
        dop = difference_of_products
        return cls(
            1 - 2 * dop(q.y, q.y, -q.z, q.z), 2 * dop(q.x, q.y, -q.w, q.z), 2 * dop(q.x, q.z, q.w, q.y), 0,
            2 * dop(q.x, q.y, q.w, q.z), 1 - 2 * dop(q.x, q.x, -q.z, q.z), 2 * dop(q.y, q.z, -q.w, q.x), 0,
            2 * dop(q.x, q.z, -q.w, q.y), 2 * dop(q.y, q.z, q.w, q.x), 1 - 2 * dop(q.x, q.x, -q.y, q.y), 0,
            0, 0, 0, 1,
        )

    @classmethod
    def x_rotation(cls, rad: float) -> Matrix4:
        s, c = math.sin(rad), math.cos(rad)
        return cls(1, 0, 0, 0, 0, c, s, 0, 0, -s, c, 0, 0, 0, 0, 1)

    @classmethod
    def y_rotation(cls, rad: float) -> Matrix4:
        s, c = math.sin(rad), math.cos(rad)
        return cls(c, 0, s, 0, 0, 1, 0, 0, -s, 0, c, 0, 0, 0, 0, 1)

    @classmethod
    def z_rotation(cls, rad: float) -> Matrix4:
        s, c = math.sin(rad), math.cos(rad)
        return cls(c, s, 0, 0, -s, c, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)

    @classmethod
    def orthographic(cls, width: float, height: float, near_z: float, far_z: float) -> Matrix4:
        return cls(
            2.0 / width, 0, 0, 0,
            0, 2.0 / height, 0, 0,
            0, 0, 1.0 / (near_z - far_z), 0,
            0, 0, near_z / (near_z - far_z), 1,
        )

    @classmethod
    def orthographic_off_center(
        cls, left: float, right: float, bottom: float, top: float, near_z: float, far_z: float
    ) -> Matrix4:
        return cls(
            2.0 / (right - left), 0, 0, 0,
            0, 2.0 / (top - bottom), 0, 0,
            0, 0, 1.0 / (near_z - far_z), 0,
            (left + right) / (left - right), (top + bottom) / (bottom - top), near_z / (near_z - far_z), 1,
        )

    @classmethod
    def perspective(cls, width: float, height: float, near_z: float, far_z: float) -> Matrix4:
        scale_x = 2 * near_z / width
        scale_y = 2 * near_z / height
        return cls(
            scale_x, 0, 0, 0,
            0, scale_y, 0, 0,
            0, 0, far_z / (near_z - far_z), -1,
            0, 0, (near_z * far_z) / (near_z - far_z), 0,
        )

    @classmethod
    def perspective_off_center(
        cls, left: float, right: float, bottom: float, top: float, near_z: float, far_z: float
    ) -> Matrix4:
        scale_x = 2 * near_z / (right - left)
        scale_y = 2 * near_z / (top - bottom)
        return cls(
            scale_x, 0, 0, 0,
            0, scale_y, 0, 0,
            (left + right) / (right - left), (top + bottom) / (top - bottom), far_z / (near_z - far_z), -1,
            0, 0, (near_z * far_z) / (near_z - far_z), 0,
        )

    @classmethod
    def perspective_field_of_view(
        cls, field_of_view: float, aspect_ratio: float, near_z: float, far_z: float
    ) -> Matrix4:
        scale_y = 1.0 / math.tan(field_of_view * 0.5)
        scale_x = scale_y / aspect_ratio
        return cls(
            scale_x, 0, 0, 0,
            0, scale_y, 0, 0,
            0, 0, far_z / (near_z - far_z), -1,
            0, 0, (near_z * far_z) / (near_z - far_z), 0,
        )

    def rows(self) -> tuple[tuple[float, ...], ...]:
        """The matrix as four row tuples."""
        values = astuple(self)
        return tuple(values[i:i + 4] for i in range(0, 16, 4))

    def scaled(self, s: float) -> Matrix4:
        """Every entry multiplied by ``s``."""
        return Matrix4(*(v * s for v in astuple(self)))

    def __add__(self, other: object) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(a + b for a, b in zip(astuple(self), astuple(other))))

    def __sub__(self, other: object) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(a - b for a, b in zip(astuple(self), astuple(other))))

    def __mul__(self, other: object) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = list(zip(*other.rows()))
        return Matrix4(*(
            sum(a * b for a, b in zip(row, column))
            for row in self.rows()
            for column in columns
        ))

    def inverted(self) -> Matrix4:
        """The inverse matrix.

        Raises ValueError unless the determinant exceeds single-precision
        epsilon.
        """
        m = self
        dop = difference_of_products
        a2323 = dop(m.m33, m.m44, m.m34, m.m43)
        a1323 = dop(m.m32, m.m44, m.m34, m.m42)
        a1223 = dop(m.m32, m.m43, m.m33, m.m42)
        a0323 = dop(m.m31, m.m44, m.m34, m.m41)
        a0223 = dop(m.m31, m.m43, m.m33, m.m41)
        a0123 = dop(m.m31, m.m42, m.m32, m.m41)
        a2313 = dop(m.m23, m.m44, m.m24, m.m43)
        a1313 = dop(m.m22, m.m44, m.m24, m.m42)
        a1213 = dop(m.m22, m.m43, m.m23, m.m42)
        a2312 = dop(m.m23, m.m34, m.m24, m.m33)
        a1312 = dop(m.m22, m.m34, m.m24, m.m32)
        a1212 = dop(m.m22, m.m33, m.m23, m.m32)
        a0313 = dop(m.m21, m.m44, m.m24, m.m41)
        a0213 = dop(m.m21, m.m43, m.m23, m.m41)
        a0312 = dop(m.m21, m.m34, m.m24, m.m31)
        a0212 = dop(m.m21, m.m33, m.m23, m.m31)
        a0113 = dop(m.m21, m.m42, m.m22, m.m41)
        a0112 = dop(m.m21, m.m32, m.m22, m.m31)

        det = (
            m.m11 * (dop(m.m22, a2323, m.m23, a1323) + m.m24 * a1223)
            - m.m12 * (dop(m.m21, a2323, m.m23, a0323) + m.m24 * a0223)
            + m.m13 * (dop(m.m21, a1323, m.m22, a0323) + m.m24 * a0123)
            - m.m14 * (dop(m.m21, a1223, m.m22, a0223) + m.m23 * a0123)
        )
        if not det > FLT_EPSILON:
            raise ValueError("matrix is not invertible")
        det = 1.0 / det

        return Matrix4(
            det * (dop(m.m22, a2323, m.m23, a1323) + m.m24 * a1223),
            det * -(dop(m.m12, a2323, m.m13, a1323) + m.m14 * a1223),
            det * (dop(m.m12, a2313, m.m13, a1313) + m.m14 * a1213),
            det * -(dop(m.m12, a2312, m.m13, a1312) + m.m14 * a1212),
            det * -(dop(m.m21, a2323, m.m23, a0323) + m.m24 * a0223),
            det * (dop(m.m11, a2323, m.m13, a0323) + m.m14 * a0223),
            det * -(dop(m.m11, a2313, m.m13, a0313) + m.m14 * a0213),
            det * (dop(m.m11, a2312, m.m13, a0312) + m.m14 * a0212),
            det * (dop(m.m21, a1323, m.m22, a0323) + m.m24 * a0123),
            det * -(dop(m.m11, a1323, m.m12, a0323) + m.m14 * a0123),
            det * (dop(m.m11, a1313, m.m12, a0313) + m.m14 * a0113),
            det * -(dop(m.m11, a1312, m.m12, a0312) + m.m14 * a0112),
            det * -(dop(m.m21, a1223, m.m22, a0223) + m.m23 * a0123),
            det * (dop(m.m11, a1223, m.m12, a0223) + m.m13 * a0123),
            det * -(dop(m.m11, a1213, m.m12, a0213) + m.m13 * a0113),
            det * (dop(m.m11, a1212, m.m12, a0212) + m.m13 * a0112),
        )