"""Affine 2D transforms: 3x2 matrices acting on row vectors."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass

from scenegraph.math.quaternion import FLT_EPSILON, difference_of_products


@dataclass(frozen=True)
class Transform2D:
    """Scale, shear, rotation and translation making up a 2D transform."""

    sx: float = 1.0
    sy: float = 1.0
    shear_x: float = 0.0
    shear_y: float = 0.0
    rad: float = 0.0
    tx: float = 0.0
    ty: float = 0.0


@dataclass(frozen=True)
class Vector2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def transform_coord(self, m: Matrix32) -> Vector2:
        """The point transformed by ``m``, translation included."""
        return Vector2(
            self.x * m.a + self.y * m.c + m.tx,
            self.x * m.b + self.y * m.d + m.ty,
        )

    def transform_normal(self, m: Matrix32) -> Vector2:
        """The direction transformed by ``m``, translation ignored."""
        return Vector2(
            self.x * m.a + self.y * m.c,
            self.x * m.b + self.y * m.d,
        )


@dataclass(frozen=True)
class Matrix32:
    """The matrix ``[[a, b], [c, d], [tx, ty]]``."""

    a: float
    b: float
    c: float
    d: float
    tx: float
    ty: float

    @classmethod
    def identity(cls) -> Matrix32:
        return cls(1, 0, 0, 1, 0, 0)

    @classmethod
    def zero(cls) -> Matrix32:
        return cls(0, 0, 0, 0, 0, 0)

    @classmethod
    def scale_matrix(cls, sx: float, sy: float) -> Matrix32:
        return cls(sx, 0, 0, sy, 0, 0)

    @classmethod
    def x_shear(cls, shear: float) -> Matrix32:
        return cls(1, 0, shear, 1, 0, 0)

    @classmethod
    def y_shear(cls, shear: float) -> Matrix32:
        return cls(1, shear, 0, 1, 0, 0)

    @classmethod
    def rotation(cls, rad: float) -> Matrix32:
        s, c = math.sin(rad), math.cos(rad)
        return cls(c, s, -s, c, 0, 0)

    @classmethod
    def from_transform(cls, transform: Transform2D) -> Matrix32:
        """Compose scale, then shear, then rotation, then translation.

        Shear is applied only when it is positive.
        """
        t = transform
        if t.shear_x > FLT_EPSILON or t.shear_y > FLT_EPSILON:
            shear = cls.x_shear(t.shear_x).multiply_rotation(cls.y_shear(t.shear_y))
            linear = cls.scale_matrix(t.sx, t.sy).multiply_rotation(shear).multiply_rotation(cls.rotation(t.rad))
            return cls(linear.a, linear.b, linear.c, linear.d, t.tx, t.ty)
        sn, cs = math.sin(t.rad), math.cos(t.rad)
        return cls(cs * t.sx, sn * t.sx, -sn * t.sy, cs * t.sy, t.tx, t.ty)

    def decompose(self) -> Transform2D:
        """Split into scale, x-shear, rotation and translation.

        Raises ValueError unless the determinant exceeds single-precision
        epsilon.
        """
        det = difference_of_products(self.a, self.d, self.b, self.c)
        if det <= FLT_EPSILON:
            raise ValueError("matrix cannot be decomposed")
        sx = math.sqrt(self.a * self.a + self.b * self.b)
        return Transform2D(
            sx=sx,
            sy=det / sx,
            shear_x=(self.a * self.c + self.b * self.d) / det,
            shear_y=0.0,
            rad=math.atan2(self.b, self.a),
            tx=self.tx,
            ty=self.ty,
        )

    def scaled(self, s: float) -> Matrix32:
        """Every entry multiplied by ``s``."""
        return Matrix32(*(v * s for v in astuple(self)))

    def __add__(self, other: object) -> Matrix32:
        if not isinstance(other, Matrix32):
            return NotImplemented
        return Matrix32(*(p + q for p, q in zip(astuple(self), astuple(other))))

    def __sub__(self, other: object) -> Matrix32:
        if not isinstance(other, Matrix32):
            return NotImplemented
        return Matrix32(*(p - q for p, q in zip(astuple(self), astuple(other))))

    def __mul__(self, other: object) -> Matrix32:
        if not isinstance(other, Matrix32):
            return NotImplemented
        m1, m2 = self, other
        return Matrix32(
            m1.a * m2.a + m1.b * m2.c,
            m1.a * m2.b + m1.b * m2.d,
            m1.c * m2.a + m1.d * m2.c,
            m1.c * m2.b + m1.d * m2.d,
            m1.tx * m2.a + m1.ty * m2.c + m2.tx,
            m1.tx * m2.b + m1.ty * m2.d + m2.ty,
        )

    def multiply_rotation(self, other: Matrix32) -> Matrix32:
        """Product of the linear parts only; the translation is zero."""
        m1, m2 = self, other
        return Matrix32(
            m1.a * m2.a + m1.b * m2.c,
            m1.a * m2.b + m1.b * m2.d,
            m1.c * m2.a + m1.d * m2.c,
            m1.c * m2.b + m1.d * m2.d,
            0,
            0,
        )

    def inverted(self) -> Matrix32:
        """The inverse transform.

        Raises ValueError unless the determinant exceeds single-precision
        epsilon.
        """
        m = self
        det = difference_of_products(m.a, m.d, m.b, m.c)
        if not det > FLT_EPSILON:
            raise ValueError("matrix is not invertible")
        det = 1.0 / det
        return Matrix32(
            det * m.d,
            -det * m.b,
            -det * m.c,
            det * m.a,
            det * difference_of_products(m.c, m.ty, m.d, m.tx),
            det * difference_of_products(m.b, m.tx, m.a, m.ty),
        )