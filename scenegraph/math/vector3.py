"""3D vectors and planes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from scenegraph.math.matrix4 import Matrix4
from scenegraph.math.quaternion import FLT_EPSILON, Quaternion, almost_equal_floats


@dataclass(frozen=True)
class Vector3:
    """A 3D vector, treated as a row vector by matrices."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_sq(self) -> float:
        return self.dot(self)

    def scaled(self, s: float) -> Vector3:
        return Vector3(self.x * s, self.y * s, self.z * s)

    def rotate(self, rotation: Quaternion | Matrix4) -> Vector3:
        """Rotate by a quaternion, or by the upper 3x3 part of a matrix."""
        if isinstance(rotation, Quaternion):
            p = Quaternion(self.x, self.y, self.z, 0.0)
            out = rotation * p * rotation.conjugate()
            return Vector3(out.x, out.y, out.z)
        if isinstance(rotation, Matrix4):
            m = rotation
            return Vector3(
                self.x * m.m11 + self.y * m.m21 + self.z * m.m31,
                self.x * m.m12 + self.y * m.m22 + self.z * m.m32,
                self.x * m.m13 + self.y * m.m23 + self.z * m.m33,
            )
        raise TypeError(f"cannot rotate by {type(rotation).__name__}")

    def transform(self, m: Matrix4) -> Vector3:
        """The point transformed by ``m``, translation included."""
        return Vector3(
            self.x * m.m11 + self.y * m.m21 + self.z * m.m31 + m.m41,
            self.x * m.m12 + self.y * m.m22 + self.z * m.m32 + m.m42,
            self.x * m.m13 + self.y * m.m23 + self.z * m.m33 + m.m43,
        )

    def transform_and_project(self, m: Matrix4) -> Vector3:
        """The point transformed by ``m`` and divided by the resulting w."""
        w = 1.0 / (self.x * m.m14 + self.y * m.m24 + self.z * m.m34 + m.m44)
        p = self.transform(m)
        return Vector3(p.x * w, p.y * w, p.z * w)


@dataclass
class Plane:
    """The plane of points ``p`` with ``normal . p + distance == 0``."""

    normal: Vector3 = field(default_factory=Vector3)
    distance: float = 0.0

    def normalize(self) -> None:
        """Scale the plane in place so its normal has unit length.

        A degenerate or already unit normal is left as it is.
        """
        magnitude_sq = self.normal.length_sq()
        if magnitude_sq > FLT_EPSILON and not almost_equal_floats(magnitude_sq, 1.0, 4):
            scale = 1.0 / math.sqrt(magnitude_sq)
            self.normal = self.normal.scaled(scale)
            self.distance *= scale

    def distance_to_point(self, p: Vector3) -> float:
        """Signed distance, in units of the normal's length."""
        return self.normal.dot(p) + self.distance