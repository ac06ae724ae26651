"""View frustums and culling tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from scenegraph.math.matrix4 import Matrix4
from scenegraph.math.vector3 import Plane, Vector3


@dataclass(frozen=True)
class Sphere:
    """A sphere given by its centre and radius."""

    origin: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0


def _six_planes() -> list[Plane]:
    return [Plane() for _ in range(6)]


@dataclass
class Frustum:
    """Six clipping planes: left, right, top, bottom, near, far.

    Plane normals point into the frustum.
    """

    clipping_planes: list[Plane] = field(default_factory=_six_planes)

    @classmethod
    def from_matrix(cls, m: Matrix4) -> Frustum:
        """Extract the clipping planes of a view-projection matrix."""
        return cls([
            Plane(Vector3(m.m14 + m.m11, m.m24 + m.m21, m.m34 + m.m31), m.m44 + m.m41),
            Plane(Vector3(m.m14 - m.m11, m.m24 - m.m21, m.m34 - m.m31), m.m44 - m.m41),
            Plane(Vector3(m.m14 - m.m12, m.m24 - m.m22, m.m34 - m.m32), m.m44 - m.m42),
            Plane(Vector3(m.m14 + m.m12, m.m24 + m.m22, m.m34 + m.m32), m.m44 + m.m42),
            Plane(Vector3(m.m13, m.m23, m.m33), m.m43),
            Plane(Vector3(m.m14 - m.m13, m.m24 - m.m23, m.m34 - m.m33), m.m44 - m.m43),
        ])

    def normalize(self) -> None:
        """Normalize every clipping plane in place."""
        for plane in self.clipping_planes:
            plane.normalize()

    def cull_point(self, p: Vector3) -> bool:
        """True if the point lies outside the frustum."""
        return any(plane.distance_to_point(p) < 0 for plane in self.clipping_planes)

    def cull_sphere(self, s: Sphere) -> bool:
        """True if the sphere lies entirely outside some clipping plane."""
        return any(
            plane.distance_to_point(s.origin) + s.radius < 0 for plane in self.clipping_planes
        )