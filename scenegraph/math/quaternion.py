"""Quaternions and the floating-point helpers the math types share."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

FLT_EPSILON = 1.1920928955078125e-07
"""Machine epsilon of single-precision floats, used as the singularity threshold."""


def difference_of_products(a: float, b: float, c: float, d: float) -> float:
    """Return ``a * b - c * d``."""
    return a * b - c * d


def _float32_bits(value: float) -> int:
    return struct.unpack("<i", struct.pack("<f", value))[0]


def almost_equal_floats(a: float, b: float, max_ulps: int) -> bool:
    """Tell whether two numbers are within ``max_ulps`` single-precision steps."""
    if math.isnan(a) or math.isnan(b):
        return False
    if a == b:
        return True
    try:
        bits_a = _float32_bits(a)
        bits_b = _float32_bits(b)
    except OverflowError:
        return False
    if (bits_a < 0) != (bits_b < 0):
        return False
    return abs(bits_a - bits_b) <= max_ulps


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion ``x*i + y*j + z*k + w``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quaternion:
        """The quaternion that does not rotate."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, x: float, y: float, z: float, rad: float) -> Quaternion:
        """Rotation by ``rad`` radians about the axis ``(x, y, z)``.

        The axis need not be of unit length, but must not be zero.
        """
        s = x * x + y * y + z * z
        if s == 0.0:
            raise ValueError("rotation axis must not be zero")
        if not almost_equal_floats(s, 1.0, 4):
            s = 1.0 / math.sqrt(s)
        sn2 = math.sin(rad * 0.5) * s
        cs2 = math.cos(rad * 0.5)
        return cls(sn2 * x, sn2 * y, sn2 * z, cs2)

    def conjugate(self) -> Quaternion:
        """The quaternion with the vector part negated."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def __mul__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        q1, q2 = self, other
        return Quaternion(
            difference_of_products(q1.w, q2.x, -q1.x, q2.w)
            + difference_of_products(q1.y, q2.z, q1.z, q2.y),
            difference_of_products(q1.w, q2.y, q1.x, q2.z)
            + difference_of_products(q1.y, q2.w, -q1.z, q2.x),
            difference_of_products(q1.w, q2.z, -q1.z, q2.w)
            + difference_of_products(q1.x, q2.y, q1.y, q2.x),
            difference_of_products(q1.w, q2.w, q1.x, q2.x)
            - difference_of_products(q1.y, q2.y, -q1.z, q2.z),
        )