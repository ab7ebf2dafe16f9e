"""Complex arithmetic for points of the Poincaré disk."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Union

from .config import COORDINATE_EPSILON

Scalar = Union[int, float]

# Some complex computing formula:
#
# arg(z)  = atan2(y, x)
# |z|     = sqrt(x*x + y*y)
# conj(z) = (x, -y)
# a * b   = (a.x*b.x - a.y*b.y, a.x*b.y + a.y*b.x)
# a / b   = ((a.x*b.x + a.y*b.y) / |b|^2, (a.y*b.x - a.x*b.y) / |b|^2)


@dataclass(frozen=True, eq=False)
class DiskPoint:
    """Complex number used as a Euclidean coordinate of the unit disk."""

    re: float
    im: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    @classmethod
    def from_angle(cls, theta: float) -> "DiskPoint":
        """Return the unit vector ``e^(i*theta)``."""

        return cls(math.cos(theta), math.sin(theta))

    @classmethod
    def from_complex(cls, value: complex) -> "DiskPoint":
        return cls(value.real, value.imag)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Union["DiskPoint", Scalar]) -> "DiskPoint":
        if isinstance(other, DiskPoint):
            return DiskPoint(self.re + other.re, self.im + other.im)
        if isinstance(other, numbers.Real):
            return DiskPoint(self.re + other, self.im)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Union["DiskPoint", Scalar]) -> "DiskPoint":
        if isinstance(other, DiskPoint):
            return DiskPoint(self.re - other.re, self.im - other.im)
        if isinstance(other, numbers.Real):
            return DiskPoint(self.re - other, self.im)
        return NotImplemented

    def __neg__(self) -> "DiskPoint":
        return DiskPoint(-self.re, -self.im)

    def __mul__(self, other: Union["DiskPoint", Scalar]) -> "DiskPoint":
        if isinstance(other, DiskPoint):
            return DiskPoint(
                self.re * other.re - self.im * other.im,
                self.re * other.im + self.im * other.re,
            )
        if isinstance(other, numbers.Real):
            return DiskPoint(self.re * other, self.im * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Union["DiskPoint", Scalar]) -> "DiskPoint":
        if isinstance(other, DiskPoint):
            d2 = other.mag2
            return DiskPoint(
                (self.re * other.re + self.im * other.im) / d2,
                (self.im * other.re - self.re * other.im) / d2,
            )
        if isinstance(other, numbers.Real):
            return DiskPoint(self.re / other, self.im / other)
        return NotImplemented

    @property
    def conjugate(self) -> "DiskPoint":
        return DiskPoint(self.re, -self.im)

    @property
    def arg(self) -> float:
        """Angle in radians between the x axis and the ray through this point."""

        return math.atan2(self.im, self.re)

    @property
    def mag2(self) -> float:
        """Squared distance from the origin."""

        return self.re * self.re + self.im * self.im

    @property
    def magnitude(self) -> float:
        return math.hypot(self.re, self.im)

    def distance(self, other: "DiskPoint") -> float:
        return (other - self).magnitude

    # ------------------------------------------------------------------
    # Poincaré disk model
    # ------------------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        """Return ``True`` when the point lies strictly inside the unit disk."""

        return self.mag2 < 1.0

    def translate(self, t: "DiskPoint") -> "DiskPoint":
        """Hyperbolic translation ``z' = (z + t) / (1 + z * conj(t))``."""

        return (self + t) / (self * t.conjugate + 1.0)

    # ------------------------------------------------------------------
    # Comparison and conversions
    # ------------------------------------------------------------------

    def isclose(self, other: "DiskPoint", *, tol: float = COORDINATE_EPSILON) -> bool:
        return abs(self.re - other.re) < tol and abs(self.im - other.im) < tol

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiskPoint):
            return NotImplemented
        return self.isclose(other)

    # tolerant equality cannot be made consistent with hashing
    __hash__ = None  # type: ignore[assignment]

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __iter__(self):
        yield self.re
        yield self.im

    def __str__(self) -> str:
        if self.im < 0:
            return f"{self.re}{self.im}i"
        return f"{self.re}+{self.im}i"

    def __repr__(self) -> str:
        return f"DiskPoint(re={self.re!r}, im={self.im!r})"


ZERO = DiskPoint(0.0, 0.0)


__all__ = ["DiskPoint", "ZERO"]
