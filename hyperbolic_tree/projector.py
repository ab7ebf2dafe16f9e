"""Conversion between pixel space and the normalized disk."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from .disk import DiskPoint


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


class PixelPoint(NamedTuple):
    x: float
    y: float

    def distance(self, other: "PixelPoint") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def rounded(self) -> "PixelPoint":
        """Nearest whole pixel, halves rounded away from zero."""

        return PixelPoint(_round_half_away(self.x), _round_half_away(self.y))


@dataclass(frozen=True)
class Projector:
    """Maps disk coordinates onto a viewport.

    ``origin`` is the pixel position of the disk centre and ``scale`` the
    pixel length of one disk unit along each axis.
    """

    origin: PixelPoint
    scale: PixelPoint

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", PixelPoint(float(self.origin[0]), float(self.origin[1])))
        object.__setattr__(self, "scale", PixelPoint(float(self.scale[0]), float(self.scale[1])))
        if self.scale.x == 0.0 or self.scale.y == 0.0:
            raise ValueError(f"projector scale must be non-zero, got {tuple(self.scale)!r}")

    @classmethod
    def for_viewport(cls, width: float, height: float) -> "Projector":
        """Centre the disk in a ``width`` x ``height`` viewport, filling it."""

        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must be positive, got {width!r}x{height!r}")
        half = PixelPoint(width / 2.0, height / 2.0)
        return cls(origin=half, scale=half)

    def to_disk(self, point: PixelPoint) -> DiskPoint:
        return DiskPoint(
            (point[0] - self.origin.x) / self.scale.x,
            (point[1] - self.origin.y) / self.scale.y,
        )

    def to_screen(self, z: DiskPoint) -> PixelPoint:
        return PixelPoint(
            z.re * self.scale.x + self.origin.x,
            z.im * self.scale.y + self.origin.y,
        )

    def __str__(self) -> str:
        return f"<Projector O={tuple(self.origin)} MAX={tuple(self.scale)}>"


__all__ = ["PixelPoint", "Projector"]
