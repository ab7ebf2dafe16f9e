"""Geodesic arcs linking two points of the Poincaré disk."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .config import GEODESIC_EPSILON
from .disk import ZERO, DiskPoint
from .projector import PixelPoint, Projector

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .rendering import EdgeSink

logger = logging.getLogger(__name__)


class GeodesicKind(enum.Enum):
    LINE = "line"
    CURVE = "curve"


@dataclass(frozen=True)
class EdgeDescription:
    """Pixel-space drawing instruction for one edge."""

    kind: GeodesicKind
    start: PixelPoint
    end: PixelPoint
    control: Optional[PixelPoint] = None


class GeodesicArc:
    """Hyperbolic segment drawn as a straight line or a cubic Bezier arc.

    Geodesics through the origin are diameters and stay straight; all others
    are arcs of circles orthogonal to the unit circle. The arc is approximated
    with a cubic whose two handles both sit on the intersection of the circle
    tangents at ``a`` and ``b``.
    """

    def __init__(self, a: DiskPoint, b: DiskPoint, *, epsilon: float = GEODESIC_EPSILON) -> None:
        self.a = a
        self.b = b
        self.epsilon = epsilon
        self.kind = GeodesicKind.LINE
        self.control_point: DiskPoint = ZERO

        self.sa = PixelPoint(0.0, 0.0)
        self.sb = PixelPoint(0.0, 0.0)
        self.sc = PixelPoint(0.0, 0.0)

        if not self.is_on_diameter:
            control = self.control_point_for(self.center)
            if control is None:
                logger.debug("near-zero tangent determinant for %s -> %s, drawing a line", a, b)
            else:
                self.kind = GeodesicKind.CURVE
                self.control_point = control

    @property
    def is_on_diameter(self) -> bool:
        a, b, eps = self.a, self.b, self.epsilon
        return (
            a.magnitude < eps
            or b.magnitude < eps
            or abs(a.re * b.im - a.im * b.re) < eps  # a = lambda * b
        )

    @property
    def center(self) -> DiskPoint:
        """Centre of the circle through ``a`` and ``b`` orthogonal to the unit circle."""

        a, b = self.a, self.b
        da = 1.0 + a.mag2
        db = 1.0 + b.mag2
        dd = 2.0 * (a.re * b.im - b.re * a.im)
        return DiskPoint(b.im * da - a.im * db, a.re * db - b.re * da) / dd

    def control_point_for(self, origin: DiskPoint) -> Optional[DiskPoint]:
        """Intersection of the tangents at ``a`` and ``b`` to the circle centred at ``origin``."""

        a, b, zo = self.a, self.b, origin
        det = (b.re - zo.re) * (a.im - zo.im) - (a.re - zo.re) * (b.im - zo.im)
        if abs(det) < self.epsilon:
            return None
        fa = a.im * (a.im - zo.im) - a.re * (zo.re - a.re)
        fb = b.im * (b.im - zo.im) - b.re * (zo.re - b.re)
        z1 = DiskPoint(a.im - zo.im, zo.re - a.re) * fb
        z2 = DiskPoint(b.im - zo.im, zo.re - b.re) * fa
        return (z1 - z2) / det

    def project(self, projector: Projector) -> None:
        """Refresh the pixel-space copies of the end and control points."""

        self.sa = projector.to_screen(self.a)
        self.sb = projector.to_screen(self.b)
        self.sc = projector.to_screen(self.control_point)

    def describe(self) -> EdgeDescription:
        control = self.sc if self.kind is GeodesicKind.CURVE else None
        return EdgeDescription(kind=self.kind, start=self.sa, end=self.sb, control=control)

    def draw(self, sink: "EdgeSink") -> None:
        sink.add(self.describe())

    def __str__(self) -> str:
        if self.kind is GeodesicKind.LINE:
            return f"LINE from={self.a} to={self.b}"
        return f"CURVE from={self.a} control={self.control_point} to={self.b}"

    def __repr__(self) -> str:
        return f"GeodesicArc({self})"


__all__ = ["GeodesicKind", "EdgeDescription", "GeodesicArc"]
