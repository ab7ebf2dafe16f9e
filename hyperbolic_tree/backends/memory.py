"""In-memory rendering backend: records edges and label placement."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from ..geodesic import EdgeDescription, GeodesicKind
from ..projector import PixelPoint


@dataclass
class EdgeList:
    """Edge sink keeping the descriptions of the last rendered frame."""

    edges: List[EdgeDescription] = field(default_factory=list)
    frames: int = 0

    def clear(self) -> None:
        self.edges.clear()
        self.frames += 1

    def add(self, edge: EdgeDescription) -> None:
        self.edges.append(edge)

    def __iter__(self) -> Iterator[EdgeDescription]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def count(self, kind: GeodesicKind) -> int:
        return sum(1 for edge in self.edges if edge.kind is kind)


@dataclass
class Label:
    """Rectangular text label centred on its position."""

    text: str
    width: float = 40.0
    height: float = 12.0
    visible: bool = True
    position: PixelPoint = PixelPoint(0.0, 0.0)

    @property
    def footprint_height(self) -> float:
        return self.height

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def set_position(self, point: PixelPoint) -> None:
        self.position = PixelPoint(float(point[0]), float(point[1]))

    def contains(self, point: PixelPoint) -> bool:
        if not self.visible:
            return False
        return (
            abs(point[0] - self.position.x) <= self.width / 2.0
            and abs(point[1] - self.position.y) <= self.height / 2.0
        )


__all__ = ["EdgeList", "Label"]
