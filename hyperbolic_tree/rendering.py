"""Projection, edge emission and label culling for one frame."""

from __future__ import annotations

import logging
import math
from typing import Protocol, runtime_checkable

from .geodesic import EdgeDescription
from .node import TreeNode
from .projector import PixelPoint, Projector

logger = logging.getLogger(__name__)


class ContentHandle(Protocol):
    """Visual payload attached to a node by the rendering backend."""

    @property
    def footprint_height(self) -> float:
        """Pixel height the payload needs to be legible."""

    def set_visible(self, visible: bool) -> None: ...

    def set_position(self, point: PixelPoint) -> None: ...


class EdgeSink(Protocol):
    """Receives the pixel-space edges of a frame; cleared before each frame."""

    def clear(self) -> None: ...

    def add(self, edge: EdgeDescription) -> None: ...


@runtime_checkable
class HitTarget(Protocol):
    """Content that can answer whether a pixel lies inside its frame."""

    def contains(self, point: PixelPoint) -> bool: ...


class RenderingPass:
    """Projects the tree, emits its edges and shows the labels that fit."""

    def render(self, root: TreeNode, projector: Projector, sink: EdgeSink) -> None:
        root.traverse(lambda node: self.project(node, projector))
        sink.clear()
        root.traverse(lambda node: self.draw(node, sink))
        root.traverse(self.update)

    def project(self, node: TreeNode, projector: Projector) -> None:
        node.screen.point = projector.to_screen(node.screen.coordinates)
        if node.edge is not None:
            node.edge.project(projector)

    def draw(self, node: TreeNode, sink: EdgeSink) -> None:
        if node.edge is not None:
            node.edge.draw(sink)

    def update(self, node: TreeNode) -> None:
        content = node.content
        if content is None:
            return
        if self.space(node) >= content.footprint_height:
            content.set_visible(True)
            content.set_position(node.screen.point)
        else:
            content.set_visible(False)

    def space(self, node: TreeNode) -> float:
        """Rough width of the free corridor around ``node``, in pixels."""

        return self.space_branch(node) if node.children else self.space_leaf(node)

    def space_branch(self, node: TreeNode) -> float:
        to_child = node.screen.point.distance(node.children[0].screen.point)
        return min(self.space_leaf(node), to_child)

    def space_leaf(self, node: TreeNode) -> float:
        distances = []
        parent = node.parent
        if parent is not None:
            distances.append(node.screen.point.distance(parent.screen.point))
        sibling = node.sibling
        if sibling is not None:
            distances.append(node.screen.point.distance(sibling.screen.point))
        # a standalone node is always shown
        return min(distances) if distances else math.inf


__all__ = ["ContentHandle", "EdgeSink", "HitTarget", "EdgeDescription", "RenderingPass"]
