"""Tree nodes carrying canonical layout and live screen coordinates."""

from __future__ import annotations

import math
import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, List, Optional

from .disk import ZERO, DiskPoint
from .geodesic import GeodesicArc
from .printer import node_description
from .projector import PixelPoint

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .isometry import Isometry

Visitor = Callable[["TreeNode"], Any]
Predicate = Callable[["TreeNode"], bool]


@dataclass
class LayoutFrame:
    """Canonical position assigned by the layout algorithm."""

    coordinates: DiskPoint = field(default_factory=lambda: ZERO)
    weight: float = 0.0  # part of the angular budget taken by this node
    global_weight: float = 0.0  # sum of the children weights


@dataclass
class ScreenFrame:
    """Position after panning, plus the last committed baseline."""

    coordinates: DiskPoint = field(default_factory=lambda: ZERO)
    old_coordinates: DiskPoint = field(default_factory=lambda: ZERO)
    point: PixelPoint = PixelPoint(0.0, 0.0)


class TreeNode:
    """Node of the displayed tree.

    A node owns its children. ``parent`` and ``sibling`` are weak
    back-references, so the tree is released as a unit with its root.
    """

    def __init__(self, name: str, content: Optional[Any] = None) -> None:
        self.name = name
        self.children: List[TreeNode] = []
        self.content = content
        self.layout = LayoutFrame()
        self.screen = ScreenFrame()
        self.edge: Optional[GeodesicArc] = None
        self._parent: Optional[weakref.ReferenceType[TreeNode]] = None
        self._sibling: Optional[weakref.ReferenceType[TreeNode]] = None

    @property
    def parent(self) -> Optional["TreeNode"]:
        return self._parent() if self._parent is not None else None

    @property
    def sibling(self) -> Optional["TreeNode"]:
        """Previously rendered sibling, used by the spacing heuristic."""

        return self._sibling() if self._sibling is not None else None

    @sibling.setter
    def sibling(self, node: Optional["TreeNode"]) -> None:
        self._sibling = weakref.ref(node) if node is not None else None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def add(self, child: "TreeNode") -> "TreeNode":
        self.children.append(child)
        child._parent = weakref.ref(self)
        return child

    def traverse(self, visitor: Visitor) -> None:
        """Depth-first walk, parents before children (preorder)."""

        visitor(self)
        for child in self.children:
            child.traverse(visitor)

    def dfs(self, visitor: Visitor) -> None:
        """Depth-first walk, children before parents (postorder)."""

        for child in self.children:
            child.dfs(visitor)
        visitor(self)

    def search(self, predicate: Predicate) -> Optional["TreeNode"]:
        """Return the first node in preorder matching ``predicate``."""

        if predicate(self):
            return self
        for child in self.children:
            found = child.search(predicate)
            if found is not None:
                return found
        return None

    def preorder(self) -> List["TreeNode"]:
        """Nodes of the subtree as a list, parents before children."""

        nodes: List[TreeNode] = []
        self.traverse(nodes.append)
        return nodes

    # ------------------------------------------------------------------
    # Layout preparation
    # ------------------------------------------------------------------

    def balance(self) -> None:
        """Aggregate children weights with logarithmic damping.

        Must run bottom-up (see :meth:`dfs`) before layout.
        """

        self.layout.global_weight = sum(child.layout.weight for child in self.children)
        if self.layout.global_weight > 0:
            self.layout.weight = 1.0 + math.log(self.layout.global_weight)
        else:
            self.layout.weight = 1.0

    def link_render_siblings(self) -> None:
        previous: Optional[TreeNode] = None
        for child in self.children:
            child.sibling = previous
            previous = child

    # ------------------------------------------------------------------
    # Screen frame
    # ------------------------------------------------------------------

    def _refresh_edge(self) -> None:
        parent = self.parent
        if parent is not None:
            self.edge = GeodesicArc(parent.screen.coordinates, self.screen.coordinates)

    def translate(self, t: DiskPoint) -> None:
        """Move the committed position by the hyperbolic translation ``t``."""

        self.screen.coordinates = self.screen.old_coordinates.translate(t)
        self._refresh_edge()

    def apply(self, isometry: "Isometry") -> None:
        """Move the committed position by ``isometry`` (used while dragging)."""

        self.screen.coordinates = isometry.transform(self.screen.old_coordinates)
        self._refresh_edge()

    def commit(self) -> None:
        self.screen.old_coordinates = self.screen.coordinates

    def restore(self) -> None:
        """Reset the screen frame to the canonical layout position."""

        z = self.layout.coordinates
        self.screen.coordinates = z
        self.screen.old_coordinates = z
        self._refresh_edge()

    def __repr__(self) -> str:
        return f"TreeNode(name={self.name!r}, children={len(self.children)})"

    def __str__(self) -> str:
        return node_description(self)


__all__ = ["LayoutFrame", "ScreenFrame", "TreeNode", "Visitor", "Predicate"]
