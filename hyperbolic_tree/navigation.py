"""Drag and click handling that pans the tree through hyperbolic isometries."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .disk import DiskPoint
from .isometry import Isometry
from .logging_utils import apply_debug_logging
from .node import TreeNode
from .projector import PixelPoint, Projector
from .rendering import HitTarget

logger = logging.getLogger(__name__)


class TreeChangeHandler(Protocol):
    """Owner of the tree, asked to re-render after the tree moved."""

    def model_tree_changed(self) -> None: ...


@dataclass(frozen=True)
class PointerEvent:
    """Pointer event as delivered by the windowing layer."""

    shift_held: bool
    screen_point: PixelPoint
    disk_coordinates: DiskPoint

    @classmethod
    def from_screen(cls, point: PixelPoint, projector: Projector, *, shift_held: bool = False) -> "PointerEvent":
        pixel = PixelPoint(float(point[0]), float(point[1]))
        return cls(shift_held=shift_held, screen_point=pixel, disk_coordinates=projector.to_disk(pixel))


class NavigatorState(enum.Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


def solve_drag_translation(start: DiskPoint, end: DiskPoint) -> DiskPoint:
    """Translation carrying ``start`` onto ``end`` under the disk translation law."""

    de = end.mag2
    ds = start.mag2
    return (end * (1.0 - ds) - start * (1.0 - de)) / (1.0 - de * ds)


class Navigator:
    """Turns pointer gestures into isometries applied to the whole tree.

    A drag never touches the canonical layout: every node's screen position
    is recomputed from its committed baseline, so successive drags within
    one press compose with the offset committed by earlier releases.
    """

    def __init__(self, handler: TreeChangeHandler, tree: TreeNode) -> None:
        self.handler = handler
        self.tree = tree
        self.state = NavigatorState.IDLE
        self.start_coordinates: Optional[DiskPoint] = None  # drag origin (disk space)

    def translate(self, start: DiskPoint, end: DiskPoint) -> bool:
        """Pan so that ``start`` (as seen before the current drag) lands on ``end``.

        Returns ``False`` when the solved translation leaves the disk; the
        tree is left untouched in that case.
        """

        zo = -self.tree.screen.old_coordinates
        zs2 = start.translate(zo)
        t = solve_drag_translation(zs2, end)
        if not t.is_valid:
            logger.debug("drag skipped: translation %s leaves the disk", t)
            return False

        to = Isometry.compose(zo, t)
        self.tree.traverse(lambda node: node.apply(to))
        self.handler.model_tree_changed()
        return True

    # Pointer adapter ---------------------------------------------------

    def pressed(self, event: PointerEvent) -> None:
        self.start_coordinates = event.disk_coordinates
        self.state = NavigatorState.DRAGGING

    def dragged(self, event: PointerEvent) -> None:
        start = self.start_coordinates
        if start is None or not start.is_valid:
            return
        end = event.disk_coordinates
        if end.is_valid:
            self.translate(start, end)

    def released(self, event: PointerEvent) -> None:
        self.tree.traverse(lambda node: node.commit())
        self.start_coordinates = None
        self.state = NavigatorState.IDLE

    def moved(self, event: PointerEvent) -> None:
        """Hover is not used."""

    def clicked(self, event: PointerEvent) -> Optional[TreeNode]:
        """Handle a click; shift resets the view, otherwise hit-test the labels.

        The node whose content contains the click point is returned. Bringing
        it to the centre is left to the caller.
        """

        if event.shift_held:
            self.tree.traverse(lambda node: node.restore())
            self.handler.model_tree_changed()
            return None

        node = self.tree.search(
            lambda candidate: isinstance(candidate.content, HitTarget)
            and candidate.content.contains(event.screen_point)
        )
        if node is not None:
            logger.info("clicked %s", node.name)
        return node


apply_debug_logging(globals(), logger=logger, skip={"TreeChangeHandler", "PointerEvent", "NavigatorState"})


__all__ = [
    "TreeChangeHandler",
    "PointerEvent",
    "NavigatorState",
    "Navigator",
    "solve_drag_translation",
]
