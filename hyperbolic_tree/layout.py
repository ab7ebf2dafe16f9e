"""Recursive polar layout of a tree in the Poincaré disk."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import List, Optional, Tuple

from .config import BOUNDARY_MARGIN, HyperTreeConfig, get_default_config
from .disk import ZERO, DiskPoint
from .logging_utils import apply_debug_logging
from .node import TreeNode

logger = logging.getLogger(__name__)

Sector = Tuple[TreeNode, float, float]


class LayoutAlgorithm:
    """Assigns every node a canonical disk position and an angular budget.

    Each node is placed at a hyperbolic distance ``length`` from its parent,
    inside the angular sector ``angle ± width`` seen from the parent. The
    sector is then re-expressed from the node's own position, where it looks
    wider, and shared among the children in proportion to their weights.
    The tree must be balanced (postorder :meth:`TreeNode.balance`) first.
    """

    def __init__(self, base_distance: Optional[float] = None, *, config: Optional[HyperTreeConfig] = None) -> None:
        config = config or get_default_config()
        if base_distance is not None:
            # re-validated by HyperTreeConfig.__post_init__
            config = replace(config, base_distance=float(base_distance))
        self.config = config
        self.base = config.base_distance

    def layout(self, root: TreeNode) -> None:
        root.layout.coordinates = ZERO
        self.layout_node(root, 0.0, math.pi, self.base)
        logger.debug("layout: placed tree rooted at %r", root.name)

    def layout_node(self, node: TreeNode, angle: float, width: float, length: float) -> None:
        """Lay out ``node`` and its subtree.

        ``angle`` is measured from the x axis and ``width`` is half the
        angular sector available to the subtree.
        """

        self.place(node, angle, length)
        new_angle, new_width = self.new_angle_and_width(node, angle, width, length)
        new_length = self.new_length(node)
        for child, child_angle, child_width in self.child_sectors(node, new_angle, new_width):
            self.layout_node(child, child_angle, child_width, new_length)

    def place(self, node: TreeNode, angle: float, length: float) -> None:
        parent = node.parent
        if parent is None:
            return
        # Start as if the parent were the origin, then move to the parent.
        z = DiskPoint.from_angle(angle) * length
        z = z.translate(parent.layout.coordinates)
        if not z.is_valid:
            logger.debug("place: %r rounded onto the disk boundary, pulling it inside", node.name)
            z = z * ((1.0 - BOUNDARY_MARGIN) / z.magnitude)
        node.layout.coordinates = z

    def new_angle_and_width(self, node: TreeNode, angle: float, width: float, length: float) -> Tuple[float, float]:
        parent = node.parent
        if parent is None:
            return angle, width

        # e^(i*a) = T(-z) o T(zp) (e^(i*angle))
        a0 = DiskPoint.from_angle(angle)
        try:
            a1 = a0.translate(parent.layout.coordinates)
            a2 = a1.translate(-node.layout.coordinates)
        except ZeroDivisionError:
            logger.debug("layout: %r sits on the boundary, keeping the parent sector", node.name)
            return angle, width
        new_angle = a2.arg

        # e^(i*w) = T(-length) (e^(i*width)), expanded
        c = math.cos(width)
        A = 1.0 + length * length
        B = 2.0 * length
        ratio = (A * c - B) / (A - B * c)
        new_width = math.acos(max(-1.0, min(1.0, ratio)))
        return new_angle, new_width

    def new_length(self, node: TreeNode) -> float:
        cfg = self.config
        count = float(len(node.children))
        spread = cfg.length_ceiling - self.base
        factor = math.cos((cfg.spacing_turns * math.pi) / (2.0 * count + cfg.spacing_offset))
        return self.base + spread * factor

    def child_sectors(self, node: TreeNode, angle: float, width: float) -> List[Sector]:
        """Split ``angle ± width`` among the children, weight-proportionally, in list order."""

        sectors: List[Sector] = []
        start = angle - width
        total = node.layout.global_weight
        for child in node.children:
            child_width = width * (child.layout.weight / total)
            sectors.append((child, start + child_width, child_width))
            start += 2.0 * child_width
        return sectors


apply_debug_logging(globals(), logger=logger)


__all__ = ["LayoutAlgorithm"]
