"""Helpers that wire :class:`TreeNode` structures for demos and tests."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

import numpy as np

from .node import TreeNode

logger = logging.getLogger(__name__)

ContentFactory = Callable[[TreeNode], Any]

LEVEL_CODES = ("A", "B", "C", "D", "E", "F", "G", "H")


def level_code(level: int) -> str:
    return LEVEL_CODES[level % len(LEVEL_CODES)]


def _attach_content(node: TreeNode, content_factory: Optional[ContentFactory]) -> TreeNode:
    if content_factory is not None:
        node.content = content_factory(node)
    return node


def random_tree(
    rng: np.random.Generator,
    *,
    min_branch: int = 2,
    branch: int = 10,
    ratio: float = 0.5,
    content_factory: Optional[ContentFactory] = None,
) -> TreeNode:
    """Grow a random tree whose fan-out shrinks by ``ratio`` at each level.

    A node gets ``min_branch + U[0, branch)`` children; both bounds are
    scaled by ``ratio`` (truncated) for the next level, so the recursion
    stops once they reach zero.
    """

    if not 0.0 <= ratio < 1.0:
        raise ValueError(f"ratio must lie in [0, 1), got {ratio!r}")
    root = _grow(rng, 0, min_branch, branch, ratio, 0, content_factory)
    logger.debug("random_tree: grew %d node(s)", len(root.preorder()))
    return root


def _grow(
    rng: np.random.Generator,
    level: int,
    min_branch: int,
    branch: int,
    ratio: float,
    suffix: int,
    content_factory: Optional[ContentFactory],
) -> TreeNode:
    node = _attach_content(TreeNode(f"{level_code(level)}-{suffix}"), content_factory)
    count = min_branch + (int(rng.integers(0, branch)) if branch > 0 else 0)
    next_min = int(min_branch * ratio)
    next_branch = int(branch * ratio)
    for idx in range(1, count + 1):
        node.add(_grow(rng, level + 1, next_min, next_branch, ratio, idx, content_factory))
    return node


def tree_from_mapping(
    name: str,
    mapping: Mapping[str, Any],
    *,
    content_factory: Optional[ContentFactory] = None,
) -> TreeNode:
    """Build a tree from nested mappings, e.g. ``{"b": {"c": {}}, "d": {}}``.

    Children keep the mapping's iteration order; ``None`` marks a leaf.
    """

    node = _attach_content(TreeNode(name), content_factory)
    for child_name, sub in mapping.items():
        node.add(tree_from_mapping(child_name, sub or {}, content_factory=content_factory))
    return node


__all__ = ["LEVEL_CODES", "level_code", "random_tree", "tree_from_mapping"]
