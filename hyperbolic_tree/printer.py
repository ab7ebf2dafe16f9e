from typing import TYPE_CHECKING, List

from .disk import ZERO
from .projector import PixelPoint

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .node import TreeNode

_ORIGIN_PIXEL = PixelPoint(0.0, 0.0)


def _format_point(point: PixelPoint) -> str:
    return f"({point.x}, {point.y})"


def layout_str(node: "TreeNode") -> str:
    parts = []
    if node.layout.coordinates != ZERO:
        parts.append(f"coord={node.layout.coordinates}")
    if node.layout.weight > 0:
        parts.append(f"weight={node.layout.weight}")
    if node.layout.global_weight > 0:
        parts.append(f"globalWeight={node.layout.global_weight}")
    return " ".join(parts)


def screen_str(node: "TreeNode") -> str:
    parts = []
    if node.screen.coordinates != ZERO:
        parts.append(f"coord={node.screen.coordinates}")
    if node.screen.old_coordinates != ZERO:
        parts.append(f"old={node.screen.old_coordinates}")
    if node.screen.point != _ORIGIN_PIXEL:
        parts.append(f"point={_format_point(node.screen.point)}")
    return " ".join(parts)


def node_description(node: "TreeNode") -> str:
    """One-line summary listing only the fields that differ from their defaults."""

    parts = [node.name]
    layout = layout_str(node)
    if layout:
        parts.append(f"layout={{{layout}}}")
    screen = screen_str(node)
    if screen:
        parts.append(f"screen={{{screen}}}")
    if node.edge is not None:
        parts.append(f"edge={{{node.edge}}}")
    return " ".join(parts)


def _describe_lines(node: "TreeNode", indent: List[str]) -> List[str]:
    lines = ["".join(indent) + node_description(node)]
    last = len(node.children) - 1
    for idx, child in enumerate(node.children):
        branch = "├" if idx < last else "└"
        if indent:
            rail = "│" if indent[-1] == "├" else " "
            child_indent = indent[:-1] + [rail, branch]
        else:
            child_indent = [branch]
        lines.extend(_describe_lines(child, child_indent))
    return lines


def tree_description(root: "TreeNode") -> str:
    """Render the subtree under ``root`` with box-drawing guides."""

    return "\n".join(_describe_lines(root, []))
