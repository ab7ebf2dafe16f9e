"""Concrete rendering backends for the hyperbolic tree view."""

from .memory import EdgeList, Label
from .tikz import TikzCanvas, TikzLabel

__all__ = [
    "EdgeList",
    "Label",
    "TikzCanvas",
    "TikzLabel",
]
