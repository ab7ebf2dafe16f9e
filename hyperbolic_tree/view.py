"""Host-side controller owning a tree, its viewport and its navigator."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from .config import HyperTreeConfig, get_default_config
from .layout import LayoutAlgorithm
from .navigation import Navigator, PointerEvent
from .node import TreeNode
from .projector import PixelPoint, Projector
from .rendering import EdgeSink, RenderingPass

logger = logging.getLogger(__name__)


def _prepare_node(node: TreeNode) -> None:
    node.link_render_siblings()
    node.restore()


class HyperbolicTreeView:
    """Lays out a tree once, then renders and pans it inside a viewport."""

    def __init__(
        self,
        sink: EdgeSink,
        width: float,
        height: float,
        *,
        config: Optional[HyperTreeConfig] = None,
    ) -> None:
        self.sink = sink
        self.config = config or get_default_config()
        self.renderer = RenderingPass()
        self.model: Optional[TreeNode] = None
        self.navigator: Optional[Navigator] = None
        self._projector = Projector.for_viewport(width, height)

    @property
    def projector(self) -> Projector:
        return self._projector

    def build(self, model: TreeNode) -> None:
        self.model = model
        model.dfs(lambda node: node.balance())
        LayoutAlgorithm(config=self.config).layout(model)
        model.traverse(_prepare_node)
        self.navigator = Navigator(self, model)
        logger.info("Built hyperbolic tree view for %r (%d nodes)", model.name, len(model.preorder()))
        self.model_tree_changed()

    def resize(self, width: float, height: float) -> None:
        self._projector = Projector.for_viewport(width, height)
        self.model_tree_changed()

    def model_tree_changed(self) -> None:
        if self.model is None:
            return
        self.renderer.render(self.model, self._projector, self.sink)

    def contents(self) -> List[Any]:
        if self.model is None:
            return []
        return [node.content for node in self.model.preorder() if node.content is not None]

    # Pointer events, in viewport pixels ---------------------------------

    def _event(self, point: Tuple[float, float], shift_held: bool) -> PointerEvent:
        return PointerEvent.from_screen(PixelPoint(*point), self._projector, shift_held=shift_held)

    def mouse_down(self, point: Tuple[float, float], *, shift_held: bool = False) -> None:
        if self.navigator is not None:
            self.navigator.pressed(self._event(point, shift_held))

    def mouse_dragged(self, point: Tuple[float, float], *, shift_held: bool = False) -> None:
        if self.navigator is not None:
            self.navigator.dragged(self._event(point, shift_held))

    def mouse_up(self, point: Tuple[float, float], *, shift_held: bool = False) -> None:
        if self.navigator is not None:
            self.navigator.released(self._event(point, shift_held))

    def mouse_moved(self, point: Tuple[float, float], *, shift_held: bool = False) -> None:
        if self.navigator is not None:
            self.navigator.moved(self._event(point, shift_held))

    def mouse_clicked(self, point: Tuple[float, float], *, shift_held: bool = False) -> Optional[TreeNode]:
        if self.navigator is None:
            return None
        return self.navigator.clicked(self._event(point, shift_held))

    def drag(self, start: Tuple[float, float], end: Tuple[float, float]) -> None:
        """Replay a complete press/drag/release gesture."""

        self.mouse_down(start)
        self.mouse_dragged(end)
        self.mouse_up(end)


__all__ = ["HyperbolicTreeView"]
