from .config import (
    BASE_DISTANCE,
    BOUNDARY_MARGIN,
    COORDINATE_EPSILON,
    GEODESIC_EPSILON,
    HyperTreeConfig,
    get_default_config,
    set_default_config,
)
from .disk import DiskPoint, ZERO
from .isometry import Isometry
from .projector import PixelPoint, Projector
from .geodesic import EdgeDescription, GeodesicArc, GeodesicKind
from .node import LayoutFrame, ScreenFrame, TreeNode
from .layout import LayoutAlgorithm
from .rendering import ContentHandle, EdgeSink, HitTarget, RenderingPass
from .navigation import Navigator, NavigatorState, PointerEvent, TreeChangeHandler, solve_drag_translation
from .view import HyperbolicTreeView
from .printer import node_description, tree_description
from .builder import random_tree, tree_from_mapping

__all__ = [
    'BASE_DISTANCE',
    'BOUNDARY_MARGIN',
    'COORDINATE_EPSILON',
    'GEODESIC_EPSILON',
    'HyperTreeConfig',
    'get_default_config',
    'set_default_config',
    'DiskPoint',
    'ZERO',
    'Isometry',
    'PixelPoint',
    'Projector',
    'EdgeDescription',
    'GeodesicArc',
    'GeodesicKind',
    'LayoutFrame',
    'ScreenFrame',
    'TreeNode',
    'LayoutAlgorithm',
    'ContentHandle',
    'EdgeSink',
    'HitTarget',
    'RenderingPass',
    'Navigator',
    'NavigatorState',
    'PointerEvent',
    'TreeChangeHandler',
    'solve_drag_translation',
    'HyperbolicTreeView',
    'node_description',
    'tree_description',
    'random_tree',
    'tree_from_mapping',
]
