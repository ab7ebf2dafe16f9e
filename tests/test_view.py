import math

import pytest

from hyperbolic_tree import DiskPoint, HyperbolicTreeView, HyperTreeConfig, Navigator, tree_from_mapping
from hyperbolic_tree.backends import EdgeList, Label


def _model():
    return tree_from_mapping(
        "root",
        {"b": {"d": None, "e": None}, "c": None},
        content_factory=lambda node: Label(node.name),
    )


def test_build_lays_out_and_renders():
    sink = EdgeList()
    view = HyperbolicTreeView(sink, 200, 200)
    model = _model()
    view.build(model)

    assert isinstance(view.navigator, Navigator)
    assert sink.frames == 1
    assert len(sink) == 4
    for node in model.preorder():
        assert node.screen.coordinates == node.layout.coordinates
        assert node.screen.old_coordinates == node.layout.coordinates
        assert node.layout.coordinates.is_valid
    assert model.layout.weight == pytest.approx(1.0 + math.log(2.0 + math.log(2.0)))


def test_build_links_render_siblings():
    view = HyperbolicTreeView(EdgeList(), 200, 200)
    model = _model()
    view.build(model)
    b, c = model.children
    d, e = b.children
    assert b.sibling is None
    assert c.sibling is b
    assert d.sibling is None
    assert e.sibling is d


def test_config_base_distance_is_used():
    view = HyperbolicTreeView(EdgeList(), 200, 200, config=HyperTreeConfig(base_distance=0.5))
    model = tree_from_mapping("a", {"b": None})
    view.build(model)
    assert model.children[0].layout.coordinates == DiskPoint(0.5, 0)


def test_resize_rerenders_with_new_projector():
    sink = EdgeList()
    view = HyperbolicTreeView(sink, 200, 200)
    model = tree_from_mapping("a", {"b": None})
    view.build(model)
    view.resize(400, 100)

    assert sink.frames == 2
    assert tuple(view.projector.origin) == (200.0, 50.0)
    assert model.children[0].screen.point == pytest.approx((260.0, 50.0))


def test_invalid_viewport_is_rejected():
    with pytest.raises(ValueError):
        HyperbolicTreeView(EdgeList(), 0, 200)


def test_contents_lists_node_payloads_in_preorder():
    view = HyperbolicTreeView(EdgeList(), 200, 200)
    view.build(_model())
    assert [label.text for label in view.contents()] == ["root", "b", "d", "e", "c"]


def test_drag_rerenders_each_move():
    sink = EdgeList()
    view = HyperbolicTreeView(sink, 200, 200)
    view.build(_model())
    view.drag((90, 90), (100, 100))
    assert sink.frames == 2
