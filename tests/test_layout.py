import math

import numpy as np
import pytest

from hyperbolic_tree import DiskPoint, HyperTreeConfig, LayoutAlgorithm, TreeNode, random_tree, tree_from_mapping


def _balanced(root):
    root.dfs(lambda node: node.balance())
    return root


def _expected_length(base, child_count):
    return base + (0.95 - base) * math.cos(20.0 * math.pi / (2.0 * child_count + 38.0))


def test_root_and_single_child():
    tree = TreeNode("A")
    tree.add(TreeNode("B"))
    _balanced(tree)
    LayoutAlgorithm(0.3).layout(tree)
    tree.traverse(lambda node: node.restore())

    a, b = tree, tree.children[0]
    assert a.layout.coordinates == DiskPoint(0, 0)
    assert b.layout.coordinates == DiskPoint(0.3, 0)
    assert a.screen.coordinates == DiskPoint(0, 0)
    assert b.screen.coordinates == DiskPoint(0.3, 0)


def test_two_children_split_the_circle():
    tree = _balanced(tree_from_mapping("root", {"left": {}, "right": {}}))
    LayoutAlgorithm(0.3).layout(tree)
    length = _expected_length(0.3, 2)
    first, second = tree.children
    assert first.layout.coordinates == DiskPoint(0.0, -length)
    assert second.layout.coordinates == DiskPoint(0.0, length)


def test_new_length_follows_branching_factor():
    algo = LayoutAlgorithm(0.3)
    node = tree_from_mapping("n", {str(idx): {} for idx in range(5)})
    assert algo.new_length(node) == pytest.approx(_expected_length(0.3, 5))
    assert algo.new_length(TreeNode("leaf")) == pytest.approx(_expected_length(0.3, 0))


def test_spacing_coefficients_come_from_config():
    config = HyperTreeConfig(base_distance=0.25, length_ceiling=0.9, spacing_turns=10.0, spacing_offset=30.0)
    algo = LayoutAlgorithm(config=config)
    node = tree_from_mapping("n", {"a": {}, "b": {}, "c": {}})
    expected = 0.25 + (0.9 - 0.25) * math.cos(10.0 * math.pi / (6.0 + 30.0))
    assert algo.base == 0.25
    assert algo.new_length(node) == pytest.approx(expected)


def test_child_sectors_fill_the_parent_sector():
    tree = _balanced(tree_from_mapping("root", {"a": {"x": {}, "y": {}, "z": {}}, "b": {}, "c": {"w": {}}}))
    algo = LayoutAlgorithm()
    sectors = algo.child_sectors(tree, 0.4, 1.2)
    assert [child.name for child, _, _ in sectors] == ["a", "b", "c"]
    assert sum(width for _, _, width in sectors) == pytest.approx(1.2)

    # contiguous, no gaps or overlaps, starting at angle - width
    edge = 0.4 - 1.2
    for _, angle, width in sectors:
        assert angle - width == pytest.approx(edge)
        edge = angle + width
    assert edge == pytest.approx(0.4 + 1.2)


def test_heavier_subtrees_get_wider_sectors():
    tree = _balanced(tree_from_mapping("root", {"big": {str(i): {} for i in range(6)}, "small": {}}))
    sectors = LayoutAlgorithm().child_sectors(tree, 0.0, math.pi)
    widths = {child.name: width for child, _, width in sectors}
    assert widths["big"] > widths["small"]
    assert widths["big"] / widths["small"] == pytest.approx(1.0 + math.log(6.0))


def test_width_widens_when_seen_from_the_child():
    tree = _balanced(tree_from_mapping("root", {"a": {"b": {}}}))
    algo = LayoutAlgorithm(0.3)
    algo.layout(tree)
    child = tree.children[0]
    new_angle, new_width = algo.new_angle_and_width(child, 0.0, math.pi / 4.0, 0.3)
    assert new_width > math.pi / 4.0
    assert new_angle == pytest.approx(0.0, abs=1e-12)


def test_root_keeps_its_angle_and_width():
    root = TreeNode("root")
    assert LayoutAlgorithm().new_angle_and_width(root, 0.5, 1.0, 0.3) == (0.5, 1.0)


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_random_trees_stay_inside_the_disk(seed):
    tree = _balanced(random_tree(np.random.default_rng(seed)))
    LayoutAlgorithm().layout(tree)
    nodes = tree.preorder()
    assert len(nodes) > 1
    assert all(node.layout.coordinates.is_valid for node in nodes)
    assert all(not math.isnan(node.layout.coordinates.re) for node in nodes)


def _caterpillar(depth, fan_out):
    root = TreeNode("spine-0")
    spine = root
    for level in range(1, depth + 1):
        for idx in range(fan_out - 1):
            spine.add(TreeNode(f"leaf-{level}-{idx}"))
        spine = spine.add(TreeNode(f"spine-{level}"))
    return root


@pytest.mark.parametrize("depth", [30, 60])
def test_deep_wide_trees_stay_inside_the_disk(depth):
    tree = _balanced(_caterpillar(depth, 20))
    LayoutAlgorithm().layout(tree)

    for node in tree.preorder():
        assert node.layout.coordinates.is_valid, node.name


def test_boundary_node_keeps_the_parent_sector():
    root = TreeNode("root")
    child = root.add(TreeNode("child"))
    child.layout.coordinates = DiskPoint(1.0, 0.0)
    assert LayoutAlgorithm().new_angle_and_width(child, 0.0, 0.7, 0.3) == (0.0, 0.7)


@pytest.mark.parametrize("base_distance", [0.0, 1.2])
def test_base_distance_override_is_validated(base_distance):
    with pytest.raises(ValueError):
        LayoutAlgorithm(base_distance)


def test_base_distance_override_keeps_other_coefficients():
    config = HyperTreeConfig(length_ceiling=0.9)
    algorithm = LayoutAlgorithm(0.2, config=config)
    assert algorithm.base == 0.2
    assert algorithm.config.length_ceiling == 0.9
    assert config.base_distance == 0.3
