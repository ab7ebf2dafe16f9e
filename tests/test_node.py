import gc
import math

from hyperbolic_tree import DiskPoint, Isometry, TreeNode, tree_from_mapping


def _sample_tree():
    return tree_from_mapping(
        "A",
        {
            "B": {"D": {}, "E": {}},
            "C": {"F": {"G": {}}},
        },
    )


def _names(nodes):
    return [node.name for node in nodes]


def test_add_sets_parent_back_reference():
    root = TreeNode("root")
    child = root.add(TreeNode("child"))
    assert root.children == [child]
    assert child.parent is root
    assert root.parent is None


def test_preorder_and_postorder_traversals():
    tree = _sample_tree()
    pre, post = [], []
    tree.traverse(pre.append)
    tree.dfs(post.append)
    assert _names(pre) == ["A", "B", "D", "E", "C", "F", "G"]
    assert _names(post) == ["D", "E", "B", "G", "F", "C", "A"]


def test_search_returns_first_preorder_match():
    tree = _sample_tree()
    found = tree.search(lambda node: node.is_leaf)
    assert found is not None and found.name == "D"
    assert tree.search(lambda node: node.name == "G").parent.name == "F"
    assert tree.search(lambda node: node.name == "missing") is None


def test_search_does_not_prune_non_matching_subtrees():
    tree = _sample_tree()
    visited = []

    def predicate(node):
        visited.append(node.name)
        return node.name == "G"

    assert tree.search(predicate).name == "G"
    assert visited == ["A", "B", "D", "E", "C", "F", "G"]


def test_balance_leaf_weight_is_one():
    leaf = TreeNode("leaf")
    leaf.balance()
    assert leaf.layout.weight == 1.0
    assert leaf.layout.global_weight == 0.0


def test_balance_branch_uses_log_damping():
    tree = _sample_tree()
    tree.dfs(lambda node: node.balance())
    b = tree.children[0]
    c = tree.children[1]
    assert b.layout.global_weight == 2.0
    assert math.isclose(b.layout.weight, 1.0 + math.log(2.0))
    assert c.layout.global_weight == 1.0 + math.log(1.0)
    assert math.isclose(tree.layout.global_weight, b.layout.weight + c.layout.weight)
    assert math.isclose(tree.layout.weight, 1.0 + math.log(tree.layout.global_weight))


def test_link_render_siblings_chains_previous_child():
    root = tree_from_mapping("root", {"a": {}, "b": {}, "c": {}, "d": {}})
    root.link_render_siblings()
    a, b, c, d = root.children
    assert a.sibling is None
    assert b.sibling is a
    assert c.sibling is b
    assert d.sibling is c
    assert root.sibling is None


def test_back_references_do_not_keep_parent_alive():
    root = TreeNode("root")
    child = root.add(TreeNode("child"))
    root.link_render_siblings()
    del root
    gc.collect()
    assert child.parent is None


def test_restore_and_commit_cycle():
    root = TreeNode("root")
    child = root.add(TreeNode("child"))
    child.layout.coordinates = DiskPoint(0.3, 0.0)
    root.traverse(lambda node: node.restore())
    assert root.edge is None
    assert child.screen.coordinates == DiskPoint(0.3, 0.0)
    assert child.screen.old_coordinates == DiskPoint(0.3, 0.0)
    assert child.edge is not None

    shift = Isometry.from_translation(DiskPoint(0.1, 0.1))
    root.traverse(lambda node: node.apply(shift))
    assert root.screen.coordinates == DiskPoint(0.1, 0.1)
    assert root.screen.old_coordinates == DiskPoint(0.0, 0.0)
    assert child.edge.a == DiskPoint(0.1, 0.1)
    assert child.edge.b == child.screen.coordinates

    root.traverse(lambda node: node.commit())
    assert child.screen.old_coordinates == child.screen.coordinates


def test_translate_moves_from_committed_position():
    root = TreeNode("root")
    child = root.add(TreeNode("child"))
    child.layout.coordinates = DiskPoint(0.3, 0.0)
    root.traverse(lambda node: node.restore())
    t = DiskPoint(0.0, 0.2)
    root.traverse(lambda node: node.translate(t))
    root.traverse(lambda node: node.translate(t))
    assert child.screen.coordinates == DiskPoint(0.3, 0.0).translate(t)


def test_preorder_lists_the_subtree():
    tree = _sample_tree()
    assert _names(tree.preorder()) == ["A", "B", "D", "E", "C", "F", "G"]
    assert _names(tree.children[1].preorder()) == ["C", "F", "G"]
