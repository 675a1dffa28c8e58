import pytest

from filetree.schemas.tree import Node
from filetree.services.aggregator import aggregate, count_leaves
from filetree.services.layout import iter_nodes


def make_node(name, *children):
    return Node(name=name, path=f"/{name}", is_dir=bool(children), children=list(children))


@pytest.fixture
def uneven_tree():
    """
    root
      docs/
        a
      src/
        core/
          b
          c
        d
      e
    """
    return make_node(
        "root",
        make_node("docs", make_node("a")),
        make_node(
            "src",
            make_node("core", make_node("b"), make_node("c")),
            make_node("d"),
        ),
        make_node("e"),
    )


class TestLeafCounts:
    """Tests for bottom-up leaf counting"""

    def test_single_node_counts_itself(self):
        """A root without children is one leaf on one level"""
        root = make_node("root")
        total_leaves, max_depth = aggregate(root)

        assert total_leaves == 1
        assert max_depth == 0
        assert root.leaf_count == 1

    def test_depth_one_tree(self):
        root = make_node("root", make_node("a"), make_node("b"))
        total_leaves, max_depth = aggregate(root)

        assert total_leaves == 2
        assert max_depth == 1
        assert [c.leaf_count for c in root.children] == [1, 1]

    def test_internal_count_is_sum_of_children(self, uneven_tree):
        """leaf_count of every directory equals the sum over its children"""
        aggregate(uneven_tree)

        for node, _ in iter_nodes(uneven_tree):
            if node.children:
                assert node.leaf_count == sum(c.leaf_count for c in node.children)
            else:
                assert node.leaf_count == 1

    def test_uneven_tree_totals(self, uneven_tree):
        total_leaves, max_depth = aggregate(uneven_tree)

        assert total_leaves == 5
        assert max_depth == 3  # root/src/core/b
        assert uneven_tree.children[1].leaf_count == 3


class TestDepthTracking:
    """Tests for max depth folding"""

    def test_subtree_depth_is_absolute(self, uneven_tree):
        """Depth passed in is the node's depth in the whole tree"""
        src = uneven_tree.children[1]
        leaves, max_depth = count_leaves(src, depth=1)

        assert leaves == 3
        assert max_depth == 3

    def test_deepest_branch_not_last(self):
        """Max depth comes from the deepest branch wherever it sits"""
        root = make_node(
            "root",
            make_node("deep", make_node("deeper", make_node("deepest"))),
            make_node("shallow"),
        )
        _, max_depth = aggregate(root)
        assert max_depth == 3

    def test_repeat_is_deterministic(self, uneven_tree):
        first = aggregate(uneven_tree)
        second = aggregate(uneven_tree)
        assert first == second


def test_is_leaf_follows_children(uneven_tree):
    """Files and empty directories are leaves, anything with children is not"""
    empty_dir = Node(name="empty", path="/empty", is_dir=True)

    assert empty_dir.is_leaf
    assert not uneven_tree.is_leaf
    assert uneven_tree.children[2].is_leaf
