"""
Leaf-count and depth aggregation.

Leaf counts are written bottom-up onto each node; the deepest level
reached is folded back up through return values.
"""

from typing import Tuple

from filetree.schemas.tree import Node


def count_leaves(node: Node, depth: int = 0) -> Tuple[int, int]:
    """
    Set leaf_count on node and every descendant.

    Args:
        node: Subtree root
        depth: Depth of node in the whole tree (root = 0)

    Returns:
        Tuple of (leaf count of node, deepest depth inside the subtree)
    """
    if node.is_leaf:
        node.leaf_count = 1
        return 1, depth

    total = 0
    max_depth = depth
    for child in node.children:
        leaves, child_depth = count_leaves(child, depth + 1)
        total += leaves
        max_depth = max(max_depth, child_depth)

    node.leaf_count = total
    return total, max_depth


def aggregate(root: Node) -> Tuple[int, int]:
    """
    Aggregate leaf counts over the whole tree.

    Returns:
        Tuple of (total leaves, max depth); total levels is max depth + 1
    """
    return count_leaves(root, 0)
