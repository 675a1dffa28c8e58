"""
Nearest-node lookup for point selection.

A linear scan over every node. A single directory tree is small enough
that no spatial index is kept.
"""

import logging

from filetree.schemas.tree import Node, Point
from filetree.services.errors import LayoutError

logger = logging.getLogger(__name__)


def squared_distance(node: Node, point: Point) -> float:
    dx = node.x - point.x
    dy = node.y - point.y
    return dx * dx + dy * dy


def find_nearest(root: Node, point: Point) -> Node:
    """
    Find the node closest to point.

    Nodes are visited in traversal order (a node before its children,
    children left to right). On equal distance the first visited node
    wins.

    Args:
        root: Laid-out tree root
        point: Query point in world coordinates

    Returns:
        Node: Nearest node (the root for a single-node tree)

    Raises:
        LayoutError: If the tree has not been laid out
    """
    nearest = root
    min_dist = float("inf")

    stack = [root]
    while stack:
        node = stack.pop()
        if node.x is None or node.y is None:
            raise LayoutError(f"Node has no position: {node.path}")

        dist = squared_distance(node, point)
        if dist < min_dist:
            min_dist = dist
            nearest = node

        stack.extend(reversed(node.children))

    logger.debug(f"Nearest to ({point.x}, {point.y}): {nearest.path} (d2={min_dist})")
    return nearest
