"""
Layout calculation service for the file tree diagram.

Every leaf gets a slot of equal width along the x axis, in traversal
order. Depth maps to y. A directory sits halfway between its first and
last child, which keeps lopsided subtrees visually balanced.
"""

from typing import Callable, Iterator, Optional, Tuple

from filetree.schemas.tree import LayoutSpace, Node
from filetree.services.errors import LayoutError

# Extra room added to the widest label so neighbouring labels never touch
HORIZONTAL_PADDING = 10.0

Measure = Callable[[str], float]


def monospace_measure(char_width: float) -> Measure:
    """
    Label width estimate for a fixed-width font.

    Args:
        char_width: Width of one glyph in world units

    Returns:
        Measure: Function mapping a label to its width
    """
    def measure(name: str) -> float:
        return len(name) * char_width

    return measure


def iter_nodes(root: Node) -> Iterator[Tuple[Node, int]]:
    """
    Yield (node, depth) for every node in traversal order.

    Pre-order: a node comes before its children, children left to right.
    """
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        for child in reversed(node.children):
            stack.append((child, depth + 1))


def iter_leaves(root: Node) -> Iterator[Node]:
    """Yield the leaves left to right"""
    for node, _ in iter_nodes(root):
        if node.is_leaf:
            yield node


def iter_edges(root: Node) -> Iterator[Tuple[Node, Node]]:
    """Yield (parent, child) pairs, one per line segment the renderer draws"""
    for node, _ in iter_nodes(root):
        for child in node.children:
            yield node, child


def measure_slot_width(
    root: Node,
    measure: Optional[Measure] = None,
    padding: float = HORIZONTAL_PADDING,
) -> float:
    """
    Calculate the horizontal slot reserved for each leaf.

    Formula: slot_width = max(measure(name) over all nodes) + padding

    Without a measure function (labels not drawn) the slot is just the
    padding.

    Args:
        root: Tree root
        measure: Label width function supplied by the renderer
        padding: Fixed horizontal padding, must be positive

    Returns:
        float: Slot width
    """
    if padding <= 0:
        raise LayoutError(f"Horizontal padding must be positive, got {padding}")

    widest = 0.0
    if measure is not None:
        for node, _ in iter_nodes(root):
            widest = max(widest, measure(node.name))

    return widest + padding


def compute_y_spacing(y_scale: float, viewport_height: float, total_levels: int) -> float:
    """
    Calculate the vertical distance between depth levels.

    Formula: y_spacing = y_scale * viewport_height / total_levels

    Args:
        y_scale: Caller-supplied vertical scale factor, must be positive
        viewport_height: Renderer viewport height, must be positive
        total_levels: Number of depth levels (clamped to at least 1)

    Returns:
        float: Vertical spacing per level
    """
    if y_scale <= 0:
        raise LayoutError(f"Y scale must be positive, got {y_scale}")
    if viewport_height <= 0:
        raise LayoutError(f"Viewport height must be positive, got {viewport_height}")

    return y_scale * viewport_height / max(total_levels, 1)


def assign_positions(
    node: Node,
    depth: int,
    leaf_index: int,
    slot_width: float,
    y_spacing: float,
) -> int:
    """
    Position node and its subtree, depth-first and left to right.

    Leaves: x = (leaf_index + 0.5) * slot_width, centred in their slot.
    Directories: x = midpoint of first and last child.
    Everything: y = depth * y_spacing.

    Args:
        node: Subtree root
        depth: Depth of node (root = 0)
        leaf_index: Number of leaves already placed to the left
        slot_width: Horizontal space per leaf
        y_spacing: Vertical space per level

    Returns:
        int: Leaf index after this subtree
    """
    node.y = depth * y_spacing

    if node.is_leaf:
        node.x = (leaf_index + 0.5) * slot_width
        return leaf_index + 1

    for child in node.children:
        leaf_index = assign_positions(child, depth + 1, leaf_index, slot_width, y_spacing)

    node.x = (node.children[0].x + node.children[-1].x) / 2
    return leaf_index


def layout_tree(
    root: Node,
    total_leaves: int,
    total_levels: int,
    slot_width: float,
    y_spacing: float,
) -> Node:
    """
    Assign x/y to every node in the tree.

    Args:
        root: Tree root with leaf counts aggregated
        total_leaves: Leaves in the whole tree
        total_levels: Depth levels in the whole tree
        slot_width: Horizontal space per leaf, must be positive
        y_spacing: Vertical space per level, must be positive

    Returns:
        Node: The same root, positioned
    """
    if slot_width <= 0:
        raise LayoutError(f"Slot width must be positive, got {slot_width}")
    if y_spacing <= 0:
        raise LayoutError(f"Y spacing must be positive, got {y_spacing}")

    placed = assign_positions(root, 0, 0, slot_width, y_spacing)

    # A bare root still occupies one slot and one level
    if placed != max(total_leaves, 1):
        raise LayoutError(f"Placed {placed} leaves, expected {total_leaves}")

    return root


def build_layout_space(
    total_leaves: int,
    total_levels: int,
    slot_width: float,
    y_spacing: float,
    viewport_height: float,
) -> LayoutSpace:
    """Bundle the layout constants, clamping degenerate counts to 1"""
    return LayoutSpace(
        slot_width=slot_width,
        y_spacing=y_spacing,
        total_leaves=max(total_leaves, 1),
        total_levels=max(total_levels, 1),
        viewport_height=viewport_height,
    )
