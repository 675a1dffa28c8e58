"""
Tree session management service.

Runs scan → aggregate → layout for a root directory and keeps the
resulting layout for selection queries.
"""

import logging
import time
from datetime import datetime, timezone
from typing import List, Optional

from filetree.config import Settings, get_settings
from filetree.schemas.events import NodeSelected
from filetree.schemas.tree import Node, Point, TreeLayout
from filetree.services.aggregator import aggregate
from filetree.services.errors import LayoutError
from filetree.services.layout import (
    build_layout_space,
    compute_y_spacing,
    layout_tree,
    measure_slot_width,
    monospace_measure,
)
from filetree.services.scanner import scan_root
from filetree.services.spatial import find_nearest

logger = logging.getLogger(__name__)


def load_tree_layout(
    path: str,
    y_scale: float = 1.0,
    draw_labels: bool = False,
    settings: Optional[Settings] = None,
) -> TreeLayout:
    """
    Scan a directory and return its tree with positions.

    Args:
        path: Root directory
        y_scale: Vertical scale factor, must be positive
        draw_labels: Size slots to fit every label
        settings: Settings override (defaults to process settings)

    Returns:
        TreeLayout with positions calculated

    Raises:
        InvalidRootError: If path is missing or not a directory
        LayoutError: If y_scale is not positive
    """
    settings = settings or get_settings()
    start_time = time.time()

    skipped: List[str] = []
    root = scan_root(path, follow_symlinks=settings.follow_symlinks, skipped=skipped)

    total_leaves, max_depth = aggregate(root)
    total_levels = max_depth + 1

    measure = monospace_measure(settings.char_width) if draw_labels else None
    slot_width = measure_slot_width(root, measure, settings.horizontal_padding)
    y_spacing = compute_y_spacing(y_scale, settings.viewport_height, total_levels)

    layout_tree(root, total_leaves, total_levels, slot_width, y_spacing)

    scan_time = (time.time() - start_time) * 1000  # ms
    logger.info(
        f"Tree loaded for {root.path}: {total_leaves} leaves, {total_levels} levels, "
        f"{len(skipped)} skipped in {scan_time:.2f}ms"
    )

    return TreeLayout(
        root=root.path,
        tree=root,
        space=build_layout_space(
            total_leaves, total_levels, slot_width, y_spacing, settings.viewport_height
        ),
        skipped=skipped,
        scanned_at=datetime.now(timezone.utc),
    )


class TreeService:
    """
    Service holding the currently displayed tree.

    This service:
    - Loads and lays out a tree for a root directory
    - Answers nearest-node queries against the loaded layout
    - Remembers the last selected node
    """

    def __init__(self):
        self.layout: Optional[TreeLayout] = None
        self.selected: Optional[Node] = None

    def set_layout(self, layout: TreeLayout):
        """Replace the loaded layout and clear the selection"""
        self.layout = layout
        self.selected = None

    def load(self, path: str, y_scale: float = 1.0, draw_labels: bool = False) -> TreeLayout:
        """
        Load a new tree and make it current.

        Args:
            path: Root directory
            y_scale: Vertical scale factor
            draw_labels: Size slots to fit every label

        Returns:
            TreeLayout that is now current
        """
        layout = load_tree_layout(path, y_scale=y_scale, draw_labels=draw_labels)
        self.set_layout(layout)
        return layout

    def select(self, point: Point) -> NodeSelected:
        """
        Select the node nearest to a world-space point.

        Args:
            point: Query point in world coordinates

        Returns:
            NodeSelected event for the chosen node

        Raises:
            LayoutError: If no tree is loaded
        """
        if self.layout is None:
            raise LayoutError("No tree loaded")

        start_time = time.time()
        node = find_nearest(self.layout.tree, point)
        self.selected = node

        process_time = (time.time() - start_time) * 1000  # ms
        logger.info(f"Selected {node.path} in {process_time:.2f}ms")

        return NodeSelected(
            name=node.name,
            path=node.path,
            is_dir=node.is_dir,
            position=node.position,
        )

    def clear(self):
        self.layout = None
        self.selected = None


# Global tree service instance
tree_service = TreeService()
