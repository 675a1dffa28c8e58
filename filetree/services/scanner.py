"""
Directory scanning service.

Builds the in-memory node tree for a root path. Entries are kept in the
order os.scandir yields them; that order decides left-to-right placement
in the layout, so nothing here sorts.
"""

import errno
import logging
import os
from typing import List, Optional

from filetree.schemas.tree import Node
from filetree.services.errors import EntryScanError, InvalidRootError, ScanError

logger = logging.getLogger(__name__)


def _display(text: str) -> str:
    """
    Make a filesystem string safe to serialize.

    Undecodable bytes arrive from os.scandir as lone surrogates, which JSON
    cannot carry. They are rendered as backslash escapes instead.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def _node_name(path: str) -> str:
    # "/" and drive roots have no final component
    return _display(os.path.basename(path.rstrip(os.sep)) or path)


def _build_node(
    path: str,
    is_dir: bool,
    follow_symlinks: bool,
    ancestors: frozenset,
    skipped: List[str],
) -> Node:
    """
    Build a node and, for directories, its subtree.

    Raises:
        OSError: If this directory cannot be listed. The caller decides
            whether that skips the entry or fails the scan.
    """
    node = Node(name=_node_name(path), path=_display(path), is_dir=is_dir)
    if not is_dir:
        return node

    if follow_symlinks:
        real_path = os.path.realpath(path)
        if real_path in ancestors:
            logger.warning(f"Directory cycle at {path} (-> {real_path}), not descending")
            return node
        ancestors = ancestors | {real_path}

    with os.scandir(path) as it:
        entries = list(it)

    for entry in entries:
        try:
            child_is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
            node.children.append(
                _build_node(entry.path, child_is_dir, follow_symlinks, ancestors, skipped)
            )
        except OSError as e:
            error = EntryScanError(_display(entry.path), e)
            logger.warning(f"Skipping entry: {error}")
            skipped.append(error.path)

    return node


def build_tree(
    path: str,
    follow_symlinks: bool = False,
    skipped: Optional[List[str]] = None,
) -> Node:
    """
    Recursively build the tree rooted at path.

    A plain file gives a single leaf. Unreadable entries below the root
    are logged and left out of the tree.

    Args:
        path: File or directory to scan
        follow_symlinks: Descend into symlinked directories
        skipped: Optional list that collects paths of omitted entries

    Returns:
        Node: Root of the scanned tree

    Raises:
        ScanError: If path does not exist or cannot be listed
    """
    if skipped is None:
        skipped = []

    try:
        if not os.path.lexists(path):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        is_dir = os.path.isdir(path) and (follow_symlinks or not os.path.islink(path))
        return _build_node(path, is_dir, follow_symlinks, frozenset(), skipped)
    except OSError as e:
        raise ScanError(_display(path), "Cannot scan", e) from e


def scan_root(
    path: str,
    follow_symlinks: bool = False,
    skipped: Optional[List[str]] = None,
) -> Node:
    """
    Scan a root directory given as an absolute or working-directory-relative path.

    Args:
        path: Root directory
        follow_symlinks: Descend into symlinked directories
        skipped: Optional list that collects paths of omitted entries

    Returns:
        Node: Root of the scanned tree

    Raises:
        InvalidRootError: If path is missing or not a directory
        ScanError: If the root directory itself cannot be listed
    """
    root_path = os.path.abspath(path)

    if not os.path.exists(root_path):
        raise InvalidRootError(_display(root_path), missing=True)

    if not os.path.isdir(root_path):
        raise InvalidRootError(_display(root_path), missing=False)

    if skipped is None:
        skipped = []

    # The root is always descended, even when given as a symlink
    try:
        return _build_node(root_path, True, follow_symlinks, frozenset(), skipped)
    except OSError as e:
        raise ScanError(_display(root_path), "Cannot scan", e) from e
