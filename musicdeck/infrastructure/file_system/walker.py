"""
Directory Walker

Best-effort recursive traversal used by the library scanner. Entries that
cannot be listed or stat'ed are skipped instead of failing the walk.
"""

from __future__ import annotations

import logging
import os
from typing import Iterator, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)

# (st_dev, st_ino) of a directory
_DirKey = Tuple[int, int]


def walk_files(
    root: str,
    follow_symlinks: bool = True,
    confine_to_root: bool = False,
) -> Iterator[str]:
    """
    Yield the path of every regular file below ``root``.

    Paths are built by joining ``root`` as given with entry names, so they
    are never canonicalized. Entries of each directory are visited in name
    order, depth first. Depth is not limited by the interpreter's recursion
    limit.

    Args:
        root: Directory to walk
        follow_symlinks: Descend into linked directories and report linked files
        confine_to_root: Skip entries whose real path is outside ``root``'s real path

    Yields:
        str: File paths
    """
    try:
        st = os.stat(root) if follow_symlinks else os.lstat(root)
    except (OSError, ValueError) as e:
        logger.debug(f"Cannot stat walk root {root}: {e}")
        return

    entries = _list_dir(root)
    if entries is None:
        return

    boundary = os.path.realpath(root) if confine_to_root else None

    root_key = (st.st_dev, st.st_ino)
    # One frame per open directory: its remaining entries and its identity
    stack: List[Tuple[Iterator[os.DirEntry], _DirKey]] = [(iter(entries), root_key)]
    ancestors: Set[_DirKey] = {root_key}

    while stack:
        pending, key = stack[-1]
        entry = next(pending, None)
        if entry is None:
            stack.pop()
            ancestors.discard(key)
            continue

        try:
            is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
            is_file = not is_dir and entry.is_file(follow_symlinks=follow_symlinks)
        except OSError as e:
            logger.debug(f"Skipping {entry.path}: {e}")
            continue

        if boundary is not None and (is_dir or is_file):
            if not _is_within(entry.path, boundary):
                logger.debug(f"Skipping {entry.path}: outside {boundary}")
                continue

        if is_file:
            yield entry.path
        elif is_dir:
            try:
                child_st = entry.stat(follow_symlinks=follow_symlinks)
            except OSError as e:
                logger.debug(f"Skipping {entry.path}: {e}")
                continue

            child_key = (child_st.st_dev, child_st.st_ino)
            if child_key in ancestors:
                logger.debug(f"Skipping {entry.path}: filesystem loop")
                continue

            children = _list_dir(entry.path)
            if children is None:
                continue

            stack.append((iter(children), child_key))
            ancestors.add(child_key)


def _list_dir(directory: str) -> Optional[List[os.DirEntry]]:
    """Entries of directory sorted by name, or None if it cannot be listed."""
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.debug(f"Skipping unreadable directory {directory}: {e}")
        return None


def _is_within(path: str, boundary: str) -> bool:
    try:
        real = os.path.realpath(path)
        return os.path.commonpath([real, boundary]) == boundary
    except (OSError, ValueError):
        # Different drives, or the path vanished
        return False
