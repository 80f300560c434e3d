"""
Path Queries

Single-path checks used by the front-end to reconnect songs to files.
"""

from __future__ import annotations

import logging
import os
import stat
from datetime import datetime, timezone
from typing import Optional

from musicdeck.domain.models import FileStats

logger = logging.getLogger(__name__)


def file_exists(file_path: str) -> bool:
    """
    Check whether anything exists at ``file_path``.

    Symlinks are resolved, so a dangling link reports False. The answer is
    advisory and may be stale as soon as it is returned.
    """
    try:
        return os.path.exists(file_path)
    except (TypeError, ValueError):
        return False


def get_file_stats(file_path: str) -> Optional[FileStats]:
    """
    Get size, modification time and kind of ``file_path``.

    Args:
        file_path: Path to inspect (symlinks are followed)

    Returns:
        FileStats, or None when the path cannot be stat'ed.
    """
    try:
        st = os.stat(file_path)
    except (OSError, TypeError, ValueError) as e:
        logger.debug(f"Cannot stat {file_path}: {e}")
        return None

    mtime = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)
    return FileStats(
        size=st.st_size,
        mtime=mtime.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        is_file=stat.S_ISREG(st.st_mode),
        is_directory=stat.S_ISDIR(st.st_mode),
    )
