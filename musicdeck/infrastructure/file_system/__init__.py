"""
File System Module

Contains file system operations:
- walk_files: Best-effort recursive file discovery
- file_exists: Existence check for a single path
- get_file_stats: Size / mtime / kind of a single path
"""

from .paths import file_exists, get_file_stats
from .walker import walk_files

__all__ = [
    "walk_files",
    "file_exists",
    "get_file_stats",
]
