"""
Domain Models Module

Contains all domain models for MusicDeck.
"""

from .music_file import (
    FileStats,
    FolderSummary,
    LibraryScanResult,
    MusicFile,
)

__all__ = [
    "MusicFile",
    "FileStats",
    "FolderSummary",
    "LibraryScanResult",
]
