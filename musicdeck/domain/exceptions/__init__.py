"""
Domain Exceptions Module

Contains domain-specific exceptions:
- FolderScanError: A folder cannot be scanned at all
- FolderNotFoundError: Nothing exists at the folder path
- NotAFolderError: The folder path is not a directory
- LibraryFolderError: Invalid change to the library folder list
"""

from __future__ import annotations


class MusicDeckError(Exception):
    """Base class for MusicDeck errors."""
    pass


class FolderScanError(MusicDeckError):
    """Raised when a scan cannot start; the message names the path."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class FolderNotFoundError(FolderScanError):
    def __init__(self, path: str):
        super().__init__(f"Folder does not exist: {path}", path)


class NotAFolderError(FolderScanError):
    def __init__(self, path: str):
        super().__init__(f"Path is not a directory: {path}", path)


class LibraryFolderError(MusicDeckError):
    """Raised for duplicate or unknown library folders."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


__all__ = [
    "MusicDeckError",
    "FolderScanError",
    "FolderNotFoundError",
    "NotAFolderError",
    "LibraryFolderError",
]
