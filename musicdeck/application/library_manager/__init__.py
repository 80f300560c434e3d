"""
Library Manager Module

Provides library scanning and library folder management.
"""

from .scanner import (
    LibraryScanner,
    ScanOptions,
    is_audio_file,
    scan_music_folder,
)
from .library_service import LibraryService

__all__ = [
    # Scanner
    "LibraryScanner",
    "ScanOptions",
    "is_audio_file",
    "scan_music_folder",
    # Service
    "LibraryService",
]
