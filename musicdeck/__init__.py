"""
MusicDeck - Desktop Music Player Backend

Filesystem side of the MusicDeck desktop player: discovers audio files in
user-selected folders and answers simple questions about paths so the
front-end can reconnect songs to files on disk.

Architecture:
- UI Layer: PySide6 background workers used by the GUI
- Application Layer: Library scanning and library folder management
- Domain Layer: Value records and exceptions
- Infrastructure Layer: Filesystem traversal and path checks
"""

from .application.library_manager import (
    is_audio_file,
    scan_music_folder,
)
from .core.constants import AUDIO_EXTENSIONS
from .domain.exceptions import (
    FolderNotFoundError,
    FolderScanError,
    LibraryFolderError,
    MusicDeckError,
    NotAFolderError,
)
from .domain.models import FileStats, MusicFile
from .infrastructure.file_system import file_exists, get_file_stats

__version__ = "1.0.0"
__author__ = "MusicDeck Team"
__description__ = "Desktop music player backend"

__all__ = [
    "AUDIO_EXTENSIONS",
    "FileStats",
    "FolderNotFoundError",
    "FolderScanError",
    "LibraryFolderError",
    "MusicDeckError",
    "MusicFile",
    "NotAFolderError",
    "file_exists",
    "get_file_stats",
    "is_audio_file",
    "scan_music_folder",
]
