"""
Library Scanner Module

Finds audio files below a folder and describes each one as a MusicFile.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import PurePath
from typing import FrozenSet, List, Optional, Union

from musicdeck.core.config import ConfigManager
from musicdeck.core.constants import AUDIO_EXTENSIONS
from musicdeck.domain.exceptions import FolderNotFoundError, NotAFolderError
from musicdeck.domain.models import MusicFile
from musicdeck.infrastructure.file_system import walk_files

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _as_text(value: str) -> Optional[str]:
    """Return value if it is valid Unicode text, None for undecodable names."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        # os functions smuggle undecodable bytes through as lone surrogates
        return None
    return value


def is_audio_file(path: PathLike, formats: FrozenSet[str] = AUDIO_EXTENSIONS) -> bool:
    """Check if a path has a recognized audio extension (case-insensitive)."""
    suffix = PurePath(path).suffix
    if len(suffix) < 2:
        return False
    extension = _as_text(suffix[1:])
    return extension is not None and extension.lower() in formats


@dataclass(frozen=True)
class ScanOptions:
    """Traversal policy for a scan."""

    follow_symlinks: bool = True
    confine_to_root: bool = False

    @classmethod
    def from_config(cls, config: ConfigManager) -> ScanOptions:
        return cls(
            follow_symlinks=bool(config.get("scanner.follow_symlinks", True)),
            confine_to_root=bool(config.get("scanner.confine_to_root", False)),
        )


class LibraryScanner:
    """
    Scans a folder tree for audio files.

    Scanning is best effort: anything below the root that cannot be read is
    left out of the result. Only a missing root or a root that is not a
    directory stops the scan.
    """

    def __init__(
        self,
        options: Optional[ScanOptions] = None,
        supported_formats: Optional[FrozenSet[str]] = None,
    ):
        """
        Initialize the scanner.

        Args:
            options: Traversal policy, defaults to following links without bounds
            supported_formats: Lowercase extensions without dots
        """
        self.options = options or ScanOptions()
        self.supported_formats = supported_formats or AUDIO_EXTENSIONS

    def scan(self, folder_path: str) -> List[MusicFile]:
        """
        Scan a directory for music files.

        Args:
            folder_path: Root folder selected by the user

        Returns:
            List[MusicFile]: Every matched file, possibly empty

        Raises:
            FolderNotFoundError: Nothing exists at folder_path
            NotAFolderError: folder_path is not a directory
        """
        root = os.fspath(folder_path)

        if not os.path.exists(root):
            logger.warning(f"Folder does not exist: {root}")
            raise FolderNotFoundError(root)

        if not os.path.isdir(root):
            logger.warning(f"Path is not a directory: {root}")
            raise NotAFolderError(root)

        root_pure = PurePath(root)
        music_files: List[MusicFile] = []

        for file_path in walk_files(
            root,
            follow_symlinks=self.options.follow_symlinks,
            confine_to_root=self.options.confine_to_root,
        ):
            if not is_audio_file(file_path, self.supported_formats):
                continue

            music_file = self._build_music_file(file_path, root_pure)
            if music_file is not None:
                music_files.append(music_file)

        logger.info(f"Scanned {root}: {len(music_files)} audio files")
        return music_files

    def _build_music_file(self, file_path: str, root: PurePath) -> Optional[MusicFile]:
        pure = PurePath(file_path)

        name = _as_text(pure.name)
        if name is None:
            logger.debug(f"Skipping file with undecodable name in {pure.parent}")
            return None

        return MusicFile(
            path=file_path,
            name=name,
            extension=pure.suffix[1:],
            folder=self._relative_folder(pure.parent, root),
        )

    @staticmethod
    def _relative_folder(parent: PurePath, root: PurePath) -> Optional[str]:
        """Containing folder relative to root; None for the root itself."""
        try:
            relative = parent.relative_to(root)
        except ValueError:
            return None

        if not relative.parts:
            return None
        return _as_text(str(relative))


def scan_music_folder(
    folder_path: str,
    options: Optional[ScanOptions] = None,
) -> List[MusicFile]:
    """
    Scan a folder for music files.

    Args:
        folder_path: Root folder to scan
        options: Traversal policy (defaults follow symlinks)

    Returns:
        List[MusicFile]: Matched files

    Raises:
        FolderScanError: The folder is missing or not a directory
    """
    return LibraryScanner(options).scan(folder_path)
