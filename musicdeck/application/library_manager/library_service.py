"""
Library Service Module

Keeps the list of library folders in configuration and scans them.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, List, Optional

from musicdeck.core.config import ConfigManager, get_config_manager
from musicdeck.domain.exceptions import (
    FolderNotFoundError,
    FolderScanError,
    LibraryFolderError,
)
from musicdeck.domain.models import FolderSummary, LibraryScanResult, MusicFile

from .scanner import LibraryScanner, ScanOptions

logger = logging.getLogger(__name__)

LIBRARY_PATHS_KEY = "library.paths"


class LibraryService:
    """
    High-level library operations used by the UI.

    Folders are stored as given by the user; duplicates are detected by
    exact string match.
    """

    def __init__(self, config: Optional[ConfigManager] = None):
        self.config = config or get_config_manager()

    def get_folders(self) -> List[str]:
        """Get all library folders."""
        return list(self.config.get(LIBRARY_PATHS_KEY, []) or [])

    def add_folder(self, folder_path: str) -> List[str]:
        """
        Add a folder to the library.

        Args:
            folder_path: Folder selected by the user

        Returns:
            List[str]: Updated folder list

        Raises:
            FolderNotFoundError: The folder does not exist
            LibraryFolderError: The folder is already in the library
        """
        if not os.path.exists(folder_path):
            raise FolderNotFoundError(folder_path)

        folders = self.get_folders()
        if folder_path in folders:
            raise LibraryFolderError("Folder already in library", folder_path)

        folders.append(folder_path)
        self.config.set(LIBRARY_PATHS_KEY, folders)
        logger.info(f"Added library folder: {folder_path}")
        return folders

    def remove_folder(self, folder_path: str) -> List[str]:
        """
        Remove a folder from the library.

        Raises:
            LibraryFolderError: The folder is not in the library
        """
        folders = self.get_folders()
        if folder_path not in folders:
            raise LibraryFolderError("Folder not in library", folder_path)

        folders.remove(folder_path)
        self.config.set(LIBRARY_PATHS_KEY, folders)
        logger.info(f"Removed library folder: {folder_path}")
        return folders

    def create_scanner(self) -> LibraryScanner:
        return LibraryScanner(ScanOptions.from_config(self.config))

    def scan_folder(self, folder_path: str) -> List[MusicFile]:
        """Scan one folder using the configured traversal policy."""
        return self.create_scanner().scan(folder_path)

    def scan_all_folders(
        self,
        progress_callback: Optional[Callable[[int, int, str], None]] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> LibraryScanResult:
        """
        Scan every library folder.

        Folders that are missing or no longer directories are reported with
        ``exists=False`` instead of failing the whole scan.

        Args:
            progress_callback: Called with (index, total, folder) before each folder
            should_stop: Checked before each folder; True ends the scan early

        Returns:
            LibraryScanResult: Combined files and per-folder counts
        """
        scanner = self.create_scanner()
        result = LibraryScanResult()
        folders = self.get_folders()

        for i, folder_path in enumerate(folders, start=1):
            if should_stop and should_stop():
                logger.info("Library scan stopped")
                break

            if progress_callback:
                progress_callback(i, len(folders), folder_path)

            try:
                files = scanner.scan(folder_path)
            except FolderScanError as e:
                logger.warning(f"Skipping library folder: {e}")
                result.folders.append(FolderSummary(path=folder_path, count=0, exists=False))
                continue

            result.files.extend(files)
            result.folders.append(FolderSummary(path=folder_path, count=len(files), exists=True))

        logger.info(
            f"Library scan complete: {result.total_count} files in {len(result.folders)} folders"
        )
        return result
