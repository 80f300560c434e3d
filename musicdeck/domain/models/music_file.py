"""
MusicFile Domain Model

Value records produced by library scans and path queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class MusicFile:
    """
    An audio file found on disk.

    ``folder`` is the containing directory relative to the scanned root,
    or None when the file sits directly in the root. It is never "".
    """

    path: str
    name: str
    extension: str
    folder: Optional[str] = None

    def __post_init__(self):
        if self.folder == "":
            object.__setattr__(self, "folder", None)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the wire shape expected by the front-end."""
        return {
            "path": self.path,
            "name": self.name,
            "extension": self.extension,
            "folder": self.folder,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MusicFile:
        return cls(
            path=data["path"],
            name=data["name"],
            extension=data.get("extension", ""),
            folder=data.get("folder"),
        )


@dataclass(frozen=True)
class FileStats:
    """Size, modification time and kind of a single path."""

    size: int
    mtime: str  # ISO-8601, UTC
    is_file: bool
    is_directory: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "mtime": self.mtime,
            "isFile": self.is_file,
            "isDirectory": self.is_directory,
        }


@dataclass(frozen=True)
class FolderSummary:
    """Per-folder outcome of a library-wide scan."""

    path: str
    count: int = 0
    exists: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "count": self.count, "exists": self.exists}


@dataclass
class LibraryScanResult:
    """Result of scanning every configured library folder."""

    files: List[MusicFile] = field(default_factory=list)
    folders: List[FolderSummary] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.files)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files": [f.to_dict() for f in self.files],
            "folders": [s.to_dict() for s in self.folders],
            "totalCount": self.total_count,
        }
