"""Shared fixtures."""

from pathlib import Path

import pytest

from musicdeck.core.config import ConfigManager


def touch(path: Path, data: bytes = b"") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture
def make_file():
    return touch


@pytest.fixture
def music_tree(tmp_path: Path) -> Path:
    """
    A small library::

        song.mp3
        notes.txt
        sub/dir/track.flac
        sub/cover.jpg
    """
    root = tmp_path / "music"
    touch(root / "song.mp3")
    touch(root / "notes.txt")
    touch(root / "sub" / "dir" / "track.flac")
    touch(root / "sub" / "cover.jpg")
    return root


@pytest.fixture
def config(tmp_path: Path) -> ConfigManager:
    manager = ConfigManager(config_dir=tmp_path / "config")
    manager.load()
    return manager


def pytest_sessionfinish(session, exitstatus):
    # test_tree_deeper_than_recursion_limit builds a directory tree deeper
    # than the recursion limit; pytest's tmp_path cleanup (shutil.rmtree)
    # recurses per level, so give it headroom once the tests are done.
    import sys

    sys.setrecursionlimit(max(sys.getrecursionlimit(), 20000))
