import dataclasses
import json

import pytest

from musicdeck.domain.models import FolderSummary, LibraryScanResult, MusicFile


def test_wire_shape_keeps_null_folder():
    music_file = MusicFile(path="/m/song.mp3", name="song.mp3", extension="mp3")
    assert json.loads(json.dumps(music_file.to_dict())) == {
        "path": "/m/song.mp3",
        "name": "song.mp3",
        "extension": "mp3",
        "folder": None,
    }


def test_from_dict_without_folder():
    music_file = MusicFile.from_dict({"path": "/m/a.ogg", "name": "a.ogg", "extension": "ogg"})
    assert music_file.folder is None


def test_empty_folder_normalized():
    assert MusicFile(path="a.mp3", name="a.mp3", extension="mp3", folder="").folder is None


def test_immutable():
    music_file = MusicFile(path="a.mp3", name="a.mp3", extension="mp3")
    with pytest.raises(dataclasses.FrozenInstanceError):
        music_file.name = "b.mp3"


def test_library_scan_result_dict():
    result = LibraryScanResult(
        files=[MusicFile(path="/m/a.mp3", name="a.mp3", extension="mp3")],
        folders=[FolderSummary(path="/m", count=1), FolderSummary(path="/gone", exists=False)],
    )
    data = result.to_dict()
    assert data["totalCount"] == 1
    assert data["folders"][1] == {"path": "/gone", "count": 0, "exists": False}
