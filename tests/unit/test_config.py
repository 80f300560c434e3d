import json

from musicdeck.application.library_manager import ScanOptions
from musicdeck.core.config import DEFAULT_CONFIG, ConfigManager, get_config_dir


def test_defaults_without_file(tmp_path):
    manager = ConfigManager(config_dir=tmp_path)
    assert manager.load()
    assert manager.get("library.paths") == []
    assert manager.get("scanner.follow_symlinks") is True
    assert manager.get("scanner.missing", "fallback") == "fallback"
    # loading never writes
    assert not manager.config_path.exists()


def test_set_and_reload(tmp_path):
    manager = ConfigManager(config_dir=tmp_path / "cfg")
    manager.set("scanner.confine_to_root", True)

    reloaded = ConfigManager(config_dir=tmp_path / "cfg")
    reloaded.load()
    assert reloaded.get("scanner.confine_to_root") is True
    # untouched defaults survive the merge
    assert reloaded.get("scanner.follow_symlinks") is True


def test_invalid_json_falls_back(tmp_path):
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    manager = ConfigManager(config_dir=tmp_path)

    assert manager.load() is False
    assert manager.get_all() == DEFAULT_CONFIG


def test_non_object_json_falls_back(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps([1, 2]), encoding="utf-8")
    manager = ConfigManager(config_dir=tmp_path)

    assert manager.load() is False
    assert manager.get("library.paths") == []


def test_reset(tmp_path):
    manager = ConfigManager(config_dir=tmp_path)
    manager.set("library.paths", ["/music"], save=False)
    manager.reset("library.paths", save=False)
    assert manager.get("library.paths") == []


def test_scan_options_from_config(config):
    config.set("scanner.follow_symlinks", False, save=False)
    options = ScanOptions.from_config(config)
    assert options == ScanOptions(follow_symlinks=False, confine_to_root=False)


def test_config_dir_is_per_user():
    assert get_config_dir().name.lower() == "musicdeck"
