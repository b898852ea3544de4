"""Tests for configuration persistence."""

import json

import pytest

from services.config_manager import ConfigManager
from services.history_store import HistoryStore


def test_defaults_when_no_file(config_dir):
    manager = ConfigManager.get_instance()

    assert manager.history_max_depth() == 100
    assert manager.diff_context_size() == 2
    assert manager.config_file == config_dir / "config.json"


def test_save_and_reload(config_dir):
    manager = ConfigManager.get_instance()
    manager.set("diff", {"contextSize": 5})

    ConfigManager.reset_instance()
    reloaded = ConfigManager.get_instance()

    assert reloaded.diff_context_size() == 5
    assert json.loads((config_dir / "config.json").read_text())["diff"]["contextSize"] == 5


def test_partial_file_is_layered_over_defaults(config_dir):
    (config_dir / "config.json").write_text(json.dumps({"history": {"maxDepth": 0}}))

    manager = ConfigManager.get_instance()

    assert manager.history_max_depth() is None
    assert manager.get_config()["server"]["port"] == 8000


def test_corrupt_file_falls_back_to_defaults(config_dir):
    (config_dir / "config.json").write_text("{not json")

    manager = ConfigManager.get_instance()

    assert manager.get_config()["history"]["maxDepth"] == 100


def test_explicit_directory(tmp_path):
    manager = ConfigManager(config_dir=tmp_path / "custom")

    assert manager.config_file.parent == tmp_path / "custom"


@pytest.mark.parametrize("depth", [-1, True, "ten", 2.5])
def test_invalid_depth_in_file_falls_back_to_default(config_dir, depth):
    (config_dir / "config.json").write_text(json.dumps({"history": {"maxDepth": depth}}))

    manager = ConfigManager.get_instance()

    assert manager.history_max_depth() == 100


def test_negative_depth_in_file_keeps_undo_working(config_dir):
    (config_dir / "config.json").write_text(json.dumps({"history": {"maxDepth": -1}}))
    history = HistoryStore(max_depth=ConfigManager.get_instance().history_max_depth())

    for text in ["one", "two"]:
        history.set_content(text)
        history.commit()

    assert history.undo().content == "one"
