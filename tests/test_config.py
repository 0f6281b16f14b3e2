import os
import tempfile

import pytest

from turnkeeper.config import Config, load_config, save_config


def test_save_and_load_config_roundtrip():
    cfg = Config(base_dir="C:/Meetings")
    cfg.session.default_categories = ["Women", "Men"]
    cfg.display.refresh_ms = 250

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "turnkeeper_config.yml")
        save_config(path, cfg)
        loaded = load_config(path)

    assert loaded.base_dir == "C:/Meetings"
    assert loaded.session.default_categories == ["Women", "Men"]
    assert loaded.display.refresh_ms == 250
    assert loaded.session.min_speech_seconds == 1.0


def test_empty_config_file_gives_defaults():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "turnkeeper_config.yml")
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("")
        loaded = load_config(path)
    assert loaded == Config()


def test_non_positive_min_speech_rejected():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "turnkeeper_config.yml")
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("session:\n  min_speech_seconds: 0\n")
        with pytest.raises(ValueError):
            load_config(path)
