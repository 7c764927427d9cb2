from pathlib import Path

import pytest
from pydantic import ValidationError

from parking_allocator.config import AppConfig, LotConfig, get_config_path, load_config


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return path


def test_defaults():
    config = AppConfig()

    assert (config.lot.small, config.lot.medium, config.lot.large) == (5, 10, 3)
    assert config.api.port == 8000
    assert config.logging.level == "INFO"


def test_load_config(tmp_path):
    path = write_config(
        tmp_path,
        "lot:\n  small: 2\n  medium: 4\n  large: 6\napi:\n  port: 9000\nlogging:\n  level: debug\n",
    )

    config = load_config(path)

    assert (config.lot.small, config.lot.medium, config.lot.large) == (2, 4, 6)
    assert config.api.port == 9000
    assert config.api.host == "0.0.0.0"
    assert config.logging.level == "DEBUG"


def test_partial_lot_section_uses_defaults(tmp_path):
    config = load_config(write_config(tmp_path, "lot:\n  large: 0\n"))

    assert (config.lot.small, config.lot.medium, config.lot.large) == (5, 10, 0)


def test_empty_file_uses_defaults(tmp_path):
    config = load_config(write_config(tmp_path, ""))

    assert config == AppConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_negative_count_rejected():
    with pytest.raises(ValidationError):
        LotConfig(small=-1)


def test_unknown_log_level_rejected(tmp_path):
    with pytest.raises(ValidationError):
        load_config(write_config(tmp_path, "logging:\n  level: chatty\n"))


def test_get_config_path_prefers_local(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "config.yaml").write_text("")

    assert get_config_path() == Path("config/config.yaml")
