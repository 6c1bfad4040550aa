from pathlib import Path

import pytest

from kakeibo.logger import get_logging_config


def test_file_handler_follows_log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    config = get_logging_config()
    assert config["handlers"]["file"]["filename"] == str(tmp_path / "logs" / "app.log")
    assert config["loggers"][""]["handlers"] == ["console", "file"]

    monkeypatch.delenv("LOG_DIR")
    config = get_logging_config()
    assert "file" not in config["handlers"]


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_logging_config()["loggers"][""]["level"] == "DEBUG"
