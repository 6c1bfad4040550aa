from pathlib import Path

import pytest

from kakeibo.core import settings
from kakeibo.domain.advice import AdviceThresholds


def test_read_config_file(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text(
        "# kakeibo\n"
        "LOG_LEVEL: debug  # noisy\n"
        "DATA_DIR: '/tmp/kakeibo # data'\n"
        "FOOD_ADVICE_THRESHOLD: 25000\n"
        "EMPTY:\n"
        "not a pair\n",
        encoding="utf-8",
    )
    assert settings.read_config_file(str(config)) == {
        "LOG_LEVEL": "debug",
        "DATA_DIR": "/tmp/kakeibo # data",
        "FOOD_ADVICE_THRESHOLD": "25000",
    }


def test_read_config_file_missing(tmp_path: Path) -> None:
    assert settings.read_config_file(str(tmp_path / "nope.yaml")) == {}
    assert settings.read_config_file(None) == {}


def test_config_file_does_not_override_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "config.yaml").write_text(
        "STORAGE_FILENAME: from-file.json\nNEAR_LIMIT_RATIO: 0.9\n", encoding="utf-8"
    )
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("NEAR_LIMIT_RATIO", "0.7")
    # register the variable so the value written by load_environment is undone
    monkeypatch.setenv("STORAGE_FILENAME", "placeholder")
    monkeypatch.delenv("STORAGE_FILENAME")

    settings.load_environment()

    assert settings.get_config_path() == str(tmp_path / "config.yaml")
    assert settings.get_storage_path().endswith("from-file.json")
    assert settings.get_env_float("NEAR_LIMIT_RATIO", 0.8) == 0.7


def test_get_env_int_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FOOD_ADVICE_THRESHOLD", "lots")
    assert settings.get_env_int("FOOD_ADVICE_THRESHOLD", 30_000) == 30_000
    monkeypatch.setenv("FOOD_ADVICE_THRESHOLD", "-1")
    assert settings.get_env_int("FOOD_ADVICE_THRESHOLD", 30_000, min_value=0) == 30_000
    monkeypatch.setenv("FOOD_ADVICE_THRESHOLD", "20000")
    assert settings.get_env_int("FOOD_ADVICE_THRESHOLD", 30_000, min_value=0) == 20_000


def test_thresholds_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEAR_LIMIT_RATIO", "0.9")
    monkeypatch.setenv("TRANSPORT_ADVICE_THRESHOLD", "5000")
    monkeypatch.delenv("FOOD_ADVICE_THRESHOLD", raising=False)
    monkeypatch.delenv("UTILITIES_ADVICE_THRESHOLD", raising=False)

    thresholds = AdviceThresholds.from_env()

    assert thresholds == AdviceThresholds(near_limit_ratio=0.9, food=30_000, transport=5_000, utilities=15_000)
