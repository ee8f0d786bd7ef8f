from __future__ import annotations

import os
from pathlib import Path

import pytest

from pycarcontrol.config import DataProviderConfig


def test_defaults() -> None:
    config = DataProviderConfig()
    assert config.config_files == ()
    assert config.strict is False
    assert config.use_generated_fallback is True


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARCONTROL_CONFIG_FILES", os.pathsep.join(["a.json", " ", "b.json"]))
    monkeypatch.setenv("CARCONTROL_STRICT", "yes")
    monkeypatch.setenv("CARCONTROL_USE_GENERATED", "off")
    config = DataProviderConfig.from_env()
    assert config.config_files == ("a.json", "b.json")
    assert config.strict is True
    assert config.use_generated_fallback is False


def test_from_env_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("CARCONTROL_CONFIG_FILES", "CARCONTROL_STRICT", "CARCONTROL_USE_GENERATED"):
        monkeypatch.delenv(key, raising=False)
    assert DataProviderConfig.from_env() == DataProviderConfig()


def test_unrecognised_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARCONTROL_STRICT", "maybe")
    assert DataProviderConfig.from_env().strict is False


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARCONTROL_CONFIG_FILES", "env.json")
    monkeypatch.setenv("CARCONTROL_STRICT", "1")
    config = DataProviderConfig.from_env(config_files=Path("car.json"), strict=False)
    assert config.config_files == ("car.json",)
    assert config.strict is False
