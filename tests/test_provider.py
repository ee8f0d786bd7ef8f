from __future__ import annotations

import io
import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from pycarcontrol import provider
from pycarcontrol.config import DataProviderConfig
from pycarcontrol.exceptions import CarControlConfigError

CONFIG = {
    "aace.carControl": {
        "endpoints": [
            {
                "endpointId": "x",
                "capabilities": [
                    {"interface": "Alexa.PowerController"},
                    {
                        "interface": "Alexa.RangeController",
                        "instance": "y",
                        "configuration": {"supportedRange": {"minimumValue": 60, "maximumValue": 90}},
                    },
                ],
            }
        ]
    }
}


@pytest.fixture(autouse=True)
def _clean_registry() -> Iterator[None]:
    provider.default_registry().clear()
    yield
    provider.default_registry().clear()


def test_initialize_populates_default_registry() -> None:
    assert provider.initialize([io.StringIO(json.dumps(CONFIG))]) is True
    controller = provider.get_range_controller("x", "y")
    assert controller is not None
    assert (controller.minimum, controller.maximum) == (60, 90)
    assert provider.get_bool_controller("x") is not None
    assert provider.get_mode_controller("x", "y") is None


def test_initialize_with_malformed_json_does_not_raise() -> None:
    assert provider.initialize([io.StringIO("{]")]) is False
    assert len(provider.default_registry()) == 0


def test_initialize_is_idempotent() -> None:
    stream = io.StringIO(json.dumps(CONFIG))
    provider.initialize([stream])
    provider.initialize([stream])
    assert len(provider.default_registry()) == 2


def test_initialize_strict_mode() -> None:
    with pytest.raises(CarControlConfigError):
        provider.initialize([io.StringIO("{]")], DataProviderConfig(strict=True))


def test_initialize_from_config_reads_files(tmp_path: Path) -> None:
    other = tmp_path / "engine.json"
    other.write_text(json.dumps({"aace.engine": {}}), encoding="utf-8")
    car = tmp_path / "car.json"
    car.write_text(json.dumps(CONFIG), encoding="utf-8")

    generated = provider.initialize_from_config(DataProviderConfig(config_files=(str(other), str(car))))
    assert generated is None
    assert provider.get_range_controller("x", "y") is not None
    assert provider.get_range_controller("driver.fan", "speed") is None


def test_initialize_from_config_falls_back_to_sample(tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"
    generated = provider.initialize_from_config(DataProviderConfig(config_files=(str(missing),)))
    assert generated is not None
    assert "driver.fan" in generated.endpoint_ids
    assert provider.get_range_controller("driver.fan", "speed") is not None


def test_initialize_from_config_without_fallback() -> None:
    generated = provider.initialize_from_config(DataProviderConfig(use_generated_fallback=False))
    assert generated is None
    assert len(provider.default_registry()) == 0


def test_initialize_from_config_strict_missing_file(tmp_path: Path) -> None:
    config = DataProviderConfig(config_files=(str(tmp_path / "missing.json"),), strict=True)
    with pytest.raises(CarControlConfigError):
        provider.initialize_from_config(config)


def test_initialize_from_config_accepts_utf8_bom(tmp_path: Path) -> None:
    car = tmp_path / "car.json"
    car.write_bytes(b"\xef\xbb\xbf" + json.dumps(CONFIG).encode("utf-8"))
    assert provider.initialize_from_config(DataProviderConfig(config_files=(str(car),))) is None
    assert provider.get_range_controller("x", "y") is not None
