"""Tests for the generated example configuration."""

from __future__ import annotations

from pycarcontrol.loader import load_car_control
from pycarcontrol.registry import ControllerRegistry
from pycarcontrol.sample import generate_car_control_config


def test_sample_has_no_dangling_references() -> None:
    config = generate_car_control_config()
    assert config.validate() == []
    assert config.to_dict()["aace.carControl"]["defaultZoneId"] == "zone.all"
    assert config.zone_ids == [
        "zone.all",
        "zone.rear",
        "zone.front",
        "zone.driver",
        "zone.passenger",
        "zone.secondRow",
    ]
    assert len(config.endpoint_ids) == 21


def test_sample_round_trips_through_loader() -> None:
    registry = ControllerRegistry()
    stream = generate_car_control_config().to_stream()
    assert load_car_control([stream], registry, strict=True) is True

    fan = registry.get_range_controller("driver.fan", "speed")
    assert fan is not None
    assert (fan.minimum, fan.maximum, fan.step) == (1, 10, 1)

    heater = registry.get_range_controller("all.heater", "temperature")
    assert heater is not None
    assert heater.unit == "Alexa.Unit.Temperature.Fahrenheit"
    assert registry.get_range_controller("driver.heater", "temperature").unit is None

    color = registry.get_mode_controller("ambient.light", "color")
    assert color is not None
    assert color.modes == ["RED", "BLUE", "GREEN", "WHITE", "ORANGE", "YELLOW", "INDIGO", "VIOLET"]
    assert color.ordered is True

    ac_mode = registry.get_mode_controller("ac", "mode")
    assert ac_mode is not None
    assert ac_mode.ordered is False

    assert registry.get_bool_controller("vent") is not None
    assert registry.get_bool_controller("vent", "height") is not None
    assert registry.get_bool_controller("car", "climate.sync") is not None
    assert registry.get_bool_controller("rear.windshield", "defroster") is not None
    assert registry.get_bool_controller("driver.window") is None
