"""Example car control configuration.

Used when no engine configuration supplies an ``aace.carControl`` block.
Each endpoint lists a few utterances it is meant to support.
"""

from __future__ import annotations

from pycarcontrol.assets import Action, Color, Device, Location, Setting, Unit, Value
from pycarcontrol.builder import CarControlConfiguration


def _add_fan(config: CarControlConfiguration, endpoint_id: str) -> None:
    # "turn on the driver fan", "set the fan speed to high", "increase the fan speed by 3"
    (
        config.create_endpoint(endpoint_id)
        .add_asset_id(Device.FAN)
        .add_power_controller(False)
        .add_range_controller("speed", False, 1, 10, 1)
        .add_asset_id(Setting.FAN_SPEED)
        .add_preset(1)
        .add_asset_id(Value.LOW)
        .add_asset_id(Value.MINIMUM)
        .add_preset(5)
        .add_asset_id(Value.MEDIUM)
        .add_preset(10)
        .add_asset_id(Value.HIGH)
        .add_asset_id(Value.MAXIMUM)
    )


def _add_heater(config: CarControlConfiguration, endpoint_id: str, unit: str | None = None) -> None:
    # "turn on the passenger heater", "set the temperature to 72", "increase the temperature by 4"
    (
        config.create_endpoint(endpoint_id)
        .add_asset_id(Device.HEATER)
        .add_asset_id(Device.COOLER)
        .add_power_controller(False)
        .add_range_controller("temperature", False, 60, 90, 1, unit)
        .add_asset_id(Setting.TEMPERATURE)
        .add_asset_id(Setting.HEAT)
        .add_preset(60)
        .add_asset_id(Value.LOW)
        .add_asset_id(Value.MINIMUM)
        .add_preset(75)
        .add_asset_id(Value.MEDIUM)
        .add_preset(90)
        .add_asset_id(Value.HIGH)
        .add_asset_id(Value.MAXIMUM)
    )


def _add_light(config: CarControlConfiguration, endpoint_id: str, *asset_ids: str) -> None:
    config.create_endpoint(endpoint_id)
    for asset_id in asset_ids or (Device.LIGHT,):
        config.add_asset_id(asset_id)
    config.add_power_controller(False)


def _add_seat(config: CarControlConfiguration, endpoint_id: str) -> None:
    # "turn on the driver seat heater", "set the passenger seat heater to 2"
    (
        config.create_endpoint(endpoint_id)
        .add_asset_id(Device.SEAT)
        .add_toggle_controller("heater", False)
        .add_asset_id(Device.HEATER)
        .add_asset_id(Setting.HEAT)
        .add_range_controller("heaterintensity", False, 1, 3, 1)
        .add_asset_id(Device.HEATER)
        .add_asset_id(Setting.HEAT)
        .add_preset(1)
        .add_asset_id(Value.LOW)
        .add_asset_id(Value.MINIMUM)
        .add_preset(2)
        .add_asset_id(Value.MEDIUM)
        .add_preset(3)
        .add_asset_id(Value.HIGH)
        .add_asset_id(Value.MAXIMUM)
    )


def generate_car_control_config() -> CarControlConfiguration:
    """Build the example vehicle configuration."""
    config = CarControlConfiguration.create()

    # Zones. Every member must also be created as an endpoint below.
    (
        config.create_zone("zone.all")
        .add_asset_id(Location.ALL)
        .add_members(["all.fan", "all.heater", "ac", "vent", "ambient.light", "reading.light"])
        .create_zone("zone.rear")
        .add_asset_id(Location.REAR)
        .add_members(["rear.windshield"])
        .create_zone("zone.front")
        .add_asset_id(Location.FRONT)
        .add_members(["front.light", "driver.seat", "passenger.seat"])
        .create_zone("zone.driver")
        .add_asset_id(Location.DRIVER)
        .add_asset_id(Location.LEFT)
        .add_members(["driver.fan", "driver.heater", "driver.seat", "driver.light", "driver.window"])
        .create_zone("zone.passenger")
        .add_asset_id(Location.PASSENGER)
        .add_asset_id(Location.RIGHT)
        .add_members(["passenger.fan", "passenger.heater", "passenger.seat", "passenger.light"])
        .create_zone("zone.secondRow")
        .add_asset_id(Location.SECOND_ROW)
        .add_members(["secondRow.heater", "secondRow.light"])
        # Endpoints in the default zone take precedence for ambiguous utterances.
        .set_default_zone("zone.all")
    )

    for endpoint_id in ("all.fan", "driver.fan", "passenger.fan"):
        _add_fan(config, endpoint_id)

    _add_heater(config, "all.heater", Unit.FAHRENHEIT)
    _add_heater(config, "driver.heater")
    _add_heater(config, "passenger.heater")
    _add_heater(config, "secondRow.heater", Unit.FAHRENHEIT)

    # "open the driver window", "lower the driver window"
    (
        config.create_endpoint("driver.window")
        .add_asset_id(Device.WINDOW)
        .add_range_controller("height", False, 0, 100, 1)
        .add_asset_id(Setting.HEIGHT)
        .add_preset(0)
        .add_asset_id(Value.LOW)
        .add_asset_id(Value.MINIMUM)
        .add_preset(50)
        .add_asset_id(Value.MEDIUM)
        .add_preset(100)
        .add_asset_id(Value.HIGH)
        .add_asset_id(Value.MAXIMUM)
        .add_action_set_range([Action.OPEN], 0)
        .add_action_set_range([Action.CLOSE], 100)
        .add_action_adjust_range([Action.RAISE], 10)
        .add_action_adjust_range([Action.LOWER], -10)
    )

    for endpoint_id in ("driver.light", "passenger.light", "front.light", "secondRow.light"):
        _add_light(config, endpoint_id)
    _add_light(config, "dome.light", Device.DOME_LIGHT, Device.CABIN_LIGHT)
    _add_light(config, "reading.light", Device.READING_LIGHT)

    # "set the ambient light to blue"
    _add_light(config, "ambient.light", Device.AMBIENT_LIGHT)
    config.add_mode_controller("color", False, True).add_asset_id(Setting.COLOR).add_asset_id(Setting.MODE)
    for color in ("RED", "BLUE", "GREEN", "WHITE", "ORANGE", "YELLOW", "INDIGO", "VIOLET"):
        config.add_value(color).add_asset_id(Color[color])

    # "set the AC mode to economy", "raise the AC"
    (
        config.create_endpoint("ac")
        .add_asset_id(Device.AIR_CONDITIONER)
        .add_power_controller(False)
        .add_mode_controller("mode", False, False)
        .add_asset_id(Setting.MODE)
        .add_value("ECONOMY")
        .add_asset_id(Setting.ECONOMY)
        .add_value("AUTO")
        .add_asset_id(Setting.AUTO)
        .add_value("MANUAL")
        .add_asset_id(Setting.MANUAL)
        .add_mode_controller("intensity", False, True)
        .add_asset_id(Setting.INTENSITY)
        .add_value("LOW")
        .add_asset_id(Value.LOW)
        .add_asset_id(Value.MINIMUM)
        .add_value("MEDIUM")
        .add_asset_id(Value.MEDIUM)
        .add_value("HIGH")
        .add_asset_id(Value.HIGH)
        .add_asset_id(Value.MAXIMUM)
        .add_action_adjust_mode([Action.RAISE], 1)
        .add_action_adjust_mode([Action.LOWER], -1)
    )

    # "turn on the rear windshield defroster"
    (
        config.create_endpoint("rear.windshield")
        .add_asset_id(Device.WINDSHIELD)
        .add_asset_id(Device.WINDOW)
        .add_toggle_controller("defroster", False)
        .add_asset_id(Setting.DEFROST)
    )

    # "set the vent position to floor", "open the vent"
    (
        config.create_endpoint("vent")
        .add_asset_id(Device.VENT)
        .add_power_controller(True)
        .add_mode_controller("position", False, True)
        .add_asset_id(Setting.POSITION)
        .add_value("BODY")
        .add_asset_id(Setting.BODY_VENTS)
        .add_value("FLOOR")
        .add_asset_id(Setting.FLOOR_VENTS)
        .add_value("WINDSHIELD")
        .add_asset_id(Setting.WINDSHIELD_VENTS)
        .add_value("MIX")
        .add_asset_id(Setting.MIX_VENTS)
        .add_toggle_controller("height", False)
        .add_asset_id(Setting.POSITION)
        .add_action_turn_on([Action.OPEN, Action.RAISE])
        .add_action_turn_off([Action.CLOSE, Action.LOWER])
    )

    _add_seat(config, "driver.seat")
    _add_seat(config, "passenger.seat")

    # Root endpoint for controls not tied to another endpoint.
    # "turn on air recirculation", "turn off climate sync"
    (
        config.create_endpoint("car")
        .add_asset_id(Device.CAR)
        .add_toggle_controller("recirculate", False)
        .add_asset_id(Setting.AIR_RECIRCULATION)
        .add_toggle_controller("climate.sync", False)
        .add_asset_id(Setting.CLIMATE_SYNC)
    )

    return config
