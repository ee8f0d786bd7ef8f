"""Internal constants shared across the library."""

from __future__ import annotations

import enum

CONFIG_KEY = "aace.carControl"
KEY_SEPARATOR = "#"
INTERFACE_VERSION = "3"
CAPABILITY_TYPE = "AlexaInterface"
ACTION_MAPPING_TYPE = "ActionsToDirective"
ASSET_TYPE = "asset"


class Interface(enum.StrEnum):
    """Capability ``interface`` values understood by the loader and builder."""

    POWER = "Alexa.PowerController"
    TOGGLE = "Alexa.ToggleController"
    MODE = "Alexa.ModeController"
    RANGE = "Alexa.RangeController"


# Name of the reported property for each interface.
PROPERTY_NAMES: dict[Interface, str] = {
    Interface.POWER: "powerState",
    Interface.TOGGLE: "toggleState",
    Interface.MODE: "mode",
    Interface.RANGE: "rangeValue",
}


class Directive(enum.StrEnum):
    """Directive names used in semantic action mappings."""

    TURN_ON = "TurnOn"
    TURN_OFF = "TurnOff"
    SET_MODE = "SetMode"
    ADJUST_MODE = "AdjustMode"
    SET_RANGE_VALUE = "SetRangeValue"
    ADJUST_RANGE_VALUE = "AdjustRangeValue"
