"""Asset ids and semantic actions used when building a configuration.

Asset ids are localization tags the voice service matches against
utterances ("the driver fan", "max"). They are opaque here: the builder
only copies them into ``friendlyNames`` entries.
"""

from __future__ import annotations

import enum


class Location(enum.StrEnum):
    ALL = "Alexa.Location.All"
    DRIVER = "Alexa.Location.Driver"
    PASSENGER = "Alexa.Location.Passenger"
    LEFT = "Alexa.Location.Left"
    RIGHT = "Alexa.Location.Right"
    FRONT = "Alexa.Location.Front"
    REAR = "Alexa.Location.Rear"
    SECOND_ROW = "Alexa.Location.SecondRow"


class Device(enum.StrEnum):
    AIR_CONDITIONER = "Alexa.Device.AirConditioner"
    AMBIENT_LIGHT = "Alexa.Device.AmbientLight"
    CABIN_LIGHT = "Alexa.Device.CabinLight"
    CAR = "Alexa.Device.Car"
    COOLER = "Alexa.Device.Cooler"
    DOME_LIGHT = "Alexa.Device.DomeLight"
    FAN = "Alexa.Device.Fan"
    HEATER = "Alexa.Device.Heater"
    LIGHT = "Alexa.Device.Light"
    READING_LIGHT = "Alexa.Device.ReadingLight"
    SEAT = "Alexa.Device.Seat"
    VENT = "Alexa.Device.Vent"
    WINDOW = "Alexa.Device.Window"
    WINDSHIELD = "Alexa.Device.Windshield"


class Setting(enum.StrEnum):
    AIR_RECIRCULATION = "Alexa.Setting.AirRecirculation"
    AUTO = "Alexa.Setting.Auto"
    BODY_VENTS = "Alexa.Setting.BodyVents"
    CLIMATE_SYNC = "Alexa.Setting.ClimateSync"
    COLOR = "Alexa.Setting.Color"
    DEFROST = "Alexa.Setting.Defrost"
    ECONOMY = "Alexa.Setting.Economy"
    FAN_SPEED = "Alexa.Setting.FanSpeed"
    FLOOR_VENTS = "Alexa.Setting.FloorVents"
    HEAT = "Alexa.Setting.Heat"
    HEIGHT = "Alexa.Setting.Height"
    INTENSITY = "Alexa.Setting.Intensity"
    MANUAL = "Alexa.Setting.Manual"
    MIX_VENTS = "Alexa.Setting.MixVents"
    MODE = "Alexa.Setting.Mode"
    POSITION = "Alexa.Setting.Position"
    TEMPERATURE = "Alexa.Setting.Temperature"
    WINDSHIELD_VENTS = "Alexa.Setting.WindshieldVents"


class Value(enum.StrEnum):
    LOW = "Alexa.Value.Low"
    MINIMUM = "Alexa.Value.Minimum"
    MEDIUM = "Alexa.Value.Medium"
    HIGH = "Alexa.Value.High"
    MAXIMUM = "Alexa.Value.Maximum"


class Color(enum.StrEnum):
    RED = "Alexa.Color.Red"
    BLUE = "Alexa.Color.Blue"
    GREEN = "Alexa.Color.Green"
    WHITE = "Alexa.Color.White"
    ORANGE = "Alexa.Color.Orange"
    YELLOW = "Alexa.Color.Yellow"
    INDIGO = "Alexa.Color.Indigo"
    VIOLET = "Alexa.Color.Violet"


class Unit(enum.StrEnum):
    CELSIUS = "Alexa.Unit.Temperature.Celsius"
    FAHRENHEIT = "Alexa.Unit.Temperature.Fahrenheit"
    PERCENT = "Alexa.Unit.Percent"


class Action(enum.StrEnum):
    """Semantic actions that can be mapped onto a controller directive."""

    OPEN = "Alexa.Actions.Open"
    CLOSE = "Alexa.Actions.Close"
    RAISE = "Alexa.Actions.Raise"
    LOWER = "Alexa.Actions.Lower"
