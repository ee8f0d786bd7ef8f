"""pycarcontrol - Car control configuration data provider."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycarcontrol")
except PackageNotFoundError:
    __version__ = "0+local"
from pycarcontrol.builder import CarControlConfiguration
from pycarcontrol.config import DataProviderConfig
from pycarcontrol.exceptions import CarControlBuilderError, CarControlConfigError, CarControlError
from pycarcontrol.loader import find_car_control_block, load_car_control, load_endpoints
from pycarcontrol.models import BoolController, ModeController, RangeController
from pycarcontrol.provider import (
    default_registry,
    get_bool_controller,
    get_mode_controller,
    get_range_controller,
    initialize,
    initialize_from_config,
)
from pycarcontrol.registry import ControllerRegistry, gen_key
from pycarcontrol.sample import generate_car_control_config

__all__ = [
    "__version__",
    "BoolController",
    "CarControlBuilderError",
    "CarControlConfigError",
    "CarControlConfiguration",
    "CarControlError",
    "ControllerRegistry",
    "DataProviderConfig",
    "ModeController",
    "RangeController",
    "default_registry",
    "find_car_control_block",
    "gen_key",
    "generate_car_control_config",
    "get_bool_controller",
    "get_mode_controller",
    "get_range_controller",
    "initialize",
    "initialize_from_config",
    "load_car_control",
    "load_endpoints",
]
