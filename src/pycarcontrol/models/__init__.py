"""Data models for car control configuration."""

from pycarcontrol.models._base import CarControlBaseModel
from pycarcontrol.models.controllers import BoolController, ModeController, RangeController
from pycarcontrol.models.document import (
    Capability,
    CapabilityConfiguration,
    CarControlBlock,
    Endpoint,
    SupportedMode,
    SupportedRange,
)

__all__ = [
    "BoolController",
    "Capability",
    "CapabilityConfiguration",
    "CarControlBaseModel",
    "CarControlBlock",
    "Endpoint",
    "ModeController",
    "RangeController",
    "SupportedMode",
    "SupportedRange",
]
