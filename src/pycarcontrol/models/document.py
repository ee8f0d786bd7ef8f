"""Schema of the ``aace.carControl`` configuration block.

Only the fields needed to index controllers are modelled; everything
else in the block (friendly names, semantics, zones) is ignored.
Capabilities and endpoints are kept as raw dicts at the outer level so
the loader can validate them one at a time and skip a bad entry
without losing the rest of the document.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pycarcontrol.models._base import CarControlBaseModel


class SupportedMode(CarControlBaseModel):
    """One entry of ``configuration.supportedModes``."""

    value: str


class SupportedRange(CarControlBaseModel):
    """``configuration.supportedRange`` of a range controller."""

    minimum_value: float
    maximum_value: float
    precision: float | None = None


class CapabilityConfiguration(CarControlBaseModel):
    supported_modes: list[SupportedMode] = Field(default_factory=list)
    ordered: bool = False
    supported_range: SupportedRange | None = None
    unit_of_measure: str | None = None


class Capability(CarControlBaseModel):
    """A single entry of ``endpoints[].capabilities``."""

    interface: str
    instance: str | None = None
    configuration: CapabilityConfiguration | None = None


class Endpoint(CarControlBaseModel):
    """A single entry of ``endpoints``."""

    endpoint_id: str
    capabilities: list[Any] = Field(default_factory=list)


class CarControlBlock(CarControlBaseModel):
    """The value stored under the top-level ``aace.carControl`` key."""

    endpoints: list[Any] = Field(default_factory=list)
    default_zone_id: str | None = None
