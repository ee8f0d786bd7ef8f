"""Fluent builder for an ``aace.carControl`` configuration.

:class:`CarControlConfiguration` produces the same JSON shape the loader
consumes, so a generated configuration can be handed to the engine or
indexed directly::

    config = (
        CarControlConfiguration.create()
        .create_zone("zone.driver")
        .add_asset_id(Location.DRIVER)
        .add_members(["driver.fan"])
        .create_endpoint("driver.fan")
        .add_asset_id(Device.FAN)
        .add_power_controller(False)
        .add_range_controller("speed", False, 1, 10, 1)
        .add_preset(10)
        .add_asset_id(Value.MAXIMUM)
    )

``add_asset_id`` always attaches to the most recently created element
that carries friendly names: a preset or mode value, else the current
controller, else the current endpoint or zone.
"""

from __future__ import annotations

import copy
import io
import json
import logging
from collections.abc import Iterable
from typing import Any

from pycarcontrol._constants import (
    ACTION_MAPPING_TYPE,
    ASSET_TYPE,
    CAPABILITY_TYPE,
    CONFIG_KEY,
    INTERFACE_VERSION,
    PROPERTY_NAMES,
    Directive,
    Interface,
)
from pycarcontrol.exceptions import CarControlBuilderError

_logger = logging.getLogger(__name__)


def _friendly_names() -> dict[str, list[dict[str, Any]]]:
    return {"friendlyNames": []}


def _actions(actions: Iterable[str]) -> list[str]:
    if isinstance(actions, str):
        actions = [actions]
    result = [str(action) for action in actions]
    if not result:
        raise CarControlBuilderError("an action mapping needs at least one action")
    return result


class CarControlConfiguration:
    """Fluent builder for the car control configuration block."""

    def __init__(self) -> None:
        self._zones: dict[str, dict[str, Any]] = {}
        self._endpoints: dict[str, dict[str, Any]] = {}
        self._default_zone_id: str | None = None

        self._zone: dict[str, Any] | None = None
        self._endpoint: dict[str, Any] | None = None
        self._controller: dict[str, Any] | None = None
        self._asset_target: list[dict[str, Any]] | None = None

    @classmethod
    def create(cls) -> CarControlConfiguration:
        return cls()

    # ------------------------------------------------------------------
    # Zones
    # ------------------------------------------------------------------

    def create_zone(self, zone_id: str) -> CarControlConfiguration:
        if zone_id in self._zones:
            raise CarControlBuilderError(f"zone {zone_id!r} is already defined")
        zone = {"zoneId": zone_id, "zoneResources": _friendly_names(), "members": []}
        self._zones[zone_id] = zone
        self._zone = zone
        self._endpoint = None
        self._controller = None
        self._asset_target = zone["zoneResources"]["friendlyNames"]
        return self

    def add_members(self, endpoint_ids: Iterable[str]) -> CarControlConfiguration:
        if self._zone is None:
            raise CarControlBuilderError("add_members called before create_zone")
        if isinstance(endpoint_ids, str):
            endpoint_ids = [endpoint_ids]
        members: list[dict[str, str]] = self._zone["members"]
        known = {member["endpointId"] for member in members}
        for endpoint_id in endpoint_ids:
            if endpoint_id not in known:
                members.append({"endpointId": endpoint_id})
                known.add(endpoint_id)
        return self

    def set_default_zone(self, zone_id: str) -> CarControlConfiguration:
        """Mark *zone_id* as the zone whose endpoints win ambiguous utterances."""
        self._default_zone_id = zone_id
        return self

    # ------------------------------------------------------------------
    # Endpoints and controllers
    # ------------------------------------------------------------------

    def create_endpoint(self, endpoint_id: str) -> CarControlConfiguration:
        if endpoint_id in self._endpoints:
            raise CarControlBuilderError(f"endpoint {endpoint_id!r} is already defined")
        endpoint = {"endpointId": endpoint_id, "endpointResources": _friendly_names(), "capabilities": []}
        self._endpoints[endpoint_id] = endpoint
        self._endpoint = endpoint
        self._zone = None
        self._controller = None
        self._asset_target = endpoint["endpointResources"]["friendlyNames"]
        return self

    def _add_capability(
        self,
        interface: Interface,
        retrievable: bool,
        instance: str | None = None,
    ) -> dict[str, Any]:
        if self._endpoint is None:
            raise CarControlBuilderError(f"{interface} added before create_endpoint")
        endpoint_id = self._endpoint["endpointId"]
        for existing in self._endpoint["capabilities"]:
            if existing["interface"] == interface and existing.get("instance") == instance:
                label = interface if instance is None else f"{interface} instance {instance!r}"
                raise CarControlBuilderError(f"endpoint {endpoint_id!r} already has {label}")

        capability: dict[str, Any] = {
            "type": CAPABILITY_TYPE,
            "interface": str(interface),
            "version": INTERFACE_VERSION,
        }
        if instance is not None:
            capability["instance"] = instance
            capability["capabilityResources"] = _friendly_names()
        capability["properties"] = {
            "supported": [{"name": PROPERTY_NAMES[interface]}],
            "proactivelyReported": False,
            "retrievable": bool(retrievable),
        }
        self._endpoint["capabilities"].append(capability)
        self._controller = capability
        if instance is not None:
            self._asset_target = capability["capabilityResources"]["friendlyNames"]
        else:
            self._asset_target = self._endpoint["endpointResources"]["friendlyNames"]
        return capability

    def add_power_controller(self, retrievable: bool) -> CarControlConfiguration:
        self._add_capability(Interface.POWER, retrievable)
        return self

    def add_toggle_controller(self, instance: str, retrievable: bool) -> CarControlConfiguration:
        self._add_capability(Interface.TOGGLE, retrievable, instance)
        return self

    def add_mode_controller(self, instance: str, retrievable: bool, ordered: bool) -> CarControlConfiguration:
        capability = self._add_capability(Interface.MODE, retrievable, instance)
        capability["configuration"] = {"ordered": bool(ordered), "supportedModes": []}
        return self

    def add_value(self, value: str) -> CarControlConfiguration:
        """Add a supported mode value to the current mode controller."""
        capability = self._require_controller(Interface.MODE, "add_value")
        modes: list[dict[str, Any]] = capability["configuration"]["supportedModes"]
        if any(mode["value"] == value for mode in modes):
            raise CarControlBuilderError(f"mode value {value!r} is already defined")
        mode = {"value": value, "modeResources": _friendly_names()}
        modes.append(mode)
        self._asset_target = mode["modeResources"]["friendlyNames"]
        return self

    def add_range_controller(
        self,
        instance: str,
        retrievable: bool,
        minimum: float,
        maximum: float,
        precision: float,
        unit: str | None = None,
    ) -> CarControlConfiguration:
        if minimum > maximum:
            raise CarControlBuilderError(f"range {instance!r}: minimum {minimum} is greater than maximum {maximum}")
        if precision <= 0:
            raise CarControlBuilderError(f"range {instance!r}: precision must be > 0")
        capability = self._add_capability(Interface.RANGE, retrievable, instance)
        configuration: dict[str, Any] = {
            "supportedRange": {"minimumValue": minimum, "maximumValue": maximum, "precision": precision},
        }
        if unit is not None:
            configuration["unitOfMeasure"] = str(unit)
        configuration["presets"] = []
        capability["configuration"] = configuration
        return self

    def add_preset(self, value: float) -> CarControlConfiguration:
        """Add a named preset to the current range controller."""
        capability = self._require_controller(Interface.RANGE, "add_preset")
        configuration = capability["configuration"]
        supported = configuration["supportedRange"]
        if not supported["minimumValue"] <= value <= supported["maximumValue"]:
            raise CarControlBuilderError(
                f"preset {value} outside [{supported['minimumValue']}, {supported['maximumValue']}]"
            )
        presets: list[dict[str, Any]] = configuration["presets"]
        if any(preset["rangeValue"] == value for preset in presets):
            raise CarControlBuilderError(f"preset {value} is already defined")
        preset = {"rangeValue": value, "presetResources": _friendly_names()}
        presets.append(preset)
        self._asset_target = preset["presetResources"]["friendlyNames"]
        return self

    def add_asset_id(self, asset_id: str) -> CarControlConfiguration:
        if self._asset_target is None:
            raise CarControlBuilderError("add_asset_id called before creating a zone or endpoint")
        entry = {"@type": ASSET_TYPE, "value": {"assetId": str(asset_id)}}
        if entry not in self._asset_target:
            self._asset_target.append(entry)
        return self

    # ------------------------------------------------------------------
    # Semantic action mappings
    # ------------------------------------------------------------------

    def _require_controller(self, interface: Interface | tuple[Interface, ...], operation: str) -> dict[str, Any]:
        allowed = interface if isinstance(interface, tuple) else (interface,)
        if self._controller is None or self._controller["interface"] not in allowed:
            names = " or ".join(str(i) for i in allowed)
            raise CarControlBuilderError(f"{operation} requires a current {names}")
        return self._controller

    def _add_action_mapping(
        self,
        capability: dict[str, Any],
        actions: Iterable[str],
        directive: Directive,
        payload: dict[str, Any],
    ) -> None:
        mappings: list[dict[str, Any]] = capability.setdefault("semantics", {"actionMappings": []})["actionMappings"]
        mappings.append(
            {
                "@type": ACTION_MAPPING_TYPE,
                "actions": _actions(actions),
                "directive": {"name": str(directive), "payload": payload},
            }
        )

    def add_action_turn_on(self, actions: Iterable[str]) -> CarControlConfiguration:
        capability = self._require_controller((Interface.POWER, Interface.TOGGLE), "add_action_turn_on")
        self._add_action_mapping(capability, actions, Directive.TURN_ON, {})
        return self

    def add_action_turn_off(self, actions: Iterable[str]) -> CarControlConfiguration:
        capability = self._require_controller((Interface.POWER, Interface.TOGGLE), "add_action_turn_off")
        self._add_action_mapping(capability, actions, Directive.TURN_OFF, {})
        return self

    def add_action_set_mode(self, actions: Iterable[str], value: str) -> CarControlConfiguration:
        capability = self._require_controller(Interface.MODE, "add_action_set_mode")
        if not any(mode["value"] == value for mode in capability["configuration"]["supportedModes"]):
            raise CarControlBuilderError(f"mode value {value!r} is not defined on {capability['instance']!r}")
        self._add_action_mapping(capability, actions, Directive.SET_MODE, {"mode": value})
        return self

    def add_action_adjust_mode(self, actions: Iterable[str], delta: int) -> CarControlConfiguration:
        capability = self._require_controller(Interface.MODE, "add_action_adjust_mode")
        if not capability["configuration"]["ordered"]:
            raise CarControlBuilderError(f"mode controller {capability['instance']!r} is not ordered")
        self._add_action_mapping(capability, actions, Directive.ADJUST_MODE, {"modeDelta": delta})
        return self

    def add_action_set_range(self, actions: Iterable[str], value: float) -> CarControlConfiguration:
        capability = self._require_controller(Interface.RANGE, "add_action_set_range")
        supported = capability["configuration"]["supportedRange"]
        if not supported["minimumValue"] <= value <= supported["maximumValue"]:
            raise CarControlBuilderError(
                f"range value {value} outside [{supported['minimumValue']}, {supported['maximumValue']}]"
            )
        self._add_action_mapping(capability, actions, Directive.SET_RANGE_VALUE, {"rangeValue": value})
        return self

    def add_action_adjust_range(self, actions: Iterable[str], delta: float) -> CarControlConfiguration:
        capability = self._require_controller(Interface.RANGE, "add_action_adjust_range")
        self._add_action_mapping(capability, actions, Directive.ADJUST_RANGE_VALUE, {"rangeValueDelta": delta})
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @property
    def endpoint_ids(self) -> list[str]:
        return list(self._endpoints)

    @property
    def zone_ids(self) -> list[str]:
        return list(self._zones)

    def validate(self) -> list[str]:
        """Return a list of dangling zone and endpoint references."""
        problems: list[str] = []
        for zone_id, zone in self._zones.items():
            for member in zone["members"]:
                if member["endpointId"] not in self._endpoints:
                    problems.append(f"zone {zone_id!r} references undefined endpoint {member['endpointId']!r}")
        if self._default_zone_id is not None and self._default_zone_id not in self._zones:
            problems.append(f"default zone {self._default_zone_id!r} is not defined")
        for problem in problems:
            _logger.warning("Car control configuration: %s", problem)
        return problems

    def to_dict(self) -> dict[str, Any]:
        block: dict[str, Any] = {
            "endpoints": copy.deepcopy(list(self._endpoints.values())),
            "zones": copy.deepcopy(list(self._zones.values())),
        }
        if self._default_zone_id is not None:
            block["defaultZoneId"] = self._default_zone_id
        return {CONFIG_KEY: block}

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def to_stream(self) -> io.StringIO:
        """Return the configuration as a readable stream for the engine."""
        return io.StringIO(self.to_json())
