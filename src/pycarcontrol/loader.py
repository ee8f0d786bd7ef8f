"""Car control configuration loading.

Scans engine configuration streams for an ``aace.carControl`` block and
indexes the controllers it declares into a :class:`ControllerRegistry`.

Malformed input never aborts the whole load: an unparseable stream is
skipped, and an endpoint or capability with missing fields is skipped
on its own. Each skip is logged at WARNING, or raised as
:class:`CarControlConfigError` when ``strict`` is set.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import IO, Any

from pydantic import ValidationError

from pycarcontrol._constants import CONFIG_KEY, Interface
from pycarcontrol._redact import truncate_for_log
from pycarcontrol.exceptions import CarControlConfigError
from pycarcontrol.models._base import is_empty
from pycarcontrol.models.controllers import BoolController, ModeController, RangeController
from pycarcontrol.models.document import Capability, CarControlBlock, Endpoint
from pycarcontrol.registry import ControllerRegistry, gen_key

_logger = logging.getLogger(__name__)


def _reject(
    message: str,
    *,
    strict: bool,
    endpoint_id: str = "",
    interface: str = "",
    cause: Exception | None = None,
) -> None:
    if strict:
        raise CarControlConfigError(message, endpoint_id=endpoint_id, interface=interface) from cause
    _logger.warning("Ignoring car control entry: %s", message)


def _rewind(stream: IO[Any]) -> None:
    try:
        stream.seek(0)
    except (OSError, ValueError):
        _logger.warning("Could not rewind configuration stream %r", stream, exc_info=True)


def find_car_control_block(sources: Iterable[IO[Any]], *, strict: bool = False) -> Any | None:
    """Return the first ``aace.carControl`` block found in *sources*.

    Every stream that is read is rewound to its start afterwards,
    matched or not, so the engine can read the same configuration
    again. A present but empty block does not count as a match.
    """
    for index, stream in enumerate(sources):
        try:
            document = json.loads(stream.read())
        except (ValueError, RecursionError) as exc:
            _rewind(stream)
            _reject(f"configuration source {index} is not valid JSON: {exc}", strict=strict, cause=exc)
            continue
        _rewind(stream)

        if not isinstance(document, dict):
            _logger.debug("Configuration source %d is not a JSON object; skipping", index)
            continue

        block = document.get(CONFIG_KEY)
        if is_empty(block):
            continue
        _logger.debug("Found %s in configuration source %d", CONFIG_KEY, index)
        return block

    return None


def _load_capability(
    registry: ControllerRegistry,
    endpoint_id: str,
    raw_capability: Any,
    *,
    strict: bool,
) -> bool:
    try:
        capability = Capability.model_validate(raw_capability)
    except ValidationError as exc:
        _reject(
            f"endpoint {endpoint_id!r} has an invalid capability: {truncate_for_log(raw_capability)}",
            strict=strict,
            endpoint_id=endpoint_id,
            cause=exc,
        )
        return False

    interface = capability.interface

    if interface == Interface.POWER:
        registry.put_bool_controller(gen_key(endpoint_id), BoolController())
        return True

    if interface not in (Interface.TOGGLE, Interface.MODE, Interface.RANGE):
        _logger.debug("Endpoint %s: ignoring interface %s", endpoint_id, interface)
        return False

    if capability.instance is None:
        _reject(
            f"endpoint {endpoint_id!r} declares {interface} without an instance",
            strict=strict,
            endpoint_id=endpoint_id,
            interface=interface,
        )
        return False

    key = gen_key(endpoint_id, capability.instance)
    configuration = capability.configuration

    if interface == Interface.TOGGLE:
        registry.put_bool_controller(key, BoolController())
        return True

    if interface == Interface.MODE:
        if configuration is None or not configuration.supported_modes:
            _logger.debug("Endpoint %s: mode controller %s has no supported modes", endpoint_id, key)
            return False
        mode_controller = ModeController(ordered=configuration.ordered)
        for mode in configuration.supported_modes:
            mode_controller.add_mode(mode.value)
        registry.put_mode_controller(key, mode_controller)
        return True

    if configuration is None or configuration.supported_range is None:
        _logger.debug("Endpoint %s: range controller %s has no supported range", endpoint_id, key)
        return False
    supported = configuration.supported_range
    try:
        range_controller = RangeController(
            minimum=supported.minimum_value,
            maximum=supported.maximum_value,
            step=supported.precision,
            unit=configuration.unit_of_measure,
        )
    except ValidationError as exc:
        _reject(
            f"range controller {key!r} has an invalid range: {exc.errors()[0]['msg']}",
            strict=strict,
            endpoint_id=endpoint_id,
            interface=interface,
            cause=exc,
        )
        return False
    registry.put_range_controller(key, range_controller)
    return True


def load_endpoints(block: Any, registry: ControllerRegistry, *, strict: bool = False) -> int:
    """Index the controllers declared in *block* into *registry*.

    Returns the number of controllers registered.
    """
    try:
        parsed = CarControlBlock.model_validate(block)
    except ValidationError as exc:
        _reject(f"{CONFIG_KEY} block is malformed: {truncate_for_log(block)}", strict=strict, cause=exc)
        return 0

    registered = 0
    for raw_endpoint in parsed.endpoints:
        if is_empty(raw_endpoint):
            continue
        try:
            endpoint = Endpoint.model_validate(raw_endpoint)
        except ValidationError as exc:
            _reject(f"invalid endpoint: {truncate_for_log(raw_endpoint)}", strict=strict, cause=exc)
            continue

        for raw_capability in endpoint.capabilities:
            if is_empty(raw_capability):
                continue
            if _load_capability(registry, endpoint.endpoint_id, raw_capability, strict=strict):
                registered += 1

    _logger.debug("Registered %d car control controllers from %d endpoints", registered, len(parsed.endpoints))
    return registered


def load_car_control(
    sources: Iterable[IO[Any]],
    registry: ControllerRegistry,
    *,
    strict: bool = False,
) -> bool:
    """Find the car control block in *sources* and index it.

    Returns ``True`` when a block was found, ``False`` when there was
    nothing to configure.
    """
    block = find_car_control_block(sources, strict=strict)
    if block is None:
        _logger.debug("No %s block found; nothing to configure", CONFIG_KEY)
        return False
    load_endpoints(block, registry, strict=strict)
    return True
