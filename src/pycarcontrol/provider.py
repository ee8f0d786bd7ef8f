"""Process-wide car control data provider.

The sample application indexes its car control configuration once at
startup into a module-level :class:`ControllerRegistry`; capability
handlers then look controllers up with the ``get_*`` functions below.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterable
from typing import IO, Any

from pycarcontrol.builder import CarControlConfiguration
from pycarcontrol.config import DataProviderConfig
from pycarcontrol.exceptions import CarControlConfigError
from pycarcontrol.loader import load_car_control
from pycarcontrol.models.controllers import BoolController, ModeController, RangeController
from pycarcontrol.registry import ControllerRegistry
from pycarcontrol.sample import generate_car_control_config

_logger = logging.getLogger(__name__)

_registry = ControllerRegistry()


def default_registry() -> ControllerRegistry:
    """Return the process-wide registry."""
    return _registry


def initialize(sources: Iterable[IO[Any]], config: DataProviderConfig | None = None) -> bool:
    """Index the first car control block found in *sources*.

    Every source stream is left rewound. Returns ``False`` when no
    source carries a car control block.
    """
    strict = config.strict if config is not None else False
    return load_car_control(sources, _registry, strict=strict)


def initialize_from_config(config: DataProviderConfig) -> CarControlConfiguration | None:
    """Index the files named by *config*, falling back to the sample.

    Returns the generated configuration when the fallback was used, so
    the caller can pass it on to the engine, else ``None``.
    """
    with contextlib.ExitStack() as stack:
        streams: list[IO[Any]] = []
        for path in config.config_files:
            try:
                streams.append(stack.enter_context(open(path, encoding="utf-8-sig")))
            except OSError as exc:
                if config.strict:
                    raise CarControlConfigError(f"cannot open configuration file {path}: {exc}") from exc
                _logger.warning("Cannot open configuration file %s: %s", path, exc)
        if initialize(streams, config):
            return None

    if not config.use_generated_fallback:
        _logger.info("No car control configuration found and generated fallback disabled")
        return None

    _logger.debug("No car control configuration found; using the generated sample")
    generated = generate_car_control_config()
    initialize([generated.to_stream()], config)
    return generated


def get_bool_controller(endpoint_id: str, controller_id: str | None = None) -> BoolController | None:
    return _registry.get_bool_controller(endpoint_id, controller_id)


def get_mode_controller(endpoint_id: str, controller_id: str | None = None) -> ModeController | None:
    return _registry.get_mode_controller(endpoint_id, controller_id)


def get_range_controller(endpoint_id: str, controller_id: str | None = None) -> RangeController | None:
    return _registry.get_range_controller(endpoint_id, controller_id)
