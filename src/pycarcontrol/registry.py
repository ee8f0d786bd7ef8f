"""In-memory controller registry.

Three lookup tables keyed by ``endpointId`` (power controllers) or
``endpointId#controllerId`` (toggle, mode and range instances). The
tables are filled once at startup and read by capability handlers
afterwards.
"""

from __future__ import annotations

import logging

from pycarcontrol._constants import KEY_SEPARATOR
from pycarcontrol.models.controllers import BoolController, ModeController, RangeController

_logger = logging.getLogger(__name__)


def gen_key(endpoint_id: str, controller_id: str | None = None) -> str:
    """Return the lookup key for a controller.

    A power controller has no instance, so its key is the endpoint id
    alone.
    """
    if controller_id is None:
        return endpoint_id
    return f"{endpoint_id}{KEY_SEPARATOR}{controller_id}"


class ControllerRegistry:
    """Lookup tables for the controllers declared in a configuration.

    Writes are last-write-wins per key, so indexing the same document
    twice leaves the registry unchanged.
    """

    def __init__(self) -> None:
        self._bool_controllers: dict[str, BoolController] = {}
        self._mode_controllers: dict[str, ModeController] = {}
        self._range_controllers: dict[str, RangeController] = {}

    def __len__(self) -> int:
        return len(self._bool_controllers) + len(self._mode_controllers) + len(self._range_controllers)

    def clear(self) -> None:
        self._bool_controllers.clear()
        self._mode_controllers.clear()
        self._range_controllers.clear()

    def put_bool_controller(self, key: str, controller: BoolController) -> None:
        _logger.debug("Registering bool controller %s", key)
        self._bool_controllers[key] = controller

    def put_mode_controller(self, key: str, controller: ModeController) -> None:
        _logger.debug("Registering mode controller %s modes=%s", key, controller.modes)
        self._mode_controllers[key] = controller

    def put_range_controller(self, key: str, controller: RangeController) -> None:
        _logger.debug("Registering range controller %s [%s, %s]", key, controller.minimum, controller.maximum)
        self._range_controllers[key] = controller

    def get_bool_controller(self, endpoint_id: str, controller_id: str | None = None) -> BoolController | None:
        return self._bool_controllers.get(gen_key(endpoint_id, controller_id))

    def get_mode_controller(self, endpoint_id: str, controller_id: str | None = None) -> ModeController | None:
        return self._mode_controllers.get(gen_key(endpoint_id, controller_id))

    def get_range_controller(self, endpoint_id: str, controller_id: str | None = None) -> RangeController | None:
        return self._range_controllers.get(gen_key(endpoint_id, controller_id))

    @property
    def bool_controllers(self) -> dict[str, BoolController]:
        """Copy of the bool controller table."""
        return dict(self._bool_controllers)

    @property
    def mode_controllers(self) -> dict[str, ModeController]:
        """Copy of the mode controller table."""
        return dict(self._mode_controllers)

    @property
    def range_controllers(self) -> dict[str, RangeController]:
        """Copy of the range controller table."""
        return dict(self._range_controllers)
