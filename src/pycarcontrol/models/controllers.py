"""Controller models indexed by the registry.

Each controller records what the configuration declared for one
capability instance and carries its current state so a capability
handler can read and update it. Assignments are validated, so a
controller can never hold a mode or value it does not support.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class BoolController(BaseModel):
    """On/off state for a power or toggle capability."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    value: bool = False

    def turn_on(self) -> None:
        self.value = True

    def turn_off(self) -> None:
        self.value = False


class ModeController(BaseModel):
    """Ordered set of supported mode values plus the current mode."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    modes: list[str] = Field(default_factory=list)
    ordered: bool = False
    value: str | None = None
    """Current mode. Defaults to the first supported mode."""

    @field_validator("modes")
    @classmethod
    def _dedupe_modes(cls, modes: list[str], info: ValidationInfo) -> list[str]:
        modes = list(dict.fromkeys(modes))
        current = info.data.get("value")
        if current is not None and current not in modes:
            raise ValueError(f"current mode {current!r} is not one of {modes}")
        return modes

    @field_validator("value")
    @classmethod
    def _check_value(cls, value: str | None, info: ValidationInfo) -> str | None:
        modes = info.data.get("modes")
        if value is not None and modes is not None and value not in modes:
            raise ValueError(f"mode {value!r} is not one of {modes}")
        return value

    @model_validator(mode="after")
    def _default_value(self) -> ModeController:
        if self.value is None and self.modes:
            # Bypass assignment validation; the value is known to be supported.
            object.__setattr__(self, "value", self.modes[0])
        return self

    def add_mode(self, mode: str) -> None:
        """Append *mode* unless it is already supported."""
        if mode in self.modes:
            return
        self.modes.append(mode)
        if self.value is None:
            self.value = mode

    def has_mode(self, mode: str) -> bool:
        return mode in self.modes

    def set_mode(self, mode: str) -> None:
        self.value = mode

    def adjust_mode(self, delta: int) -> str:
        """Step *delta* positions through the ordered modes.

        The result is clamped to the first and last mode. Only ordered
        controllers can be adjusted.
        """
        if not self.ordered:
            raise ValueError("adjust_mode requires an ordered mode controller")
        if not self.modes or self.value is None:
            raise ValueError("mode controller has no supported modes")
        index = self.modes.index(self.value) + int(delta)
        index = max(0, min(len(self.modes) - 1, index))
        self.value = self.modes[index]
        return self.value


def _within(value: Any, minimum: Any, maximum: Any) -> bool:
    if value is None:
        return True
    if minimum is not None and value < minimum:
        return False
    return not (maximum is not None and value > maximum)


class RangeController(BaseModel):
    """Numeric ``[minimum, maximum]`` interval plus the current value.

    ``step`` and ``unit`` are informational; lookups never use them.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    minimum: float
    maximum: float
    step: float | None = None
    unit: str | None = None
    value: float | None = None
    """Current value. Defaults to ``minimum``."""

    @field_validator("minimum")
    @classmethod
    def _check_minimum(cls, minimum: float, info: ValidationInfo) -> float:
        maximum = info.data.get("maximum")
        if maximum is not None and minimum > maximum:
            raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
        if not _within(info.data.get("value"), minimum, None):
            raise ValueError(f"current value {info.data['value']} is below minimum {minimum}")
        return minimum

    @field_validator("maximum")
    @classmethod
    def _check_maximum(cls, maximum: float, info: ValidationInfo) -> float:
        minimum = info.data.get("minimum")
        if minimum is not None and minimum > maximum:
            raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
        if not _within(info.data.get("value"), None, maximum):
            raise ValueError(f"current value {info.data['value']} is above maximum {maximum}")
        return maximum

    @field_validator("step")
    @classmethod
    def _check_step(cls, step: float | None) -> float | None:
        if step is not None and step <= 0:
            raise ValueError("step must be > 0")
        return step

    @field_validator("value")
    @classmethod
    def _check_value(cls, value: float | None, info: ValidationInfo) -> float | None:
        minimum = info.data.get("minimum")
        maximum = info.data.get("maximum")
        if not _within(value, minimum, maximum):
            raise ValueError(f"value {value} outside [{minimum}, {maximum}]")
        return value

    @model_validator(mode="after")
    def _default_value(self) -> RangeController:
        if self.value is None:
            object.__setattr__(self, "value", self.minimum)
        return self

    def contains(self, value: float) -> bool:
        return self.minimum <= float(value) <= self.maximum

    def set_value(self, value: float) -> None:
        self.value = float(value)

    def adjust_value(self, delta: float) -> float:
        """Add *delta* to the current value, clamped to the range."""
        current = self.minimum if self.value is None else self.value
        self.value = max(self.minimum, min(self.maximum, current + float(delta)))
        return self.value
