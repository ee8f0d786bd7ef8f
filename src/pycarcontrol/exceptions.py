"""Custom exception hierarchy for pycarcontrol."""

from __future__ import annotations


class CarControlError(Exception):
    """Base exception for all pycarcontrol errors."""


class CarControlConfigError(CarControlError):
    """Invalid or missing car control configuration.

    Raised only when the provider runs in strict mode; otherwise the
    offending input is logged and skipped.
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint_id: str = "",
        interface: str = "",
    ) -> None:
        self.endpoint_id = endpoint_id
        self.interface = interface
        super().__init__(message)


class CarControlBuilderError(CarControlError):
    """Configuration builder used out of order or with invalid values."""
