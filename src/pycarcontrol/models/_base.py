"""Base model for car control configuration documents.

Every document model inherits from :class:`CarControlBaseModel` which
provides:

* ``alias_generator=to_camel`` so camelCase JSON keys (``endpointId``,
  ``supportedRange``) map automatically to snake_case fields.
* A ``model_validator(mode="before")`` that drops ``null`` values and
  empty objects/lists so the field default is used. A capability with
  ``"configuration": {}`` is treated the same as one without it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def is_empty(value: Any) -> bool:
    """Return ``True`` for ``None`` and empty dicts/lists."""
    if value is None:
        return True
    return isinstance(value, (dict, list)) and not value


class CarControlBaseModel(BaseModel):
    """Base for models parsed from an ``aace.carControl`` block."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_empty_values(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        return {key: value for key, value in values.items() if not is_empty(value)}
