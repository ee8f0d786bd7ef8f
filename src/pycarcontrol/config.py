"""Data provider configuration for pycarcontrol."""

from __future__ import annotations

import dataclasses
import os
from typing import Any


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_paths(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(part for part in (p.strip() for p in value.split(os.pathsep)) if part)


@dataclasses.dataclass(frozen=True)
class DataProviderConfig:
    """Data provider configuration.

    Parameters
    ----------
    config_files : tuple of str
        Engine configuration files to scan for an ``aace.carControl``
        block, in priority order. The first file carrying the block wins.
    strict : bool
        Raise :class:`~pycarcontrol.exceptions.CarControlConfigError` on
        malformed JSON or capabilities with missing fields. When false
        (the default) such input is logged and skipped.
    use_generated_fallback : bool
        When none of ``config_files`` carries a car control block, index
        the generated sample configuration instead.
    """

    config_files: tuple[str, ...] = ()
    strict: bool = False
    use_generated_fallback: bool = True

    @classmethod
    def from_env(cls, **overrides: Any) -> DataProviderConfig:
        """Create configuration from environment variables.

        Reads ``CARCONTROL_CONFIG_FILES`` (``os.pathsep`` separated),
        ``CARCONTROL_STRICT`` and ``CARCONTROL_USE_GENERATED``. Explicit
        keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        DataProviderConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "config_files" not in overrides:
            config_kwargs["config_files"] = _env_paths(env.get("CARCONTROL_CONFIG_FILES"))

        if "strict" not in overrides:
            config_kwargs["strict"] = _env_bool(env.get("CARCONTROL_STRICT"), False)

        if "use_generated_fallback" not in overrides:
            config_kwargs["use_generated_fallback"] = _env_bool(env.get("CARCONTROL_USE_GENERATED"), True)

        files = overrides.pop("config_files", None)
        if files is not None:
            if isinstance(files, (str, os.PathLike)):
                files = (files,)
            config_kwargs["config_files"] = tuple(os.fspath(f) for f in files)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
