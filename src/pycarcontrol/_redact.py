"""Helpers for safe debug logging.

Configuration files can be large; malformed ones are logged as a short
excerpt rather than dumped whole.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def truncate_for_log(value: Any, *, max_string: int = 256, max_items: int = 8, _depth: int = 0) -> Any:
    """Return a shortened copy of *value* suitable for log messages."""
    if _depth > 6:
        return "<max-depth>"

    if value is None or isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        items = list(value.items())
        shortened: dict[str, Any] = {
            str(k): truncate_for_log(v, max_string=max_string, max_items=max_items, _depth=_depth + 1)
            for k, v in items[:max_items]
        }
        if len(items) > max_items:
            shortened["…"] = f"<{len(items) - max_items} more>"
        return shortened

    if isinstance(value, Sequence):
        head = [truncate_for_log(v, max_string=max_string, max_items=max_items, _depth=_depth + 1) for v in value[:max_items]]
        if len(value) > max_items:
            head.append(f"<{len(value) - max_items} more>")
        return head

    return repr(value)
