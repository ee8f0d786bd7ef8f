from __future__ import annotations

from pycarcontrol._redact import truncate_for_log


def test_truncate_for_log_truncates_long_strings() -> None:
    shortened = truncate_for_log({"value": "x" * 600}, max_string=10)
    assert shortened["value"].startswith("x" * 10)
    assert "<truncated>" in shortened["value"]


def test_truncate_for_log_limits_items() -> None:
    shortened = truncate_for_log({"endpoints": list(range(20))}, max_items=3)
    assert shortened["endpoints"] == [0, 1, 2, "<17 more>"]


def test_truncate_for_log_keeps_scalars() -> None:
    assert truncate_for_log({"a": 1, "b": None, "c": True}) == {"a": 1, "b": None, "c": True}
