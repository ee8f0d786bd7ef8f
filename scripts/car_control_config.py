#!/usr/bin/env python3
"""Generate or inspect car control configurations.

Usage
-----
Write the generated sample configuration::

    python scripts/car_control_config.py generate -o car-control.json

Show which controllers a set of engine configuration files declares::

    python scripts/car_control_config.py inspect config.json car-control.json

Files can also be named via ``CARCONTROL_CONFIG_FILES``; with no files
``inspect`` indexes the generated sample.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pycarcontrol import (  # noqa: E402
    CarControlError,
    DataProviderConfig,
    default_registry,
    generate_car_control_config,
    initialize_from_config,
)


def _registry_summary() -> dict[str, Any]:
    registry = default_registry()
    return {
        "bool": sorted(registry.bool_controllers),
        "mode": {key: c.modes for key, c in sorted(registry.mode_controllers.items())},
        "range": {
            key: {"minimum": c.minimum, "maximum": c.maximum, "step": c.step, "unit": c.unit}
            for key, c in sorted(registry.range_controllers.items())
        },
    }


def _cmd_generate(args: argparse.Namespace) -> int:
    config = generate_car_control_config()
    problems = config.validate()
    text = config.to_json(indent=2)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)
    return 1 if problems else 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    overrides: dict[str, Any] = {}
    if args.files:
        overrides["config_files"] = args.files
    if args.strict:
        overrides["strict"] = True
    provider_config = DataProviderConfig.from_env(**overrides)

    generated = initialize_from_config(provider_config)
    if generated is not None:
        print("No car control block found; indexed the generated sample", file=sys.stderr)

    summary = _registry_summary()
    if args.json_mode:
        print(json.dumps(summary, indent=2))
        return 0

    print(f"Bool controllers ({len(summary['bool'])}):")
    for key in summary["bool"]:
        print(f"  {key}")
    print(f"Mode controllers ({len(summary['mode'])}):")
    for key, modes in summary["mode"].items():
        print(f"  {key}: {', '.join(modes)}")
    print(f"Range controllers ({len(summary['range'])}):")
    for key, info in summary["range"].items():
        unit = f" {info['unit']}" if info["unit"] else ""
        print(f"  {key}: [{info['minimum']}, {info['maximum']}]{unit}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate or inspect car control configurations")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Print the generated sample configuration")
    gen.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    gen.set_defaults(func=_cmd_generate)

    insp = sub.add_parser("inspect", help="Index configuration files and list controllers")
    insp.add_argument("files", nargs="*", help="Engine configuration files, in priority order")
    insp.add_argument("--strict", action="store_true", help="Fail on malformed configuration")
    insp.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    insp.set_defaults(func=_cmd_inspect)

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        return int(args.func(args))
    except CarControlError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
