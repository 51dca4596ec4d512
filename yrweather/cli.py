"""CLI entry point for the yr weather backend."""

import argparse
import dataclasses
import json
import logging

import yrweather.backend  # noqa: F401  registers the "yr" backend
from yrweather.config.loader import get_config_value, load_config, set_config_value
from yrweather.errors import BackendError
from yrweather.registry import available_backends, get_backend

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yrweather",
        description="Fetch and normalize forecasts from met.no (yr)",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a config value, e.g. yr.debug=true",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch weather for a location")
    fetch_p.add_argument("location", help="lat,lon pair, postal code or place name")
    fetch_p.add_argument("--days", type=int, default=None, help="Forecast days")
    fetch_p.add_argument("--backend", default=None, help="Backend identifier")

    # backends
    sub.add_parser("backends", help="List registered backends")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. yr.user_agent")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    for kv in args.overrides:
        if "=" not in kv:
            print(f"Error: use key=value format, got {kv!r}")
            return 1
        key, value = kv.split("=", 1)
        try:
            config = set_config_value(config, key.strip(), value.strip())
        except (KeyError, ValueError) as e:
            print(f"Error: {e}")
            return 1

    if args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "backends":
        return _cmd_backends()
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_fetch(config, args) -> int:
    name = args.backend or config.backend
    days = config.days if args.days is None else args.days
    if days < 0:
        print("Error: --days must not be negative")
        return 1
    try:
        backend = get_backend(name, config)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        return 1
    try:
        data = backend.fetch(args.location, days)
    except BackendError as e:
        logger.error("Failed to fetch weather data: %s", e)
        return 1
    print(json.dumps(dataclasses.asdict(data), indent=2, default=str))
    return 0


def _cmd_backends() -> int:
    for name in available_backends():
        print(name)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, AttributeError):
            print(f"Error: config key not found: {args.key}")
            return 1
        if hasattr(value, "model_dump_json"):
            print(value.model_dump_json(indent=2))
        else:
            print(value)
        return 0
    print("Use: config show | config get KEY")
    return 1
