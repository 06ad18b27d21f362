"""CLI entry point for the weather display core."""

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from skypanel.config.loader import load_config, resolve_paths
from skypanel.errors import CacheMiss, WeatherError
from skypanel.models.common import TemperatureUnit
from skypanel.pipeline.weather_pipeline import WeatherPipeline
from skypanel.reporting.formatters import format_weather_json, format_weather_text
from skypanel.storage.snapshot_cache import SnapshotCache

DEFAULT_CONFIG = "settings.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skypanel",
        description="Weather forecast fetcher for a single-location display",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # weather
    weather_p = sub.add_parser("weather", help="Fetch and print the forecast")
    weather_p.add_argument("--json", action="store_true", help="Print JSON")
    weather_p.add_argument(
        "--unit", type=str.upper, choices=[u.value for u in TemperatureUnit],
        help="Override the configured temperature unit",
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    # cache show
    cache_p = sub.add_parser("cache", help="Snapshot cache operations")
    cache_sub = cache_p.add_subparsers(dest="cache_command")
    cache_sub.add_parser("show", help="Describe the cached snapshot")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = Path(args.config)
    try:
        config = resolve_paths(load_config(config_path), config_path.parent)
    except ValidationError as e:
        print(f"Invalid config {config_path}: {e}")
        return 1

    if args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "cache":
        return _cmd_cache(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_weather(config, args) -> int:
    unit = TemperatureUnit(args.unit) if args.unit else config.settings.unit
    pipeline = WeatherPipeline.from_config(config)
    try:
        model = pipeline.get_weather(
            config.settings.location, config.settings.hour_12
        )
    except WeatherError as e:
        print(f"Error in getting weather forecast: {e}")
        return 1

    if args.json:
        print(format_weather_json(model))
    else:
        print(format_weather_text(model, unit))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1


def _cmd_cache(config, args) -> int:
    if args.cache_command != "show":
        print("Use: cache show")
        return 1
    cache = SnapshotCache(config.paths.cache_file)
    try:
        snapshot = cache.load()
    except CacheMiss:
        print("No cached snapshot")
        return 1
    print(f"Snapshot: {cache.path}")
    print(f"Captured: {snapshot.captured_time} on {snapshot.captured_date}")
    print(f"Size: {len(snapshot.raw.encode('utf-8'))} bytes")
    return 0
