"""CLI entry point for skycast."""

import argparse
import asyncio
import logging

from skycast.config.loader import get_config_value, load_config, redacted_json
from skycast.config.schema import SkycastConfig
from skycast.errors import SkycastError
from skycast.ingest.forecast_client import ForecastClient
from skycast.ingest.geocoder import OpenMeteoGeocoder
from skycast.ingest.location_fetcher import LocationFetcher
from skycast.reporting.formatters import (
    format_locations_json,
    format_locations_text,
    format_record_json,
    format_record_text,
)

DEFAULT_CONFIG = "skycast.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skycast",
        description="Current weather from a forecast API",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc_p = sub.add_parser("forecast", help="Forecast for one place")
    fc_p.add_argument("latitude", nargs="?", type=float)
    fc_p.add_argument("longitude", nargs="?", type=float)
    fc_p.add_argument("--name", help="Place name to resolve instead of coordinates")
    fc_p.add_argument("--json", action="store_true", help="JSON output")

    # locations
    loc_p = sub.add_parser("locations", help="Forecast for every configured location")
    loc_p.add_argument("--json", action="store_true", help="JSON output")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. api.base_url")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except SkycastError as e:
        print(f"Error: {e}")
        return 1

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "locations":
        return _cmd_locations(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _build_client(config: SkycastConfig) -> ForecastClient:
    return ForecastClient(
        config.api, geocoder=OpenMeteoGeocoder.from_config(config.geocoder)
    )


def _cmd_forecast(config: SkycastConfig, args) -> int:
    has_coords = args.latitude is not None and args.longitude is not None
    if args.name is None and not has_coords:
        print("Error: give LATITUDE LONGITUDE or --name NAME")
        return 1
    any_coord = args.latitude is not None or args.longitude is not None
    if args.name is not None and any_coord:
        print("Error: give either coordinates or --name, not both")
        return 1

    try:
        client = _build_client(config)
        if args.name is not None:
            record = asyncio.run(client.fetch_by_name(args.name))
        else:
            record = asyncio.run(client.fetch(args.latitude, args.longitude))
    except SkycastError as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(format_record_json(record))
    else:
        print(format_record_text(record, args.name or ""))
    return 0


def _cmd_locations(config: SkycastConfig, args) -> int:
    try:
        client = _build_client(config)
    except SkycastError as e:
        print(f"Error: {e}")
        return 1

    results = asyncio.run(_fetch_locations(client, config))
    if args.json:
        print(format_locations_json(results))
    else:
        print(format_locations_text(results))
    return 0 if all(r.ok for r in results) else 1


async def _fetch_locations(client: ForecastClient, config: SkycastConfig):
    async with client:
        return await LocationFetcher(client).fetch_all(config.locations)


def _cmd_config(config: SkycastConfig, args) -> int:
    if args.config_command == "show":
        print(redacted_json(config))
        return 0
    elif args.config_command == "get":
        if args.key.strip() == "api.api_key":
            print("Error: api.api_key is not printable")
            return 1
        try:
            print(get_config_value(config, args.key.strip()))
            return 0
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get KEY")
        return 1
