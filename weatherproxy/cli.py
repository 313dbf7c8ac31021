"""CLI entry point for the weather proxy."""

import argparse
import logging
import sys

from weatherproxy.config.defaults import DEFAULT_CONFIG_PATH
from weatherproxy.config.loader import get_config_value, load_config
from weatherproxy.config.schema import ProxyConfig
from weatherproxy.favorites.store import FavoritesStore
from weatherproxy.models.common import UnitSystem, parse_unit
from weatherproxy.models.errors import UpstreamError, WeatherError
from weatherproxy.pipeline.weather_pipeline import build_pipeline
from weatherproxy.reporting.formatters import format_response_json, format_response_text

REDACTED = "********"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherproxy",
        description="Current weather and five-day forecast proxy",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_PATH, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # city / coords
    city_p = sub.add_parser("city", help="Weather for a place name")
    city_p.add_argument("name", nargs="+")
    _add_output_args(city_p)

    coords_p = sub.add_parser("coords", help="Weather for a coordinate pair")
    coords_p.add_argument("lat")
    coords_p.add_argument("lon")
    _add_output_args(coords_p)

    # favorites list / add / remove / toggle
    fav_p = sub.add_parser("favorites", help="Favorite places")
    fav_sub = fav_p.add_subparsers(dest="favorites_command")
    fav_sub.add_parser("list", help="Show favorites")
    for action in ("add", "remove", "toggle"):
        p = fav_sub.add_parser(action, help=f"{action.capitalize()} a favorite")
        p.add_argument("name", nargs="+")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. provider.timeout")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command in ("city", "coords"):
        return _cmd_lookup(config, args)
    elif args.command == "favorites":
        return _cmd_favorites(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _add_output_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--unit", choices=[u.value for u in UnitSystem], default=None,
        help="Measurement units (default from config)",
    )
    p.add_argument("--json", action="store_true", help="Print the raw JSON response")


def _cmd_serve(config: ProxyConfig, args) -> int:
    import uvicorn

    from weatherproxy.api import create_app

    uvicorn.run(
        create_app(config),
        host=args.host or config.server.host,
        port=args.port or config.server.port,
    )
    return 0


def _cmd_lookup(config: ProxyConfig, args) -> int:
    pipeline = build_pipeline(config)
    try:
        unit = parse_unit(args.unit or config.default_unit)
        if args.command == "city":
            response = pipeline.by_name(" ".join(args.name), unit)
        else:
            response = pipeline.by_coordinate(args.lat, args.lon, unit)
    except WeatherError as e:
        message = e.public_message if isinstance(e, UpstreamError) else e.message
        print(f"Error: {message}", file=sys.stderr)
        return 1

    if args.json:
        print(format_response_json(response))
    else:
        print(format_response_text(response, unit))
    return 0


def _cmd_favorites(config: ProxyConfig, args) -> int:
    store = FavoritesStore(config.favorites.path)
    try:
        if args.favorites_command == "list":
            names = store.names
        elif args.favorites_command in ("add", "remove", "toggle"):
            name = " ".join(args.name)
            names = getattr(store, args.favorites_command)(name)
        else:
            print("Use: favorites list | add NAME | remove NAME | toggle NAME")
            return 1
    except (WeatherError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not names:
        print("No favorites")
    for i, name in enumerate(names, 1):
        print(f"{i}. {name}")
    return 0


def _cmd_config(config: ProxyConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2, exclude={"provider": {"api_key"}}))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(_redacted(config), args.key))
            return 0
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        print("Use: config show | config get KEY")
        return 1


def _redacted(config: ProxyConfig) -> ProxyConfig:
    """Copy of the config with the provider credential masked."""
    masked = REDACTED if config.provider.api_key else ""
    return config.model_copy(
        update={"provider": config.provider.model_copy(update={"api_key": masked})}
    )
