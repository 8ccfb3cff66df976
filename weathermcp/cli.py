"""CLI entry point: run the MCP server or a single tool from the shell."""

import argparse
import asyncio
import logging
from collections.abc import Awaitable, Callable

from pydantic import TypeAdapter, ValidationError

from weathermcp.cache.store import TtlCache
from weathermcp.config.loader import config_hash, get_config_value, load_config, set_config_value
from weathermcp.config.schema import AppConfig
from weathermcp.ingest.nws_client import NwsClient
from weathermcp.pipeline.chains import WeatherPipeline
from weathermcp.server import Latitude, Longitude, StateCode, WeatherTools, build_server

logger = logging.getLogger(__name__)

ToolCall = Callable[[WeatherTools], Awaitable[str]]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weathermcp",
        description="Cached National Weather Service tools for MCP clients",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)"
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("serve", help="Run the MCP server on stdio")

    alerts_p = sub.add_parser("alerts", help="Active alerts for a state")
    alerts_p.add_argument("state")

    forecast_p = sub.add_parser("forecast", help="Forecast for a coordinate")
    forecast_p.add_argument("latitude", type=float)
    forecast_p.add_argument("longitude", type=float)

    city_p = sub.add_parser("city", help="Forecast for a known city")
    city_p.add_argument("name", nargs="+")

    current_p = sub.add_parser("current", help="Current observation for a coordinate")
    current_p.add_argument("latitude", type=float)
    current_p.add_argument("longitude", type=float)

    summary_p = sub.add_parser("summary", help="Alerts and city snapshot for a state")
    summary_p.add_argument("state")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. cache.ttl_seconds")
    set_p = config_sub.add_parser("set", help="Validate a config override")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    # stdout carries the MCP stdio stream; logs go to stderr
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.command == "serve":
            return _cmd_serve(config)
        elif args.command == "alerts":
            state = TypeAdapter(StateCode).validate_python(args.state)
            return _cmd_tool(config, lambda t: t.get_alerts(state))
        elif args.command == "forecast":
            lat, lon = _coordinate(args)
            return _cmd_tool(config, lambda t: t.get_forecast(lat, lon))
        elif args.command == "city":
            name = " ".join(args.name)
            return _cmd_tool(config, lambda t: t.get_city_forecast(name))
        elif args.command == "current":
            lat, lon = _coordinate(args)
            return _cmd_tool(config, lambda t: t.get_current_weather(lat, lon))
        elif args.command == "summary":
            state = TypeAdapter(StateCode).validate_python(args.state)
            return _cmd_tool(config, lambda t: t.get_weather_summary(state))
        elif args.command == "config":
            return _cmd_config(config, args)
    except ValidationError as e:
        print(f"Error: {e}")
        return 1

    parser.print_help()
    return 1


def _coordinate(args) -> tuple[float, float]:
    lat = TypeAdapter(Latitude).validate_python(args.latitude)
    lon = TypeAdapter(Longitude).validate_python(args.longitude)
    return lat, lon


def _cmd_serve(config: AppConfig) -> int:
    logger.info(
        "Weather MCP server '%s' starting on stdio (config %s)",
        config.server.name, config_hash(config),
    )
    try:
        build_server(config).run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in MCP server")
        return 1
    return 0


def _cmd_tool(config: AppConfig, call: ToolCall) -> int:
    print(asyncio.run(_run_tool(config, call)))
    return 0


async def _run_tool(config: AppConfig, call: ToolCall) -> str:
    cache = TtlCache(config.cache.ttl_seconds)
    async with NwsClient(config.upstream, cache) as client:
        return await call(WeatherTools(WeatherPipeline(client, config)))


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
        except KeyError as e:
            print(f"Error: {e}")
            return 1
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except (KeyError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        print(f"Set {key.strip()} = {get_config_value(new_config, key.strip())}")
        return 0
    print("Use: config show | config get key | config set key=value")
    return 1
