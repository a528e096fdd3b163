"""Fetch current weather from the command line and print the view as JSON."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from .entities import Coordinates, Failed, QueryState
from .providers.base import RequestConfig
from .providers.geolocation import FixedLocationBackend, GeoResolver
from .providers.openweather import OpenWeatherGateway
from .services.controller import QueryController
from .settings import ImproperlyConfigured, Settings
from .view import build_view


logger = logging.getLogger("weathermood")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weathermood", description="Fetch current weather")
    parser.add_argument("--city", type=str, help="City name")
    parser.add_argument("--lat", type=float, help="Latitude (overrides the configured position)")
    parser.add_argument("--lon", type=float, help="Longitude (overrides the configured position)")
    parser.add_argument("--env-file", type=str, default=None, help="Path to a .env file")
    return parser


def build_controller(settings: Settings, position: Optional[Coordinates] = None) -> QueryController:
    gateway = OpenWeatherGateway(
        api_key=settings.open_weather_key,
        base_url=settings.open_weather_url,
        request_config=RequestConfig(timeout=settings.request_timeout),
    )
    resolver = GeoResolver(FixedLocationBackend(position or settings.fixed_position))
    return QueryController(gateway=gateway, geo_resolver=resolver, auto_fetch=settings.auto_fetch)


def _log_state(state: QueryState) -> None:
    logger.debug("state changed: %s", state)


async def run(controller: QueryController, args: argparse.Namespace) -> QueryState:
    controller.subscribe(_log_state)
    if args.city is not None:
        await controller.search_city(args.city)
    elif controller.auto_fetch:
        await controller.start()
    else:
        await controller.use_location()
    return controller.state


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    try:
        settings = Settings.from_env(args.env_file)
    except ImproperlyConfigured as exc:
        parser.error(str(exc))
    logging.basicConfig(level=settings.log_level)

    position = Coordinates(args.lat, args.lon) if args.lat is not None else None
    controller = build_controller(settings, position)
    state = asyncio.run(run(controller, args))

    sys.stdout.write(json.dumps(build_view(state), ensure_ascii=False) + "\n")
    return 1 if isinstance(state, Failed) else 0


if __name__ == "__main__":
    sys.exit(main())
