"""Query orchestration: location or city lookup, then a weather read."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol

from ..entities import (
    ErrorInfo,
    ErrorKind,
    Failed,
    Idle,
    Loading,
    QueryMode,
    QueryState,
    Success,
    WeatherReading,
)
from ..errors import MissingCredential, WeatherError
from ..providers.geolocation import GeoResolver
from .store import StateStore, Subscriber


class WeatherGateway(Protocol):
    has_credential: bool

    def by_coordinates(self, latitude: float, longitude: float) -> WeatherReading:
        ...

    def by_city_name(self, name: str) -> WeatherReading:
        ...


class QueryController:
    """Owns the visible :class:`QueryState` and drives every fetch.

    Operations may overlap. Each one overwrites the state when it
    completes, so the operation that finishes last decides what is shown,
    whatever order they were started in.
    """

    def __init__(
        self,
        *,
        gateway: WeatherGateway,
        geo_resolver: GeoResolver,
        auto_fetch: bool = False,
        store: Optional[StateStore] = None,
    ) -> None:
        self.gateway = gateway
        self.geo_resolver = geo_resolver
        self.auto_fetch = auto_fetch
        self.last_mode: Optional[QueryMode] = None
        self.last_city: Optional[str] = None
        self._store = store or StateStore()
        self._log = logging.getLogger(self.__class__.__name__)

        if not gateway.has_credential:
            self._set(Failed(MissingCredential().to_info(), QueryMode.LOCATION))
        elif auto_fetch:
            self._set(Loading(QueryMode.LOCATION))
        else:
            self._set(Idle())

    # Observation --------------------------------------------------------
    @property
    def state(self) -> QueryState:
        return self._store.state

    def subscribe(self, callback: Subscriber):
        return self._store.subscribe(callback)

    # Public API ---------------------------------------------------------
    async def start(self) -> None:
        """Run the startup location fetch when auto-fetch is configured.

        Does nothing once another operation has replaced the startup
        ``Loading`` state.
        """
        if self.auto_fetch and self._awaiting_start:
            await self.use_location()

    async def use_location(self) -> None:
        mode = QueryMode.LOCATION
        self.last_mode = mode
        if not self.gateway.has_credential:
            self._set(Failed(MissingCredential().to_info(), mode))
            return

        self._set(Loading(mode))
        try:
            position = await self.geo_resolver.current_position()
            reading = await asyncio.to_thread(
                self.gateway.by_coordinates, position.latitude, position.longitude
            )
        except Exception as exc:  # noqa: BLE001 - every failure becomes a Failed state
            self._fail(exc, mode)
            return
        self._log.info("Weather by location %s: %s", (position.latitude, position.longitude), reading)
        self._set(Success(reading, mode))

    async def search_city(self, name: Optional[str]) -> None:
        city = (name or "").strip()
        if not city:
            if self._awaiting_start:
                # Nothing will complete the startup Loading state any more.
                self._set(Idle())
            return

        mode = QueryMode.CITY
        self.last_mode = mode
        self.last_city = city
        self._set(Loading(mode))
        try:
            reading = await asyncio.to_thread(self.gateway.by_city_name, city)
        except Exception as exc:  # noqa: BLE001 - every failure becomes a Failed state
            self._fail(exc, mode)
            return
        self._log.info("Weather for %s: %s", city, reading)
        self._set(Success(reading, mode))

    async def refresh(self) -> None:
        if self.last_mode is QueryMode.CITY and self.last_city:
            await self.search_city(self.last_city)
        else:
            await self.use_location()

    # Helpers ------------------------------------------------------------
    @property
    def _awaiting_start(self) -> bool:
        return self.last_mode is None and isinstance(self.state, Loading)

    def _fail(self, exc: Exception, mode: QueryMode) -> None:
        if isinstance(exc, WeatherError):
            self._log.warning("%s query failed: %s", mode.value, exc)
            info = exc.to_info()
        else:
            self._log.exception("%s query failed unexpectedly", mode.value)
            info = ErrorInfo(ErrorKind.UNEXPECTED, str(exc) or exc.__class__.__name__)
        self._set(Failed(info, mode))

    def _set(self, state: QueryState) -> None:
        self._log.debug("State -> %s", state)
        self._store.set(state)


__all__ = ["QueryController", "WeatherGateway"]
