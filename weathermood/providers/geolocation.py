"""Device position lookup behind permission and service checks."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Protocol

from ..entities import Coordinates
from ..errors import LocationPermissionDenied, LocationServiceDisabled


class LocationPermission(str, Enum):
    UNDETERMINED = "undetermined"
    DENIED = "denied"
    DENIED_FOREVER = "denied_forever"
    WHILE_IN_USE = "while_in_use"
    ALWAYS = "always"


GRANTED = frozenset({LocationPermission.WHILE_IN_USE, LocationPermission.ALWAYS})
ASKABLE = frozenset({LocationPermission.UNDETERMINED, LocationPermission.DENIED})


class LocationBackend(Protocol):
    """Platform location API the resolver drives."""

    async def is_service_enabled(self) -> bool:
        ...

    async def check_permission(self) -> LocationPermission:
        ...

    async def request_permission(self) -> LocationPermission:
        ...

    async def current_position(self, *, high_accuracy: bool = True) -> Coordinates:
        ...


class GeoResolver:
    def __init__(self, backend: LocationBackend) -> None:
        self.backend = backend
        self._log = logging.getLogger(self.__class__.__name__)

    async def current_position(self) -> Coordinates:
        if not await self.backend.is_service_enabled():
            self._log.warning("Location service is disabled")
            raise LocationServiceDisabled()

        permission = await self.backend.check_permission()
        if permission in ASKABLE:
            self._log.info("Requesting location permission (was %s)", permission.value)
            permission = await self.backend.request_permission()
        if permission not in GRANTED:
            self._log.warning("Location permission refused: %s", permission.value)
            raise LocationPermissionDenied()

        return await self.backend.current_position(high_accuracy=True)


class FixedLocationBackend:
    """Backend for hosts without a location service: a configured position.

    The service counts as disabled when no position is configured.
    """

    def __init__(self, coordinates: Optional[Coordinates]) -> None:
        self.coordinates = coordinates

    async def is_service_enabled(self) -> bool:
        return self.coordinates is not None

    async def check_permission(self) -> LocationPermission:
        return LocationPermission.ALWAYS

    async def request_permission(self) -> LocationPermission:
        return LocationPermission.ALWAYS

    async def current_position(self, *, high_accuracy: bool = True) -> Coordinates:
        if self.coordinates is None:
            raise LocationServiceDisabled()
        return self.coordinates


__all__ = [
    "FixedLocationBackend",
    "GeoResolver",
    "LocationBackend",
    "LocationPermission",
]
