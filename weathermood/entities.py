from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherReading:
    """Normalized current conditions for one location.

    Values use metric units as requested from the provider:
    - temperatures in Celsius
    - humidity in percent
    - wind speed in metres per second (m/s)

    ``condition_main``/``condition_description`` are empty strings and
    ``icon_code`` is ``None`` when the provider sends no conditions.
    """

    location_name: str
    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    wind_speed_ms: float
    condition_main: str = ""
    condition_description: str = ""
    icon_code: Optional[str] = None


class QueryMode(str, Enum):
    CITY = "city"
    LOCATION = "location"


class ErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    SERVICE_DISABLED = "service_disabled"
    PERMISSION_DENIED = "permission_denied"
    UPSTREAM = "upstream_error"
    MALFORMED_RESPONSE = "malformed_response"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class ErrorInfo:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    mode: QueryMode


@dataclass(frozen=True)
class Success:
    reading: WeatherReading
    mode: QueryMode


@dataclass(frozen=True)
class Failed:
    error: ErrorInfo
    mode: QueryMode


QueryState = Union[Idle, Loading, Success, Failed]


__all__ = [
    "Coordinates",
    "ErrorInfo",
    "ErrorKind",
    "Failed",
    "Idle",
    "Loading",
    "QueryMode",
    "QueryState",
    "Success",
    "WeatherReading",
]
