from __future__ import annotations

from typing import Optional

from .entities import ErrorInfo, ErrorKind


class WeatherError(RuntimeError):
    """Base error for every failure a query can end with."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def to_info(self) -> ErrorInfo:
        return ErrorInfo(kind=self.kind, message=str(self))


class MissingCredential(WeatherError):
    """Raised before any network call when no API key is configured."""

    kind = ErrorKind.MISSING_CREDENTIAL

    def __init__(self, message: str = "Missing OPEN_WEATHER_KEY in .env") -> None:
        super().__init__(message)


class LocationServiceDisabled(WeatherError):
    kind = ErrorKind.SERVICE_DISABLED

    def __init__(self, message: str = "Location services are disabled. Please enable GPS.") -> None:
        super().__init__(message)


class LocationPermissionDenied(WeatherError):
    kind = ErrorKind.PERMISSION_DENIED

    def __init__(self, message: str = "Location permission not granted") -> None:
        super().__init__(message)


class UpstreamError(WeatherError):
    """Non-200 answer from the provider, or a transport failure (no status)."""

    kind = ErrorKind.UPSTREAM

    def __init__(self, status_code: Optional[int], body: str, message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.body = body
        if message is None:
            message = f"Failed to load weather data ({status_code}): {body}"
        super().__init__(message)


class MalformedResponse(WeatherError):
    """The provider answered 200 with a body that does not fit the envelope."""

    kind = ErrorKind.MALFORMED_RESPONSE


__all__ = [
    "LocationPermissionDenied",
    "LocationServiceDisabled",
    "MalformedResponse",
    "MissingCredential",
    "UpstreamError",
    "WeatherError",
]
