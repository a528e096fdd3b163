"""Runtime configuration read from the environment and a local ``.env``."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .entities import Coordinates


class ImproperlyConfigured(RuntimeError):
    """Raised when an environment variable holds an unusable value."""


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def env_float(name: str) -> Optional[float]:
    value = env(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ImproperlyConfigured(f"Environment variable {name} must be a number, got {value!r}") from exc


def env_bool(name: str, default: bool) -> bool:
    value = env(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    open_weather_key: str = ""
    open_weather_url: str = "https://api.openweathermap.org/data/2.5/weather"
    request_timeout: Optional[float] = None
    auto_fetch: bool = True
    fixed_position: Optional[Coordinates] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Settings":
        load_dotenv(dotenv_path=dotenv_path or ".env", override=False)

        latitude = env_float("WEATHERMOOD_LATITUDE")
        longitude = env_float("WEATHERMOOD_LONGITUDE")
        if (latitude is None) != (longitude is None):
            raise ImproperlyConfigured("WEATHERMOOD_LATITUDE and WEATHERMOOD_LONGITUDE must be set together")
        position = Coordinates(latitude, longitude) if latitude is not None else None

        return cls(
            open_weather_key=env("OPEN_WEATHER_KEY", "") or "",
            open_weather_url=env("OPEN_WEATHER_URL", cls.open_weather_url) or cls.open_weather_url,
            request_timeout=env_float("WEATHERMOOD_TIMEOUT"),
            auto_fetch=env_bool("WEATHERMOOD_AUTO_FETCH", True),
            fixed_position=position,
            log_level=(env("WEATHERMOOD_LOG_LEVEL", "INFO") or "INFO").upper(),
        )


__all__ = ["ImproperlyConfigured", "Settings", "env"]
