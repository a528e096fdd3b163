"""OpenWeather current weather gateway."""
from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from .base import HttpProvider
from .schemas import CurrentWeatherPayload
from ..entities import WeatherReading
from ..errors import MalformedResponse, MissingCredential


logger = logging.getLogger(__name__)

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"


class OpenWeatherGateway(HttpProvider):
    """Reads current conditions by coordinates or by city name."""

    base_url = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(self, *, api_key: Optional[str], base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = (api_key or "").strip()
        self.base_url = base_url or self.base_url

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    # Public API ---------------------------------------------------------
    def by_coordinates(self, latitude: float, longitude: float) -> WeatherReading:
        return self._fetch({"lat": latitude, "lon": longitude})

    def by_city_name(self, name: str) -> WeatherReading:
        return self._fetch({"q": name})

    # Helpers ------------------------------------------------------------
    def _fetch(self, query: dict) -> WeatherReading:
        self._require_api_key()
        params = {**query, "appid": self.api_key, "units": "metric"}
        response = self._get(self.base_url, params)
        return parse_reading(self._json(response))

    def _require_api_key(self) -> None:
        if not self.has_credential:
            raise MissingCredential()


def parse_reading(data: Any) -> WeatherReading:
    """Project a decoded provider body onto a :class:`WeatherReading`.

    Only the ``weather`` list may be missing or empty; anything else that
    does not fit the envelope raises :class:`MalformedResponse`.
    """
    if not isinstance(data, dict):
        raise MalformedResponse(f"Unexpected weather payload: {type(data).__name__}")
    try:
        payload = CurrentWeatherPayload.model_validate(data)
    except ValidationError as exc:
        logger.error("Weather payload rejected: %s", exc)
        raise MalformedResponse(f"Unexpected weather payload: {exc.error_count()} invalid field(s)") from exc
    condition = payload.condition
    return WeatherReading(
        location_name=payload.name,
        temperature_c=payload.main.temp,
        feels_like_c=payload.main.feels_like,
        humidity_pct=payload.main.humidity,
        wind_speed_ms=payload.wind.speed,
        condition_main=condition.main,
        condition_description=condition.description,
        icon_code=condition.icon,
    )


def icon_url(icon_code: Optional[str]) -> Optional[str]:
    if not icon_code:
        return None
    return ICON_URL_TEMPLATE.format(icon=icon_code)


__all__ = ["OpenWeatherGateway", "icon_url", "parse_reading"]
