"""Schema of the OpenWeather "current weather" envelope."""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

__all__ = ["ConditionPayload", "CurrentWeatherPayload", "MainPayload", "WindPayload"]


class ConditionPayload(BaseModel):
    main: str = Field(default="")
    description: str = Field(default="")
    icon: Optional[str] = Field(default=None)

    @field_validator("main", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class MainPayload(BaseModel):
    temp: float = Field(...)
    feels_like: float = Field(...)
    humidity: int = Field(...)


class WindPayload(BaseModel):
    speed: float = Field(...)


class CurrentWeatherPayload(BaseModel):
    name: str = Field(default="")
    main: MainPayload = Field(...)
    wind: WindPayload = Field(...)
    weather: List[ConditionPayload] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("weather", mode="before")
    @classmethod
    def _missing_conditions(cls, value: Any) -> Any:
        # A null list is treated like an empty one.
        return [] if value is None else value

    @property
    def condition(self) -> ConditionPayload:
        if self.weather:
            return self.weather[0]
        return ConditionPayload()
