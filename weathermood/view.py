"""JSON-ready projection of the controller state."""
from __future__ import annotations

import math
from typing import Any, Dict

from .advisory import classify
from .entities import Failed, Idle, Loading, QueryMode, QueryState, Success
from .providers.openweather import icon_url

IDLE_PROMPT = "Enter a city or use your location to get weather."

MODE_LABELS = {QueryMode.CITY: "City", QueryMode.LOCATION: "Location"}


def _round_half_away(value: float) -> int:
    # 22.5 -> 23 and -0.5 -> -1, unlike round()
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def build_view(state: QueryState) -> Dict[str, Any]:
    if isinstance(state, Idle):
        return {"status": "idle", "prompt": IDLE_PROMPT}
    if isinstance(state, Loading):
        return {"status": "loading", "mode": MODE_LABELS[state.mode]}
    if isinstance(state, Failed):
        return {
            "status": "error",
            "mode": MODE_LABELS[state.mode],
            "error": state.error.kind.value,
            "message": state.error.message,
        }
    if isinstance(state, Success):
        reading = state.reading
        return {
            "status": "success",
            "mode": MODE_LABELS[state.mode],
            "location": reading.location_name or "Unknown",
            "description": reading.condition_description or "No description",
            "temperature": f"{_round_half_away(reading.temperature_c)}°",
            "feels_like": f"Feels like {_round_half_away(reading.feels_like_c)}°C",
            "humidity": f"{reading.humidity_pct}%",
            "wind": f"{reading.wind_speed_ms} m/s",
            "icon_url": icon_url(reading.icon_code),
            "advisory": classify(
                reading.temperature_c,
                reading.condition_main,
                reading.condition_description,
            ),
        }
    raise TypeError(f"Unknown query state: {state!r}")


__all__ = ["IDLE_PROMPT", "build_view"]
