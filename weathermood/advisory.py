"""Map a weather reading to a one-line advisory message."""
from __future__ import annotations

from typing import Optional

STORM = "Stormy skies today. Best to stay indoors and stay safe."
RAIN = "Rainy vibes. Grab an umbrella and enjoy something cozy."
SNOW = "Snow is falling. Bundle up and take it slow out there."
PLEASANT = "The weather is nice today! Let's go for a walk or enjoy something while the sun is out."
CLOUDY = "Cloudy but calm. Perfect for a coffee run or a relaxed stroll."
HOT = "It's pretty hot. Stay hydrated and find some shade."
COLD = "Chilly weather. Layer up and keep warm if you head out."
NEUTRAL = "Check the sky and enjoy your day. Conditions look steady."

PLEASANT_RANGE_C = (22.0, 32.0)
HOT_ABOVE_C = 32.0
COLD_BELOW_C = 12.0


def classify(temperature_c: Optional[float], condition_main: str, condition_description: str) -> str:
    """Return the advisory for a reading.

    Rules are checked in order and the first match wins, so a clear 35°C
    day is reported as pleasant, never hot.
    """
    summary = f"{condition_main or ''} {condition_description or ''}".lower()
    temp = float(temperature_c) if temperature_c is not None else None

    if "thunder" in summary:
        return STORM
    if "rain" in summary or "drizzle" in summary:
        return RAIN
    if "snow" in summary:
        return SNOW
    low, high = PLEASANT_RANGE_C
    if "clear" in summary or (temp is not None and low <= temp <= high):
        return PLEASANT
    if "cloud" in summary:
        return CLOUDY
    if temp is not None and temp > HOT_ABOVE_C:
        return HOT
    if temp is not None and temp < COLD_BELOW_C:
        return COLD
    return NEUTRAL


__all__ = ["classify"]
