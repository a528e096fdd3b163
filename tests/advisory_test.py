from __future__ import annotations

import pytest

from weathermood import advisory
from weathermood.advisory import classify


def test_clear_and_hot_is_pleasant():
    assert classify(35, "Clear", "clear sky") == advisory.PLEASANT


def test_cloud_is_checked_before_heat():
    assert classify(35, "Clouds", "overcast") == advisory.CLOUDY


def test_rain_wins_over_cold():
    assert classify(5, "Rain", "light rain") == advisory.RAIN


def test_storm_without_temperature():
    assert classify(None, "Thunderstorm", "thunderstorm") == advisory.STORM


def test_thunder_with_rain_is_storm():
    assert classify(25, "Thunderstorm", "thunderstorm with heavy rain") == advisory.STORM


def test_drizzle_is_rain():
    assert classify(18, "Drizzle", "light intensity drizzle") == advisory.RAIN


def test_snow_before_pleasant_and_cold():
    assert classify(-3, "Snow", "light snow") == advisory.SNOW


def test_matching_is_case_insensitive():
    assert classify(None, "CLEAR", "") == advisory.PLEASANT
    assert classify(None, "", "Scattered CLOUDS") == advisory.CLOUDY


@pytest.mark.parametrize("temp", [22, 22.0, 27.5, 32])
def test_pleasant_temperature_band_is_inclusive(temp):
    assert classify(temp, "Mist", "mist") == advisory.PLEASANT


@pytest.mark.parametrize(
    "temp, expected",
    [
        (32.1, advisory.HOT),
        (40, advisory.HOT),
        (11.9, advisory.COLD),
        (-10, advisory.COLD),
        (12, advisory.NEUTRAL),
        (21.9, advisory.NEUTRAL),
    ],
)
def test_temperature_rules_without_keywords(temp, expected):
    assert classify(temp, "Haze", "haze") == expected


def test_pleasant_band_beats_clouds():
    assert classify(25, "Clouds", "few clouds") == advisory.PLEASANT


def test_unknown_temperature_falls_back_to_neutral():
    assert classify(None, "", "") == advisory.NEUTRAL
    assert classify(None, "Fog", "fog") == advisory.NEUTRAL
