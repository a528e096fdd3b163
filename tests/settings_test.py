from __future__ import annotations

import pytest

from weathermood.entities import Coordinates
from weathermood.settings import ImproperlyConfigured, Settings


ENV_VARS = (
    "OPEN_WEATHER_KEY",
    "OPEN_WEATHER_URL",
    "WEATHERMOOD_TIMEOUT",
    "WEATHERMOOD_AUTO_FETCH",
    "WEATHERMOOD_LATITUDE",
    "WEATHERMOOD_LONGITUDE",
    "WEATHERMOOD_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores the original (possibly unset)
    # value even when load_dotenv writes the variable during the test.
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def missing_dotenv(tmp_path):
    return str(tmp_path / "missing.env")


def test_defaults(missing_dotenv):
    settings = Settings.from_env(missing_dotenv)

    assert settings.open_weather_key == ""
    assert settings.open_weather_url == "https://api.openweathermap.org/data/2.5/weather"
    assert settings.request_timeout is None
    assert settings.auto_fetch is True
    assert settings.fixed_position is None
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch, missing_dotenv):
    monkeypatch.setenv("OPEN_WEATHER_KEY", " secret ")
    monkeypatch.setenv("WEATHERMOOD_TIMEOUT", "4")
    monkeypatch.setenv("WEATHERMOOD_AUTO_FETCH", "0")
    monkeypatch.setenv("WEATHERMOOD_LATITUDE", "14.6")
    monkeypatch.setenv("WEATHERMOOD_LONGITUDE", "121.0")
    monkeypatch.setenv("WEATHERMOOD_LOG_LEVEL", "debug")

    settings = Settings.from_env(missing_dotenv)

    assert settings.open_weather_key == "secret"
    assert settings.request_timeout == 4.0
    assert settings.auto_fetch is False
    assert settings.fixed_position == Coordinates(14.6, 121.0)
    assert settings.log_level == "DEBUG"


def test_reads_dotenv_file(tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("OPEN_WEATHER_KEY=from-dotenv\n", encoding="utf-8")

    assert Settings.from_env(str(dotenv)).open_weather_key == "from-dotenv"


def test_environment_wins_over_dotenv(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("OPEN_WEATHER_KEY=from-dotenv\n", encoding="utf-8")
    monkeypatch.setenv("OPEN_WEATHER_KEY", "from-env")

    assert Settings.from_env(str(dotenv)).open_weather_key == "from-env"


def test_invalid_number(monkeypatch, missing_dotenv):
    monkeypatch.setenv("WEATHERMOOD_TIMEOUT", "soon")

    with pytest.raises(ImproperlyConfigured):
        Settings.from_env(missing_dotenv)


def test_half_configured_position(monkeypatch, missing_dotenv):
    monkeypatch.setenv("WEATHERMOOD_LATITUDE", "14.6")

    with pytest.raises(ImproperlyConfigured):
        Settings.from_env(missing_dotenv)
