"""Tests for the console entry point."""
import io
import json
import logging
import pytest
from unittest.mock import Mock, patch
import weather_cli
from weatherapi_provider import WeatherApiProvider


SAMPLE_PAYLOAD = {
    "location": {"name": "London", "region": "City of London, Greater London", "country": "UK"},
    "current": {"temp_c": 15.5, "condition": {"text": "Cloudy"}, "humidity": 80, "wind_kph": 12.3, "wind_dir": "SW"},
    "forecast": {"forecastday": [
        {"date": "2025-04-09", "day": {"maxtemp_c": 17.2, "mintemp_c": 8.1, "condition": {"text": "Sunny"},
                                       "maxwind_kph": 18.4, "totalprecip_mm": 0.3, "avghumidity": 71}},
    ]}
}


@pytest.fixture
def env(monkeypatch):
    """Environment with an API key and no .env loading."""
    monkeypatch.setenv("WEATHER_API_KEY", "env_key")
    monkeypatch.delenv("WEATHER_API_URL", raising=False)
    with patch('weather_cli.load_dotenv') as mock_load:
        yield mock_load


def ok_response(payload):
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.content = json.dumps(payload).encode("utf-8")
    mock_response.json.return_value = payload
    return mock_response


def test_parse_args_defaults():
    args = weather_cli.parse_args([])

    assert args.days == 3
    assert args.timeout == 10.0
    assert args.log_file is None
    assert args.verbose is False


def test_parse_args_overrides():
    args = weather_cli.parse_args(["--days", "5", "--timeout", "2.5", "--verbose", "--log-file", "w.log"])

    assert args.days == 5
    assert args.timeout == 2.5
    assert args.verbose is True
    assert args.log_file == "w.log"


def test_load_config(env):
    api_key, base_url = weather_cli.load_config()

    env.assert_called_once()
    assert api_key == "env_key"
    assert base_url is None


def test_load_config_url_override(env, monkeypatch):
    monkeypatch.setenv("WEATHER_API_URL", "http://localhost:9000/v1/forecast.json")

    _, base_url = weather_cli.load_config()

    assert base_url == "http://localhost:9000/v1/forecast.json"


def test_load_config_missing_key(env, monkeypatch):
    monkeypatch.delenv("WEATHER_API_KEY")

    with pytest.raises(SystemExit) as exc_info:
        weather_cli.load_config()

    assert "WEATHER_API_KEY" in str(exc_info.value)


def test_build_weather_service():
    args = weather_cli.parse_args(["--days", "2", "--timeout", "4"])

    service = weather_cli.build_weather_service("abc", None, args)

    assert service.days == 2
    assert isinstance(service.provider, WeatherApiProvider)
    assert service.provider.api_key == "abc"
    assert service.provider.base_url == WeatherApiProvider.BASE_URL
    assert service.provider.timeout == 4.0


def test_build_weather_service_rejects_zero_days():
    args = weather_cli.parse_args(["--days", "0"])

    with pytest.raises(SystemExit):
        weather_cli.build_weather_service("abc", None, args)


def test_setup_logging_levels():
    with patch('weather_cli.logging.basicConfig') as mock_config:
        weather_cli.setup_logging(None, verbose=True)

        kwargs = mock_config.call_args.kwargs
        assert kwargs["level"] == logging.DEBUG
        assert len(kwargs["handlers"]) == 1
        assert kwargs["handlers"][0].level == logging.DEBUG


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "weather.log"
    with patch('weather_cli.logging.basicConfig') as mock_config:
        weather_cli.setup_logging(str(log_file), verbose=False)

        kwargs = mock_config.call_args.kwargs
        assert kwargs["level"] == logging.INFO
        assert kwargs["handlers"][0].level == logging.WARNING
        assert kwargs["handlers"][1].level == logging.NOTSET
        assert isinstance(kwargs["handlers"][1], logging.FileHandler)
        kwargs["handlers"][1].close()


def test_main_end_to_end(env, monkeypatch, capsys):
    """City, current weather, forecast, exit through real stdin handling."""
    monkeypatch.setattr("sys.stdin", io.StringIO("London\n1\n2\n4\n"))
    with patch('weather_cli.setup_logging'), patch('weatherapi_provider.requests.get') as mock_get:
        mock_get.return_value = ok_response(SAMPLE_PAYLOAD)

        weather_cli.main([])

        _, kwargs = mock_get.call_args
        assert kwargs["params"] == {"key": "env_key", "q": "London", "days": 3}

    output = capsys.readouterr().out
    assert "Temperature: 15.5°C" in output
    assert "=== Weather Forecast for London ===" in output
    assert "  Average Humidity: 71.0%" in output
    assert "Goodbye!" in output


def test_main_stops_on_closed_input(env, monkeypatch, capsys):
    """Closing stdin ends the program without a traceback."""
    monkeypatch.setattr("sys.stdin", io.StringIO("London\n"))
    with patch('weather_cli.setup_logging'), patch('weatherapi_provider.requests.get') as mock_get:
        mock_get.return_value = ok_response(SAMPLE_PAYLOAD)

        weather_cli.main([])

    assert "Please enter your choice (1-4): " in capsys.readouterr().out
