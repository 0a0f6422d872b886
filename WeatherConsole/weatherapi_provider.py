"""WeatherAPI.com forecast provider implementation."""
import json
import logging
import requests
from typing import Any, Dict, List, Optional
from weather_provider import (
    WeatherProviderBase,
    TransportError,
    StatusError,
    BodyReadError,
    DecodeError,
)
from weather_data import WeatherData, Location, CurrentConditions, ForecastDay


class WeatherApiProvider(WeatherProviderBase):
    """
    Weather provider using the WeatherAPI.com forecast endpoint.

    One call to /v1/forecast.json returns the resolved location, current
    conditions and the requested number of forecast days:
    https://www.weatherapi.com/docs/
    """

    BASE_URL = "http://api.weatherapi.com/v1/forecast.json"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = 10
    ):
        """
        Initialize WeatherAPI provider.

        Args:
            api_key: WeatherAPI.com API key
            base_url: Override for the forecast endpoint URL
            timeout: HTTP request timeout in seconds (None waits forever)
        """
        self.api_key = api_key
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout

    def get_forecast(self, city: str, days: int) -> WeatherData:
        """
        Fetch current weather and forecast from WeatherAPI.com.

        Returns:
            WeatherData: Current weather and forecast days

        Raises:
            TransportError: If the request could not be made
            StatusError: If the API answered with anything but 200
            BodyReadError: If the body could not be read completely
            DecodeError: If the body does not decode into WeatherData
        """
        params = {
            "key": self.api_key,
            "q": city,
            "days": days,
        }

        logging.info(f"Making WeatherAPI request: {self.base_url}")
        logging.debug(f"Request parameters: q={city!r}, days={days}, key={_mask(self.api_key)}")

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout, stream=True)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise TransportError(f"HTTP request error: {e}") from e

        try:
            logging.info(f"API response status: {response.status_code}")

            if response.status_code != 200:
                logging.error(f"API request failed with status {response.status_code}")
                raise StatusError(response.status_code, self._error_detail(response))

            try:
                body = response.content
            except requests.exceptions.RequestException as e:
                logging.error(f"Failed to read response body: {e}")
                raise BodyReadError(f"read response body error: {e}") from e
            logging.debug(f"Response body: {len(body)} bytes")

            try:
                # invalid UTF-8 decodes to U+FFFD
                data = json.loads(body.decode("utf-8", errors="replace"))
                weather_data = parse_forecast(data)
            except (ValueError, TypeError, RecursionError) as e:
                logging.error(f"Failed to parse API response: {e}", exc_info=True)
                raise DecodeError(f"JSON parsing error: {e}") from e
        finally:
            response.close()

        logging.info(
            f"Successfully parsed weather data: {weather_data.location.name}, "
            f"{weather_data.current.temperature_celsius}°C, {weather_data.forecast_days} forecast days"
        )
        return weather_data

    def _error_detail(self, response: requests.Response) -> Optional[str]:
        """Extract the message from a WeatherAPI error body, if there is one."""
        try:
            error_data = response.json()
        except (ValueError, RecursionError, requests.exceptions.RequestException):
            logging.debug("Error response body is not JSON")
            return None

        if not isinstance(error_data, dict):
            return None
        error = error_data.get("error")
        if not isinstance(error, dict):
            return None

        logging.error(f"WeatherAPI error response: {error_data}")
        message = error.get("message")
        return message if isinstance(message, str) else None


def parse_forecast(data: Any) -> WeatherData:
    """
    Map a decoded forecast.json payload onto WeatherData.

    Unknown fields are ignored and missing or null fields take their zero
    value. A value of the wrong JSON type raises ValueError, so nothing is
    returned for a structurally incompatible payload.
    """
    root = _as_dict(data, "response")

    location_data = _as_dict(root.get("location"), "location")
    location = Location(
        name=_as_str(location_data.get("name"), "location.name"),
        region=_as_str(location_data.get("region"), "location.region"),
        country=_as_str(location_data.get("country"), "location.country"),
    )

    current_data = _as_dict(root.get("current"), "current")
    current_condition = _as_dict(current_data.get("condition"), "current.condition")
    current = CurrentConditions(
        temperature_celsius=_as_float(current_data.get("temp_c"), "current.temp_c"),
        condition_text=_as_str(current_condition.get("text"), "current.condition.text"),
        humidity_percent=_as_int(current_data.get("humidity"), "current.humidity"),
        wind_speed_kph=_as_float(current_data.get("wind_kph"), "current.wind_kph"),
        wind_direction=_as_str(current_data.get("wind_dir"), "current.wind_dir"),
    )

    forecast_data = _as_dict(root.get("forecast"), "forecast")
    days: List[ForecastDay] = []
    for index, entry in enumerate(_as_list(forecast_data.get("forecastday"), "forecast.forecastday")):
        path = f"forecast.forecastday[{index}]"
        entry = _as_dict(entry, path)
        day = _as_dict(entry.get("day"), f"{path}.day")
        condition = _as_dict(day.get("condition"), f"{path}.day.condition")
        days.append(ForecastDay(
            date=_as_str(entry.get("date"), f"{path}.date"),
            max_temp_c=_as_float(day.get("maxtemp_c"), f"{path}.day.maxtemp_c"),
            min_temp_c=_as_float(day.get("mintemp_c"), f"{path}.day.mintemp_c"),
            condition_text=_as_str(condition.get("text"), f"{path}.day.condition.text"),
            max_wind_kph=_as_float(day.get("maxwind_kph"), f"{path}.day.maxwind_kph"),
            total_precipitation_mm=_as_float(day.get("totalprecip_mm"), f"{path}.day.totalprecip_mm"),
            average_humidity_percent=_as_float(day.get("avghumidity"), f"{path}.day.avghumidity"),
        ))

    return WeatherData(location=location, current=current, forecast=tuple(days))


# helpers ------------------------------------------------------------

def _mask(api_key: str) -> str:
    if len(api_key) <= 4:
        return "****"
    return f"{api_key[:4]}****"


def _as_dict(value: Any, path: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"expected object at {path}, got {type(value).__name__}")
    return value


def _as_list(value: Any, path: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"expected array at {path}, got {type(value).__name__}")
    return value


def _as_str(value: Any, path: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"expected string at {path}, got {type(value).__name__}")
    return value


def _as_float(value: Any, path: str) -> float:
    if value is None:
        return 0.0
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected number at {path}, got {type(value).__name__}")
    return float(value)


def _as_int(value: Any, path: str) -> int:
    if value is None:
        return 0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected integer at {path}, got {value!r}")
    return value
