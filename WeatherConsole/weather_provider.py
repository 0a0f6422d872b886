"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from typing import Optional
from weather_data import WeatherData


class WeatherProviderBase(ABC):
    """Abstract base class for weather forecast providers."""

    @abstractmethod
    def get_forecast(self, city: str, days: int) -> WeatherData:
        """
        Fetch current conditions and a multi-day forecast for a city.

        Args:
            city: Free-text city name as typed by the user
            days: Number of forecast days to request

        Returns:
            WeatherData: Fully populated weather information

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class TransportError(WeatherProviderError):
    """The HTTP call itself failed (DNS, connection, timeout)."""
    pass


class StatusError(WeatherProviderError):
    """The API answered with a status other than 200."""

    def __init__(self, status_code: int, detail: Optional[str] = None):
        message = f"API returned non-200 status code: {status_code}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)
        self.status_code = status_code


class BodyReadError(WeatherProviderError):
    """The connection failed while reading the response body."""
    pass


class DecodeError(WeatherProviderError):
    """The body is not JSON or does not fit the expected structure."""
    pass
