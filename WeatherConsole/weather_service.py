"""Weather service holding the one live forecast for the console."""
import logging
from typing import Optional
from weather_provider import WeatherProviderBase, WeatherProviderError
from weather_data import WeatherData


class WeatherService:
    """
    Service that wraps a weather provider and keeps the held model.

    Every successful lookup replaces the held WeatherData as a whole.
    A failed lookup raises and leaves the previously held data in place.
    No caching and no retries happen here; retrying is up to the caller.
    """

    def __init__(self, provider: WeatherProviderBase, days: int = 3):
        """
        Initialize weather service.

        Args:
            provider: Weather provider to use
            days: Number of forecast days to request on every lookup
        """
        self.provider = provider
        self.days = days

        self._weather: Optional[WeatherData] = None
        self._city: Optional[str] = None

    @property
    def weather(self) -> Optional[WeatherData]:
        """The held model, or None before the first successful lookup."""
        return self._weather

    @property
    def city(self) -> Optional[str]:
        """City string that produced the held model."""
        return self._city

    @property
    def has_weather(self) -> bool:
        return self._weather is not None

    def load(self, city: str) -> WeatherData:
        """
        Fetch weather for a city and make it the held model.

        Returns:
            WeatherData: The newly held weather data

        Raises:
            WeatherProviderError: If the provider fails; the held model is unchanged
        """
        logging.info(f"Fetching {self.days}-day forecast for {city!r}")
        try:
            new_data = self.provider.get_forecast(city, self.days)
        except WeatherProviderError:
            if self._weather is not None:
                logging.warning(f"Lookup for {city!r} failed, keeping forecast for {self._city!r}")
            else:
                logging.warning(f"Lookup for {city!r} failed, no forecast held yet")
            raise

        self._weather = new_data
        self._city = city
        logging.debug(f"Now holding forecast for {new_data.location.name}, {new_data.location.country}")
        return new_data
