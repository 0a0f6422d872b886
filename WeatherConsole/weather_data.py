"""Weather domain model - immutable data structures for one forecast response."""
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Location:
    """Resolved place; may differ from what the user typed."""
    name: str = ""
    region: str = ""
    country: str = ""


@dataclass(frozen=True)
class CurrentConditions:
    """Weather snapshot for "now" at the resolved location."""
    temperature_celsius: float = 0.0
    condition_text: str = ""  # e.g., "Partly cloudy", "Light rain"
    humidity_percent: int = 0  # 0-100 expected, not enforced
    wind_speed_kph: float = 0.0
    wind_direction: str = ""  # compass point, e.g., "NW"


@dataclass(frozen=True)
class ForecastDay:
    """One calendar date of the multi-day forecast."""
    date: str = ""  # as returned by the API, e.g., "2025-04-09"
    max_temp_c: float = 0.0
    min_temp_c: float = 0.0
    condition_text: str = ""
    max_wind_kph: float = 0.0
    total_precipitation_mm: float = 0.0
    average_humidity_percent: float = 0.0


@dataclass(frozen=True)
class WeatherData:
    """
    Aggregate built from a single API response.

    Instances are never modified; a refresh replaces the whole object.
    The forecast keeps the API's chronological order.
    """
    location: Location
    current: CurrentConditions
    forecast: Tuple[ForecastDay, ...] = field(default_factory=tuple)

    @property
    def forecast_days(self) -> int:
        """Number of forecast days actually returned."""
        return len(self.forecast)
