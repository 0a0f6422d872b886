"""Text rendering for weather data - pure formatters plus thin printers."""
import sys
from typing import List, Optional, TextIO
from weather_data import WeatherData, ForecastDay


def format_current_lines(weather: WeatherData) -> List[str]:
    """
    Build the current-conditions block.

    Floats are shown with one decimal place, humidity as a bare integer.

    Args:
        weather: Weather data to display

    Returns:
        Lines to print, starting with an empty separator line
    """
    location = weather.location
    current = weather.current
    return [
        "",
        f"=== Current Weather in {location.name}, {location.country} ===",
        f"Temperature: {current.temperature_celsius:.1f}°C",
        f"Condition: {current.condition_text}",
        f"Humidity: {current.humidity_percent:d}%",
        f"Wind: {current.wind_speed_kph:.1f} km/h from {current.wind_direction}",
    ]


def format_forecast_day_lines(day: ForecastDay) -> List[str]:
    """Build the indented block for one forecast day."""
    return [
        "",
        f"Date: {day.date}",
        f"  Max Temperature: {day.max_temp_c:.1f}°C",
        f"  Min Temperature: {day.min_temp_c:.1f}°C",
        f"  Condition: {day.condition_text}",
        f"  Max Wind: {day.max_wind_kph:.1f} km/h",
        f"  Precipitation: {day.total_precipitation_mm:.1f} mm",
        f"  Average Humidity: {day.average_humidity_percent:.1f}%",
    ]


def format_forecast_lines(weather: WeatherData) -> List[str]:
    """
    Build the forecast block: a header, then each day in API order.

    Args:
        weather: Weather data to display

    Returns:
        Lines to print
    """
    lines = ["", f"=== Weather Forecast for {weather.location.name} ==="]
    for day in weather.forecast:
        lines.extend(format_forecast_day_lines(day))
    return lines


def _write_lines(lines: List[str], out: Optional[TextIO]) -> None:
    out = out or sys.stdout
    for line in lines:
        out.write(line + "\n")
    out.flush()


def show_current(weather: WeatherData, out: Optional[TextIO] = None) -> None:
    """Print current conditions to out (stdout by default)."""
    _write_lines(format_current_lines(weather), out)


def show_forecast(weather: WeatherData, out: Optional[TextIO] = None) -> None:
    """Print the forecast to out (stdout by default)."""
    _write_lines(format_forecast_lines(weather), out)
