"""Output formatters for a normalized forecast."""

import dataclasses
import json
from datetime import datetime

from skypanel.models.common import TemperatureUnit
from skypanel.models.weather import ForecastDay, ForecastHour, WeatherModel


def format_clock(now: datetime, hour_12: bool) -> str:
    return now.strftime("%I:%M %p") if hour_12 else now.strftime("%H:%M")


def format_long_date(now: datetime) -> str:
    return f"{now:%A %B} {now.day}, {now.year}"


def format_updated_line(model: WeatherModel) -> str:
    line = f"Last updated: {model.captured_time} on {model.captured_date}"
    if model.from_cache and model.fallback_reason is not None:
        line += f" (cached: {model.fallback_reason.phrase})"
    return line


def format_current_text(model: WeatherModel, unit: TemperatureUnit) -> str:
    """Plain text block for the current conditions."""
    c = model.current
    lines = [
        c.description,
        f"{c.temperature(unit)}°{unit}    Feels like {c.feels_like(unit)}°{unit}",
        f"Humidity: {c.humidity}%",
        f"Visibility: {c.visibility}",
        f"UV Index: {c.uv_index}",
        format_updated_line(model),
    ]
    return "\n".join(lines)


def format_day_text(day: ForecastDay, unit: TemperatureUnit) -> str:
    lines = [
        f"{day.date}: {day.description}",
        f"High: {day.max_temp(unit)}°{unit}    Low: {day.min_temp(unit)}°{unit}",
        f"{day.avg_chance_of_precip}% chance of precipitation",
        f"Sunrise: {day.sunrise}    Sunset: {day.sunset}",
    ]
    return "\n".join(lines)


def format_hour_text(hour: ForecastHour, unit: TemperatureUnit) -> str:
    return (
        f"{hour.time}  {hour.description}  "
        f"{hour.temperature(unit)}°{unit} Feels like: {hour.feels_like(unit)}°{unit}  "
        f"{hour.chance_of_precip}% chance of precip"
    )


def format_weather_text(model: WeatherModel, unit: TemperatureUnit) -> str:
    sections = [format_current_text(model, unit)]
    for day in model.days:
        block = [format_day_text(day, unit)]
        block.extend(f"  {format_hour_text(h, unit)}" for h in day.hourly)
        sections.append("\n".join(block))
    return "\n\n".join(sections)


def format_weather_json(model: WeatherModel) -> str:
    """JSON document of the model for programmatic consumption."""
    data = dataclasses.asdict(model)
    if model.fallback_reason is not None:
        data["fallback_reason"] = int(model.fallback_reason)
    return json.dumps(data, indent=2)
