"""Normalized forecast models built from a wttr.in payload."""

from dataclasses import dataclass
from http import HTTPStatus

from skypanel.models.common import TemperatureUnit


@dataclass(frozen=True)
class RawSnapshot:
    raw: str
    captured_time: str  # e.g. "03:45 pm"
    captured_date: str  # MM/DD/YY


@dataclass(frozen=True)
class Astronomy:
    moon_phase: str
    sunrise: str
    sunset: str


@dataclass(frozen=True)
class CurrentConditions:
    weather_code: str
    temp_f: str
    temp_c: str
    feels_like_f: str
    feels_like_c: str
    humidity: str
    pressure: str
    uv_index: str
    visibility: str
    description: str
    icon: str

    def temperature(self, unit: TemperatureUnit) -> str:
        return self.temp_f if unit == TemperatureUnit.FAHRENHEIT else self.temp_c

    def feels_like(self, unit: TemperatureUnit) -> str:
        if unit == TemperatureUnit.FAHRENHEIT:
            return self.feels_like_f
        return self.feels_like_c


@dataclass(frozen=True)
class ForecastHour:
    raw_time: str
    time: str
    temp_f: str
    temp_c: str
    feels_like_f: str
    feels_like_c: str
    chance_of_rain: str
    chance_of_snow: str
    chance_of_precip: str  # rain + snow
    weather_code: str
    description: str
    icon: str

    def temperature(self, unit: TemperatureUnit) -> str:
        return self.temp_f if unit == TemperatureUnit.FAHRENHEIT else self.temp_c

    def feels_like(self, unit: TemperatureUnit) -> str:
        if unit == TemperatureUnit.FAHRENHEIT:
            return self.feels_like_f
        return self.feels_like_c


@dataclass(frozen=True)
class ForecastDay:
    raw_date: str  # YYYY-MM-DD
    date: str
    min_temp_f: str
    avg_temp_f: str
    max_temp_f: str
    min_temp_c: str
    avg_temp_c: str
    max_temp_c: str
    uv_index: str
    astronomy: tuple[Astronomy, ...]
    hourly: tuple[ForecastHour, ...]
    avg_chance_of_precip: str
    weather_code: str
    description: str
    icon: str

    @property
    def sunrise(self) -> str:
        return self.astronomy[0].sunrise

    @property
    def sunset(self) -> str:
        return self.astronomy[0].sunset

    @property
    def moon_phase(self) -> str:
        return self.astronomy[0].moon_phase

    def min_temp(self, unit: TemperatureUnit) -> str:
        return self.min_temp_f if unit == TemperatureUnit.FAHRENHEIT else self.min_temp_c

    def avg_temp(self, unit: TemperatureUnit) -> str:
        return self.avg_temp_f if unit == TemperatureUnit.FAHRENHEIT else self.avg_temp_c

    def max_temp(self, unit: TemperatureUnit) -> str:
        return self.max_temp_f if unit == TemperatureUnit.FAHRENHEIT else self.max_temp_c


@dataclass(frozen=True)
class WeatherModel:
    captured_time: str
    captured_date: str
    current: CurrentConditions
    days: tuple[ForecastDay, ...]  # day 0 is today
    from_cache: bool = False
    fallback_reason: HTTPStatus | None = None
