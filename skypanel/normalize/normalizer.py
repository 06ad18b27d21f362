"""Normalization: raw wttr.in JSON -> display-ready WeatherModel."""

import json
import logging
from collections import Counter
from collections.abc import Sequence
from datetime import date, time
from pathlib import Path

from pydantic import ValidationError

from skypanel.errors import DerivationFailure, ParseFailure
from skypanel.models.weather import (
    Astronomy,
    CurrentConditions,
    ForecastDay,
    ForecastHour,
    WeatherModel,
)
from skypanel.normalize.conditions import describe, icon_for
from skypanel.normalize.daynight import TIME_OF_DAY_FORMAT, is_night
from skypanel.normalize.payload import RawCurrentCondition, RawDay, RawHour, WttrPayload

logger = logging.getLogger(__name__)

DEFAULT_ICON_DIR = "svg"


def normalize(
    raw: str,
    captured_time: str,
    captured_date: str,
    hour_12: bool,
    icon_dir: str | Path = DEFAULT_ICON_DIR,
) -> WeatherModel:
    """Build a WeatherModel from one raw payload.

    Raises ParseFailure for malformed JSON, dates or hour labels and
    DerivationFailure for records missing the fields a display value needs.
    No partial model is ever returned.
    """
    payload = parse_payload(raw)

    # Tonight's sunset drives the current conditions' day/night art
    tonight_sunset = payload.weather[0].astronomy[0].sunset
    current = _build_current(
        payload.current_condition[0], captured_time, tonight_sunset, icon_dir
    )
    days = tuple(
        _build_day(day, captured_time, hour_12, icon_dir) for day in payload.weather
    )

    return WeatherModel(
        captured_time=captured_time,
        captured_date=captured_date,
        current=current,
        days=days,
    )


def parse_payload(raw: str) -> WttrPayload:
    """Parse raw text once into the single payload structure."""
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseFailure(f"Malformed forecast JSON: {e}") from e
    try:
        return WttrPayload.model_validate(document)
    except ValidationError as e:
        raise DerivationFailure(f"Forecast payload missing required fields: {e}") from e


def daily_condition_code(codes: Sequence[str]) -> str:
    """Statistical mode of a day's hourly condition codes.

    Ties go to the code that appears first in the hourly sequence.
    """
    if not codes:
        raise DerivationFailure("No hourly condition codes to summarize")
    return Counter(codes).most_common(1)[0][0]


def reformat_date(raw_date: str) -> str:
    """'2026-10-19' -> 'Monday October 19, 2026'."""
    try:
        parsed = date.fromisoformat(raw_date)
    except ValueError as e:
        raise ParseFailure(f"Invalid forecast date: {raw_date!r}") from e
    return f"{parsed:%A %B} {parsed.day}, {parsed.year}"


def reformat_time(raw_time: str, hour_12: bool) -> tuple[str, time]:
    """Hour label such as '0', '900' or '2100' -> (display string, time)."""
    try:
        hour = int(raw_time) // 100
    except ValueError as e:
        raise ParseFailure(f"Invalid hourly forecast time: {raw_time!r}") from e

    if not 0 <= hour <= 23:
        logger.warning("Hourly forecast time out of range: %s", raw_time)
        hour = 0
    parsed = time(hour, 0)
    display = parsed.strftime("%I %p" if hour_12 else "%H")
    return display, parsed


def precipitation_chance(chance_of_rain: str, chance_of_snow: str) -> float:
    try:
        return float(chance_of_rain) + float(chance_of_snow)
    except ValueError as e:
        raise DerivationFailure(
            f"Invalid precipitation chance: rain={chance_of_rain!r} snow={chance_of_snow!r}"
        ) from e


def average_precipitation_chance(hours: Sequence[RawHour]) -> float:
    if not hours:
        raise DerivationFailure("No hourly entries to average")
    total = sum(precipitation_chance(h.chance_of_rain, h.chance_of_snow) for h in hours)
    return total / len(hours)


def _format_chance(value: float) -> str:
    # 40.0 -> "40", 12.5 -> "12.5"
    return str(int(value)) if value.is_integer() else str(value)


def _build_current(
    raw: RawCurrentCondition, captured_time: str, sunset: str, icon_dir: str | Path
) -> CurrentConditions:
    night = is_night(captured_time, sunset, force_day=False)
    return CurrentConditions(
        weather_code=raw.weather_code,
        temp_f=raw.temp_f,
        temp_c=raw.temp_c,
        feels_like_f=raw.feels_like_f,
        feels_like_c=raw.feels_like_c,
        humidity=raw.humidity,
        pressure=raw.pressure,
        uv_index=raw.uv_index,
        visibility=raw.visibility,
        description=describe(raw.weather_code, night),
        icon=icon_for(raw.weather_code, night, icon_dir),
    )


def _build_day(
    raw: RawDay, captured_time: str, hour_12: bool, icon_dir: str | Path
) -> ForecastDay:
    sunset = raw.astronomy[0].sunset
    code = daily_condition_code([h.weather_code for h in raw.hourly])
    night = is_night(captured_time, sunset, force_day=False)
    # Daily summaries always use day art
    day_art_night = is_night(captured_time, sunset, force_day=True)

    return ForecastDay(
        raw_date=raw.date,
        date=reformat_date(raw.date),
        min_temp_f=raw.min_temp_f,
        avg_temp_f=raw.avg_temp_f,
        max_temp_f=raw.max_temp_f,
        min_temp_c=raw.min_temp_c,
        avg_temp_c=raw.avg_temp_c,
        max_temp_c=raw.max_temp_c,
        uv_index=raw.uv_index,
        astronomy=tuple(
            Astronomy(moon_phase=a.moon_phase, sunrise=a.sunrise, sunset=a.sunset)
            for a in raw.astronomy
        ),
        hourly=tuple(_build_hour(h, sunset, hour_12, icon_dir) for h in raw.hourly),
        avg_chance_of_precip=f"{average_precipitation_chance(raw.hourly):.0f}",
        weather_code=code,
        description=describe(code, night),
        icon=icon_for(code, day_art_night, icon_dir),
    )


def _build_hour(
    raw: RawHour, sunset: str, hour_12: bool, icon_dir: str | Path
) -> ForecastHour:
    display_time, parsed = reformat_time(raw.time, hour_12)
    observed = parsed.strftime(TIME_OF_DAY_FORMAT)
    night = is_night(observed, sunset, force_day=False)

    return ForecastHour(
        raw_time=raw.time,
        time=display_time,
        temp_f=raw.temp_f,
        temp_c=raw.temp_c,
        feels_like_f=raw.feels_like_f,
        feels_like_c=raw.feels_like_c,
        chance_of_rain=raw.chance_of_rain,
        chance_of_snow=raw.chance_of_snow,
        chance_of_precip=_format_chance(
            precipitation_chance(raw.chance_of_rain, raw.chance_of_snow)
        ),
        weather_code=raw.weather_code,
        description=describe(raw.weather_code, night),
        icon=icon_for(raw.weather_code, night, icon_dir),
    )
