"""Pydantic view of a wttr.in ``format=j1`` document.

The provider ships every value as a string. Only the fields the display
needs are declared; everything else in the document is ignored.
"""

from pydantic import BaseModel, Field

_IGNORE_EXTRA = {"extra": "ignore", "populate_by_name": True}


class RawCurrentCondition(BaseModel):
    model_config = _IGNORE_EXTRA

    weather_code: str = Field(alias="weatherCode")
    temp_f: str = Field(alias="temp_F")
    temp_c: str = Field(alias="temp_C")
    feels_like_f: str = Field(alias="FeelsLikeF")
    feels_like_c: str = Field(alias="FeelsLikeC")
    humidity: str
    pressure: str
    uv_index: str = Field(alias="uvIndex")
    visibility: str


class RawAstronomy(BaseModel):
    model_config = _IGNORE_EXTRA

    moon_phase: str
    sunrise: str
    sunset: str


class RawHour(BaseModel):
    model_config = _IGNORE_EXTRA

    time: str
    temp_f: str = Field(alias="tempF")
    temp_c: str = Field(alias="tempC")
    feels_like_f: str = Field(alias="FeelsLikeF")
    feels_like_c: str = Field(alias="FeelsLikeC")
    chance_of_rain: str = Field(alias="chanceofrain")
    chance_of_snow: str = Field(alias="chanceofsnow")
    weather_code: str = Field(alias="weatherCode")


class RawDay(BaseModel):
    model_config = _IGNORE_EXTRA

    date: str
    min_temp_f: str = Field(alias="mintempF")
    avg_temp_f: str = Field(alias="avgtempF")
    max_temp_f: str = Field(alias="maxtempF")
    min_temp_c: str = Field(alias="mintempC")
    avg_temp_c: str = Field(alias="avgtempC")
    max_temp_c: str = Field(alias="maxtempC")
    uv_index: str = Field(alias="uvIndex")
    astronomy: list[RawAstronomy] = Field(min_length=1)
    hourly: list[RawHour] = Field(min_length=1)


class WttrPayload(BaseModel):
    """Both the current-conditions and the daily-forecast view of one document."""

    model_config = _IGNORE_EXTRA

    current_condition: list[RawCurrentCondition] = Field(min_length=1)
    weather: list[RawDay] = Field(min_length=1)
