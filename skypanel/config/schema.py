"""Pydantic v2 configuration schema with strict validation."""

from pydantic import AliasChoices, BaseModel, Field, field_validator

from skypanel.models.common import TemperatureUnit


class UserSettings(BaseModel):
    model_config = {"extra": "forbid", "populate_by_name": True}

    location: str = ""
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT
    hour_12: bool = Field(
        default=True, validation_alias=AliasChoices("hour_12", "12_hour")
    )

    @field_validator("unit", mode="before")
    @classmethod
    def _normalize_unit(cls, value: object) -> object:
        # "f" and "c" are accepted; anything else fails enum validation
        if isinstance(value, str):
            return value.strip().upper()
        return value


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://wttr.in"
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    user_agent: str = "skypanel/0.1.0"


class PathsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    cache_file: str = "data/last_weather.json"
    icon_dir: str = "svg"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    settings: UserSettings = UserSettings()
    provider: ProviderConfig = ProviderConfig()
    paths: PathsConfig = PathsConfig()
