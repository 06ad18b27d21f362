"""Condition code lookup tables: description and icon per wttr.in code."""

from pathlib import Path

UNKNOWN_DESCRIPTION = "Unknown conditions"
UNKNOWN_ICON = "wi-na.svg"

DESCRIPTIONS: dict[str, str] = {
    "113": "Sunny/Clear",
    "116": "Partly Cloudy",
    "119": "Cloudy",
    "122": "Overcast",
    "143": "Mist",
    "176": "Patchy rain nearby",
    "179": "Patchy snow nearby",
    "182": "Patchy sleet nearby",
    "185": "Patchy freezing drizzle nearby",
    "200": "Thundery outbreaks nearby",
    "227": "Blowing snow",
    "230": "Blizzard",
    "248": "Fog",
    "260": "Freezing fog",
    "263": "Patchy light drizzle",
    "266": "Light drizzle",
    "281": "Freezing drizzle",
    "284": "Heavy freezing drizzle",
    "293": "Patchy light rain",
    "296": "Light rain",
    "299": "Moderate rain at times",
    "302": "Moderate rain",
    "305": "Heavy rain at times",
    "308": "Heavy rain",
    "311": "Light freezing rain",
    "314": "Moderate or Heavy freezing rain",
    "317": "Light sleet",
    "320": "Moderate or heavy sleet",
    "323": "Patchy light snow",
    "326": "Light snow",
    "329": "Patchy moderate snow",
    "332": "Moderate snow",
    "335": "Patchy heavy snow",
    "338": "Heavy snow",
    "350": "Hail",
    "353": "Light rain shower",
    "356": "Moderate or heavy rain shower",
    "359": "Torrential rain shower",
    "362": "Light sleet showers",
    "365": "Moderate or heavy sleet showers",
    "368": "Light snow showers",
    "371": "Moderate or heavy snow showers",
    "374": "Light showers of hail",
    "377": "Moderate or heavy showers of hail",
    "386": "Patchy light rain in area with thunder",
    "389": "Moderate or heavy rain in area with thunder",
    "392": "Patchy light snow in area with thunder",
    "395": "Moderate or heavy snow in area with thunder",
}

# Only clear skies read differently after sunset
NIGHT_DESCRIPTIONS: dict[str, str] = {
    "113": "Clear",
}

DAY_ICONS: dict[str, str] = {
    "113": "wi-day-sunny.svg",
    "116": "wi-day-cloudy.svg",
    "119": "wi-day-cloudy.svg",
    "122": "wi-day-sunny-overcast.svg",
    "143": "wi-day-haze.svg",
    "176": "wi-day-sprinkle.svg",
    "179": "wi-day-snow.svg",
    "182": "wi-day-sleet.svg",
    "185": "wi-day-rain-mix.svg",
    "200": "wi-day-rain-mix.svg",
    "227": "wi-day-snow-wind.svg",
    "230": "wi-day-snow-thunderstorm.svg",
    "248": "wi-day-fog.svg",
    "260": "wi-day-fog.svg",
    "263": "wi-day-sprinkle.svg",
    "266": "wi-day-sprinkle.svg",
    "281": "wi-day-rain-mix.svg",
    "284": "wi-day-rain-mix.svg",
    "293": "wi-day-sprinkle.svg",
    "296": "wi-day-rain.svg",
    "299": "wi-day-rain.svg",
    "302": "wi-day-rain.svg",
    "305": "wi-day-rain.svg",
    "308": "wi-day-rain.svg",
    "311": "wi-day-rain-mix.svg",
    "314": "wi-day-rain-mix.svg",
    "317": "wi-day-sleet.svg",
    "320": "wi-day-sleet.svg",
    "323": "wi-day-snow.svg",
    "326": "wi-day-snow.svg",
    "329": "wi-day-snow.svg",
    "332": "wi-day-snow.svg",
    "335": "wi-day-snow-wind.svg",
    "338": "wi-day-snow-wind.svg",
    "350": "wi-day-hail.svg",
    "353": "wi-day-rain.svg",
    "356": "wi-day-rain.svg",
    "359": "wi-day-thunderstorm.svg",
    "362": "wi-day-sleet.svg",
    "365": "wi-day-sleet-storm.svg",
    "368": "wi-day-snow.svg",
    "371": "wi-day-snow-wind.svg",
    "374": "wi-day-hail.svg",
    "377": "wi-day-hail.svg",
    "386": "wi-day-rain.svg",
    "389": "wi-day-thunderstorm.svg",
    "392": "wi-day-snow-thunderstorm.svg",
    "395": "wi-day-thunderstorm.svg",
}

NIGHT_ICONS: dict[str, str] = {
    "113": "wi-night-clear.svg",
    "116": "wi-night-partly-cloudy.svg",
    "119": "wi-night-cloudy.svg",
    "122": "wi-night-cloudy.svg",
    "143": "wi-night-fog.svg",
    "176": "wi-night-rain.svg",
    "179": "wi-night-snow.svg",
    "182": "wi-night-sleet.svg",
    "185": "wi-night-rain-mix.svg",
    "200": "wi-night-lightning.svg",
    "227": "wi-night-snow-wind.svg",
    "230": "wi-night-snow-wind.svg",
    "248": "wi-night-fog.svg",
    "260": "wi-night-fog.svg",
    "263": "wi-night-rain.svg",
    "266": "wi-night-rain.svg",
    "281": "wi-night-rain-mix.svg",
    "284": "wi-night-rain-mix.svg",
    "293": "wi-night-rain.svg",
    "296": "wi-night-rain.svg",
    "299": "wi-night-rain.svg",
    "302": "wi-night-rain.svg",
    "305": "wi-night-storm-showers.svg",
    "308": "wi-night-storm-showers.svg",
    "311": "wi-night-rain-mix.svg",
    "314": "wi-night-rain-mix.svg",
    "317": "wi-night-sleet.svg",
    "320": "wi-night-sleet-storm.svg",
    "323": "wi-night-snow.svg",
    "326": "wi-night-snow.svg",
    "329": "wi-night-snow.svg",
    "332": "wi-night-snow.svg",
    "335": "wi-night-snow.svg",
    "338": "wi-night-snow.svg",
    "350": "wi-night-hail.svg",
    "353": "wi-night-hail.svg",
    "356": "wi-night-snow-thunderstorm.svg",
    "359": "wi-night-thunderstorm.svg",
    "362": "wi-night-sleet.svg",
    "365": "wi-night-sleet-storm.svg",
    "368": "wi-night-snow.svg",
    "371": "wi-night-snow.svg",
    "374": "wi-night-hail.svg",
    "377": "wi-night-hail.svg",
    "386": "wi-night-rain.svg",
    "389": "wi-night-thunderstorm.svg",
    "392": "wi-night-snow.svg",
    "395": "wi-night-snow-thunderstorm.svg",
}


def describe(code: str, night: bool) -> str:
    """Human-readable description; unknown codes get UNKNOWN_DESCRIPTION."""
    if night and code in NIGHT_DESCRIPTIONS:
        return NIGHT_DESCRIPTIONS[code]
    return DESCRIPTIONS.get(code, UNKNOWN_DESCRIPTION)


def icon_for(code: str, night: bool, icon_dir: str | Path) -> str:
    """Path of the icon for a code, night or day art."""
    table = NIGHT_ICONS if night else DAY_ICONS
    return str(Path(icon_dir) / table.get(code, UNKNOWN_ICON))
