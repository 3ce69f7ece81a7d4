"""Values derived from a stored weather record: banner choice, overlay key, village damage."""

from __future__ import annotations

from pydantic import BaseModel

from ..exceptions import WeatherConfigurationError
from .models import Village, WeatherRecord

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619

OVERLAY_MAPPING: dict[str, str] = {
    "Rain": "rain",
    "Light Rain": "rain",
    "Heavy Rain": "rain",
    "Thunderstorm": "thunderstorm",
    "Snow": "snow",
    "Light Snow": "snow",
    "Heavy Snow": "snow",
    "Blizzard": "blizzard",
    "Sleet": "sleet",
    "Hail": "hail",
    "Fog": "fog",
    "Cloudy": "cloudy",
    "Thundersnow": "thundersnow",
    "Cinder Storm": "cinderstorm",
    "Blight Rain": "blightrain",
    "Heat Lightning": "heatlightning",
    "Rainbow": "rainbow",
    "Flower Bloom": "flowerbloom",
    "Fairy Circle": "fairycircle",
    "Meteor Shower": "meteorshower",
    "Jubilee": "jubilee",
    "Drought": "drought",
    "Flood": "flood",
    "Lightning Storm": "thunderstorm",
}

WIND_DAMAGE: dict[str, int] = {
    "41 - 62(km/h) // Strong": 1,
    "63 - 87(km/h) // Gale": 1,
    "88 - 117(km/h) // Storm": 1,
    ">= 118(km/h) // Hurricane": 2,
}
PRECIPITATION_DAMAGE: dict[str, int] = {
    "Heavy Snow": 2,
    "Blizzard": 5,
    "Hail": 3,
}
SPECIAL_DAMAGE: dict[str, int] = {
    "Blight Rain": 25,
    "Avalanche": 15,
    "Rock Slide": 15,
    "Flood": 20,
    "Lightning Storm": 5,
}


class WeatherDamage(BaseModel):
    total: int = 0
    wind: int = 0
    precipitation: int = 0
    special: int = 0


def stable_hash32(value: object) -> int:
    """32-bit FNV-1a over UTF-16 code units, matching the bot's JavaScript hash."""
    text = "" if value is None else str(value)
    encoded = text.encode("utf-16-le")
    hashed = FNV_OFFSET_BASIS
    for index in range(0, len(encoded), 2):
        hashed ^= encoded[index] | (encoded[index + 1] << 8)
        hashed = (hashed * FNV_PRIME) & 0xFFFFFFFF
    return hashed


def banner_seed(village: Village | str, record: WeatherRecord | None) -> str:
    village = Village.normalize(village)
    part = ""
    if record is not None:
        if record.id is not None:
            part = str(record.id)
        else:
            part = record.date.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return f"{village.value}|{part or 'no-seed'}"


def select_banner_index(
    village: Village | str,
    record: WeatherRecord | None,
    banner_count: int,
) -> int:
    """Pick the same banner for every post of one record."""
    if banner_count <= 0:
        raise WeatherConfigurationError(f"No banners configured for {village}.")
    return stable_hash32(banner_seed(village, record)) % banner_count


def overlay_for(record: WeatherRecord) -> str | None:
    """Overlay key for the record; a special takes priority over precipitation."""
    if record.special is not None:
        overlay = OVERLAY_MAPPING.get(record.special.label)
        if overlay:
            return overlay
    return OVERLAY_MAPPING.get(record.precipitation.label)


def calculate_weather_damage(record: WeatherRecord | None) -> WeatherDamage:
    if record is None:
        return WeatherDamage()
    wind = WIND_DAMAGE.get(record.wind.label, 0)
    precipitation = PRECIPITATION_DAMAGE.get(record.precipitation.label, 0)
    special = SPECIAL_DAMAGE.get(record.special.label, 0) if record.special else 0
    return WeatherDamage(
        total=wind + precipitation + special,
        wind=wind,
        precipitation=precipitation,
        special=special,
    )
