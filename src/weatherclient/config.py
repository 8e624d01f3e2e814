from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class TemperatureFormat(str, Enum):
    """Unit system; the value is what OpenWeatherMap expects in ``units``."""
    CELSIUS = 'metric'
    FAHRENHEIT = 'imperial'
    KELVIN = ''  # API default, ``units`` is left out of the query

    @classmethod
    def parse(cls, value: str) -> 'TemperatureFormat':
        """Accept either the member name ('celsius') or the wire value ('metric')."""
        key = (value or '').strip()
        if not key:
            return cls.KELVIN
        try:
            return cls[key.upper()]
        except KeyError:
            pass
        try:
            return cls(key.lower())
        except ValueError:
            raise ValueError(f"Unknown temperature format: {value!r}") from None


class Language(str, Enum):
    ENGLISH = 'en'
    RUSSIAN = 'ru'
    ITALIAN = 'it'
    SPANISH = 'es'
    UKRAINIAN = 'uk'
    GERMAN = 'de'
    PORTUGUESE = 'pt'
    ROMANIAN = 'ro'
    POLISH = 'pl'
    FINNISH = 'fi'
    DUTCH = 'nl'
    FRENCH = 'fr'
    BULGARIAN = 'bg'
    SWEDISH = 'sv'
    CHINESE_TRADITIONAL = 'zh_tw'
    CHINESE_SIMPLIFIED = 'zh_cn'
    TURKISH = 'tr'
    CROATIAN = 'hr'
    CATALAN = 'ca'


@dataclass(frozen=True)
class Coordinates:
    """Geographic position in decimal degrees."""
    latitude: float
    longitude: float


@dataclass
class WeatherSettings:
    """Configuration for the OpenWeatherMap client."""
    api_key: str
    temperature_format: TemperatureFormat = TemperatureFormat.KELVIN
    language: Language = Language.ENGLISH

    @staticmethod
    def from_env() -> 'WeatherSettings':
        """Create Weather settings from environment variables."""
        api_key = os.environ['OPENWEATHERMAP_API_KEY']
        units = os.environ.get('OPENWEATHERMAP_UNITS', '')
        lang = os.environ.get('OPENWEATHERMAP_LANG', 'en')
        try:
            language = Language(lang.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown OPENWEATHERMAP_LANG: {lang!r}") from None
        return WeatherSettings(
            api_key=api_key,
            temperature_format=TemperatureFormat.parse(units),
            language=language,
        )
