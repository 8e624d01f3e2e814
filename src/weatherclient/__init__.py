"""
OpenWeatherMap API client for current, forecast and historic weather.
Provides an async Python interface to the OpenWeatherMap 2.5 data endpoints.
"""

__all__ = [
    'OpenWeatherMapClient', 'WeatherAPIError', 'WeatherSettings', 'TemperatureFormat', 'Language',
    'Coordinates', 'QueryKind', 'build_request', 'Success', 'RequestFailed', 'WeatherResult',
    'WeatherRecord',
]

from .client import OpenWeatherMapClient, WeatherAPIError
from .config import Coordinates, Language, TemperatureFormat, WeatherSettings
from .models import WeatherRecord
from .result import RequestFailed, Success, WeatherResult
from .router import QueryKind, build_request
