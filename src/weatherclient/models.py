from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass
from typing import Any, Optional

from .result import Success, WeatherResult

TIME_FORMAT = '%d/%m %I:%M'


def format_timestamp(seconds: float) -> str:
    """Format Unix seconds as ``dd/MM hh:mm`` in the local timezone (12-hour clock)."""
    return dt.datetime.fromtimestamp(seconds).strftime(TIME_FORMAT)


def _number(value: Any) -> float:
    if isinstance(value, (bool, int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ''


def _field(payload: Any, *path: Any) -> Any:
    """Walk dict keys / list indexes, returning None as soon as a step is missing."""
    node = payload
    for step in path:
        if isinstance(step, int):
            if not isinstance(node, list) or not -len(node) <= step < len(node):
                return None
        elif not isinstance(node, dict):
            return None
        try:
            node = node[step]
        except (KeyError, IndexError):
            return None
    return node


@dataclass(frozen=True)
class WeatherRecord:
    """Flat view of the few fields a weather display needs.

    Built from any OpenWeatherMap payload that carries ``dt``, ``weather``,
    ``main`` and ``name`` (current weather, forecast list entries). Missing
    or malformed fields fall back to ``""`` / ``0``, so an absent field cannot
    be told apart from an empty one.
    """
    date_time: str
    description: str
    temperature: str
    location: str

    @classmethod
    def from_json(cls, payload: Any) -> 'WeatherRecord':
        seconds = _number(_field(payload, 'dt'))
        try:
            date_time = format_timestamp(seconds)
        except (OverflowError, OSError, ValueError):
            date_time = format_timestamp(0)
        return cls(
            date_time=date_time,
            description=_text(_field(payload, 'weather', 0, 'description')),
            temperature=str(int(_number(_field(payload, 'main', 'temp')))),
            location=_text(_field(payload, 'name')),
        )

    @classmethod
    def from_result(cls, result: WeatherResult) -> Optional['WeatherRecord']:
        if isinstance(result, Success):
            return cls.from_json(result.payload)
        return None
