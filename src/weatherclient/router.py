from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

import httpx

BASE_URL = "http://api.openweathermap.org/data"
API_VERSION = "2.5"


class QueryKind(Enum):
    CURRENT_WEATHER = "/weather"
    FORECAST = "/forecast"
    DAILY_FORECAST = "/forecast/daily"
    HISTORIC_DATA = "/history/city"

    @property
    def path(self) -> str:
        return self.value


def build_url(kind: QueryKind) -> str:
    return f"{BASE_URL}/{API_VERSION}{kind.path}"


def build_request(kind: QueryKind, params: Mapping[str, Any]) -> httpx.Request:
    """Build the GET request for ``kind`` with ``params`` encoded in the query string.

    ``params`` is copied, never modified.
    """
    return httpx.Request("GET", build_url(kind), params=dict(params))
