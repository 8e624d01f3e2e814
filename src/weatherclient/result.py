from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    """Parsed JSON body of a successful call."""
    payload: Any

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class RequestFailed:
    """Any network, HTTP status or decoding failure, with the transport's diagnostic."""
    message: str

    @property
    def is_success(self) -> bool:
        return False


WeatherResult = Union[Success, RequestFailed]
