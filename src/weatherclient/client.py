from __future__ import annotations
import datetime as dt
import decimal
from typing import Any, Callable, Dict, Optional, Union
import logging
import httpx

from .config import Coordinates, Language, TemperatureFormat, WeatherSettings
from .result import RequestFailed, Success, WeatherResult
from .router import QueryKind, build_request

ParamValue = Union[str, int]
Timestamp = Union[dt.datetime, int, float]
ResultCallback = Callable[[WeatherResult], None]


class WeatherAPIError(Exception):
    pass


def _epoch_seconds(value: Timestamp) -> int:
    if isinstance(value, dt.datetime):
        # naive datetimes are taken as local time
        return int(value.timestamp())
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected datetime or epoch seconds, got {type(value).__name__}")
    return int(value)


def _decimal_degrees(value: float) -> str:
    # fixed-point, never scientific notation ('1e-05' -> '0.00001')
    text = format(decimal.Decimal(repr(float(value))), 'f')
    return text + '.0' if text.lstrip('-').isdigit() else text


class OpenWeatherMapClient:
    """
    Async client for the OpenWeatherMap 2.5 data API.

    Every query method builds its own parameter set from the client
    configuration plus the call arguments, so concurrent queries on one
    client never see each other's ``q``/``lat``/``lon``/``start``/``end``.
    Failures are returned as ``RequestFailed``, never raised.
    """

    def __init__(self, api_key: str,
                 temperature_format: TemperatureFormat = TemperatureFormat.KELVIN,
                 language: Language = Language.ENGLISH,
                 http_client: Optional[httpx.AsyncClient] = None):
        self.api_key = api_key
        self._params: Dict[str, ParamValue] = {'APPID': api_key}
        self._temperature_format = TemperatureFormat.KELVIN
        self._language = Language.ENGLISH
        self.temperature_format = temperature_format
        self.language = language
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.AsyncClient(timeout=30.0, follow_redirects=True)
        self._log = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: WeatherSettings,
                      http_client: Optional[httpx.AsyncClient] = None) -> 'OpenWeatherMapClient':
        return cls(settings.api_key, settings.temperature_format, settings.language,
                   http_client=http_client)

    # ---------------- Configuration -----------------
    @property
    def temperature_format(self) -> TemperatureFormat:
        return self._temperature_format

    @temperature_format.setter
    def temperature_format(self, value: TemperatureFormat) -> None:
        value = TemperatureFormat(value)
        self._temperature_format = value
        if value is TemperatureFormat.KELVIN:
            self._params.pop('units', None)
        else:
            self._params['units'] = value.value

    @property
    def language(self) -> Language:
        return self._language

    @language.setter
    def language(self, value: Language) -> None:
        value = Language(value)
        self._language = value
        self._params['lang'] = value.value

    @property
    def params(self) -> Dict[str, ParamValue]:
        """Copy of the parameters sent with every query."""
        return dict(self._params)

    # ---------------- Lifecycle -----------------
    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> 'OpenWeatherMapClient':
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ---------------- Internal Helpers -----------------
    async def _get(self, request: httpx.Request) -> Any:
        resp = await self._client.send(request)
        if not resp.is_success:
            raise WeatherAPIError(f"Error {resp.status_code}: {resp.text[:200]}")
        if not resp.content:
            raise WeatherAPIError(f"Empty response body for {request.url.path}")
        try:
            return resp.json()
        except ValueError as e:  # JSON decode error
            raise WeatherAPIError(f"Non-JSON response for {request.url.path}: {resp.text[:200]}") from e

    async def api_call(self, request: httpx.Request) -> WeatherResult:
        """Send ``request`` once and wrap the decoded body or the failure."""
        try:
            payload = await self._get(request)
        except (WeatherAPIError, httpx.HTTPError, UnicodeError) as e:
            message = str(e) or repr(e)
            self._log.warning("Request to %s failed: %s", request.url.path, message)
            return RequestFailed(message)
        return Success(payload)

    async def _query(self, kind: QueryKind, fields: Dict[str, ParamValue],
                     callback: Optional[ResultCallback]) -> WeatherResult:
        params = {**self._params, **fields}
        self._log.debug("GET %s with %s", kind.path, sorted(k for k in params if k != 'APPID'))
        try:
            request = build_request(kind, params)
        except (UnicodeError, httpx.InvalidURL) as e:
            # values that cannot be encoded into a URL
            self._log.warning("Could not build request for %s: %s", kind.path, e)
            result: WeatherResult = RequestFailed(str(e) or repr(e))
        else:
            result = await self.api_call(request)
        if callback is not None:
            callback(result)
        return result

    @staticmethod
    def _city(city_name: str) -> Dict[str, ParamValue]:
        return {'q': city_name}

    @staticmethod
    def _coordinates(latitude: float, longitude: float) -> Dict[str, ParamValue]:
        return {'lat': _decimal_degrees(latitude), 'lon': _decimal_degrees(longitude)}

    @staticmethod
    def _period(start: Timestamp, end: Optional[Timestamp]) -> Dict[str, ParamValue]:
        fields: Dict[str, ParamValue] = {'type': 'hour', 'start': _epoch_seconds(start)}
        if end is not None:
            fields['end'] = _epoch_seconds(end)
        return fields

    # ---------------- Current Weather -----------------
    async def current_weather_by_city_name(self, city_name: str,
                                           callback: Optional[ResultCallback] = None) -> WeatherResult:
        return await self._query(QueryKind.CURRENT_WEATHER, self._city(city_name), callback)

    async def current_weather_by_coordinates(self, latitude: float, longitude: float,
                                             callback: Optional[ResultCallback] = None) -> WeatherResult:
        return await self._query(QueryKind.CURRENT_WEATHER, self._coordinates(latitude, longitude), callback)

    async def current_weather_by_location(self, location: Coordinates,
                                          callback: Optional[ResultCallback] = None) -> WeatherResult:
        return await self.current_weather_by_coordinates(location.latitude, location.longitude, callback)

    # ---------------- Forecast -----------------
    async def forecast_by_city_name(self, city_name: str,
                                    callback: Optional[ResultCallback] = None) -> WeatherResult:
        return await self._query(QueryKind.FORECAST, self._city(city_name), callback)

    async def forecast_by_coordinates(self, latitude: float, longitude: float,
                                      callback: Optional[ResultCallback] = None) -> WeatherResult:
        return await self._query(QueryKind.FORECAST, self._coordinates(latitude, longitude), callback)

    async def forecast_by_location(self, location: Coordinates,
                                   callback: Optional[ResultCallback] = None) -> WeatherResult:
        return await self.forecast_by_coordinates(location.latitude, location.longitude, callback)

    # ---------------- Daily Forecast -----------------
    async def daily_forecast_by_city_name(self, city_name: str,
                                          callback: Optional[ResultCallback] = None) -> WeatherResult:
        return await self._query(QueryKind.DAILY_FORECAST, self._city(city_name), callback)

    async def daily_forecast_by_coordinates(self, latitude: float, longitude: float,
                                            callback: Optional[ResultCallback] = None) -> WeatherResult:
        return await self._query(QueryKind.DAILY_FORECAST, self._coordinates(latitude, longitude), callback)

    async def daily_forecast_by_location(self, location: Coordinates,
                                         callback: Optional[ResultCallback] = None) -> WeatherResult:
        return await self.daily_forecast_by_coordinates(location.latitude, location.longitude, callback)

    # ---------------- Historic Data -----------------
    async def historic_data_by_city_name(self, city_name: str, start: Timestamp,
                                         end: Optional[Timestamp] = None,
                                         callback: Optional[ResultCallback] = None) -> WeatherResult:
        """Hourly history for a city; ``end`` is only sent when given."""
        fields = {**self._city(city_name), **self._period(start, end)}
        return await self._query(QueryKind.HISTORIC_DATA, fields, callback)

    async def historic_data_by_coordinates(self, latitude: float, longitude: float, start: Timestamp,
                                           end: Optional[Timestamp] = None,
                                           callback: Optional[ResultCallback] = None) -> WeatherResult:
        fields = {**self._coordinates(latitude, longitude), **self._period(start, end)}
        return await self._query(QueryKind.HISTORIC_DATA, fields, callback)

    async def historic_data_by_location(self, location: Coordinates, start: Timestamp,
                                        end: Optional[Timestamp] = None,
                                        callback: Optional[ResultCallback] = None) -> WeatherResult:
        return await self.historic_data_by_coordinates(location.latitude, location.longitude,
                                                       start, end, callback)
