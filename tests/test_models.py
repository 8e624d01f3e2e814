import datetime as dt
from weatherclient.models import WeatherRecord, format_timestamp
from weatherclient.result import RequestFailed, Success

TURIN = {"dt": 0, "weather": [{"description": "clear sky"}], "main": {"temp": 283.2}, "name": "Turin"}

def test_from_json_full():
    rec = WeatherRecord.from_json(TURIN)
    assert rec.temperature == '283'
    assert rec.description == 'clear sky'
    assert rec.location == 'Turin'
    assert rec.date_time == dt.datetime.fromtimestamp(0).strftime('%d/%m %I:%M')

def test_from_json_empty():
    rec = WeatherRecord.from_json({})
    assert rec.temperature == '0'
    assert rec.description == ''
    assert rec.location == ''
    assert rec.date_time == format_timestamp(0)

def test_from_json_malformed_fields():
    payload = {"dt": "soon", "weather": [], "main": {"temp": "-3.7"}, "name": None}
    rec = WeatherRecord.from_json(payload)
    assert rec.temperature == '-3'  # truncated toward zero
    assert rec.description == ''
    assert rec.location == ''
    assert WeatherRecord.from_json([1, 2]).temperature == '0'
    assert WeatherRecord.from_json(None).location == ''

def test_format_timestamp_twelve_hour_clock():
    ts = dt.datetime(2024, 3, 5, 15, 7).timestamp()
    assert format_timestamp(ts) == '05/03 03:07'

def test_from_result():
    assert WeatherRecord.from_result(Success(TURIN)).location == 'Turin'
    assert WeatherRecord.from_result(RequestFailed('boom')) is None
