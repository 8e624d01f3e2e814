import pytest
from weatherclient.config import Language, TemperatureFormat, WeatherSettings

def test_from_env_defaults(monkeypatch):
    monkeypatch.setenv('OPENWEATHERMAP_API_KEY', 'abc')
    monkeypatch.delenv('OPENWEATHERMAP_UNITS', raising=False)
    monkeypatch.delenv('OPENWEATHERMAP_LANG', raising=False)
    s = WeatherSettings.from_env()
    assert s.api_key == 'abc'
    assert s.temperature_format is TemperatureFormat.KELVIN
    assert s.language is Language.ENGLISH

def test_from_env_values(monkeypatch):
    monkeypatch.setenv('OPENWEATHERMAP_API_KEY', 'abc')
    monkeypatch.setenv('OPENWEATHERMAP_UNITS', 'celsius')
    monkeypatch.setenv('OPENWEATHERMAP_LANG', 'zh_cn')
    s = WeatherSettings.from_env()
    assert s.temperature_format is TemperatureFormat.CELSIUS
    assert s.language is Language.CHINESE_SIMPLIFIED

def test_from_env_missing_key(monkeypatch):
    monkeypatch.delenv('OPENWEATHERMAP_API_KEY', raising=False)
    with pytest.raises(KeyError):
        WeatherSettings.from_env()

def test_from_env_bad_lang(monkeypatch):
    monkeypatch.setenv('OPENWEATHERMAP_API_KEY', 'abc')
    monkeypatch.setenv('OPENWEATHERMAP_LANG', 'xx')
    with pytest.raises(ValueError):
        WeatherSettings.from_env()

def test_parse_temperature_format():
    assert TemperatureFormat.parse('imperial') is TemperatureFormat.FAHRENHEIT
    assert TemperatureFormat.parse('Fahrenheit') is TemperatureFormat.FAHRENHEIT
    assert TemperatureFormat.parse('kelvin') is TemperatureFormat.KELVIN
    assert TemperatureFormat.parse('') is TemperatureFormat.KELVIN
    with pytest.raises(ValueError):
        TemperatureFormat.parse('rankine')

def test_language_codes():
    assert len(Language) == 19
    assert Language.CHINESE_TRADITIONAL.value == 'zh_tw'
