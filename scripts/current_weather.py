"""
Print current weather for one or more cities.
Usage: OPENWEATHERMAP_API_KEY=... python current_weather.py London Rome
"""
import asyncio
import sys

from weatherclient import OpenWeatherMapClient, WeatherRecord, WeatherSettings


async def run(cities):
    settings = WeatherSettings.from_env()
    async with OpenWeatherMapClient.from_settings(settings) as client:
        for city in cities:
            result = await client.current_weather_by_city_name(city)
            record = WeatherRecord.from_result(result)
            if record is None:
                print(f"{city}: request failed ({result.message})")
                continue
            print(f"{record.location or city} {record.date_time}: {record.temperature} {record.description}")


def main():
    cities = sys.argv[1:] or ['London']
    asyncio.run(run(cities))

if __name__ == "__main__":
    main()
