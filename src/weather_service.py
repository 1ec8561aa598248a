# ABOUTME: Service layer for Open-Meteo API calls and response parsing.
# ABOUTME: Handles geocoding a city name and fetching its daily forecast.

import httpx

from src.models import DayForecast, Location
from src.weather_codes import lookup

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

DAILY_PARAMS = "weathercode,temperature_2m_max,temperature_2m_min,precipitation_probability_max"


async def geocode(client: httpx.AsyncClient, city_name: str, url: str = GEOCODING_URL) -> Location | None:
    """Geocode a city name to its first match using Open-Meteo geocoding API."""
    resp = await client.get(url, params={"name": city_name, "count": 1, "language": "en", "format": "json"})
    resp.raise_for_status()
    data = resp.json()

    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list) or not results:
        return None

    r = results[0]
    return Location(
        name=r["name"],
        region=r.get("admin1"),
        country=r.get("country"),
        latitude=r["latitude"],
        longitude=r["longitude"],
    )


async def get_daily_forecast(
    client: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    url: str = FORECAST_URL,
) -> list[DayForecast]:
    """Fetch the daily forecast from Open-Meteo, letting the server resolve the timezone."""
    resp = await client.get(
        url,
        params={
            "latitude": latitude,
            "longitude": longitude,
            "daily": DAILY_PARAMS,
            "timezone": "auto",
        },
    )
    resp.raise_for_status()
    data = resp.json()

    daily = data.get("daily") if isinstance(data, dict) else None
    return parse_daily_forecast(daily if isinstance(daily, dict) else {})


def parse_daily_forecast(raw: dict) -> list[DayForecast]:
    """Parse Open-Meteo column-oriented daily data into row-oriented DayForecast objects."""
    dates = raw.get("time")
    if not isinstance(dates, list):
        return []

    result = []
    for i, d in enumerate(dates):
        code = _get_at(raw, "weathercode", i)
        entry = lookup(code)
        result.append(
            DayForecast(
                date=d,
                max_temp=_get_at(raw, "temperature_2m_max", i),
                min_temp=_get_at(raw, "temperature_2m_min", i),
                precipitation_probability=_get_at(raw, "precipitation_probability_max", i),
                weather_code=code,
                summary=entry.description,
                symbol=entry.symbol,
            )
        )
    return result


def _get_at(data: dict, key: str, index: int):
    """Safely get value at index from a column array, returning None if missing."""
    col = data.get(key)
    if col is None or index >= len(col):
        return None
    return col[index]


class OpenMeteoGeocoder:
    """Geocoder backed by the Open-Meteo geocoding API."""

    def __init__(self, client: httpx.AsyncClient, url: str = GEOCODING_URL):
        self.client = client
        self.url = url

    async def resolve(self, city_name: str) -> Location | None:
        return await geocode(self.client, city_name, self.url)


class OpenMeteoForecastProvider:
    """Forecast provider backed by the Open-Meteo forecast API."""

    def __init__(self, client: httpx.AsyncClient, url: str = FORECAST_URL):
        self.client = client
        self.url = url

    async def fetch(self, latitude: float, longitude: float) -> list[DayForecast]:
        return await get_daily_forecast(self.client, latitude, longitude, self.url)
