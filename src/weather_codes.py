# ABOUTME: Static lookup table from Open-Meteo WMO weather codes to text and emoji.
# ABOUTME: lookup() is total: unknown or missing codes resolve to a generated fallback entry.

from types import MappingProxyType

from src.models import WeatherCodeEntry

FALLBACK_SYMBOL = "🌡️"

WEATHER_CODES = MappingProxyType(
    {
        code: WeatherCodeEntry(description=description, symbol=symbol)
        for code, (description, symbol) in {
            0: ("Clear sky", "☀️"),
            1: ("Mainly clear", "🌤️"),
            2: ("Partly cloudy", "⛅"),
            3: ("Overcast", "☁️"),
            45: ("Fog", "🌫️"),
            48: ("Depositing rime fog", "🌫️"),
            51: ("Light drizzle", "🌦️"),
            53: ("Moderate drizzle", "🌦️"),
            55: ("Dense drizzle", "🌧️"),
            56: ("Light freezing drizzle", "🌧️"),
            57: ("Dense freezing drizzle", "🌧️"),
            61: ("Slight rain", "🌧️"),
            63: ("Moderate rain", "🌧️"),
            65: ("Heavy rain", "🌧️"),
            66: ("Light freezing rain", "🌧️"),
            67: ("Heavy freezing rain", "🌧️"),
            71: ("Slight snow fall", "🌨️"),
            73: ("Moderate snow fall", "🌨️"),
            75: ("Heavy snow fall", "❄️"),
            77: ("Snow grains", "🌨️"),
            80: ("Slight rain showers", "🌦️"),
            81: ("Moderate rain showers", "🌦️"),
            82: ("Violent rain showers", "⛈️"),
            85: ("Slight snow showers", "🌨️"),
            86: ("Heavy snow showers", "❄️"),
            95: ("Thunderstorm", "⛈️"),
            96: ("Thunderstorm with slight hail", "⛈️"),
            99: ("Thunderstorm with heavy hail", "⛈️"),
        }.items()
    }
)


def lookup(code: int | None) -> WeatherCodeEntry:
    """Return the description and symbol for a weather code, falling back for unmapped codes."""
    if code is None:
        return WeatherCodeEntry(description="Weather code unavailable", symbol=FALLBACK_SYMBOL)
    entry = WEATHER_CODES.get(code)
    if entry is None:
        return WeatherCodeEntry(description=f"Weather code {code}", symbol=FALLBACK_SYMBOL)
    return entry
