# ABOUTME: Shared test fixtures for the forecast web app test suite.
# ABOUTME: Provides sample Location and DayForecast records.

from datetime import date

import pytest

from src.models import DayForecast, Location


@pytest.fixture
def paris() -> Location:
    return Location(name="Paris", region="Île-de-France", country="France", latitude=48.85341, longitude=2.3488)


@pytest.fixture
def week() -> list[DayForecast]:
    return [
        DayForecast(
            date=date(2025, 1, 15 + i),
            max_temp=8.0 + i,
            min_temp=1.0 + i,
            precipitation_probability=10.0 * i,
            weather_code=code,
            summary=summary,
            symbol=symbol,
        )
        for i, (code, summary, symbol) in enumerate(
            [
                (0, "Clear sky", "☀️"),
                (1, "Mainly clear", "🌤️"),
                (2, "Partly cloudy", "⛅"),
                (3, "Overcast", "☁️"),
                (61, "Slight rain", "🌧️"),
                (63, "Moderate rain", "🌧️"),
                (95, "Thunderstorm", "⛈️"),
            ]
        )
    ]
