# ABOUTME: Pydantic BaseModels for geocoded locations, daily forecasts and the page context.
# ABOUTME: Defines the immutable records passed between the Open-Meteo clients and the view.

from datetime import date

from pydantic import BaseModel, ConfigDict


class WeatherCodeEntry(BaseModel):
    """Human-readable text and emoji for one WMO weather code."""

    model_config = ConfigDict(frozen=True)

    description: str
    symbol: str


class Location(BaseModel):
    """First geocoding match for a place name."""

    model_config = ConfigDict(frozen=True)

    name: str
    region: str | None = None
    country: str | None = None
    latitude: float
    longitude: float

    @property
    def label(self) -> str:
        """Display label: name, then region and country when present."""
        parts = [self.name]
        if self.region:
            parts.append(self.region)
        if self.country:
            parts.append(self.country)
        return ", ".join(parts)


class DayForecast(BaseModel):
    """One day of the daily forecast, enriched with weather code text."""

    model_config = ConfigDict(frozen=True)

    date: date
    max_temp: float | None = None
    min_temp: float | None = None
    precipitation_probability: float | None = None
    weather_code: int | None = None
    summary: str
    symbol: str


class RenderContext(BaseModel):
    """Values handed to the index template for one response."""

    model_config = ConfigDict(frozen=True)

    title: str
    city: str
    location_label: str | None = None
    forecast_days: list[DayForecast] | None = None
    error: str | None = None
