# ABOUTME: Dependency container for the forecast view using Pydantic BaseModel.
# ABOUTME: Declares the geocoder and forecast provider seams and builds the shared httpx client.

from typing import Protocol, runtime_checkable

import httpx
from pydantic import BaseModel, ConfigDict

from src.config import Settings
from src.models import DayForecast, Location
from src.weather_service import OpenMeteoForecastProvider, OpenMeteoGeocoder


@runtime_checkable
class Geocoder(Protocol):
    async def resolve(self, city_name: str) -> Location | None: ...


@runtime_checkable
class ForecastProvider(Protocol):
    async def fetch(self, latitude: float, longitude: float) -> list[DayForecast]: ...


class ForecastDeps(BaseModel):
    """Collaborators injected into the request handlers via app state."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    geocoder: Geocoder
    forecaster: ForecastProvider


def create_http_client(timeout: float = 10.0) -> httpx.AsyncClient:
    """Create an httpx client with a bounded timeout and no retries.

    Timeouts surface as httpx.TimeoutException, which the web layer treats like any
    other upstream failure.
    """
    return httpx.AsyncClient(timeout=timeout)


def create_deps(client: httpx.AsyncClient, settings: Settings) -> ForecastDeps:
    """Wire the Open-Meteo clients onto a shared HTTP client."""
    return ForecastDeps(
        geocoder=OpenMeteoGeocoder(client, settings.geocoding_url),
        forecaster=OpenMeteoForecastProvider(client, settings.forecast_url),
    )
