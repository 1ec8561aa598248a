# ABOUTME: ASGI web entry point for the 7-day forecast page.
# ABOUTME: Starlette routes that validate the city, geocode it, fetch the forecast and render the template.

import contextlib
import logging
from pathlib import Path

import httpx
import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles
from starlette.templating import Jinja2Templates

from src.config import Settings, configure_logging, load_settings
from src.deps import ForecastDeps, create_deps, create_http_client
from src.models import RenderContext

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATE_NAME = "index.html"

PAGE_TITLE = "7‑Day Weather Forecast"
DEFAULT_CITY = "Tel Aviv"

EMPTY_CITY_MESSAGE = "Please enter a city name."
NOT_FOUND_MESSAGE = "Couldn't find that location. Try a different spelling or a larger city."
UPSTREAM_EMPTY_MESSAGE = "Weather service returned an unexpected response. Please try again."
UPSTREAM_FAILURE_MESSAGE = "Something went wrong while contacting the API. Check the server console for details."

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def describe_upstream_error(exc: Exception) -> str:
    """Best available diagnostic for a failed API call, preferring the upstream error body."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            body = exc.response.text
        if body:
            return f"{exc.response.status_code} {body}"
    return str(exc) or type(exc).__name__


def render(request: Request, context: RenderContext, status_code: int = 200):
    # dict() keeps DayForecast objects intact for attribute access in the template
    return templates.TemplateResponse(request, TEMPLATE_NAME, dict(context), status_code=status_code)


async def index(request: Request):
    return render(request, RenderContext(title=PAGE_TITLE, city=DEFAULT_CITY))


async def forecast(request: Request):
    """Handle a city submission: validate, geocode, fetch the forecast, render."""
    form = await request.form()
    city = form.get("city")
    # uploaded files are not a city name
    city = city.strip() if isinstance(city, str) else ""

    if not city:
        return render(request, RenderContext(title=PAGE_TITLE, city="", error=EMPTY_CITY_MESSAGE), 400)

    deps: ForecastDeps = request.app.state.deps
    try:
        location = await deps.geocoder.resolve(city)
        if location is None:
            return render(request, RenderContext(title=PAGE_TITLE, city=city, error=NOT_FOUND_MESSAGE), 404)

        forecast_days = await deps.forecaster.fetch(location.latitude, location.longitude)
        if not forecast_days:
            return render(
                request,
                RenderContext(
                    title=PAGE_TITLE,
                    city=city,
                    location_label=location.label,
                    error=UPSTREAM_EMPTY_MESSAGE,
                ),
                502,
            )
    except Exception as exc:
        logger.exception("Weather API call failed for %r: %s", city, describe_upstream_error(exc))
        return render(request, RenderContext(title=PAGE_TITLE, city=city, error=UPSTREAM_FAILURE_MESSAGE), 500)

    return render(
        request,
        RenderContext(
            title=PAGE_TITLE,
            city=city,
            location_label=location.label,
            forecast_days=forecast_days,
        ),
    )


def create_app(deps: ForecastDeps | None = None, settings: Settings | None = None) -> Starlette:
    """Build the Starlette app.

    When deps is given it is used as-is (tests inject stub clients this way);
    otherwise the lifespan opens one shared httpx client and wires the Open-Meteo
    clients onto it, closing it on shutdown.
    """
    settings = settings or load_settings()

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        if deps is not None:
            yield
            return
        async with create_http_client(settings.request_timeout) as client:
            app.state.deps = create_deps(client, settings)
            yield

    app = Starlette(
        routes=[
            Route("/", index, methods=["GET"]),
            Route("/forecast", forecast, methods=["POST"]),
            Mount("/", StaticFiles(directory=str(BASE_DIR / "public")), name="static"),
        ],
        lifespan=lifespan,
    )
    if deps is not None:
        app.state.deps = deps
    return app


def main() -> None:
    """Run the server with uvicorn.

    Settings are loaded here rather than at import, so `uvicorn src.web:create_app --factory`
    is the equivalent command line.
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Server is running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
