# ABOUTME: Runtime settings for the forecast web app, read from the environment and .env.
# ABOUTME: Also sets up stdlib logging for the server process.

import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from src.weather_service import FORECAST_URL, GEOCODING_URL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    """Server and upstream API settings."""

    model_config = ConfigDict(frozen=True)

    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=1, le=65535)
    request_timeout: float = Field(default=10.0, gt=0)
    log_level: str = "INFO"
    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL


def load_settings() -> Settings:
    """Build Settings from environment variables, loading the nearest .env from the working directory.

    Unset variables fall back to the model defaults. Invalid values raise
    pydantic.ValidationError.
    """
    load_dotenv(find_dotenv(usecwd=True))
    env = {
        "host": os.environ.get("HOST"),
        "port": os.environ.get("PORT"),
        "request_timeout": os.environ.get("HTTP_TIMEOUT"),
        "log_level": os.environ.get("LOG_LEVEL"),
        "geocoding_url": os.environ.get("GEOCODING_URL"),
        "forecast_url": os.environ.get("FORECAST_URL"),
    }
    return Settings(**{k: v for k, v in env.items() if v})


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
