"""
Application configuration.
Values come from the process environment, optionally seeded from a .env file.
"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 5000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_DATABASE_PATH = "db.sqlite"


class ConfigurationError(Exception):
    """Raised when a configuration value is invalid."""
    pass


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the API server."""
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    database_path: str = DEFAULT_DATABASE_PATH


def _get_port() -> int:
    value = os.environ.get("PORT")
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got '{value}'")


def load_settings() -> Settings:
    """Load settings from the environment and a .env file in the working directory."""
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        port=_get_port(),
        host=os.environ.get("HOST", DEFAULT_HOST),
        database_path=os.environ.get("DATABASE_PATH", DEFAULT_DATABASE_PATH),
    )
