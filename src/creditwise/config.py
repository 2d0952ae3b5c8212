"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PAYOFF_METHODS = ("avalanche", "snowball")


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "CreditWise"
    LOG_FILENAME = "creditwise.log"
    JSON_SORT_KEYS = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("CREDITWISE_SECRET_KEY", "replace-me")
        self.DEV_MODE = _env_bool("CREDITWISE_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()
        self.DEFAULT_PAYOFF_METHOD = self._resolve_default_method()
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("CREDITWISE_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("CREDITWISE_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _resolve_default_method(self) -> str:
        method = os.getenv("CREDITWISE_DEFAULT_METHOD", "avalanche").strip().lower()
        if method not in PAYOFF_METHODS:
            raise ValueError(
                f"CREDITWISE_DEFAULT_METHOD must be one of {', '.join(PAYOFF_METHODS)}; got {method!r}."
            )
        return method


class DevConfig(BaseConfig):
    """Development configuration."""

    DEBUG = True
    TESTING = False


class TestingConfig(BaseConfig):
    """Configuration used by the test-suite."""

    DEBUG = False
    TESTING = True
