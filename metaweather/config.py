"""Environment driven configuration for the client and the CLI."""
from __future__ import annotations

import os
from typing import Mapping, Optional

from .base import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, MetaWeatherError, RequestConfig

ENV_BASE_URL = "METAWEATHER_BASE_URL"
ENV_TIMEOUT = "METAWEATHER_TIMEOUT"


class ConfigurationError(MetaWeatherError, ValueError):
    """Raised when an environment variable holds an unusable value."""


def env(name: str, default: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Fetch an environment variable, treating an empty value as unset."""

    source = os.environ if environ is None else environ
    return source.get(name) or default


def parse_timeout(value: str, name: str = ENV_TIMEOUT) -> float:
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number of seconds, got {value!r}") from exc
    if timeout <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value!r}")
    return timeout


class ClientConfig(RequestConfig):
    """``RequestConfig`` that can also be read from the environment."""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        return cls(
            base_url=env(ENV_BASE_URL, DEFAULT_BASE_URL, environ),
            request_timeout=parse_timeout(env(ENV_TIMEOUT, str(DEFAULT_TIMEOUT), environ)),
        )


__all__ = ["ClientConfig", "ConfigurationError", "ENV_BASE_URL", "ENV_TIMEOUT", "env", "parse_timeout"]
