from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

import requests
from requests import Response

DEFAULT_BASE_URL = "https://www.metaweather.com"
DEFAULT_TIMEOUT = 30.0


class MetaWeatherError(RuntimeError):
    """Base error for everything the client raises."""


class TransportError(MetaWeatherError):
    """The request could not be sent or its response could not be read."""


class DecodeError(MetaWeatherError):
    """The response body is not JSON or does not have the expected shape."""


@dataclass(frozen=True)
class RequestConfig:
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT


class MetaWeatherProvider:
    """Base class that sends GET requests against one service root."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    @property
    def base_url(self) -> str:
        return self.request_config.base_url.rstrip("/")

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _build_url(self, path: str, params: Optional[Mapping[str, str]] = None) -> str:
        url = f"{self.base_url}{path}"
        if params:
            # "," stays literal so coordinate searches read lattlong=lat,long
            url = f"{url}?{urlencode(params, safe=',')}"
        return url

    def _request(self, method: str, url: str, **kwargs) -> Response:
        self._log.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.request_timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out: %s", url, exc_info=exc)
            raise TransportError(f"timeout after {self.request_config.request_timeout}s: {url}") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed: %s", url, exc_info=exc)
            raise TransportError(f"request failed: {url}") from exc
        return self._handle_response(response)

    def _handle_response(self, response: Response) -> Response:
        # Unknown woeids come back as 404 with a JSON body that still has to
        # be decoded, so the status alone never fails a call.
        if response.status_code >= 400:
            self._log.warning("Service returned %s for %s", response.status_code, response.url)
        return response

    def _get_json(self, path: str, params: Optional[Mapping[str, str]] = None) -> Any:
        response = self._request("GET", self._build_url(path, params))
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON from %s", response.url, exc_info=exc)
            raise DecodeError(f"invalid json from {response.url}") from exc


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DecodeError",
    "MetaWeatherError",
    "MetaWeatherProvider",
    "RequestConfig",
    "TransportError",
]
