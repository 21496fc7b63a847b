"""Typed configuration and transport models for opencagedata."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

DEFAULT_API_DOMAIN = "api.opencagedata.com"
DEFAULT_API_VERSION = "v1"

# One provider result object with the added "confidenceInM" key.
GeocodeResult = dict[str, Any]


def _noop_logger(event: str, value: Any) -> None:
    pass


@dataclass(frozen=True)
class ClientConfig:
    """Settings for an OpenCage client, fixed at construction."""

    api_key: str
    api_domain: str = DEFAULT_API_DOMAIN
    api_version: str = DEFAULT_API_VERSION
    logger: Callable[[str, Any], None] = _noop_logger

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> ClientConfig:
        """Build a config from a plain dict, ignoring ``None`` values."""
        kwargs = {
            name: options[name]
            for name in ("api_key", "api_domain", "api_version", "logger")
            if options.get(name) is not None
        }
        return cls(**kwargs)


@dataclass(frozen=True)
class RequestOptions:
    """Target of a single HTTPS request."""

    host: str
    path: str
    method: str = "GET"
    port: int = 443


@dataclass(frozen=True)
class RawHttpResult:
    """Complete response of one HTTP exchange, body fully buffered."""

    http_version: str
    status_code: int
    headers: Mapping[str, str]     # case-insensitive (httpx.Headers)
    body: str
    trailers: Mapping[str, str] = field(default_factory=dict)
