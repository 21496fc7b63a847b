"""opencagedata — Async client for the OpenCage geocoding API."""

from opencagedata._http import HttpRequester
from opencagedata.client import OpenCage
from opencagedata.confidence import radius_in_meters
from opencagedata.exceptions import (
    ConfigurationError,
    InvalidAddress,
    OpenCageError,
    ResponseInvalid,
    ServiceStatusError,
)
from opencagedata.models import ClientConfig, RawHttpResult, RequestOptions

__all__ = [
    "OpenCage",
    "ClientConfig",
    "HttpRequester",
    "RequestOptions",
    "RawHttpResult",
    "radius_in_meters",
    "OpenCageError",
    "ConfigurationError",
    "InvalidAddress",
    "ServiceStatusError",
    "ResponseInvalid",
]
