"""OpenCage client — the main entry point for the library."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from opencagedata import query
from opencagedata._http import HttpRequester
from opencagedata.confidence import radius_in_meters
from opencagedata.exceptions import (
    ConfigurationError,
    InvalidAddress,
    ResponseInvalid,
    ServiceStatusError,
)
from opencagedata.models import (
    ClientConfig,
    GeocodeResult,
    RawHttpResult,
    RequestOptions,
)

logger = logging.getLogger(__name__)

_EVENT_PREFIX = "opencagedata:api:"
_RATE_LIMIT_LIMIT = "X-RateLimit-Limit"
_RATE_LIMIT_REMAINING = "X-RateLimit-Remaining"
_RATE_LIMIT_RESET = "X-RateLimit-Reset"


def _is_missing(value: object) -> bool:
    return value is None or (isinstance(value, str) and value == "")


class OpenCage:
    """
    Asynchronous client for the OpenCage geocoding API.

    Initialise with a ClientConfig (or a plain dict with the same keys).
    The configuration is validated on construction; no request is made
    until search() or reverse() is awaited.
    """

    def __init__(
        self,
        config: ClientConfig | Mapping[str, Any] | None,
        requester: Optional[HttpRequester] = None,
    ):
        self._config = self._validate_config(config)
        self._requester = requester or HttpRequester()

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ── Public API ────────────────────────────────────────────────

    async def search(
        self, address: str, options: Mapping[str, Any] | None = None
    ) -> list[GeocodeResult]:
        """
        Forward-geocode a free-text *address*.

        Extra *options* are passed through as query parameters and win
        over ``q`` on collision. Raises InvalidAddress for a missing or
        empty address, ServiceStatusError when the service reports a
        failure.
        """
        if _is_missing(address):
            raise InvalidAddress()
        return await self.request_data(
            {"q": query.escape_address(address), **(options or {})}
        )

    async def reverse(
        self,
        latitude: float | str,
        longitude: float | str,
        options: Mapping[str, Any] | None = None,
    ) -> list[GeocodeResult]:
        """Reverse-geocode a coordinate pair. Zero is a valid coordinate."""
        if _is_missing(latitude) or _is_missing(longitude):
            raise InvalidAddress()
        return await self.request_data(
            {"q": f"{latitude},{longitude}", **(options or {})}
        )

    async def request_data(
        self, query_opts: Mapping[str, Any]
    ) -> list[GeocodeResult]:
        """
        Send *query_opts* to the geocode endpoint and return the results.

        The API key is added to a copy of *query_opts*; the caller's
        mapping is left untouched.
        """
        params = {**query_opts, "key": self._config.api_key}
        logger.debug(
            "making request %s", {**params, "key": "<redacted>"}
        )

        response = await self._requester.perform(
            RequestOptions(
                method="GET",
                host=self._config.api_domain,
                port=443,
                path=(
                    f"/geocode/{self._config.api_version}/json?"
                    f"{query.encode(params)}"
                ),
            )
        )

        if 400 <= response.status_code < 500:
            self._handle_client_error(response)
        self._report_rate_limit(response)

        body = self._parse_body(response)
        status = body["status"]
        if status.get("code") != 200:
            message = status.get("message") or f"HTTP {response.status_code}"
            raise ServiceStatusError(status.get("code"), str(message))

        logger.debug("Total results returned %s", body.get("total_results"))
        return self._enrich(body.get("results") or [])

    # ── Private helpers ───────────────────────────────────────────

    @staticmethod
    def _validate_config(
        config: ClientConfig | Mapping[str, Any] | None,
    ) -> ClientConfig:
        """Reject a missing config or API key before anything else runs."""
        if config is None:
            raise ConfigurationError("config", "options object required")
        if isinstance(config, Mapping):
            if _is_missing(config.get("api_key")):
                raise ConfigurationError(
                    "api_key",
                    "OpenCage - no API key given. "
                    "Please provide an object with a key of api_key",
                )
            config = ClientConfig.from_mapping(config)
        if _is_missing(config.api_key):
            raise ConfigurationError(
                "api_key",
                "OpenCage - no API key given. Please provide an api_key",
            )
        return config

    def _emit(self, header: str, value: Optional[str]) -> None:
        self._config.logger(_EVENT_PREFIX + header, value)

    def _handle_client_error(self, response: RawHttpResult) -> None:
        """Report a 4xx; the caller still parses its body."""
        logger.warning("request error: HTTP %s", response.status_code)
        reset = response.headers.get(_RATE_LIMIT_RESET)
        if reset is not None:
            self._emit(_RATE_LIMIT_RESET, reset)

    def _report_rate_limit(self, response: RawHttpResult) -> None:
        limit = response.headers.get(_RATE_LIMIT_LIMIT)
        remaining = response.headers.get(_RATE_LIMIT_REMAINING)
        if limit is not None or remaining is not None:
            self._emit(_RATE_LIMIT_LIMIT, limit)
            self._emit(_RATE_LIMIT_REMAINING, remaining)

    @staticmethod
    def _parse_body(response: RawHttpResult) -> dict[str, Any]:
        try:
            body = json.loads(response.body)
        except ValueError as exc:
            raise ResponseInvalid(response.status_code, str(exc)) from exc
        if not isinstance(body, dict) or not isinstance(
            body.get("status"), dict
        ):
            raise ResponseInvalid(
                response.status_code, "missing 'status' object"
            )
        return body

    @staticmethod
    def _enrich(results: list[dict[str, Any]]) -> list[GeocodeResult]:
        """Attach confidenceInM and order by descending confidence."""
        enriched = [
            {**result, "confidenceInM": radius_in_meters(result.get("confidence"))}
            for result in results
        ]
        # Stable sort: equal confidences keep the service's order.
        enriched.sort(key=lambda r: r.get("confidence") or 0, reverse=True)
        return enriched
