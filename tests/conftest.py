"""Shared test fixtures — a recording logger and a scripted transport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from opencagedata import ClientConfig, OpenCage
from opencagedata.models import RawHttpResult, RequestOptions

OK_BODY = {
    "status": {"code": 200, "message": "OK"},
    "total_results": 2,
    "results": [
        {"confidence": 5, "x": "a"},
        {"confidence": 8, "x": "b"},
    ],
}


class FakeRequester:
    """Stands in for HttpRequester; records every request it is given."""

    def __init__(
        self,
        body: Any = None,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ):
        self.body = OK_BODY if body is None else body
        self.status_code = status_code
        self.headers = headers or {}
        self.calls: list[RequestOptions] = []

    async def perform(self, options: RequestOptions) -> RawHttpResult:
        self.calls.append(options)
        body = self.body if isinstance(self.body, str) else json.dumps(self.body)
        return RawHttpResult(
            http_version="HTTP/1.1",
            status_code=self.status_code,
            headers=httpx.Headers(self.headers),
            body=body,
        )


class RecordingLogger:
    """Collects (event, value) pairs passed to the client logger."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def __call__(self, event: str, value: Any) -> None:
        self.events.append((event, value))


@pytest.fixture()
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture()
def requester() -> FakeRequester:
    return FakeRequester()


@pytest.fixture()
def client(requester: FakeRequester, recorder: RecordingLogger) -> OpenCage:
    """Create an OpenCage client wired to the fake requester."""
    return OpenCage(
        ClientConfig(api_key="test-key", logger=recorder),
        requester=requester,
    )
