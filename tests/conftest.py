"""Shared test fixtures"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import pytest

from sadad_pay.client.http_client import HttpMethod, HttpResponse
from sadad_pay.config import SadadConfig


@dataclass
class RecordedCall:
    method: HttpMethod
    url: str
    headers: Dict[str, str]
    body: Optional[Any]


class FakeTransport:
    """Transport that replays queued responses and records every request"""

    def __init__(self) -> None:
        self.calls: List[RecordedCall] = []
        self._queue: List[Union[HttpResponse, Exception]] = []

    def queue(self, payload: Any = None, status: int = 200, raw: Optional[bytes] = None) -> None:
        content = raw if raw is not None else json.dumps(payload).encode("utf-8")
        self._queue.append(HttpResponse(
            content=content,
            status=status,
            headers={"Content-Type": "application/json"},
            duration=1,
            request_id="test-request",
        ))

    def queue_error(self, error: Exception) -> None:
        self._queue.append(error)

    def send(self, method, url, headers, body=None) -> HttpResponse:
        self.calls.append(RecordedCall(HttpMethod(method), url, dict(headers), body))
        if not self._queue:
            raise AssertionError(f"Unexpected request: {method} {url}")
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def __enter__(self) -> "FakeTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        pass

    @property
    def urls(self) -> List[str]:
        return [call.url for call in self.calls]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def config_data() -> dict:
    return {
        "client_id": "client-123",
        "client_secret": "secret-456",
        "sandbox_mode": True,
    }


@pytest.fixture
def sandbox_config(config_data: dict) -> SadadConfig:
    return SadadConfig(**config_data)

