from __future__ import annotations

from typing import Callable

import httpx
import pytest

from espn_api.client import ESPNClient
from espn_api.core.config import ESPNSettings

Handler = Callable[[httpx.Request], httpx.Response]


def json_handler(data, status_code: int = 200, headers=None) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=data, headers=headers)

    return handler


@pytest.fixture
def settings() -> ESPNSettings:
    # Ignore any developer .env files.
    return ESPNSettings(_env_file=None)


@pytest.fixture
def make_client(settings):
    """Build an `ESPNClient` on top of `httpx.MockTransport`.

    Returns `(client, calls)`; `calls` collects every request sent.
    """

    def _make(handler: Handler, **kwargs) -> tuple[ESPNClient, list[httpx.Request]]:
        calls: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording))
        return ESPNClient(settings, http_client=http_client, **kwargs), calls

    return _make
