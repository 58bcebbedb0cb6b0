"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and redirects for every ESPN request.
- Easy to test: callers may inject their own `httpx.AsyncClient`
  (e.g. one built on `httpx.MockTransport`).
"""

from __future__ import annotations

import httpx

from espn_api.core.config import ESPNSettings


def build_async_client(
    settings: ESPNSettings | None = None,
    *,
    timeout: float | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    `timeout` overrides `settings.http_timeout_seconds` when given.
    """

    settings = settings or ESPNSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout if timeout is not None else settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )
