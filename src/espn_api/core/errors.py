"""Error taxonomy.

Every failure surfaced by the client is one of:

- `ESPNConfigurationError`: unknown domain/league or unusable base URL.
- `ESPNRateLimitError`: HTTP 429.
- `ESPNNotFoundError`: HTTP 404.
- `ESPNAPIError`: any other non-success status or a transport failure.

The kind is a pure function of the HTTP status code. Errors are created only
at the request façade and never retried or suppressed there.
"""

from __future__ import annotations

from typing import Any


class ESPNError(Exception):
    """Base class for every error raised by `espn_api`."""


class ESPNConfigurationError(ESPNError):
    """Raised when a domain, league or base URL cannot be resolved."""


class ESPNAPIError(ESPNError):
    """Generic API failure (non-2xx status not otherwise classified, or transport error)."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str,
        status_code: int | None = None,
        payload: Any = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint
        self.status_code = status_code
        self.payload = payload
        self.url = url

    def __str__(self) -> str:
        if self.status_code is None:
            return f"{self.message} ({self.endpoint})"
        return f"HTTP {self.status_code} for {self.endpoint}: {self.message}"


class ESPNRateLimitError(ESPNAPIError):
    """Rate limiting encountered (429). No automatic backoff is attempted."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str,
        status_code: int | None = 429,
        payload: Any = None,
        url: str | None = None,
        retry_after: str | None = None,
    ) -> None:
        super().__init__(message, endpoint=endpoint, status_code=status_code, payload=payload, url=url)
        self.retry_after = retry_after


class ESPNNotFoundError(ESPNAPIError):
    """The requested resource does not exist (404)."""


def error_for_status(
    status_code: int,
    *,
    endpoint: str,
    payload: Any = None,
    url: str | None = None,
    retry_after: str | None = None,
) -> ESPNAPIError:
    """Build the error matching a non-success HTTP status code."""

    if status_code == 429:
        return ESPNRateLimitError(
            "rate limited by ESPN",
            endpoint=endpoint,
            status_code=status_code,
            payload=payload,
            url=url,
            retry_after=retry_after,
        )
    if status_code == 404:
        return ESPNNotFoundError(
            "resource not found",
            endpoint=endpoint,
            status_code=status_code,
            payload=payload,
            url=url,
        )
    return ESPNAPIError(
        "request failed",
        endpoint=endpoint,
        status_code=status_code,
        payload=payload,
        url=url,
    )
