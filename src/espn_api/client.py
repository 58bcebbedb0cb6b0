"""Request façade for ESPN's public endpoints.

`ESPNClient` is the single component that talks HTTP:
- builds `base_urls[domain] + path`, attaches query parameters,
- issues exactly one GET per call (no retry, no cache),
- returns the decoded JSON body or raises a normalized error.

Endpoint accessors (`news`, `teams`, ...) are created on first access and
reused for the lifetime of the client.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from espn_api.adapters.endpoints import (
    AthletesEndpoint,
    EventsEndpoint,
    NewsEndpoint,
    ScoreboardEndpoint,
    StandingsEndpoint,
    TeamsEndpoint,
)
from espn_api.adapters.http_client import build_async_client
from espn_api.core.config import ESPNSettings, check_base_url
from espn_api.core.domain.api_domain import Domain
from espn_api.core.errors import ESPNAPIError, ESPNConfigurationError, error_for_status
from espn_api.core.interfaces.requester import QueryValue

logger = logging.getLogger(__name__)


def _response_payload(response: httpx.Response) -> Any:
    """Raw body for diagnostics: decoded JSON when possible, else text."""

    try:
        return response.json()
    except ValueError:
        return response.text


class ESPNClient:
    """Asynchronous client for ESPN's undocumented REST API.

    Usage::

        client = ESPNClient(timeout=5)
        news = await client.news.get_news(league="nba", limit=5)
        raw = await client.request("site", "/sports/football/nfl/scoreboard", {"week": 1})
    """

    def __init__(
        self,
        settings: ESPNSettings | None = None,
        *,
        base_urls: Mapping[Domain | str, str] | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
        league: str | None = None,
    ) -> None:
        self._settings = settings or ESPNSettings()
        self._base_urls = self._settings.resolved_base_urls()
        for key, url in (base_urls or {}).items():
            domain = self._parse_domain(key)
            try:
                self._base_urls[domain] = check_base_url(domain, url)
            except ValueError as exc:
                raise ESPNConfigurationError(str(exc)) from None
        if timeout is not None and timeout <= 0:
            raise ESPNConfigurationError(f"timeout must be positive, got {timeout}")
        self._timeout = timeout
        self._http_client = http_client
        self._league = league or self._settings.default_league

        self._news: NewsEndpoint | None = None
        self._teams: TeamsEndpoint | None = None
        self._scoreboard: ScoreboardEndpoint | None = None
        self._athletes: AthletesEndpoint | None = None
        self._events: EventsEndpoint | None = None
        self._standings: StandingsEndpoint | None = None

    @property
    def settings(self) -> ESPNSettings:
        return self._settings

    @property
    def league(self) -> str:
        """Default league handed to every accessor; fixed for the client's lifetime."""

        return self._league

    @property
    def base_urls(self) -> dict[Domain, str]:
        return dict(self._base_urls)

    @staticmethod
    def _parse_domain(domain: Domain | str) -> Domain:
        try:
            return Domain.parse(domain)
        except ValueError:
            raise ESPNConfigurationError(f"unknown domain: {domain!r}") from None

    def resolve_url(self, domain: Domain | str, path: str) -> str:
        """`base_urls[domain] + path`; raises `ESPNConfigurationError` for unknown domains."""

        key = self._parse_domain(domain)
        base = self._base_urls.get(key)
        if not base:
            raise ESPNConfigurationError(f"no base URL configured for domain {key.value!r}")
        return base + path

    async def request(
        self,
        domain: Domain | str,
        path: str,
        params: Mapping[str, QueryValue] | None = None,
    ) -> Any:
        """GET `domain` + `path` and return the decoded JSON body.

        Raises:
            ESPNConfigurationError: the domain has no base URL.
            ESPNRateLimitError: HTTP 429.
            ESPNNotFoundError: HTTP 404.
            ESPNAPIError: any other non-2xx status or a transport failure.
        """

        url = self.resolve_url(domain, path)
        query = {key: value for key, value in (params or {}).items() if value is not None}

        logger.debug("GET %s params=%s", url, query)
        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, params=query)
            else:
                async with build_async_client(self._settings, timeout=self._timeout) as client:
                    response = await client.get(url, params=query)
        except httpx.RequestError as exc:
            logger.warning("Transport failure for %s: %s", url, exc)
            raise ESPNAPIError(
                f"transport error: {exc.__class__.__name__}: {exc}",
                endpoint=path,
                url=url,
            ) from exc

        logger.debug("HTTP %s for %s", response.status_code, response.url)
        if response.is_success:
            return response.json()

        error = error_for_status(
            response.status_code,
            endpoint=path,
            payload=_response_payload(response),
            url=str(response.url),
            retry_after=response.headers.get("Retry-After"),
        )
        if response.status_code == 404:
            logger.debug("Not found: %s", response.url)
        else:
            logger.warning("HTTP %s for %s", response.status_code, response.url)
        raise error

    # Accessors (created on first access, one per client).

    @property
    def news(self) -> NewsEndpoint:
        if self._news is None:
            self._news = NewsEndpoint(self, default_league=self.league)
        return self._news

    @property
    def teams(self) -> TeamsEndpoint:
        if self._teams is None:
            self._teams = TeamsEndpoint(self, default_league=self.league)
        return self._teams

    @property
    def scoreboard(self) -> ScoreboardEndpoint:
        if self._scoreboard is None:
            self._scoreboard = ScoreboardEndpoint(self, default_league=self.league)
        return self._scoreboard

    @property
    def athletes(self) -> AthletesEndpoint:
        if self._athletes is None:
            self._athletes = AthletesEndpoint(self, default_league=self.league)
        return self._athletes

    @property
    def events(self) -> EventsEndpoint:
        if self._events is None:
            self._events = EventsEndpoint(self, default_league=self.league)
        return self._events

    @property
    def standings(self) -> StandingsEndpoint:
        if self._standings is None:
            self._standings = StandingsEndpoint(self, default_league=self.league)
        return self._standings
