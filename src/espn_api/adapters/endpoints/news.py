"""Accessor: league news."""

from __future__ import annotations

from espn_api.adapters.endpoints.base import Endpoint
from espn_api.core.domain.api_domain import Domain
from espn_api.core.domain.models import NewsResponse
from espn_api.core.domain.queries import NewsQuery


class NewsEndpoint(Endpoint):
    async def get_news(
        self,
        league: str | None = None,
        *,
        limit: int | None = None,
        team: str | int | None = None,
    ) -> NewsResponse:
        """Latest articles for a league, optionally filtered by team id."""

        query = NewsQuery(limit=limit, team=None if team is None else str(team))
        data = await self._requester.request(Domain.SITE, f"{self._league_path(league)}/news", query.to_params())
        return NewsResponse.model_validate(data)
