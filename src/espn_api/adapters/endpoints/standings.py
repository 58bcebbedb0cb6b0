"""Accessor: league standings.

Standings live under `/apis/v2` rather than `/apis/site/v2`, hence the
`site_v2` domain.
"""

from __future__ import annotations

from espn_api.adapters.endpoints.base import Endpoint
from espn_api.core.domain.api_domain import Domain
from espn_api.core.domain.models import StandingsResponse
from espn_api.core.domain.queries import SeasonQuery


class StandingsEndpoint(Endpoint):
    async def get(
        self,
        league: str | None = None,
        *,
        season: int | None = None,
        seasontype: int | None = None,
    ) -> StandingsResponse:
        query = SeasonQuery(season=season, seasontype=seasontype)
        data = await self._requester.request(Domain.SITE_V2, f"{self._league_path(league)}/standings", query.to_params())
        return StandingsResponse.model_validate(data)
