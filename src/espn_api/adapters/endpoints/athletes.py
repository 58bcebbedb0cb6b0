"""Accessor: athlete profiles (web API family)."""

from __future__ import annotations

from espn_api.adapters.endpoints.base import Endpoint
from espn_api.core.domain.api_domain import Domain
from espn_api.core.domain.models import AthleteOverview, AthleteResponse, GameLog
from espn_api.core.domain.queries import GameLogQuery, resource_id


class AthletesEndpoint(Endpoint):
    def _athlete_path(self, athlete_id: str | int, league: str | None) -> str:
        return f"{self._league_path(league)}/athletes/{resource_id(athlete_id)}"

    async def get(self, athlete_id: str | int, league: str | None = None) -> AthleteResponse:
        data = await self._requester.request(Domain.WEB, self._athlete_path(athlete_id, league))
        return AthleteResponse.model_validate(data)

    async def get_overview(self, athlete_id: str | int, league: str | None = None) -> AthleteOverview:
        """Season statistics, latest news and next game for an athlete."""

        data = await self._requester.request(Domain.WEB, f"{self._athlete_path(athlete_id, league)}/overview")
        return AthleteOverview.model_validate(data)

    async def get_gamelog(
        self,
        athlete_id: str | int,
        league: str | None = None,
        *,
        season: int | None = None,
    ) -> GameLog:
        query = GameLogQuery(season=season)
        path = f"{self._athlete_path(athlete_id, league)}/gamelog"
        data = await self._requester.request(Domain.WEB, path, query.to_params())
        return GameLog.model_validate(data)
