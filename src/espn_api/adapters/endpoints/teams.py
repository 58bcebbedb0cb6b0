"""Accessor: teams, rosters and team schedules."""

from __future__ import annotations

from espn_api.adapters.endpoints.base import Endpoint
from espn_api.core.domain.api_domain import Domain
from espn_api.core.domain.models import RosterResponse, ScheduleResponse, TeamResponse, TeamsResponse
from espn_api.core.domain.queries import SeasonQuery, TeamsQuery, resource_id


class TeamsEndpoint(Endpoint):
    async def get_all(self, league: str | None = None, *, limit: int | None = None) -> TeamsResponse:
        """Every team of a league (use `.teams` on the result for a flat list)."""

        query = TeamsQuery(limit=limit)
        data = await self._requester.request(Domain.SITE, f"{self._league_path(league)}/teams", query.to_params())
        return TeamsResponse.model_validate(data)

    async def get(self, team_id: str | int, league: str | None = None) -> TeamResponse:
        path = f"{self._league_path(league)}/teams/{resource_id(team_id)}"
        data = await self._requester.request(Domain.SITE, path)
        return TeamResponse.model_validate(data)

    async def get_roster(self, team_id: str | int, league: str | None = None) -> RosterResponse:
        path = f"{self._league_path(league)}/teams/{resource_id(team_id)}/roster"
        data = await self._requester.request(Domain.SITE, path)
        return RosterResponse.model_validate(data)

    async def get_schedule(
        self,
        team_id: str | int,
        league: str | None = None,
        *,
        season: int | None = None,
        seasontype: int | None = None,
    ) -> ScheduleResponse:
        """Team schedule; `seasontype` is 1=pre, 2=regular, 3=post, 4=off."""

        query = SeasonQuery(season=season, seasontype=seasontype)
        path = f"{self._league_path(league)}/teams/{resource_id(team_id)}/schedule"
        data = await self._requester.request(Domain.SITE, path, query.to_params())
        return ScheduleResponse.model_validate(data)
