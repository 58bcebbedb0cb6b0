"""Accessor: scoreboard (games for a date, date range or week)."""

from __future__ import annotations

from espn_api.adapters.endpoints.base import Endpoint
from espn_api.core.domain.api_domain import Domain
from espn_api.core.domain.models import ScoreboardResponse
from espn_api.core.domain.queries import DatesInput, ScoreboardQuery


class ScoreboardEndpoint(Endpoint):
    async def get(
        self,
        league: str | None = None,
        *,
        dates: DatesInput | None = None,
        week: int | None = None,
        seasontype: int | None = None,
        limit: int | None = None,
        groups: str | int | None = None,
    ) -> ScoreboardResponse:
        """Scoreboard for a league.

        Args:
            dates: a `date`, a `(start, end)` tuple or `YYYYMMDD[-YYYYMMDD]`.
            week: week number (football).
            seasontype: 1=pre, 2=regular, 3=post, 4=off.
            limit: maximum number of events.
            groups: conference/group filter (college sports, e.g. 50 = D-I).

        Without arguments ESPN returns the current scoreboard.
        """

        query = ScoreboardQuery(dates=dates, week=week, seasontype=seasontype, limit=limit, groups=groups)
        data = await self._requester.request(Domain.SITE, f"{self._league_path(league)}/scoreboard", query.to_params())
        return ScoreboardResponse.model_validate(data)
