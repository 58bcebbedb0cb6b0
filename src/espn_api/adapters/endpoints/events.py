"""Accessor: single game summaries."""

from __future__ import annotations

from espn_api.adapters.endpoints.base import Endpoint
from espn_api.core.domain.api_domain import Domain
from espn_api.core.domain.models import GameSummary
from espn_api.core.domain.queries import SummaryQuery, resource_id


class EventsEndpoint(Endpoint):
    async def get_summary(self, event_id: str | int, league: str | None = None) -> GameSummary:
        """Box score, plays, leaders and game info for one event."""

        query = SummaryQuery(event=resource_id(event_id))
        data = await self._requester.request(Domain.SITE, f"{self._league_path(league)}/summary", query.to_params())
        return GameSummary.model_validate(data)
