"""Endpoint accessors.

Each module groups the read operations of one ESPN resource family and
implements them as single calls into `core.interfaces.requester.Requester`.
"""

from espn_api.adapters.endpoints.athletes import AthletesEndpoint
from espn_api.adapters.endpoints.base import Endpoint
from espn_api.adapters.endpoints.events import EventsEndpoint
from espn_api.adapters.endpoints.news import NewsEndpoint
from espn_api.adapters.endpoints.scoreboard import ScoreboardEndpoint
from espn_api.adapters.endpoints.standings import StandingsEndpoint
from espn_api.adapters.endpoints.teams import TeamsEndpoint

__all__ = [
	"AthletesEndpoint",
	"Endpoint",
	"EventsEndpoint",
	"NewsEndpoint",
	"ScoreboardEndpoint",
	"StandingsEndpoint",
	"TeamsEndpoint",
]
