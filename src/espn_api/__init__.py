"""Asynchronous client for ESPN's undocumented public REST endpoints."""

import logging

from espn_api.client import ESPNClient
from espn_api.core.config import ESPNSettings
from espn_api.core.domain.api_domain import DEFAULT_BASE_URLS, Domain
from espn_api.core.domain.models import (
    Athlete,
    AthleteOverview,
    AthleteResponse,
    Event,
    GameLog,
    GameSummary,
    NewsArticle,
    NewsResponse,
    RosterResponse,
    ScheduleResponse,
    ScoreboardResponse,
    StandingsResponse,
    Team,
    TeamResponse,
    TeamsResponse,
)
from espn_api.core.errors import (
    ESPNAPIError,
    ESPNConfigurationError,
    ESPNError,
    ESPNNotFoundError,
    ESPNRateLimitError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
	"DEFAULT_BASE_URLS",
	"Athlete",
	"AthleteOverview",
	"AthleteResponse",
	"Domain",
	"ESPNAPIError",
	"ESPNClient",
	"ESPNConfigurationError",
	"ESPNError",
	"ESPNNotFoundError",
	"ESPNRateLimitError",
	"ESPNSettings",
	"Event",
	"GameLog",
	"GameSummary",
	"NewsArticle",
	"NewsResponse",
	"RosterResponse",
	"ScheduleResponse",
	"ScoreboardResponse",
	"StandingsResponse",
	"Team",
	"TeamResponse",
	"TeamsResponse",
]
