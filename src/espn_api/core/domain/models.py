"""Typed response records (Pydantic v2).

These records mirror a subset of ESPN's JSON. They describe *what* the data
is, not *how* it is fetched:
- `extra="ignore"`: ESPN ships far more keys than we model.
- camelCase aliases with `populate_by_name` so both spellings validate.
- Every field is optional or defaulted; ESPN omits keys freely.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ESPNRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


# News


class NewsArticle(ESPNRecord):
    headline: str | None = Field(default=None, description="Article headline.")
    description: str | None = None
    published: str | None = Field(default=None, description="Publication timestamp as sent by ESPN.")
    last_modified: str | None = Field(default=None, alias="lastModified")
    type: str | None = None
    premium: bool | None = None
    byline: str | None = None
    links: dict[str, Any] = Field(default_factory=dict)
    images: list[dict[str, Any]] = Field(default_factory=list)
    categories: list[dict[str, Any]] = Field(default_factory=list)


class NewsResponse(ESPNRecord):
    header: str | None = None
    articles: list[NewsArticle] = Field(default_factory=list)


# Teams


class Team(ESPNRecord):
    id: str | None = None
    uid: str | None = None
    slug: str | None = None
    abbreviation: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    short_display_name: str | None = Field(default=None, alias="shortDisplayName")
    name: str | None = None
    nickname: str | None = None
    location: str | None = None
    color: str | None = None
    alternate_color: str | None = Field(default=None, alias="alternateColor")
    is_active: bool | None = Field(default=None, alias="isActive")
    logos: list[dict[str, Any]] = Field(default_factory=list)
    record: dict[str, Any] | None = None
    links: list[dict[str, Any]] = Field(default_factory=list)


class TeamEntry(ESPNRecord):
    team: Team


class LeagueTeams(ESPNRecord):
    id: str | None = None
    name: str | None = None
    abbreviation: str | None = None
    teams: list[TeamEntry] = Field(default_factory=list)


class SportTeams(ESPNRecord):
    id: str | None = None
    name: str | None = None
    leagues: list[LeagueTeams] = Field(default_factory=list)


class TeamsResponse(ESPNRecord):
    sports: list[SportTeams] = Field(default_factory=list)

    @property
    def teams(self) -> list[Team]:
        """All teams across the nested sports/leagues envelope."""

        return [entry.team for sport in self.sports for league in sport.leagues for entry in league.teams]


class TeamResponse(ESPNRecord):
    team: Team


class RosterResponse(ESPNRecord):
    timestamp: str | None = None
    status: str | None = None
    season: dict[str, Any] | None = None
    # Flat list (NBA/NHL) or position groups with `items` (NFL).
    athletes: list[dict[str, Any]] = Field(default_factory=list)
    coach: list[dict[str, Any]] = Field(default_factory=list)
    team: Team | None = None


# Scoreboard / events


class EventStatusType(ESPNRecord):
    id: str | None = None
    name: str | None = None
    state: str | None = None
    completed: bool | None = None
    description: str | None = None
    detail: str | None = None
    short_detail: str | None = Field(default=None, alias="shortDetail")


class EventStatus(ESPNRecord):
    clock: float | None = None
    display_clock: str | None = Field(default=None, alias="displayClock")
    period: int | None = None
    type: EventStatusType | None = None


class Competitor(ESPNRecord):
    id: str | None = None
    home_away: str | None = Field(default=None, alias="homeAway")
    winner: bool | None = None
    score: str | None = None
    team: Team | None = None
    records: list[dict[str, Any]] = Field(default_factory=list)


class Competition(ESPNRecord):
    id: str | None = None
    date: str | None = None
    attendance: int | None = None
    neutral_site: bool | None = Field(default=None, alias="neutralSite")
    venue: dict[str, Any] | None = None
    competitors: list[Competitor] = Field(default_factory=list)
    status: EventStatus | None = None
    odds: list[dict[str, Any]] = Field(default_factory=list)
    broadcasts: list[dict[str, Any]] = Field(default_factory=list)


class Event(ESPNRecord):
    id: str | None = None
    uid: str | None = None
    date: str | None = None
    name: str | None = None
    short_name: str | None = Field(default=None, alias="shortName")
    season: dict[str, Any] | None = None
    week: dict[str, Any] | None = None
    competitions: list[Competition] = Field(default_factory=list)
    status: EventStatus | None = None
    links: list[dict[str, Any]] = Field(default_factory=list)


class ScoreboardResponse(ESPNRecord):
    leagues: list[dict[str, Any]] = Field(default_factory=list)
    season: dict[str, Any] | None = None
    week: dict[str, Any] | None = None
    day: dict[str, Any] | None = None
    events: list[Event] = Field(default_factory=list)


class ScheduleResponse(ESPNRecord):
    timestamp: str | None = None
    status: str | None = None
    season: dict[str, Any] | None = None
    team: Team | None = None
    events: list[Event] = Field(default_factory=list)
    requested_season: dict[str, Any] | None = Field(default=None, alias="requestedSeason")


class GameSummary(ESPNRecord):
    header: dict[str, Any] | None = None
    boxscore: dict[str, Any] | None = None
    game_info: dict[str, Any] | None = Field(default=None, alias="gameInfo")
    leaders: list[dict[str, Any]] = Field(default_factory=list)
    plays: list[dict[str, Any]] = Field(default_factory=list)
    drives: dict[str, Any] | None = None
    odds: list[dict[str, Any]] = Field(default_factory=list)
    news: dict[str, Any] | None = None
    standings: dict[str, Any] | None = None


# Athletes


class Athlete(ESPNRecord):
    id: str | None = None
    uid: str | None = None
    guid: str | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    full_name: str | None = Field(default=None, alias="fullName")
    display_name: str | None = Field(default=None, alias="displayName")
    short_name: str | None = Field(default=None, alias="shortName")
    jersey: str | None = None
    age: int | None = None
    display_height: str | None = Field(default=None, alias="displayHeight")
    display_weight: str | None = Field(default=None, alias="displayWeight")
    position: dict[str, Any] | None = None
    team: Team | None = None
    headshot: dict[str, Any] | None = None
    status: dict[str, Any] | None = None


class AthleteResponse(ESPNRecord):
    athlete: Athlete


class AthleteOverview(ESPNRecord):
    statistics: dict[str, Any] | None = None
    news: list[NewsArticle] = Field(default_factory=list)
    next_game: dict[str, Any] | None = Field(default=None, alias="nextGame")
    game_log: dict[str, Any] | None = Field(default=None, alias="gameLog")
    fantasy: dict[str, Any] | None = None


class GameLog(ESPNRecord):
    labels: list[str] = Field(default_factory=list)
    names: list[str] = Field(default_factory=list)
    display_names: list[str] = Field(default_factory=list, alias="displayNames")
    events: dict[str, Any] = Field(default_factory=dict)
    season_types: list[dict[str, Any]] = Field(default_factory=list, alias="seasonTypes")


# Standings


class StandingsResponse(ESPNRecord):
    uid: str | None = None
    id: str | None = None
    name: str | None = None
    abbreviation: str | None = None
    # Conferences/divisions, each holding a `standings.entries` list.
    children: list[dict[str, Any]] = Field(default_factory=list)
    seasons: list[dict[str, Any]] = Field(default_factory=list)
