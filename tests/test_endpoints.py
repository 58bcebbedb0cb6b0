from __future__ import annotations

import asyncio
from datetime import date, datetime

import pytest
from pydantic import ValidationError

from espn_api import client as client_module
from espn_api.adapters.endpoints import AthletesEndpoint, NewsEndpoint, ScoreboardEndpoint, TeamsEndpoint
from espn_api.core.domain.api_domain import Domain
from espn_api.core.errors import ESPNConfigurationError, ESPNNotFoundError
from espn_api.core.interfaces.requester import Requester

from conftest import json_handler


class StubRequester:
    """Records calls instead of doing HTTP."""

    def __init__(self, response):
        self.response = response
        self.calls = []

    async def request(self, domain, path, params=None):
        self.calls.append((domain, path, params))
        return self.response


def test_stub_satisfies_requester_protocol():
    assert isinstance(StubRequester({}), Requester)


def test_news_headline_parsed(make_client):
    body = {"articles": [{"headline": "Test Article", "published": "2025-01-01"}]}
    client, calls = make_client(json_handler(body))

    news = asyncio.run(client.news.get_news())

    assert news.articles[0].headline == "Test Article"
    assert news.articles[0].published == "2025-01-01"
    assert calls[0].url.path == "/apis/site/v2/sports/football/nfl/news"


def test_news_league_and_limit():
    stub = StubRequester({"header": "NBA News", "articles": []})
    endpoint = NewsEndpoint(stub, default_league="nfl")

    news = asyncio.run(endpoint.get_news("nba", limit=5, team=13))

    assert news.header == "NBA News"
    assert stub.calls == [(Domain.SITE, "/sports/basketball/nba/news", {"limit": 5, "team": "13"})]


def test_news_invalid_limit_fails_before_request():
    stub = StubRequester({})
    with pytest.raises(ValidationError):
        asyncio.run(NewsEndpoint(stub).get_news(limit=0))
    assert stub.calls == []


def test_lazy_accessors_are_memoized(make_client):
    client, _ = make_client(json_handler({}))

    assert client.news is client.news
    assert client.teams is client.teams
    assert client.scoreboard is client.scoreboard
    assert client.athletes is client.athletes
    assert client.events is client.events
    assert client.standings is client.standings
    assert client.news.requester is client


def test_accessing_one_accessor_does_not_build_another(make_client, monkeypatch):
    created = []

    class CountingNews(NewsEndpoint):
        def __init__(self, *args, **kwargs):
            created.append(self)
            super().__init__(*args, **kwargs)

    monkeypatch.setattr(client_module, "NewsEndpoint", CountingNews)
    client, _ = make_client(json_handler({}))

    _ = client.teams
    _ = client.scoreboard
    assert created == []

    first = client.news
    second = client.news
    assert created == [first]
    assert first is second


def test_accessors_use_client_league(make_client):
    client, calls = make_client(json_handler({"events": []}), league="nhl")

    asyncio.run(client.scoreboard.get())

    assert calls[0].url.path == "/apis/site/v2/sports/hockey/nhl/scoreboard"


def test_teams_get_all_flattens():
    body = {
        "sports": [
            {
                "name": "Football",
                "leagues": [
                    {
                        "abbreviation": "NFL",
                        "teams": [
                            {"team": {"id": "1", "abbreviation": "ATL", "displayName": "Atlanta Falcons"}},
                            {"team": {"id": 2, "abbreviation": "BUF", "displayName": "Buffalo Bills"}},
                        ],
                    }
                ],
            }
        ]
    }
    stub = StubRequester(body)

    teams = asyncio.run(TeamsEndpoint(stub).get_all(limit=50))

    assert [t.abbreviation for t in teams.teams] == ["ATL", "BUF"]
    assert teams.teams[1].id == "2"
    assert teams.teams[0].display_name == "Atlanta Falcons"
    assert stub.calls == [(Domain.SITE, "/sports/football/nfl/teams", {"limit": 50})]


def test_teams_single_roster_and_schedule():
    stub = StubRequester({"team": {"id": "12", "displayName": "Kansas City Chiefs"}, "athletes": [], "events": []})
    teams = TeamsEndpoint(stub)

    team = asyncio.run(teams.get(12))
    asyncio.run(teams.get_roster("12", "nfl"))
    asyncio.run(teams.get_schedule(12, season=2024, seasontype=2))

    assert team.team.display_name == "Kansas City Chiefs"
    assert stub.calls == [
        (Domain.SITE, "/sports/football/nfl/teams/12", None),
        (Domain.SITE, "/sports/football/nfl/teams/12/roster", None),
        (Domain.SITE, "/sports/football/nfl/teams/12/schedule", {"season": 2024, "seasontype": 2}),
    ]


@pytest.mark.parametrize("team_id", ["", "  ", "12/roster", 0, -3])
def test_teams_rejects_bad_identifiers(team_id):
    stub = StubRequester({})
    with pytest.raises(ValueError):
        asyncio.run(TeamsEndpoint(stub).get(team_id))
    assert stub.calls == []


def test_teams_not_found_propagates(make_client):
    client, _ = make_client(json_handler({}, status_code=404))

    with pytest.raises(ESPNNotFoundError) as excinfo:
        asyncio.run(client.teams.get(99999))

    assert excinfo.value.endpoint == "/sports/football/nfl/teams/99999"


def test_scoreboard_query(make_client):
    body = {
        "week": {"number": 1},
        "events": [
            {
                "id": "401671789",
                "shortName": "BAL @ KC",
                "competitions": [
                    {
                        "competitors": [
                            {"homeAway": "home", "score": "27", "team": {"abbreviation": "KC"}},
                            {"homeAway": "away", "score": 20, "team": {"abbreviation": "BAL"}},
                        ],
                        "status": {"type": {"completed": True, "shortDetail": "Final"}},
                    }
                ],
            }
        ],
    }
    client, calls = make_client(json_handler(body))

    board = asyncio.run(client.scoreboard.get(dates=(date(2024, 9, 5), date(2024, 9, 9)), seasontype=2, week=1))

    assert dict(calls[0].url.params) == {"dates": "20240905-20240909", "week": "1", "seasontype": "2"}
    event = board.events[0]
    assert event.short_name == "BAL @ KC"
    assert [c.score for c in event.competitions[0].competitors] == ["27", "20"]
    assert event.competitions[0].status.type.short_detail == "Final"


def test_scoreboard_college_groups():
    stub = StubRequester({})

    asyncio.run(ScoreboardEndpoint(stub).get("college-football", dates=date(2024, 11, 30), groups=80))

    assert stub.calls == [
        (Domain.SITE, "/sports/football/college-football/scoreboard", {"dates": "20241130", "groups": "80"})
    ]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"week": 0},
        {"week": 30},
        {"seasontype": 5},
        {"dates": "2024-13"},
        {"dates": (date(2024, 9, 9), date(2024, 9, 1))},
        {"dates": ("20250101", "20250105")},
        {"dates": (date(2025, 1, 1),)},
        {"dates": (date(2025, 1, 2), datetime(2025, 1, 1, 18, 0))},
    ],
)
def test_scoreboard_invalid_query(kwargs):
    stub = StubRequester({})
    with pytest.raises(ValidationError):
        asyncio.run(ScoreboardEndpoint(stub).get(**kwargs))
    assert stub.calls == []


def test_athletes_use_web_domain(make_client):
    client, calls = make_client(json_handler({"athlete": {"id": "3139477", "displayName": "Patrick Mahomes"}}))

    athlete = asyncio.run(client.athletes.get(3139477))

    assert athlete.athlete.display_name == "Patrick Mahomes"
    assert str(calls[0].url) == "https://site.web.api.espn.com/apis/common/v3/sports/football/nfl/athletes/3139477"


def test_athlete_overview_and_gamelog():
    stub = StubRequester({"news": [{"headline": "Big game"}], "labels": ["CMP", "YDS"]})
    athletes = AthletesEndpoint(stub)

    overview = asyncio.run(athletes.get_overview("3139477"))
    gamelog = asyncio.run(athletes.get_gamelog("3139477", season=2024))

    assert overview.news[0].headline == "Big game"
    assert gamelog.labels == ["CMP", "YDS"]
    assert stub.calls[1] == (Domain.WEB, "/sports/football/nfl/athletes/3139477/gamelog", {"season": 2024})


def test_event_summary(make_client):
    client, calls = make_client(json_handler({"header": {"id": "401547417"}, "boxscore": {}}))

    summary = asyncio.run(client.events.get_summary(401547417, league="nba"))

    assert summary.header == {"id": "401547417"}
    assert calls[0].url.path == "/apis/site/v2/sports/basketball/nba/summary"
    assert dict(calls[0].url.params) == {"event": "401547417"}


def test_standings_use_site_v2(make_client):
    client, calls = make_client(json_handler({"name": "National Hockey League", "children": [{"name": "Eastern"}]}))

    standings = asyncio.run(client.standings.get("nhl", season=2025))

    assert standings.children[0]["name"] == "Eastern"
    assert str(calls[0].url) == "https://site.api.espn.com/apis/v2/sports/hockey/nhl/standings?season=2025"


def test_soccer_codes_and_unknown_leagues():
    stub = StubRequester({})
    news = NewsEndpoint(stub)

    asyncio.run(news.get_news("eng.2"))
    assert stub.calls[0][1] == "/sports/soccer/eng.2/news"

    with pytest.raises(ESPNConfigurationError):
        asyncio.run(news.get_news("quidditch"))
