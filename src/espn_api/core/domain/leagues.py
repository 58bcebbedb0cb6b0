"""League keys and their ESPN `{sport}/{league}` path segments."""

from __future__ import annotations

from espn_api.core.errors import ESPNConfigurationError

LEAGUES: dict[str, tuple[str, str]] = {
    # US major leagues
    "nfl": ("football", "nfl"),
    "nba": ("basketball", "nba"),
    "mlb": ("baseball", "mlb"),
    "nhl": ("hockey", "nhl"),
    "wnba": ("basketball", "wnba"),
    "mls": ("soccer", "usa.1"),
    # College
    "college-football": ("football", "college-football"),
    "mens-college-basketball": ("basketball", "mens-college-basketball"),
    "womens-college-basketball": ("basketball", "womens-college-basketball"),
    "college-baseball": ("baseball", "college-baseball"),
    "mens-college-hockey": ("hockey", "mens-college-hockey"),
    # Soccer
    "epl": ("soccer", "eng.1"),
    "laliga": ("soccer", "esp.1"),
    "bundesliga": ("soccer", "ger.1"),
    "serie-a": ("soccer", "ita.1"),
    "ligue-1": ("soccer", "fra.1"),
    "ucl": ("soccer", "uefa.champions"),
    # Other
    "ufc": ("mma", "ufc"),
    "pga": ("golf", "pga"),
    "f1": ("racing", "f1"),
    "atp": ("tennis", "atp"),
    "wta": ("tennis", "wta"),
}


def sport_and_league(league: str) -> tuple[str, str]:
    """Resolve a league key to its `(sport, league)` path segments.

    Unknown keys containing a dot are ESPN soccer codes (e.g. `eng.2`).
    """

    key = league.strip().lower()
    if key in LEAGUES:
        return LEAGUES[key]
    if "." in key:
        return ("soccer", key)
    raise ESPNConfigurationError(f"unknown league: {league!r}")


def league_path(league: str) -> str:
    sport, slug = sport_and_league(league)
    return f"/sports/{sport}/{slug}"
