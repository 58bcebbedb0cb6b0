"""Shared plumbing for the endpoint accessors."""

from __future__ import annotations

from espn_api.core.domain.leagues import league_path
from espn_api.core.interfaces.requester import Requester


class Endpoint:
    """Holds the back-reference to the façade and the default league.

    Accessors keep no other state: every operation is one `request` call.
    """

    def __init__(self, requester: Requester, *, default_league: str = "nfl") -> None:
        self._requester = requester
        self._default_league = default_league

    @property
    def requester(self) -> Requester:
        return self._requester

    def _league_path(self, league: str | None) -> str:
        """`/sports/{sport}/{league}` for `league` or the default league."""

        return league_path(league or self._default_league)
