"""`espn-api` command line.

Thin layer over `ESPNClient`: parse options, run one request, render the
result with rich. ESPN errors end the command with exit code 1.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, List, Optional

import typer
from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console
from rich.markup import escape

from espn_api.adapters.json_exporter import export_payload_json
from espn_api.cli import doctor
from espn_api.cli.ui_components import build_news_table, build_scoreboard_table, format_error, print_banner
from espn_api.client import ESPNClient
from espn_api.core.domain.api_domain import Domain
from espn_api.core.errors import ESPNError

app = typer.Typer(no_args_is_help=True, help="Query ESPN's public endpoints from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request (DEBUG)."),
    banner: bool = typer.Option(False, "--banner", help="Print the banner before the command."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if banner:
        print_banner(_console)


def _run(coro: Awaitable[Any]) -> Any:
    try:
        return asyncio.run(coro)
    except ESPNError as exc:
        _console.print(format_error(exc))
        raise typer.Exit(code=1) from None
    except ValidationError as exc:
        errors = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        _console.print(f"[red]Invalid option:[/red] {escape(errors)}")
        raise typer.Exit(code=2) from None


def _make_client() -> ESPNClient:
    """Client from `ESPN_API_*` settings; bad configuration ends the command."""

    try:
        return ESPNClient()
    except (ValidationError, SettingsError) as exc:
        _console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from None
    except ESPNError as exc:
        _console.print(format_error(exc))
        raise typer.Exit(code=1) from None


def _parse_params(values: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for raw in values:
        if "=" not in raw:
            raise typer.BadParameter(f"expected key=value, got {raw!r}", param_hint="--param")
        key, value = raw.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"empty key in {raw!r}", param_hint="--param")
        params[key] = value.strip()
    return params


def _emit(payload: Any, output: Optional[Path]) -> None:
    if output is not None:
        path = export_payload_json(payload=payload, output_path=output)
        _console.print(f"[green]Saved:[/green] {path}")
    else:
        _console.print_json(data=payload)


@app.command()
def get(
    domain: Domain = typer.Argument(..., help="ESPN API family."),
    path: str = typer.Argument(..., help="Path appended to the domain base URL, e.g. /sports/football/nfl/scoreboard."),
    param: Optional[List[str]] = typer.Option(None, "--param", "-p", help="Query parameter as key=value (repeatable)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
) -> None:
    """Raw GET against any domain/path."""

    params = _parse_params(param or [])
    client = _make_client()
    payload = _run(client.request(domain, path, params))
    _emit(payload, output)


@app.command()
def news(
    league: Optional[str] = typer.Option(None, "--league", "-l", help="League key (nfl, nba, epl, ...)."),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, max=1000),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
) -> None:
    """Latest news for a league."""

    client = _make_client()
    result = _run(client.news.get_news(league, limit=limit))
    if output is not None:
        _emit(result, output)
        return
    _console.print(build_news_table(result))


@app.command()
def scoreboard(
    league: Optional[str] = typer.Option(None, "--league", "-l", help="League key (nfl, nba, epl, ...)."),
    dates: Optional[str] = typer.Option(None, "--dates", help="YYYYMMDD or YYYYMMDD-YYYYMMDD."),
    week: Optional[int] = typer.Option(None, "--week", min=1, max=25),
    seasontype: Optional[int] = typer.Option(None, "--seasontype", min=1, max=4),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
) -> None:
    """Games for a league (current day by default)."""

    client = _make_client()
    result = _run(client.scoreboard.get(league, dates=dates, week=week, seasontype=seasontype))
    if output is not None:
        _emit(result, output)
        return
    _console.print(build_scoreboard_table(result))


def run() -> None:
    app()
