"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console
from rich.markup import escape

from espn_api.adapters.http_client import build_async_client
from espn_api.cli.ui_components import build_doctor_table
from espn_api.core.config import ESPNSettings, get_user_env_file
from espn_api.core.domain.api_domain import Domain
from espn_api.core.domain.leagues import sport_and_league
from espn_api.core.errors import ESPNConfigurationError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: ESPNSettings) -> tuple[bool, str]:
    """Any HTTP answer counts as reachable; only transport failures fail."""

    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.RequestError as exc:
        return False, f"{exc.__class__.__name__}: {exc}"


async def _check_domains(settings: ESPNSettings) -> dict[Domain, tuple[bool, str]]:
    base_urls = settings.resolved_base_urls()
    results = await asyncio.gather(*(_check_http(base_urls[domain], settings) for domain in Domain))
    return dict(zip(Domain, results))


@app.command()
def run() -> None:
    """Show the effective configuration and probe every ESPN domain."""

    try:
        settings = ESPNSettings()
    except (ValidationError, SettingsError) as exc:
        _console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    table = build_doctor_table()

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    try:
        sport, league = sport_and_league(settings.default_league)
        table.add_row("Default league", "OK", f"{settings.default_league} -> {sport}/{league}")
    except ESPNConfigurationError as exc:
        table.add_row("Default league", "FAIL", str(exc))

    failures = 0
    for domain, (ok, detail) in asyncio.run(_check_domains(settings)).items():
        overridden = " (override)" if domain in settings.base_urls else ""
        table.add_row(f"Domain {domain.value}", "OK" if ok else "FAIL", f"{detail}{overridden}")
        failures += 0 if ok else 1

    _console.print(table)

    if failures:
        _console.print(
            f"\n[yellow]Note:[/yellow] {failures} domain(s) unreachable. "
            "Check connectivity or the ESPN_API_BASE_URLS override."
        )
        raise typer.Exit(code=1)
