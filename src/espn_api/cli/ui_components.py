"""Rich UI components for the CLI.

Keeps table/panel layout out of the command functions so commands only
fetch data and hand records over.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from espn_api.core.domain.models import Event, NewsResponse, ScoreboardResponse
from espn_api.core.errors import ESPNAPIError, ESPNError, ESPNRateLimitError


def print_banner(console: Console) -> None:
    title = Text("espn-api", style="bold red")
    subtitle = Text("ESPN public endpoints • news • scores • teams", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="red", padding=(1, 4)))


def build_doctor_table() -> Table:
    table = Table(title="espn-api doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def build_news_table(news: NewsResponse) -> Table:
    table = Table(title=news.header or "News")
    table.add_column("Published", style="cyan", no_wrap=True)
    table.add_column("Headline", style="white")
    table.add_column("Type", style="dim")
    for article in news.articles:
        table.add_row(article.published or "", article.headline or "", article.type or "")
    return table


def _score_line(event: Event) -> str:
    if not event.competitions:
        return ""
    parts = []
    for competitor in event.competitions[0].competitors:
        name = competitor.team.abbreviation if competitor.team and competitor.team.abbreviation else "?"
        parts.append(f"{name} {competitor.score or '-'}")
    return "  ".join(parts)


def _status_detail(event: Event) -> str:
    status = event.status
    if status is None and event.competitions:
        status = event.competitions[0].status
    if status is None or status.type is None:
        return ""
    return status.type.short_detail or status.type.detail or status.type.description or ""


def build_scoreboard_table(scoreboard: ScoreboardResponse) -> Table:
    table = Table(title="Scoreboard")
    table.add_column("Event", style="cyan")
    table.add_column("Score", style="white", no_wrap=True)
    table.add_column("Status", style="yellow")
    for event in scoreboard.events:
        table.add_row(event.short_name or event.name or event.id or "", _score_line(event), _status_detail(event))
    return table


def format_error(exc: ESPNError) -> str:
    """One-line, markup-formatted description of an ESPN error."""

    if isinstance(exc, ESPNRateLimitError):
        hint = f" (retry after {exc.retry_after}s)" if exc.retry_after else ""
        return f"[red]Rate limited[/red] on {escape(exc.endpoint)}{hint}"
    if isinstance(exc, ESPNAPIError):
        return f"[red]Error:[/red] {escape(str(exc))}"
    return f"[red]Configuration error:[/red] {escape(str(exc))}"
