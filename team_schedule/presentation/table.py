from typing import Mapping, Optional

from rich.console import Console
from rich.table import Table

from team_schedule.models.summary import DateRange, TeamSummary


def format_other(summary: TeamSummary) -> str:
    """Other count with its per-status breakdown, e.g. "3 (In Progress: 2, Pre-Game: 1)"."""
    if not summary.other:
        return "0"
    breakdown = ", ".join(
        f"{status}: {count}" for status, count in sorted(summary.other_statuses.items())
    )
    return f"{summary.other} ({breakdown})"


def build_table(
    summaries: Mapping[str, TeamSummary],
    track_opponents: bool = False,
    date_range: Optional[DateRange] = None,
) -> Table:
    """Builds the report table, one row per team sorted by name."""
    show_other = any(summary.other for summary in summaries.values())

    table = Table(
        title=f"Games {date_range}" if date_range else "Games",
        caption=f"{len(summaries)} teams",
        header_style="bold cyan",
    )
    table.add_column("Team", style="bold")
    for column in ("Total", "Scheduled", "Postponed", "Final"):
        table.add_column(column, justify="right")
    if show_other:
        table.add_column("Other", style="yellow")
    if track_opponents:
        table.add_column("Playing Against", overflow="fold")

    for team in sorted(summaries):
        summary = summaries[team]
        row = [
            summary.team,
            str(summary.total),
            str(summary.scheduled),
            str(summary.postponed),
            str(summary.final),
        ]
        if show_other:
            row.append(format_other(summary))
        if track_opponents:
            row.append(", ".join(summary.opponents))
        table.add_row(*row)

    return table


def render_summaries(
    summaries: Mapping[str, TeamSummary],
    track_opponents: bool = False,
    date_range: Optional[DateRange] = None,
    console: Optional[Console] = None,
) -> None:
    console = console or Console()
    if not summaries:
        console.print("[yellow]No teams matched the requested range.[/yellow]")
        return
    console.print(build_table(summaries, track_opponents, date_range))
