"""
Guide CLI commands.

Renders the day x time grid of a guide document as plain text or JSON.
"""

from __future__ import annotations

import json

import typer

from ...adapters.dataset_loader import load_dataset
from ...domain.schemas import GuideRow
from ...infra.exceptions import TvGuideError
from ...runtime.guide import GuideView, build_view, resolve_selection

app = typer.Typer(name="guide", help="Query the day x time grid of a guide document")


def _describe_row(row: GuideRow) -> str:
    parts = [row.title]
    episode_bits = []
    if row.season is not None:
        episode_bits.append(f"S{row.season}")
    if row.episode is not None:
        episode_bits.append(f"E{row.episode}")
    if episode_bits:
        parts.append(" ".join(episode_bits))
    if row.subtitle:
        parts.append(row.subtitle)
    return " | ".join(parts) + f" (until {row.end_time})"


def _render_text(view: GuideView) -> list[str]:
    selection = view.selection
    tz = selection.timezone.value if selection.timezone else "-"
    offered = ", ".join(code.value for code in view.timezones) or "-"
    lines = [f"Region: {selection.region or '-'}  Timezone: {tz}  (available: {offered})"]
    if view.grid.is_empty:
        lines.append("Nothing scheduled")
        return lines
    for day in view.grid.days:
        marker = "  [today]" if view.is_today(day) else ""
        lines.append("")
        lines.append(f"{day}{marker}")
        for time in view.grid.times:
            for row in view.grid.cell(day, time):
                lines.append(f"  {time:>5}  {_describe_row(row)}")
    return lines


@app.command("show")
def show_cmd(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Guide document: path, URL or raw JSON"),
    region: str = typer.Option(None, "--region", "-r", help="Active region (default: first declared)"),
    timezone: str = typer.Option(None, "--timezone", "-t", help="Active timezone: WAT, CAT or EST"),
    today: str = typer.Option(None, "--today", help='Today label override, e.g. "Monday, October 6, 2025"'),
    highlight_today: bool = typer.Option(True, "--highlight-today/--no-highlight-today", help="Mark today's column"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """Show the program grid for one region and timezone."""
    try:
        dataset = load_dataset(source)
        selection = resolve_selection(dataset, region=region, timezone=timezone)
        view = build_view(
            dataset,
            selection,
            today_override=today,
            highlight_today=highlight_today,
        )
    except TvGuideError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if json_output or (ctx.obj or {}).get("json"):
        typer.echo(json.dumps(view.to_dict(), indent=2))
        return

    for line in _render_text(view):
        typer.echo(line)
