"""
Dataset CLI commands.

Provides convert (schedule sheet -> guide document) and check (load and
summarize a guide document).
"""

from __future__ import annotations

import json
import warnings

import typer

from ...adapters.dataset_loader import load_dataset
from ...infra.exceptions import TvGuideError, UnknownRegionWarning
from ...infra.logging import get_logger
from ...runtime.selection import available_timezones
from ...usecases.dataset_build import convert_sheet, find_unknown_regions

app = typer.Typer(name="dataset", help="Build and check persisted guide documents")


def _wants_json(ctx: typer.Context, json_output: bool) -> bool:
    return json_output or bool((ctx.obj or {}).get("json"))


@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    excel: str = typer.Option(..., "--excel", help="Path to the schedule sheet (.xlsx or .csv)"),
    channel_id: str = typer.Option(..., "--channelId", help="Channel identifier, e.g. zee-world"),
    regions: str = typer.Option(..., "--regions", help='Comma-separated regions, e.g. "South Africa,Rest Of Africa"'),
    tz_map: str = typer.Option(..., "--tz-map", help='JSON object, e.g. {"South Africa":["CAT"]}'),
    out: str = typer.Option(..., "--out", help="Output JSON path (parent directories are created)"),
    json_output: bool = typer.Option(False, "--json", help="Output summary in JSON format"),
) -> None:
    """Convert a schedule sheet into a validated guide document.

    Examples:
        tvguide dataset convert --excel guide.xlsx --channelId zee-world \\
            --regions "South Africa,Rest Of Africa" \\
            --tz-map '{"South Africa":["CAT"],"Rest Of Africa":["WAT","CAT","EST"]}' \\
            --out data/zee-world.json
    """
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", UnknownRegionWarning)
            summary = convert_sheet(
                excel,
                channel_id=channel_id,
                regions=regions,
                timezone_map=tz_map,
                out=out,
            )
    except TvGuideError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    get_logger(__name__).info("convert_finished", out=summary.out, rows=summary.row_count)

    for warning in caught:
        if issubclass(warning.category, UnknownRegionWarning):
            typer.echo(f"Warning: {warning.message}", err=True)

    if _wants_json(ctx, json_output):
        typer.echo(json.dumps({"status": "ok", "summary": summary.to_dict()}, indent=2))
    else:
        for line in summary.lines():
            typer.echo(line)


@app.command("check")
def check_cmd(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Guide document: path, URL or raw JSON"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """Load a guide document and report its regions and timezones."""
    try:
        dataset = load_dataset(source)
    except TvGuideError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    offered = {
        region: [code.value for code in available_timezones(dataset, region)]
        for region in dataset.regions
    }
    unknown = find_unknown_regions(dataset.rows, dataset.regions)

    if _wants_json(ctx, json_output):
        payload = {
            "status": "ok",
            "channelId": dataset.channel_id,
            "rows": len(dataset.rows),
            "regions": dataset.regions,
            "timezones": offered,
            "unknownRegions": unknown,
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(f"Channel: {dataset.channel_id}")
    typer.echo(f"Rows: {len(dataset.rows)}")
    for region in dataset.regions:
        typer.echo(f"  {region}: {', '.join(offered[region])}")
    for region in unknown:
        typer.echo(f"Warning: rows reference undeclared region '{region}'", err=True)
