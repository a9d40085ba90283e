"""
Main CLI application using Typer.

Command groups:
- dataset: convert a schedule sheet into a guide document, check a document
- guide: render the day x time grid of a guide document for one selection
"""

from __future__ import annotations

import typer

from ..infra.logging import configure_logging
from .commands import dataset, guide

app = typer.Typer(help="TV guide dataset and grid operator CLI")

app.add_typer(
    dataset.app,
    name="dataset",
    help="Build and check persisted guide documents",
)
app.add_typer(
    guide.app,
    name="guide",
    help="Query the day x time grid of a guide document",
)


@app.callback()
def main(
    ctx: typer.Context,
    json: bool = typer.Option(False, "--json", help="Output in JSON format"),
    log_level: str = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """tvguide - regional program guide builder."""
    configure_logging(level=log_level)
    # Store JSON flag in context for subcommands to use
    ctx.ensure_object(dict)
    ctx.obj["json"] = json


def cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
