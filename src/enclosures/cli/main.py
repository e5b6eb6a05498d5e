"""Typer CLI for enclosure panel net generation."""

import logging
from typing import Annotated

import typer

from enclosures.cli.commands import (
    generate_command,
    summary_command,
    validate_command,
)
from enclosures.domain import ACCESSORY_PRESETS

app = typer.Typer(
    name="enclosures",
    help="Generate laser-cut finger-jointed enclosure panels.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Generate laser-cut finger-jointed enclosure panels."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


app.command(name="generate")(generate_command)
app.command(name="summary")(summary_command)
app.command(name="validate")(validate_command)


@app.command()
def presets() -> None:
    """List accessory presets."""
    typer.echo(f"{'Preset':<12} {'Length':<8} {'Height':<8} {'Width':<8} {'TDP (W)'}")
    typer.echo("-" * 46)
    for name, slot in ACCESSORY_PRESETS.items():
        typer.echo(
            f"{name:<12} {slot.length:<8.1f} {slot.height:<8.1f} "
            f"{slot.width:<8.1f} {slot.tdp:.0f}"
        )


if __name__ == "__main__":
    app()
