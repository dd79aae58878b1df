"""
splicedrum - Decoder for drum machine .splice pattern files.

A CLI tool for decoding and inspecting step-sequencer patterns.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from splicedrum import __version__
from cli.commands.info import info
from cli.commands.validate import validate
from cli.commands.dump import dump
from cli.commands.tracks import tracks

console = Console()

# Main app
app = typer.Typer(
    name="splicedrum",
    help="Decode and inspect drum machine .splice pattern files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="validate")(validate)
app.command(name="dump")(dump)
app.command(name="tracks")(tracks)


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]splicedrum[/bold] version {__version__}")
    console.print("[dim]Decoder for drum machine .splice pattern files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each decode step"),
) -> None:
    """
    splicedrum - Decode drum machine pattern files.

    [bold]Quick Start:[/bold]

        splicedrum info pattern_1.splice          # Classic text rendering
        splicedrum info pattern_1.splice --table  # Panel and track table

    [bold]Analysis Commands:[/bold]

        splicedrum tracks pattern_1.splice    # Step grid per track
        splicedrum dump pattern_1.splice      # Annotated hex dump
        splicedrum validate pattern_1.splice  # Check file structure

    Use --help with any command for more details.
    """
    configure_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
