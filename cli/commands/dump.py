"""
Dump command - annotated hex dump of a splice file.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from splicedrum.formats.splice.binary_parser import SpliceParser
from splicedrum.utils.validation import FormatError
from cli.display.hex_view import REGION_COLORS, TRACK_COLOR, display_hex_dump, display_region_dump

console = Console()
app = typer.Typer()


def create_legend() -> Table:
    """Create a legend table for region colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False)
    table.add_column("Region", width=12)
    table.add_column("Color", width=14)

    for name, color in REGION_COLORS.items():
        table.add_row(f"[{color}]{name}[/{color}]", color)
    table.add_row(f"[{TRACK_COLOR}]TRACK_n[/{TRACK_COLOR}]", TRACK_COLOR)

    return table


@app.command()
def dump(
    file: Path = typer.Argument(..., help="Splice file to dump"),
    width: int = typer.Option(16, "--width", "-w", min=1, help="Bytes per line"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Plain hex dump without decoding"),
) -> None:
    """
    Annotated hex dump of a splice pattern file.

    Decodes the file and prints each region (marker, length, version,
    tempo, every track record) as a labelled hex block. If decoding
    fails, the regions read so far are shown followed by the rest of
    the file and the error.

    Examples:

        splicedrum dump pattern_1.splice

        splicedrum dump pattern_1.splice --raw
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        with open(file, "rb") as f:
            data = f.read()
    except OSError as e:
        console.print(f"[red]Error: Cannot read {file}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if raw:
        display_hex_dump(data, title=str(file), bytes_per_line=width, max_lines=len(data) // width + 1)
        return

    parser = SpliceParser()
    error = None
    try:
        parser.parse_bytes(data)
    except FormatError as e:
        error = e

    if not no_legend:
        console.print(create_legend())
        console.print()

    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n"
            f"[bold]Size:[/bold] {len(data)} bytes\n"
            f"[bold]Regions:[/bold] {len(parser.regions)}",
            title="[bold]Splice Dump[/bold]",
            border_style="blue",
            expand=False,
        )
    )
    display_region_dump(data, parser.regions, bytes_per_line=width)

    if error is not None:
        console.print(f"[red]Error: {escape(error.describe())}[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
