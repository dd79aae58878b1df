"""
Tracks command - per-track step display.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from splicedrum.models.pattern import Pattern
from cli.commands.info import load_pattern
from cli.display.formatters import format_tempo
from cli.display.tables import build_tracks_table

console = Console()
app = typer.Typer()


@app.command()
def tracks(
    file: Path = typer.Argument(..., help="Pattern file to analyze (.splice)"),
    track_id: Optional[int] = typer.Option(None, "--id", "-i", help="Show only this track id"),
) -> None:
    """
    Show every track with its step grid and number of active steps.

    Examples:

        splicedrum tracks pattern_1.splice

        splicedrum tracks pattern_1.splice --id 1
    """
    pattern = load_pattern(file)

    if track_id is not None:
        track = pattern.get_track(track_id)
        if track is None:
            console.print(f"[red]Error: No track with id {track_id}[/red]")
            raise typer.Exit(1)
        pattern = Pattern(header=pattern.header, tracks=(track,))

    console.print(f"[bold]Tempo:[/bold] {format_tempo(pattern.tempo)}")
    console.print(build_tracks_table(pattern, show_density=True))


if __name__ == "__main__":
    app()
