"""
Rich table displays for pattern information.
"""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

from splicedrum.models.pattern import Pattern
from cli.display.formatters import format_tempo, format_version, step_markup, value_bar


console = Console()


def display_pattern_info(pattern: Pattern, filepath: str = "") -> None:
    """Display decoded pattern with Rich formatting."""

    header_content = f"""[bold]File:[/bold] {filepath or "N/A"}
[bold]HW Version:[/bold] {format_version(escape(pattern.version))}
[bold]Tempo:[/bold] {format_tempo(pattern.tempo)}
[bold]Tracks:[/bold] {len(pattern.tracks)}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]Splice Pattern Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    if pattern.tracks:
        console.print(build_tracks_table(pattern))
    else:
        console.print("[dim]No tracks[/dim]")


def build_tracks_table(pattern: Pattern, show_density: bool = False) -> Table:
    """Build the per-track table: id, name and step grid."""
    table = Table(title="Tracks", box=box.ROUNDED, show_header=True, header_style="bold green")
    table.add_column("ID", style="dim", justify="right", width=4)
    table.add_column("Name", style="cyan")
    table.add_column("Steps", no_wrap=True)
    if show_density:
        table.add_column("Active", no_wrap=True)

    for track in pattern.tracks:
        row = [str(track.id), escape(track.name), step_markup(track.steps)]
        if show_density:
            row.append(value_bar(track.active_steps))
        table.add_row(*row)

    return table
