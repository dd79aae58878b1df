"""
Info command - display decoded pattern information.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from splicedrum.formats.splice.reader import SpliceReader
from splicedrum.models.pattern import Pattern
from splicedrum.utils.validation import FormatError
from cli.display.tables import display_pattern_info

console = Console()
app = typer.Typer()


def load_pattern(file: Path) -> Pattern:
    """Decode file or exit with an error message."""
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        return SpliceReader.read(file)
    except FormatError as e:
        console.print(f"[red]Error: {escape(e.describe())}[/red]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error: Cannot read {file}: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def info(
    file: Path = typer.Argument(..., help="Pattern file to decode (.splice)"),
    table: bool = typer.Option(False, "--table", "-t", help="Show Rich panel and track table"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    Display pattern file information.

    By default prints the classic text rendering:

        Saved with HW Version: 0.808-alpha
        Tempo: 120
        (0) kick	|x---|x---|x---|x---|

    Examples:

        splicedrum info pattern_1.splice
        splicedrum info pattern_1.splice --table
        splicedrum info pattern_1.splice --json
    """
    pattern = load_pattern(file)

    if json_output:
        _output_json(pattern)
    elif table:
        display_pattern_info(pattern, str(file))
    else:
        typer.echo(str(pattern), nl=False)


def _output_json(pattern: Pattern) -> None:
    """Output pattern as JSON."""
    import json

    typer.echo(json.dumps(pattern.to_dict(), indent=2))


if __name__ == "__main__":
    app()
