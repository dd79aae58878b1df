"""
Validate command - check splice file integrity and structure.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape

from splicedrum.formats.splice.binary_parser import SpliceParser
from splicedrum.formats.splice.reader import SpliceReader
from splicedrum.utils.validation import FormatError

console = Console()
app = typer.Typer()


@dataclass
class ValidationResult:
    """Result of validating a splice file."""

    filepath: str
    valid: bool
    file_size: int
    declared_length: Optional[int] = None
    track_count: int = 0
    error: Optional[FormatError] = None
    reason: Optional[str] = None

    @property
    def trailing_bytes(self) -> int:
        if self.declared_length is None:
            return 0
        return max(0, self.file_size - SpliceParser.PROLOGUE_SIZE - self.declared_length)


def validate_file(filepath: Path, strict: bool = False) -> ValidationResult:
    """
    Decode filepath and collect the outcome.

    With strict, bytes after the declared length make the file invalid.
    OSError from reading the file propagates.
    """
    info = SpliceReader.get_file_info(filepath)
    result = ValidationResult(
        filepath=str(filepath),
        valid=False,
        file_size=info["size"],
        declared_length=info.get("declared_length"),
    )

    reader = SpliceReader()
    try:
        pattern = reader.parse_file(filepath)
    except FormatError as e:
        result.error = e
        return result

    result.track_count = len(pattern.tracks)
    if strict and result.trailing_bytes:
        result.reason = f"{result.trailing_bytes} trailing bytes after declared length (--strict)"
        return result

    result.valid = True
    return result


def display_validation(result: ValidationResult) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    lines = [
        f"[bold]File:[/bold] {result.filepath}",
        f"[bold]Status:[/bold] {status}",
        f"[bold]Size:[/bold] {result.file_size} bytes",
    ]
    if result.declared_length is not None:
        lines.append(f"[bold]Declared Length:[/bold] {result.declared_length} bytes")

    if result.error is not None:
        lines.append("")
        lines.append(f"[bold]Phase:[/bold] {result.error.phase}")
        lines.append(f"[bold]Offset:[/bold] 0x{result.error.offset:02X}")
        lines.append(f"[red]{escape(str(result.error))}[/red]")
        if result.error.detail:
            lines.append(f"[dim]{escape(result.error.detail)}[/dim]")
    else:
        lines.append(f"[bold]Tracks:[/bold] {result.track_count}")
        if result.reason:
            lines.append(f"[red]{escape(result.reason)}[/red]")
        elif result.trailing_bytes:
            lines.append(f"[yellow]{result.trailing_bytes} trailing bytes ignored[/yellow]")

    console.print(
        Panel("\n".join(lines), title="[bold]Validation Result[/bold]", border_style=border)
    )


@app.command()
def validate(
    file: Path = typer.Argument(..., help="Splice file to validate"),
    strict: bool = typer.Option(
        False, "--strict", "-s", help="Treat trailing bytes after the declared length as invalid"
    ),
) -> None:
    """
    Validate a splice pattern file.

    Checks for:

    - SPLICE marker
    - Declared length large enough for the header
    - Complete header
    - Complete track records up to the declared length

    Examples:

        splicedrum validate pattern_1.splice

        splicedrum validate pattern_1.splice --strict
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        result = validate_file(file, strict=strict)
    except OSError as e:
        console.print(f"[red]Error: Cannot read {file}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    display_validation(result)

    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
