"""
Hex dump display utilities.
"""

from typing import List, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.markup import escape

from splicedrum.formats.splice.binary_parser import Region

console = Console()

REGION_COLORS = {
    "MARKER": "bright_blue",
    "RESERVED": "dim",
    "LENGTH": "cyan",
    "VERSION": "green",
    "TEMPO": "yellow",
}
TRACK_COLOR = "magenta"


def hex_lines(data: bytes, start_offset: int = 0, bytes_per_line: int = 16) -> List[str]:
    """Format bytes as hex dump lines with an ASCII column."""
    lines = []

    for offset in range(0, len(data), bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]

        hex_parts = []
        for i, b in enumerate(chunk):
            if i == 8:
                hex_parts.append(" ")  # Extra space at midpoint
            hex_parts.append(f"{b:02X}")
        hex_str = " ".join(hex_parts)

        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)

        addr = start_offset + offset
        lines.append(
            f"[dim]{addr:04X}[/dim]  {hex_str:<{bytes_per_line * 3 + 2}}  [cyan]{escape(ascii_str)}[/cyan]"
        )

    return lines


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
    max_lines: int = 32,
) -> None:
    """Display formatted hex dump with Rich."""
    end = min(len(data), max_lines * bytes_per_line)
    lines = hex_lines(data[:end], start_offset, bytes_per_line)

    if len(data) > end:
        remaining = len(data) - end
        lines.append(f"[dim]... {remaining} more bytes ...[/dim]")

    console.print(Panel("\n".join(lines), title=title, border_style="blue", expand=False))


def display_region_dump(data: bytes, regions: Sequence[Region], bytes_per_line: int = 16) -> None:
    """
    Display each decoded region as its own labelled hex block.

    Bytes not covered by any region (after the last one) are shown as
    unparsed or, past the declared length, as trailing data.
    """
    for region in regions:
        color = REGION_COLORS.get(region.name, TRACK_COLOR)
        console.print(
            f"[{color}]{region.name:10s}[/{color}] "
            f"[dim]0x{region.start:02X}-0x{region.end - 1:02X} ({region.size} bytes)[/dim] "
            f"{escape(region.description)}"
        )
        for line in hex_lines(data[region.start : region.end], region.start, bytes_per_line):
            console.print(f"  {line}")

    covered = regions[-1].end if regions else 0
    if covered < len(data):
        console.print(f"[red]{'REST':10s}[/red] [dim]0x{covered:02X}-0x{len(data) - 1:02X}[/dim]")
        for line in hex_lines(data[covered:], covered, bytes_per_line):
            console.print(f"  {line}")
