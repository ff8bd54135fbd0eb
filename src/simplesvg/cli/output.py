"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections import Counter

from rich.console import Console
from rich.table import Table
from rich.text import Text

from simplesvg.domain.paint import PALETTE, NamedColor

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]simplesvg[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_info(scene_path: str, shape_count: int, origin: str, scale: float) -> None:
    """Print scene information.

    Args:
        scene_path: Path to the scene file
        shape_count: Number of shapes in the scene
        origin: Name of the layout origin corner
        scale: Layout scale factor
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(scene_path)
    console.print(line)
    console.print(f"  {shape_count} shapes {SYM_DOT} origin {origin} {SYM_DOT} scale {scale:g}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def _format_kinds(shapes_by_kind: Counter[str]) -> str:
    return f" {SYM_DOT} ".join(f"{count} {kind}" for kind, count in sorted(shapes_by_kind.items()))


def print_success(
    output_path: str,
    size_bytes: int,
    total_time_s: float,
    shapes_by_kind: Counter[str],
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        size_bytes: Size of the written file
        total_time_s: Total render time in seconds
        shapes_by_kind: Number of shapes rendered per kind
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({size_bytes:,} B)")
    console.print(line)

    if shapes_by_kind:
        console.print(f"  {_format_kinds(shapes_by_kind)}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_palette() -> None:
    """Print the named color palette as a table."""
    table = Table(title="Named colors")
    table.add_column("Name")
    table.add_column("SVG value")
    table.add_column("Swatch")

    for color in NamedColor:
        rgb = PALETTE.get(color)
        if rgb is None:
            table.add_row(color.name.lower(), "transparent", "")
            continue
        hex_value = "#{:02x}{:02x}{:02x}".format(*rgb)
        table.add_row(
            color.name.lower(),
            "rgb({},{},{})".format(*rgb),
            Text("      ", style=f"on {hex_value}"),
        )

    console.print(table)
