"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from shapely.geometry import Polygon

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
    console.print(f"\n[bold]Polysplit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_polygon_info(source: str, vertex_count: int, area: float) -> None:
    """Print input polygon information.

    Args:
        source: File path or "<wkt>" for inline input
        vertex_count: Number of distinct ring vertices
        area: Polygon area
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(f"  {vertex_count} vertices {SYM_DOT} area {area:,.4f}")


def print_parts_table(parts: Sequence[Polygon], total_area: float) -> None:
    """Print a table of the split parts.

    Args:
        parts: Parts in split order
        total_area: Area of the original polygon
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Share", justify="right")
    table.add_column("Vertices", justify="right")

    for index, part in enumerate(parts, start=1):
        share = part.area / total_area * 100 if total_area else 0.0
        table.add_row(
            str(index),
            f"{part.area:,.4f}",
            f"{share:.2f}%",
            str(len(part.exterior.coords) - 1),
        )

    console.print(table)


def print_split_stats(
    iterations: int, edge_pairs: int, candidates: int, cut_lengths: Sequence[float]
) -> None:
    """Print cut search statistics (verbose mode).

    Args:
        iterations: Number of cuts made
        edge_pairs: Edge pairs evaluated over all iterations
        candidates: Candidate cuts found over all iterations
        cut_lengths: Length of each selected cut
    """
    console.print(
        f"  {iterations} cuts {SYM_DOT} {edge_pairs} edge pairs {SYM_DOT} {candidates} candidates"
    )
    if cut_lengths:
        lengths = ", ".join(f"{length:.4f}" for length in cut_lengths)
        console.print(f"  cut lengths: {lengths}")


def print_wkt(lines: Sequence[str]) -> None:
    """Print WKT strings verbatim, one per line."""
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(part_count: int, total_time_s: float, output_path: str | None = None) -> None:
    """Print success message with summary.

    Args:
        part_count: Number of parts produced
        total_time_s: Total split time in seconds
        output_path: Path the parts were written to, if any
    """
    time_str = _format_time(total_time_s)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text(f"  {part_count} parts")
    if output_path is not None:
        line.append(f" {SYM_DOT} ")
        line.append(output_path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}", highlight=False)
    if details:
        console.print(f"  {escape(details)}", highlight=False)
