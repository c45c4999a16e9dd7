"""CLI application entry point for polysplit.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from shapely.geometry import Polygon

from polysplit import __version__
from polysplit.cli.output import (
    console,
    print_error,
    print_header,
    print_parts_table,
    print_polygon_info,
    print_split_stats,
    print_step,
    print_success,
    print_wkt,
)
from polysplit.config import LoggingConfig, PolysplitSettings, SplitterConfig
from polysplit.core import GreedyPolygonSplitter
from polysplit.exceptions import (
    PolygonReadError,
    PolygonWriteError,
    PolysplitError,
    SplitConsistencyError,
)
from polysplit.io import format_polygon, load_polygon, read_polygon, write_parts

# Create the Typer app
app = typer.Typer(
    name="polysplit",
    help="Split a polygon into parts of equal area with shortest-first straight cuts.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polysplit[/bold blue] v{__version__}")
        raise typer.Exit()


def _load_source(source: str) -> tuple[Polygon, str]:
    """Load the polygon from a WKT file or an inline WKT string.

    Returns:
        Tuple of (polygon, label for display)
    """
    path = Path(source)
    try:
        is_file = path.is_file()
    except OSError:
        # Long inline WKT can exceed the file name limit
        is_file = False

    if is_file:
        return load_polygon(path), str(path)
    if "(" in source:
        return read_polygon(source, source="<wkt>"), "<wkt>"
    raise PolygonReadError(source, "no such file, and not WKT text")


@app.command()
def split(
    source: Annotated[
        str,
        typer.Argument(
            help="WKT file containing one POLYGON, or the POLYGON WKT itself",
            show_default=False,
        ),
    ],
    parts: Annotated[
        int,
        typer.Option(
            "--parts",
            "-n",
            help="Number of equal-area parts (at least 2)",
        ),
    ] = 2,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the parts as WKT, one per line (default: print them)",
        ),
    ] = None,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-j",
            help="Threads evaluating edge pairs",
            min=1,
            max=64,
        ),
    ] = 1,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            "-p",
            help="Decimal places in WKT output (-1 for full precision)",
            min=-1,
        ),
    ] = -1,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only the WKT of the parts",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Split a polygon into parts of equal area.

    Each cut is the shortest straight line that separates exactly one
    share of the area from what remains.

    Example:
        polysplit "POLYGON ((0 0, 100 0, 90 50, 10 50, 0 0))" --parts 2
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = PolysplitSettings(
        splitter=SplitterConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    try:
        if not quiet:
            print_step("Reading polygon")

        polygon, label = _load_source(source)

        if not quiet:
            print_polygon_info(
                source=label,
                vertex_count=len(polygon.exterior.coords) - 1,
                area=polygon.area,
            )
            print_step(f"Splitting into {parts} parts")

        splitter = GreedyPolygonSplitter(settings)
        result = splitter.split(polygon, parts)
        stats = splitter.stats

        if not quiet:
            print_parts_table(result, polygon.area)
            if verbose:
                print_split_stats(
                    iterations=stats.iterations,
                    edge_pairs=stats.edge_pairs_evaluated,
                    candidates=stats.candidate_cuts,
                    cut_lengths=stats.cut_lengths,
                )

        if output is not None:
            write_parts(result, output, precision)
        else:
            if not quiet:
                print_step("Parts")
            print_wkt([format_polygon(part, precision) for part in result])

        if not quiet:
            print_success(
                part_count=len(result),
                total_time_s=stats.duration_seconds,
                output_path=str(output) if output is not None else None,
            )

    except PolygonReadError as e:
        print_error(f"Could not read polygon: {e.reason}")
        raise typer.Exit(code=1)
    except PolygonWriteError as e:
        print_error(f"Could not write parts: {e.reason}")
        raise typer.Exit(code=1)
    except SplitConsistencyError as e:
        print_error(str(e), details="This is a defect in the splitter, please report it.")
        raise typer.Exit(code=1)
    except PolysplitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
