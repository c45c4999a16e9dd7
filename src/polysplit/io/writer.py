"""WKT writer for split results."""

from collections.abc import Sequence
from pathlib import Path

import shapely
from shapely.geometry import Polygon

from polysplit.exceptions import PolygonWriteError


def format_polygon(polygon: Polygon, precision: int = -1) -> str:
    """Render a polygon as WKT.

    Args:
        polygon: Polygon to render
        precision: Decimal places to round to (-1 keeps full precision)

    Returns:
        WKT string with trailing zeros trimmed
    """
    return shapely.to_wkt(polygon, rounding_precision=precision, trim=True)


def write_parts(parts: Sequence[Polygon], path: Path, precision: int = -1) -> None:
    """Write polygons to a file, one WKT per line.

    Args:
        parts: Polygons to write, in order
        path: Output file path
        precision: Decimal places to round to (-1 keeps full precision)

    Raises:
        PolygonWriteError: If the file cannot be written
    """
    lines = [format_polygon(part, precision) + "\n" for part in parts]
    try:
        path.write_text("".join(lines), encoding="utf-8")
    except OSError as e:
        raise PolygonWriteError(str(path), str(e)) from e
