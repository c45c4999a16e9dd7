"""WKT polygon reader.

This module parses polygons from well-known text, either given directly
or stored in a file.
"""

from pathlib import Path

from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import Polygon

from polysplit.exceptions import PolygonReadError


def read_polygon(text: str, source: str = "<text>") -> Polygon:
    """Parse a polygon from WKT.

    Args:
        text: WKT of a single POLYGON
        source: Name of the input, used in error messages

    Returns:
        Parsed polygon

    Raises:
        PolygonReadError: If the text is not valid WKT or not a polygon
    """
    try:
        geometry = wkt.loads(text.strip())
    except ShapelyError as e:
        raise PolygonReadError(source, str(e)) from e

    if not isinstance(geometry, Polygon):
        raise PolygonReadError(source, f"expected POLYGON, got {geometry.geom_type.upper()}")

    return geometry


def load_polygon(path: Path) -> Polygon:
    """Load a polygon from a WKT file.

    Raises:
        PolygonReadError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PolygonReadError(str(path), str(e)) from e

    return read_polygon(text, source=str(path))
