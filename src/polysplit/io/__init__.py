"""Polygon I/O layer for polysplit.

This module handles reading and writing polygons as well-known text
(WKT) using shapely.

Key responsibilities:
- Parse WKT text and files into shapely polygons
- Reject geometries other than a single polygon
- Format parts as WKT, one polygon per line

Key functions:
- read_polygon / load_polygon: Parse WKT text or a WKT file
- format_polygon / write_parts: Render and save split results
"""

from polysplit.io.reader import load_polygon, read_polygon
from polysplit.io.writer import format_polygon, write_parts

__all__ = [
    "format_polygon",
    "load_polygon",
    "read_polygon",
    "write_parts",
]
