"""Polysplit - Split polygons into parts of equal area.

Polysplit divides a simple polygon (no holes) into N parts of exactly equal
area with straight-line cuts. Each cut is chosen greedily: every pair of
non-adjacent ring edges is examined and the shortest cut isolating one
share of the area is taken, until N parts remain.

Example:
    >>> from shapely import wkt
    >>> from polysplit import split
    >>> parts = split(wkt.loads("POLYGON ((0 0, 100 0, 90 50, 10 50, 0 0))"), 2)
    >>> [round(p.area) for p in parts]
    [2250, 2250]
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from polysplit.core.splitter import GreedyPolygonSplitter, split

__all__ = ["GreedyPolygonSplitter", "__author__", "__version__", "split"]
