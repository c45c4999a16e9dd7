"""Core splitting algorithms for polysplit.

This module contains the core algorithms for:

- Geometry primitives (line intersection, vertex projection, ring walks)
- Polygon construction and slicing along chords
- Edge-pair decomposition into triangle / trapezoid / triangle regions
- Greedy selection of the shortest equal-area cut

The geometry and decomposition functions are:
- Stateless (safe for concurrent evaluation of edge pairs)
- Pure (no side effects, no logging)

Key functions:
- intersect_infinite_lines: Intersection of two extended segments
- project_point: Projection of a vertex onto an opposing edge
- slice_ring: Polygon between two points on a ring
- enumerate_edge_pairs: All non-adjacent edge pairs of a ring

Key classes:
- EdgePair: Two ring edges with their projected vertices
- EdgePairSubpolygons: Decomposition and exact-area cut search
- GreedyPolygonSplitter: Orchestrates the greedy split
"""

from polysplit.core.edge_pair import EdgePair, EdgePairSubpolygons
from polysplit.core.geometry import (
    EPSILON,
    approx_equal,
    areas_match,
    contains_part,
    intersect_infinite_lines,
    point_on_segment,
    project_point,
    properly_intersects,
    ring_to_segments,
    segment_at,
)
from polysplit.core.polygons import (
    make_polygon,
    make_triangle,
    remove_spikes,
    ring_coordinates,
    slice_ring,
    subpolygon_between_vertices,
)
from polysplit.core.splitter import GreedyPolygonSplitter, enumerate_edge_pairs, split

__all__ = [
    "EPSILON",
    # Edge pair classes
    "EdgePair",
    "EdgePairSubpolygons",
    # Splitter
    "GreedyPolygonSplitter",
    # Geometry functions
    "approx_equal",
    "areas_match",
    "contains_part",
    "enumerate_edge_pairs",
    "intersect_infinite_lines",
    # Polygon functions
    "make_polygon",
    "make_triangle",
    "point_on_segment",
    "project_point",
    "properly_intersects",
    "remove_spikes",
    "ring_coordinates",
    "ring_to_segments",
    "segment_at",
    "slice_ring",
    "split",
    "subpolygon_between_vertices",
]
