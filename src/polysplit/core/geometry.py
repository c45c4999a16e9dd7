"""Geometric primitives for the cut search.

This module provides core mathematical utilities for:
- Tolerant floating point comparison
- Intersection of lines extended to infinity
- Projection of a vertex onto an opposing edge
- Point-on-segment tests
- Proper intersection of a cut line with a polygon ring
- Ring decomposition into directed segments

All functions are pure and stateless. Polygon-level predicates are delegated
to shapely.
"""

from collections.abc import Sequence

import shapely
from shapely.geometry import LineString, Point, Polygon

from polysplit.domain import Coordinate, Segment

# Single tolerance used for every length and area comparison
EPSILON = 1e-7


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Check whether two values differ by less than epsilon.

    Examples:
        >>> approx_equal(1.0, 1.0 + 1e-9)
        True
        >>> approx_equal(1.0, 1.001)
        False
    """
    return abs(a - b) < epsilon


def areas_match(actual: float, expected: float) -> bool:
    """Compare two areas with EPSILON scaled to the expected magnitude."""
    return approx_equal(actual, expected, EPSILON * max(1.0, abs(expected)))


def _det(a: float, b: float, c: float, d: float) -> float:
    return a * d - b * c


def intersect_infinite_lines(line_a: Segment, line_b: Segment) -> Coordinate | None:
    """Find where two lines cross when both are extended to infinity.

    Args:
        line_a: Segment defining the first line
        line_b: Segment defining the second line

    Returns:
        Intersection coordinate, or None if the lines are parallel or
        coincident (the direction determinant is exactly zero)

    Examples:
        >>> a = Segment.from_coords(0, 10, 1, 9)
        >>> b = Segment.from_coords(0, 0, 100, 0)
        >>> intersect_infinite_lines(a, b)
        Coordinate(x=10.0, y=0.0)
    """
    x1, y1 = line_a.p0.x, line_a.p0.y
    x2, y2 = line_a.p1.x, line_a.p1.y
    x3, y3 = line_b.p0.x, line_b.p0.y
    x4, y4 = line_b.p1.x, line_b.p1.y

    dx_a = x1 - x2
    dy_a = y1 - y2
    dx_b = x3 - x4
    dy_b = y3 - y4

    denom = _det(dx_a, dy_a, dx_b, dy_b)
    if denom == 0:
        return None

    det_a = _det(x1, y1, x2, y2)
    det_b = _det(x3, y3, x4, y4)

    x = _det(det_a, dx_a, det_b, dx_b) / denom
    y = _det(det_a, dy_a, det_b, dy_b) / denom
    return Coordinate(float(x), float(y))


def project_point(
    vertex: Coordinate,
    opposing_edge: Segment,
    intersection: Coordinate | None,
) -> Coordinate | None:
    """Project a vertex onto the opposing edge of an edge pair.

    With an intersection point, the projection runs perpendicular to the
    bisector of the angle between the two lines, so it lies on the opposing
    line at the same distance from the intersection as the vertex. Without
    one (parallel lines), the projection is perpendicular to the opposing
    edge.

    Args:
        vertex: Vertex to project
        opposing_edge: Edge to project onto
        intersection: Intersection of the two edges' infinite lines, if any

    Returns:
        The projected coordinate if it falls strictly inside opposing_edge,
        None otherwise (including when it coincides with an endpoint)

    Examples:
        >>> edge = Segment.from_coords(0, 1, 0, 10)
        >>> project_point(Coordinate(2, 0), edge, Coordinate(0, 0))
        Coordinate(x=0.0, y=2.0)
    """
    if intersection is None:
        foot = opposing_edge.project(vertex)
        return foot if point_on_segment(foot, opposing_edge, inclusive=False) else None

    vertex_distance = vertex.distance(intersection)
    distance0 = intersection.distance(opposing_edge.p0)
    distance1 = intersection.distance(opposing_edge.p1)
    nearest = min(distance0, distance1)
    farthest = max(distance0, distance1)

    # Outside the edge, or on one of its endpoints
    if vertex_distance >= farthest or approx_equal(vertex_distance, farthest):
        return None
    if vertex_distance <= nearest or approx_equal(vertex_distance, nearest):
        return None

    farther_end = opposing_edge.p0 if distance0 > distance1 else opposing_edge.p1
    ray = Segment(intersection, farther_end)
    return ray.point_along(vertex_distance / ray.length)


def point_on_segment(point: Coordinate, segment: Segment, inclusive: bool = True) -> bool:
    """Check if a point lies on a segment.

    Uses a length-sum comparison (distances to both endpoints add up to the
    segment length), falling back to shapely's distance for points the
    length sum misjudges through rounding.

    Args:
        point: Point to test
        segment: Segment to test against
        inclusive: Whether the endpoints count as on the segment

    Returns:
        True if the point is on the segment
    """
    distance0 = point.distance(segment.p0)
    distance1 = point.distance(segment.p1)

    if not inclusive and (distance0 < EPSILON or distance1 < EPSILON):
        return False

    if approx_equal(distance0 + distance1, segment.length):
        return True

    return segment.to_line_string().distance(Point(point.x, point.y)) < EPSILON


def properly_intersects(line: Segment, ring: LineString) -> bool:
    """Check whether a line crosses a polygon ring.

    Touching the ring at one of the line's own endpoints is not a crossing.
    Running along a ring edge is.

    Args:
        line: Candidate line of cut
        ring: Polygon exterior ring

    Returns:
        True if the line meets the ring anywhere except its endpoints
    """
    hits = ring.intersection(line.to_line_string())

    for hit in shapely.get_parts(hits):
        if hit.geom_type == "Point":
            point = Coordinate(hit.x, hit.y)
            if point.distance(line.p0) < EPSILON or point.distance(line.p1) < EPSILON:
                continue
            return True
        if hit.length > EPSILON:
            return True

    return False


def _ring_coords(ring: LineString | Sequence[Coordinate]) -> list[Coordinate]:
    if isinstance(ring, LineString):
        return [Coordinate.from_tuple(c) for c in ring.coords]
    return list(ring)


def ring_to_segments(ring: LineString | Sequence[Coordinate]) -> list[Segment]:
    """Decompose a ring (or line string) into consecutive directed segments.

    Args:
        ring: Closed ring or open line string with n coordinates

    Returns:
        The n - 1 segments in ring order
    """
    coords = _ring_coords(ring)
    return [Segment(coords[i], coords[i + 1]) for i in range(len(coords) - 1)]


def segment_at(
    ring: LineString | Sequence[Coordinate], index: int, reversed: bool = False
) -> Segment:
    """Get a single segment of a ring.

    Args:
        ring: Closed ring or open line string
        index: Index of the segment (segment i joins coordinates i and i + 1)
        reversed: Swap the endpoints of the returned segment

    Returns:
        The requested segment

    Raises:
        IndexError: If index does not address a segment
    """
    coords = _ring_coords(ring)
    if not 0 <= index < len(coords) - 1:
        raise IndexError(f"Segment index {index} out of range")

    segment = Segment(coords[index], coords[index + 1])
    return segment.reversed() if reversed else segment


def contains_part(container: Polygon, part: Polygon) -> bool:
    """Check that part lies inside container.

    Invalid parts (for example self-intersecting quadrilaterals) are never
    contained. Parts sharing boundary with the container are contained;
    parts reaching outside it by any amount are not.

    Args:
        container: Enclosing polygon
        part: Polygon to test

    Returns:
        True if part is inside container
    """
    if not part.is_valid:
        return False
    return container.contains(part)
