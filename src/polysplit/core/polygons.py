"""Polygon construction and ring slicing.

Builds the triangles, trapezoids and cut-away pieces used by the cut
search. Every polygon is created from its vertices in the order given, so
ring direction is always the caller's.
"""

from shapely.geometry import Polygon

from polysplit.core.geometry import EPSILON, point_on_segment, ring_to_segments
from polysplit.domain import Coordinate
from polysplit.exceptions import DegeneratePolygonError, VertexNotFoundError


def make_polygon(*vertices: Coordinate) -> Polygon:
    """Create a polygon with vertices in the provided order.

    The ring is closed automatically; pass each vertex once.

    Args:
        *vertices: Ring vertices in traversal order

    Returns:
        Closed polygon

    Raises:
        DegeneratePolygonError: If fewer than 3 vertices are given
    """
    if len(vertices) < 3:
        raise DegeneratePolygonError(len(vertices))

    shell = [v.to_tuple() for v in vertices]
    shell.append(shell[0])
    return Polygon(shell)


def make_triangle(v1: Coordinate, v2: Coordinate, v3: Coordinate) -> Polygon:
    """Create a triangle with vertices in the provided order."""
    return make_polygon(v1, v2, v3)


def ring_coordinates(polygon: Polygon) -> list[Coordinate]:
    """Exterior ring of a polygon as coordinates, closing point included."""
    return [Coordinate.from_tuple(c) for c in polygon.exterior.coords]


def subpolygon_between_vertices(
    polygon: Polygon, start_vertex: Coordinate, end_vertex: Coordinate
) -> Polygon:
    """Cut a polygon along the chord between two of its ring vertices.

    Walks the exterior ring forward from start_vertex, collecting vertices
    until end_vertex is reached (wrapping past the closing point if needed),
    and closes the result back to start_vertex.

    Args:
        polygon: Polygon to take the piece from
        start_vertex: Ring vertex where the walk starts
        end_vertex: Ring vertex where the walk ends

    Returns:
        Polygon bounded by the walked ring path and the closing chord

    Raises:
        VertexNotFoundError: If either point is not an exact ring vertex
    """
    ring = ring_coordinates(polygon)
    for vertex in (start_vertex, end_vertex):
        if vertex not in ring:
            raise VertexNotFoundError(vertex.x, vertex.y)

    vertices: list[Coordinate] = []
    started = False
    i = 0
    while i < len(ring):
        coord = ring[i]
        if coord == start_vertex:
            started = True
        if started:
            vertices.append(coord)
            if coord == end_vertex:
                break

        if i == len(ring) - 1:
            # The last coordinate repeats the first, so resume at index 1
            i = 1
        else:
            i += 1

    return make_polygon(*vertices)


def slice_ring(
    polygon: Polygon, start_point: Coordinate, end_point: Coordinate
) -> Polygon:
    """Cut a polygon along the chord between two points on its ring.

    Like subpolygon_between_vertices, but start and end may lie anywhere
    along the ring edges. A start point equal to an edge's trailing endpoint
    is attributed to the next edge.

    Args:
        polygon: Polygon to slice
        start_point: Point on the ring where the walk starts
        end_point: Point on the ring where the walk ends

    Returns:
        Polygon bounded by the walked ring path and the chord back to
        start_point

    Raises:
        DegeneratePolygonError: If the points do not bound a piece of the
            polygon (for example when start_point is not on the ring)
    """
    vertices: list[Coordinate] = []
    started = False
    finished = False

    edges = ring_to_segments(ring_coordinates(polygon))
    for edge in edges:
        if not started and point_on_segment(start_point, edge) and start_point != edge.p1:
            vertices.append(start_point)
            started = True
            continue

        if started:
            vertices.append(edge.p0)
            if point_on_segment(end_point, edge):
                vertices.append(end_point)
                finished = True
                break

    if started and not finished:
        # The piece runs through the ring's first point
        for edge in edges:
            vertices.append(edge.p0)
            if point_on_segment(end_point, edge):
                vertices.append(end_point)
                break

    return make_polygon(*vertices)


def _is_spike(prev: Coordinate, vertex: Coordinate, nxt: Coordinate, tolerance: float) -> bool:
    dx_in, dy_in = vertex.x - prev.x, vertex.y - prev.y
    dx_out, dy_out = nxt.x - vertex.x, nxt.y - vertex.y
    cross = dx_in * dy_out - dy_in * dx_out
    dot = dx_in * dx_out + dy_in * dy_out
    # Zero-area turn that doubles back (or a repeated vertex)
    return abs(cross) / 2 < tolerance and dot <= 0


def remove_spikes(polygon: Polygon, tolerance: float = EPSILON) -> Polygon:
    """Remove zero-width needles from a polygon's exterior ring.

    Overlay results can keep a vertex the ring runs out to and straight
    back from, for example when a cut ends on an edge whose far vertex now
    belongs to the cut-away piece. Such a vertex spans a triangle of
    negligible area with its neighbours and reverses the ring's direction.
    Collinear vertices the ring passes straight through are kept.

    Args:
        polygon: Polygon to clean
        tolerance: Largest triangle area still treated as a spike

    Returns:
        The polygon itself if its ring has no spikes, otherwise a new
        polygon without them
    """
    vertices = ring_coordinates(polygon)[:-1]
    original_count = len(vertices)

    removed = True
    while removed and len(vertices) > 3:
        removed = False
        for i, vertex in enumerate(vertices):
            prev = vertices[i - 1]
            nxt = vertices[(i + 1) % len(vertices)]
            if _is_spike(prev, vertex, nxt, tolerance):
                del vertices[i]
                removed = True
                break

    if len(vertices) == original_count:
        return polygon

    shell = [v.to_tuple() for v in vertices]
    shell.append(shell[0])
    return Polygon(shell, [interior.coords for interior in polygon.interiors])
