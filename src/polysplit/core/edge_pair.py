"""Edge-pair decomposition and exact-area cut search.

For two non-adjacent edges of a polygon ring, the region between them is
split into up to three primitives whose areas can be interpolated exactly:

                               edge_a
           edge_a.p0 .____________________________. edge_a.p1
                    /|                            |\\
                   /                                \\
                  /  |                            |  \\
                 / T2 |        trapezoid           | T1 \\
                /                                        \\
               .______.____________________________|______.
         edge_b.p1                edge_b                    edge_b.p0
                      ^                            ^
                  projected1                  projected0

Key classes:
- EdgePair: Two ring edges plus their projected vertices
- EdgePairSubpolygons: Triangle / trapezoid / triangle decomposition and
  the cuts that isolate a target area inside it
"""

from shapely.geometry import Polygon

from polysplit.core.geometry import (
    areas_match,
    contains_part,
    intersect_infinite_lines,
    project_point,
    properly_intersects,
    ring_to_segments,
    segment_at,
)
from polysplit.core.polygons import (
    make_polygon,
    make_triangle,
    ring_coordinates,
    slice_ring,
    subpolygon_between_vertices,
)
from polysplit.domain import Coordinate, Cut, ProjectedVertex, Segment
from polysplit.exceptions import EdgeNotFoundError, SplitConsistencyError


class EdgePair:
    """A pair of edges on a polygon's exterior ring.

    Both edges must follow the ring's direction, with edge_a occurring
    earlier in traversal order than edge_b.
    """

    def __init__(self, edge_a: Segment, edge_b: Segment) -> None:
        """Initialize the pair and project its vertices across.

        Args:
            edge_a: Earlier edge of the ring
            edge_b: Later edge of the ring
        """
        self.edge_a = edge_a
        self.edge_b = edge_b
        self.intersection = intersect_infinite_lines(edge_a, edge_b)

        # At most two projections survive
        self.projected0 = self._project(edge_a.p1, edge_b)
        if not self.projected0.is_valid:
            self.projected0 = self._project(edge_b.p0, edge_a)

        self.projected1 = self._project(edge_a.p0, edge_b)
        if not self.projected1.is_valid:
            self.projected1 = self._project(edge_b.p1, edge_a)

    def _project(self, vertex: Coordinate, edge: Segment) -> ProjectedVertex:
        point = project_point(vertex, edge, self.intersection)
        if point is None:
            return ProjectedVertex.INVALID
        return ProjectedVertex(point, edge)

    def get_subpolygons(self) -> "EdgePairSubpolygons":
        """Decompose the region between the edges."""
        return EdgePairSubpolygons(self.edge_a, self.edge_b, self.projected0, self.projected1)

    def __repr__(self) -> str:
        return f"EdgePair(edge_a={self.edge_a}, edge_b={self.edge_b})"


class EdgePairSubpolygons:
    """The three regions of an edge pair in which a cut can lie.

    - triangle1: edge_a.p1, projected0, edge_b.p0 (absent if projected0 is invalid)
    - trapezoid: always present; the full quad when neither projection is valid
    - triangle2: edge_a.p0, projected1, edge_b.p1 (absent if projected1 is invalid)

    Attributes:
        edge_a: Earlier edge of the pair
        edge_b: Later edge of the pair
        triangle1: First triangle or None
        trapezoid: Central quadrilateral
        triangle2: Second triangle or None
        triangle1_area: Area of triangle1, 0 when absent
        trapezoid_area: Area of the trapezoid
        triangle2_area: Area of triangle2, 0 when absent
    """

    def __init__(
        self,
        edge_a: Segment,
        edge_b: Segment,
        projected0: ProjectedVertex,
        projected1: ProjectedVertex,
    ) -> None:
        self.edge_a = edge_a
        self.edge_b = edge_b
        self.projected0 = projected0
        self.projected1 = projected1

        self.triangle1 = (
            make_triangle(edge_a.p1, projected0.point, edge_b.p0) if projected0.is_valid else None
        )
        self.triangle2 = (
            make_triangle(edge_a.p0, projected1.point, edge_b.p1) if projected1.is_valid else None
        )
        self.triangle1_area = self.triangle1.area if self.triangle1 is not None else 0.0
        self.triangle2_area = self.triangle2.area if self.triangle2 is not None else 0.0

        self.trapezoid = make_polygon(
            projected1.point if projected1.is_on_edge(edge_a) else edge_a.p0,
            projected0.point if projected0.is_on_edge(edge_a) else edge_a.p1,
            projected0.point if projected0.is_on_edge(edge_b) else edge_b.p0,
            projected1.point if projected1.is_on_edge(edge_b) else edge_b.p1,
        )
        self.trapezoid_area = self.trapezoid.area

    @property
    def has_triangle1(self) -> bool:
        return self.triangle1 is not None

    @property
    def has_triangle2(self) -> bool:
        return self.triangle2 is not None

    @property
    def total_area(self) -> float:
        """Combined area of the trapezoid and both triangles."""
        return self.triangle1_area + self.trapezoid_area + self.triangle2_area

    def get_cuts(self, polygon: Polygon, target_area: float) -> list[Cut]:
        """Find the cuts inside this decomposition that cut away target_area.

        The forward direction accumulates area from the ring path between
        edge_a and edge_b (outside1, triangle1, trapezoid, triangle2), the
        reverse direction from the other side (outside2, triangle2,
        trapezoid, triangle1).

        Args:
            polygon: Working polygon whose ring contains both edges
            target_area: Area the cut must separate from the polygon

        Returns:
            0, 1 or 2 cuts. Empty when some region of the decomposition falls
            outside the polygon.

        Raises:
            EdgeNotFoundError: If either edge is not on the polygon's ring
            SplitConsistencyError: If the regions do not add up to the
                polygon's area
        """
        for region in (self.trapezoid, self.triangle1, self.triangle2):
            if region is not None and not contains_part(polygon, region):
                # Part of the decomposition spills outside the polygon
                return []

        segments = ring_to_segments(ring_coordinates(polygon))
        index_a = self._index_of(segments, self.edge_a)
        index_b = self._index_of(segments, self.edge_b)

        # Ring = edge_a + segments between + edge_b + segments outside
        covered = index_b - index_a + 1
        between_count = covered - 2
        outside_count = len(segments) - covered

        outside1_area = 0.0
        if between_count > 1:
            outside1 = subpolygon_between_vertices(polygon, self.edge_a.p1, self.edge_b.p0)
            if not contains_part(polygon, outside1):
                return []
            outside1_area = outside1.area

        outside2_area = 0.0
        if outside_count > 1:
            outside2 = subpolygon_between_vertices(polygon, self.edge_b.p1, self.edge_a.p0)
            if not contains_part(polygon, outside2):
                return []
            outside2_area = outside2.area

        accounted = outside1_area + outside2_area + self.total_area
        if not areas_match(accounted, polygon.area):
            raise SplitConsistencyError(
                f"regions of {self.edge_a} / {self.edge_b} cover {accounted}, "
                f"polygon area is {polygon.area}"
            )

        cuts: list[Cut] = []
        candidate_lines = []
        if outside1_area <= target_area:
            candidate_lines.append(self._forward_line(target_area - outside1_area))
        if outside2_area <= target_area:
            candidate_lines.append(self._reverse_line(target_area - outside2_area))

        ring = polygon.exterior
        for line in candidate_lines:
            # Cuts crossing the ring would produce a self-intersecting piece
            if line is None or properly_intersects(line, ring):
                continue
            cuts.append(Cut(line.length, slice_ring(polygon, line.p0, line.p1), line))

        return cuts

    @staticmethod
    def _index_of(segments: list[Segment], edge: Segment) -> int:
        try:
            return segments.index(edge)
        except ValueError:
            raise EdgeNotFoundError(f"Edge {edge} is not part of the polygon ring") from None

    def _trapezoid_fraction(self, area: float) -> float:
        return area / self.trapezoid_area if self.trapezoid_area > 0 else 0.0

    def _forward_line(self, area: float) -> Segment | None:
        """Line of cut from edge_a to edge_b cutting away area after outside1."""
        a, b = self.edge_a, self.edge_b

        if self.triangle1_area > area:
            projected = self.projected0
            fraction = area / self.triangle1_area
            if projected.is_on_edge(a):
                point = Segment(a.p1, projected.point).point_along(fraction)
                return Segment(point, b.p0)
            point = Segment(b.p0, projected.point).point_along(fraction)
            return Segment(a.p1, point)

        if self.triangle1_area + self.trapezoid_area >= area:
            fraction = self._trapezoid_fraction(area - self.triangle1_area)
            # Leg on edge_a reversed to run in edge_b's direction
            on_a = segment_at(ring_coordinates(self.trapezoid), 0, reversed=True)
            on_b = segment_at(ring_coordinates(self.trapezoid), 2)
            return Segment(on_a.point_along(fraction), on_b.point_along(fraction))

        if self.total_area >= area:
            projected = self.projected1
            fraction = (area - self.triangle1_area - self.trapezoid_area) / self.triangle2_area
            if projected.is_on_edge(a):
                point = Segment(projected.point, a.p0).point_along(fraction)
                return Segment(point, b.p1)
            point = Segment(projected.point, b.p1).point_along(fraction)
            return Segment(a.p0, point)

        return None

    def _reverse_line(self, area: float) -> Segment | None:
        """Line of cut from edge_b to edge_a cutting away area after outside2."""
        a, b = self.edge_a, self.edge_b

        if self.triangle2_area > area:
            projected = self.projected1
            fraction = area / self.triangle2_area
            if projected.is_on_edge(a):
                point = Segment(a.p0, projected.point).point_along(fraction)
                return Segment(b.p1, point)
            point = Segment(b.p1, projected.point).point_along(fraction)
            return Segment(point, a.p0)

        if self.triangle2_area + self.trapezoid_area >= area:
            fraction = self._trapezoid_fraction(area - self.triangle2_area)
            # Leg on edge_b reversed to run in edge_a's direction
            on_a = segment_at(ring_coordinates(self.trapezoid), 0)
            on_b = segment_at(ring_coordinates(self.trapezoid), 2, reversed=True)
            return Segment(on_b.point_along(fraction), on_a.point_along(fraction))

        if self.total_area >= area:
            projected = self.projected0
            fraction = (area - self.triangle2_area - self.trapezoid_area) / self.triangle1_area
            if projected.is_on_edge(a):
                point = Segment(projected.point, a.p1).point_along(fraction)
                return Segment(b.p0, point)
            point = Segment(projected.point, b.p0).point_along(fraction)
            return Segment(point, a.p1)

        return None

    def __repr__(self) -> str:
        return (
            f"EdgePairSubpolygons(triangle1={self.triangle1}, "
            f"trapezoid={self.trapezoid}, triangle2={self.triangle2})"
        )
