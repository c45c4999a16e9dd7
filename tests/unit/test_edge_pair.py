"""Unit tests for the edge-pair decomposition and cut search."""

import math

import pytest
from shapely import wkt
from shapely.geometry import Polygon

from polysplit.core.edge_pair import EdgePair, EdgePairSubpolygons
from polysplit.core.polygons import make_polygon, make_triangle
from polysplit.domain import Coordinate, ProjectedVertex, Segment
from polysplit.exceptions import EdgeNotFoundError, SplitConsistencyError

RECTANGLE = wkt.loads("POLYGON ((0 0, 10 0, 10 5, 0 5, 0 0))")
PARALLEL_TRAPEZOID = wkt.loads("POLYGON ((0 0, 100 0, 80 100, 20 100, 0 0))")
HEXAGON = wkt.loads("POLYGON ((0 0, 50 -10, 100 0, 90 50, 50 60, 10 50, 0 0))")
# Square under a roof, ring starting at the origin or at the eaves
HOUSE = wkt.loads("POLYGON ((0 0, 10 0, 10 10, 5 15, 0 10, 0 0))")
HOUSE_FROM_EAVES = wkt.loads("POLYGON ((10 10, 5 15, 0 10, 0 0, 10 0, 10 10))")


class TestEdgePairSubpolygons:
    """Tests for the triangle / trapezoid / triangle decomposition."""

    def test_rectangle(self):
        """Test opposite sides of a rectangle give no triangles."""
        edge_a = Segment.from_coords(10, 5, 0, 5)
        edge_b = Segment.from_coords(0, 0, 10, 0)

        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        assert not subpolygons.has_triangle1
        assert not subpolygons.has_triangle2
        assert subpolygons.triangle1_area == 0.0
        assert subpolygons.total_area == 50.0
        assert subpolygons.trapezoid.equals(RECTANGLE)

    def test_trapezoid(self):
        """Test parallel edges of different extent."""
        edge_a = Segment.from_coords(15, 5, 3, 5)
        edge_b = Segment.from_coords(0, 0, 10, 0)

        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        expected_triangle1 = make_triangle(Coordinate(0, 0), Coordinate(3, 0), Coordinate(3, 5))
        assert subpolygons.has_triangle1
        assert subpolygons.triangle1.equals(expected_triangle1)

        expected_triangle2 = make_triangle(Coordinate(10, 0), Coordinate(10, 5), Coordinate(15, 5))
        assert subpolygons.has_triangle2
        assert subpolygons.triangle2.equals(expected_triangle2)

        expected_trapezoid = make_polygon(
            Coordinate(3, 0), Coordinate(3, 5), Coordinate(10, 5), Coordinate(10, 0)
        )
        assert subpolygons.trapezoid.equals(expected_trapezoid)

        expected_total = make_polygon(
            Coordinate(3, 5), Coordinate(15, 5), Coordinate(10, 0), Coordinate(0, 0)
        )
        assert subpolygons.total_area == expected_total.area

    def test_parallel_trapezoid_areas(self):
        """Test the 1000 / 6000 / 1000 split of a symmetric trapezoid."""
        edge_a = Segment.from_coords(0, 0, 100, 0)
        edge_b = Segment.from_coords(80, 100, 20, 100)

        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        assert subpolygons.triangle1_area == pytest.approx(1000.0)
        assert subpolygons.trapezoid_area == pytest.approx(6000.0)
        assert subpolygons.triangle2_area == pytest.approx(1000.0)
        assert subpolygons.total_area == pytest.approx(PARALLEL_TRAPEZOID.area)

    def test_projection_fallback_to_opposing_edge(self):
        """Test projections fall back to edge_b's vertices onto edge_a."""
        edge_a = Segment.from_coords(0, 0, 100, 0)
        edge_b = Segment.from_coords(80, 100, 20, 100)

        pair = EdgePair(edge_a, edge_b)

        assert pair.intersection is None
        assert pair.projected0.point == Coordinate(80, 0)
        assert pair.projected0.is_on_edge(edge_a)
        assert pair.projected1.point == Coordinate(20, 0)
        assert pair.projected1.is_on_edge(edge_a)


class TestGetCuts:
    """Tests for EdgePairSubpolygons.get_cuts."""

    def test_cut_in_first_triangle(self):
        """Test a small target area is cut inside triangle1."""
        edge_a = Segment.from_coords(0, 0, 100, 0)
        edge_b = Segment.from_coords(80, 100, 20, 100)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        cuts = subpolygons.get_cuts(PARALLEL_TRAPEZOID, 250.0)

        assert len(cuts) == 2
        forward = cuts[0]
        assert forward.length == pytest.approx(math.sqrt(100**2 + 15**2))
        assert forward.line.p0.x == pytest.approx(95.0)
        assert forward.line.p0.y == pytest.approx(0.0)
        assert forward.line.p1 == Coordinate(80, 100)
        assert forward.cut_away.area == pytest.approx(250.0)
        assert forward.cut_away.equals(Polygon([(95, 0), (100, 0), (80, 100)]))

    def test_reverse_cut_mirrors_forward(self):
        """Test the reverse direction cuts the mirrored triangle."""
        edge_a = Segment.from_coords(0, 0, 100, 0)
        edge_b = Segment.from_coords(80, 100, 20, 100)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        reverse = subpolygons.get_cuts(PARALLEL_TRAPEZOID, 250.0)[1]

        assert reverse.length == pytest.approx(math.sqrt(100**2 + 15**2))
        assert reverse.line.p0 == Coordinate(20, 100)
        assert reverse.line.p1.x == pytest.approx(5.0)
        assert reverse.cut_away.area == pytest.approx(250.0)

    def test_cut_in_trapezoid(self):
        """Test a target area reaching into the trapezoid."""
        edge_a = Segment.from_coords(0, 0, 100, 0)
        edge_b = Segment.from_coords(80, 100, 20, 100)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        cuts = subpolygons.get_cuts(PARALLEL_TRAPEZOID, 4000.0)

        assert len(cuts) == 2
        for cut in cuts:
            assert cut.length == pytest.approx(100.0)
            assert cut.cut_away.area == pytest.approx(4000.0)

    def test_rectangle_cuts(self):
        """Test halving a rectangle across its long sides."""
        segments = list(zip(RECTANGLE.exterior.coords, RECTANGLE.exterior.coords[1:]))
        edge_a = Segment(Coordinate.from_tuple(segments[0][0]), Coordinate.from_tuple(segments[0][1]))
        edge_b = Segment(Coordinate.from_tuple(segments[2][0]), Coordinate.from_tuple(segments[2][1]))
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        cuts = subpolygons.get_cuts(RECTANGLE, 25.0)

        assert len(cuts) == 2
        for cut in cuts:
            assert cut.length == pytest.approx(5.0)
            assert cut.cut_away.area == pytest.approx(25.0)

    def test_target_larger_than_region(self):
        """Test no cut when the pair bounds less than the target area."""
        edge_a = Segment.from_coords(0, 0, 100, 0)
        edge_b = Segment.from_coords(80, 100, 20, 100)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        assert subpolygons.get_cuts(PARALLEL_TRAPEZOID, 9000.0) == []

    def test_decomposition_outside_polygon(self):
        """Test pairs whose regions spill outside a concave polygon are skipped."""
        l_shape = wkt.loads("POLYGON ((0 0, 0 30, 10 30, 10 10, 20 10, 20 0, 0 0))")
        # Left side of the L and right side of its lower arm
        edge_a = Segment.from_coords(0, 0, 0, 30)
        edge_b = Segment.from_coords(20, 10, 20, 0)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        assert subpolygons.get_cuts(l_shape, 100.0) == []

    def test_edge_not_on_ring(self):
        """Test edges foreign to the polygon raise EdgeNotFoundError."""
        edge_a = Segment.from_coords(1, 1, 9, 1)
        edge_b = Segment.from_coords(9, 4, 1, 4)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        with pytest.raises(EdgeNotFoundError):
            subpolygons.get_cuts(RECTANGLE, 10.0)

    def test_cut_in_second_triangle(self):
        """Test the forward cut reaches into triangle2 once the trapezoid is used up."""
        edge_a = Segment.from_coords(0, 0, 100, 0)
        edge_b = Segment.from_coords(80, 100, 20, 100)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        forward = subpolygons.get_cuts(PARALLEL_TRAPEZOID, 7750.0)[0]

        assert forward.length == pytest.approx(math.sqrt(100**2 + 15**2))
        assert forward.line.p0.x == pytest.approx(5.0)
        assert forward.line.p0.y == pytest.approx(0.0)
        assert forward.line.p1 == Coordinate(20, 100)
        assert forward.cut_away.area == pytest.approx(7750.0)

    def test_reverse_cut_in_first_triangle(self):
        """Test the reverse cut reaches into triangle1 once the trapezoid is used up."""
        edge_a = Segment.from_coords(0, 0, 100, 0)
        edge_b = Segment.from_coords(80, 100, 20, 100)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        reverse = subpolygons.get_cuts(PARALLEL_TRAPEZOID, 7750.0)[1]

        assert reverse.length == pytest.approx(math.sqrt(100**2 + 15**2))
        assert reverse.line.p0 == Coordinate(80, 100)
        assert reverse.line.p1.x == pytest.approx(95.0)
        assert reverse.line.p1.y == pytest.approx(0.0)
        assert reverse.cut_away.area == pytest.approx(7750.0)

    def test_forward_cut_counts_area_between_edges(self):
        """Test the roof between the walls is part of the forward cut-away piece."""
        edge_a = Segment.from_coords(10, 0, 10, 10)
        edge_b = Segment.from_coords(0, 10, 0, 0)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        cuts = subpolygons.get_cuts(HOUSE, 50.0)

        assert len(cuts) == 2
        forward, reverse = cuts
        assert forward.line.p0.x == pytest.approx(10.0)
        assert forward.line.p0.y == pytest.approx(7.5)
        assert forward.line.p1.y == pytest.approx(7.5)
        assert forward.length == pytest.approx(10.0)
        assert forward.cut_away.area == pytest.approx(50.0)
        assert forward.cut_away.contains(Polygon([(4, 12), (6, 12), (5, 14)]))
        # Nothing lies beyond edge_b, so the reverse cut halves the square
        assert reverse.line.p0.y == pytest.approx(5.0)
        assert reverse.cut_away.area == pytest.approx(50.0)

    def test_reverse_cut_counts_area_outside_edges(self):
        """Test the roof past edge_b is part of the reverse cut-away piece."""
        edge_a = Segment.from_coords(0, 10, 0, 0)
        edge_b = Segment.from_coords(10, 0, 10, 10)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        forward, reverse = subpolygons.get_cuts(HOUSE_FROM_EAVES, 50.0)

        assert reverse.line.p0.x == pytest.approx(10.0)
        assert reverse.line.p0.y == pytest.approx(7.5)
        assert reverse.line.p1.y == pytest.approx(7.5)
        assert reverse.cut_away.area == pytest.approx(50.0)
        assert reverse.cut_away.contains(Polygon([(4, 12), (6, 12), (5, 14)]))
        assert forward.line.p0.y == pytest.approx(5.0)

    def test_no_cut_when_roof_exceeds_target(self):
        """Test a direction is skipped when the area beyond the pair exceeds the target."""
        edge_a = Segment.from_coords(10, 0, 10, 10)
        edge_b = Segment.from_coords(0, 10, 0, 0)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        cuts = subpolygons.get_cuts(HOUSE, 20.0)

        # Only the reverse direction starts from an empty region
        assert len(cuts) == 1
        assert cuts[0].line.p0.y == pytest.approx(2.0)
        assert cuts[0].cut_away.area == pytest.approx(20.0)

    def test_regions_not_covering_polygon(self):
        """Test a decomposition that misses part of the polygon is an internal error."""
        edge_a = Segment.from_coords(0, 0, 10, 0)
        edge_b = Segment.from_coords(10, 5, 0, 5)
        # Off the edge line, so triangle1 and the trapezoid leave a gap
        projected0 = ProjectedVertex(Coordinate(8, 1), edge_a)
        subpolygons = EdgePairSubpolygons(edge_a, edge_b, projected0, ProjectedVertex.INVALID)

        with pytest.raises(SplitConsistencyError):
            subpolygons.get_cuts(RECTANGLE, 10.0)

    def test_hexagon_pair_poking_outside_skipped(self):
        """Test the hexagon's left pair is dropped by strict containment."""
        edge_a = Segment.from_coords(0, 0, 50, -10)
        edge_b = Segment.from_coords(50, 60, 10, 50)
        subpolygons = EdgePair(edge_a, edge_b).get_subpolygons()

        assert subpolygons.get_cuts(HEXAGON, HEXAGON.area / 3) == []
