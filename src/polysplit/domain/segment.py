"""Planar coordinate and directed segment types.

This module defines the two geometric values the cut search is built on:
- Coordinate: An immutable (x, y) pair
- Segment: An ordered pair of coordinates whose direction follows the ring
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from shapely.geometry import LineString


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A point in the plane.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def distance(self, other: "Coordinate") -> float:
        """Euclidean distance to another coordinate."""
        return math.hypot(self.x - other.x, self.y - other.y)

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> "Coordinate":
        """Build from an (x, y) or (x, y, z) sequence; z is dropped.

        Args:
            values: Coordinate sequence, e.g. one entry of shapely ``coords``

        Returns:
            Coordinate instance
        """
        return cls(float(values[0]), float(values[1]))


@dataclass(frozen=True, slots=True)
class Segment:
    """A directed line segment from p0 to p1.

    The direction is significant: segments taken from a polygon ring follow
    the ring's traversal direction.

    Attributes:
        p0: Start coordinate
        p1: End coordinate
    """

    p0: Coordinate
    p1: Coordinate

    @property
    def length(self) -> float:
        """Length of the segment."""
        return self.p0.distance(self.p1)

    def point_along(self, fraction: float) -> Coordinate:
        """Point at the given fraction of the way from p0 to p1.

        Fractions outside [0, 1] extrapolate along the line.
        """
        return Coordinate(
            self.p0.x + fraction * (self.p1.x - self.p0.x),
            self.p0.y + fraction * (self.p1.y - self.p0.y),
        )

    def project(self, point: Coordinate) -> Coordinate:
        """Perpendicular projection of point onto the infinite line.

        Args:
            point: Point to project

        Returns:
            Foot of the perpendicular, which may lie outside the segment.
            For a zero-length segment, p0 is returned.
        """
        dx = self.p1.x - self.p0.x
        dy = self.p1.y - self.p0.y
        length_sq = dx * dx + dy * dy
        if length_sq == 0.0:
            return self.p0

        r = ((point.x - self.p0.x) * dx + (point.y - self.p0.y) * dy) / length_sq
        return self.point_along(r)

    def reversed(self) -> "Segment":
        """Same segment with endpoints swapped."""
        return Segment(self.p1, self.p0)

    def equals_topo(self, other: "Segment") -> bool:
        """True if both segments join the same two endpoints, in any order."""
        return (self.p0 == other.p0 and self.p1 == other.p1) or (
            self.p0 == other.p1 and self.p1 == other.p0
        )

    def to_line_string(self) -> LineString:
        """Convert to a shapely LineString."""
        return LineString([self.p0.to_tuple(), self.p1.to_tuple()])

    @classmethod
    def from_coords(
        cls, x0: float, y0: float, x1: float, y1: float
    ) -> "Segment":
        """Build a segment from raw coordinate values."""
        return cls(Coordinate(x0, y0), Coordinate(x1, y1))
