"""Projected vertex type used by the edge-pair decomposition."""

from dataclasses import dataclass
from typing import ClassVar

from polysplit.domain.segment import Coordinate, Segment


@dataclass(frozen=True, slots=True)
class ProjectedVertex:
    """A vertex of one edge projected onto the opposing edge.

    A valid projection carries the projected coordinate and the edge it lies
    on. The shared ``INVALID`` instance carries neither and must never be
    read as a point.

    Attributes:
        coordinate: Projected coordinate, None when invalid
        edge: Edge the projection lies on, None when invalid
    """

    coordinate: Coordinate | None = None
    edge: Segment | None = None

    INVALID: ClassVar["ProjectedVertex"]

    @property
    def is_valid(self) -> bool:
        """Whether the projection falls within the opposing edge."""
        return self.coordinate is not None

    @property
    def point(self) -> Coordinate:
        """Projected coordinate.

        Raises:
            ValueError: If the projection is invalid
        """
        if self.coordinate is None:
            raise ValueError("Invalid projected vertex has no coordinate")
        return self.coordinate

    def is_on_edge(self, edge: Segment) -> bool:
        """True if valid and lying on the given edge (in either direction)."""
        return self.edge is not None and self.edge.equals_topo(edge)

    def __str__(self) -> str:
        if self.coordinate is None:
            return "(INVALID)"
        return f"({self.coordinate.x}, {self.coordinate.y})"


ProjectedVertex.INVALID = ProjectedVertex()
