"""Candidate cut type."""

from dataclasses import dataclass

from shapely.geometry import Polygon

from polysplit.domain.segment import Segment


@dataclass(frozen=True)
class Cut:
    """A candidate straight cut through a polygon.

    Attributes:
        length: Length of the line of cut
        cut_away: Sub-polygon separated from the working polygon by the cut
        line: The line of cut; its endpoints lie on the polygon ring
    """

    length: float
    cut_away: Polygon
    line: Segment
