"""Domain models for polysplit.

This module contains the value types the cut search operates on. All models
are designed to be:

- Immutable (frozen dataclasses)
- Independent of shapely, except at explicit conversion points

Key classes:
- Coordinate: A point in the plane
- Segment: A directed edge between two coordinates
- ProjectedVertex: A vertex projected onto an opposing edge, or INVALID
- Cut: A candidate cut and the polygon it cuts away
"""

from polysplit.domain.cut import Cut
from polysplit.domain.projection import ProjectedVertex
from polysplit.domain.segment import Coordinate, Segment

__all__: list[str] = [
    "Coordinate",
    "Segment",
    "ProjectedVertex",
    "Cut",
]
