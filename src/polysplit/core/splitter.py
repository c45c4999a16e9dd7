"""Greedy equal-area polygon splitting.

This module drives the cut search: each iteration evaluates every pair of
non-adjacent ring edges of the working polygon, pools the cuts that isolate
one target-area share, and removes the piece behind the shortest cut.

Key components:
- enumerate_edge_pairs: All non-adjacent edge pairs of a ring, in order
- GreedyPolygonSplitter: Orchestrator with validation, logging and checks
- split: Convenience wrapper around GreedyPolygonSplitter
"""

import time
from concurrent.futures import ThreadPoolExecutor
from operator import attrgetter

import shapely
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.validation import explain_validity

from polysplit.config import PolysplitSettings, get_default_settings
from polysplit.core.edge_pair import EdgePair
from polysplit.core.geometry import EPSILON, areas_match, ring_to_segments
from polysplit.core.polygons import remove_spikes, ring_coordinates
from polysplit.domain import Cut
from polysplit.exceptions import (
    InvalidArgumentError,
    InvalidPolygonError,
    NoCutFoundError,
    PolysplitError,
    SplitConsistencyError,
)
from polysplit.utils import SplitLogger, SplitStats, configure_logging


def enumerate_edge_pairs(polygon: Polygon) -> list[EdgePair]:
    """Build every pair of non-adjacent edges of the polygon's ring.

    Pairs are ordered by ascending index of the first edge, then of the
    second. Pairs whose edges are adjacent across the ring's closing point
    are excluded.

    Args:
        polygon: Polygon whose exterior ring supplies the edges

    Returns:
        Edge pairs in enumeration order
    """
    segments = ring_to_segments(ring_coordinates(polygon))
    count = len(segments)

    pairs: list[EdgePair] = []
    for i in range(count - 2):
        for j in range(i + 2, count):
            if j - i + 1 == count:
                break
            pairs.append(EdgePair(segments[i], segments[j]))
    return pairs


def _drop_slivers(geometry: BaseGeometry, reference_area: float) -> Polygon:
    """Reduce an overlay result to its single polygon of non-negligible area."""
    if isinstance(geometry, Polygon):
        return geometry

    tolerance = EPSILON * max(1.0, reference_area)
    pieces = [
        part
        for part in shapely.get_parts(geometry)
        if isinstance(part, Polygon) and part.area >= tolerance
    ]
    if len(pieces) != 1:
        raise SplitConsistencyError(
            f"remainder of the cut has {len(pieces)} polygons ({geometry.geom_type})"
        )
    return pieces[0]


class GreedyPolygonSplitter:
    """Splits polygons into parts of equal area with shortest-first cuts.

    Workflow per split:
    1. Validate the polygon and part count
    2. Fix the target area as a share of the original polygon's area
    3. Cut away one share per iteration along the shortest valid cut
    4. Verify that the parts add up to the original polygon

    Example:
        splitter = GreedyPolygonSplitter()
        parts = splitter.split(polygon, 4)
        print(splitter.stats.candidate_cuts)
    """

    def __init__(self, config: PolysplitSettings | None = None) -> None:
        """Initialize splitter with configuration.

        Args:
            config: Polysplit settings; defaults apply if omitted
        """
        self.config = config or get_default_settings()
        self.logger = configure_logging(
            log_file=self.config.logging.log_file,
            console_level=self.config.logging.log_level,
            file_level=self.config.logging.file_log_level,
            quiet=False,
        )
        self.split_logger = SplitLogger(self.logger)

    @property
    def stats(self) -> SplitStats:
        """Statistics of the most recent split."""
        return self.split_logger.stats

    def split(self, polygon: Polygon, parts: int) -> list[Polygon]:
        """Split a polygon into parts of equal area.

        Args:
            polygon: Simple polygon to split
            parts: Number of parts, at least 2

        Returns:
            The cut-away pieces in the order they were cut, followed by the
            final remainder

        Raises:
            InvalidPolygonError: If the polygon is empty or not valid
            InvalidArgumentError: If parts is less than 2
            NoCutFoundError: If an iteration finds no usable cut
            SplitConsistencyError: If the parts do not reassemble the polygon
        """
        self._validate(polygon, parts)

        self.split_logger = SplitLogger(self.logger)
        self.stats.start_time = time.time()

        # Fixed from the original polygon for every iteration
        target_area = polygon.area / parts
        self.split_logger.log_split_start(
            vertex_count=len(polygon.exterior.coords) - 1,
            area=polygon.area,
            parts=parts,
            target_area=target_area,
        )

        result: list[Polygon] = []
        remaining = polygon
        try:
            for _ in range(parts - 1):
                cut_away, remaining = self.split_once(remaining, target_area)
                result.append(cut_away)
            result.append(remaining)
            self._verify(polygon, result)
        except PolysplitError as e:
            self.split_logger.log_split_error(e)
            raise

        self.stats.end_time = time.time()
        self.split_logger.log_split_complete(
            parts=len(result), duration_ms=self.stats.duration_seconds * 1000
        )
        return result

    def find_cuts(self, polygon: Polygon, target_area: float) -> tuple[list[EdgePair], list[Cut]]:
        """Collect the candidate cuts of every edge pair.

        With more than one worker configured, edge pairs are evaluated on a
        thread pool. Results keep enumeration order either way.

        Args:
            polygon: Working polygon
            target_area: Area each cut must separate

        Returns:
            Tuple of (edge pairs evaluated, candidate cuts in enumeration order)
        """
        pairs = enumerate_edge_pairs(polygon)

        def evaluate(pair: EdgePair) -> list[Cut]:
            return pair.get_subpolygons().get_cuts(polygon, target_area)

        max_workers = self.config.splitter.max_workers
        if max_workers > 1 and len(pairs) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                per_pair = list(executor.map(evaluate, pairs))
        else:
            per_pair = [evaluate(pair) for pair in pairs]

        return pairs, [cut for cuts in per_pair for cut in cuts]

    def split_once(self, polygon: Polygon, target_area: float) -> tuple[Polygon, Polygon]:
        """Cut one piece of target_area off the polygon along the shortest cut.

        Ties between equally short cuts go to the first one found. The
        remainder is cleared of zero-width spikes and normalized (clockwise
        shell starting at its lowest-left vertex), so the next iteration
        enumerates its edges in a fixed order.

        Args:
            polygon: Working polygon
            target_area: Area of the piece to cut away

        Returns:
            Tuple of (cut-away piece, remainder)

        Raises:
            NoCutFoundError: If no edge pair yields a usable cut
            SplitConsistencyError: If the remainder is not a single polygon
        """
        pairs, candidates = self.find_cuts(polygon, target_area)
        if not candidates:
            raise NoCutFoundError(target_area, len(pairs))

        shortest = min(candidates, key=attrgetter("length"))
        remainder = remove_spikes(
            _drop_slivers(polygon.difference(shortest.cut_away), polygon.area)
        )
        # Overlay output starts its ring anywhere; tie-breaking depends on it
        remainder = shapely.normalize(remainder)

        self.split_logger.log_iteration(
            iteration=self.stats.iterations,
            edge_pairs=len(pairs),
            candidates=len(candidates),
            cut_length=shortest.length,
            cut_area=shortest.cut_away.area,
        )
        return shortest.cut_away, remainder

    def _validate(self, polygon: Polygon, parts: int) -> None:
        if not isinstance(polygon, Polygon):
            raise InvalidPolygonError(f"expected a Polygon, got {type(polygon).__name__}")
        if polygon.is_empty:
            raise InvalidPolygonError("polygon is empty")
        if not polygon.is_valid:
            raise InvalidPolygonError(explain_validity(polygon))
        if parts < 2:
            raise InvalidArgumentError(f"Number of parts must be at least 2, got {parts}")

        # Accepted, but outside the shapes the cut search is defined for
        if polygon.interiors:
            self.split_logger.log_polygon_warning("polygon has holes", holes=len(polygon.interiors))
        vertex_count = len(polygon.exterior.coords) - 1
        if vertex_count < 4:
            self.split_logger.log_polygon_warning("fewer than 4 vertices", vertices=vertex_count)

    def _verify(self, polygon: Polygon, parts: list[Polygon]) -> None:
        total_area = sum(part.area for part in parts)
        if not areas_match(total_area, polygon.area):
            raise SplitConsistencyError(
                f"area of the parts ({total_area}) does not match the polygon ({polygon.area})"
            )

        union = unary_union(parts)
        if union.equals(polygon):
            return
        if union.symmetric_difference(polygon).area >= EPSILON * max(1.0, polygon.area):
            raise SplitConsistencyError("union of the parts is not equal to the polygon")


def split(
    polygon: Polygon, parts: int, config: PolysplitSettings | None = None
) -> list[Polygon]:
    """Split a polygon into parts of equal area.

    Args:
        polygon: Simple polygon to split
        parts: Number of parts, at least 2
        config: Optional settings for the splitter

    Returns:
        Ordered list of parts (cut-away pieces, then the remainder)
    """
    return GreedyPolygonSplitter(config).split(polygon, parts)
