"""Exception hierarchy for Polysplit."""


class PolysplitError(Exception):
    """Base exception for all Polysplit errors."""

    pass


class InvalidArgumentError(PolysplitError):
    """An argument to the splitter is out of range."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidPolygonError(PolysplitError):
    """Input polygon is not simple or otherwise invalid."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Polygon is not valid: {reason}")


class GeometryError(PolysplitError):
    """Errors in geometric constructions."""

    pass


class DegeneratePolygonError(GeometryError):
    """Too few vertices to build a polygon."""

    def __init__(self, vertex_count: int) -> None:
        self.vertex_count = vertex_count
        super().__init__(
            f"Polygon must have at least 3 vertices, got {vertex_count}"
        )


class VertexNotFoundError(GeometryError):
    """A point expected to be a ring vertex is not one."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Point ({x}, {y}) is not a vertex of the polygon ring")


class EdgeNotFoundError(GeometryError):
    """An edge of an edge pair is not part of the polygon ring."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class SplitError(PolysplitError):
    """Errors raised while splitting a polygon."""

    pass


class NoCutFoundError(SplitError):
    """No edge pair produced a usable cut."""

    def __init__(self, target_area: float, edge_pair_count: int) -> None:
        self.target_area = target_area
        self.edge_pair_count = edge_pair_count
        super().__init__(
            f"No cut of area {target_area} found among {edge_pair_count} edge pairs: "
            "no edge pair yields a valid cut for this shape"
        )


class SplitConsistencyError(SplitError):
    """A geometric invariant was violated during splitting.

    This indicates a defect in the algorithm, not bad input.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Internal consistency check failed: {reason}")


class PolygonIOError(PolysplitError):
    """Errors related to reading or writing polygons."""

    pass


class PolygonReadError(PolygonIOError):
    """Error reading a polygon from WKT text or a file."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to read polygon from '{source}': {reason}")


class PolygonWriteError(PolygonIOError):
    """Error writing polygons to a file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write polygons to '{path}': {reason}")
