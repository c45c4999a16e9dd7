"""Unit tests for the WKT I/O layer.

Tests for read_polygon, load_polygon, format_polygon and write_parts.
"""

from pathlib import Path

import pytest
from shapely.geometry import Polygon, box

from polysplit.exceptions import PolygonReadError, PolygonWriteError
from polysplit.io import format_polygon, load_polygon, read_polygon, write_parts


class TestReadPolygon:
    """Tests for read_polygon."""

    def test_read_polygon(self):
        """Test parsing a polygon."""
        polygon = read_polygon("POLYGON ((0 0, 10 0, 10 5, 0 5, 0 0))")
        assert isinstance(polygon, Polygon)
        assert polygon.area == 50.0

    def test_surrounding_whitespace(self):
        """Test leading and trailing whitespace is ignored."""
        polygon = read_polygon("\n  POLYGON ((0 0, 1 0, 1 1, 0 0))  \n")
        assert polygon.area == 0.5

    def test_malformed_wkt(self):
        """Test malformed text raises PolygonReadError."""
        with pytest.raises(PolygonReadError) as exc_info:
            read_polygon("POLYGON ((0 0, 1 0", source="broken")
        assert exc_info.value.source == "broken"

    def test_not_a_polygon(self):
        """Test other geometry types raise PolygonReadError."""
        with pytest.raises(PolygonReadError, match="expected POLYGON, got LINESTRING"):
            read_polygon("LINESTRING (0 0, 1 1)")

    def test_multipolygon_rejected(self):
        """Test a multipolygon is not accepted."""
        with pytest.raises(PolygonReadError, match="MULTIPOLYGON"):
            read_polygon("MULTIPOLYGON (((0 0, 1 0, 1 1, 0 0)), ((2 2, 3 2, 3 3, 2 2)))")


class TestLoadPolygon:
    """Tests for load_polygon."""

    def test_load_file(self, tmp_path):
        """Test loading a polygon from a file."""
        path = tmp_path / "shape.wkt"
        path.write_text("POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0))\n", encoding="utf-8")

        polygon = load_polygon(path)

        assert polygon.area == 16.0

    def test_missing_file(self, tmp_path):
        """Test a missing file raises PolygonReadError."""
        path = tmp_path / "missing.wkt"
        with pytest.raises(PolygonReadError) as exc_info:
            load_polygon(path)
        assert exc_info.value.source == str(path)

    def test_error_names_file(self, tmp_path):
        """Test parse errors report the file path."""
        path = tmp_path / "bad.wkt"
        path.write_text("POINT (1 1)", encoding="utf-8")
        with pytest.raises(PolygonReadError, match="bad.wkt"):
            load_polygon(path)


class TestFormatPolygon:
    """Tests for format_polygon."""

    def test_integers_trimmed(self):
        """Test whole numbers print without decimals."""
        polygon = Polygon([(5, 0), (10, 0), (10, 5), (5, 5)])
        assert format_polygon(polygon) == "POLYGON ((5 0, 10 0, 10 5, 5 5, 5 0))"

    def test_full_precision(self):
        """Test the default keeps every significant digit."""
        polygon = Polygon([(0, 0), (1 / 3, 0), (0, 1)])
        assert "0.3333333333333333" in format_polygon(polygon)

    def test_rounded(self):
        """Test rounding to a number of decimals."""
        polygon = Polygon([(0, 0), (1 / 3, 0), (0, 1)])
        assert format_polygon(polygon, precision=2) == "POLYGON ((0 0, 0.33 0, 0 1, 0 0))"


class TestWriteParts:
    """Tests for write_parts."""

    def test_one_polygon_per_line(self, tmp_path):
        """Test each part is written on its own line."""
        path = tmp_path / "parts.wkt"

        write_parts([box(0, 0, 1, 1), box(1, 0, 2, 1)], path)

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert all(line.startswith("POLYGON ((") for line in lines)

    def test_unwritable_path(self, tmp_path):
        """Test a write failure raises PolygonWriteError."""
        path = tmp_path / "missing-dir" / "parts.wkt"
        with pytest.raises(PolygonWriteError) as exc_info:
            write_parts([box(0, 0, 1, 1)], path)
        assert exc_info.value.path == str(Path(path))
