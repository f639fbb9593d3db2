"""Unit tests for the file I/O layer.

Tests for ImageReader and polygon file reading/writing.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from PIL import Image

from parcelsplit.domain import Extent, Point
from parcelsplit.exceptions import ImageLoadError, PolygonFileError
from parcelsplit.io import ImageReader, parse_polygon, read_image_extent, read_polygon, write_polygon


@pytest.fixture
def png_path(tmp_path: Path) -> Path:
    """Small PNG written with Pillow."""
    path = tmp_path / "parcel.png"
    Image.new("RGB", (64, 48), color="white").save(path)
    return path


class TestImageReader:
    """Tests for ImageReader class."""

    def test_init(self):
        """Test ImageReader initialization."""
        path = Path("parcel.png")
        reader = ImageReader(path)
        assert reader._image_path == path
        assert reader._extent is None

    def test_extent_before_load(self):
        """Test accessing extent before loading raises RuntimeError."""
        reader = ImageReader(Path("parcel.png"))
        with pytest.raises(RuntimeError, match="Image not loaded"):
            _ = reader.extent

    def test_format_before_load(self):
        reader = ImageReader(Path("parcel.png"))
        with pytest.raises(RuntimeError, match="Image not loaded"):
            _ = reader.format

    def test_load_png(self, png_path):
        """Test the native size is read from the file."""
        reader = ImageReader(png_path)
        reader.load()
        assert reader.extent == Extent(64.0, 48.0)
        assert reader.format == "PNG"

    def test_read_image_extent(self, png_path):
        assert read_image_extent(png_path) == Extent(64.0, 48.0)

    def test_load_nonexistent_file(self, tmp_path):
        """Test a missing file raises ImageLoadError."""
        reader = ImageReader(tmp_path / "missing.png")
        with pytest.raises(ImageLoadError, match="file not found"):
            reader.load()

    def test_load_directory(self, tmp_path):
        with pytest.raises(ImageLoadError, match="not a file"):
            ImageReader(tmp_path).load()

    def test_load_not_an_image(self, tmp_path):
        """Test a non-image file raises ImageLoadError."""
        path = tmp_path / "notes.png"
        path.write_text("definitely not a png")
        with pytest.raises(ImageLoadError) as exc_info:
            ImageReader(path).load()
        assert exc_info.value.reason == "not a recognized image format"

    @patch("parcelsplit.io.reader.Image.open", side_effect=OSError("truncated header"))
    def test_load_os_error(self, _mock_open, png_path):
        """Test other read failures carry Pillow's reason."""
        with pytest.raises(ImageLoadError, match="truncated header"):
            ImageReader(png_path).load()


class TestPolygonFiles:
    """Tests for polygon file reading and writing."""

    def test_read_pairs(self, tmp_path):
        """Test the list-of-pairs form."""
        path = tmp_path / "parcel.json"
        path.write_text(json.dumps([[0, 0], [10, 0], [10, 5]]))
        assert read_polygon(path) == [Point(0, 0), Point(10, 0), Point(10, 5)]

    def test_read_objects(self, tmp_path):
        """Test the points-object form."""
        path = tmp_path / "parcel.json"
        path.write_text(json.dumps({"points": [{"x": 1.5, "y": 2}, {"x": 3, "y": 4}]}))
        assert read_polygon(path) == [Point(1.5, 2.0), Point(3.0, 4.0)]

    def test_write_then_read(self, tmp_path):
        path = tmp_path / "parcel.json"
        points = [Point(0, 0), Point(12.25, 0), Point(12.25, 8.5)]
        write_polygon(path, points)
        assert read_polygon(path) == points

    def test_missing_file(self, tmp_path):
        with pytest.raises(PolygonFileError, match="file not found"):
            read_polygon(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "parcel.json"
        path.write_text("[[0, 0], [1,")
        with pytest.raises(PolygonFileError, match="not valid JSON"):
            read_polygon(path)

    def test_bad_coordinates(self, tmp_path):
        """Test non-numeric coordinates are rejected."""
        path = tmp_path / "parcel.json"
        path.write_text(json.dumps([["a", 0], [1, 1], [2, 2]]))
        with pytest.raises(PolygonFileError, match="validation error"):
            read_polygon(path)

    def test_wrong_document_shape(self):
        with pytest.raises(ValueError):
            parse_polygon({"vertices": []})

    def test_empty_polygon(self):
        """Test an empty list is a valid, empty polygon."""
        assert parse_polygon([]) == []
