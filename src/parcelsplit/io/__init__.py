"""File input for parcelsplit.

This module handles reading the parcel image's native size and loading
and saving polygon vertex lists.

Key classes:
- ImageReader: Reads the native extent of a raster image
- read_polygon / write_polygon: JSON polygon files
"""

from parcelsplit.io.polygon import parse_polygon, read_polygon, write_polygon
from parcelsplit.io.reader import ImageReader, read_image_extent

__all__ = [
    "ImageReader",
    "parse_polygon",
    "read_image_extent",
    "read_polygon",
    "write_polygon",
]
