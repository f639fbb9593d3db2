"""Parcel Splitter - divide a known parcel area along a straight split line.

Parcel Splitter takes a polygon traced over a raster image of a land parcel,
the parcel's known real-world area and a vertical or horizontal split line,
and reports how the known area divides between the two sides.

Example:
    $ parcelsplit parcel.json --image parcel.png --area 1264 --at 420

This prints the Left/Right areas and their share of the total.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
