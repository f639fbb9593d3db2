"""Core geometric value types.

This module defines the coordinate types shared by every part of parcelsplit:
- Point: A 2D point in native image coordinates
- Rect: An axis-aligned rectangle used as a clip window
- Extent: The native width and height of the parcel image
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in the image's native coordinate space.

    Immutable and hashable. The y axis grows downwards, as in raster images.

    Attributes:
        x: X coordinate in native pixels
        y: Y coordinate in native pixels
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size.

    Zero width or height is legal. Negative sizes are tolerated and treated
    as zero by the clipper.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """X coordinate of the right edge (never left of ``x``)."""
        return self.x + max(0.0, self.width)

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom edge (never above ``y``)."""
        return self.y + max(0.0, self.height)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True, slots=True)
class Extent:
    """Native size of the parcel image."""

    width: float
    height: float

    def to_rect(self) -> Rect:
        """Full-image rectangle anchored at the origin."""
        return Rect(0.0, 0.0, self.width, self.height)
