"""Mapping between displayed and native image coordinates.

Pointer positions arrive in the coordinate space of the image as it is
shown on screen, which is usually scaled. The split engine only works in
the image's native resolution, so every input point passes through
DisplayTransform.to_native and every rendered point through to_display.
"""

from dataclasses import dataclass

from parcelsplit.domain import Extent, Point
from parcelsplit.exceptions import InvalidExtentError


@dataclass(frozen=True, slots=True)
class DisplayTransform:
    """Per-axis linear scaling between display and native coordinates.

    Attributes:
        native: Native image size
        display: Size of the image as displayed
    """

    native: Extent
    display: Extent

    def __post_init__(self) -> None:
        if self.display.width <= 0 or self.display.height <= 0:
            raise InvalidExtentError(self.display.width, self.display.height)

    @property
    def scale_x(self) -> float:
        """Native pixels per displayed pixel along x."""
        return self.native.width / self.display.width

    @property
    def scale_y(self) -> float:
        """Native pixels per displayed pixel along y."""
        return self.native.height / self.display.height

    def to_native(self, point: Point) -> Point:
        """Convert a displayed position to native image coordinates."""
        return Point(point.x * self.scale_x, point.y * self.scale_y)

    def to_display(self, point: Point) -> Point:
        """Convert a native position to displayed coordinates.

        A zero native dimension maps everything on that axis to 0.
        """
        x = point.x * self.display.width / self.native.width if self.native.width else 0.0
        y = point.y * self.display.height / self.native.height if self.native.height else 0.0
        return Point(x, y)

    def clamp(self, point: Point) -> Point:
        """Clamp a native point into the image bounds."""
        return clamp_to_extent(point, self.native)


def clamp_to_extent(point: Point, extent: Extent) -> Point:
    """Clamp a point into [0, width] x [0, height]."""
    return Point(
        max(0.0, min(point.x, extent.width)),
        max(0.0, min(point.y, extent.height)),
    )
