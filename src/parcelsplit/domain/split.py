"""Split line specification and split results.

A split is a single straight line, vertical or horizontal, placed at one
coordinate in native image space. Evaluating it against a parcel polygon
yields a SplitResult holding the two areas, their side labels and the two
clipped sub-polygons.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from parcelsplit.domain.geometry import Point

GENERIC_LABELS = ("Area 1", "Area 2")


class SplitDirection(str, Enum):
    """Orientation of the split line."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @property
    def labels(self) -> tuple[str, str]:
        """Side labels for the first and second window."""
        if self is SplitDirection.VERTICAL:
            return ("Left Area", "Right Area")
        return ("Top Area", "Bottom Area")


@dataclass(frozen=True, slots=True)
class SplitSpec:
    """Direction of the split line and its position.

    For a vertical split ``coordinate`` is an x value, for a horizontal split
    it is a y value. ``None`` means the line has not been placed yet.
    """

    direction: SplitDirection = SplitDirection.VERTICAL
    coordinate: float | None = None

    @property
    def is_placed(self) -> bool:
        return self.coordinate is not None


@dataclass(frozen=True)
class SplitResult:
    """Outcome of dividing a parcel along a split line.

    Attributes:
        area1: Area of the left/top side in the caller's unit
        area2: Area of the right/bottom side in the caller's unit
        label1: Human-readable name of the first side
        label2: Human-readable name of the second side
        sub_polygon1: Parcel clipped to the first side (native coordinates)
        sub_polygon2: Parcel clipped to the second side (native coordinates)
    """

    area1: float = 0.0
    area2: float = 0.0
    label1: str = GENERIC_LABELS[0]
    label2: str = GENERIC_LABELS[1]
    sub_polygon1: tuple[Point, ...] = field(default_factory=tuple)
    sub_polygon2: tuple[Point, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "SplitResult":
        """Zero-filled result for a split that cannot be computed yet."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return (
            self.area1 == 0.0
            and self.area2 == 0.0
            and not self.sub_polygon1
            and not self.sub_polygon2
            and (self.label1, self.label2) == GENERIC_LABELS
        )

    @property
    def total(self) -> float:
        return self.area1 + self.area2

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the result
        """
        return {
            "area1": self.area1,
            "area2": self.area2,
            "label1": self.label1,
            "label2": self.label2,
            "sub_polygon1": [p.to_dict() for p in self.sub_polygon1],
            "sub_polygon2": [p.to_dict() for p in self.sub_polygon2],
        }


@dataclass(frozen=True, slots=True)
class SplitShares:
    """Percentage breakdown of a split as shown to the user.

    Attributes:
        percent1: Share of the first side, in percent
        percent2: Share of the second side, in percent
        discrepancy: (area1 + area2) minus the nominal total area
        has_precision_note: True when the sides do not add up to the total
    """

    percent1: float
    percent2: float
    discrepancy: float
    has_precision_note: bool
