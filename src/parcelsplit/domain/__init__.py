"""Domain models for parcelsplit.

All models are immutable value types with no shared mutable state:

- Point: A 2D point in native image coordinates
- Rect: Axis-aligned clip window
- Extent: Native image size
- SplitDirection / SplitSpec: The split line
- SplitResult / SplitShares: What a split evaluates to
"""

from parcelsplit.domain.geometry import Extent, Point, Rect
from parcelsplit.domain.split import (
    GENERIC_LABELS,
    SplitDirection,
    SplitResult,
    SplitShares,
    SplitSpec,
)

__all__: list[str] = [
    # Enums
    "SplitDirection",
    # Core types
    "Point",
    "Rect",
    "Extent",
    "SplitSpec",
    "SplitResult",
    "SplitShares",
    "GENERIC_LABELS",
]
