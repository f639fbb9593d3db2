"""Interactive parcel-splitting session as an explicit state machine.

A session owns everything the user has entered so far: the image extent,
the polygon vertices, the total area and the split line. Discrete input
events move it between four states:

    IDLE -> DEFINING_POLYGON -> POLYGON_READY -> SPLIT_PLACED

Clicks are interpreted by state: while defining they add vertices, once
the polygon is ready a click inside it places the split line. Results are
recomputed on demand from the current snapshot; nothing is cached.
"""

import math
from collections.abc import Iterable
from enum import Enum

import structlog

from parcelsplit.core import (
    evaluate_split,
    point_in_polygon,
    polygon_area,
    polygon_bounds,
    split_shares,
)
from parcelsplit.domain import (
    Extent,
    Point,
    Rect,
    SplitDirection,
    SplitResult,
    SplitShares,
    SplitSpec,
)
from parcelsplit.exceptions import InputError, InvalidExtentError, SessionStateError
from parcelsplit.session.transform import DisplayTransform, clamp_to_extent
from parcelsplit.utils.logging import SessionLogger


class SessionState(str, Enum):
    """Where the session is in the define-then-split workflow."""

    IDLE = "idle"
    DEFINING_POLYGON = "defining_polygon"
    POLYGON_READY = "polygon_ready"
    SPLIT_PLACED = "split_placed"


class ParcelSession:
    """Caller-owned state for one parcel image.

    Not thread-safe; feed events from a single thread.

    Example:
        session = ParcelSession(total_area=1000.0)
        session.load_image(Extent(100, 100))
        session.start_polygon()
        for p in [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]:
            session.click(p)
        session.finish_polygon()
        session.click(Point(30, 50))
        session.result().area1  # 300.0
    """

    def __init__(
        self,
        total_area: float = 1264.0,
        direction: SplitDirection = SplitDirection.VERTICAL,
        logger: SessionLogger | None = None,
    ) -> None:
        if logger is None:
            logger = SessionLogger(structlog.get_logger(__name__))
        self._log = logger
        self._state = SessionState.IDLE
        self._extent: Extent | None = None
        self._vertices: list[Point] = []
        self._direction = direction
        self._split_coordinate: float | None = None
        self._pixel_area: float | None = None
        self._bounds: Rect | None = None
        self._total_area = 0.0
        self.set_total_area(total_area)

    # ---- read-only view -------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def has_image(self) -> bool:
        return self._extent is not None

    @property
    def extent(self) -> Extent | None:
        return self._extent

    @property
    def vertices(self) -> tuple[Point, ...]:
        return tuple(self._vertices)

    @property
    def direction(self) -> SplitDirection:
        return self._direction

    @property
    def split(self) -> SplitSpec:
        """Current split line (coordinate is None until placed)."""
        return SplitSpec(self._direction, self._split_coordinate)

    @property
    def total_area(self) -> float:
        return self._total_area

    @property
    def pixel_area(self) -> float | None:
        """Area of the finished polygon in native pixels."""
        return self._pixel_area

    @property
    def bounds(self) -> Rect | None:
        """Bounding rectangle of the finished polygon."""
        return self._bounds

    # ---- events ---------------------------------------------------------

    def load_image(self, extent: Extent) -> None:
        """Start over on a newly loaded image.

        Raises:
            InvalidExtentError: If the image has no area
        """
        if extent.width <= 0 or extent.height <= 0:
            raise InvalidExtentError(extent.width, extent.height)

        self._extent = extent
        self._clear_polygon()
        self._transition("load_image", SessionState.IDLE)

    def start_polygon(self) -> None:
        """Begin tracing a new polygon, discarding any previous one.

        Raises:
            SessionStateError: Without an image, or while already defining
        """
        if self._extent is None:
            raise SessionStateError("start polygon", "without an image")
        if self._state is SessionState.DEFINING_POLYGON:
            raise SessionStateError("start polygon", self._state.value)

        self._clear_polygon()
        self._transition("start_polygon", SessionState.DEFINING_POLYGON)

    def click(self, point: Point) -> None:
        """Handle a pointer click at a native image position."""
        if self._state is SessionState.DEFINING_POLYGON:
            self._vertices.append(point)
            self._log.log_vertex_added(point, len(self._vertices))
            return

        if self._state is SessionState.IDLE or self._extent is None:
            self._log.log_event_ignored("click", self._state.value, "no polygon")
            return

        if not point_in_polygon(point, self._vertices):
            self._log.log_event_ignored("click", self._state.value, "outside polygon")
            return

        clamped = clamp_to_extent(point, self._extent)
        if self._direction is SplitDirection.VERTICAL:
            self._split_coordinate = clamped.x
        else:
            self._split_coordinate = clamped.y
        self._transition("click", SessionState.SPLIT_PLACED)

    def click_display(self, point: Point, display: Extent) -> None:
        """Handle a click given in displayed-image coordinates.

        Args:
            point: Pointer position relative to the displayed image
            display: Size of the displayed image

        Raises:
            SessionStateError: If no image is loaded
        """
        if self._extent is None:
            raise SessionStateError("click", "without an image")
        self.click(DisplayTransform(self._extent, display).to_native(point))

    def add_vertices(self, points: Iterable[Point]) -> None:
        """Append several vertices at once, as from an imported file."""
        if self._state is not SessionState.DEFINING_POLYGON:
            raise SessionStateError("add vertices", self._state.value)
        for point in points:
            self.click(point)

    def finish_polygon(self) -> None:
        """Close the polygon being traced.

        With fewer than 3 vertices the polygon is discarded and the session
        returns to IDLE.

        Raises:
            SessionStateError: If no polygon is being defined
        """
        if self._state is not SessionState.DEFINING_POLYGON:
            raise SessionStateError("finish polygon", self._state.value)

        if len(self._vertices) < 3:
            self._clear_polygon()
            self._transition("finish_polygon", SessionState.IDLE)
            return

        self._pixel_area = polygon_area(self._vertices)
        self._bounds = polygon_bounds(self._vertices)
        self._log.log_polygon_finished(len(self._vertices), self._pixel_area)
        self._transition("finish_polygon", SessionState.POLYGON_READY)

    def reset(self) -> None:
        """Discard polygon and split, keeping the image."""
        self._clear_polygon()
        self._transition("reset", SessionState.IDLE)

    def set_direction(self, direction: SplitDirection) -> None:
        """Change split orientation; a placed split line is removed."""
        self._direction = direction
        self._split_coordinate = None
        if self._state is SessionState.SPLIT_PLACED:
            self._transition("set_direction", SessionState.POLYGON_READY)

    def set_total_area(self, total_area: float) -> None:
        """Set the parcel's known area.

        Non-positive values are accepted and make the split uncomputable.

        Raises:
            InputError: If the value is not a finite number
        """
        if not math.isfinite(total_area):
            raise InputError(f"Total area must be a finite number, got {total_area}")
        self._total_area = float(total_area)

    # ---- derived --------------------------------------------------------

    def result(self) -> SplitResult:
        """Evaluate the split for the current snapshot."""
        result = evaluate_split(self._vertices, self._total_area, self.split, self._extent)
        if not result.is_empty:
            self._log.log_split_evaluated(result)
        return result

    def shares(self) -> SplitShares:
        """Percentages for the current split."""
        return split_shares(self.result(), self._total_area)

    # ---- internals ------------------------------------------------------

    def _clear_polygon(self) -> None:
        self._vertices = []
        self._split_coordinate = None
        self._pixel_area = None
        self._bounds = None

    def _transition(self, event: str, target: SessionState) -> None:
        self._log.log_transition(event, self._state.value, target.value)
        self._state = target
