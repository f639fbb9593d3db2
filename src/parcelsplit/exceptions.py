"""Exception hierarchy for parcelsplit.

The geometry core never raises; these errors belong to the layers around
it (file input, session events, command line).
"""


class ParcelSplitError(Exception):
    """Base exception for all parcelsplit errors."""

    pass


class InputError(ParcelSplitError):
    """Errors related to user-supplied files or values."""

    pass


class ImageLoadError(InputError):
    """Error reading a parcel image."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class PolygonFileError(InputError):
    """Invalid or unreadable polygon file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid polygon file '{path}': {reason}")


class InvalidExtentError(InputError):
    """Image or display size that cannot be used for coordinate mapping."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Invalid extent {width}x{height}")


class SessionStateError(ParcelSplitError):
    """Event not allowed in the session's current state."""

    def __init__(self, event: str, state: str) -> None:
        self.event = event
        self.state = state
        super().__init__(f"Cannot {event} while session is {state}")
