"""Interactive session layer for parcelsplit.

Key classes:
- ParcelSession: State machine driven by discrete input events
- SessionState: The states a session moves through
- DisplayTransform: Display <-> native coordinate scaling
"""

from parcelsplit.session.machine import ParcelSession, SessionState
from parcelsplit.session.transform import DisplayTransform, clamp_to_extent

__all__ = [
    "DisplayTransform",
    "ParcelSession",
    "SessionState",
    "clamp_to_extent",
]
