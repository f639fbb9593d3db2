"""Utility functions for parcelsplit.

This module provides logging setup and configuration, plus the session
logger used to trace state-machine transitions.
"""

from parcelsplit.utils.logging import SessionLogger, configure_logging

__all__ = [
    "SessionLogger",
    "configure_logging",
]
