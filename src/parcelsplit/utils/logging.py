"""Logging utilities for parcelsplit."""

import logging
from datetime import datetime
from pathlib import Path

import structlog

from parcelsplit.domain import Point, SplitResult


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"parcelsplit_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("parcelsplit")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class SessionLogger:
    """Logger for session transitions and split evaluations."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger

    def log_transition(self, event: str, source: str, target: str) -> None:
        """Log a state change."""
        self._logger.debug("Session transition", event=event, source=source, target=target)

    def log_event_ignored(self, event: str, state: str, reason: str) -> None:
        """Log an input event that had no effect."""
        self._logger.debug("Session event ignored", event=event, state=state, reason=reason)

    def log_vertex_added(self, point: Point, vertex_count: int) -> None:
        self._logger.debug(
            "Vertex added",
            x=round(point.x, 2),
            y=round(point.y, 2),
            vertices=vertex_count,
        )

    def log_polygon_finished(self, vertex_count: int, pixel_area: float) -> None:
        """Log a completed polygon."""
        self._logger.info(
            "Polygon defined",
            vertices=vertex_count,
            pixel_area=round(pixel_area, 2),
        )

    def log_split_evaluated(self, result: SplitResult) -> None:
        """Log the outcome of a split evaluation."""
        self._logger.debug(
            "Split evaluated",
            label1=result.label1,
            area1=round(result.area1, 4),
            label2=result.label2,
            area2=round(result.area2, 4),
            vertices1=len(result.sub_polygon1),
            vertices2=len(result.sub_polygon2),
        )
