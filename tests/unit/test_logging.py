"""Tests for logging configuration and the session logger."""

import logging
from unittest.mock import MagicMock

import pytest

from parcelsplit.domain import Point, SplitResult
from parcelsplit.utils import SessionLogger, configure_logging


@pytest.fixture
def restore_root_handlers():
    """Remove handlers added by configure_logging after the test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_log_file(self, tmp_path, restore_root_handlers):  # noqa: ARG002
        """Test the log file is created and receives the init record."""
        log_file = tmp_path / "split.log"
        logger = configure_logging(log_file=log_file, quiet=True)

        assert logger is not None
        assert log_file.exists()
        assert "Logging initialized" in log_file.read_text(encoding="utf-8")

    def test_quiet_adds_no_console_handler(self, tmp_path, restore_root_handlers):  # noqa: ARG002
        before = len(logging.getLogger().handlers)
        configure_logging(log_file=tmp_path / "split.log", quiet=True)
        assert len(logging.getLogger().handlers) == before + 1


class TestSessionLogger:
    """Tests for SessionLogger."""

    def test_transition(self):
        bound = MagicMock()
        SessionLogger(bound).log_transition("click", "polygon_ready", "split_placed")
        bound.debug.assert_called_once_with(
            "Session transition", event="click", source="polygon_ready", target="split_placed"
        )

    def test_polygon_finished_rounds_area(self):
        bound = MagicMock()
        SessionLogger(bound).log_polygon_finished(5, 1234.5678)
        bound.info.assert_called_once_with("Polygon defined", vertices=5, pixel_area=1234.57)

    def test_split_evaluated(self):
        bound = MagicMock()
        result = SplitResult(
            300.0,
            700.0,
            "Left Area",
            "Right Area",
            sub_polygon1=(Point(0, 0), Point(30, 0), Point(30, 100), Point(0, 100)),
        )
        SessionLogger(bound).log_split_evaluated(result)

        _, kwargs = bound.debug.call_args
        assert kwargs["label1"] == "Left Area"
        assert kwargs["vertices1"] == 4
        assert kwargs["vertices2"] == 0
