"""Tests for logging setup and helpers."""

import logging
from pathlib import Path

import pytest

from member_reflector.infrastructure.logging import LoggerSetup, get_logger, log_timing


@log_timing
def add(a: int, b: int) -> int:
    return a + b


@log_timing
def explode() -> None:
    raise RuntimeError("boom")


@pytest.mark.unit
class TestLoggerSetup:
    def test_initialize_creates_log_file(self, tmp_path: Path):
        LoggerSetup.initialize(tmp_path / "logs", verbose=True)

        log_file = LoggerSetup.get_log_file_path()
        assert LoggerSetup.is_initialized() is True
        assert log_file is not None
        assert log_file.parent == tmp_path / "logs"
        assert log_file.name.startswith("member_reflector_")

        get_logger("member_reflector.test").debug("written to file")
        for handler in logging.getLogger("member_reflector").handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_initialize_is_idempotent(self, tmp_path: Path):
        LoggerSetup.initialize(tmp_path, verbose=False)
        handlers = list(logging.getLogger("member_reflector").handlers)

        LoggerSetup.initialize(tmp_path, verbose=True)

        assert logging.getLogger("member_reflector").handlers == handlers

    def test_reset_removes_handlers(self, tmp_path: Path):
        before = list(logging.getLogger("member_reflector").handlers)
        LoggerSetup.initialize(tmp_path)

        LoggerSetup.reset()

        assert LoggerSetup.is_initialized() is False
        assert LoggerSetup.get_log_file_path() is None
        assert logging.getLogger("member_reflector").handlers == before


@pytest.mark.unit
class TestLogTiming:
    def test_returns_result_and_logs(self, caplog):
        caplog.set_level(logging.DEBUG, logger=__name__)

        assert add(2, 3) == 5

        assert "Starting add" in caplog.text
        assert "Completed add in" in caplog.text

    def test_reraises_and_logs_failure(self, caplog):
        caplog.set_level(logging.DEBUG, logger=__name__)

        with pytest.raises(RuntimeError, match="boom"):
            explode()

        assert "Failed explode after" in caplog.text

    def test_preserves_metadata(self):
        assert add.__name__ == "add"
