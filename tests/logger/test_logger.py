"""Tests for the pkgverify logging package."""

import logging
import os
from logging.handlers import QueueHandler, RotatingFileHandler
from pathlib import Path

from pkgverify.constants import LOG_DIR_ENV_VAR, LOG_FILE_NAME
from pkgverify.logger import (
    HybridConsoleFormatter,
    flush_all_handlers,
    get_logger,
    get_state,
    setup_logging,
)

STRUCTURED_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def _record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="pkgverify.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestHybridConsoleFormatter:
    """Test HybridConsoleFormatter."""

    def test_info_shows_message_only(self) -> None:
        formatter = HybridConsoleFormatter(STRUCTURED_FORMAT)

        assert formatter.format(_record(logging.INFO, "hello")) == "hello"

    def test_warning_is_structured_and_colored(self) -> None:
        formatter = HybridConsoleFormatter(STRUCTURED_FORMAT)
        record = _record(logging.WARNING, "careful")

        output = formatter.format(record)

        assert output.startswith("pkgverify.test - ")
        assert "\033[33mWARNING\033[0m" in output
        assert output.endswith("careful")

    def test_record_levelname_is_restored(self) -> None:
        formatter = HybridConsoleFormatter(STRUCTURED_FORMAT)
        record = _record(logging.ERROR, "boom")

        formatter.format(record)

        assert record.levelname == "ERROR"


class TestLoggerSetup:
    """Test the shared root logger."""

    def test_child_logger_name(self) -> None:
        logger = get_logger("pkgverify.core.verification.client")

        assert logger.name == "pkgverify.core.verification.client"
        assert get_state().root_initialized is True

    def test_root_initialized_once(self, tmp_path: Path) -> None:
        get_logger(__name__)
        setup_logging(
            console_level="DEBUG",
            file_level="DEBUG",
            log_file=tmp_path / "ignored.log",
        )

        root = logging.getLogger("pkgverify")
        queue_handlers = [
            h for h in root.handlers if isinstance(h, QueueHandler)
        ]
        assert len(queue_handlers) == 1
        assert not (tmp_path / "ignored.log").exists()

    def test_listener_has_console_and_file_handlers(self) -> None:
        get_logger(__name__)
        listener = get_state().queue_listener

        assert listener is not None
        assert any(
            isinstance(h, RotatingFileHandler) for h in listener.handlers
        )
        assert any(
            type(h) is logging.StreamHandler for h in listener.handlers
        )

    def test_writes_to_log_directory_override(self) -> None:
        logger = get_logger("pkgverify.tests.file")
        log_file = Path(os.environ[LOG_DIR_ENV_VAR]) / LOG_FILE_NAME

        logger.warning("written to file %d", 42)
        flush_all_handlers()

        assert "written to file 42" in log_file.read_text(encoding="utf-8")
