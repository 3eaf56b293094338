"""Tests for logging utilities."""

import json
import logging
from pathlib import Path

from chkr.models.checksum import (
    ChecksumResult,
    FileUnreadable,
    Match,
    Mismatch,
    RecordParseError,
)
from chkr.utils.logging import ResultLogger, describe_item, logger, setup_logging
from chkr.verify.status import VerificationSummary


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_only(self):
        """Test a single console handler at the requested level."""
        setup_logging(level="WARNING")

        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.WARNING

    def test_verbose_enables_debug(self):
        """Test verbose overrides the level."""
        setup_logging(level="ERROR", verbose=True)

        assert logger.handlers[0].level == logging.DEBUG

    def test_log_file(self, tmp_path: Path):
        """Test the file handler always records debug messages."""
        log_file = tmp_path / "logs" / "chkr.log"
        setup_logging(level="ERROR", log_file=log_file)

        logger.debug("hashing foo.txt")
        for handler in logger.handlers:
            handler.flush()

        assert "hashing foo.txt" in log_file.read_text(encoding="utf-8")


class TestDescribeItem:
    """Tests for describe_item."""

    def test_match(self):
        """Test match details."""
        item = ChecksumResult(file="foo.txt", outcome=Match())
        assert describe_item(item) == {"file": "foo.txt", "status": "match"}

    def test_mismatch(self):
        """Test mismatch details carry both digests."""
        item = ChecksumResult(file="bar.txt", outcome=Mismatch(expected="aa", actual="bb"))

        assert describe_item(item) == {
            "file": "bar.txt",
            "status": "mismatch",
            "expected": "aa",
            "actual": "bb",
        }

    def test_file_error(self):
        """Test unreadable file details."""
        item = ChecksumResult(
            file="gone.txt", error=FileUnreadable(file="gone.txt", message="No such file")
        )

        assert describe_item(item)["status"] == "error"
        assert describe_item(item)["error"] == "No such file"

    def test_parse_error(self):
        """Test parse error details."""
        item = RecordParseError(line_number=2, line="garbage", message="bad")

        details = describe_item(item)

        assert details["status"] == "parse_error"
        assert details["line_number"] == 2
        assert details["file"] is None


class TestResultLogger:
    """Tests for ResultLogger."""

    def test_jsonl_output(self, tmp_path: Path):
        """Test a run writes start, result and completion lines."""
        log_path = tmp_path / "logs" / "results.jsonl"
        result_logger = ResultLogger(log_path)
        item = ChecksumResult(file="foo.txt", outcome=Match())
        summary = VerificationSummary()
        summary.add(item)

        result_logger.log_run_start(Path("/data/checksum.txt"), 1)
        result_logger.log_result(item)
        result_logger.log_run_complete(summary, 0.5)

        entries = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]

        assert [e["event"] for e in entries] == ["run_start", "result", "run_complete"]
        assert entries[0]["total"] == 1
        assert entries[1]["file"] == "foo.txt"
        assert entries[1]["status"] == "match"
        assert entries[2]["status"] == "ok"
        assert entries[2]["exit_code"] == 0
        assert all("timestamp" in e for e in entries)

    def test_no_path_writes_nothing(self, tmp_path: Path):
        """Test logging without a path is a no-op on disk."""
        result_logger = ResultLogger()
        result_logger.log_result(ChecksumResult(file="foo.txt", outcome=Match()))

        assert list(tmp_path.iterdir()) == []
