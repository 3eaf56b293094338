"""Logging configuration and utilities."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chkr.models.checksum import ManifestItem, Mismatch, RecordParseError

if TYPE_CHECKING:
    from chkr.verify.status import VerificationSummary

# Create module logger
logger = logging.getLogger("chkr")


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    verbose: bool = False,
) -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional path to log file.
        verbose: If True, include debug information.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    if verbose:
        log_level = logging.DEBUG
    logger.setLevel(logging.DEBUG if log_file else log_level)

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    # Format - simpler for console
    if verbose:
        console_format = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        console_format = logging.Formatter("%(message)s")

    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Always verbose in file

        file_format = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)


def describe_item(item: ManifestItem) -> dict[str, Any]:
    """Flatten a pipeline element into JSON-serializable details.

    Args:
        item: Checksum result or record parse error.

    Returns:
        Dictionary with file, status and outcome details.
    """
    if isinstance(item, RecordParseError):
        return {
            "file": None,
            "status": "parse_error",
            "line_number": item.line_number,
            "line": item.line,
            "error": item.message,
        }

    details: dict[str, Any] = {"file": item.file}
    if item.error is not None:
        details["status"] = "error"
        details["error"] = item.error.message
    elif isinstance(item.outcome, Mismatch):
        details["status"] = "mismatch"
        details["expected"] = item.outcome.expected
        details["actual"] = item.outcome.actual
    else:
        details["status"] = "match"
    return details


class ResultLogger:
    """Structured logging of verification results with JSONL output."""

    def __init__(self, log_path: Path | None = None) -> None:
        """Initialize result logger.

        Args:
            log_path: Path to JSONL log file. Nothing is written when None.
        """
        self.log_path = log_path
        if log_path:
            log_path.parent.mkdir(parents=True, exist_ok=True)

    def _append(self, entry: dict[str, Any]) -> None:
        if not self.log_path:
            return
        entry = {"timestamp": datetime.now().isoformat(), **entry}
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_run_start(self, manifest_path: Path, total: int) -> None:
        """Log start of a manifest run.

        Args:
            manifest_path: Resolved manifest path.
            total: Number of elements that will be verified.
        """
        self._append(
            {
                "event": "run_start",
                "manifest": str(manifest_path),
                "total": total,
            }
        )

    def log_result(self, item: ManifestItem) -> None:
        """Log one pipeline element.

        Args:
            item: Checksum result or record parse error.
        """
        self._append({"event": "result", **describe_item(item)})

    def log_run_complete(
        self,
        summary: "VerificationSummary",
        duration_seconds: float,
    ) -> None:
        """Log completion of a manifest run.

        Args:
            summary: Folded run summary.
            duration_seconds: Total verification time.
        """
        logger.info(
            f"Verification complete: {summary.matched} matched, "
            f"{summary.mismatched} mismatched, {summary.file_errors} unreadable, "
            f"{summary.parse_errors} unparseable in {duration_seconds:.1f}s"
        )
        self._append(
            {
                "event": "run_complete",
                "matched": summary.matched,
                "mismatched": summary.mismatched,
                "file_errors": summary.file_errors,
                "parse_errors": summary.parse_errors,
                "status": summary.status.name.lower(),
                "exit_code": int(summary.status),
                "duration_seconds": duration_seconds,
            }
        )
