"""Reduction of verification results to a single run status."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from chkr.models.checksum import ChecksumResult, ManifestItem, Match, Outcome, RecordParseError


class Status(IntEnum):
    """Run severity, ordered so the worst one wins.

    Values double as process exit codes.
    """

    OK = 0
    MISMATCH = 1
    ERROR = 2


def outcome_status(outcome: Outcome) -> Status:
    """Map a completed comparison to its severity."""
    return Status.OK if isinstance(outcome, Match) else Status.MISMATCH


def status_of(item: ManifestItem) -> Status:
    """Map a pipeline element to its severity.

    Args:
        item: Checksum result or record parse error.

    Returns:
        Status for this element alone.
    """
    if isinstance(item, RecordParseError) or item.error is not None:
        return Status.ERROR
    return outcome_status(item.outcome)


def worst(a: Status, b: Status) -> Status:
    """Return the more severe of two statuses."""
    return max(a, b)


def aggregate_status(items: Iterable[ManifestItem]) -> Status:
    """Fold elements into the worst observed status, in order."""
    status = Status.OK
    for item in items:
        status = worst(status, status_of(item))
    return status


@dataclass
class VerificationSummary:
    """Counts of a manifest run, folded one element at a time."""

    matched: int = 0
    mismatched: int = 0
    file_errors: int = 0
    parse_errors: int = 0
    status: Status = Status.OK

    @property
    def total(self) -> int:
        """Number of elements seen."""
        return self.matched + self.mismatched + self.file_errors + self.parse_errors

    @property
    def errors(self) -> int:
        """Parse errors and unreadable files combined."""
        return self.file_errors + self.parse_errors

    def add(self, item: ManifestItem) -> Status:
        """Count an element and fold its status.

        Args:
            item: Checksum result or record parse error.

        Returns:
            Status of this element alone.
        """
        item_status = status_of(item)

        if isinstance(item, RecordParseError):
            self.parse_errors += 1
        elif isinstance(item, ChecksumResult) and item.error is not None:
            self.file_errors += 1
        elif item_status == Status.MISMATCH:
            self.mismatched += 1
        else:
            self.matched += 1

        self.status = worst(self.status, item_status)
        return item_status
