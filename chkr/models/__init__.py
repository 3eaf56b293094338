"""Data models for checksum verification."""

from chkr.models.checksum import (
    ChecksumError,
    ChecksumRecord,
    ChecksumResult,
    FileUnreadable,
    FileUnreadableError,
    ManifestItem,
    ManifestUnavailableError,
    Match,
    Mismatch,
    Outcome,
    RecordParseError,
)

__all__ = [
    "ChecksumError",
    "ManifestUnavailableError",
    "FileUnreadableError",
    "ChecksumRecord",
    "ChecksumResult",
    "FileUnreadable",
    "RecordParseError",
    "Match",
    "Mismatch",
    "Outcome",
    "ManifestItem",
]
