"""Data models for checksum verification."""

from dataclasses import dataclass
from pathlib import Path


class ChecksumError(Exception):
    """Base class for checksum verification errors."""

    pass


class ManifestUnavailableError(ChecksumError):
    """Raised when a manifest cannot be resolved, opened, or decoded."""

    def __init__(self, manifest_path: Path | str, message: str) -> None:
        super().__init__(f"Manifest unavailable: {manifest_path}: {message}")
        self.manifest_path = manifest_path


class FileUnreadableError(ChecksumError):
    """Raised when a file cannot be opened or fully read for hashing."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.reason = message


@dataclass(frozen=True)
class ChecksumRecord:
    """One parsed (file, expected digest) pair from a manifest."""

    file: str  # Relative to the manifest's directory
    checksum: str  # Lowercase hex digest


@dataclass(frozen=True)
class Match:
    """Computed digest equals the expected one."""

    def __str__(self) -> str:
        return "Match"


@dataclass(frozen=True)
class Mismatch:
    """Computed digest differs from the expected one."""

    expected: str
    actual: str

    def __str__(self) -> str:
        return f"Mismatch (expected {self.expected}, actual {self.actual})"


Outcome = Match | Mismatch


@dataclass(frozen=True)
class RecordParseError:
    """A manifest line that could not be parsed into a record."""

    line_number: int
    line: str
    message: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}"


@dataclass(frozen=True)
class FileUnreadable:
    """A record whose file could not be hashed."""

    file: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ChecksumResult:
    """Verification result for a single manifest record.

    Exactly one of ``outcome`` and ``error`` is set.
    """

    file: str
    outcome: Outcome | None = None
    error: FileUnreadable | None = None

    def __post_init__(self) -> None:
        if (self.outcome is None) == (self.error is None):
            raise ValueError("ChecksumResult needs exactly one of outcome or error")

    @property
    def ok(self) -> bool:
        """Check if the digest could be computed."""
        return self.error is None

    @property
    def matched(self) -> bool:
        """Check if the digest was computed and matched."""
        return isinstance(self.outcome, Match)


# Element yielded by the manifest pipeline
ManifestItem = ChecksumResult | RecordParseError
