"""Manifest parsing and lazy verification of the files it lists."""

from collections.abc import Iterable, Iterator
from pathlib import Path

from chkr.models.checksum import (
    ChecksumRecord,
    ChecksumResult,
    FileUnreadable,
    FileUnreadableError,
    ManifestItem,
    ManifestUnavailableError,
    RecordParseError,
)
from chkr.utils.hashing import verify_checksum
from chkr.utils.logging import logger

# Parsed manifest line: a record, or the reason it couldn't be parsed
ManifestEntry = ChecksumRecord | RecordParseError

# md5sum writes "<digest>  <file>", or "<digest> *<file>" in binary mode
BINARY_MODE_MARKER = "*"

UTF8_BOM = b"\xef\xbb\xbf"


def parse_line(line: str, line_number: int) -> ManifestEntry | None:
    """Parse a single manifest line.

    The line is split on single spaces, so the conventional two-space
    separator produces an empty middle field. The digest is the first field
    and the filename the last one.

    Args:
        line: Manifest line without its line terminator.
        line_number: 1-based line number, for error reporting.

    Returns:
        ChecksumRecord, RecordParseError for a malformed line, or None if the
        line has an empty digest or filename and should be skipped.
    """
    fields = line.split(" ")
    digest = fields[0].strip()
    filename = fields[-1].strip()

    if not digest or not filename:
        return None

    tokens = [f for f in fields if f.strip()]
    if len(tokens) != 2:
        return RecordParseError(
            line_number=line_number,
            line=line,
            message=f"expected 2 fields (digest and filename), found {len(tokens)}",
        )

    if filename.startswith(BINARY_MODE_MARKER):
        filename = filename[len(BINARY_MODE_MARKER):]
        if not filename:
            return None

    return ChecksumRecord(file=filename, checksum=digest)


def decode_line(raw: bytes, line_number: int) -> str | RecordParseError:
    """Decode one raw manifest line as UTF-8.

    Args:
        raw: Line bytes, with or without line terminator.
        line_number: 1-based line number, for error reporting.

    Returns:
        Decoded line, or RecordParseError if it isn't valid UTF-8.
    """
    if line_number == 1 and raw.startswith(UTF8_BOM):
        raw = raw[len(UTF8_BOM):]

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        return RecordParseError(
            line_number=line_number,
            line=raw.decode("utf-8", errors="replace").rstrip("\r\n"),
            message=f"not valid UTF-8: {e.reason} at byte {e.start}",
        )


def parse_lines(lines: Iterable[str | bytes]) -> Iterator[ManifestEntry]:
    """Parse manifest lines, skipping the ones with nothing to verify.

    Byte lines are decoded one at a time, so a single undecodable line
    becomes a parse error instead of failing the whole manifest.

    Args:
        lines: Manifest lines, with or without line terminators.

    Yields:
        ChecksumRecord or RecordParseError, in manifest order.
    """
    for line_number, line in enumerate(lines, start=1):
        if isinstance(line, bytes):
            line = decode_line(line, line_number)
            if isinstance(line, RecordParseError):
                yield line
                continue

        entry = parse_line(line.rstrip("\r\n"), line_number)
        if entry is not None:
            yield entry


def parse_manifest(path: Path) -> list[ManifestEntry]:
    """Read and parse a checksum manifest.

    Args:
        path: Path to manifest file.

    Returns:
        Ordered list of records and per-line parse errors.

    Raises:
        ManifestUnavailableError: If the manifest can't be opened or read.
    """
    try:
        with open(path, "rb") as f:
            return list(parse_lines(f))
    except OSError as e:
        raise ManifestUnavailableError(path, str(e)) from e


class ChecksumResultsIter:
    """Lazy, single-pass verification of parsed manifest entries.

    Each call to ``next`` hashes at most one file. Parse errors are passed
    through as they are. The total is fixed when the iterator is created so
    progress can be reported before anything is hashed.
    """

    def __init__(
        self,
        entries: list[ManifestEntry],
        working_directory: Path,
        manifest_path: Path | None = None,
    ) -> None:
        """Initialize with parsed entries.

        Args:
            entries: Records and parse errors, in manifest order.
            working_directory: Directory record paths are relative to.
            manifest_path: Resolved manifest path, for reporting.
        """
        self._entries = iter(entries)
        self._total = len(entries)
        self._consumed = 0
        self._working_directory = working_directory
        self._manifest_path = manifest_path

    @property
    def total(self) -> int:
        """Number of elements the iterator yields in total."""
        return self._total

    @property
    def consumed(self) -> int:
        """Number of elements yielded so far."""
        return self._consumed

    @property
    def working_directory(self) -> Path:
        """Directory record paths are resolved against."""
        return self._working_directory

    @property
    def manifest_path(self) -> Path | None:
        """Resolved manifest path, or None when built from entries."""
        return self._manifest_path

    def __len__(self) -> int:
        return self._total

    def __iter__(self) -> "ChecksumResultsIter":
        return self

    def __next__(self) -> ManifestItem:
        entry = next(self._entries)
        self._consumed += 1

        if isinstance(entry, RecordParseError):
            logger.debug(f"Unparseable manifest {entry}")
            return entry

        return self._verify_record(entry)

    def _verify_record(self, record: ChecksumRecord) -> ChecksumResult:
        """Hash one record's file, converting read failures to a value."""
        file_path = self._working_directory / record.file

        try:
            outcome = verify_checksum(file_path, record.checksum)
        except FileUnreadableError as e:
            logger.debug(f"{record.file}: unreadable: {e.reason}")
            return ChecksumResult(
                file=record.file,
                error=FileUnreadable(file=record.file, message=e.reason),
            )

        logger.debug(f"{record.file}: {outcome}")
        return ChecksumResult(file=record.file, outcome=outcome)


def verify_manifest(manifest_path: Path | str) -> ChecksumResultsIter:
    """Verify checksums of files according to a manifest file.

    Record paths are resolved against the manifest's own directory, so a
    manifest and its files can be moved together.

    Args:
        manifest_path: Path to manifest file.

    Returns:
        Lazy iterator over per-record results.

    Raises:
        ManifestUnavailableError: If the manifest doesn't exist or can't be
            read. Nothing is verified in that case.
    """
    try:
        resolved = Path(manifest_path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise ManifestUnavailableError(manifest_path, str(e)) from e

    entries = parse_manifest(resolved)
    logger.debug(f"Parsed {len(entries)} entries from {resolved}")

    return ChecksumResultsIter(entries, resolved.parent, resolved)
