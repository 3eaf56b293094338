"""Hashing utilities for file integrity verification."""

import hashlib
from pathlib import Path

from chkr.models.checksum import FileUnreadableError, Match, Mismatch, Outcome


def compute_digest(data: bytes) -> str:
    """Compute MD5 digest of data.

    Args:
        data: Bytes to hash.

    Returns:
        Lowercase hexadecimal digest.
    """
    return hashlib.md5(data).hexdigest()


def compute_file_digest(path: Path, chunk_size: int = 8192) -> str:
    """Compute MD5 digest of file in chunks for memory efficiency.

    Args:
        path: Path to file.
        chunk_size: Size of chunks to read.

    Returns:
        Lowercase hexadecimal digest.

    Raises:
        FileNotFoundError: If file doesn't exist.
        OSError: If file can't be read.
    """
    hash_obj = hashlib.md5()

    with open(path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            hash_obj.update(chunk)

    return hash_obj.hexdigest()


def verify_checksum(path: Path, expected_digest: str, chunk_size: int = 8192) -> Outcome:
    """Verify file content against an expected digest.

    The comparison is case-sensitive; callers supply lowercase hex.

    Args:
        path: Path to file.
        expected_digest: Expected lowercase hex digest.
        chunk_size: Size of chunks to read.

    Returns:
        Match, or Mismatch carrying both digests.

    Raises:
        FileUnreadableError: If the file can't be opened or read.
    """
    try:
        actual_digest = compute_file_digest(Path(path), chunk_size)
    except OSError as e:
        raise FileUnreadableError(path, e.strerror or str(e)) from e
    except ValueError as e:
        # open() rejects paths with embedded NUL bytes
        raise FileUnreadableError(path, str(e)) from e

    if actual_digest == expected_digest:
        return Match()
    return Mismatch(expected=expected_digest, actual=actual_digest)

