"""Utility modules for logging and hashing."""

from chkr.utils.hashing import compute_digest, compute_file_digest, verify_checksum

__all__ = [
    "compute_digest",
    "compute_file_digest",
    "verify_checksum",
]
