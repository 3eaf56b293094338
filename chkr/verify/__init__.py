"""Manifest verification pipeline and status reduction."""

from chkr.verify.manifest import (
    ChecksumResultsIter,
    parse_manifest,
    verify_manifest,
)
from chkr.verify.status import (
    Status,
    VerificationSummary,
    aggregate_status,
    outcome_status,
    status_of,
)

__all__ = [
    "ChecksumResultsIter",
    "parse_manifest",
    "verify_manifest",
    "Status",
    "VerificationSummary",
    "aggregate_status",
    "outcome_status",
    "status_of",
]
