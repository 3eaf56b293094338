"""Verify files against md5sum-style checksum manifests."""

__version__ = "0.1.0"
