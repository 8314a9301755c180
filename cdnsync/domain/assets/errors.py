"""
Asset publishing errors: pure Python
"""
from __future__ import annotations


class CdnSyncError(Exception):
    """Base error for the publishing pipeline."""
    pass


class StorageError(CdnSyncError):
    """Object storage call failed (network, permission, missing bucket)."""
    pass


class DiffUnavailableError(CdnSyncError):
    """git diff could not be computed (no repo, unknown revision, git missing)."""
    pass


class BuildMetadataError(CdnSyncError):
    """Build metadata file missing, unreadable or without a build id."""
    pass
