"""Data models."""

from .common import AddressingMode, DriveAddress, ShareAddress, TimeBucket
from .snapshot import SnapshotListing, SnapshotMatch, SnapshotRecord
from .restore import (
    CopyOutcome,
    NotifyOutcome,
    OutcomeStatus,
    RestoreRequest,
    RestoreResult,
)

__all__ = [
    "AddressingMode",
    "DriveAddress",
    "ShareAddress",
    "TimeBucket",
    "SnapshotListing",
    "SnapshotMatch",
    "SnapshotRecord",
    "CopyOutcome",
    "NotifyOutcome",
    "OutcomeStatus",
    "RestoreRequest",
    "RestoreResult",
]
