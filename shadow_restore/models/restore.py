"""Restore-related models."""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from .common import AddressingMode, DriveAddress, ShareAddress, TimeBucket
from .snapshot import SnapshotMatch


class RestoreRequest(BaseModel):
    date: str
    time_bucket: TimeBucket
    system: str = Field(min_length=1)
    addressing: AddressingMode
    path: str = ""  # relative to the snapshot root
    file: Optional[str] = None
    destination: str = Field(min_length=1)
    email: Optional[str] = None
    recursive: Optional[bool] = None  # None: share copies recursively, drive does not

    @model_validator(mode="before")
    @classmethod
    def _flat_drive_or_share(cls, data: Any) -> Any:
        """Accept ``drive=``/``share=`` and turn them into ``addressing``."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        drive = data.pop("drive", None) or None
        share = data.pop("share", None) or None
        if drive is None and share is None:
            return data
        if "addressing" in data:
            raise ValueError("give either addressing or drive/share, not both")
        if drive is not None and share is not None:
            raise ValueError("drive and share are mutually exclusive")
        if drive is not None:
            data["addressing"] = {"kind": "drive", "letter": drive}
        else:
            data["addressing"] = {"kind": "share", "name": share}
        return data

    @property
    def copies_recursively(self) -> bool:
        if self.recursive is not None:
            return self.recursive
        return isinstance(self.addressing, ShareAddress)

    @property
    def uses_drive(self) -> bool:
        return isinstance(self.addressing, DriveAddress)


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    SKIPPED = "skipped"
    FAILED = "failed"  # attempted and did not go through


class CopyOutcome(BaseModel):
    status: OutcomeStatus
    source_path: str
    destination: str
    copied: list[str] = Field(default_factory=list)
    reason: Optional[str] = None
    checksum_match: Optional[bool] = None


class NotifyOutcome(BaseModel):
    status: OutcomeStatus
    recipient: Optional[str] = None
    reason: Optional[str] = None


class RestoreResult(BaseModel):
    request: RestoreRequest
    target_time: datetime
    match: SnapshotMatch
    snapshot_path: str
    copy_outcome: CopyOutcome
    notification: NotifyOutcome
    completed_at: datetime = Field(default_factory=datetime.now)

    @property
    def ok(self) -> bool:
        return self.copy_outcome.status == OutcomeStatus.SUCCESS
