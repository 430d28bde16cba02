"""Snapshot-related models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class SnapshotRecord(BaseModel):
    creation_timestamp: str  # raw string as emitted by the remote tool
    created_at: datetime
    hours_from_target: float  # >= 0 means taken at or before the target


class SnapshotMatch(BaseModel):
    record: SnapshotRecord
    normalized_utc: datetime
    token: str  # yyyy.MM.dd-HH.mm.ss, goes after "@GMT-"


class SnapshotListing(BaseModel):
    system: str
    timestamps: list[str]
    target_time: Optional[datetime] = None
    match: Optional[SnapshotMatch] = None
