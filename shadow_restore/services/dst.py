"""Normalize snapshot times to the UTC token used in ``@GMT-`` paths."""

from datetime import datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from ..config import Settings, settings as default_settings
from ..models.snapshot import SnapshotMatch, SnapshotRecord

GMT_TOKEN_FORMAT = "%Y.%m.%d-%H.%M.%S"


class DstPolicy:
    """Shift snapshot times taken before ``cutover`` by ``shift``.

    The listing tool recorded local time without a usable offset before the
    cutover, so those snapshots are an hour ahead of their namespace token.
    A policy without a cutover leaves every timestamp untouched.
    """

    def __init__(
        self,
        cutover: Optional[datetime] = datetime(2019, 3, 10),
        shift: timedelta = timedelta(hours=-1),
        local_timezone: Optional[str] = None,
    ):
        self.cutover = cutover
        self.shift = shift
        self.local_timezone = local_timezone

    @classmethod
    def from_settings(cls, cfg: Optional[Settings] = None) -> "DstPolicy":
        cfg = cfg or default_settings
        return cls(
            cutover=cfg.dst_cutover,
            shift=timedelta(hours=cfg.dst_shift_hours),
            local_timezone=cfg.local_timezone,
        )

    def applies_to(self, local: datetime) -> bool:
        return self.cutover is not None and _naive(local) < _naive(self.cutover)

    def corrected(self, local: datetime) -> datetime:
        return local + self.shift if self.applies_to(local) else local

    def to_utc(self, local: datetime) -> datetime:
        shifted = self.corrected(local)
        if shifted.tzinfo is None and self.local_timezone:
            shifted = shifted.replace(tzinfo=ZoneInfo(self.local_timezone))
        # naive datetimes are taken as system local time
        return shifted.astimezone(timezone.utc)

    def token(self, local: datetime) -> str:
        return self.to_utc(local).strftime(GMT_TOKEN_FORMAT)

    def describe(self) -> dict:
        return {
            "cutover": self.cutover.isoformat() if self.cutover else None,
            "shift_hours": self.shift.total_seconds() / 3600,
            "local_timezone": self.local_timezone,
        }


def normalize(record: SnapshotRecord, policy: DstPolicy) -> SnapshotMatch:
    utc = policy.to_utc(record.created_at)
    return SnapshotMatch(
        record=record,
        normalized_utc=utc,
        token=utc.strftime(GMT_TOKEN_FORMAT),
    )


def _naive(dt: datetime) -> datetime:
    """Strip timezone for comparison."""
    return dt.replace(tzinfo=None) if dt.tzinfo else dt
