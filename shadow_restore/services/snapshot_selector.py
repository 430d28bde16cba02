"""Pick the snapshot taken closest to, but not after, the target time."""

import logging
from datetime import datetime
from typing import Iterable, Optional

from ..config import Settings, settings as default_settings
from ..errors import NoSnapshotError
from ..models.snapshot import SnapshotRecord

logger = logging.getLogger(__name__)


def parse_snapshot_time(value: str, formats: Iterable[str]) -> Optional[datetime]:
    """Parse a creation timestamp as printed by the remote tool."""
    for fmt in formats:
        try:
            return datetime.strptime(value.strip(), fmt)
        except ValueError:
            continue
    return None


def build_records(
    timestamps: Iterable[str],
    target: datetime,
    cfg: Optional[Settings] = None,
) -> dict[str, SnapshotRecord]:
    """Map each raw timestamp to its distance from ``target`` in hours.

    A raw timestamp listed twice keeps the last record.
    """
    cfg = cfg or default_settings
    records: dict[str, SnapshotRecord] = {}
    for raw in timestamps:
        created = parse_snapshot_time(raw, cfg.snapshot_time_formats)
        if created is None:
            logger.warning(f"Skipping unparseable snapshot timestamp: {raw!r}")
            continue
        records[raw] = SnapshotRecord(
            creation_timestamp=raw,
            created_at=created,
            hours_from_target=(target - created).total_seconds() / 3600,
        )
    return records


def select_nearest_before(records: dict[str, SnapshotRecord]) -> Optional[SnapshotRecord]:
    """Smallest non-negative distance wins; ties go to the first inserted."""
    candidates = [r for r in records.values() if r.hours_from_target >= 0]
    if not candidates:
        return None
    candidates.sort(key=lambda r: r.hours_from_target)
    return candidates[0]


def choose_snapshot(
    host: str,
    timestamps: Iterable[str],
    target: datetime,
    cfg: Optional[Settings] = None,
) -> SnapshotRecord:
    records = build_records(timestamps, target, cfg)
    best = select_nearest_before(records)
    if best is None:
        raise NoSnapshotError(host, target)
    logger.info(
        f"{host}: using snapshot {best.creation_timestamp} "
        f"({best.hours_from_target:.2f}h before {target})"
    )
    return best
