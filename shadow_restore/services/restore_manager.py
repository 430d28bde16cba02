"""Restore pipeline: pick a snapshot, copy out of it, notify."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Awaitable, Callable, Optional

from ..config import Settings, settings as default_settings
from ..models.restore import NotifyOutcome, OutcomeStatus, RestoreRequest, RestoreResult
from ..models.snapshot import SnapshotListing, SnapshotMatch
from ..recovery.engine import RestoreEngine
from ..utils.remote_commands import list_shadow_copies
from .dst import DstPolicy, normalize
from .notifier import Notifier
from .path_builder import build_snapshot_path
from .snapshot_selector import choose_snapshot
from .time_bucket import target_time

logger = logging.getLogger(__name__)

Lister = Callable[[str, Settings], Awaitable[list[str]]]


class RestoreManager:
    def __init__(
        self,
        cfg: Optional[Settings] = None,
        lister: Optional[Lister] = None,
        resolve_path: Callable[[str], Path] = Path,
        notifier: Optional[Notifier] = None,
    ):
        self.cfg = cfg or default_settings
        self._lister = lister or list_shadow_copies
        self._resolve_path = resolve_path
        self.notifier = notifier or Notifier(self.cfg)
        self.policy = DstPolicy.from_settings(self.cfg)

    async def find_snapshot(
        self, system: str, target: datetime
    ) -> tuple[list[str], SnapshotMatch]:
        timestamps = await self._lister(system, self.cfg)
        record = choose_snapshot(system, timestamps, target, self.cfg)
        match = normalize(record, self.policy)
        if self.policy.applies_to(record.created_at):
            logger.debug(f"DST correction applied to {record.creation_timestamp}")
        return timestamps, match

    async def list_snapshots(
        self,
        system: str,
        date: Optional[str] = None,
        time_bucket: Optional[str] = None,
    ) -> SnapshotListing:
        if date and time_bucket:
            target = target_time(date, time_bucket, self.cfg)
            timestamps, match = await self.find_snapshot(system, target)
            return SnapshotListing(
                system=system, timestamps=timestamps, target_time=target, match=match
            )
        timestamps = await self._lister(system, self.cfg)
        return SnapshotListing(system=system, timestamps=timestamps)

    async def run(self, request: RestoreRequest) -> RestoreResult:
        if request.email:
            self.notifier.ensure_configured()

        target = target_time(request.date, request.time_bucket, self.cfg)
        logger.info(f"Restoring {request.system} as of {target} ({request.time_bucket.value})")

        _, match = await self.find_snapshot(request.system, target)
        snapshot_path = build_snapshot_path(
            request.system, request.addressing, match.token, request.path
        )
        logger.info(f"Snapshot path: {snapshot_path}")

        engine = RestoreEngine(
            destination=request.destination,
            verify_checksums=self.cfg.verify_checksums,
        )
        copy_outcome = await engine.restore(
            self._resolve_path(snapshot_path),
            snapshot_path,
            file_name=request.file,
            recursive=request.copies_recursively,
            drive_mode=request.uses_drive,
        )

        if request.email and copy_outcome.status != OutcomeStatus.SUCCESS:
            notification = NotifyOutcome(
                status=OutcomeStatus.SKIPPED,
                recipient=request.email,
                reason="nothing was restored",
            )
        else:
            notification = self.notifier.notify(
                request.email,
                request.system,
                match.record.creation_timestamp,
                request.destination,
            )

        return RestoreResult(
            request=request,
            target_time=target,
            match=match,
            snapshot_path=snapshot_path,
            copy_outcome=copy_outcome,
            notification=notification,
        )


# Singleton
restore_manager = RestoreManager()
