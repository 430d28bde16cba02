"""Copy files out of a snapshot with verification."""

import hashlib
import logging
import shutil
from pathlib import Path
from typing import Optional

from ..errors import CopyError
from ..models.restore import CopyOutcome, OutcomeStatus

logger = logging.getLogger(__name__)


class RestoreEngine:
    def __init__(
        self,
        destination: str,
        verify_checksums: bool = True,
    ):
        self.destination = Path(destination)
        self.verify_checksums = verify_checksums

    async def restore(
        self,
        source: Path,
        source_label: str,
        file_name: Optional[str] = None,
        recursive: bool = False,
        drive_mode: bool = False,
    ) -> CopyOutcome:
        """Copy one named file, or the whole tree, from ``source``.

        ``source_label`` is the snapshot path as the caller knows it and is
        only used for reporting.
        """
        outcome = CopyOutcome(
            status=OutcomeStatus.NOT_FOUND,
            source_path=source_label,
            destination=str(self.destination),
        )

        if not source.exists():
            outcome.reason = f"Snapshot path not found: {source_label}"
            logger.warning(outcome.reason)
            return outcome

        if file_name:
            return self._restore_file(source, file_name, outcome)

        if not recursive:
            outcome.status = OutcomeStatus.SKIPPED
            outcome.reason = (
                "Recursive copy not requested for drive path; items cannot be copied"
                if drive_mode
                else "Recursive copy not requested; nothing to copy"
            )
            logger.warning(f"{outcome.reason}: {source_label}")
            return outcome

        return self._restore_tree(source, outcome)

    def _restore_file(self, source: Path, file_name: str, outcome: CopyOutcome) -> CopyOutcome:
        entry = self._find_entry(source, file_name)
        if entry is None:
            outcome.reason = f"{file_name} not found in {outcome.source_path}"
            logger.warning(outcome.reason)
            return outcome

        dest_path = self.destination / entry.name
        try:
            self.destination.mkdir(parents=True, exist_ok=True)

            # Compute source checksum before copy
            source_hash = self._sha256(entry) if self.verify_checksums else None

            shutil.copy2(str(entry), str(dest_path))
        except OSError as e:
            raise CopyError(str(entry), str(dest_path), e) from e

        if source_hash:
            outcome.checksum_match = source_hash == self._sha256(dest_path)
            if not outcome.checksum_match:
                dest_path.unlink(missing_ok=True)
                raise CopyError(
                    str(entry), str(dest_path), ValueError("Checksum mismatch after copy")
                )

        outcome.copied.append(str(dest_path))
        outcome.status = OutcomeStatus.SUCCESS
        logger.info(f"Restored {entry.name} to {dest_path}")
        return outcome

    def _restore_tree(self, source: Path, outcome: CopyOutcome) -> CopyOutcome:
        copied = outcome.copied

        def _copy(src, dst):
            copied.append(str(dst))
            return shutil.copy2(src, dst)

        try:
            shutil.copytree(
                str(source),
                str(self.destination),
                copy_function=_copy,
                dirs_exist_ok=True,
            )
        except OSError as e:
            raise CopyError(str(source), str(self.destination), e) from e

        outcome.status = OutcomeStatus.SUCCESS
        logger.info(f"Restored {len(copied)} files to {self.destination}")
        return outcome

    def _find_entry(self, directory: Path, name: str) -> Optional[Path]:
        """Case-insensitive lookup, the way Windows shares resolve names."""
        if not directory.is_dir():
            return None
        wanted = name.casefold()
        for child in directory.iterdir():
            if child.name.casefold() == wanted and child.is_file():
                return child
        return None

    def _sha256(self, path: Path) -> str:
        h = hashlib.sha256()
        with open(path, "rb") as f:
            while True:
                chunk = f.read(65536)
                if not chunk:
                    break
                h.update(chunk)
        return h.hexdigest()
