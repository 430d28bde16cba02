"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path, PureWindowsPath
from unittest.mock import AsyncMock

import pytest

from shadow_restore.config import Settings
from shadow_restore.services.restore_manager import RestoreManager

VSSADMIN_OUTPUT = """\
vssadmin 1.1 - Volume Shadow Copy Service administrative command-line tool
(C) Copyright 2001-2013 Microsoft Corp.

Contents of shadow copy set ID: {2c3a4b1e-0000-0000-0000-000000000001}
   Contained 1 shadow copies at creation time: 3/7/2019 8:00:03 AM
      Shadow Copy ID: {a1}
         Original Volume: (D:)\\\\?\\Volume{d1}\\
Contents of shadow copy set ID: {2c3a4b1e-0000-0000-0000-000000000002}
   Contained 1 shadow copies at creation time: 3/7/2019 5:00:00 PM
      Shadow Copy ID: {a2}
Contents of shadow copy set ID: {2c3a4b1e-0000-0000-0000-000000000003}
   Contained 1 shadow copies at creation time: 3/8/2019 8:00:02 AM
      Shadow Copy ID: {a3}
"""

SNAPSHOT_TIMES = ["3/7/2019 8:00:03 AM", "3/7/2019 5:00:00 PM", "3/8/2019 8:00:02 AM"]


@pytest.fixture
def cfg() -> Settings:
    """Settings independent of the environment, with UTC as local time."""
    return Settings(
        local_timezone="UTC",
        smtp_host=None,
        mail_sender=None,
        dst_cutover="2019-03-10T00:00:00",
        dst_shift_hours=-1.0,
        verify_checksums=True,
    )


@pytest.fixture
def mail_cfg(cfg: Settings) -> Settings:
    return cfg.model_copy(update={"smtp_host": "relay.example.com", "mail_sender": "restore@example.com"})


@pytest.fixture
def lister() -> AsyncMock:
    return AsyncMock(return_value=list(SNAPSHOT_TIMES))


@pytest.fixture
def unc_root(tmp_path: Path) -> Path:
    """Local directory standing in for ``\\\\host\\share``."""
    root = tmp_path / "remote"
    root.mkdir()
    return root


@pytest.fixture
def resolve_unc(unc_root: Path):
    def _resolve(unc: str) -> Path:
        parts = PureWindowsPath(unc).parts
        return unc_root.joinpath(*parts[1:])

    return _resolve


@pytest.fixture
def snapshot_dir(unc_root: Path) -> Path:
    """Contents of the 3/7/2019 5:00 PM snapshot under Team\\User."""
    # 17:00 before the cutover, shifted one hour back
    base = unc_root / "@GMT-2019.03.07-16.00.00" / "Team" / "User"
    (base / "sub").mkdir(parents=True)
    (base / "report.docx").write_bytes(b"quarterly report")
    (base / "notes.txt").write_text("notes", encoding="utf-8")
    (base / "sub" / "deep.txt").write_text("deep", encoding="utf-8")
    return base


@pytest.fixture
def manager(cfg: Settings, lister: AsyncMock, resolve_unc) -> RestoreManager:
    return RestoreManager(cfg=cfg, lister=lister, resolve_path=resolve_unc)


@pytest.fixture
def vssadmin_output() -> str:
    return VSSADMIN_OUTPUT


@pytest.fixture
def snapshot_times() -> list[str]:
    return list(SNAPSHOT_TIMES)
