"""Tests for the HTTP API."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from shadow_restore.app import create_app
from shadow_restore.errors import RemoteCallError
from shadow_restore.services.restore_manager import RestoreManager


@pytest.fixture
def client(manager: RestoreManager):
    with patch("shadow_restore.services.restore_manager.restore_manager", manager):
        yield TestClient(create_app())


def _body(tmp_path: Path, **overrides) -> dict:
    body = {
        "date": "2019-03-07",
        "time_bucket": "Evening",
        "system": "srv1",
        "share": "share1",
        "path": "Team\\User",
        "destination": str(tmp_path / "restored"),
    }
    body.update(overrides)
    return body


class TestSnapshotsEndpoint:
    def test_list(self, client: TestClient, snapshot_times: list[str]) -> None:
        resp = client.get("/api/snapshots/srv1")
        assert resp.status_code == 200
        data = resp.json()
        assert data["timestamps"] == snapshot_times
        assert data["match"] is None

    def test_list_with_target(self, client: TestClient) -> None:
        resp = client.get("/api/snapshots/srv1", params={"date": "2019-03-07", "time_bucket": "Evening"})
        assert resp.status_code == 200
        assert resp.json()["match"]["token"] == "2019.03.07-16.00.00"

    def test_date_without_bucket(self, client: TestClient) -> None:
        resp = client.get("/api/snapshots/srv1", params={"date": "2019-03-07"})
        assert resp.status_code == 400

    def test_remote_failure(self, client: TestClient, lister: AsyncMock) -> None:
        lister.side_effect = RemoteCallError("srv1", "The RPC server is unavailable.", 1)
        resp = client.get("/api/snapshots/srv1")
        assert resp.status_code == 502
        assert "RPC server" in resp.json()["detail"]

    def test_no_snapshot(self, client: TestClient) -> None:
        resp = client.get("/api/snapshots/srv1", params={"date": "2019-03-01", "time_bucket": "Morning"})
        assert resp.status_code == 404


class TestRestoreEndpoint:
    def test_restore(self, client: TestClient, snapshot_dir: Path, tmp_path: Path) -> None:
        resp = client.post("/api/restore", json=_body(tmp_path))
        assert resp.status_code == 200
        data = resp.json()
        assert data["copy_outcome"]["status"] == "success"
        assert data["snapshot_path"] == r"\\srv1\share1\@GMT-2019.03.07-16.00.00\Team\User"
        assert data["request"]["addressing"] == {"kind": "share", "name": "share1"}

    def test_copy_failure(self, client: TestClient, snapshot_dir: Path, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("in the way", encoding="utf-8")
        resp = client.post("/api/restore", json=_body(tmp_path, destination=str(blocker)))
        assert resp.status_code == 500
        assert str(blocker) in resp.json()["detail"]

    def test_drive_and_share_rejected(self, client: TestClient, tmp_path: Path) -> None:
        resp = client.post("/api/restore", json=_body(tmp_path, drive="D"))
        assert resp.status_code == 422

    def test_bad_date(self, client: TestClient, tmp_path: Path) -> None:
        resp = client.post("/api/restore", json=_body(tmp_path, date="someday"))
        assert resp.status_code == 400

    def test_email_without_relay(self, client: TestClient, tmp_path: Path) -> None:
        resp = client.post("/api/restore", json=_body(tmp_path, email="jdoe@example.com"))
        assert resp.status_code == 400
        assert "SHADOW_RESTORE_SMTP_HOST" in resp.json()["detail"]


class TestSystemEndpoint:
    def test_info(self, client: TestClient) -> None:
        resp = client.get("/api/system/info")
        assert resp.status_code == 200
        data = resp.json()
        assert set(data) >= {"listing_command", "dst_policy", "mail_configured"}
        assert data["dst_policy"]["shift_hours"] == -1.0
