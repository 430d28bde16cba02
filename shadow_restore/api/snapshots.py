"""Snapshot listing endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException

from ..errors import DateParseError, NoSnapshotError, RemoteCallError
from ..models.common import TimeBucket
from ..models.snapshot import SnapshotListing
from ..services import restore_manager as manager_module

router = APIRouter(prefix="/snapshots", tags=["snapshots"])


@router.get("/{system}", response_model=SnapshotListing)
async def list_snapshots(
    system: str,
    date: Optional[str] = None,
    time_bucket: Optional[TimeBucket] = None,
):
    if (date is None) != (time_bucket is None):
        raise HTTPException(status_code=400, detail="date and time_bucket go together")
    try:
        return await manager_module.restore_manager.list_snapshots(system, date, time_bucket)
    except DateParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NoSnapshotError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RemoteCallError as e:
        raise HTTPException(status_code=502, detail=str(e))
