"""Restore API endpoints."""

from fastapi import APIRouter, HTTPException

from ..errors import (
    CopyError,
    DateParseError,
    NoSnapshotError,
    NotifierConfigError,
    RemoteCallError,
)
from ..models.restore import RestoreRequest, RestoreResult
from ..services import restore_manager as manager_module

router = APIRouter(prefix="/restore", tags=["restore"])


@router.post("", response_model=RestoreResult)
async def start_restore(request: RestoreRequest):
    try:
        return await manager_module.restore_manager.run(request)
    except (DateParseError, NotifierConfigError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NoSnapshotError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RemoteCallError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except CopyError as e:
        raise HTTPException(status_code=500, detail=str(e))
