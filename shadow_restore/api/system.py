"""System info API endpoints."""

from fastapi import APIRouter

from ..config import settings
from ..services.dst import DstPolicy

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/info")
async def get_system_info():
    return {
        "listing_command": settings.listing_command,
        "listing_marker": settings.listing_marker,
        "dst_policy": DstPolicy.from_settings(settings).describe(),
        "mail_configured": settings.mail_configured,
        "verify_checksums": settings.verify_checksums,
    }
