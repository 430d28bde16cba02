"""Aggregate all API sub-routers."""

from fastapi import APIRouter

from . import system, snapshots, restore

api_router = APIRouter()

api_router.include_router(system.router)
api_router.include_router(snapshots.router)
api_router.include_router(restore.router)
