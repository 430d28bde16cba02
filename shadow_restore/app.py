"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from .config import settings
from .api.router import api_router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
    if settings.debug:
        logging.getLogger("shadow_restore").setLevel(logging.DEBUG)


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="shadow-restore",
        version="0.1.0",
        description="Restore files from remote shadow copies",
    )
    app.include_router(api_router, prefix="/api")

    if not settings.mail_configured:
        logger.warning("Mail relay not configured; restore requests with an e-mail will be rejected")

    return app
