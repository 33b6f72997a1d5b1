"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. Used by main.py; no business
logic here, only wiring of the datastore handle.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from todai.core.config import get_settings
from todai.infrastructure.firebase.client import (
    close_firestore_client,
    create_firestore_client,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the Firestore handle, yield, then close it.

    app.state.firestore is None when no datastore is configured; the
    task repository then fails every operation with a storage error.
    """
    settings = get_settings()

    # ---- Startup ----
    app.state.firestore = create_firestore_client(settings)
    logger.info(
        "%s %s started (persistence: %s)",
        settings.app_name,
        settings.app_version,
        "on" if app.state.firestore is not None else "off",
    )

    yield

    # ---- Shutdown ----
    await close_firestore_client(getattr(app.state, "firestore", None))
    app.state.firestore = None
