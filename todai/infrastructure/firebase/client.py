"""Firestore client construction (REST-based, no firebase-admin).

The client is an explicit handle: the app lifespan creates it once with
create_firestore_client(), keeps it on app.state and closes it on
shutdown. Connection settings come from FIREBASE_SERVICE_ACCOUNT_KEY
(JSON string), FIREBASE_SERVICE_ACCOUNT_PATH (file path) or
FIRESTORE_EMULATOR_HOST (local emulator, no credentials).
"""

import json
import logging
from pathlib import Path

from todai.core.config import Settings
from todai.infrastructure.firebase._rest_client import (
    FirestoreRESTClient,
    _get_credentials,
)

logger = logging.getLogger(__name__)


def _load_key_dict(settings: Settings) -> dict | None:
    """Return service account dict from env key or file path."""
    key_json = (
        settings.firebase_service_account_key.get_secret_value()
        if settings.firebase_service_account_key
        else None
    )
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            logger.warning(
                "FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: %s (resolved: %s)",
                path,
                resolved,
            )
            return None
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


def create_firestore_client(settings: Settings) -> FirestoreRESTClient | None:
    """Build the Firestore client, or return None when no datastore is configured.

    A missing configuration is logged as a warning and the server keeps
    running without persistence. Invalid credentials are logged with the
    traceback and also yield None, so the app can still start.
    """
    if settings.firestore_emulator_host:
        host = settings.firestore_emulator_host.strip().removeprefix("http://")
        logger.info("Using Firestore emulator at %s", host)
        return FirestoreRESTClient(
            settings.firestore_project_id,
            None,
            base_url=f"http://{host}/v1",
            timeout=settings.firestore_timeout_seconds,
        )
    if not settings.datastore_configured:
        logger.warning(
            "No datastore configured (set FIREBASE_SERVICE_ACCOUNT_KEY, "
            "FIREBASE_SERVICE_ACCOUNT_PATH or FIRESTORE_EMULATOR_HOST); "
            "serving without persistence"
        )
        return None
    try:
        key_dict = _load_key_dict(settings)
        if not key_dict:
            return None

        project_id = key_dict.get("project_id")
        if not project_id:
            logger.error("Firebase service account JSON missing 'project_id'")
            return None

        cred = _get_credentials(key_dict)
        client = FirestoreRESTClient(
            project_id, cred, timeout=settings.firestore_timeout_seconds
        )
    except Exception:
        logger.exception("Firestore initialization failed")
        return None
    logger.info("Firestore connected (project %s)", project_id)
    return client


async def close_firestore_client(client: FirestoreRESTClient | None) -> None:
    """Close the client's HTTP connection pool. Safe with None."""
    if client is not None:
        await client.aclose()
        logger.info("Firestore HTTP client closed")
