"""Firestore integration (REST API, no firebase-admin)."""

from todai.infrastructure.firebase.client import (
    close_firestore_client,
    create_firestore_client,
)

__all__ = [
    "close_firestore_client",
    "create_firestore_client",
]
