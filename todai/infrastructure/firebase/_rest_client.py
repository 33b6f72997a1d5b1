"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1; with
FIRESTORE_EMULATOR_HOST the same calls go to a local emulator without
credentials. All HTTP calls use httpx.AsyncClient so they do not block
the event loop.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any
from urllib.parse import quote

import httpx

from todai.infrastructure.firebase._rest_encoding import (
    decode_document,
    encode_document,
)

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"
# The emulator treats this bearer token as an admin and skips security rules.
_EMULATOR_TOKEN = "owner"


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
    params: list[tuple[str, str]] | None = None,
) -> dict | list | None:
    """Perform async HTTP request to Firestore REST API. 404 returns None.

    Raises:
        DocumentExistsError: On 409 (createDocument with an existing ID).
        httpx.HTTPError: On transport failures and any other non-2xx status.
    """
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method not in ("GET", "PATCH", "POST", "DELETE"):
        raise ValueError(f"Unsupported method: {method!r}")
    resp = await client.request(method, url, headers=headers, json=body, params=params)
    if resp.status_code == 404:
        return None
    if resp.status_code == 409:
        raise DocumentExistsError("Document already exists")
    if resp.status_code not in (200, 204):
        resp.raise_for_status()
    if method == "DELETE":
        return {}
    return resp.json() if resp.content else {}


class DocumentExistsError(Exception):
    """Raised when createDocument returns 409 (document ID already exists)."""


def _snapshot_from_document(doc: dict) -> DocumentSnapshot:
    name = doc.get("name", "")
    doc_id = name.split("/")[-1] if name else ""
    return DocumentSnapshot(doc_id, decode_document(doc.get("fields")))


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: FirestoreRESTClient, collection_path: str, document_id: str):
        self._client = client
        self._id = document_id
        # Quoted as a single path segment so "?" and "#" stay part of the id.
        self._path = f"{collection_path}/{quote(document_id, safe='')}"

    @property
    def id(self) -> str:
        return self._id

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        out = await self._client.request(self._path)
        if not out:
            return None
        return DocumentSnapshot(self.id, decode_document(out.get("fields")))

    async def update(
        self, data: dict[str, Any], delete_fields: tuple[str, ...] = ()
    ) -> DocumentSnapshot | None:
        """Patch the listed fields of an existing document.

        Fields named in delete_fields are put in the update mask without a
        value, which removes them. Returns the updated snapshot, or None if
        the document does not exist (no upsert).
        """
        params = [("currentDocument.exists", "true")]
        params += [("updateMask.fieldPaths", f) for f in (*data, *delete_fields)]
        out = await self._client.request(
            self._path, method="PATCH", body=encode_document(data), params=params
        )
        if out is None:
            return None
        return DocumentSnapshot(self.id, decode_document(out.get("fields")))

    async def delete(self, *, must_exist: bool = False) -> bool:
        """Delete the document.

        Idempotent by default. With must_exist, a missing document is not
        deleted and False is returned.
        """
        params = [("currentDocument.exists", "true")] if must_exist else None
        out = await self._client.request(self._path, method="DELETE", params=params)
        return out is not None


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


class _Query:
    """Ordered query over one collection; runs server-side via runQuery."""

    def __init__(self, client: FirestoreRESTClient, parent: str, collection_id: str):
        self._client = client
        self._parent = parent
        self._collection_id = collection_id
        self._order_by_field: str | None = None
        self._order_direction: str = "ASCENDING"

    def order_by(self, field: str, direction: str = "ASCENDING") -> _Query:
        self._order_by_field = field
        self._order_direction = direction
        return self

    def to_structured_query(self) -> dict[str, Any]:
        structured: dict[str, Any] = {
            "from": [{"collectionId": self._collection_id}],
        }
        if self._order_by_field is not None:
            structured["orderBy"] = [
                {
                    "field": {"fieldPath": self._order_by_field},
                    "direction": self._order_direction,
                }
            ]
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots."""
        resp = await self._client.request(
            f"{self._parent}:runQuery",
            method="POST",
            body={"structuredQuery": self.to_structured_query()},
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            if "document" not in item:
                continue
            yield _snapshot_from_document(item["document"])


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: FirestoreRESTClient, path: str):
        self._client = client
        self._path = path.rstrip("/")

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, self._path, document_id)

    async def create(self, document_id: str, data: dict[str, Any]) -> DocumentSnapshot:
        """Create a document with the given ID (DocumentExistsError if it exists)."""
        out = await self._client.request(
            self._path,
            method="POST",
            body=encode_document(data),
            params=[("documentId", document_id)],
        )
        if not out:
            return DocumentSnapshot(document_id, dict(data))
        return _snapshot_from_document(out)

    def order_by(self, field: str, direction: str = "ASCENDING") -> _Query:
        """Start a query over the whole collection ordered by field; then .stream()."""
        parent, collection_id = self._path.rsplit("/", 1)
        return _Query(self._client, parent, collection_id).order_by(field, direction)


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin).

    One instance per process: created in the app lifespan and closed on
    shutdown. credentials=None means emulator mode (no token refresh).
    """

    def __init__(
        self,
        project_id: str,
        credentials=None,
        *,
        base_url: str = _BASE,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")
        self._prefix = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        if self._credentials is None:
            return _EMULATOR_TOKEN
        return await asyncio.to_thread(_get_access_token, self._credentials)

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: dict | None = None,
        params: list[tuple[str, str]] | None = None,
    ) -> dict | list | None:
        """Authorized request against a resource path below the API base URL."""
        return await _request_async(
            self._http,
            f"{self._base_url}/{path}",
            method=method,
            body=body,
            access_token=await self.get_token(),
            params=params,
        )

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")
