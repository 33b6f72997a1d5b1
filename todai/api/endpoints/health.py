"""Health check endpoints. Used for liveness and readiness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from todai.api.dependencies import get_firestore_client
from todai.infrastructure.firebase._rest_client import FirestoreRESTClient
from todai.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok status and server time for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Task store not configured", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    client: Annotated[FirestoreRESTClient | None, Depends(get_firestore_client)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 when a datastore handle exists; 503 when serving without persistence."""
    if client is not None:
        return ReadinessResponse()
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(
            message="Task store is not configured",
        ).model_dump(),
    )
