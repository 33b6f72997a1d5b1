"""Health check API schemas."""

from pydantic import BaseModel, Field

from todai.shared.utils.datetime import utc_now


def _iso_now() -> str:
    return utc_now().isoformat().replace("+00:00", "Z")


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    timestamp: str = Field(default_factory=_iso_now, description="Server time (ISO 8601, UTC)")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready when ready."""

    status: str = Field(default="ok", description="Readiness status")


class ReadinessErrorResponse(BaseModel):
    """Response for GET /health/ready when the task store is unavailable (503)."""

    status: str = Field(default="not_ready", description="Readiness status")
    message: str = Field(..., description="Reason (e.g. task store not configured)")
