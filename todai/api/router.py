"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. Mounted
under /api by todai.main.
"""

from fastapi import APIRouter

from todai.api.endpoints import health, tasks

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
