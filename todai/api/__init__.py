"""HTTP API: router aggregation under /api."""

from todai.api.router import api_router

__all__ = ["api_router"]
