"""HTTP middleware: request ID and access logging.

Applied in main app; import and use from todai.main.
"""

from todai.middleware.request_id import RequestIDMiddleware

__all__ = [
    "RequestIDMiddleware",
]
