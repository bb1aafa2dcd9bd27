"""HTTP middleware: request ID.

Applied in main app; import and use from taskflow.main.
"""

from taskflow.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
