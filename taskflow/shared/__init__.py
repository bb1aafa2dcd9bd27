"""Shared utilities: request context, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from taskflow.shared.context import get_request_id, set_request_id
from taskflow.shared.utils import ensure_utc, generate_id, utc_now

__all__ = [
    "ensure_utc",
    "generate_id",
    "get_request_id",
    "set_request_id",
    "utc_now",
]
