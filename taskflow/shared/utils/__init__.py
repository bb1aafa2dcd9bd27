"""Shared utilities: datetime and identifier generators."""

from taskflow.shared.utils.datetime import ensure_utc, utc_now
from taskflow.shared.utils.generators import ID_PATTERN, generate_id, is_valid_id

__all__ = [
    "ID_PATTERN",
    "ensure_utc",
    "generate_id",
    "is_valid_id",
    "utc_now",
]
