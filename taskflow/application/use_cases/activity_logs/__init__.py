"""Activity log use cases."""

from taskflow.application.use_cases.activity_logs.list_activity_logs import (
    ActivityLogQueryService,
)

__all__ = ["ActivityLogQueryService"]
