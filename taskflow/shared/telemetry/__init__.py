"""Shared telemetry: logging setup."""

from taskflow.shared.telemetry.logging import (
    RequestIdLogFilter,
    get_logger,
    setup_logging,
)

__all__ = [
    "RequestIdLogFilter",
    "get_logger",
    "setup_logging",
]
