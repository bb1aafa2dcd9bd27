"""Domain layer: enums and exceptions. No infrastructure dependencies."""

from taskflow.domain.enums import Priority, TaskAction

__all__ = ["Priority", "TaskAction"]
