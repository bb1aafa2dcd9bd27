"""Application services: pure hierarchy traversal and field diffing."""

from taskflow.application.services.task_diff import (
    UPDATABLE_FIELDS,
    FieldChange,
    diff_task_fields,
    serialize_value,
)
from taskflow.application.services.task_hierarchy import (
    build_children_map,
    descendant_counts,
    descendant_ids,
    subtree_ids_including_root,
    would_create_cycle,
)

__all__ = [
    "FieldChange",
    "UPDATABLE_FIELDS",
    "build_children_map",
    "descendant_counts",
    "descendant_ids",
    "diff_task_fields",
    "serialize_value",
    "subtree_ids_including_root",
    "would_create_cycle",
]
