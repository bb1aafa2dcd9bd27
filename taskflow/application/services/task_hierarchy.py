"""Descendant resolution over the task forest (pure, in-memory, no I/O).

Tasks are treated as a flat arena keyed by id; parent_task_id is a weak
back-reference. The children adjacency map is rebuilt from the flat list on
every call. All walks are iterative and guarded by a visited set, so they
terminate on cyclic input and on arbitrarily deep hierarchies.

A parent id that does not name a task in the input (deleted or unknown
parent) simply never gets visited: such a task behaves as a root.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from typing import Protocol


class TaskLike(Protocol):
    """Anything with an id and an optional parent id (TaskResult or ORM row)."""

    @property
    def id(self) -> str: ...

    @property
    def parent_task_id(self) -> str | None: ...


def build_children_map(tasks: Iterable[TaskLike]) -> dict[str, list[str]]:
    """Return parent_id -> child ids, in input order. Self-references are dropped."""
    children: defaultdict[str, list[str]] = defaultdict(list)
    for task in tasks:
        parent_id = task.parent_task_id
        if parent_id and parent_id != task.id:
            children[parent_id].append(task.id)
    return dict(children)


def _walk_descendants(root_id: str, children: dict[str, list[str]]) -> list[str]:
    """Depth-first walk from root_id; returns descendants in visit order, root excluded."""
    found: list[str] = []
    visited: set[str] = {root_id}
    stack = [root_id]
    while stack:
        node = stack.pop()
        for child_id in children.get(node, ()):
            if child_id in visited:
                continue
            visited.add(child_id)
            found.append(child_id)
            stack.append(child_id)
    return found


def descendant_ids(root_id: str, tasks: Sequence[TaskLike]) -> set[str]:
    """Return every transitive descendant of root_id (never root_id itself)."""
    return set(_walk_descendants(root_id, build_children_map(tasks)))


def subtree_ids_including_root(root_id: str, tasks: Sequence[TaskLike]) -> list[str]:
    """Return root_id followed by all its descendants (for multi-task log queries)."""
    return [root_id, *_walk_descendants(root_id, build_children_map(tasks))]


def descendant_counts(tasks: Sequence[TaskLike]) -> dict[str, int]:
    """Return task_id -> total number of transitive descendants, for every input task.

    count(n) = sum(1 + count(child)) over n's children, memoized across the
    whole forest. Computed with an explicit post-order stack; an edge that
    closes a cycle (child still in progress) is ignored.
    """
    children = build_children_map(tasks)
    counts: dict[str, int] = {}
    in_progress: set[str] = set()

    for task in tasks:
        if task.id in counts:
            continue
        stack: list[tuple[str, bool]] = [(task.id, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                counts[node] = sum(
                    1 + counts[child_id]
                    for child_id in children.get(node, ())
                    if child_id in counts
                )
                in_progress.discard(node)
                continue
            if node in counts or node in in_progress:
                continue
            in_progress.add(node)
            stack.append((node, True))
            for child_id in children.get(node, ()):
                if child_id not in counts and child_id not in in_progress:
                    stack.append((child_id, False))
    return counts


def would_create_cycle(
    task_id: str, new_parent_id: str, tasks: Sequence[TaskLike]
) -> bool:
    """True if making new_parent_id the parent of task_id closes a cycle."""
    if new_parent_id == task_id:
        return True
    return new_parent_id in descendant_ids(task_id, tasks)
