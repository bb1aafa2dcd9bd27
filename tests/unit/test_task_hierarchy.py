"""Tests for descendant resolution over the task forest (pure functions)."""

from dataclasses import dataclass

from taskflow.application.services.task_hierarchy import (
    build_children_map,
    descendant_counts,
    descendant_ids,
    subtree_ids_including_root,
    would_create_cycle,
)


@dataclass(frozen=True)
class TaskNode:
    id: str
    parent_task_id: str | None


def _forest() -> list[TaskNode]:
    """A -> {B, C}, B -> {D}, E is a separate root."""
    return [
        TaskNode("A", None),
        TaskNode("B", "A"),
        TaskNode("C", "A"),
        TaskNode("D", "B"),
        TaskNode("E", None),
    ]


class TestBuildChildrenMap:
    def test_groups_children_by_parent_in_input_order(self) -> None:
        assert build_children_map(_forest()) == {"A": ["B", "C"], "B": ["D"]}

    def test_self_reference_is_dropped(self) -> None:
        assert build_children_map([TaskNode("A", "A")]) == {}


class TestDescendantIds:
    def test_transitive_closure_excludes_root(self) -> None:
        assert descendant_ids("A", _forest()) == {"B", "C", "D"}

    def test_leaf_has_no_descendants(self) -> None:
        assert descendant_ids("D", _forest()) == set()

    def test_unknown_root_has_no_descendants(self) -> None:
        assert descendant_ids("missing", _forest()) == set()

    def test_cyclic_input_terminates(self) -> None:
        """A corrupt parent cycle must not loop forever."""
        tasks = [TaskNode("A", "C"), TaskNode("B", "A"), TaskNode("C", "B")]
        assert descendant_ids("A", tasks) == {"B", "C"}

    def test_missing_parent_behaves_as_root(self) -> None:
        """A task whose parent is not in the input is simply a root."""
        tasks = [TaskNode("orphan", "deleted-parent"), TaskNode("child", "orphan")]
        assert descendant_ids("orphan", tasks) == {"child"}

    def test_deep_chain_does_not_hit_recursion_limit(self) -> None:
        tasks = [TaskNode("t0", None)] + [
            TaskNode(f"t{i}", f"t{i - 1}") for i in range(1, 5000)
        ]
        assert len(descendant_ids("t0", tasks)) == 4999


def test_subtree_ids_including_root_puts_root_first() -> None:
    ids = subtree_ids_including_root("A", _forest())
    assert ids[0] == "A"
    assert sorted(ids) == ["A", "B", "C", "D"]
    assert len(ids) == len(set(ids))


def test_subtree_of_leaf_is_only_the_leaf() -> None:
    assert subtree_ids_including_root("E", _forest()) == ["E"]


class TestDescendantCounts:
    def test_counts_are_total_descendants(self) -> None:
        assert descendant_counts(_forest()) == {"A": 3, "B": 1, "C": 0, "D": 0, "E": 0}

    def test_count_matches_descendant_ids(self) -> None:
        tasks = _forest()
        counts = descendant_counts(tasks)
        for task in tasks:
            assert counts[task.id] == len(descendant_ids(task.id, tasks))

    def test_cyclic_input_terminates(self) -> None:
        tasks = [TaskNode("A", "B"), TaskNode("B", "A")]
        counts = descendant_counts(tasks)
        assert set(counts) == {"A", "B"}


class TestWouldCreateCycle:
    def test_self_parent(self) -> None:
        assert would_create_cycle("A", "A", _forest()) is True

    def test_descendant_as_parent(self) -> None:
        assert would_create_cycle("A", "D", _forest()) is True

    def test_unrelated_parent(self) -> None:
        assert would_create_cycle("B", "E", _forest()) is False

    def test_ancestor_as_parent(self) -> None:
        assert would_create_cycle("D", "A", _forest()) is False
