"""Editing score and limits for tasks about to be added to a contest."""

from __future__ import annotations

from dataclasses import dataclass

from limejudge.results import (
    upper_bound_for_full_score,
    upper_bound_for_memory_limit,
    upper_bound_for_time_limit,
)


@dataclass
class _TaskLimits:
    title: str
    full_score: int
    time_limit: int
    memory_limit: int


def _check(value: int, label: str, upper: int) -> int:
    if not 1 <= value <= upper:
        raise ValueError(f"The {label} must be between 1 and {upper}!")
    return value


class TaskLimitsEditor:
    """A list of tasks, one selected, whose full score and limits can be edited."""

    def __init__(self) -> None:
        self._tasks: list[_TaskLimits] = []
        self.current_index = -1

    @property
    def titles(self) -> list[str]:
        return [task.title for task in self._tasks]

    def add_task(self, title: str, full_score: int, time_limit: int, memory_limit: int) -> None:
        """Append a task; the first task becomes the selected one."""
        self._tasks.append(_TaskLimits(title, full_score, time_limit, memory_limit))
        self.current_index = 0

    def select(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"no task at index {index}")
        self.current_index = index

    def update(self, full_score: int | None = None, time_limit: int | None = None,
               memory_limit: int | None = None) -> None:
        """Change the selected task's values; ``None`` leaves a value as it is."""
        if self.current_index == -1:
            raise ValueError("no task is selected")
        task = self._tasks[self.current_index]
        if full_score is not None:
            task.full_score = _check(full_score, "full score", upper_bound_for_full_score() * 100)
        if time_limit is not None:
            task.time_limit = _check(time_limit, "time limit", upper_bound_for_time_limit())
        if memory_limit is not None:
            task.memory_limit = _check(memory_limit, "memory limit", upper_bound_for_memory_limit())

    def _get(self, index: int) -> _TaskLimits | None:
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None

    def full_score(self, index: int) -> int:
        """Full score of a task; 0 for an index out of range."""
        task = self._get(index)
        return task.full_score if task else 0

    def time_limit(self, index: int) -> int:
        """Time limit of a task; 0 for an index out of range."""
        task = self._get(index)
        return task.time_limit if task else 0

    def memory_limit(self, index: int) -> int:
        """Memory limit of a task; 0 for an index out of range."""
        task = self._get(index)
        return task.memory_limit if task else 0