# src/taskboard/tasks/task_filters.py

"""
Task predicates.

A filter is any callable Task -> bool. The helpers below build common ones
and combine them; combination short-circuits left to right.
"""

from __future__ import annotations

from collections.abc import Callable

from .task_models import Priority, Task, TaskStatus

TaskFilter = Callable[[Task], bool]


def match_all() -> TaskFilter:
    return lambda _task: True


def high_priority() -> TaskFilter:
    return lambda task: task.priority == Priority.HIGH


def not_done() -> TaskFilter:
    return lambda task: task.status != TaskStatus.DONE


def both(first: TaskFilter, second: TaskFilter) -> TaskFilter:
    """Logical AND; `second` is not called when `first` rejects the task."""
    return lambda task: first(task) and second(task)


def all_of(*filters: TaskFilter) -> TaskFilter:
    """AND over any number of filters. No filters -> matches everything."""
    if not filters:
        return match_all()
    return lambda task: all(f(task) for f in filters)
