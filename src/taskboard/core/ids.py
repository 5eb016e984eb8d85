# src/taskboard/core/ids.py

from __future__ import annotations

import threading


class IdGenerator:
    """
    Two independent id sequences: one for tasks, one for employees.

    Each call returns the current value and advances the counter by one.
    Issuance is lock-guarded, so concurrent callers never receive the same id.
    Construct one per application (or per test) and pass it where entities
    are created.
    """

    def __init__(self, *, task_start: int = 1, employee_start: int = 1) -> None:
        self._lock = threading.Lock()
        self._next_task = int(task_start)
        self._next_employee = int(employee_start)

    def next_task(self) -> int:
        with self._lock:
            value = self._next_task
            self._next_task += 1
        return value

    def next_employee(self) -> int:
        with self._lock:
            value = self._next_employee
            self._next_employee += 1
        return value
