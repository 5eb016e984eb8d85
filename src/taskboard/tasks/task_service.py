# src/taskboard/tasks/task_service.py

from __future__ import annotations

import logging
from datetime import date, timedelta

from ..core.ports import Repository
from ..people.models import Employee
from .task_filters import TaskFilter
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id {task_id} not found")
        self.task_id = task_id


class TaskService:
    """
    Domain operations over a task repository.

    Query methods scan the repository snapshot and keep its iteration order.
    Date-based queries take an optional `today` (defaults to date.today()).
    """

    def __init__(self, repo: Repository[Task]) -> None:
        self._repo = repo

    def create(self, task: Task) -> Task:
        saved = self._repo.save(task)
        logger.info("Task created id=%s priority=%s due=%s", task.id, task.priority, task.due_date)
        return saved

    def update_status(self, task_id: int, status: TaskStatus) -> Task:
        task = self._repo.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        previous = task.status
        task.set_status(status)
        saved = self._repo.save(task)
        logger.info("Task %s: %s -> %s", task_id, previous, status)
        return saved

    def find_tasks(self, predicate: TaskFilter) -> list[Task]:
        return [t for t in self._repo.find_all() if predicate(t)]

    def due_in(self, days: int, today: date | None = None) -> list[Task]:
        """Tasks due within [today, today + days], both ends inclusive."""
        if today is None:
            today = date.today()
        days = int(days)
        if days < 0:
            return []
        try:
            limit = today + timedelta(days=days)
        except OverflowError:
            limit = date.max
        return [t for t in self._repo.find_all() if today <= t.due_date <= limit]

    def by_employee(self) -> dict[Employee, list[Task]]:
        """Group assigned tasks by employee (keyed by employee id). Unassigned tasks are skipped."""
        groups: dict[Employee, list[Task]] = {}
        for task in self._repo.find_all():
            if task.assigned_to is None:
                continue
            groups.setdefault(task.assigned_to, []).append(task)
        return groups

    def overdue(self, today: date | None = None) -> set[Task]:
        if today is None:
            today = date.today()
        return {t for t in self._repo.find_all() if t.is_overdue(today)}

    def count(self) -> int:
        return self._repo.count()
