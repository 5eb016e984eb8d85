# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.ids import IdGenerator
    from ..people.models import Employee

DEFAULT_DUE_IN_DAYS = 7


class TaskStatus(StrEnum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Priority(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Task:
    """
    A unit of work.

    Notes:
    - identity (==, hash) is the id;
    - status is the only field that changes after construction (set_status);
    - "overdue" is computed on read, never stored.
    """

    id: int
    title: str
    status: TaskStatus
    priority: Priority
    due_date: date
    assigned_to: Employee | None = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("title is required")
        if self.status is None:
            raise ValueError("status is required")
        if self.priority is None:
            raise ValueError("priority is required")
        if self.due_date is None:
            raise ValueError("due_date is required")

    @staticmethod
    def builder(ids: IdGenerator | None = None) -> TaskBuilder:
        return TaskBuilder(ids)

    def set_status(self, status: TaskStatus) -> None:
        if status is None:
            raise ValueError("status is required")
        object.__setattr__(self, "status", TaskStatus(status))

    def is_overdue(self, today: date | None = None) -> bool:
        if today is None:
            today = date.today()
        return today > self.due_date and self.status != TaskStatus.DONE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        assigned = self.assigned_to.name if self.assigned_to is not None else "unassigned"
        return (
            f"Task{{id={self.id}, title='{self.title}', status={self.status}, "
            f"priority={self.priority}, dueDate={self.due_date.isoformat()}, "
            f"assignedTo={assigned}}}"
        )

    __repr__ = __str__


class TaskBuilder:
    """
    Fluent Task construction.

    Defaults: status TODO, priority MEDIUM, due in 7 days, unassigned.
    If no explicit id is given, build() takes the next task id from the
    IdGenerator passed to the builder.
    """

    def __init__(self, ids: IdGenerator | None = None) -> None:
        self._ids = ids
        self._id: int | None = None
        self._title: str | None = None
        self._status: TaskStatus | None = TaskStatus.TODO
        self._priority: Priority | None = Priority.MEDIUM
        self._due_date: date | None = date.today() + timedelta(days=DEFAULT_DUE_IN_DAYS)
        self._assigned_to: Employee | None = None

    def id(self, task_id: int) -> TaskBuilder:
        self._id = int(task_id)
        return self

    def title(self, title: str) -> TaskBuilder:
        self._title = title
        return self

    def status(self, status: TaskStatus | None) -> TaskBuilder:
        self._status = status
        return self

    def priority(self, priority: Priority | None) -> TaskBuilder:
        self._priority = priority
        return self

    def due_date(self, due_date: date | None) -> TaskBuilder:
        self._due_date = due_date
        return self

    def assigned_to(self, employee: Employee | None) -> TaskBuilder:
        self._assigned_to = employee
        return self

    def build(self) -> Task:
        # Validate before drawing an id, so a failed build burns nothing.
        if not self._title or not self._title.strip():
            raise ValueError("title is required")
        for name, value in (
            ("status", self._status),
            ("priority", self._priority),
            ("due_date", self._due_date),
        ):
            if value is None:
                raise ValueError(f"{name} is required")

        task_id = self._id
        if task_id is None:
            if self._ids is None:
                raise ValueError("id is required (set one or pass an IdGenerator)")
            task_id = self._ids.next_task()

        return Task(
            id=task_id,
            title=self._title,
            status=self._status,  # type: ignore[arg-type]
            priority=self._priority,  # type: ignore[arg-type]
            due_date=self._due_date,  # type: ignore[arg-type]
            assigned_to=self._assigned_to,
        )
