# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the id generator, repositories and service into AppState,
- seeds the sample employees and tasks used by the demo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from ..config import get_settings
from ..core.ids import IdGenerator
from ..core.repository import InMemoryRepository
from ..core.state import AppState
from ..people.models import DEFAULT_EMAIL_DOMAIN, Employee
from ..tasks.task_models import Priority, Task, TaskStatus
from ..tasks.task_service import TaskService

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, ids: IdGenerator | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    tasks: InMemoryRepository[Task] = InMemoryRepository("tasks")
    return AppState(
        settings=settings,
        ids=ids or IdGenerator(),
        employees=InMemoryRepository("employees"),
        tasks=tasks,
        task_service=TaskService(tasks),
    )


@dataclass(slots=True, frozen=True)
class SampleData:
    employees: list[Employee]
    tasks: list[Task]


def seed_sample_data(state: AppState, *, today: date | None = None) -> SampleData:
    """
    Register two employees and three tasks:
    - one in progress, due in 2 days
    - one todo, due in 5 days
    - one todo, already overdue (due yesterday)
    """
    if today is None:
        today = date.today()
    domain = str(getattr(state.settings, "email_domain", DEFAULT_EMAIL_DOMAIN))

    siri = Employee(
        id=state.ids.next_employee(),
        name="Siri Reddy",
        email="siri@aistartup.com",
        experience_years=3,
    )
    suraj = Employee(
        id=state.ids.next_employee(),
        name="Suraj Kumar",
        experience_years=5,
        email_domain=domain,
    )
    for emp in (siri, suraj):
        state.employees.save(emp)

    service = state.task_service
    tasks = [
        service.create(
            Task.builder(state.ids)
            .title("Build first MVP model")
            .status(TaskStatus.IN_PROGRESS)
            .priority(Priority.HIGH)
            .due_date(today + timedelta(days=2))
            .assigned_to(siri)
            .build()
        ),
        service.create(
            Task.builder(state.ids)
            .title("Set up CI/CD pipeline")
            .status(TaskStatus.TODO)
            .priority(Priority.MEDIUM)
            .due_date(today + timedelta(days=5))
            .assigned_to(suraj)
            .build()
        ),
        service.create(
            Task.builder(state.ids)
            .title("Prepare pitch deck")
            .status(TaskStatus.TODO)
            .priority(Priority.HIGH)
            .due_date(today - timedelta(days=1))
            .assigned_to(siri)
            .build()
        ),
    ]

    logger.info("Seeded %d employees and %d tasks.", len(state.employees), len(tasks))
    return SampleData(employees=[siri, suraj], tasks=tasks)
