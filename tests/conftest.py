# tests/conftest.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.cli.bootstrap import create_initial_state
from taskboard.core.ids import IdGenerator
from taskboard.core.state import AppState
from taskboard.people.models import Employee
from taskboard.tasks.task_models import Priority, Task, TaskStatus

TODAY = date(2024, 3, 15)


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the demo.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        export_path=tmp_path / "tasks_export.txt",
        report_interval_seconds=0.01,
        demo_duration_seconds=0.05,
        due_window_days=3,
        email_domain="gmail.com",
    )


@pytest.fixture()
def ids() -> IdGenerator:
    return IdGenerator()


@pytest.fixture()
def state(settings: SimpleNamespace, ids: IdGenerator) -> AppState:
    return create_initial_state(settings=settings, ids=ids)


@dataclass
class Scenario:
    e1: Employee
    e2: Employee
    t1: Task
    t2: Task
    t3: Task


@pytest.fixture()
def scenario(state: AppState, today: date) -> Scenario:
    """
    E1 (3 years), E2 (5 years);
    T1 HIGH due +2 -> E1, T2 MEDIUM due +5 -> E2, T3 HIGH due -1 TODO -> E1.
    """
    e1 = state.employees.save(Employee(id=state.ids.next_employee(), name="Siri Reddy", experience_years=3))
    e2 = state.employees.save(Employee(id=state.ids.next_employee(), name="Suraj Kumar", experience_years=5))

    def make(title: str, priority: Priority, days: int, who: Employee) -> Task:
        task = (
            Task.builder(state.ids)
            .title(title)
            .status(TaskStatus.TODO)
            .priority(priority)
            .due_date(today + timedelta(days=days))
            .assigned_to(who)
            .build()
        )
        return state.task_service.create(task)

    return Scenario(
        e1=e1,
        e2=e2,
        t1=make("Build first MVP model", Priority.HIGH, 2, e1),
        t2=make("Set up CI/CD pipeline", Priority.MEDIUM, 5, e2),
        t3=make("Prepare pitch deck", Priority.HIGH, -1, e1),
    )
