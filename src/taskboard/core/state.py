# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..people.models import Employee
from ..tasks.task_models import Task
from ..tasks.task_service import TaskService
from .ids import IdGenerator
from .repository import InMemoryRepository


@dataclass
class AppState:
    # Settings object (real Settings or a test stand-in with the same attributes).
    settings: object

    ids: IdGenerator
    employees: InMemoryRepository[Employee]
    tasks: InMemoryRepository[Task]
    task_service: TaskService
