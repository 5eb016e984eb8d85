# tests/test_models.py

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date, timedelta

import pytest

from taskboard.core.ids import IdGenerator
from taskboard.people.models import Employee, Person
from taskboard.tasks.task_models import Priority, Task, TaskStatus


def test_person_is_abstract() -> None:
    with pytest.raises(TypeError):
        Person(id=1, name="Nobody")  # type: ignore[abstract]


def test_employee_email_defaults_from_name_and_role_description() -> None:
    emp = Employee(id=2, name="Suraj Kumar", experience_years=5)

    assert emp.email == "suraj.kumar@gmail.com"
    assert emp.role_description == "Employee with 5 years experience"
    assert str(emp) == (
        "Person{id=2, name='Suraj Kumar', email='suraj.kumar@gmail.com', "
        "role='Employee with 5 years experience'}"
    )


def test_employee_explicit_email_and_custom_domain() -> None:
    assert Employee(id=1, name="Siri Reddy", email="siri@aistartup.com").email == "siri@aistartup.com"
    assert Employee(id=1, name="Siri Reddy", email_domain="corp.io").email == "siri.reddy@corp.io"


def test_employee_requires_name_and_is_immutable() -> None:
    with pytest.raises(ValueError):
        Employee(id=1, name="  ")

    emp = Employee(id=1, name="Siri Reddy", experience_years=3)
    with pytest.raises(FrozenInstanceError):
        emp.experience_years = 10  # type: ignore[misc]


def test_people_order_by_name_case_insensitive_and_compare_by_id() -> None:
    bob = Employee(id=1, name="bob")
    alice = Employee(id=2, name="Alice")
    carol = Employee(id=3, name="Carol")

    assert sorted([carol, bob, alice]) == [alice, bob, carol]
    assert Employee(id=7, name="Same") != Employee(id=8, name="Same")
    assert Employee(id=7, name="One") == Employee(id=7, name="Other")
    assert len({Employee(id=7, name="One"), Employee(id=7, name="Other")}) == 1


def test_experience_gap_is_absolute() -> None:
    a = Employee(id=1, name="A", experience_years=3)
    b = Employee(id=2, name="B", experience_years=5)
    assert a.experience_gap(b) == 2
    assert b.experience_gap(a) == 2


def test_builder_defaults() -> None:
    task = Task.builder().id(10).title("Write docs").build()

    assert task.status == TaskStatus.TODO
    assert task.priority == Priority.MEDIUM
    assert task.due_date == date.today() + timedelta(days=7)
    assert task.assigned_to is None


def test_builder_draws_ids_from_generator() -> None:
    ids = IdGenerator()
    first = Task.builder(ids).title("a").build()
    second = Task.builder(ids).title("b").build()
    explicit = Task.builder(ids).id(99).title("c").build()

    assert (first.id, second.id, explicit.id) == (1, 2, 99)
    assert ids.next_task() == 3


@pytest.mark.parametrize("title", [None, "", "   "])
def test_builder_rejects_missing_title_without_burning_an_id(title) -> None:
    ids = IdGenerator()
    builder = Task.builder(ids)
    if title is not None:
        builder.title(title)

    with pytest.raises(ValueError, match="title"):
        builder.build()
    assert ids.next_task() == 1


@pytest.mark.parametrize("setter", ["status", "priority", "due_date"])
def test_builder_rejects_explicit_none_for_required_fields(setter: str) -> None:
    builder = Task.builder().id(1).title("x")
    getattr(builder, setter)(None)

    with pytest.raises(ValueError, match=setter):
        builder.build()


def test_builder_without_id_or_generator_fails() -> None:
    with pytest.raises(ValueError, match="id"):
        Task.builder().title("x").build()


def test_task_identity_is_the_id() -> None:
    a = Task.builder().id(1).title("a").build()
    b = Task.builder().id(1).title("b").priority(Priority.HIGH).build()

    assert a == b
    assert len({a, b}) == 1


def test_status_is_the_only_mutable_field() -> None:
    task = Task.builder().id(1).title("a").build()

    task.set_status(TaskStatus.DONE)
    assert task.status == TaskStatus.DONE

    with pytest.raises(FrozenInstanceError):
        task.title = "other"  # type: ignore[misc]
    with pytest.raises(ValueError):
        task.set_status(None)  # type: ignore[arg-type]


def test_is_overdue() -> None:
    today = date(2024, 3, 15)
    yesterday = today - timedelta(days=1)

    assert Task.builder().id(1).title("late").due_date(yesterday).build().is_overdue(today)
    assert not Task.builder().id(2).title("today").due_date(today).build().is_overdue(today)
    done = Task.builder().id(3).title("done").due_date(yesterday).status(TaskStatus.DONE).build()
    assert not done.is_overdue(today)


def test_task_string_form() -> None:
    emp = Employee(id=1, name="Siri Reddy", experience_years=3)
    task = (
        Task.builder()
        .id(1)
        .title("Build first MVP model")
        .status(TaskStatus.IN_PROGRESS)
        .priority(Priority.HIGH)
        .due_date(date(2024, 3, 17))
        .assigned_to(emp)
        .build()
    )
    unassigned = Task.builder().id(2).title("Loose end").due_date(date(2024, 1, 2)).build()

    assert str(task) == (
        "Task{id=1, title='Build first MVP model', status=IN_PROGRESS, priority=HIGH, "
        "dueDate=2024-03-17, assignedTo=Siri Reddy}"
    )
    assert str(unassigned).endswith("dueDate=2024-01-02, assignedTo=unassigned}")
