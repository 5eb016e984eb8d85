# src/taskboard/people/models.py

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

DEFAULT_EMAIL_DOMAIN = "gmail.com"


def derive_email(name: str, domain: str = DEFAULT_EMAIL_DOMAIN) -> str:
    """'Suraj Kumar' -> 'suraj.kumar@gmail.com'."""
    return f"{name.lower().replace(' ', '.')}@{domain}"


@dataclass(frozen=True, eq=False, kw_only=True)
class Person(ABC):
    """
    Abstract identity for anybody tasks can be assigned to.

    Notes:
    - equality and hashing use the id only, so a Person is a stable dict key
      even if two people share a name;
    - ordering (<) is by name, case-insensitive;
    - email is derived from the name when not given.
    """

    id: int
    name: str
    email: str = ""
    email_domain: str = field(default=DEFAULT_EMAIL_DOMAIN, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("name is required")
        if not self.email:
            object.__setattr__(self, "email", derive_email(self.name, self.email_domain))

    @property
    @abstractmethod
    def role_description(self) -> str: ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: Person) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.name.casefold() < other.name.casefold()

    def __str__(self) -> str:
        return (
            f"Person{{id={self.id}, name='{self.name}', email='{self.email}', "
            f"role='{self.role_description}'}}"
        )


@dataclass(frozen=True, eq=False, kw_only=True)
class Employee(Person):
    experience_years: int = 0

    @property
    def role_description(self) -> str:
        return f"Employee with {self.experience_years} years experience"

    def experience_gap(self, other: Employee) -> int:
        return abs(self.experience_years - other.experience_years)
