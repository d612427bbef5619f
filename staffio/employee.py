from __future__ import annotations

import sys
from typing import IO, Optional, Union

from staffio.exceptions import FieldRejected
from staffio.fields import FloatField, StrField
from staffio.formatting import format_currency
from staffio.model import BaseModel
from staffio.outcome import Outcome
from staffio.registry import EmployeeRegistry, current_registry

Number = Union[int, float]


class Employee(BaseModel):
    """
    An employee record.

    The identifier is taken from the registry once, when the employee is
    constructed, and can't be reassigned afterwards. Names and role are free text.
    The salary can never become negative: negative values are rejected and the
    previous salary is kept, both in the constructor (where the previous salary is
    0.0) and on later assignments. Use `set_salary` to find out whether an
    assignment was accepted.

    All three construction forms count as one construction on the registry:

        Employee("Alice", "Johnson", 95000)
        Employee("Bob", "Smith")          # salary 0.0
        Employee()                        # Unknown Employee, salary 0.0
    """

    id: StrField = StrField(init=False, frozen=True, default="")
    first_name: StrField = StrField(default="Unknown")
    last_name: StrField = StrField(default="Employee")
    role: StrField = StrField(default="")
    salary: FloatField = FloatField(default=0.0)

    registry: EmployeeRegistry

    def __init__(
        self,
        first_name: str = "Unknown",
        last_name: str = "Employee",
        salary: Number = 0.0,
        *,
        registry: Optional[EmployeeRegistry] = None,
    ):
        self.registry = registry or current_registry()
        # employees report through their registry, so rejections raised while
        # constructing reach subscribers as well
        self._listener = self.registry.listener

        self.id = self.registry.issue()
        self.first_name = first_name
        self.last_name = last_name
        self.salary = salary

    @salary.setter
    def _validate_salary(self, salary: float) -> float:
        # NaN fails this comparison as well
        if not salary >= 0:
            raise FieldRejected("salary cannot be negative")
        return salary

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def set_salary(self, salary: Number) -> Outcome:
        """
        Assigns `salary` and reports whether it was accepted. A rejected salary
        leaves the current one in place.
        """
        return Employee.salary.assign(self, salary)

    def details(self) -> str:
        return "\n".join(
            (
                f"Employee ID: {self.id}",
                f"Role: {self.role or '(unassigned)'}",
                f"Name: {self.full_name}",
                f"Salary: {format_currency(self.salary)}",
            )
        )

    def display_details(self, file: Optional[IO[str]] = None):
        print(self.details(), file=file or sys.stdout)

    @staticmethod
    def generate_id(registry: Optional[EmployeeRegistry] = None) -> str:
        """
        Takes the next identifier from the current registry without counting a
        construction.
        """
        return (registry or current_registry()).generate_id()

    @staticmethod
    def total_employees_created(registry: Optional[EmployeeRegistry] = None) -> int:
        return (registry or current_registry()).total_created

    def __str__(self) -> str:
        return f"{self.full_name} ({self.id})"
