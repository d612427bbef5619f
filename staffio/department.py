from __future__ import annotations

import logging
from typing import Iterable, List

from staffio.employee import Employee
from staffio.fields import IntField, ListModelField, StrField
from staffio.model import BaseModel
from staffio.outcome import Outcome
from staffio.shared import DEPARTMENT_FULL_EVENT, EMPLOYEE_ADDED_EVENT

logger = logging.getLogger(__name__)


class Department(BaseModel):
    """
    A named, ordered group of employees with a capacity.

    The capacity is only enforced by `add_employee`. Assigning `employees` directly,
    or calling `replace_employees_unchecked`, swaps the whole list without looking
    at `max_employees` and may leave the department over capacity. The same
    employee may be added more than once.
    """

    name: StrField = StrField(default="")
    max_employees: IntField = IntField(default=0)
    employees: ListModelField[Employee] = ListModelField(Employee)

    def __init__(self, name: str, max_employees: int):
        self.name = name
        self.max_employees = max_employees

    @property
    def headcount(self) -> int:
        return len(self.employees)

    @property
    def is_full(self) -> bool:
        return self.headcount >= self.max_employees

    def add_employee(self, employee: Employee) -> Outcome:
        """
        Appends `employee` when the department is below capacity.

        :param employee: The employee to be added.
        :return: An accepted Outcome when the employee was appended, a rejected one
                 naming the department capacity otherwise. The employee list is not
                 modified on rejection.
        """
        if self.is_full:
            outcome = Outcome.reject(
                employee,
                f"department {self.name} is full"
                f" ({self.headcount}/{self.max_employees})",
            )
            logger.warning("Could not add %s: %s", employee, outcome.reason)
            self._listener.dispatch(DEPARTMENT_FULL_EVENT, self, outcome)
            return outcome

        self.employees.append(employee)
        outcome = Outcome.accept(employee)
        logger.info(
            "Added %s to %s (%d/%d)",
            employee,
            self.name,
            self.headcount,
            self.max_employees,
        )
        self._listener.dispatch(EMPLOYEE_ADDED_EVENT, self, outcome)
        return outcome

    def replace_employees_unchecked(self, employees: Iterable[Employee]):
        """
        Replaces the employee list with `employees` without checking the capacity.
        """
        self.employees = list(employees)
        if self.headcount > self.max_employees:
            logger.info(
                "%s holds %d employees over a capacity of %d",
                self.name,
                self.headcount,
                self.max_employees,
            )

    def calculate_average_salary(self) -> float:
        """
        Mean salary of the current employees, or 0.0 for an empty department.
        """
        employees: List[Employee] = self.employees
        if not employees:
            return 0.0
        return sum(employee.salary for employee in employees) / len(employees)

    def __str__(self) -> str:
        return self.name
