"""
Console walkthrough of the employee and department models.

Builds three employees, shows a rejected salary update, fills the Engineering
department, hires one more employee from the answers typed at the prompts and
shows the department refusing and then accepting them once its capacity grows.
"""
from __future__ import annotations

import logging
import math
import sys
from typing import IO, Any, Optional

from staffio.config import ConsoleDefaults, configure_logging
from staffio.department import Department
from staffio.employee import Employee
from staffio.fields.base import Field
from staffio.formatting import format_currency
from staffio.outcome import Outcome
from staffio.registry import EmployeeRegistry, current_registry
from staffio.shared import FIELD_REJECTED_EVENT

logger = logging.getLogger(__name__)

BANNER_WIDTH = 50


class Console:
    """
    Line-oriented walkthrough reading answers from `stdin` and writing the
    narrative to `stdout`. End of input never aborts the walkthrough: every
    prompt falls back to its value in `defaults`.
    """

    def __init__(
        self,
        stdin: Optional[IO[str]] = None,
        stdout: Optional[IO[str]] = None,
        defaults: ConsoleDefaults = ConsoleDefaults(),
        registry: Optional[EmployeeRegistry] = None,
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.defaults = defaults
        self.registry = registry or current_registry()

    # output

    def write(self, text: str = ""):
        print(text, file=self.stdout)

    def banner(self, title: str):
        self.write()
        self.write("=" * BANNER_WIDTH)
        self.write(title)
        self.write("=" * BANNER_WIDTH)

    def show(self, employee: Employee):
        self.write()
        employee.display_details(file=self.stdout)

    def on_rejected(self, employee: Employee, field: Field, outcome: Outcome):
        self.write(
            f"Invalid {field.name} {self.format_value(field, outcome.value)} for"
            f" {employee.full_name}: {outcome.reason}."
            f" Keeping {self.format_value(field, field.__get__(employee))}."
        )

    def format_value(self, field: Field, value: Any) -> str:
        if field is Employee.salary:
            return format_currency(value)
        return repr(value)

    # input

    def read_line(self) -> Optional[str]:
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def prompt(self, label: str, default: str) -> str:
        self.stdout.write(f"{label}: ")
        self.stdout.flush()

        answer = self.read_line()
        if answer is None or not answer.strip():
            self.write(f"No {label.lower()} given, using {default}.")
            return default
        return answer.strip()

    def prompt_salary(self) -> float:
        self.stdout.write("Salary: ")
        self.stdout.flush()

        answer = self.read_line()
        try:
            salary = float(answer or "")
        except ValueError:
            salary = math.nan

        if not math.isfinite(salary):
            logger.info("unusable salary answer %r", answer)
            self.write(
                "Invalid salary entered, using the default"
                f" {format_currency(self.defaults.salary)}."
            )
            return self.defaults.salary
        return salary

    def wait_for_exit(self):
        self.stdout.write("\nPress Enter to exit...")
        self.stdout.flush()
        self.read_line()
        self.write()

    # walkthrough

    def run(self) -> Department:
        """
        Runs the complete walkthrough and returns the resulting department.
        """
        self.registry.listener.subscribe(FIELD_REJECTED_EVENT, self.on_rejected)
        try:
            return self._run()
        finally:
            self.registry.listener.unsubscribe(FIELD_REJECTED_EVENT, self.on_rejected)

    def _run(self) -> Department:
        registry = self.registry

        self.banner("Creating employees")
        manager = Employee("Alice", "Johnson", 95000, registry=registry)
        manager.role = "Engineering Manager"

        developer = Employee("Bob", "Smith", registry=registry)
        developer.role = "Software Developer"
        developer.salary = 75000

        intern = Employee("Charlie", "Brown", 30000, registry=registry)
        intern.role = "Intern"

        for employee in (manager, developer, intern):
            self.show(employee)

        self.banner("Salary validation")
        self.write(f"Setting the salary of {developer.full_name} to -500...")
        developer.salary = -500
        self.write(
            f"Salary of {developer.full_name} is"
            f" {format_currency(developer.salary)}."
        )

        self.banner("Building the Engineering department")
        department = Department("Engineering", 3)
        for employee in (manager, developer, intern):
            self.report(department, department.add_employee(employee))

        self.banner("New hire")
        first_name = self.prompt("First name", self.defaults.first_name)
        last_name = self.prompt("Last name", self.defaults.last_name)
        role = self.prompt("Role", self.defaults.role)
        salary = self.prompt_salary()

        new_hire = Employee(first_name, last_name, salary, registry=registry)
        new_hire.role = role
        self.show(new_hire)

        self.banner("Adding the new hire")
        self.report(department, department.add_employee(new_hire))

        department.max_employees = 5
        self.write(f"Raised the capacity of {department.name} to 5.")
        self.report(department, department.add_employee(new_hire))

        self.banner("Summary")
        self.write(f"Department: {department.name}")
        self.write(f"Employees: {department.headcount}/{department.max_employees}")
        for employee in department.employees:
            self.write(f"  {employee.id}  {employee.full_name} ({employee.role})")
        self.write(
            "Average salary:"
            f" {format_currency(department.calculate_average_salary())}"
        )
        self.write(
            "Total employees created:"
            f" {Employee.total_employees_created(registry)}"
        )

        return department

    def report(self, department: Department, outcome: Outcome):
        employee: Employee = outcome.value
        if outcome:
            self.write(f"Added {employee.full_name} to {department.name}.")
        else:
            self.write(
                f"Cannot add {employee.full_name}: {department.name} is full"
                f" (max {department.max_employees} employees)."
            )


def main() -> int:
    configure_logging()

    console = Console()
    console.run()
    console.wait_for_exit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
