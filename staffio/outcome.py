from typing import Any


class Outcome:
    """
    Result of an operation that may refuse its input without raising.

    Outcomes are truthy when the input was accepted, so callers can write
    `if department.add_employee(employee): ...`. `value` holds whatever was
    offered (a field value, an employee) and `reason` explains a rejection.
    """

    __slots__ = ("accepted", "value", "reason")

    accepted: bool
    value: Any
    reason: str

    def __init__(self, accepted: bool, value: Any = None, reason: str = ""):
        self.accepted = accepted
        self.value = value
        self.reason = reason

    @classmethod
    def accept(cls, value: Any = None) -> "Outcome":
        return cls(True, value)

    @classmethod
    def reject(cls, value: Any, reason: str) -> "Outcome":
        return cls(False, value, reason)

    @property
    def rejected(self) -> bool:
        return not self.accepted

    def __bool__(self) -> bool:
        return self.accepted

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return (self.accepted, self.value, self.reason) == (
            other.accepted,
            other.value,
            other.reason,
        )

    def __repr__(self) -> str:
        if self.accepted:
            return f"Outcome.accept({self.value!r})"
        return f"Outcome.reject({self.value!r}, {self.reason!r})"
