from .department import Department
from .employee import Employee
from .event import EventListener
from .exceptions import FieldRejected
from .model import BaseModel
from .outcome import Outcome
from .registry import DEFAULT_REGISTRY, EmployeeRegistry, current_registry

__name__ = "staffio"
__version__ = "0.1.0"

__all__ = [
    "BaseModel",
    "Department",
    "Employee",
    "EmployeeRegistry",
    "EventListener",
    "FieldRejected",
    "Outcome",
    "DEFAULT_REGISTRY",
    "current_registry",
]
