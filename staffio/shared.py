from contextvars import ContextVar
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from staffio.registry import EmployeeRegistry

# Registry made current by `with EmployeeRegistry():`. When unset, employees fall
# back to the process-wide default registry.
CURRENT_REGISTRY: ContextVar[Optional["EmployeeRegistry"]] = ContextVar(
    "current_registry", default=None
)


MODEL_INSTANTIATED_EVENT = "__init__"
MODEL_UPDATE_EVENT = "__updated__"
FIELD_REJECTED_EVENT = "__rejected__"

EMPLOYEE_ADDED_EVENT = "__employee_added__"
DEPARTMENT_FULL_EVENT = "__department_full__"
