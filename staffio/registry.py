import logging
import threading
from contextvars import ContextVar, Token
from typing import Tuple

from staffio.config import ID_PREFIX, ID_START, ID_WIDTH
from staffio.event import EventListener
from staffio.shared import CURRENT_REGISTRY

logger = logging.getLogger(__name__)


class EmployeeRegistry:
    """
    Issues employee identifiers and counts employee constructions.

    Identifiers are `prefix` followed by a sequence number zero-padded to `width`
    digits, starting at `start` (`EMP1001`, `EMP1002`, ...). The sequence never goes
    back: numbers taken by constructions whose fields were later rejected stay
    used. Numbers above the padding width simply grow wider.

    Both counters are guarded by one lock, so an identifier and the matching
    creation count are taken together even when employees are built from several
    threads.

    A registry can be made current for a block of code with the `with` statement.
    Employees constructed without an explicit registry use the current one, or the
    process-wide `DEFAULT_REGISTRY` when none is active:

        with EmployeeRegistry() as registry:
            Employee("Alice", "Johnson", 95000)
            assert registry.total_created == 1

    Employees bound to a registry dispatch their events through `listener`.
    """

    prefix: str
    width: int
    listener: EventListener

    _next: int
    _created: int
    _tokens: ContextVar[Tuple[Token, ...]]

    def __init__(
        self, start: int = ID_START, prefix: str = ID_PREFIX, width: int = ID_WIDTH
    ):
        if start < 0:
            raise ValueError("The identifier sequence can't start below zero.")

        self.prefix = prefix
        self.width = width
        self.listener = EventListener()

        self._next = start
        self._created = 0
        self._lock = threading.Lock()
        # tokens of the open `with` blocks, kept per context
        self._tokens = ContextVar(f"registry_tokens_{id(self)}", default=())

    def __enter__(self) -> "EmployeeRegistry":
        token = CURRENT_REGISTRY.set(self)
        self._tokens.set(self._tokens.get() + (token,))
        return self

    def __exit__(self, *exc_info):
        tokens = self._tokens.get()
        self._tokens.set(tokens[:-1])
        CURRENT_REGISTRY.reset(tokens[-1])

    @property
    def next_sequence(self) -> int:
        """
        The sequence number the next identifier will carry.
        """
        return self._next

    @property
    def total_created(self) -> int:
        """
        Number of employees constructed against this registry.
        """
        return self._created

    def generate_id(self) -> str:
        """
        Returns the next identifier and advances the sequence. The creation count is
        not affected.
        """
        with self._lock:
            return self._take()

    def issue(self) -> str:
        """
        Returns the next identifier and records one more construction.
        """
        with self._lock:
            employee_id = self._take()
            self._created += 1
            created = self._created

        logger.debug("issued %s (%d created)", employee_id, created)
        return employee_id

    def _take(self) -> str:
        employee_id = self.format(self._next)
        self._next += 1
        return employee_id

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(next={self.format(self._next)!r},"
            f" created={self._created})"
        )

    def format(self, sequence: int) -> str:
        return f"{self.prefix}{sequence:0{self.width}d}"


DEFAULT_REGISTRY = EmployeeRegistry()


def current_registry() -> EmployeeRegistry:
    """
    Returns the registry made current with `with EmployeeRegistry():`, or the
    process-wide default registry.
    """
    return CURRENT_REGISTRY.get() or DEFAULT_REGISTRY
